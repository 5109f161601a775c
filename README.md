# blynkcore

Building blocks for a Blynk IoT client, in plain Python with no
third-party dependencies:

- `blynkcore.param`: `BlynkParam`, the NUL-separated value buffer used by
  the Blynk protocol, and `ParamValue` for reading single values.
- `blynkcore.fifo`: `Fifo`, a fixed-capacity byte queue with ring-buffer
  sizing.
- `blynkcore.stream`: `NullStream`, a stream that swallows writes and never
  has data to read.
- `blynkcore.ntp`: `build_ntp_request()` and `parse_ntp_time(packet)` for
  simple NTP time queries.
- `blynkcore.debug`: `DebugLog` and `format_dump` for timestamped log lines
  and readable dumps of binary data.
- `blynkcore.indicator`: `Indicator`, the status LED animation logic
  (`beat` and `wave` patterns for each device `Mode`), with the `rgb`, `dim`
  and `to_pwm` helpers.
- `blynkcore.config`: `ConfigStore`, the packed device configuration record,
  with `default_config`, `load_config`, `load_blnkopt` and `with_last_error`.
- `blynkcore.button`: `ResetButton`, which turns press and release edges into
  a configuration reset after a long hold.
- `blynkcore.provisioning`: helpers for the Wi-Fi setup portal, covering
  hotspot naming, MAC formatting, board info and Wi-Fi scan JSON, and
  `apply_config_form`.

## Installation

```
pip install blynkcore
```

## Parameter buffers

```python
from blynkcore.param import BlynkParam

param = BlynkParam(b"", 64)
param.add_multi("p", 1, 2, "hello")
print(param.to_bytes())      # b'p\x001\x002\x00hello\x00'
print(param[3].as_str())     # hello
print(len(param))            # 12 (bytes in use)

settings = BlynkParam(b"", 64)
settings.add_key("host", "blynk.cloud")
print(settings["host"].as_str())   # blynk.cloud
```

A value that does not fit in the remaining capacity is dropped whole, and
`add` returns `False`. A missing index or key gives a `ParamValue` whose
`is_valid()` is `False`.

## Byte FIFO

```python
from blynkcore.fifo import Fifo

fifo = Fifo(8)
written = fifo.put(b"abcdefghij")   # 7: one slot always stays empty
data = fifo.get(4)                  # b"abcd"
```

## NTP

```python
import socket
from blynkcore.ntp import build_ntp_request, parse_ntp_time

with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
    sock.settimeout(1.0)
    sock.sendto(build_ntp_request(), ("ntp.example.com", 123))
    packet, _ = sock.recvfrom(48)
print(parse_ntp_time(packet))   # Unix time in seconds
```

`parse_ntp_time` raises `ValueError` for packets shorter than 48 bytes.

## Logging

```python
from blynkcore.debug import DebugLog, format_dump

log = DebugLog(clock=lambda: 1234)
log.log("Connecting to ", "blynk.cloud", ":", 443)   # [1234] Connecting to blynk.cloud:443
log.log_ip("IP: ", [192, 168, 4, 1])                 # [1234] IP: 192.168.4.1
print(format_dump(b"ab\x00\x01c"))                   # ab[00|01]c
```

## Status LED

```python
from blynkcore.indicator import Indicator, Mode

indicator = Indicator(set_color=lambda color: print(hex(color)), brightness=64)
indicator.init()
delay_ms = indicator.run(Mode.CONNECTING_NET)
```

`run` sets the LED for the next step and returns how many milliseconds to
wait before calling it again.

## Configuration and provisioning

```python
from blynkcore.config import default_config, load_config
from blynkcore.provisioning import apply_config_form

default = default_config()
store = load_config(None, default)       # no stored record: a copy of the defaults

reply = apply_config_form(
    {"ssid": "home", "pass": "password", "blynk": "t" * 32, "save": "1"},
    default,
)
print(reply.status, reply.body)
record = reply.store.to_bytes()          # packed record, ready to be stored
```

## What this package does not do

It has no command-line program, no network connection to a Blynk server
and no protocol client, and no timer scheduler. It does not read or write
flash, drive real LEDs or buttons, or serve the setup web pages itself: the
caller supplies clocks, LED setters and storage, and sends the replies that
the provisioning helpers build.

## Running the tests

```
pip install blynkcore[test]
pytest
```