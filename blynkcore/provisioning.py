"""Helpers for the Wi-Fi provisioning access point and its web endpoints."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Iterable, Mapping, Optional, Sequence, Union

from .config import FLAG_STATIC_IP, FLAG_VALID, ConfigStore, _STRING_SIZES, _fit
from .param import ParamValue

_ALPHABET = "0W8N4Y1HP5DF9K6JM3C2UA7R"
_MAX_UNIQUE_LENGTH = 15
_MAX_WIFI_NAME = 31
_MAX_SCAN_RESULTS = 15

JSON_CONFIG_SAVED = '{"status":"ok","msg":"Configuration saved"}'
JSON_TRYING_TO_CONNECT = '{"status":"ok","msg":"Trying to connect..."}'
JSON_CONFIG_INVALID = '{"status":"error","msg":"Configuration invalid"}'
JSON_CONFIG_RESET = '{"status":"ok","msg":"Configuration reset"}'


class WifiAuthMode(IntEnum):
    OPEN = 0
    WEP = 1
    WPA_PSK = 2
    WPA2_PSK = 3
    WPA_WPA2_PSK = 4
    WPA2_ENTERPRISE = 5
    WPA3_PSK = 6
    WPA2_WPA3_PSK = 7
    WAPI_PSK = 8


_SECURITY_NAMES = {
    WifiAuthMode.OPEN: "OPEN",
    WifiAuthMode.WEP: "WEP",
    WifiAuthMode.WPA_PSK: "WPA",
    WifiAuthMode.WPA2_PSK: "WPA2",
    WifiAuthMode.WPA_WPA2_PSK: "WPA+WPA2",
    WifiAuthMode.WPA2_ENTERPRISE: "WPA2-EAP",
    WifiAuthMode.WPA3_PSK: "WPA3",
    WifiAuthMode.WPA2_WPA3_PSK: "WPA2+WPA3",
    WifiAuthMode.WAPI_PSK: "WAPI",
}


@dataclass(frozen=True)
class ConfigResponse:
    """Outcome of a configuration request: HTTP reply plus the new settings."""

    status: int
    body: str
    store: Optional[ConfigStore] = None
    save: bool = False
    content_type: str = "application/json"


def encode_unique_part(number: int, length: int) -> str:
    """Encode a 32-bit number as ``length`` characters, no two neighbours equal."""
    if not 0 <= length <= _MAX_UNIQUE_LENGTH:
        raise ValueError(f"length must be between 0 and {_MAX_UNIQUE_LENGTH}")
    base = len(_ALPHABET)
    n = number & 0xFFFFFFFF
    chars = []
    prev = ""
    for _ in range(length):
        c = _ALPHABET[n % base]
        if c == prev:
            c = _ALPHABET[(n + 1) % base]
        chars.append(c)
        prev = c
        n //= base
    return "".join(chars)


def wifi_name(prefix: str, template_name: str, unique: int, with_prefix: bool = True) -> str:
    """Access point name built from a prefix, the template name and a unique code."""
    name = template_name[: max(0, _MAX_WIFI_NAME - 6 - len(prefix))]
    code = encode_unique_part(unique, 4)
    if with_prefix:
        return f"{prefix} {name}-{code}"
    return f"{name}-{code}"


def mac_to_string(mac: Union[bytes, bytearray, Sequence[int]]) -> str:
    octets = bytes(mac)
    if len(octets) != 6:
        raise ValueError("a MAC address has six octets")
    return ":".join(f"{octet:02x}" for octet in octets)


def wifi_security_name(auth_mode: int) -> str:
    try:
        return _SECURITY_NAMES[WifiAuthMode(auth_mode)]
    except ValueError:
        return "unknown"


def _parse_ipv4(text: str) -> Optional[int]:
    """IPv4 address as an integer with the first octet in the lowest byte."""
    try:
        address = ipaddress.IPv4Address(text)
    except ValueError:
        return None
    return int.from_bytes(address.packed, "little")


def apply_config_form(args: Mapping[str, str], default: ConfigStore) -> ConfigResponse:
    """Validate the submitted configuration form and build the new settings."""
    ssid = args.get("ssid", "")
    ssid_manual = args.get("ssidManual", "")
    if ssid_manual:
        ssid = ssid_manual
    wifi_pass = args.get("pass", "")
    auth = args.get("blynk", "")
    host = args.get("host", "")
    port = args.get("port_ssl", "")
    force_save = ParamValue(args.get("save", "")).as_int() != 0

    if not (len(auth) == 32 and ssid):
        return ConfigResponse(status=500, body=JSON_CONFIG_INVALID)

    store = replace(default)
    store.wifi_ssid = _fit(ssid, _STRING_SIZES["wifi_ssid"])
    store.wifi_pass = _fit(wifi_pass, _STRING_SIZES["wifi_pass"])
    store.cloud_token = _fit(auth, _STRING_SIZES["cloud_token"])
    if host:
        store.cloud_host = _fit(host, _STRING_SIZES["cloud_host"])
    if port:
        store.cloud_port = ParamValue(port).as_int() & 0xFFFF

    static_ip = _parse_ipv4(args.get("ip", "")) if args.get("ip") else None
    if static_ip is not None:
        store.static_ip = static_ip
        store.set_flag(FLAG_STATIC_IP, True)
    else:
        store.set_flag(FLAG_STATIC_IP, False)
    for key, attr in (
        ("mask", "static_mask"),
        ("gw", "static_gw"),
        ("dns", "static_dns"),
        ("dns2", "static_dns2"),
    ):
        text = args.get(key, "")
        value = _parse_ipv4(text) if text else None
        if value is not None:
            setattr(store, attr, value)

    if force_save:
        store.set_flag(FLAG_VALID, True)
        return ConfigResponse(status=200, body=JSON_CONFIG_SAVED, store=store, save=True)
    return ConfigResponse(status=200, body=JSON_TRYING_TO_CONNECT, store=store)


def board_info_json(
    board: str,
    template_id: Optional[str],
    firmware_type: str,
    firmware_version: str,
    ssid: str,
    bssid: str,
    mac: str,
    last_error: int,
) -> str:
    """The board description sent at the start of provisioning."""
    text = (
        f'{{"board":"{board}","tmpl_id":"{template_id or "Unknown"}",'
        f'"fw_type":"{firmware_type}","fw_ver":"{firmware_version}",'
        f'"ssid":"{ssid}","bssid":"{bssid}","mac":"{mac}",'
        f'"last_error":{int(last_error)},"wifi_scan":true,"static_ip":true}}'
    )
    return text[:511]


def wifi_scan_json(networks: Iterable[Mapping[str, object]]) -> str:
    """List the strongest networks, best signal first.

    Each network is a mapping with ``ssid``, ``bssid``, ``rssi``,
    ``auth_mode`` and ``channel``.
    """
    ranked = sorted(networks, key=lambda net: int(net["rssi"]), reverse=True)
    top = ranked[:_MAX_SCAN_RESULTS]
    if not top:
        return "[]"
    lines = [
        (
            f'  {{"ssid":"{net["ssid"]}","bssid":"{net["bssid"]}",'
            f'"rssi":{int(net["rssi"])},"sec":"{wifi_security_name(int(net["auth_mode"]))}",'
            f'"ch":{int(net["channel"])}}}'
        )[:255]
        for net in top
    ]
    return "[\n" + ",\n".join(lines) + "\n]"