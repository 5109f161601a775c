"""Persistent device configuration record and its defaults."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Optional, Union

from .param import BlynkParam

MAGIC = 0x626C6E6B
FLAG_VALID = 0x01
FLAG_STATIC_IP = 0x02

DEFAULT_FIRMWARE_VERSION = "0.0.0"
DEFAULT_SERVER = "blynk.cloud"
DEFAULT_PORT = 443
DEVICE_PREFIX = "Blynk"
AP_URL = "blynk.setup"

WIFI_CLOUD_MAX_RETRIES = 500
WIFI_NET_CONNECT_TIMEOUT = 50000
WIFI_CLOUD_CONNECT_TIMEOUT = 50000

BLNKOPT_TAG = b"blnkopt\0"

# Packed little-endian layout of the stored record.
_LAYOUT = struct.Struct("<I15sB34s64s34s34sH5Ii")

_STRING_SIZES = {
    "version": 15,
    "wifi_ssid": 34,
    "wifi_pass": 64,
    "cloud_token": 34,
    "cloud_host": 34,
}

BytesLike = Union[bytes, bytearray, memoryview]


class ProvisioningError(IntEnum):
    """Error codes reported to the provisioning app."""

    NONE = 0
    CONFIG = 700
    NETWORK = 701
    CLOUD = 702
    TOKEN = 703
    INTERNAL = 704


def _fit(text: str, size: int) -> str:
    """Cut text so that it fits a NUL-terminated field of ``size`` bytes."""
    raw = text.encode("utf-8")[: size - 1]
    return raw.decode("utf-8", errors="ignore")


def _cstring(raw: bytes) -> str:
    end = raw.find(0)
    if end >= 0:
        raw = raw[:end]
    return raw.decode("utf-8", errors="replace")


@dataclass
class ConfigStore:
    """Network and cloud settings as kept in non-volatile memory.

    Text fields are cut to the size of their stored field. IPv4 addresses
    are kept as 32-bit integers with the first octet in the lowest byte.
    """

    magic: int = MAGIC
    version: str = ""
    flags: int = 0
    wifi_ssid: str = ""
    wifi_pass: str = ""
    cloud_token: str = ""
    cloud_host: str = ""
    cloud_port: int = 0
    static_ip: int = 0
    static_mask: int = 0
    static_gw: int = 0
    static_dns: int = 0
    static_dns2: int = 0
    last_error: int = 0

    SIZE = _LAYOUT.size

    def __post_init__(self) -> None:
        for name, size in _STRING_SIZES.items():
            setattr(self, name, _fit(getattr(self, name), size))

    def set_flag(self, mask: int, value: bool) -> None:
        if value:
            self.flags |= mask
        else:
            self.flags &= ~mask & 0xFF

    def get_flag(self, mask: int) -> bool:
        return (self.flags & mask) == mask

    def to_bytes(self) -> bytes:
        strings = {
            name: _fit(getattr(self, name), size).encode("utf-8")
            for name, size in _STRING_SIZES.items()
        }
        return _LAYOUT.pack(
            self.magic & 0xFFFFFFFF,
            strings["version"],
            self.flags & 0xFF,
            strings["wifi_ssid"],
            strings["wifi_pass"],
            strings["cloud_token"],
            strings["cloud_host"],
            self.cloud_port & 0xFFFF,
            self.static_ip & 0xFFFFFFFF,
            self.static_mask & 0xFFFFFFFF,
            self.static_gw & 0xFFFFFFFF,
            self.static_dns & 0xFFFFFFFF,
            self.static_dns2 & 0xFFFFFFFF,
            self.last_error,
        )

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "ConfigStore":
        raw = bytes(data)
        if len(raw) != _LAYOUT.size:
            raise ValueError(
                f"config record must be {_LAYOUT.size} bytes, got {len(raw)}"
            )
        values = _LAYOUT.unpack(raw)
        kwargs = {}
        for field, value in zip(fields(cls), values):
            kwargs[field.name] = _cstring(value) if isinstance(value, bytes) else value
        return cls(**kwargs)


def default_config(
    firmware_version: str = DEFAULT_FIRMWARE_VERSION,
    host: str = DEFAULT_SERVER,
    port: int = DEFAULT_PORT,
) -> ConfigStore:
    """The configuration used before the device is provisioned."""
    return ConfigStore(
        magic=MAGIC,
        version=firmware_version,
        flags=0,
        wifi_ssid="",
        wifi_pass="",
        cloud_token="invalid token",
        cloud_host=host,
        cloud_port=port,
        last_error=ProvisioningError.NONE,
    )


def load_config(data: Optional[BytesLike], default: ConfigStore) -> ConfigStore:
    """Decode a stored record, falling back to a copy of ``default`` if it is unusable."""
    if data is None or len(data) < _LAYOUT.size:
        return replace(default)
    store = ConfigStore.from_bytes(bytes(data)[: _LAYOUT.size])
    if store.magic != MAGIC:
        return replace(default)
    return store


def load_blnkopt(blob: BytesLike, default: ConfigStore) -> Optional[ConfigStore]:
    """Build a configuration from embedded key/value options.

    ``blob`` is either the bare NUL-separated key/value list or the whole
    tagged block (``blnkopt\\0`` ... ``\\0\\0``). Returns None unless both an
    SSID and an auth token are present.
    """
    raw = bytes(blob)
    if raw.startswith(BLNKOPT_TAG):
        raw = raw[len(BLNKOPT_TAG) : -2]
    options = BlynkParam(raw)
    ssid = options["ssid"]
    password = options["pass"]
    auth = options["auth"]
    host = options["host"]
    port = options["port"]

    if not (ssid.is_valid() and auth.is_valid()):
        return None

    store = replace(default)
    store.wifi_ssid = _fit(ssid.as_str(), _STRING_SIZES["wifi_ssid"])
    if password.is_valid():
        store.wifi_pass = _fit(password.as_str(), _STRING_SIZES["wifi_pass"])
    store.cloud_token = _fit(auth.as_str(), _STRING_SIZES["cloud_token"])
    if host.is_valid():
        store.cloud_host = _fit(host.as_str(), _STRING_SIZES["cloud_host"])
    if port.is_valid():
        store.cloud_port = port.as_int() & 0xFFFF
    return store


def with_last_error(store: ConfigStore, default: ConfigStore, error: int) -> ConfigStore:
    """Record an error, but only on a device that is not yet provisioned.

    An unprovisioned device gets the defaults with ``last_error`` set; a
    provisioned one keeps its configuration as it is.
    """
    if store.get_flag(FLAG_VALID):
        return store
    return replace(default, last_error=int(error))