"""Building and reading NTP time packets."""

from __future__ import annotations

import struct

NTP_PACKET_SIZE = 48
NTP_PORT = 123
NTP_TO_UNIX_OFFSET = 2208988800


def build_ntp_request() -> bytes:
    """Return a 48-byte NTP client request."""
    packet = bytearray(NTP_PACKET_SIZE)
    packet[0] = 0b11100011  # LI, version, mode
    packet[1] = 0  # stratum
    packet[2] = 6  # polling interval
    packet[3] = 0xEC  # peer clock precision
    packet[12:16] = bytes((49, 0x4E, 49, 52))
    return bytes(packet)


def parse_ntp_time(packet: bytes) -> int:
    """Return the Unix time carried in an NTP reply's transmit timestamp."""
    if len(packet) < NTP_PACKET_SIZE:
        raise ValueError(f"NTP packet too short: {len(packet)} bytes")
    (seconds_since_1900,) = struct.unpack_from(">I", packet, 40)
    return (seconds_since_1900 - NTP_TO_UNIX_OFFSET) % (1 << 32)