import struct

import pytest

from blynkcore.ntp import NTP_PACKET_SIZE, build_ntp_request, parse_ntp_time


def _reply(seconds):
    packet = bytearray(NTP_PACKET_SIZE)
    packet[40:44] = struct.pack(">I", seconds)
    return bytes(packet)


def test_request_layout():
    packet = build_ntp_request()
    assert len(packet) == 48
    assert packet[:4] == bytes([0b11100011, 0, 6, 0xEC])
    assert packet[12:16] == bytes([49, 0x4E, 49, 52])
    assert packet[4:12] == bytes(8)
    assert packet[16:] == bytes(32)


def test_parse_subtracts_seventy_years():
    assert parse_ntp_time(_reply(2208988800 + 1000)) == 1000
    assert parse_ntp_time(_reply(2208988800)) == 0


def test_parse_wraps_like_unsigned_32_bit():
    assert parse_ntp_time(_reply(0)) == 2085978496


def test_parse_ignores_bytes_after_timestamp():
    packet = bytearray(_reply(2208988800 + 5))
    packet[44:48] = b"\xff\xff\xff\xff"
    assert parse_ntp_time(bytes(packet)) == 5


def test_short_packet_raises():
    with pytest.raises(ValueError):
        parse_ntp_time(b"\x00" * 44)