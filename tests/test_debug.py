import io

import pytest

from blynkcore.debug import DebugLog, format_dump


def make_log(now=1234):
    stream = io.StringIO()
    return DebugLog(stream, lambda: now), stream


def test_log_concatenates_arguments_with_timestamp():
    log, stream = make_log(1234)
    log.log("Connecting to ", "example.com", ":", 80)
    assert stream.getvalue() == "[1234] Connecting to example.com:80\n"


def test_log_multiple_lines_each_prefixed():
    log, stream = make_log(7)
    log.log("one")
    log.log("two")
    lines = stream.getvalue().splitlines()
    assert lines == ["[7] one", "[7] two"]


def test_log_ip_and_reversed_are_mirror_images():
    log, stream = make_log(5)
    log.log_ip("IP: ", [192, 168, 4, 1])
    log.log_ip_reversed("IP: ", [1, 4, 168, 192])
    first, second = stream.getvalue().splitlines()
    assert first == second
    assert first.endswith("192.168.4.1")


def test_log_ip_requires_four_octets():
    log, _ = make_log()
    with pytest.raises(ValueError):
        log.log_ip("IP: ", [10, 0, 0])


def test_format_dump_printable_text_unchanged():
    assert format_dump(b"hello") == "hello"


def test_format_dump_mixed_bytes():
    assert format_dump(b"ab\x00\x01c") == "ab[00|01]c"


def test_format_dump_trailing_binary_closed():
    text = format_dump(b"\x14\x00")
    assert text.startswith("[")
    assert text.endswith("]")
    assert text.count("|") == 1


def test_format_dump_space_is_not_printable():
    assert format_dump(b" ") == "[20]"


def test_dump_writes_message_and_dump():
    log, stream = make_log(42)
    log.dump(">> ", b"ok\x00")
    assert stream.getvalue() == "[42] >> " + format_dump(b"ok\x00") + "\n"


def test_dump_of_empty_data_writes_nothing():
    log, stream = make_log()
    log.dump(">> ", b"")
    assert stream.getvalue() == ""