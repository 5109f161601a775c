from blynkcore.stream import NullStream, null_stream


def test_write_reports_everything_written():
    s = NullStream()
    assert s.write(0x41) == 1
    assert s.write(b"hello") == len(b"hello")
    assert s.write(b"") == 0


def test_nothing_to_read():
    s = NullStream()
    assert s.available() == 0
    assert s.read() == -1
    assert s.peek() == -1
    assert s.read_bytes(10) == b""


def test_write_capacity_and_flush():
    s = NullStream()
    assert s.available_for_write() == 4096
    s.flush()
    assert s.available() == 0


def test_shared_instance_behaves_the_same():
    assert null_stream.write(b"abc") == 3
    assert null_stream.read() == -1