import pytest

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.adapters import MaxBytesExceededError
from bincodec.serialization.exceptions import OutOfDataError, TooLongError, TrailingDataError


def test_bytes_serializer_writes_in_order() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(0x01)
    se.write_bytes(b'\x02\x03')
    se.write_bytes(bytearray(b'\x04'))
    assert se.cur_pos() == 4
    assert bytes(se.finalize()) == b'\x01\x02\x03\x04'


def test_bytes_serializer_copies_mutable_input() -> None:
    data = bytearray(b'ab')
    se = Serializer.build_bytes_serializer()
    se.write_bytes(data)
    data[0] = ord('z')
    assert bytes(se.finalize()) == b'ab'


def test_bytes_serializer_rejects_invalid_byte() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(OverflowError):
        se.write_byte(256)


def test_bytes_deserializer_reads_and_peeks() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04')
    assert de.peek_byte() == 1
    assert de.read_byte() == 1
    assert bytes(de.peek_bytes(2)) == b'\x02\x03'
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert de.cur_pos() == 3
    assert not de.is_empty()
    assert bytes(de.read_all()) == b'\x04'
    assert de.is_empty()
    assert de.cur_pos() == 4
    de.finalize()


def test_bytes_deserializer_does_not_copy() -> None:
    data = b'\x00\x01\x02'
    de = Deserializer.build_bytes_deserializer(data)
    view = de.read_bytes(2)
    assert isinstance(view, memoryview)
    assert view.obj is data


def test_bytes_deserializer_out_of_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(OutOfDataError) as exc_info:
        de.read_bytes(3)
    assert exc_info.value.obtained == 1
    assert exc_info.value.expected == 3
    assert 'position 1' in str(exc_info.value)
    # nothing was consumed by the failed read
    assert de.read_byte() == 2
    with pytest.raises(OutOfDataError):
        de.read_byte()


def test_bytes_deserializer_inexact_read() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    assert bytes(de.read_bytes(5, exact=False)) == b'\x01\x02'
    assert de.is_empty()


def test_bytes_deserializer_negative_read() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(ValueError):
        de.read_bytes(-1)


def test_bytes_deserializer_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(TrailingDataError):
        de.finalize()


def test_max_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    limited = se.with_max_bytes(3)
    limited.write_bytes(b'ab')
    limited.write_byte(0x63)
    with pytest.raises(MaxBytesExceededError):
        limited.write_byte(0x64)
    assert bytes(se.finalize()) == b'abc'


def test_max_bytes_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcd')
    limited = de.with_max_bytes(3)
    assert bytes(limited.read_bytes(2)) == b'ab'
    with pytest.raises(TooLongError):
        limited.read_bytes(2)


def test_max_bytes_deserializer_read_all() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcd')
    with pytest.raises(MaxBytesExceededError):
        de.with_max_bytes(3).read_all()

    de = Deserializer.build_bytes_deserializer(b'abc')
    assert bytes(de.with_max_bytes(3).read_all()) == b'abc'


def test_optional_max_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
    assert de.with_optional_max_bytes(10) is not de


def test_max_bytes_is_relative_to_wrapping_position() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'header')
    limited = se.with_max_bytes(2)
    limited.write_bytes(b'ab')
    with pytest.raises(MaxBytesExceededError):
        limited.write_byte(0x63)
    assert bytes(se.finalize()) == b'headerab'

    de = Deserializer.build_bytes_deserializer(b'headerab')
    de.read_bytes(6)
    assert bytes(de.with_max_bytes(2).read_all()) == b'ab'


def test_max_bytes_inexact_read_is_clamped() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef').with_max_bytes(4)
    assert bytes(de.read_bytes(10, exact=False)) == b'abcd'
    assert de.cur_pos() == 4
    with pytest.raises(MaxBytesExceededError):
        de.read_byte()


def test_max_bytes_cannot_be_negative() -> None:
    with pytest.raises(ValueError):
        Serializer.build_bytes_serializer().with_max_bytes(-1)
    with pytest.raises(ValueError):
        Deserializer.build_bytes_deserializer(b'').with_max_bytes(-1)


def test_max_bytes_peeks_and_is_empty_respect_the_limit() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef').with_max_bytes(2)
    assert bytes(de.peek_bytes(10, exact=False)) == b'ab'
    with pytest.raises(MaxBytesExceededError):
        de.peek_bytes(3)
    de.read_bytes(2)
    assert de.is_empty()
    with pytest.raises(MaxBytesExceededError):
        de.peek_byte()
    assert bytes(de.peek_bytes(1, exact=False)) == b''
    assert de.cur_pos() == 2
