import pytest

from bincodec.codecs import (
    BE_I16,
    BE_U32,
    LE_I16,
    LE_I64,
    LE_U32,
    LE_U64,
    U8,
    BigEndianCodec,
    IntCodec,
    IntType,
    LittleEndianCodec,
)
from bincodec.serialization.exceptions import ConversionOverflowError, OutOfDataError


def test_little_endian_u32() -> None:
    assert LE_U32.to_bytes(0x01020304) == bytes([0x04, 0x03, 0x02, 0x01])
    assert LE_U32.from_bytes(bytes([0x04, 0x03, 0x02, 0x01])) == 0x01020304


def test_big_endian_u32() -> None:
    assert BE_U32.to_bytes(0x01020304) == bytes([0x01, 0x02, 0x03, 0x04])
    assert BE_U32.from_bytes(bytes([0x01, 0x02, 0x03, 0x04])) == 0x01020304


def test_signed_twos_complement() -> None:
    assert LE_I16.to_bytes(-2) == b'\xfe\xff'
    assert BE_I16.to_bytes(-2) == b'\xff\xfe'
    assert LE_I16.from_bytes(b'\x00\x80') == -32768
    assert LE_I64.from_bytes(b'\xff' * 8) == -1


@pytest.mark.parametrize('int_type', list(IntType))
@pytest.mark.parametrize('codec_class', [LittleEndianCodec, BigEndianCodec])
def test_bounds_round_trip(int_type: IntType, codec_class: type[IntCodec]) -> None:
    codec = codec_class(int_type)
    for value in (int_type.min_value, 0, int_type.max_value):
        data = codec.to_bytes(value)
        assert len(data) == int_type.byte_size
        assert codec.from_bytes(data) == value


@pytest.mark.parametrize('int_type', list(IntType))
def test_out_of_range(int_type: IntType) -> None:
    codec = LittleEndianCodec(int_type)
    with pytest.raises(ConversionOverflowError):
        codec.to_bytes(int_type.max_value + 1)
    with pytest.raises(ConversionOverflowError):
        codec.to_bytes(int_type.min_value - 1)


def test_int_type_properties() -> None:
    assert IntType.U8.byte_size == 1
    assert not IntType.U8.signed
    assert IntType.I32.signed
    assert IntType.I32.min_value == -2**31
    assert IntType.U64.max_value == 2**64 - 1
    assert repr(IntType.U16) == 'U16'


def test_short_input() -> None:
    with pytest.raises(OutOfDataError) as exc_info:
        LE_U64.from_bytes(b'\x01\x02\x03')
    assert exc_info.value.obtained == 3
    assert exc_info.value.expected == 8


def test_wrong_value_type() -> None:
    with pytest.raises(TypeError):
        U8.to_bytes(True)
    with pytest.raises(TypeError):
        U8.to_bytes(1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        U8.to_bytes('1')  # type: ignore[arg-type]


def test_invalid_construction() -> None:
    with pytest.raises(TypeError):
        LittleEndianCodec(4)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        IntCodec(IntType.U8, byteorder='middle')  # type: ignore[arg-type]
    assert IntCodec(IntType.U16, byteorder='big').byteorder == 'big'
