import math
import struct
import sys

import pytest

from bincodec.codecs import BE_F32, BE_F64, LE_F32, LE_F64, LE_I32, LE_U16, LE_U32, IEEE754Codec
from bincodec.serialization.exceptions import ConversionOverflowError


def test_binary32_little_endian() -> None:
    assert LE_F32.to_bytes(1.0) == bytes([0x00, 0x00, 0x80, 0x3f])
    value = LE_F32.from_bytes(bytes([0x00, 0x00, 0x80, 0x3f]))
    assert value == 1.0
    assert struct.pack('<f', value) == bytes([0x00, 0x00, 0x80, 0x3f])


def test_byte_order_comes_from_the_repr_codec() -> None:
    assert BE_F32.to_bytes(1.0) == bytes([0x3f, 0x80, 0x00, 0x00])
    assert LE_F64.to_bytes(-2.5) == struct.pack('<d', -2.5)
    assert BE_F64.to_bytes(-2.5) == struct.pack('>d', -2.5)


@pytest.mark.parametrize('value', [0.0, -0.0, 1.5, -1e300, 5e-324, math.inf, -math.inf, math.pi])
def test_binary64_bit_exact(value: float) -> None:
    data = LE_F64.to_bytes(value)
    assert data == struct.pack('<d', value)
    decoded = LE_F64.from_bytes(data)
    assert struct.pack('<d', decoded) == data


def test_binary32_rounds_to_nearest() -> None:
    assert LE_F32.from_bytes(LE_F32.to_bytes(0.1)) == struct.unpack('<f', struct.pack('<f', 0.1))[0]


def test_ints_are_accepted() -> None:
    assert LE_F64.to_bytes(2) == LE_F64.to_bytes(2.0)


def test_any_bit_pattern_decodes() -> None:
    assert math.isnan(LE_F32.from_bytes(bytes.fromhex('0000c07f')))
    assert math.isnan(LE_F64.from_bytes(b'\xff' * 8))
    assert LE_F32.from_bytes(bytes.fromhex('0000807f')) == math.inf


def test_binary32_overflow() -> None:
    with pytest.raises(ConversionOverflowError):
        LE_F32.to_bytes(1e300)
    assert LE_F32.from_bytes(LE_F32.to_bytes(math.inf)) == math.inf


def test_wrong_value_type() -> None:
    with pytest.raises(TypeError):
        LE_F32.to_bytes('1.0')  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        LE_F32.to_bytes(False)


def test_repr_codec_must_be_unsigned_32_or_64() -> None:
    with pytest.raises(TypeError):
        IEEE754Codec(LE_I32)
    with pytest.raises(TypeError):
        IEEE754Codec(LE_U16)
    with pytest.raises(TypeError):
        IEEE754Codec(LE_F32)  # type: ignore[arg-type]
    assert IEEE754Codec(LE_U32).byte_size == 4
    assert IEEE754Codec(LE_U32) == LE_F32


@pytest.mark.parametrize('bits', [0x7f800001, 0x7fa00000, 0xffbfffff, 0x7fc00000, 0xff800001, 0x7fffffff, 0xffc00001])
def test_binary32_nan_payloads_are_kept(bits: int) -> None:
    data = struct.pack('<I', bits)
    value = LE_F32.from_bytes(data)
    assert math.isnan(value)
    assert LE_F32.to_bytes(value) == data
    assert BE_F32.to_bytes(BE_F32.from_bytes(data[::-1])) == data[::-1]


@pytest.mark.parametrize('bits', [0x7ff0000000000001, 0xfff8000000000000, 0x7ff4000000000abc])
def test_binary64_nan_payloads_are_kept(bits: int) -> None:
    data = struct.pack('<Q', bits)
    assert LE_F64.to_bytes(LE_F64.from_bytes(data)) == data


def test_binary64_nan_without_binary32_payload_stays_nan() -> None:
    value, = struct.unpack('<d', struct.pack('<Q', 0x7ff0000000000001))
    assert LE_F32.to_bytes(value) == struct.pack('<I', 0x7fc00000)
    assert math.isnan(LE_F32.from_bytes(LE_F32.to_bytes(value)))


def test_overflow_bounds_follow_the_width() -> None:
    with pytest.raises(ConversionOverflowError) as exc_info:
        LE_F32.to_bytes(1e300)
    assert exc_info.value.max_value == struct.unpack('<f', struct.pack('<I', 0x7f7fffff))[0]
    with pytest.raises(ConversionOverflowError) as exc_info:
        LE_F64.to_bytes(10**400)
    assert exc_info.value.min_value == -sys.float_info.max
    assert exc_info.value.max_value == sys.float_info.max
