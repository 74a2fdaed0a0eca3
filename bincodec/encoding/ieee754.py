#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
This module implements IEEE-754 floats stored as their raw bit pattern.

The float itself has no byte order, it is reinterpreted as an unsigned integer of the same width (binary32 uses 4
bytes, binary64 uses 8 bytes) and that integer is what gets written. Any bit pattern is accepted when decoding, NaN and
infinities included.

>>> hex(float_to_bits(1.0, length=4))
'0x3f800000'
>>> bits_to_float(0x3f800000, length=4)
1.0
>>> hex(float_to_bits(-2.5, length=8))
'0xc004000000000000'
>>> bits_to_float(0x7ff0000000000000, length=8)
inf

>>> se = Serializer.build_bytes_serializer()
>>> encode_ieee754(se, 1.0, length=4, byteorder='little')  # writes 0000803f
>>> bytes(se.finalize()).hex()
'0000803f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000803f'))
>>> decode_ieee754(de, length=4, byteorder='little')
1.0
"""

import math
import struct
import sys

from bincodec.encoding.int import ByteOrder, decode_int, encode_int
from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import ConversionOverflowError

# struct formats of a float and of the unsigned integer with the same width, always native byte order since it's only
# used to reinterpret bits
_FORMATS: dict[int, tuple[str, str]] = {
    4: ('=f', '=I'),
    8: ('=d', '=Q'),
}

FLOAT32_MAX = struct.unpack('=f', struct.pack('=I', 0x7f7fffff))[0]
FLOAT64_MAX = sys.float_info.max

_MAX_VALUES: dict[int, float] = {
    4: FLOAT32_MAX,
    8: FLOAT64_MAX,
}

# binary32 and binary64 differ by 29 mantissa bits
_MANTISSA_SHIFT = 29
_F32_MANTISSA_MASK = 0x7fffff
_F32_QUIET_BIT = 0x400000


def _formats(length: int) -> tuple[str, str]:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'IEEE-754 floats have 4 or 8 bytes, not {length}') from None


def _f32_nan_to_bits(value: float) -> int:
    # struct quiets signaling NaNs when narrowing, so the payload is moved by hand
    bits64, = struct.unpack('=Q', struct.pack('=d', value))
    sign = bits64 >> 63
    mantissa = (bits64 >> _MANTISSA_SHIFT) & _F32_MANTISSA_MASK
    if mantissa == 0:
        # the payload was only in bits binary32 doesn't have, it must stay a NaN
        mantissa = _F32_QUIET_BIT
    return (sign << 31) | (0xff << 23) | mantissa


def _f32_nan_from_bits(bits: int) -> float:
    sign = bits >> 31
    mantissa = bits & _F32_MANTISSA_MASK
    bits64 = (sign << 63) | (0x7ff << 52) | (mantissa << _MANTISSA_SHIFT)
    value, = struct.unpack('=d', struct.pack('=Q', bits64))
    return value


def _is_f32_nan(bits: int) -> bool:
    return (bits >> 23) & 0xff == 0xff and bits & _F32_MANTISSA_MASK != 0


def float_to_bits(value: float, *, length: int) -> int:
    """ Raw bit pattern of `value` as a `length`-bytes float.

    Finite values too large for the width raise `ConversionOverflowError`, other values are rounded to the nearest. A
    NaN keeps its sign and as much of its payload as fits, signaling NaNs included.
    """
    float_format, int_format = _formats(length)
    if length == 4 and isinstance(value, float) and math.isnan(value):
        return _f32_nan_to_bits(value)
    try:
        packed = struct.pack(float_format, value)
    except OverflowError:
        max_value = _MAX_VALUES[length]
        raise ConversionOverflowError(value, -max_value, max_value) from None
    bits, = struct.unpack(int_format, packed)
    return bits


def bits_to_float(bits: int, *, length: int) -> float:
    """ Reinterpret the bit pattern `bits` as a `length`-bytes float.

    NaN payloads are kept, so `float_to_bits` gives back the exact same bits.
    """
    float_format, int_format = _formats(length)
    if length == 4 and _is_f32_nan(bits):
        return _f32_nan_from_bits(bits)
    value, = struct.unpack(float_format, struct.pack(int_format, bits))
    return value


def encode_ieee754(serializer: Serializer, value: float, *, length: int, byteorder: ByteOrder) -> None:
    """ Encode a float as its bit pattern using an unsigned int with the given length and byte order.
    """
    encode_int(serializer, float_to_bits(value, length=length), length=length, signed=False, byteorder=byteorder)


def decode_ieee754(deserializer: Deserializer, *, length: int, byteorder: ByteOrder) -> float:
    """ Decode a float from its bit pattern using an unsigned int with the given length and byte order.
    """
    bits = decode_int(deserializer, length=length, signed=False, byteorder=byteorder)
    return bits_to_float(bits, length=length)
