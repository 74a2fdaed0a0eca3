# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from typing import Any

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.codecs.int import IntCodec
from bincodec.encoding.ieee754 import decode_ieee754, encode_ieee754
from bincodec.serialization import Deserializer, Serializer


class IEEE754Codec(Codec[float]):
    """ Represents builtin `float` values stored as an IEEE-754 bit pattern.

    The bit pattern is delegated to an unsigned integer codec: `U32` gives binary32 and `U64` gives binary64. This codec
    has no notion of byte order, the integer codec that is given decides it.

    >>> from bincodec.codecs.int import BigEndianCodec, IntType, LittleEndianCodec
    >>> IEEE754Codec(LittleEndianCodec(IntType.U32)).to_bytes(1.0).hex()
    '0000803f'
    >>> IEEE754Codec(BigEndianCodec(IntType.U32)).to_bytes(1.0).hex()
    '3f800000'
    >>> IEEE754Codec(LittleEndianCodec(IntType.U64)).from_bytes(bytes.fromhex('000000000000f03f'))
    1.0
    """

    __slots__ = ('_repr',)

    _repr: IntCodec

    def __init__(self, repr_codec: IntCodec, /) -> None:
        if not isinstance(repr_codec, IntCodec):
            raise TypeError('expected an integer codec for the bit pattern')
        int_type = repr_codec.int_type
        if int_type.signed or int_type.byte_size not in (4, 8):
            raise TypeError(f'IEEE-754 floats are stored as U32 or U64, not {int_type.name}')
        self._repr = repr_codec

    @property
    def byte_size(self) -> int:
        return self._repr.int_type.byte_size

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._repr,)

    @override
    def _check_value(self, value: float, /) -> None:
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise TypeError(f'expected float, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: float, /) -> None:
        encode_ieee754(serializer, value, length=self.byte_size, byteorder=self._repr.byteorder)

    @override
    def _decode(self, deserializer: Deserializer, /) -> float:
        return decode_ieee754(deserializer, length=self.byte_size, byteorder=self._repr.byteorder)
