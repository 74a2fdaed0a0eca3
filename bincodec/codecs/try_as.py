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
from bincodec.serialization import Deserializer, Serializer
from bincodec.utils.int import try_convert_int, try_into_usize


class TryAsCodec(Codec[int]):
    """ Stores a platform-size count (never negative) through a narrower or signed integer representation.

    Both directions are checked: a count that doesn't fit the representation fails to encode, and a decoded
    representation that isn't a valid count (a negative one) fails to decode.

    >>> from bincodec.codecs.int import IntType, LittleEndianCodec
    >>> codec = TryAsCodec(LittleEndianCodec(IntType.I32))
    >>> codec.to_bytes(5).hex()
    '05000000'
    >>> try:
    ...     codec.from_bytes(bytes.fromhex('ffffffff'))
    ... except OverflowError as e:
    ...     print(e.value, e.min_value)
    -1 0
    """

    __slots__ = ('_repr',)

    _repr: IntCodec

    def __init__(self, repr_codec: IntCodec, /) -> None:
        if not isinstance(repr_codec, IntCodec):
            raise TypeError('expected an integer codec for the representation')
        self._repr = repr_codec

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._repr,)

    @override
    def _check_value(self, value: int, /) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'expected int, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: int, /) -> None:
        int_type = self._repr.int_type
        count = try_into_usize(value)
        self._repr.encode(serializer, try_convert_int(count, length=int_type.byte_size, signed=int_type.signed))

    @override
    def _decode(self, deserializer: Deserializer, /) -> int:
        return try_into_usize(self._repr.decode(deserializer))
