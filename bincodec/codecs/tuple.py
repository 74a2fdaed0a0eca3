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

from collections.abc import Iterable
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.compound_encoding.tuple import decode_array, encode_array
from bincodec.serialization import Deserializer, Serializer

T = TypeVar('T')


class TupleCodec(Codec[Any], Generic[T]):
    """ Represents a fixed number of values that share the same item codec, like the 3 coordinates of a vertex.

    The arity is part of the layout, it's never stored. Decoded values are built with `builder` (a `tuple` by default).

    >>> from bincodec.codecs.int import IntType, LittleEndianCodec
    >>> vertex = TupleCodec(3, LittleEndianCodec(IntType.I16))
    >>> vertex.to_bytes((1, -1, 2)).hex()
    '0100ffff0200'
    >>> vertex.from_bytes(bytes.fromhex('0100ffff0200'))
    (1, -1, 2)
    """

    __slots__ = ('_arity', '_item', '_builder')

    _arity: int
    _item: Codec[T]
    _builder: Callable[[Iterable[T]], Any]

    def __init__(self, arity: int, item: Codec[T], /, *, builder: Callable[[Iterable[T]], Any] = tuple) -> None:
        if not isinstance(arity, int) or arity < 0:
            raise ValueError('arity must be a non-negative int')
        if not isinstance(item, Codec):
            raise TypeError('expected a Codec for the items')
        self._arity = arity
        self._item = item
        self._builder = builder

    @property
    def arity(self) -> int:
        return self._arity

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._arity, self._item, self._builder)

    @override
    def _check_value(self, value: Iterable[T], /) -> None:
        if not isinstance(value, Iterable) or isinstance(value, str):
            raise TypeError(f'expected a sequence of items, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: Iterable[T], /) -> None:
        encode_array(serializer, value, self._item.encode, arity=self._arity)

    @override
    def _decode(self, deserializer: Deserializer, /) -> Any:
        return decode_array(deserializer, self._item.decode, self._builder, arity=self._arity)
