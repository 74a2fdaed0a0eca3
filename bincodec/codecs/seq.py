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
from typing import Any, Callable, Generic, Optional, TypeVar

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.compound_encoding.sequence import decode_sequence, encode_sequence
from bincodec.serialization import Deserializer, Serializer

T = TypeVar('T')


class _SeqCodecBase(Codec[Any], Generic[T]):
    """ Used as base for codecs of homogeneous sequences without a count field.
    """

    __slots__ = ('_item', '_builder')

    _item: Codec[T]
    _builder: Callable[[Iterable[T]], Any]

    def __init__(self, item: Codec[T], builder: Callable[[Iterable[T]], Any]) -> None:
        if not isinstance(item, Codec):
            raise TypeError('expected a Codec for the items')
        self._item = item
        self._builder = builder

    def _count(self) -> Optional[int]:
        """ The expected number of items, `None` means "until the end of the input".
        """
        return None

    @override
    def _check_value(self, value: Iterable[T], /) -> None:
        if not isinstance(value, Iterable) or isinstance(value, str):
            raise TypeError(f'expected a sequence of items, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: Iterable[T], /) -> None:
        encode_sequence(serializer, value, self._item.encode, count=self._count())

    @override
    def _decode(self, deserializer: Deserializer, /) -> Any:
        return decode_sequence(deserializer, self._item.decode, self._builder, count=self._count())


class SeqCodec(_SeqCodecBase[T]):
    """ Represents a sequence that extends until the end of the input.

    Encoding writes every item and no count, so it's mostly useful as the last part of a layout or inside a bounded
    region. The value must have a known length (streams are rejected).

    >>> from bincodec.codecs.int import IntType, LittleEndianCodec
    >>> codec = SeqCodec(LittleEndianCodec(IntType.U16))
    >>> codec.to_bytes([1, 2]).hex()
    '01000200'
    >>> codec.from_bytes(bytes.fromhex('010002000300'))
    [1, 2, 3]
    """

    __slots__ = ()

    def __init__(self, item: Codec[T], /, *, builder: Callable[[Iterable[T]], Any] = list) -> None:
        super().__init__(item, builder)

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._item, self._builder)


class SeqNCodec(_SeqCodecBase[T]):
    """ Represents a sequence with exactly `count` items, the count is not stored.

    Decoding stops after `count` items and fails if there are less. Encoding a value with a different length fails
    before anything is written.

    >>> from bincodec.codecs.int import IntType, LittleEndianCodec
    >>> codec = SeqNCodec(2, LittleEndianCodec(IntType.U16))
    >>> codec.to_bytes([1, 2]).hex()
    '01000200'
    >>> codec.from_bytes(bytes.fromhex('01000200'))
    [1, 2]
    """

    __slots__ = ('_count_value',)

    _count_value: int

    def __init__(self, count: int, item: Codec[T], /, *, builder: Callable[[Iterable[T]], Any] = list) -> None:
        if not isinstance(count, int) or count < 0:
            raise ValueError('count must be a non-negative int')
        super().__init__(item, builder)
        self._count_value = count

    @property
    def count(self) -> int:
        return self._count_value

    @override
    def _count(self) -> Optional[int]:
        return self._count_value

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._count_value, self._item, self._builder)
