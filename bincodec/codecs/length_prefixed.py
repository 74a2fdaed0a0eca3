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
from bincodec.compound_encoding.length_prefixed import decode_length_prefixed, encode_length_prefixed
from bincodec.serialization import Deserializer, Serializer

T = TypeVar('T')


class LengthPrefixedCodec(Codec[Any], Generic[T]):
    """ Represents a sequence stored as `[count][count x item]`.

    The count is stored with its own codec (usually a fixed-width integer), so a sequence longer than what that codec
    can represent fails to encode instead of being truncated. When decoding, a count that the input can't satisfy fails
    with `OutOfDataError` and nothing partial is returned.

    `max_length` limits the decoded count, when it is `None` the global `MAX_SEQUENCE_LENGTH` setting is used.

    >>> from bincodec.codecs.int import IntType, LittleEndianCodec
    >>> codec = LengthPrefixedCodec(LittleEndianCodec(IntType.U32), LittleEndianCodec(IntType.U16))
    >>> codec.to_bytes([10, 20, 30]).hex()
    '030000000a0014001e00'
    >>> codec.from_bytes(bytes.fromhex('030000000a0014001e00'))
    [10, 20, 30]
    """

    __slots__ = ('_length', '_item', '_builder', '_max_length')

    _length: Codec[int]
    _item: Codec[T]
    _builder: Callable[[Iterable[T]], Any]
    _max_length: Optional[int]

    def __init__(
        self,
        length: Codec[int],
        item: Codec[T],
        /,
        *,
        builder: Callable[[Iterable[T]], Any] = list,
        max_length: Optional[int] = None,
    ) -> None:
        if not isinstance(length, Codec) or not isinstance(item, Codec):
            raise TypeError('expected a Codec for both the length and the items')
        if max_length is not None and max_length < 0:
            raise ValueError('max_length cannot be negative')
        self._length = length
        self._item = item
        self._builder = builder
        self._max_length = max_length

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._length, self._item, self._builder, self._max_length)

    def _effective_max_length(self) -> Optional[int]:
        if self._max_length is not None:
            return self._max_length
        from bincodec.conf import get_global_settings
        return get_global_settings().MAX_SEQUENCE_LENGTH

    @override
    def _check_value(self, value: Iterable[T], /) -> None:
        if not isinstance(value, Iterable) or isinstance(value, str):
            raise TypeError(f'expected a sequence of items, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: Iterable[T], /) -> None:
        encode_length_prefixed(serializer, value, self._length.encode, self._item.encode)

    @override
    def _decode(self, deserializer: Deserializer, /) -> Any:
        return decode_length_prefixed(
            deserializer,
            self._length.decode,
            self._item.decode,
            self._builder,
            max_length=self._effective_max_length(),
        )
