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

from typing import Any, Callable, Optional

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.encoding.raw import decode_raw, encode_raw
from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import LengthMismatchError
from bincodec.serialization.types import Buffer


class RawCodec(Codec[Buffer]):
    """ Represents a byte buffer written verbatim, with no length prefix.

    With a `size` exactly that many bytes are read, without one the buffer extends until the end of the input (a length
    prefix can be added by composing a `LengthPrefixedCodec` of `U8` items instead).

    The `builder` decides ownership of decoded data: `memoryview` gives a zero-copy view into the input buffer, `bytes`
    (the default) or `bytearray` give an owned copy.

    >>> RawCodec(size=4).from_bytes(b'\\x00\\x01\\x02\\x03')
    b'\\x00\\x01\\x02\\x03'
    >>> data = b'whole input'
    >>> view = RawCodec(builder=memoryview).from_bytes(data)
    >>> view.obj is data
    True
    """

    __slots__ = ('_size', '_builder')

    _size: Optional[int]
    _builder: Callable[[Buffer], Buffer]

    def __init__(self, *, size: Optional[int] = None, builder: Callable[[Buffer], Buffer] = bytes) -> None:
        if size is not None and (not isinstance(size, int) or size < 0):
            raise ValueError('size must be a non-negative int')
        self._size = size
        self._builder = builder

    @property
    def size(self) -> Optional[int]:
        return self._size

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._size, self._builder)

    @override
    def _check_value(self, value: Buffer, /) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f'expected bytes-like value, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: Buffer, /) -> None:
        data = memoryview(value)
        if self._size is not None and data.nbytes != self._size:
            raise LengthMismatchError(
                f'buffer has {data.nbytes} bytes, expected exactly {self._size}',
                obtained=data.nbytes,
                expected=self._size,
            )
        encode_raw(serializer, data)

    @override
    def _decode(self, deserializer: Deserializer, /) -> Buffer:
        data = decode_raw(deserializer, size=self._size)
        if self._builder is memoryview and isinstance(data, memoryview):
            return data
        return self._builder(data)
