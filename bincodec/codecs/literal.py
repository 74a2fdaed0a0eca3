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
from bincodec.encoding.literal import decode_literal, encode_literal
from bincodec.serialization import Deserializer, Serializer


class LiteralCodec(Codec[None]):
    """ Represents a fixed byte sequence (a magic number, a section tag) that carries no value.

    >>> magic = LiteralCodec(b'BM')
    >>> magic.to_bytes(None)
    b'BM'
    >>> magic.from_bytes(b'BM') is None
    True
    """

    __slots__ = ('_literal',)

    _literal: bytes

    def __init__(self, literal: bytes, /) -> None:
        if not isinstance(literal, (bytes, bytearray, memoryview)):
            raise TypeError('expected bytes-like literal')
        self._literal = bytes(literal)

    @property
    def literal(self) -> bytes:
        return self._literal

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._literal,)

    @override
    def _check_value(self, value: None, /) -> None:
        if value is not None:
            raise TypeError(f'a literal has no value, expected None, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: None, /) -> None:
        encode_literal(serializer, self._literal)

    @override
    def _decode(self, deserializer: Deserializer, /) -> None:
        decode_literal(deserializer, self._literal)
