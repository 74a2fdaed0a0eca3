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

from structlog import get_logger
from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.serialization import Deserializer, Serializer
from bincodec.text_table import WINDOWS_1252, CharTable

logger = get_logger()


class TextCodec(Codec[str]):
    """ Represents `str` values stored one byte per character according to a fixed `CharTable`.

    The bytes themselves are framed by `bytes_codec` (a `RawCodec` of fixed size, a length-prefixed `U8` sequence,
    ...), so the text codec only does the mapping between bytes and characters.

    >>> from bincodec.codecs.raw import RawCodec
    >>> codec = TextCodec(RawCodec(size=4))
    >>> codec.to_bytes('café')
    b'caf\\xe9'
    >>> codec.from_bytes(b'caf\\xe9')
    'café'
    """

    __slots__ = ('_bytes', '_table')

    _bytes: Codec[Any]
    _table: CharTable

    def __init__(self, bytes_codec: Codec[Any], /, *, table: CharTable = WINDOWS_1252) -> None:
        if not isinstance(bytes_codec, Codec):
            raise TypeError('expected a Codec for the bytes')
        self._bytes = bytes_codec
        self._table = table

    @property
    def table(self) -> CharTable:
        return self._table

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._bytes, self._table)

    @override
    def _check_value(self, value: str, /) -> None:
        if not isinstance(value, str):
            raise TypeError(f'expected str, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: str, /) -> None:
        data = self._table.encode(value)
        self._bytes.encode(serializer, data)

    @override
    def _decode(self, deserializer: Deserializer, /) -> str:
        data = self._bytes.decode(deserializer)
        text = self._table.decode(bytes(data))
        logger.debug('decoded text', table=self._table.name, length=len(text), text=text)
        return text


class Windows1252Codec(TextCodec):
    """ Text using the Windows-1252 table.
    """

    __slots__ = ()

    def __init__(self, bytes_codec: Codec[Any], /) -> None:
        super().__init__(bytes_codec, table=WINDOWS_1252)

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._bytes,)
