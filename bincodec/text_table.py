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

r"""
Single-byte character tables used by the text codecs.

A table is strict in both directions: a byte without a character, or a character without a byte, is an error and is
never replaced.

>>> WINDOWS_1252.decode(b'caf\xe9 \x80')
'café €'
>>> WINDOWS_1252.encode('€5')
b'\x805'
>>> try:
...     WINDOWS_1252.encode('abあ')
... except TextEncodingError as e:
...     print(e.position, e.character)
2 あ
"""

import codecs
from typing import Protocol

from bincodec.serialization.exceptions import TextEncodingError
from bincodec.serialization.types import Buffer


class CharTable(Protocol):
    """ Maps each byte to one character and back.
    """

    @property
    def name(self) -> str:
        raise NotImplementedError

    def decode(self, data: Buffer) -> str:
        raise NotImplementedError

    def encode(self, text: str) -> bytes:
        raise NotImplementedError


class CodecsCharTable:
    """ A `CharTable` backed by one of Python's registered text codecs.

    Only the lookup happens when it is created, an unknown codec name raises `LookupError` right away.
    """

    __slots__ = ('_info',)

    def __init__(self, name: str) -> None:
        self._info = codecs.lookup(name)

    @property
    def name(self) -> str:
        return self._info.name

    def decode(self, data: Buffer) -> str:
        try:
            text, _ = self._info.decode(bytes(data), 'strict')
        except UnicodeDecodeError as e:
            byte = e.object[e.start]
            raise TextEncodingError(
                f'byte 0x{byte:02x} at position {e.start} has no character in {self.name}',
                table=self.name,
                position=e.start,
                byte=byte,
            ) from e
        return text

    def encode(self, text: str) -> bytes:
        try:
            data, _ = self._info.encode(text, 'strict')
        except UnicodeEncodeError as e:
            character = e.object[e.start]
            raise TextEncodingError(
                f'character {character!r} at position {e.start} has no byte in {self.name}',
                table=self.name,
                position=e.start,
                character=character,
            ) from e
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodecsCharTable):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f'CodecsCharTable({self.name!r})'


WINDOWS_1252 = CodecsCharTable('cp1252')
