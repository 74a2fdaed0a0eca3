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
This module implements "encoding" of a fixed byte sequence, like a magic number or a section tag.

Nothing is stored in the value (it is always `None`), encoding writes the constant and decoding checks it byte by byte,
stopping at the first byte that differs.

>>> se = Serializer.build_bytes_serializer()
>>> encode_literal(se, b'RIFF')
>>> bytes(se.finalize())
b'RIFF'

>>> de = Deserializer.build_bytes_deserializer(b'RIFF....')
>>> decode_literal(de, b'RIFF')
>>> bytes(de.read_all())
b'....'

>>> de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
>>> try:
...     decode_literal(de, b'\x01\x02\x04')
... except ValueError as e:
...     print(e.index, hex(e.expected), hex(e.received))
2 0x4 0x3

>>> de = Deserializer.build_bytes_deserializer(b'RI')
>>> try:
...     decode_literal(de, b'RIFF')
... except OutOfDataError as e:
...     print(e.obtained, e.expected)
2 4
"""

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import OutOfDataError, ValueMismatchError


def encode_literal(serializer: Serializer, literal: bytes) -> None:
    """ Writes the literal, it never fails by itself.
    """
    serializer.write_bytes(literal)


def decode_literal(deserializer: Deserializer, literal: bytes) -> None:
    """ Reads `len(literal)` bytes and checks them against `literal`.

    This module's docstring has more details and examples.
    """
    for index, expected in enumerate(literal):
        if deserializer.is_empty():
            raise OutOfDataError(
                f'literal {literal!r} ended after {index} bytes at position {deserializer.cur_pos()}',
                obtained=index,
                expected=len(literal),
            )
        received = deserializer.read_byte()
        if received != expected:
            raise ValueMismatchError(index, expected, received)
