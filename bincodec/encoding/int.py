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

"""
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

Signed integers use the standard two's complement layout, there is no variable-length encoding.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0x01020304, length=4, signed=False, byteorder='little')  # writes 04030201
>>> encode_int(se, 0x01020304, length=4, signed=False, byteorder='big')  # writes 01020304
>>> encode_int(se, -2, length=2, signed=True, byteorder='little')  # writes feff
>>> bytes(se.finalize()).hex()
'0403020101020304feff'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0403020101020304feff'))
>>> hex(decode_int(de, length=4, signed=False, byteorder='little'))  # reads 04030201
'0x1020304'
>>> hex(decode_int(de, length=4, signed=False, byteorder='big'))  # reads 01020304
'0x1020304'
>>> decode_int(de, length=2, signed=True, byteorder='little')  # reads feff
-2
>>> de.finalize()
"""

from typing import Literal

from typing_extensions import TypeAlias

from bincodec.serialization import Deserializer, Serializer
from bincodec.utils.int import try_convert_int

ByteOrder: TypeAlias = Literal['little', 'big']


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, byteorder: ByteOrder) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    A number that does not fit raises `ConversionOverflowError`. This modules's docstring has more details and examples.
    """
    try_convert_int(number, length=length, signed=signed)
    data = int.to_bytes(number, length, byteorder=byteorder, signed=signed)
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool, byteorder: ByteOrder) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=byteorder, signed=signed)
