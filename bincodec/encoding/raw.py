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
This module implements raw byte buffers written verbatim, without a length prefix.

Without a `size` the buffer extends until the end of the input, with a `size` exactly that many bytes are read.

>>> se = Serializer.build_bytes_serializer()
>>> encode_raw(se, b'\x00\x01')
>>> encode_raw(se, bytearray(b'tail'))
>>> bytes(se.finalize())
b'\x00\x01tail'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x01tail')
>>> bytes(decode_raw(de, size=2))
b'\x00\x01'
>>> bytes(decode_raw(de))
b'tail'
>>> de.finalize()
"""

from typing import Optional

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.types import Buffer


def encode_raw(serializer: Serializer, data: Buffer) -> None:
    """ Writes the buffer as is.
    """
    serializer.write_bytes(data)


def decode_raw(deserializer: Deserializer, *, size: Optional[int] = None) -> Buffer:
    """ Reads `size` bytes, or everything that is left when `size` is `None`.

    The result may be a view into the deserializer's buffer, callers that need to own the data must copy it.
    """
    if size is None:
        return deserializer.read_all()
    return deserializer.read_bytes(size)
