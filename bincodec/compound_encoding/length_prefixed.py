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
A length-prefixed sequence is a count field followed by exactly that many items.

Layout: [N: length encoder][value_0]...[value_N-1]

The count field has its own encoder, so its width and byte order are part of the format. The length of the sequence
is converted to the count field's width without ever truncating: a sequence too long for the field fails to encode, and
a decoded count that is negative or too big for a platform size fails to decode.

>>> from bincodec.encoding.int import decode_int, encode_int
>>> from functools import partial
>>> encode_u32 = partial(encode_int, length=4, signed=False, byteorder='little')
>>> decode_u32 = partial(decode_int, length=4, signed=False, byteorder='little')
>>> encode_u16 = partial(encode_int, length=2, signed=False, byteorder='little')
>>> decode_u16 = partial(decode_int, length=2, signed=False, byteorder='little')

>>> se = Serializer.build_bytes_serializer()
>>> encode_length_prefixed(se, [10, 20, 30], encode_u32, encode_u16)
>>> bytes(se.finalize()).hex()
'030000000a0014001e00'

Breakdown of the result:

    03000000: 3 as a little-endian u32, the count
    0a00: 10
    1400: 20
    1e00: 30

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('030000000a0014001e00'))
>>> decode_length_prefixed(de, decode_u32, decode_u16, list)
[10, 20, 30]
>>> de.finalize()

>>> from bincodec.serialization import OutOfDataError
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('050000000a001400'))
>>> try:
...     decode_length_prefixed(de, decode_u32, decode_u16, list)
... except OutOfDataError as e:
...     print(e.obtained, e.expected)
2 5
"""

from collections.abc import Iterable
from typing import Callable, Optional, TypeVar

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import TooLongError
from bincodec.utils.int import try_into_usize

from . import Decoder, Encoder
from .sequence import check_sized, iter_decode_exactly

T = TypeVar('T')
R = TypeVar('R')


def encode_length_prefixed(
    serializer: Serializer,
    values: Iterable[T],
    length_encoder: Encoder[int],
    encoder: Encoder[T],
) -> None:
    # XXX: the length encoder is responsible for rejecting a length that doesn't fit its width
    length = check_sized(values)
    length_encoder(serializer, length)
    for value in values:
        encoder(serializer, value)


def decode_length_prefixed(
    deserializer: Deserializer,
    length_decoder: Decoder[int],
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: Optional[int] = None,
) -> R:
    length = try_into_usize(length_decoder(deserializer))
    if max_length is not None and length > max_length:
        raise TooLongError(f'length prefix {length} exceeds the maximum of {max_length}')
    return builder(iter_decode_exactly(deserializer, decoder, length))
