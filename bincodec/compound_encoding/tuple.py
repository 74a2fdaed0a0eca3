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
Fixed-arity layouts, where the number of values is part of the format and never stored.

There are two flavors:

1. `encode_array`/`decode_array`: `arity` values that share the same encoder, like a 3D coordinate
2. `encode_tuple`/`decode_tuple`: one value per encoder, each of a possibly different type, like the fields of a record

There actually isn't a "format" per-se, the encoding is just the encoding of each value concatenated in order.

>>> from bincodec.encoding.int import decode_int, encode_int
>>> from bincodec.encoding.ieee754 import decode_ieee754, encode_ieee754
>>> from functools import partial
>>> encode_u8 = partial(encode_int, length=1, signed=False, byteorder='little')
>>> decode_u8 = partial(decode_int, length=1, signed=False, byteorder='little')
>>> encode_f32 = partial(encode_ieee754, length=4, byteorder='little')
>>> decode_f32 = partial(decode_ieee754, length=4, byteorder='little')

>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, (1, 2, 3), encode_u8, arity=3)
>>> encode_tuple(se, (7, 1.0), (encode_u8, encode_f32))
>>> bytes(se.finalize()).hex()
'010203070000803f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010203070000803f'))
>>> decode_array(de, decode_u8, tuple, arity=3)
(1, 2, 3)
>>> decode_tuple(de, (decode_u8, decode_f32))
(7, 1.0)
>>> de.finalize()

Nothing is written when the arity doesn't match:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1, 2], encode_u8, arity=3)
... except LengthMismatchError as e:
...     print(e.obtained, e.expected)
2 3
>>> se.cur_pos()
0
"""

from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import LengthMismatchError

from . import Decoder, Encoder
from .sequence import check_sized, iter_decode_exactly

T = TypeVar('T')
R = TypeVar('R')


def encode_array(serializer: Serializer, values: Iterable[T], encoder: Encoder[T], *, arity: int) -> None:
    check_sized(values, count=arity)
    for value in values:
        encoder(serializer, value)


def decode_array(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    arity: int,
) -> R:
    return builder(iter_decode_exactly(deserializer, decoder, arity))


def encode_tuple(serializer: Serializer, values: tuple[Any, ...], encoders: tuple[Encoder[Any], ...]) -> None:
    if len(values) != len(encoders):
        raise LengthMismatchError(
            f'cannot encode {len(values)} values with {len(encoders)} encoders',
            obtained=len(values),
            expected=len(encoders),
        )
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)
