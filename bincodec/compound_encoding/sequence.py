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
A sequence is any sized iterable of items that share the same encoder. There is no count field, the count is either
given by the caller or the sequence goes until the end of the input.

Layout: [value_0]...[value_N-1]

>>> from bincodec.encoding.int import decode_int, encode_int
>>> from functools import partial
>>> encode_u16 = partial(encode_int, length=2, signed=False, byteorder='little')
>>> decode_u16 = partial(decode_int, length=2, signed=False, byteorder='little')

>>> se = Serializer.build_bytes_serializer()
>>> encode_sequence(se, [10, 20, 30], encode_u16, count=3)
>>> bytes(se.finalize()).hex()
'0a0014001e00'

With a count, only that many items are read, the rest belongs to whatever comes next:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0a0014001e00'))
>>> decode_sequence(de, decode_u16, list, count=2)
[10, 20]
>>> bytes(de.read_all()).hex()
'1e00'

Without a count, items are read until the input is exhausted:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0a0014001e00'))
>>> decode_sequence(de, decode_u16, tuple)
(10, 20, 30)

A count that the data can't satisfy is an error, nothing partial is returned:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0a001400'))
>>> try:
...     decode_sequence(de, decode_u16, list, count=5)
... except OutOfDataError as e:
...     print(e.obtained, e.expected)
2 5
"""

from collections.abc import Iterable, Iterator, Sized
from typing import Callable, Optional, TypeVar

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.exceptions import (
    LengthMismatchError,
    OutOfDataError,
    UnknownLengthError,
    ZeroWidthItemError,
)

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R')


def check_sized(values: Iterable[T], *, count: Optional[int] = None) -> int:
    """ Return the exact length of `values`, checking it against `count` when one is given.

    Streams without a length can't be encoded, there would be no way to guarantee a consistent record.
    """
    if not isinstance(values, Sized):
        raise UnknownLengthError(f'{type(values).__name__} does not have a known length', expected=count)
    length = len(values)
    if count is not None and length != count:
        raise LengthMismatchError(
            f'cannot encode {length} items when exactly {count} are expected',
            obtained=length,
            expected=count,
        )
    return length


def encode_sequence(
    serializer: Serializer,
    values: Iterable[T],
    encoder: Encoder[T],
    *,
    count: Optional[int] = None,
) -> None:
    check_sized(values, count=count)
    for value in values:
        start = serializer.cur_pos()
        encoder(serializer, value)
        if count is None and serializer.cur_pos() == start:
            # an unbounded sequence must advance on every item
            raise ZeroWidthItemError(f'item at position {start} was encoded with no bytes')


def iter_decode_exactly(deserializer: Deserializer, decoder: Decoder[T], count: int) -> Iterator[T]:
    """ Yield exactly `count` decoded items, raise `OutOfDataError` if the input ends before that.

    Items that take no bytes (an empty literal, a zero-sized buffer) are still decoded when the input is empty.
    """
    for index in range(count):
        if not deserializer.is_empty():
            yield decoder(deserializer)
            continue
        start = deserializer.cur_pos()
        try:
            value = decoder(deserializer)
        except OutOfDataError as e:
            if deserializer.cur_pos() != start:
                raise
            raise OutOfDataError(
                f'expected {count} items, input ended after {index} at position {start}',
                obtained=index,
                expected=count,
            ) from e
        yield value


def iter_decode_all(deserializer: Deserializer, decoder: Decoder[T]) -> Iterator[T]:
    """ Yield decoded items until the input is exhausted.

    An item that consumes no bytes would repeat forever, so it's an error.
    """
    while not deserializer.is_empty():
        start = deserializer.cur_pos()
        value = decoder(deserializer)
        if deserializer.cur_pos() == start:
            raise ZeroWidthItemError(f'item at position {start} was decoded from no bytes')
        yield value


def decode_sequence(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    count: Optional[int] = None,
) -> R:
    if count is None:
        return builder(iter_decode_all(deserializer, decoder))
    return builder(iter_decode_exactly(deserializer, decoder, count))
