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

from enum import Enum
from typing import Any

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.encoding.int import ByteOrder, decode_int, encode_int
from bincodec.serialization import Deserializer, Serializer
from bincodec.utils.int import int_bounds


class IntType(Enum):
    """ The fixed-width integer types, the value is `(byte_size, signed)`.
    """

    U8 = (1, False)
    I8 = (1, True)
    U16 = (2, False)
    I16 = (2, True)
    U32 = (4, False)
    I32 = (4, True)
    U64 = (8, False)
    I64 = (8, True)

    @property
    def byte_size(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min_value(self) -> int:
        return int_bounds(length=self.byte_size, signed=self.signed)[0]

    @property
    def max_value(self) -> int:
        return int_bounds(length=self.byte_size, signed=self.signed)[1]

    def __repr__(self) -> str:
        return self.name


class IntCodec(Codec[int]):
    """ Represents builtin `int` values with a fixed size, signedness and byte order.

    >>> codec = IntCodec(IntType.U32, byteorder='little')
    >>> codec.to_bytes(0x01020304).hex()
    '04030201'
    >>> hex(codec.from_bytes(bytes.fromhex('04030201')))
    '0x1020304'
    >>> IntCodec(IntType.I16, byteorder='big').to_bytes(-2).hex()
    'fffe'
    """

    __slots__ = ('_int_type', '_byteorder')

    _int_type: IntType
    _byteorder: ByteOrder

    def __init__(self, int_type: IntType, /, *, byteorder: ByteOrder) -> None:
        if not isinstance(int_type, IntType):
            raise TypeError('expected IntType')
        if byteorder not in ('little', 'big'):
            raise ValueError(f"byteorder must be 'little' or 'big', not {byteorder!r}")
        self._int_type = int_type
        self._byteorder = byteorder

    @property
    def int_type(self) -> IntType:
        return self._int_type

    @property
    def byteorder(self) -> ByteOrder:
        return self._byteorder

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._int_type, self._byteorder)

    @override
    def _check_value(self, value: int, /) -> None:
        # XXX: bool is a subclass of int but it is never what's meant here
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'expected int, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: int, /) -> None:
        encode_int(
            serializer,
            value,
            length=self._int_type.byte_size,
            signed=self._int_type.signed,
            byteorder=self._byteorder,
        )

    @override
    def _decode(self, deserializer: Deserializer, /) -> int:
        return decode_int(
            deserializer,
            length=self._int_type.byte_size,
            signed=self._int_type.signed,
            byteorder=self._byteorder,
        )


class LittleEndianCodec(IntCodec):
    """ Least significant byte first.
    """

    __slots__ = ()

    def __init__(self, int_type: IntType, /) -> None:
        super().__init__(int_type, byteorder='little')

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._int_type,)


class BigEndianCodec(IntCodec):
    """ Most significant byte first.
    """

    __slots__ = ()

    def __init__(self, int_type: IntType, /) -> None:
        super().__init__(int_type, byteorder='big')

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._int_type,)
