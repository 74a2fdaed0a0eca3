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

"""
Records: a class whose attributes are laid out one after the other, each with its own codec.

Fields can be anonymous (name `None`), which is how fixed markers in the middle of a record are described. Their
decoded value is dropped and `None` is encoded for them, so they are meant for `LiteralCodec` fields.

>>> from dataclasses import dataclass
>>> from bincodec.codecs.int import IntType, LittleEndianCodec
>>> from bincodec.codecs.literal import LiteralCodec
>>> @dataclass
... class Header:
...     version: int
...     flags: int
>>> codec = RecordCodec(Header, [
...     (None, LiteralCodec(b'HD')),
...     ('version', LittleEndianCodec(IntType.U16)),
...     ('flags', LittleEndianCodec(IntType.U8)),
... ])
>>> codec.to_bytes(Header(version=3, flags=1)).hex()
'4844030001'
>>> codec.from_bytes(bytes.fromhex('4844030001'))
Header(version=3, flags=1)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from typing_extensions import override

from bincodec.codecs.codec import Codec
from bincodec.compound_encoding.tuple import decode_tuple, encode_tuple
from bincodec.serialization import Deserializer, Serializer

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

T = TypeVar('T')
D = TypeVar('D', bound='DataclassInstance')


def make_record_codec(class_: type[D], /, **codecs: Codec[Any]) -> RecordCodec[D]:
    """ Helper function to build a RecordCodec for the given dataclass, with one codec for each of its fields.
    """
    if not is_dataclass(class_):
        raise TypeError('expected a dataclass')
    # XXX: the order of `fields` is the order of declaration, which is the order of the layout
    field_names = [field.name for field in fields(class_)]
    missing = [name for name in field_names if name not in codecs]
    if missing:
        raise TypeError(f'missing codec for fields: {", ".join(missing)}')
    unknown = [name for name in codecs if name not in field_names]
    if unknown:
        raise TypeError(f'{class_.__qualname__} has no fields: {", ".join(unknown)}')
    return RecordCodec(class_, [(name, codecs[name]) for name in field_names])


class RecordCodec(Codec[T]):
    __slots__ = ('_class', '_fields')

    _class: type[T]
    _fields: tuple[tuple[Optional[str], Codec[Any]], ...]

    def __init__(self, class_: type[T], fields_: Sequence[tuple[Optional[str], Codec[Any]]], /) -> None:
        if not isinstance(class_, type):
            raise TypeError('expected a class')
        names: set[str] = set()
        for name, codec in fields_:
            if not isinstance(codec, Codec):
                raise TypeError(f'expected a Codec for field {name!r}')
            if name is not None:
                if name in names:
                    raise ValueError(f'duplicate field {name!r}')
                names.add(name)
        self._class = class_
        self._fields = tuple((name, codec) for name, codec in fields_)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._fields if name is not None)

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._class, self._fields)

    @override
    def _check_value(self, value: T, /) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__qualname__} instance, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: T, /) -> None:
        values = tuple(None if name is None else getattr(value, name) for name, _ in self._fields)
        encode_tuple(serializer, values, tuple(codec.encode for _, codec in self._fields))

    @override
    def _decode(self, deserializer: Deserializer, /) -> T:
        values = decode_tuple(deserializer, tuple(codec.decode for _, codec in self._fields))
        kwargs = {name: value for (name, _), value in zip(self._fields, values) if name is not None}
        return self._class(**kwargs)
