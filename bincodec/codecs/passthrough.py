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

from typing import Any, Protocol, TypeVar

from typing_extensions import Self, override

from bincodec.codecs.codec import Codec
from bincodec.serialization import Deserializer, Serializer


class SelfSerializable(Protocol):
    """ A type that knows how to write itself to a `Serializer` and read itself from a `Deserializer`.
    """

    def serialize(self, serializer: Serializer, /) -> None:
        raise NotImplementedError

    @classmethod
    def deserialize(cls, deserializer: Deserializer, /) -> Self:
        raise NotImplementedError


S = TypeVar('S', bound=SelfSerializable)


class PassthroughCodec(Codec[S]):
    """ Hands the whole value to the type's own serialization, no framing is added.

    Whatever the type raises is propagated as is.
    """

    __slots__ = ('_type',)

    _type: type[S]

    def __init__(self, type_: type[S], /) -> None:
        if not isinstance(type_, type):
            raise TypeError('expected a type')
        if not callable(getattr(type_, 'serialize', None)) or not callable(getattr(type_, 'deserialize', None)):
            raise TypeError(f'{type_.__qualname__} must implement serialize() and deserialize()')
        self._type = type_

    @override
    def _config(self) -> tuple[Any, ...]:
        return (self._type,)

    @override
    def _check_value(self, value: S, /) -> None:
        if not isinstance(value, self._type):
            raise TypeError(f'expected {self._type.__qualname__}, not {type(value).__name__}')

    @override
    def _encode(self, serializer: Serializer, value: S, /) -> None:
        value.serialize(serializer)

    @override
    def _decode(self, deserializer: Deserializer, /) -> S:
        return self._type.deserialize(deserializer)
