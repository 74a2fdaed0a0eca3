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

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, final

from bincodec.serialization import Deserializer, Serializer
from bincodec.serialization.types import Buffer

T = TypeVar('T')


class Codec(ABC, Generic[T]):
    """ This class is used to model how values of type `T` are written to and read from a packed binary layout.

    A codec only holds configuration (sizes, byte order, nested codecs, ...) and is immutable, so a single instance can
    be reused for any number of calls, including concurrently. Codecs are composed by value: compound codecs receive
    the codecs of their parts when they are constructed.

    Every codec offers the same two-sided contract:

    - `prepare_decode()` gives a `DecodeStep[T]`, a callable that reads a `T` from a `Deserializer`;
    - `prepare_encode(value)` gives an `EncodeStep`, a short-lived callable that writes `value` to a `Serializer`.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    def prepare_decode(self) -> DecodeStep[T]:
        """ Returns a step that decodes a value each time it is called, the codec is not consumed.
        """
        return DecodeStep(self)

    @final
    def prepare_encode(self, value: T, /) -> EncodeStep:
        """ Returns a step that will encode the given value, it references the value and this codec without copying.

        The step is meant to be handed to a serializer right away and discarded.
        """
        return EncodeStep(self, value)

    @final
    def encode(self, serializer: Serializer, value: T, /) -> None:
        """ Encode a value according to the layout that was configured.

        Encoding includes a shallow type check of the value, a `TypeError` is raised for values of the wrong type.
        """
        # XXX: subclasses must implement Codec._encode, not Codec.encode
        self._check_value(value)
        self._encode(serializer, value)

    @final
    def decode(self, deserializer: Deserializer, /) -> T:
        """ Decode a value according to the layout that was configured.
        """
        # XXX: subclasses must implement Codec._decode, not Codec.decode
        return self._decode(deserializer)

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.

        The global `MAX_BYTES` setting limits how much can be written.
        """
        from bincodec.conf import get_global_settings
        settings = get_global_settings()
        serializer = Serializer.build_bytes_serializer()
        self.encode(serializer.with_optional_max_bytes(settings.MAX_BYTES), value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes` and avoid using the serialization system.

        All of `data` has to be consumed, trailing data is an error. The global `MAX_BYTES` setting limits how much
        can be read.
        """
        from bincodec.conf import get_global_settings
        settings = get_global_settings()
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.decode(deserializer.with_optional_max_bytes(settings.MAX_BYTES))
        deserializer.finalize()
        return value

    @abstractmethod
    def _config(self) -> tuple[Any, ...]:
        """ The configuration of this codec, used for comparison, hashing and representation.
        """
        raise NotImplementedError

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Inner implementation of the type check made by `Codec.encode`, should raise `TypeError` on a bad value.

        The check is shallow, compound codecs rely on the `encode` of their inner codecs to check the parts.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `encode`, you can assume that the given value has been checked.

        When implementing the encoding with compound encoders, `Codec.encode` should be passed as an `Encoder` instead
        of `Codec._encode`, so that the inner values are checked too.
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, deserializer: Deserializer, /) -> T:
        """ Inner implementation of `decode`.
        """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, Codec)
        return self._config() == other._config()

    def __hash__(self) -> int:
        return hash((type(self), self._config()))

    def __repr__(self) -> str:
        args = ', '.join(_repr_arg(arg) for arg in self._config())
        return f'{type(self).__name__}({args})'


def _repr_arg(arg: Any) -> str:
    if isinstance(arg, type) or callable(arg) and hasattr(arg, '__qualname__'):
        return arg.__qualname__
    return repr(arg)


@final
class DecodeStep(Generic[T]):
    """ Decodes one value from a deserializer each time it is called.
    """

    __slots__ = ('_codec',)

    def __init__(self, codec: Codec[T]) -> None:
        self._codec = codec

    def __call__(self, deserializer: Deserializer, /) -> T:
        return self._codec.decode(deserializer)

    def __repr__(self) -> str:
        return f'DecodeStep({self._codec!r})'


@final
class EncodeStep:
    """ A codec paired with a reference to the value it will encode.
    """

    __slots__ = ('_codec', '_value')

    def __init__(self, codec: Codec[Any], value: Any) -> None:
        self._codec = codec
        self._value = value

    def __call__(self, serializer: Serializer, /) -> None:
        self._codec.encode(serializer, self._value)

    def __repr__(self) -> str:
        return f'EncodeStep({self._codec!r})'
