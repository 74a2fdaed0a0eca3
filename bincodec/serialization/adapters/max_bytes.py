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
Adapters that put an upper bound on how many bytes go through a serializer or deserializer.

The limit is relative to the position of the inner object when it was wrapped, so wrapping in the middle of a stream
only limits what comes after. A check happens before each write or read, so an operation that would cross the limit
fails without touching the inner object.

>>> from bincodec.serialization import Deserializer
>>> de = Deserializer.build_bytes_deserializer(b'abcdef').with_max_bytes(4)
>>> bytes(de.read_bytes(3))
b'abc'
>>> try:
...     de.read_bytes(2)
... except MaxBytesExceededError as e:
...     print(e)
cannot read 2 bytes at position 3, at most 4 bytes can be read
>>> de.cur_pos()
3
"""

from typing import Generic, TypeVar

from typing_extensions import override

from bincodec.serialization.deserializer import Deserializer
from bincodec.serialization.exceptions import TooLongError
from bincodec.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(TooLongError):
    """ A write or read would have gone past the maximum number of bytes.

    The failed operation itself was not forwarded, but whatever came before it was, so the (de)serialization as a whole
    has to be considered failed and the adapter should not be used again.
    """


class MaxBytesSerializer(Serializer, Generic[S]):
    inner: S

    def __init__(self, serializer: S, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.inner = serializer
        self.max_bytes = max_bytes
        self._end = serializer.cur_pos() + max_bytes

    def _check_write(self, size: int) -> None:
        pos = self.inner.cur_pos()
        if pos + size > self._end:
            raise MaxBytesExceededError(
                f'cannot write {size} bytes at position {pos}, at most {self.max_bytes} bytes can be written'
            )

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self._check_write(1)
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._check_write(view.nbytes)
        self.inner.write_bytes(view)


class MaxBytesDeserializer(Deserializer, Generic[D]):
    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.inner = deserializer
        self.max_bytes = max_bytes
        self._end = deserializer.cur_pos() + max_bytes

    def _bytes_left(self) -> int:
        return self._end - self.inner.cur_pos()

    def _check_read(self, size: int) -> None:
        if size > self._bytes_left():
            raise MaxBytesExceededError(
                f'cannot read {size} bytes at position {self.inner.cur_pos()}, '
                f'at most {self.max_bytes} bytes can be read'
            )

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def is_empty(self) -> bool:
        return self._bytes_left() <= 0 or self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        self._check_read(1)
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if not exact:
            n = min(n, self._bytes_left())
        self._check_read(n)
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._check_read(1)
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if not exact:
            # a short read is allowed, so it's clamped instead of failing
            n = min(n, self._bytes_left())
        self._check_read(n)
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        left = self._bytes_left()
        # XXX: reading one extra byte is enough to know whether the input goes past the limit
        if len(memoryview(self.inner.peek_bytes(left + 1, exact=False))) > left:
            raise MaxBytesExceededError(
                f'more than {self.max_bytes} bytes left to read at position {self.inner.cur_pos()}'
            )
        return self.inner.read_all()
