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
Errors raised while encoding or decoding.

Every error is raised at the point of failure with the context known there (index, counts, bytes). Compound
encoders never catch these to wrap them, so whatever reaches the caller is the original error.
"""

from typing import Optional, Union


class SerializationError(Exception):
    """Base class for all errors raised by the serialization system."""


class ValueMismatchError(SerializationError, ValueError):
    """A fixed byte did not match the byte that was read."""

    def __init__(self, index: int, expected: int, received: int) -> None:
        self.index = index
        self.expected = expected
        self.received = received
        super().__init__(f'byte at index {index} is 0x{received:02x}, expected 0x{expected:02x}')


class LengthError(SerializationError):
    """The number of bytes or elements differs from what is required.

    Either `obtained` or `expected` can be `None` when that side is unknown.
    """

    def __init__(self, message: str, *, obtained: Optional[int] = None, expected: Optional[int] = None) -> None:
        self.obtained = obtained
        self.expected = expected
        super().__init__(message)


class OutOfDataError(LengthError):
    """The input ended before everything that was required could be read."""


class LengthMismatchError(LengthError):
    """A container's length disagrees with the count that the encoder asserts."""


class UnknownLengthError(LengthError):
    """A container does not expose an exact length, so it cannot be safely encoded."""


class ConversionOverflowError(SerializationError, OverflowError):
    """A number does not fit in the target width."""

    def __init__(self, value: Union[int, float], min_value: Union[int, float], max_value: Union[int, float]) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f'{value} is out of range [{min_value}, {max_value}]')


class TextEncodingError(SerializationError, ValueError):
    """A byte or character has no mapping in the text table."""

    def __init__(
        self,
        message: str,
        *,
        table: str,
        position: int,
        byte: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        self.table = table
        self.position = position
        self.byte = byte
        self.character = character
        super().__init__(message)


class TooLongError(SerializationError):
    """A configured maximum of bytes or elements was exceeded."""


class TrailingDataError(SerializationError, ValueError):
    """Not all input was consumed."""


class ZeroWidthItemError(SerializationError, ValueError):
    """An item of a sequence without a count took no bytes, so the sequence has no way to end."""
