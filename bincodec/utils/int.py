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

"""
Fallible conversions between integer widths.

Python integers are unbounded, so a "conversion" here is a range check against the target width that raises
`ConversionOverflowError` instead of truncating or wrapping around.

>>> int_bounds(length=1, signed=False)
(0, 255)
>>> int_bounds(length=4, signed=True)
(-2147483648, 2147483647)
>>> try_convert_int(300, length=2, signed=False)
300
>>> try:
...     try_convert_int(300, length=1, signed=False)
... except OverflowError as e:
...     print(e)
300 is out of range [0, 255]
>>> try:
...     try_into_usize(-1)
... except OverflowError as e:
...     print(e.value, e.min_value)
-1 0
"""

import sys

from bincodec.serialization.exceptions import ConversionOverflowError

# size of a platform-sized unsigned integer, the equivalent of C's size_t
USIZE_LENGTH = (sys.maxsize.bit_length() + 1) // 8
USIZE_MAX = sys.maxsize * 2 + 1


def int_bounds(*, length: int, signed: bool) -> tuple[int, int]:
    """ Inclusive lower and upper bounds of an integer with the given byte-length and signedness.
    """
    if length < 1:
        raise ValueError('length must be positive')
    bits = length * 8
    if signed:
        return -(2**(bits - 1)), 2**(bits - 1) - 1
    else:
        return 0, 2**bits - 1


def try_convert_int(value: int, *, length: int, signed: bool) -> int:
    """ Check that `value` fits in the given width and return it, raise `ConversionOverflowError` otherwise.
    """
    lower_bound, upper_bound = int_bounds(length=length, signed=signed)
    if not lower_bound <= value <= upper_bound:
        raise ConversionOverflowError(value, lower_bound, upper_bound)
    return value


def try_into_usize(value: int) -> int:
    """ Convert a decoded integer into a platform size (for counts and lengths).
    """
    return try_convert_int(value, length=USIZE_LENGTH, signed=False)
