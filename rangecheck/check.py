# rangecheck
#
# Copyright (C) 2024, 2025 Genome Research Ltd.
#
# Author: Alex Byrne <ab63@sanger.ac.uk>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
import copy
import logging
from collections.abc import Callable
from typing import Any, override

from rangecheck.bounds import Range, map_range
from rangecheck.const import Orderable
from rangecheck.contains import contains

logger = logging.getLogger(__name__)


class RangeCheckError(ValueError):
    pass


class OutOfRangeError[T: Orderable](RangeCheckError):
    """
    Raised by ``check_range`` when a value falls outside the range it was
    checked against. Holds its own copies of both, so it is safe to keep
    around after the values that caused it have changed or gone.
    """

    __value: T
    __range: Range[T]

    def __init__(self, value: T, range_: Range[T]):
        self.__value = value
        self.__range = range_
        # args are kept so the error pickles and reprs sensibly
        super().__init__(value, range_)

    @property
    def value(self) -> T:
        return self.__value

    @property
    def range(self) -> Range[T]:
        return self.__range

    @override
    def __str__(self) -> str:
        return f"value ({self.__value}) outside of range ({self.__range})"

    def convert[U: Orderable](self, func: Callable[[T], U]) -> "OutOfRangeError[U]":
        """
        The same error with ``func`` applied to the value and to each end
        of the range, e.g. ``err.convert(float)`` to widen an int error.
        """
        return OutOfRangeError(func(self.__value), map_range(self.__range, func))


def check_range[T: Orderable](value: T, range_: Range[T]) -> T:
    """
    Return ``value`` itself if it lies within ``range_``, otherwise raise
    OutOfRangeError carrying copies of the value and the range.
    """
    if contains(range_, value):
        return value
    logger.debug(f"range check failed: {value!r} not in {range_!r}")
    raise OutOfRangeError(copy.deepcopy(value), copy.deepcopy(range_))


def to_display_string(error: OutOfRangeError[Any]) -> str:
    return str(error)
