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

from rangecheck.bounds import (
    Bounded,
    BoundedInclusive,
    LowerBounded,
    Range,
    Unbounded,
    UpperBounded,
    UpperBoundedInclusive,
)
from rangecheck.const import Orderable


def contains[T: Orderable](range_: Range[T], value: T) -> bool:
    """
    Decide whether ``value`` lies within ``range_`` using ordering comparisons only.

    Pairs that are unordered deny membership rather than raise - float nan
    already compares False, while decimal.Decimal nan raises InvalidOperation
    (an ArithmeticError), which is caught here.
    """
    try:
        match range_:
            case Bounded(start, end):
                return bool(value >= start and value < end)
            case BoundedInclusive(start, end):
                return bool(value >= start and value <= end)
            case LowerBounded(start):
                return bool(value >= start)
            case UpperBounded(end):
                return bool(value < end)
            case UpperBoundedInclusive(end):
                return bool(value <= end)
            case Unbounded():
                return True
            case _:
                raise TypeError(f"{type(range_).__name__!r} is not a range kind")
    except ArithmeticError:
        return False


def is_within[T: Orderable](value: T, range_: Range[T]) -> bool:
    """
    ``contains`` with the arguments the other way round.
    """
    return contains(range_, value)
