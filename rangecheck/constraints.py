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
from typing import Any

from pydantic import AfterValidator

from rangecheck.bounds import Range, make_range
from rangecheck.check import check_range
from rangecheck.const import Orderable


def bound[T: Orderable](val: T, min: T | None = None, max: T | None = None) -> T:
    """
    Check ``min <= val <= max``, either limit optional. Returns val, or
    raises OutOfRangeError.
    """
    return check_range(val, make_range(min, max, inclusive_end=max is not None))


def within(range_: Range[Any]) -> AfterValidator:
    """
    Pydantic validator for use with Annotated, e.g.

        hour: Annotated[int, within(Bounded(0, 24))]

    OutOfRangeError is a ValueError, so pydantic reports it as a
    ValidationError against the field.
    """
    return AfterValidator(lambda x: check_range(x, range_))
