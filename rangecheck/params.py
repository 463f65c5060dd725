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
# SECTION: Params --------------------------------
# A range described as plain config, e.g. a table
# decoded from TOML or JSON, validated by pydantic

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_validator

from rangecheck.bounds import Range, bounds, make_range
from rangecheck.const import BoundKind


class RangeParams(BaseModel):
    """
    start - inclusive lower limit, or None for no lower limit
    end - upper limit, or None for no upper limit
    inclusive_end - whether end itself is within the range
    """

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        strict=True, frozen=True, extra="forbid"
    )

    start: Any = None
    end: Any = None
    inclusive_end: bool = False

    @model_validator(mode="after")
    def _check_inclusive_end(self) -> Self:
        if self.inclusive_end and self.end is None:
            raise ValueError("inclusive_end is set but no end was given")
        return self

    @model_validator(mode="after")
    def _check_endpoints_orderable(self) -> Self:
        # endpoints must compare with themselves and with each other
        ends = [(name, val) for name, val in (("start", self.start), ("end", self.end)) if val is not None]
        for name, val in ends:
            try:
                _ = val <= val
            except ArithmeticError:
                pass  # unordered, e.g. Decimal nan
            except TypeError:
                raise ValueError(
                    f"{name} {val!r} of type {type(val).__name__!r} is not orderable"
                ) from None
        if len(ends) == 2:
            try:
                _ = self.start <= self.end
            except ArithmeticError:
                pass
            except TypeError:
                raise ValueError(
                    f"start {self.start!r} ({type(self.start).__name__}) and end {self.end!r} "
                    f"({type(self.end).__name__}) cannot be compared"
                ) from None
        return self

    def to_range(self) -> Range[Any]:
        return make_range(self.start, self.end, inclusive_end=self.inclusive_end)

    @classmethod
    def from_range(cls, range_: Range[Any]) -> Self:
        bounds_ = bounds(range_)
        return cls(
            start=bounds_.lower.value,
            end=bounds_.upper.value,
            inclusive_end=bounds_.upper.kind == BoundKind.INCLUDED,
        )
