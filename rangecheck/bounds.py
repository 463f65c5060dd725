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
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, override

from rangecheck.const import BoundKind, Orderable

# SECTION: Range kinds --------------------------------
# Pure data. Membership lives in rangecheck.contains, so that
# every kind is handled in one place.


@dataclass(frozen=True)
class Bounded[T: Orderable]:
    """
    Half-open range, ``start <= x < end``. An inverted range
    (start > end) is legal and contains nothing.
    """

    start: T
    end: T

    @override
    def __str__(self) -> str:
        return f"{self.start} .. {self.end}"


@dataclass(frozen=True)
class BoundedInclusive[T: Orderable]:
    """
    Closed range, ``start <= x <= end``
    """

    start: T
    end: T

    @override
    def __str__(self) -> str:
        return f"{self.start} ..= {self.end}"


@dataclass(frozen=True)
class LowerBounded[T: Orderable]:
    """
    ``start <= x``, no upper limit
    """

    start: T

    @override
    def __str__(self) -> str:
        return f"{self.start} .."


@dataclass(frozen=True)
class UpperBounded[T: Orderable]:
    """
    ``x < end``, no lower limit
    """

    end: T

    @override
    def __str__(self) -> str:
        return f".. {self.end}"


@dataclass(frozen=True)
class UpperBoundedInclusive[T: Orderable]:
    """
    ``x <= end``, no lower limit
    """

    end: T

    @override
    def __str__(self) -> str:
        return f"..= {self.end}"


@dataclass(frozen=True)
class Unbounded:
    """
    The full range; contains everything
    """

    @override
    def __str__(self) -> str:
        return ".."


type Range[T: Orderable] = (
    Bounded[T]
    | BoundedInclusive[T]
    | LowerBounded[T]
    | UpperBounded[T]
    | UpperBoundedInclusive[T]
    | Unbounded
)


def make_range(
    start: Any | None = None,
    end: Any | None = None,
    *,
    inclusive_end: bool = False,
) -> Range[Any]:
    """
    Pick the range kind matching whichever endpoints are given.
    None means "no limit at that end".
    """
    if end is None and inclusive_end:
        raise ValueError("inclusive_end requires an end to include")
    match (start is None, end is None):
        case (True, True):
            return Unbounded()
        case (False, True):
            return LowerBounded(start)
        case (True, False):
            return UpperBoundedInclusive(end) if inclusive_end else UpperBounded(end)
        case _:
            return BoundedInclusive(start, end) if inclusive_end else Bounded(start, end)


# SECTION: Bounds --------------------------------
# Any range kind destructured into its two ends. Lets callers
# treat all kinds uniformly, e.g. to convert endpoint types.


@dataclass(frozen=True)
class Bound[T: Orderable]:
    kind: BoundKind
    value: T | None = None

    def __post_init__(self):
        if (self.kind == BoundKind.UNBOUNDED) != (self.value is None):
            raise ValueError(
                f"a {self.kind} bound {'cannot' if self.value is not None else 'must'} carry a value"
            )

    def map[U: Orderable](self, func: Callable[[T], U]) -> "Bound[U]":
        if self.value is None:
            return Bound(BoundKind.UNBOUNDED)
        return Bound(self.kind, func(self.value))


_UNBOUNDED: Bound[Any] = Bound(BoundKind.UNBOUNDED)


@dataclass(frozen=True)
class Bounds[T: Orderable]:
    lower: Bound[T]
    upper: Bound[T]

    def map[U: Orderable](self, func: Callable[[T], U]) -> "Bounds[U]":
        return Bounds(self.lower.map(func), self.upper.map(func))


def bounds[T: Orderable](range_: Range[T]) -> Bounds[T]:
    match range_:
        case Bounded(start, end):
            return Bounds(Bound(BoundKind.INCLUDED, start), Bound(BoundKind.EXCLUDED, end))
        case BoundedInclusive(start, end):
            return Bounds(Bound(BoundKind.INCLUDED, start), Bound(BoundKind.INCLUDED, end))
        case LowerBounded(start):
            return Bounds(Bound(BoundKind.INCLUDED, start), _UNBOUNDED)
        case UpperBounded(end):
            return Bounds(_UNBOUNDED, Bound(BoundKind.EXCLUDED, end))
        case UpperBoundedInclusive(end):
            return Bounds(_UNBOUNDED, Bound(BoundKind.INCLUDED, end))
        case Unbounded():
            return Bounds(_UNBOUNDED, _UNBOUNDED)
        case _:
            raise TypeError(f"{type(range_).__name__!r} is not a range kind")


def from_bounds[T: Orderable](bounds_: Bounds[T]) -> Range[T]:
    lower, upper = bounds_.lower, bounds_.upper
    if lower.kind == BoundKind.EXCLUDED:
        raise ValueError("no range kind has an excluded lower bound")
    if upper.kind == BoundKind.UNBOUNDED:
        return Unbounded() if lower.kind == BoundKind.UNBOUNDED else LowerBounded(lower.value)
    inclusive_end = upper.kind == BoundKind.INCLUDED
    return make_range(lower.value, upper.value, inclusive_end=inclusive_end)


def map_range[T: Orderable, U: Orderable](range_: Range[T], func: Callable[[T], U]) -> Range[U]:
    """
    Same range kind, with ``func`` applied to each endpoint.
    """
    return from_bounds(bounds(range_).map(func))
