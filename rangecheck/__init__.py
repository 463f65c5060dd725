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
import importlib.metadata as importlib_metadata

from rangecheck.bounds import (
    Bound,
    Bounded,
    BoundedInclusive,
    Bounds,
    LowerBounded,
    Range,
    Unbounded,
    UpperBounded,
    UpperBoundedInclusive,
    bounds,
    from_bounds,
    make_range,
    map_range,
)
from rangecheck.check import OutOfRangeError, RangeCheckError, check_range, to_display_string
from rangecheck.const import BoundKind, Orderable
from rangecheck.contains import contains, is_within


def _set_version() -> str:
    """Set the package version from the project metadata in pyproject.toml."""
    from warnings import warn

    fallback_version = "0.0.0"

    try:
        # __package__ allows for the case where __name__ is "__main__"
        version = importlib_metadata.version(__package__ or __name__)
    except importlib_metadata.PackageNotFoundError:
        version = fallback_version

    if version == fallback_version:
        msg = (
            f"Package version will be {fallback_version} because Python could not find "
            f"package {__package__ or __name__} in project metadata. Either the "
            "version was not set in pyproject.toml or the package was not installed. "
            "If developing code, please install the package in editable "
            "mode with `pip install -e .`"
        )
        warn(msg)
    return version


__version__ = _set_version()

__all__ = [
    "Bound",
    "BoundKind",
    "Bounded",
    "BoundedInclusive",
    "Bounds",
    "LowerBounded",
    "Orderable",
    "OutOfRangeError",
    "Range",
    "RangeCheckError",
    "Unbounded",
    "UpperBounded",
    "UpperBoundedInclusive",
    "bounds",
    "check_range",
    "contains",
    "from_bounds",
    "is_within",
    "make_range",
    "map_range",
    "to_display_string",
]
