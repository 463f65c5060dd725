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
import random

import factory
import factory.random
from faker import Faker

from rangecheck import (
    Bounded,
    BoundedInclusive,
    LowerBounded,
    UpperBounded,
    UpperBoundedInclusive,
)

factory.random.reseed_random(2501)
random.seed(2501)

fake = Faker()
Faker.seed(2501)

# endpoints are kept in a narrow window so that generated
# values land on, either side of, and inside the range often
LIMIT = 50


def endpoint() -> int:
    return fake.pyint(min_value=-LIMIT, max_value=LIMIT)


def probe(start: int | None = None, end: int | None = None) -> int:
    """
    a value biased towards the interesting spots of a range - the endpoints themselves
    """
    hot = [x for x in (start, end) if x is not None]
    if hot and random.random() < 0.5:
        return random.choice(hot) + random.choice([-1, 0, 1])
    return random.randint(-2 * LIMIT, 2 * LIMIT)


class BoundedFactory(factory.Factory):
    class Meta:
        model = Bounded

    start = factory.LazyAttribute(lambda _: endpoint())
    # inverted ranges come up about half the time
    end = factory.LazyAttribute(lambda _: endpoint())


class BoundedInclusiveFactory(BoundedFactory):
    class Meta:
        model = BoundedInclusive


class LowerBoundedFactory(factory.Factory):
    class Meta:
        model = LowerBounded

    start = factory.LazyAttribute(lambda _: endpoint())


class UpperBoundedFactory(factory.Factory):
    class Meta:
        model = UpperBounded

    end = factory.LazyAttribute(lambda _: endpoint())


class UpperBoundedInclusiveFactory(UpperBoundedFactory):
    class Meta:
        model = UpperBoundedInclusive
