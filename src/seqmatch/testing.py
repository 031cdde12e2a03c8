"""Test utilities for seqmatch.

Provides sequences that count how often they are pulled, so tests and
examples can check that a matcher stops as early as it claims to.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class CountingSequence:
    """Single-use iterator that counts successful pulls.

    >>> from seqmatch import starts_with_sequence
    >>> actual = CountingSequence(itertools.count())
    >>> starts_with_sequence(range(10), 10).matches(actual)
    True
    >>> actual.pulls
    10
    """

    def __init__(self, source: Iterable[Any]) -> None:
        self._iterator = iter(source)
        self.pulls = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        item = next(self._iterator)
        self.pulls += 1
        return item


def naturals(start: int = 0) -> CountingSequence:
    """Infinite counting sequence ``start, start + 1, ...``."""
    return CountingSequence(itertools.count(start))


def naturals_float(start: float = 0.0) -> CountingSequence:
    """Infinite counting sequence of floats ``start, start + 1.0, ...``."""
    return CountingSequence(itertools.count(float(start), 1.0))
