"""Sequence abstraction — pull handles and element kinds.

The engine never asks a sequence for its length or for random access. It only
pulls "the next element, if any" through a PullHandle, which wraps a single
``iter()`` call over a caller-owned iterable. Pulling is destructive: a handle
over a generator cannot be rewound.

ElementKind is the per-kind adapter the strategies are generic over. It binds
a literal formatter and an equality test; strategies never branch on kind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import islice
from typing import TYPE_CHECKING, Any, Final

from seqmatch._literal import format_float, format_generic, format_int, format_long

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


class _Absent:
    """Marker for "the sequence had no further element"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


class PullHandle[T]:
    """Destructive, one-element-at-a-time handle over an iterable.

    When ``record`` is set, every pulled element is kept in ``consumed`` so
    diagnostics can render the prefix that was already taken.
    """

    __slots__ = ("_iterator", "consumed", "pulled", "_record")

    def __init__(self, source: Iterable[T], *, record: bool = False) -> None:
        self._iterator: Iterator[T] = iter(source)
        self._record = record
        self.consumed: list[T] = []
        self.pulled = 0

    def pull(self) -> T | _Absent:
        """Pull the next element, or ABSENT once the sequence is exhausted."""
        item = next(self._iterator, ABSENT)
        if item is not ABSENT:
            self.pulled += 1
            if self._record:
                self.consumed.append(item)  # type: ignore[arg-type]
        return item

    def take(self, count: int) -> list[T]:
        """Pull up to ``count`` further elements."""
        taken: list[T] = []
        for _ in range(count):
            item = self.pull()
            if item is ABSENT:
                break
            taken.append(item)  # type: ignore[arg-type]
        return taken

    def drain(self) -> list[T]:
        """Pull everything that is left.

        Never returns for an infinite sequence.
        """
        rest: list[T] = []
        while (item := self.pull()) is not ABSENT:
            rest.append(item)  # type: ignore[arg-type]
        return rest


class Restartable[T]:
    """An iterable that builds a fresh iterator from a factory on every pass.

    Use it for expected-side sequences that must be constructed anew for each
    evaluation, e.g. ``Restartable(lambda: itertools.count())``.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterable[T]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"Restartable({self._factory!r})"


def is_single_use(source: Iterable[Any]) -> bool:
    """True for iterators/generators, which a second pass would find empty."""
    return iter(source) is source


def peek(source: Iterable[Any], count: int) -> list[Any] | None:
    """Materialize the first ``count`` elements of a restartable source.

    Returns None for single-use sources, which must not be consumed here.
    """
    if is_single_use(source):
        return None
    return list(islice(source, count))


# ═══════════════════════════════════════════════════════════════════════════════
# Element kinds
# ═══════════════════════════════════════════════════════════════════════════════


def null_safe_equals(a: Any, b: Any) -> bool:
    """Value equality where None only equals None."""
    if a is None or b is None:
        return a is b
    return bool(a == b)


def float_equals(a: Any, b: Any) -> bool:
    """Null-safe equality that also treats NaN as equal to NaN."""
    if (
        isinstance(a, float)
        and isinstance(b, float)
        and math.isnan(a)
        and math.isnan(b)
    ):
        return True
    return null_safe_equals(a, b)


@dataclass(frozen=True, slots=True)
class ElementKind:
    """Capability set a strategy needs for one element kind."""

    name: str
    format_literal: Callable[[Any], str]
    equals: Callable[[Any, Any], bool]


GENERIC: Final = ElementKind("generic", format_generic, null_safe_equals)
INT: Final = ElementKind("int", format_int, null_safe_equals)
LONG: Final = ElementKind("long", format_long, null_safe_equals)
FLOAT: Final = ElementKind("float", format_float, float_equals)

KINDS: Final = {kind.name: kind for kind in (GENERIC, INT, LONG, FLOAT)}
