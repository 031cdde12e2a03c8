"""Public construction functions — one family per strategy and element kind.

Each generic function takes a ``kind`` keyword; the ``_int``, ``_long`` and
``_float`` variants fix it. Kinds only change literal rendering and equality:

    >>> from hamcrest import assert_that, less_than
    >>> assert_that(range(3), all_match_long(less_than(3)))

Predicates may be hamcrest matchers or plain callables.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

from seqmatch._matcher import SequenceMatcher, check_limit
from seqmatch._predicates import as_predicate
from seqmatch._sequence import FLOAT, GENERIC, INT, LONG, ElementKind
from seqmatch._strategies import (
    AllMatch,
    AnyMatch,
    StartsWithAll,
    StartsWithAny,
    StartsWithSequence,
    YieldsExactly,
    YieldsNothing,
    YieldsSameAs,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from hamcrest.core.matcher import Matcher

    type PredicateLike = Matcher[Any] | Callable[[Any], bool]


# ── yields_same_as ──────────────────────────────────────────────────────────


def yields_same_as(
    expected: Iterable[Any], *, kind: ElementKind = GENERIC
) -> SequenceMatcher:
    """Match a sequence yielding the same elements as ``expected``, in order.

    Both sides are pulled in lockstep. Two equal infinite sequences never
    finish comparing. Pass a ``Restartable`` as ``expected`` if the matcher
    is evaluated more than once.
    """
    return SequenceMatcher(YieldsSameAs(expected, kind))


def yields_same_as_int(expected: Iterable[int]) -> SequenceMatcher:
    return yields_same_as(expected, kind=INT)


def yields_same_as_long(expected: Iterable[int]) -> SequenceMatcher:
    return yields_same_as(expected, kind=LONG)


def yields_same_as_float(expected: Iterable[float]) -> SequenceMatcher:
    return yields_same_as(expected, kind=FLOAT)


# ── yields_exactly ──────────────────────────────────────────────────────────


def yields_exactly(*items: Any, kind: ElementKind = GENERIC) -> SequenceMatcher:
    """Match a sequence yielding exactly ``items``.

    Items may be literal values or hamcrest sub-matchers. At most
    ``len(items) + 1`` elements are pulled.
    """
    return SequenceMatcher(YieldsExactly(items, kind))


def yields_exactly_int(*items: Any) -> SequenceMatcher:
    return yields_exactly(*items, kind=INT)


def yields_exactly_long(*items: Any) -> SequenceMatcher:
    return yields_exactly(*items, kind=LONG)


def yields_exactly_float(*items: Any) -> SequenceMatcher:
    return yields_exactly(*items, kind=FLOAT)


# ── all_match / any_match ───────────────────────────────────────────────────


def all_match(predicate: PredicateLike, *, kind: ElementKind = GENERIC) -> SequenceMatcher:
    """Match a sequence whose every element satisfies ``predicate``."""
    return SequenceMatcher(AllMatch(as_predicate(predicate), kind))


def all_match_int(predicate: PredicateLike) -> SequenceMatcher:
    return all_match(predicate, kind=INT)


def all_match_long(predicate: PredicateLike) -> SequenceMatcher:
    return all_match(predicate, kind=LONG)


def all_match_float(predicate: PredicateLike) -> SequenceMatcher:
    return all_match(predicate, kind=FLOAT)


def any_match(predicate: PredicateLike, *, kind: ElementKind = GENERIC) -> SequenceMatcher:
    """Match a sequence with at least one element satisfying ``predicate``.

    A failing evaluation materializes the whole sequence for its diagnostic,
    so it does not finish on an infinite, never-matching sequence.
    """
    return SequenceMatcher(AnyMatch(as_predicate(predicate), kind))


def any_match_int(predicate: PredicateLike) -> SequenceMatcher:
    return any_match(predicate, kind=INT)


def any_match_long(predicate: PredicateLike) -> SequenceMatcher:
    return any_match(predicate, kind=LONG)


def any_match_float(predicate: PredicateLike) -> SequenceMatcher:
    return any_match(predicate, kind=FLOAT)


# ── starts_with_sequence / starts_with_items ────────────────────────────────


def starts_with_sequence(
    expected: Iterable[Any], limit: int, *, kind: ElementKind = GENERIC
) -> SequenceMatcher:
    """Match a sequence whose first ``limit`` elements equal those of ``expected``.

    Neither side is pulled more than ``limit`` times, so both may be infinite.

    Raises:
        InvalidLimitError: If ``limit`` is negative.
    """
    return SequenceMatcher(StartsWithSequence(expected, check_limit(limit), kind))


def starts_with_sequence_int(expected: Iterable[int], limit: int) -> SequenceMatcher:
    return starts_with_sequence(expected, limit, kind=INT)


def starts_with_sequence_long(expected: Iterable[int], limit: int) -> SequenceMatcher:
    return starts_with_sequence(expected, limit, kind=LONG)


def starts_with_sequence_float(expected: Iterable[float], limit: int) -> SequenceMatcher:
    return starts_with_sequence(expected, limit, kind=FLOAT)


def starts_with_items(*items: Any, kind: ElementKind = GENERIC) -> SequenceMatcher:
    """Match a sequence that starts with ``items``; anything may follow."""
    return starts_with_sequence(items, len(items), kind=kind)


def starts_with_items_int(*items: int) -> SequenceMatcher:
    return starts_with_items(*items, kind=INT)


def starts_with_items_long(*items: int) -> SequenceMatcher:
    return starts_with_items(*items, kind=LONG)


def starts_with_items_float(*items: float) -> SequenceMatcher:
    return starts_with_items(*items, kind=FLOAT)


# ── starts_with_all / starts_with_any ───────────────────────────────────────


def starts_with_all(
    predicate: PredicateLike, limit: int, *, kind: ElementKind = GENERIC
) -> SequenceMatcher:
    """Match a sequence whose first ``limit`` elements all satisfy ``predicate``.

    Raises:
        InvalidLimitError: If ``limit`` is negative.
    """
    return SequenceMatcher(StartsWithAll(as_predicate(predicate), check_limit(limit), kind))


def starts_with_all_int(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_all(predicate, limit, kind=INT)


def starts_with_all_long(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_all(predicate, limit, kind=LONG)


def starts_with_all_float(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_all(predicate, limit, kind=FLOAT)


def starts_with_any(
    predicate: PredicateLike, limit: int, *, kind: ElementKind = GENERIC
) -> SequenceMatcher:
    """Match a sequence with a ``predicate`` match among its first ``limit`` elements.

    Raises:
        InvalidLimitError: If ``limit`` is negative.
    """
    return SequenceMatcher(StartsWithAny(as_predicate(predicate), check_limit(limit), kind))


def starts_with_any_int(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_any(predicate, limit, kind=INT)


def starts_with_any_long(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_any(predicate, limit, kind=LONG)


def starts_with_any_float(predicate: PredicateLike, limit: int) -> SequenceMatcher:
    return starts_with_any(predicate, limit, kind=FLOAT)


# ── yields_nothing ──────────────────────────────────────────────────────────


def yields_nothing(*, kind: ElementKind = GENERIC) -> SequenceMatcher:
    """Match an empty sequence. At most two elements are pulled."""
    return SequenceMatcher(YieldsNothing(kind))


def yields_nothing_int() -> SequenceMatcher:
    return yields_nothing(kind=INT)


def yields_nothing_long() -> SequenceMatcher:
    return yields_nothing(kind=LONG)


def yields_nothing_float() -> SequenceMatcher:
    return yields_nothing(kind=FLOAT)


# ── Deprecated ──────────────────────────────────────────────────────────────
# ``starts_with`` shadows hamcrest's string matcher of the same name.


def _deprecated_alias(old: str, new: str) -> None:
    warnings.warn(
        f"{old}() is deprecated, use {new}() instead",
        DeprecationWarning,
        stacklevel=3,
    )


def starts_with(
    expected: Iterable[Any], limit: int, *, kind: ElementKind = GENERIC
) -> SequenceMatcher:
    """Deprecated alias of ``starts_with_sequence``."""
    _deprecated_alias("starts_with", "starts_with_sequence")
    return starts_with_sequence(expected, limit, kind=kind)


def starts_with_int(expected: Iterable[int], limit: int) -> SequenceMatcher:
    """Deprecated alias of ``starts_with_sequence_int``."""
    _deprecated_alias("starts_with_int", "starts_with_sequence_int")
    return starts_with_sequence(expected, limit, kind=INT)


def starts_with_long(expected: Iterable[int], limit: int) -> SequenceMatcher:
    """Deprecated alias of ``starts_with_sequence_long``."""
    _deprecated_alias("starts_with_long", "starts_with_sequence_long")
    return starts_with_sequence(expected, limit, kind=LONG)


def starts_with_float(expected: Iterable[float], limit: int) -> SequenceMatcher:
    """Deprecated alias of ``starts_with_sequence_float``."""
    _deprecated_alias("starts_with_float", "starts_with_sequence_float")
    return starts_with_sequence(expected, limit, kind=FLOAT)
