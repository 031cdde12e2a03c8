"""Matching strategies — the lazy comparison algorithms.

Every strategy is a frozen dataclass holding its expected data, implemented
once and parametrized by an ElementKind. A strategy pulls from a PullHandle
over the actual sequence and returns None on a match, or a Mismatch record
describing the first divergence. Rendering works from the Mismatch record
alone, so the actual sequence is never pulled again for diagnostics.

Pull bounds (the termination argument of each strategy):

| Strategy           | Actual-side pulls                                 |
|--------------------|---------------------------------------------------|
| YieldsSameAs       | until divergence; on mismatch both sides drained  |
| YieldsExactly      | at most N + 1                                     |
| AllMatch           | until the first failing item                      |
| AnyMatch           | until the first matching item                     |
| StartsWithSequence | at most L (expected side: at most L)              |
| StartsWithAll      | at most L                                         |
| StartsWithAny      | at most L                                         |
| YieldsNothing      | at most 2                                         |

YieldsSameAs over two equal infinite sequences, and AnyMatch over a
never-matching infinite sequence, do not terminate.
"""

from __future__ import annotations

import enum
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from hamcrest.core.matcher import Matcher

from seqmatch._description import (
    append_expectation_list,
    append_literal,
    append_literal_list,
    append_predicate,
)
from seqmatch._sequence import ABSENT, GENERIC, ElementKind, PullHandle, peek

if TYPE_CHECKING:
    from hamcrest.core.description import Description


class Reason(enum.Enum):
    """Why a strategy rejected the actual sequence."""

    ITEM = "item"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NO_MATCH = "no_match"
    NOT_EMPTY = "not_empty"


@dataclass(frozen=True, slots=True)
class Mismatch:
    """First point of divergence between actual and expected.

    ``index`` is None for length and exhaustion mismatches. ``item`` is the
    offending actual element, or ABSENT when the actual side ran out.
    """

    reason: Reason
    index: int | None = None
    item: Any = ABSENT
    actual_items: tuple[Any, ...] = ()
    expected_items: tuple[Any, ...] = ()
    has_more: bool = False
    exhausted_after: int | None = None


def _divergence(want: Any, got: Any) -> Reason:
    if want is ABSENT:
        return Reason.TOO_LONG
    if got is ABSENT:
        return Reason.TOO_SHORT
    return Reason.ITEM


def _append_failed_item(description: Description, mismatch: Mismatch) -> None:
    if mismatch.reason is Reason.ITEM:
        description.append_text(f" where item {mismatch.index} failed to match")


# ═══════════════════════════════════════════════════════════════════════════════
# Whole-sequence strategies
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class YieldsSameAs:
    """Lockstep equality against another sequence."""

    expected: Iterable[Any]
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "yields_same_as"
    records_actual: ClassVar[bool] = True

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        expected = PullHandle(self.expected, record=True)
        index = 0
        while True:
            want = expected.pull()
            got = actual.pull()
            if want is ABSENT and got is ABSENT:
                return None
            if want is ABSENT or got is ABSENT or not self.kind.equals(want, got):
                break
            index += 1

        reason = _divergence(want, got)
        expected.drain()
        actual.drain()
        return Mismatch(
            reason=reason,
            index=index if reason is Reason.ITEM else None,
            item=got,
            actual_items=tuple(actual.consumed),
            expected_items=tuple(expected.consumed),
        )

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("Sequence of ")
        if last is not None:
            append_literal_list(description, self.kind, last.expected_items)
        elif isinstance(self.expected, Collection):
            append_literal_list(description, self.kind, self.expected)
        else:
            description.append_text(f"the items of {self.expected!r}")

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("Sequence of ")
        append_literal_list(description, self.kind, mismatch.actual_items)
        _append_failed_item(description, mismatch)


@dataclass(frozen=True, slots=True)
class YieldsExactly:
    """Exact match against a finite list of values and/or sub-matchers."""

    items: tuple[Any, ...]
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "yields_exactly"
    records_actual: ClassVar[bool] = True

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        for index, want in enumerate(self.items):
            got = actual.pull()
            if got is ABSENT:
                return Mismatch(Reason.TOO_SHORT, actual_items=tuple(actual.consumed))
            if not self._accepts(want, got):
                return Mismatch(
                    Reason.ITEM,
                    index=index,
                    item=got,
                    actual_items=tuple(actual.consumed),
                )
        extra = actual.pull()
        if extra is not ABSENT:
            return Mismatch(
                Reason.TOO_LONG, item=extra, actual_items=tuple(actual.consumed)
            )
        return None

    def _accepts(self, want: Any, got: Any) -> bool:
        if isinstance(want, Matcher):
            return want.matches(got)
        return self.kind.equals(want, got)

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("Sequence of ")
        append_expectation_list(description, self.kind, self.items)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("Sequence of ")
        append_literal_list(description, self.kind, mismatch.actual_items)
        _append_failed_item(description, mismatch)
        if mismatch.reason is Reason.TOO_LONG:
            description.append_text(f" yielding more than {len(self.items)} elements")


@dataclass(frozen=True, slots=True)
class AllMatch:
    """Every element satisfies the predicate. Empty sequences match."""

    predicate: Matcher[Any]
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "all_match"
    records_actual: ClassVar[bool] = False

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        index = 0
        while (item := actual.pull()) is not ABSENT:
            if not self.predicate.matches(item):
                return Mismatch(Reason.ITEM, index=index, item=item)
            index += 1
        return None

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("All to match ")
        append_predicate(description, self.predicate)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text(f"Item {mismatch.index} failed to match: ")
        append_literal(description, self.kind, mismatch.item)


@dataclass(frozen=True, slots=True)
class AnyMatch:
    """Some element satisfies the predicate. Empty sequences never match."""

    predicate: Matcher[Any]
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "any_match"
    records_actual: ClassVar[bool] = True

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        while (item := actual.pull()) is not ABSENT:
            if self.predicate.matches(item):
                return None
        return Mismatch(Reason.NO_MATCH, actual_items=tuple(actual.consumed))

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("Any to match ")
        append_predicate(description, self.predicate)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("None of these items matched: ")
        append_literal_list(description, self.kind, mismatch.actual_items)


# ═══════════════════════════════════════════════════════════════════════════════
# Bounded prefix strategies
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class StartsWithSequence:
    """The first ``limit`` elements equal those of the expected sequence.

    Both sides may be infinite: neither is pulled more than ``limit`` times.
    Both sides ending together before ``limit`` counts as a match.
    """

    expected: Iterable[Any]
    limit: int
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "starts_with_sequence"
    records_actual: ClassVar[bool] = True

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        expected = PullHandle(self.expected, record=True)
        for index in range(self.limit):
            want = expected.pull()
            got = actual.pull()
            if want is ABSENT and got is ABSENT:
                return None
            if want is ABSENT or got is ABSENT or not self.kind.equals(want, got):
                reason = _divergence(want, got)
                expected.take(self.limit - expected.pulled)
                return Mismatch(
                    reason=reason,
                    index=index if reason is Reason.ITEM else None,
                    item=got,
                    actual_items=tuple(actual.consumed),
                    expected_items=tuple(expected.consumed),
                )
        return None

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("Sequence starting with ")
        prefix = last.expected_items if last is not None else peek(self.expected, self.limit)
        if prefix is None:
            description.append_text(f"the first {self.limit} items of {self.expected!r}")
        else:
            append_literal_list(description, self.kind, prefix)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("Sequence starting with ")
        append_literal_list(description, self.kind, mismatch.actual_items)
        _append_failed_item(description, mismatch)
        if mismatch.reason is Reason.TOO_SHORT:
            description.append_text(" and is then exhausted")


@dataclass(frozen=True, slots=True)
class StartsWithAll:
    """Each of the first ``limit`` elements satisfies the predicate.

    A sequence with fewer than ``limit`` elements does not match.
    """

    predicate: Matcher[Any]
    limit: int
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "starts_with_all"
    records_actual: ClassVar[bool] = False

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        for index in range(self.limit):
            item = actual.pull()
            if item is ABSENT:
                return Mismatch(Reason.TOO_SHORT, exhausted_after=index)
            if not self.predicate.matches(item):
                return Mismatch(Reason.ITEM, index=index, item=item)
        return None

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text(f"First {self.limit} to match ")
        append_predicate(description, self.predicate)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        if mismatch.reason is Reason.TOO_SHORT:
            description.append_text(
                f"the sequence was exhausted after {mismatch.exhausted_after} items"
            )
            return
        description.append_text(f"Item {mismatch.index} failed to match: ")
        append_literal(description, self.kind, mismatch.item)


@dataclass(frozen=True, slots=True)
class StartsWithAny:
    """At least one of the first ``limit`` elements satisfies the predicate."""

    predicate: Matcher[Any]
    limit: int
    kind: ElementKind = GENERIC

    name: ClassVar[str] = "starts_with_any"
    records_actual: ClassVar[bool] = True

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        for _ in range(self.limit):
            item = actual.pull()
            if item is ABSENT:
                break
            if self.predicate.matches(item):
                return None
        return Mismatch(Reason.NO_MATCH, actual_items=tuple(actual.consumed))

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text(f"Any of first {self.limit} to match ")
        append_predicate(description, self.predicate)

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("None of these items matched: ")
        append_literal_list(description, self.kind, mismatch.actual_items)


@dataclass(frozen=True, slots=True)
class YieldsNothing:
    """The sequence is empty.

    A second element is pulled after a non-empty first pull, only to tell
    "is then exhausted" apart from "will yield even more elements".
    """

    kind: ElementKind = GENERIC

    name: ClassVar[str] = "yields_nothing"
    records_actual: ClassVar[bool] = False

    def evaluate(self, actual: PullHandle[Any]) -> Mismatch | None:
        first = actual.pull()
        if first is ABSENT:
            return None
        return Mismatch(
            Reason.NOT_EMPTY, item=first, has_more=actual.pull() is not ABSENT
        )

    def describe_to(self, description: Description, last: Mismatch | None) -> None:
        description.append_text("A sequence yielding no elements")

    def describe_mismatch(self, mismatch: Mismatch, description: Description) -> None:
        description.append_text("the sequence started with ")
        append_literal(description, self.kind, mismatch.item)
        if mismatch.has_more:
            description.append_text(" and will yield even more elements")
        else:
            description.append_text(" and is then exhausted")


type Strategy = (
    YieldsSameAs
    | YieldsExactly
    | AllMatch
    | AnyMatch
    | StartsWithSequence
    | StartsWithAll
    | StartsWithAny
    | YieldsNothing
)
