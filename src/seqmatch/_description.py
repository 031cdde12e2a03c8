"""Description building on top of hamcrest's Description protocol.

The hamcrest ``Description`` is the append-only text sink. These helpers add
the kind-aware literal rendering the strategies need, and FailureReport
assembles the two sections an assertion framework prints on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from seqmatch._literal import format_list

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hamcrest.core.description import Description

    from seqmatch._sequence import ElementKind


def append_literal(description: Description, kind: ElementKind, value: Any) -> Description:
    return description.append_text(kind.format_literal(value))


def append_literal_list(
    description: Description, kind: ElementKind, values: Iterable[Any]
) -> Description:
    return description.append_text(format_list(values, kind.format_literal))


def append_predicate(description: Description, predicate: Matcher[Any]) -> Description:
    """Append a predicate's self-description wrapped in angle brackets."""
    return description.append_text("<").append_description_of(predicate).append_text(">")


def append_expectation_list(
    description: Description, kind: ElementKind, items: Iterable[Any]
) -> Description:
    """Append a list mixing literal values and sub-matchers.

    Sub-matchers render through their own self-description; everything else
    renders as a literal of the given kind.
    """
    description.append_text("[")
    for position, item in enumerate(items):
        if position:
            description.append_text(",")
        if isinstance(item, Matcher):
            description.append_description_of(item)
        else:
            append_literal(description, kind, item)
    return description.append_text("]")


@dataclass(frozen=True, slots=True)
class FailureReport:
    """The expected and mismatch sections of a failed evaluation."""

    expected: str
    mismatch: str

    def __str__(self) -> str:
        return f"Expected: {self.expected}\n but: {self.mismatch}"


def report_failure(matcher: Matcher[Any], actual: Any) -> FailureReport | None:
    """Evaluate ``matcher`` against ``actual`` once.

    Returns None on a match, otherwise the assembled FailureReport.

    >>> from seqmatch import yields_nothing
    >>> print(report_failure(yields_nothing(), [3]))
    Expected: A sequence yielding no elements
     but: the sequence started with <3> and is then exhausted
    """
    mismatch = StringDescription()
    if matcher.matches(actual, mismatch):
        return None
    expected = StringDescription()
    expected.append_description_of(matcher)
    return FailureReport(expected=str(expected), mismatch=str(mismatch))
