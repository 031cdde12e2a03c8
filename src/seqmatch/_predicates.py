"""Element predicates for the match family of strategies.

A predicate is anything satisfying hamcrest's Matcher protocol: it evaluates a
single element and describes itself. Plain callables are adapted into
self-describing predicates by ``satisfies``.

The pattern predicate uses ``google-re2`` for guaranteed linear-time matching.
RE2 does not support backreferences or lookahead/lookbehind because they
require backtracking. Patterns using them are rejected at compile time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import re2
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.matcher import Matcher

from seqmatch._matcher import MatcherError

if TYPE_CHECKING:
    from collections.abc import Callable

    from hamcrest.core.description import Description


class CallablePredicate(BaseMatcher[Any]):
    """A plain callable with a fixed self-description."""

    def __init__(self, function: Callable[[Any], bool], description: str) -> None:
        self.function = function
        self.description = description

    def _matches(self, item: Any) -> bool:
        return bool(self.function(item))

    def describe_to(self, description: Description) -> None:
        description.append_text(self.description)


def satisfies(
    function: Callable[[Any], bool], description: str | None = None
) -> CallablePredicate:
    """Wrap a callable as a self-describing predicate.

    Without an explicit description the callable's name is used:

    >>> str(satisfies(str.isdigit))
    'a value satisfying isdigit'
    """
    if description is None:
        name = getattr(function, "__name__", None) or repr(function)
        description = f"a value satisfying {name}"
    return CallablePredicate(function, description)


def as_predicate(predicate: Matcher[Any] | Callable[[Any], bool]) -> Matcher[Any]:
    """Return hamcrest matchers unchanged and wrap plain callables.

    Raises:
        MatcherError: If ``predicate`` is neither a Matcher nor callable.
    """
    if isinstance(predicate, Matcher):
        return predicate
    if callable(predicate):
        return satisfies(predicate)
    msg = f"expected a hamcrest Matcher or a callable, got {type(predicate).__name__}"
    raise MatcherError(msg)


@dataclass(frozen=True, eq=False)
class PatternPredicate(BaseMatcher[Any]):
    """Regular expression search over string elements.

    Uses search (not fullmatch) to match anywhere in the string. Non-string
    and None elements never match.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def _matches(self, item: Any) -> bool:
        if not isinstance(item, str):
            return False
        return self._compiled.search(item) is not None

    def describe_to(self, description: Description) -> None:
        description.append_text("a string matching the pattern ").append_description_of(
            self.pattern
        )


def matches_pattern(pattern: str) -> PatternPredicate:
    """Predicate for string elements containing a match of an RE2 pattern."""
    return PatternPredicate(pattern)
