"""SequenceMatcher — binds a strategy into a hamcrest-compatible matcher.

The façade owns no sequence. Each ``matches`` call opens one PullHandle over
the actual iterable, runs the strategy, and keeps only the resulting Mismatch
record (materialized values, never the handle), plus a reference to the
actual object it came from. Assertion frameworks such as
hamcrest's ``assert_that`` call ``describe_to`` and ``describe_mismatch``
after ``matches``; both render from that record, because the actual side
cannot be pulled a second time.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from hamcrest.core.base_matcher import BaseMatcher

from seqmatch._sequence import PullHandle

if TYPE_CHECKING:
    from collections.abc import Callable

    from hamcrest.core.description import Description

    from seqmatch._strategies import Mismatch, Strategy

logger = logging.getLogger(__name__)


class MatcherError(Exception):
    """Errors from matcher construction and configuration."""


class InvalidLimitError(MatcherError):
    """A starts-with limit was negative or not an integer."""

    def __init__(self, limit: object) -> None:
        self.limit = limit
        super().__init__(f"limit must be a non-negative integer, got {limit!r}")


def _reference(item: object) -> Callable[[], object]:
    """Weak reference to ``item`` where its type allows one, else a strong one.

    Lists and built-in iterators do not support weak references; they are
    held until the next evaluation.
    """
    try:
        return weakref.ref(item)
    except TypeError:
        return lambda: item


def check_limit(limit: object) -> int:
    """Validate a starts-with limit at construction time.

    Raises:
        InvalidLimitError: If ``limit`` is not a non-negative int.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidLimitError(limit)
    return limit


class SequenceMatcher(BaseMatcher[Iterable[Any]]):
    """Matcher over iterables driven by a single strategy.

    INV: a non-iterable actual value is a mismatch, never an exception.
    """

    def __init__(self, strategy: Strategy) -> None:
        self.strategy = strategy
        self._last_actual: Callable[[], object] | None = None
        self._last: Mismatch | None = None

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool:
        if not isinstance(item, Iterable):
            self._forget()
            if mismatch_description is not None:
                self._describe_non_iterable(item, mismatch_description)
            return False

        mismatch = self._evaluate(item)
        if mismatch is not None and mismatch_description is not None:
            self.strategy.describe_mismatch(mismatch, mismatch_description)
        return mismatch is None

    def _matches(self, item: Any) -> bool:
        return self.matches(item)

    def describe_to(self, description: Description) -> None:
        self.strategy.describe_to(description, self._last)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not isinstance(item, Iterable):
            self._describe_non_iterable(item, mismatch_description)
            return
        if self._is_last(item):
            mismatch = self._last
        else:
            mismatch = self._evaluate(item)
        if mismatch is None:
            mismatch_description.append_text("was a matching sequence")
            return
        self.strategy.describe_mismatch(mismatch, mismatch_description)

    def _evaluate(self, item: Iterable[Any]) -> Mismatch | None:
        handle = PullHandle(item, record=self.strategy.records_actual)
        mismatch = self.strategy.evaluate(handle)
        logger.debug(
            "%s pulled %d item(s): %s",
            self.strategy.name,
            handle.pulled,
            "match" if mismatch is None else mismatch.reason.value,
        )
        self._last_actual = _reference(item)
        self._last = mismatch
        return mismatch

    def _is_last(self, item: object) -> bool:
        return self._last_actual is not None and self._last_actual() is item

    def _forget(self) -> None:
        self._last_actual = None
        self._last = None

    @staticmethod
    def _describe_non_iterable(item: Any, description: Description) -> None:
        description.append_text("was ").append_description_of(item)

    def __repr__(self) -> str:
        return f"SequenceMatcher({self.strategy!r})"
