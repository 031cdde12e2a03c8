"""Config types for building sequence matchers from plain data.

Config-driven construction path:
  dict → parse_matcher_config() → MatcherConfig → Registry.load_matcher() → SequenceMatcher

Relationship to runtime types:

| Config type       | Runtime type                           |
|-------------------|----------------------------------------|
| MatcherConfig     | SequenceMatcher                        |
| SourceConfig      | Restartable (expected side) / iterator |
| BuiltInPredicate  | hamcrest Matcher / PatternPredicate    |
| NotPredicate      | hamcrest ``not_``                      |

Example (YAML)::

    type: starts_with_any_int
    limit: 10
    predicate: {equal_to: -1}
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════

_SOURCE_VARIANTS = ("items", "count_from", "repeat", "range")

_PREDICATE_VARIANTS = frozenset(
    {
        "equal_to",
        "less_than",
        "less_than_or_equal_to",
        "greater_than",
        "greater_than_or_equal_to",
        "contains_string",
        "starts_with_string",
        "ends_with_string",
        "regex",
    }
)


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """A sequence described as data.

    Variants:
    - ``{items: [..]}`` — finite list
    - ``{count_from: n, step: s}`` — infinite arithmetic progression
    - ``{repeat: v}`` — infinite repetition of one value
    - ``{range: [start, stop, step]}`` — finite integer range
    """

    variant: str
    value: Any
    step: Any = 1

    def open(self) -> Iterator[Any]:
        """Build a fresh iterator over the described sequence."""
        match self.variant:
            case "items":
                return iter(self.value)
            case "count_from":
                return itertools.count(self.value, self.step)
            case "repeat":
                return itertools.repeat(self.value)
            case "range":
                return iter(range(*self.value))
            case _:  # pragma: no cover
                msg = f"unknown source variant: {self.variant!r}"
                raise ConfigParseError(msg)


@dataclass(frozen=True, slots=True)
class BuiltInPredicate:
    """Built-in element predicate, e.g. ``{less_than: 3}``."""

    variant: str
    value: Any


@dataclass(frozen=True, slots=True)
class NotPredicate:
    """Inverts the inner predicate."""

    predicate: PredicateConfig


type PredicateConfig = BuiltInPredicate | NotPredicate


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Configuration for one catalogue matcher.

    Which optional fields are required depends on the matcher's strategy;
    Registry.load_matcher() enforces that.
    """

    type: str
    expected: SourceConfig | None = None
    items: tuple[Any, ...] | None = None
    matchers: tuple[PredicateConfig, ...] | None = None
    predicate: PredicateConfig | None = None
    limit: int | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_matcher_config(data: dict[str, Any]) -> MatcherConfig:
    """Parse a dict into a MatcherConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    matcher_type = data.get("type")
    if matcher_type is None:
        msg = "missing required field 'type'"
        raise ConfigParseError(msg)
    if not isinstance(matcher_type, str):
        msg = f"'type' must be a string, got {type(matcher_type).__name__}"
        raise ConfigParseError(msg)

    expected = None
    if "expected" in data:
        expected = parse_source_config(data["expected"])

    items = None
    if "items" in data:
        items = tuple(_require_list(data["items"], "items"))

    matchers = None
    if "matchers" in data:
        matchers = tuple(
            _parse_predicate(p) for p in _require_list(data["matchers"], "matchers")
        )

    predicate = None
    if "predicate" in data:
        predicate = _parse_predicate(data["predicate"])

    limit = data.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int)):
        msg = f"'limit' must be an integer, got {type(limit).__name__}"
        raise ConfigParseError(msg)

    return MatcherConfig(
        type=matcher_type,
        expected=expected,
        items=items,
        matchers=matchers,
        predicate=predicate,
        limit=limit,
    )


def parse_source_config(data: dict[str, Any]) -> SourceConfig:
    """Parse a source dict, e.g. ``{count_from: 0}``.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"source must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for variant in _SOURCE_VARIANTS:
        if variant not in data:
            continue
        value = data[variant]
        if variant == "items":
            value = tuple(_require_list(value, "items"))
        elif variant == "range":
            bounds = _require_list(value, "range")
            if not 1 <= len(bounds) <= 3 or not all(isinstance(b, int) for b in bounds):
                msg = f"'range' must be a list of 1 to 3 integers, got {bounds!r}"
                raise ConfigParseError(msg)
            value = tuple(bounds)
        elif variant == "count_from" and not isinstance(value, int | float):
            msg = f"'count_from' must be a number, got {type(value).__name__}"
            raise ConfigParseError(msg)
        return SourceConfig(variant=variant, value=value, step=data.get("step", 1))

    msg = f"source must contain one of {list(_SOURCE_VARIANTS)}, got keys: {sorted(data.keys())}"
    raise ConfigParseError(msg)


def _parse_predicate(data: dict[str, Any]) -> PredicateConfig:
    """Parse a predicate dict: a single built-in variant or ``{not: {...}}``."""
    if not isinstance(data, dict):
        msg = f"predicate must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if len(data) != 1:
        msg = f"predicate must have exactly one key, got: {sorted(data.keys())}"
        raise ConfigParseError(msg)

    ((variant, value),) = data.items()
    if variant == "not":
        return NotPredicate(predicate=_parse_predicate(value))
    if variant not in _PREDICATE_VARIANTS:
        expected = sorted(_PREDICATE_VARIANTS | {"not"})
        msg = f"unknown predicate {variant!r}, expected one of {expected}"
        raise ConfigParseError(msg)
    if variant.endswith("_string") or variant == "regex":
        if not isinstance(value, str):
            msg = f"predicate {variant} value must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
    return BuiltInPredicate(variant=variant, value=value)


def _require_list(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        msg = f"'{name}' must be a list, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value
