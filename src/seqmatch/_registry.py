"""Matcher catalogue for config-driven construction and API inspection.

The registry maps public matcher names to their factories plus metadata
(strategy, element kind, family, deprecation). It serves two consumers:
- load_matcher() turns a MatcherConfig into a SequenceMatcher
- seqmatch._api_check inspects the metadata without evaluating anything

Architecture:
- RegistryBuilder → .build() → Registry (immutable)
- register_core_matchers() registers the whole public surface

Example::

    registry = default_registry()
    config = parse_matcher_config({"type": "all_match_int", "predicate": {"less_than": 3}})
    matcher = registry.load_matcher(config)
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from hamcrest import (
    contains_string,
    ends_with,
    equal_to,
    greater_than,
    greater_than_or_equal_to,
    less_than,
    less_than_or_equal_to,
    not_,
    starts_with,
)

from seqmatch import _sequence_matchers as sm
from seqmatch._config import BuiltInPredicate, NotPredicate
from seqmatch._matcher import MatcherError
from seqmatch._predicates import PatternPredicate
from seqmatch._sequence import FLOAT, GENERIC, INT, LONG, ElementKind, Restartable

if TYPE_CHECKING:
    from collections.abc import Callable

    from hamcrest.core.matcher import Matcher

    from seqmatch._config import MatcherConfig, PredicateConfig
    from seqmatch._matcher import SequenceMatcher

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096

STRATEGIES = frozenset(
    {
        "yields_same_as",
        "yields_exactly",
        "all_match",
        "any_match",
        "starts_with_sequence",
        "starts_with_items",
        "starts_with_all",
        "starts_with_any",
        "yields_nothing",
    }
)

_KIND_SUFFIXES = ("_int", "_long", "_float")

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownMatcherError(MatcherError):
    """A matcher name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher: {name!r} (registered: {registered})"
        else:
            msg = f"unknown matcher: {name!r} (no matchers are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class PatternTooLongError(MatcherError):
    """A string predicate pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Entries and builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[..., SequenceMatcher]


def family_of(name: str) -> str:
    """Name without its element-kind suffix: ``all_match_int`` → ``all_match``."""
    for suffix in _KIND_SUFFIXES:
        if name.endswith(suffix):
            return name.removesuffix(suffix)
    return name


@dataclass(frozen=True, slots=True)
class CatalogueEntry:
    """A registered matcher factory and its metadata."""

    name: str
    factory: MatcherFactory
    strategy: str
    kind: ElementKind = GENERIC
    family: str = ""
    deprecated: bool = False


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register matcher factories by name, then call build() to produce an
    immutable Registry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CatalogueEntry] = {}

    def matcher(
        self,
        name: str,
        factory: MatcherFactory,
        *,
        strategy: str,
        kind: ElementKind = GENERIC,
        family: str | None = None,
        deprecated: bool = False,
    ) -> RegistryBuilder:
        """Register a matcher factory under ``name``.

        ``family`` defaults to the name without its kind suffix.

        Raises:
            MatcherError: If ``strategy`` is not a known strategy.
        """
        if strategy not in STRATEGIES:
            msg = f"unknown strategy {strategy!r} for matcher {name!r}"
            raise MatcherError(msg)
        self._entries[name] = CatalogueEntry(
            name=name,
            factory=factory,
            strategy=strategy,
            kind=kind,
            family=family if family is not None else family_of(name),
            deprecated=deprecated,
        )
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(_entries=MappingProxyType(dict(self._entries)))


_KINDS_IN_ORDER = (GENERIC, INT, LONG, FLOAT)

_CORE_FAMILIES: tuple[tuple[str, tuple[MatcherFactory, ...]], ...] = (
    ("yields_same_as", (sm.yields_same_as, sm.yields_same_as_int, sm.yields_same_as_long, sm.yields_same_as_float)),
    ("yields_exactly", (sm.yields_exactly, sm.yields_exactly_int, sm.yields_exactly_long, sm.yields_exactly_float)),
    ("all_match", (sm.all_match, sm.all_match_int, sm.all_match_long, sm.all_match_float)),
    ("any_match", (sm.any_match, sm.any_match_int, sm.any_match_long, sm.any_match_float)),
    ("starts_with_sequence", (sm.starts_with_sequence, sm.starts_with_sequence_int, sm.starts_with_sequence_long, sm.starts_with_sequence_float)),
    ("starts_with_items", (sm.starts_with_items, sm.starts_with_items_int, sm.starts_with_items_long, sm.starts_with_items_float)),
    ("starts_with_all", (sm.starts_with_all, sm.starts_with_all_int, sm.starts_with_all_long, sm.starts_with_all_float)),
    ("starts_with_any", (sm.starts_with_any, sm.starts_with_any_int, sm.starts_with_any_long, sm.starts_with_any_float)),
    ("yields_nothing", (sm.yields_nothing, sm.yields_nothing_int, sm.yields_nothing_long, sm.yields_nothing_float)),
)  # fmt: skip

_DEPRECATED_FAMILIES: tuple[tuple[str, tuple[MatcherFactory, ...]], ...] = (
    ("starts_with_sequence", (sm.starts_with, sm.starts_with_int, sm.starts_with_long, sm.starts_with_float)),
)  # fmt: skip


def register_core_matchers(builder: RegistryBuilder) -> RegistryBuilder:
    """Register every public seqmatch factory, deprecated aliases included."""
    for families, deprecated in ((_CORE_FAMILIES, False), (_DEPRECATED_FAMILIES, True)):
        for strategy, factories in families:
            for kind, factory in zip(_KINDS_IN_ORDER, factories, strict=True):
                builder.matcher(
                    factory.__name__,
                    factory,
                    strategy=strategy,
                    kind=kind,
                    deprecated=deprecated,
                )
    return builder


@functools.cache
def default_registry() -> Registry:
    """The registry of all core matchers (built once)."""
    return register_core_matchers(RegistryBuilder()).build()


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable catalogue of matcher factories.

    Constructed via RegistryBuilder. Use load_matcher() to compile config
    into a SequenceMatcher.
    """

    _entries: MappingProxyType[str, CatalogueEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: MatcherConfig) -> SequenceMatcher:
        """Load a SequenceMatcher from configuration.

        Expected-side sources are wrapped in a Restartable, so the loaded
        matcher can be evaluated any number of times.

        Raises:
            UnknownMatcherError: config type not registered
            InvalidConfigError: fields missing or invalid for the strategy
            PatternTooLongError: a string pattern exceeds its length limit
            InvalidLimitError: limit is negative
        """
        entry = self.entry(config.type)
        match entry.strategy:
            case "yields_same_as":
                args: tuple[Any, ...] = (self._expected(config),)
            case "starts_with_sequence":
                args = (self._expected(config), self._limit(config))
            case "yields_exactly":
                args = self._items(config, allow_matchers=True)
            case "starts_with_items":
                args = self._items(config, allow_matchers=False)
            case "all_match" | "any_match":
                args = (self._predicate(config),)
            case "starts_with_all" | "starts_with_any":
                args = (self._predicate(config), self._limit(config))
            case "yields_nothing":
                args = ()
            case _:  # pragma: no cover
                msg = f"unknown strategy: {entry.strategy!r}"
                raise InvalidConfigError(msg)
        return entry.factory(*args)

    @property
    def matcher_count(self) -> int:
        """Number of registered matchers."""
        return len(self._entries)

    def contains(self, name: str) -> bool:
        """Check if a matcher name is registered."""
        return name in self._entries

    def names(self) -> list[str]:
        """Return all registered matcher names (sorted)."""
        return sorted(self._entries.keys())

    def entries(self) -> list[CatalogueEntry]:
        """Return all entries, sorted by name."""
        return [self._entries[name] for name in self.names()]

    def entry(self, name: str) -> CatalogueEntry:
        """Look up one entry.

        Raises:
            UnknownMatcherError: If ``name`` is not registered.
        """
        found = self._entries.get(name)
        if found is None:
            raise UnknownMatcherError(name, list(self._entries.keys()))
        return found

    # ── Private loading methods ────────────────────────────────────────────

    @staticmethod
    def _expected(config: MatcherConfig) -> Restartable[Any]:
        if config.expected is None:
            msg = f"{config.type} requires 'expected'"
            raise InvalidConfigError(msg)
        return Restartable(config.expected.open)

    @staticmethod
    def _limit(config: MatcherConfig) -> int:
        if config.limit is None:
            msg = f"{config.type} requires 'limit'"
            raise InvalidConfigError(msg)
        return config.limit

    @staticmethod
    def _items(config: MatcherConfig, *, allow_matchers: bool) -> tuple[Any, ...]:
        if config.items is not None and config.matchers is not None:
            msg = f"{config.type} takes 'items' or 'matchers', got both"
            raise InvalidConfigError(msg)
        if config.matchers is not None:
            if not allow_matchers:
                msg = f"{config.type} does not accept 'matchers'"
                raise InvalidConfigError(msg)
            return tuple(compile_predicate(m) for m in config.matchers)
        if config.items is None:
            msg = f"{config.type} requires 'items'"
            raise InvalidConfigError(msg)
        return config.items

    @staticmethod
    def _predicate(config: MatcherConfig) -> Matcher[Any]:
        if config.predicate is None:
            msg = f"{config.type} requires 'predicate'"
            raise InvalidConfigError(msg)
        return compile_predicate(config.predicate)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicate compilation
# ═══════════════════════════════════════════════════════════════════════════════

_COMPARISONS: dict[str, Callable[[Any], Matcher[Any]]] = {
    "equal_to": equal_to,
    "less_than": less_than,
    "less_than_or_equal_to": less_than_or_equal_to,
    "greater_than": greater_than,
    "greater_than_or_equal_to": greater_than_or_equal_to,
}

_STRING_PREDICATES: dict[str, Callable[[str], Matcher[Any]]] = {
    "contains_string": contains_string,
    "starts_with_string": starts_with,
    "ends_with_string": ends_with,
}


def _check_pattern_length(variant: str, value: str) -> None:
    """Enforce pattern length limits on string predicates."""
    if variant == "regex":
        if len(value) > MAX_REGEX_PATTERN_LENGTH:
            raise PatternTooLongError(len(value), MAX_REGEX_PATTERN_LENGTH)
    elif len(value) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(value), MAX_PATTERN_LENGTH)


def compile_predicate(config: PredicateConfig) -> Matcher[Any]:
    """Compile a predicate config into a hamcrest matcher."""
    match config:
        case NotPredicate(predicate=inner):
            return not_(compile_predicate(inner))
        case BuiltInPredicate(variant=variant, value=value) if variant in _COMPARISONS:
            return _COMPARISONS[variant](value)
        case BuiltInPredicate(variant=variant, value=value) if variant in _STRING_PREDICATES:
            _check_pattern_length(variant, value)
            return _STRING_PREDICATES[variant](value)
        case BuiltInPredicate(variant="regex", value=value):
            _check_pattern_length("regex", value)
            try:
                return PatternPredicate(value)
            except MatcherError as e:
                msg = f"invalid regex pattern: {e}"
                raise InvalidConfigError(msg) from e
        case _:
            msg = f"unknown predicate config: {config!r}"
            raise InvalidConfigError(msg)
