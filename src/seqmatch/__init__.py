"""seqmatch — hamcrest matchers for lazily-produced, possibly infinite sequences.

All public types are exported from this module for flat imports:

    from seqmatch import yields_exactly, all_match, starts_with_sequence
"""

__version__ = "0.1.0"

# Config types — see seqmatch._config for details
from seqmatch._config import (
    BuiltInPredicate,
    ConfigParseError,
    MatcherConfig,
    NotPredicate,
    PredicateConfig,
    SourceConfig,
    parse_matcher_config,
    parse_source_config,
)
from seqmatch._description import FailureReport, report_failure
from seqmatch._matcher import InvalidLimitError, MatcherError, SequenceMatcher
from seqmatch._predicates import (
    CallablePredicate,
    PatternPredicate,
    as_predicate,
    matches_pattern,
    satisfies,
)
from seqmatch._sequence import (
    ABSENT,
    FLOAT,
    GENERIC,
    INT,
    KINDS,
    LONG,
    ElementKind,
    PullHandle,
    Restartable,
)

# Matcher façade
from seqmatch._sequence_matchers import (
    all_match,
    all_match_float,
    all_match_int,
    all_match_long,
    any_match,
    any_match_float,
    any_match_int,
    any_match_long,
    starts_with,
    starts_with_all,
    starts_with_all_float,
    starts_with_all_int,
    starts_with_all_long,
    starts_with_any,
    starts_with_any_float,
    starts_with_any_int,
    starts_with_any_long,
    starts_with_float,
    starts_with_int,
    starts_with_items,
    starts_with_items_float,
    starts_with_items_int,
    starts_with_items_long,
    starts_with_long,
    starts_with_sequence,
    starts_with_sequence_float,
    starts_with_sequence_int,
    starts_with_sequence_long,
    yields_exactly,
    yields_exactly_float,
    yields_exactly_int,
    yields_exactly_long,
    yields_nothing,
    yields_nothing_float,
    yields_nothing_int,
    yields_nothing_long,
    yields_same_as,
    yields_same_as_float,
    yields_same_as_int,
    yields_same_as_long,
)

# Strategies
from seqmatch._strategies import (
    AllMatch,
    AnyMatch,
    Mismatch,
    Reason,
    StartsWithAll,
    StartsWithAny,
    StartsWithSequence,
    Strategy,
    YieldsExactly,
    YieldsNothing,
    YieldsSameAs,
)

# Registry — see seqmatch._registry for details
from seqmatch._registry import (  # noqa: I001
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    CatalogueEntry,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    UnknownMatcherError,
    compile_predicate,
    default_registry,
    register_core_matchers,
)
from seqmatch._api_check import (
    by_family,
    by_strategy,
    find_name_clashes,
    find_undeprecated_relatives,
)

__all__ = [
    # Sequence abstraction
    "ABSENT",
    "PullHandle",
    "Restartable",
    "ElementKind",
    "GENERIC",
    "INT",
    "LONG",
    "FLOAT",
    "KINDS",
    # Strategies
    "Strategy",
    "Mismatch",
    "Reason",
    "YieldsSameAs",
    "YieldsExactly",
    "AllMatch",
    "AnyMatch",
    "StartsWithSequence",
    "StartsWithAll",
    "StartsWithAny",
    "YieldsNothing",
    # Matcher
    "SequenceMatcher",
    "MatcherError",
    "InvalidLimitError",
    "FailureReport",
    "report_failure",
    # Predicates
    "CallablePredicate",
    "PatternPredicate",
    "as_predicate",
    "satisfies",
    "matches_pattern",
    # Construction functions
    "yields_same_as",
    "yields_same_as_int",
    "yields_same_as_long",
    "yields_same_as_float",
    "yields_exactly",
    "yields_exactly_int",
    "yields_exactly_long",
    "yields_exactly_float",
    "all_match",
    "all_match_int",
    "all_match_long",
    "all_match_float",
    "any_match",
    "any_match_int",
    "any_match_long",
    "any_match_float",
    "starts_with_sequence",
    "starts_with_sequence_int",
    "starts_with_sequence_long",
    "starts_with_sequence_float",
    "starts_with_items",
    "starts_with_items_int",
    "starts_with_items_long",
    "starts_with_items_float",
    "starts_with_all",
    "starts_with_all_int",
    "starts_with_all_long",
    "starts_with_all_float",
    "starts_with_any",
    "starts_with_any_int",
    "starts_with_any_long",
    "starts_with_any_float",
    "yields_nothing",
    "yields_nothing_int",
    "yields_nothing_long",
    "yields_nothing_float",
    # Deprecated
    "starts_with",
    "starts_with_int",
    "starts_with_long",
    "starts_with_float",
    # Config types
    "SourceConfig",
    "BuiltInPredicate",
    "NotPredicate",
    "PredicateConfig",
    "MatcherConfig",
    "ConfigParseError",
    "parse_matcher_config",
    "parse_source_config",
    # Registry
    "CatalogueEntry",
    "RegistryBuilder",
    "Registry",
    "register_core_matchers",
    "default_registry",
    "compile_predicate",
    "UnknownMatcherError",
    "InvalidConfigError",
    "PatternTooLongError",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
    # API checks
    "find_name_clashes",
    "find_undeprecated_relatives",
    "by_family",
    "by_strategy",
]
