"""Tests for the matcher catalogue and config-driven loading."""

from __future__ import annotations

import itertools

import pytest
from hamcrest import assert_that, not_

from seqmatch import (
    FLOAT,
    GENERIC,
    INT,
    LONG,
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    InvalidConfigError,
    InvalidLimitError,
    MatcherConfig,
    MatcherError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    UnknownMatcherError,
    all_match,
    compile_predicate,
    default_registry,
    parse_matcher_config,
    register_core_matchers,
    yields_nothing,
)
from seqmatch._config import BuiltInPredicate, NotPredicate
from seqmatch._registry import family_of


def load(data: dict) -> object:
    return default_registry().load_matcher(parse_matcher_config(data))


class TestRegistryBuilder:
    def test_empty_registry(self) -> None:
        registry = RegistryBuilder().build()
        assert registry.matcher_count == 0
        assert registry.names() == []

    def test_default_constructed_registry_is_empty(self) -> None:
        assert Registry().matcher_count == 0

    def test_register_and_lookup(self) -> None:
        registry = (
            RegistryBuilder().matcher("empty", yields_nothing, strategy="yields_nothing").build()
        )
        assert registry.contains("empty")
        entry = registry.entry("empty")
        assert entry.factory is yields_nothing
        assert entry.kind is GENERIC
        assert entry.family == "empty"
        assert entry.deprecated is False

    def test_family_defaults_to_name_without_kind_suffix(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher("all_match_long", all_match, strategy="all_match", kind=LONG)
            .build()
        )
        assert registry.entry("all_match_long").family == "all_match"

    def test_explicit_family(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher("empty", yields_nothing, strategy="yields_nothing", family="emptiness")
            .build()
        )
        assert registry.entry("empty").family == "emptiness"

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(MatcherError, match="unknown strategy 'cycles'"):
            RegistryBuilder().matcher("x", yields_nothing, strategy="cycles")

    def test_build_is_a_snapshot(self) -> None:
        builder = RegistryBuilder()
        registry = builder.build()
        builder.matcher("empty", yields_nothing, strategy="yields_nothing")
        assert registry.matcher_count == 0


class TestFamilyOf:
    @pytest.mark.parametrize(
        ("name", "family"),
        [
            ("all_match", "all_match"),
            ("all_match_int", "all_match"),
            ("starts_with_long", "starts_with"),
            ("yields_same_as_float", "yields_same_as"),
        ],
    )
    def test_strips_kind_suffix(self, name: str, family: str) -> None:
        assert family_of(name) == family


class TestDefaultRegistry:
    def test_every_family_in_every_kind(self) -> None:
        registry = default_registry()
        assert registry.matcher_count == 40
        for name in ("yields_same_as", "starts_with_items", "starts_with", "yields_nothing"):
            for suffix in ("", "_int", "_long", "_float"):
                assert registry.contains(name + suffix)

    def test_kinds(self) -> None:
        registry = default_registry()
        assert registry.entry("any_match").kind is GENERIC
        assert registry.entry("any_match_int").kind is INT
        assert registry.entry("any_match_long").kind is LONG
        assert registry.entry("any_match_float").kind is FLOAT

    def test_only_starts_with_is_deprecated(self) -> None:
        deprecated = [e.name for e in default_registry().entries() if e.deprecated]
        assert deprecated == [
            "starts_with",
            "starts_with_float",
            "starts_with_int",
            "starts_with_long",
        ]

    def test_deprecated_entries_share_the_sequence_strategy(self) -> None:
        assert default_registry().entry("starts_with_int").strategy == "starts_with_sequence"

    def test_is_cached(self) -> None:
        assert default_registry() is default_registry()

    def test_register_core_matchers_on_custom_builder(self) -> None:
        registry = register_core_matchers(RegistryBuilder()).build()
        assert registry.names() == default_registry().names()


class TestLoadMatcher:
    def test_unknown_matcher(self) -> None:
        with pytest.raises(UnknownMatcherError) as excinfo:
            load({"type": "no_such_matcher"})
        assert excinfo.value.name == "no_such_matcher"
        assert "all_match" in excinfo.value.available

    def test_unknown_matcher_on_empty_registry(self) -> None:
        with pytest.raises(UnknownMatcherError, match="no matchers are registered"):
            RegistryBuilder().build().load_matcher(MatcherConfig(type="x"))

    def test_expected_source_is_restartable(self) -> None:
        matcher = load({"type": "yields_same_as_int", "expected": {"range": [3]}})
        assert matcher.matches(iter([0, 1, 2]))
        assert matcher.matches(iter([0, 1, 2]))
        assert not matcher.matches(iter([0, 1]))
        assert str(matcher) == "Sequence of [<0>,<1>,<2>]"

    def test_infinite_expected_source(self) -> None:
        matcher = load(
            {"type": "starts_with_sequence_long", "expected": {"count_from": 0}, "limit": 3}
        )
        assert_that(itertools.count(), matcher)
        assert str(matcher) == "Sequence starting with [<0L>,<1L>,<2L>]"

    def test_yields_exactly_with_matchers(self) -> None:
        matcher = load(
            {
                "type": "yields_exactly_int",
                "matchers": [{"equal_to": 10}, {"not": {"equal_to": 20}}],
            }
        )
        assert_that(iter([10, 30]), matcher)
        assert str(matcher) == "Sequence of [<10>,not <20>]"

    def test_starts_with_items(self) -> None:
        matcher = load({"type": "starts_with_items", "items": ["a", "b"]})
        assert_that(iter("abc"), matcher)

    def test_all_match_with_regex(self) -> None:
        matcher = load({"type": "all_match", "predicate": {"regex": "^[a-z]+$"}})
        assert_that(iter(["ab", "cd"]), matcher)
        assert_that(iter(["ab", "C"]), not_(matcher))

    def test_starts_with_any(self) -> None:
        matcher = load(
            {"type": "starts_with_any_int", "predicate": {"equal_to": -1}, "limit": 10}
        )
        assert str(matcher) == "Any of first 10 to match <<-1>>"

    def test_loading_deprecated_alias_warns(self) -> None:
        with pytest.warns(DeprecationWarning):
            load({"type": "starts_with", "expected": {"items": [1]}, "limit": 1})

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({"type": "yields_same_as"}, "requires 'expected'"),
            ({"type": "starts_with_sequence", "expected": {"items": []}}, "requires 'limit'"),
            ({"type": "yields_exactly"}, "requires 'items'"),
            ({"type": "any_match"}, "requires 'predicate'"),
            (
                {"type": "yields_exactly", "items": [1], "matchers": [{"equal_to": 1}]},
                "got both",
            ),
            (
                {"type": "starts_with_items", "matchers": [{"equal_to": 1}]},
                "does not accept 'matchers'",
            ),
        ],
    )
    def test_invalid_config(self, data: dict, message: str) -> None:
        with pytest.raises(InvalidConfigError, match=message):
            load(data)

    def test_negative_limit(self) -> None:
        with pytest.raises(InvalidLimitError):
            load({"type": "starts_with_all", "predicate": {"equal_to": 1}, "limit": -1})


class TestCompilePredicate:
    def test_comparison(self) -> None:
        predicate = compile_predicate(BuiltInPredicate("less_than_or_equal_to", 20))
        assert predicate.matches(20)
        assert str(predicate) == "a value less than or equal to <20>"

    def test_strings(self) -> None:
        assert compile_predicate(BuiltInPredicate("starts_with_string", "ab")).matches("abc")
        assert compile_predicate(BuiltInPredicate("ends_with_string", "bc")).matches("abc")
        assert compile_predicate(BuiltInPredicate("contains_string", "b")).matches("abc")

    def test_not(self) -> None:
        predicate = compile_predicate(NotPredicate(BuiltInPredicate("equal_to", 20)))
        assert str(predicate) == "not <20>"

    def test_invalid_regex(self) -> None:
        with pytest.raises(InvalidConfigError, match="invalid regex pattern"):
            compile_predicate(BuiltInPredicate("regex", "(a)\\1"))

    def test_pattern_length_limits(self) -> None:
        compile_predicate(BuiltInPredicate("contains_string", "x" * MAX_PATTERN_LENGTH))
        with pytest.raises(PatternTooLongError):
            compile_predicate(BuiltInPredicate("contains_string", "x" * (MAX_PATTERN_LENGTH + 1)))
        with pytest.raises(PatternTooLongError) as excinfo:
            compile_predicate(BuiltInPredicate("regex", "x" * (MAX_REGEX_PATTERN_LENGTH + 1)))
        assert excinfo.value.max == MAX_REGEX_PATTERN_LENGTH

    def test_unknown_variant(self) -> None:
        with pytest.raises(InvalidConfigError, match="unknown predicate config"):
            compile_predicate(BuiltInPredicate("close_to", 1))
