"""Tests for static catalogue checks."""

from __future__ import annotations

from seqmatch import (
    RegistryBuilder,
    all_match,
    by_family,
    by_strategy,
    default_registry,
    find_name_clashes,
    find_undeprecated_relatives,
    starts_with_sequence,
    starts_with_sequence_int,
    yields_nothing,
)
from seqmatch._api_check import hamcrest_names


class TestHamcrestNames:
    def test_contains_public_matchers(self) -> None:
        names = hamcrest_names()
        assert "starts_with" in names
        assert "assert_that" in names
        assert not any(name.startswith("_") for name in names)


class TestFindNameClashes:
    def test_core_catalogue_has_no_live_clash(self) -> None:
        assert find_name_clashes(default_registry()) == []

    def test_deprecated_clash_is_tolerated(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher(
                "starts_with",
                starts_with_sequence,
                strategy="starts_with_sequence",
                deprecated=True,
            )
            .build()
        )
        assert find_name_clashes(registry) == []

    def test_reports_undeprecated_clash(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher("starts_with", starts_with_sequence, strategy="starts_with_sequence")
            .matcher("yields_nothing", yields_nothing, strategy="yields_nothing")
            .build()
        )
        assert find_name_clashes(registry) == ["starts_with"]

    def test_custom_reserved_names(self) -> None:
        assert find_name_clashes(default_registry(), reserved={"all_match", "nope"}) == [
            "all_match"
        ]


class TestFindUndeprecatedRelatives:
    def test_core_catalogue_is_consistent(self) -> None:
        assert find_undeprecated_relatives(default_registry()) == []

    def test_reports_family_member_left_behind(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher(
                "starts_with",
                starts_with_sequence,
                strategy="starts_with_sequence",
                deprecated=True,
            )
            .matcher("starts_with_int", starts_with_sequence_int, strategy="starts_with_sequence")
            .matcher("all_match", all_match, strategy="all_match")
            .build()
        )
        assert find_undeprecated_relatives(registry) == ["starts_with_int"]

    def test_nothing_deprecated(self) -> None:
        registry = RegistryBuilder().matcher("all_match", all_match, strategy="all_match").build()
        assert find_undeprecated_relatives(registry) == []

    def test_strategy_policy_groups_more_widely(self) -> None:
        relatives = find_undeprecated_relatives(default_registry(), related=by_strategy)
        assert relatives == [
            "starts_with_sequence",
            "starts_with_sequence_float",
            "starts_with_sequence_int",
            "starts_with_sequence_long",
        ]

    def test_custom_policy(self) -> None:
        registry = (
            RegistryBuilder()
            .matcher("a", yields_nothing, strategy="yields_nothing", deprecated=True)
            .matcher("b", yields_nothing, strategy="yields_nothing", family="other")
            .build()
        )
        assert find_undeprecated_relatives(registry, related=by_family) == []
        assert find_undeprecated_relatives(registry, related=lambda e: e.kind) == ["b"]
