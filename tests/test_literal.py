"""Tests for literal formatting."""

from __future__ import annotations

from seqmatch._literal import (
    format_float,
    format_generic,
    format_int,
    format_list,
    format_long,
    quote,
)


class TestGeneric:
    def test_string_is_double_quoted(self) -> None:
        assert format_generic("foo") == '"foo"'

    def test_escapes(self) -> None:
        assert format_generic('say "hi"\n') == '"say \\"hi\\"\\n"'
        assert quote("a\\b\tc\r") == '"a\\\\b\\tc\\r"'

    def test_number_in_angle_brackets(self) -> None:
        assert format_generic(3) == "<3>"
        assert format_generic(3.5) == "<3.5>"

    def test_none(self) -> None:
        assert format_generic(None) == "None"

    def test_other_objects_use_str(self) -> None:
        assert format_generic(True) == "<True>"
        assert format_generic((1, 2)) == "<(1, 2)>"


class TestInt:
    def test_plain(self) -> None:
        assert format_int(3) == "<3>"
        assert format_int(-1) == "<-1>"

    def test_none(self) -> None:
        assert format_int(None) == "None"


class TestLong:
    def test_suffix(self) -> None:
        assert format_long(3) == "<3L>"
        assert format_long(-9_000_000_000) == "<-9000000000L>"

    def test_none(self) -> None:
        assert format_long(None) == "None"

    def test_non_integer_falls_back_to_generic(self) -> None:
        assert format_long("x") == '"x"'
        assert format_long(True) == "<True>"


class TestFloat:
    def test_always_has_decimal_point(self) -> None:
        assert format_float(3.0) == "<3.0>"
        assert format_float(3) == "<3.0>"
        assert format_float(0.5) == "<0.5>"

    def test_exponent_form_gets_decimal_point(self) -> None:
        assert format_float(1e20) == "<1.0e+20>"
        assert format_float(1.5e-7) == "<1.5e-07>"

    def test_special_values(self) -> None:
        assert format_float(float("inf")) == "<inf>"
        assert format_float(float("nan")) == "<nan>"

    def test_none(self) -> None:
        assert format_float(None) == "None"

    def test_int_beyond_float_range(self) -> None:
        assert format_float(10**400) == f"<{10**400}.0>"

    def test_non_numeric_falls_back_to_generic(self) -> None:
        assert format_float("x") == '"x"'


class TestList:
    def test_comma_joined_without_spaces(self) -> None:
        assert format_list(["a", "b"], format_generic) == '["a","b"]'

    def test_empty(self) -> None:
        assert format_list([], format_int) == "[]"

    def test_uses_given_formatter(self) -> None:
        assert format_list([0, 1], format_long) == "[<0L>,<1L>]"
        assert format_list([None, 1], format_float) == "[None,<1.0>]"
