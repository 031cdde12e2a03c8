"""Literal formatting for diagnostics.

Each element kind renders a single value for embedding in a description:

| Kind    | 3        | "a"   | None   |
|---------|----------|-------|--------|
| generic | ``<3>``  | ``"a"`` | ``None`` |
| int     | ``<3>``  |       | ``None`` |
| long    | ``<3L>`` |       | ``None`` |
| float   | ``<3.0>``|       | ``None`` |

Lists render as ``[a,b,c]``: order preserved, no spaces, no trailing separator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

NULL_LITERAL = "None"

_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


def quote(text: str) -> str:
    """Double-quote a string, escaping quotes, backslashes and line breaks."""
    return '"' + text.translate(_ESCAPES) + '"'


def format_generic(value: Any) -> str:
    if value is None:
        return NULL_LITERAL
    if isinstance(value, str):
        return quote(value)
    return f"<{value}>"


def format_int(value: Any) -> str:
    if value is None:
        return NULL_LITERAL
    return f"<{value}>"


def format_long(value: Any) -> str:
    if value is None:
        return NULL_LITERAL
    if isinstance(value, int) and not isinstance(value, bool):
        return f"<{value}L>"
    return format_generic(value)


def format_float(value: Any) -> str:
    """Render a floating-point value, never as a bare integer.

    Non-numeric values fall back to the generic rendering.
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool) or not isinstance(value, int | float):
        return format_generic(value)
    try:
        text = repr(float(value))
    except OverflowError:
        return f"<{value}.0>"
    # repr(1e20) == '1e+20'
    if "e" in text and "." not in text:
        mantissa, exponent = text.split("e", 1)
        text = f"{mantissa}.0e{exponent}"
    return f"<{text}>"


def format_list(values: Iterable[Any], formatter: Callable[[Any], str]) -> str:
    """Render values as a bracketed, comma-joined list of literals."""
    return "[" + ",".join(formatter(v) for v in values) + "]"
