"""Text helpers shared by the concrete grammars."""

from __future__ import annotations

import math
import re

_SHORT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

_NEEDS_ESCAPE = re.compile('[\\\\"\x00-\x1f\x7f-\x9f]')


def _escape_match(match: re.Match[str]) -> str:
    char = match.group()
    short = _SHORT_ESCAPES.get(char)
    if short is not None:
        return short
    return f"\\u{ord(char):04x}"


def escape_string(value: str) -> str:
    """Escape ``value`` for use between double quotes.

    Backslash, double quote and the usual whitespace controls get their short
    escapes; every other C0/C1 control character becomes ``\\u00xx``.
    """
    return _NEEDS_ESCAPE.sub(_escape_match, value)


def quote(value: str, delimiter: str = '"') -> str:
    """Return ``value`` escaped and wrapped in ``delimiter``."""
    escaped = escape_string(value)
    if delimiter != '"':
        escaped = escaped.replace(delimiter, "\\" + delimiter)
    return f"{delimiter}{escaped}{delimiter}"


def format_number(value: float) -> str:
    """Render a finite number as decimal text; integral values drop ``.0``."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite number {value!r}")
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


__all__ = ["escape_string", "format_number", "quote"]
