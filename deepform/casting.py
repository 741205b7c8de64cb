"""Primitive casts applied to form values.

Numeric parsing follows the rules browsers use for ``Number(string)`` so that
the same form produces the same tree on either side of the wire.
"""

from __future__ import annotations

import math
import re
from typing import Any


_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX = {
    "0x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"[0-7]+"), 8),
    "0b": (re.compile(r"[01]+"), 2),
}
_INFINITY = re.compile(r"[+-]?Infinity")
_MAX_SAFE_INTEGER = 2**53

# str.strip() would also remove \x1c-\x1f, which Number() keeps
_WHITESPACE = (
    " \t\n\v\f\r\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _normalize(number: float) -> int | float:
    if math.isfinite(number) and number.is_integer() and abs(number) < _MAX_SAFE_INTEGER:
        if number == 0 and math.copysign(1.0, number) < 0:
            return number
        return int(number)
    return number


def to_number(value: Any) -> Any:
    """Cast a form value to a number.

    Non-numeric strings become ``nan`` rather than raising. Values that are not
    strings (uploaded files and other blobs) are returned unchanged.
    """
    if not isinstance(value, str):
        return value

    text = value.strip(_WHITESPACE)
    if not text:
        return 0

    radix = _RADIX.get(text[:2].lower())
    if radix is not None:
        digits, base = radix
        if not digits.fullmatch(text[2:]):
            return math.nan
        number = int(text[2:], base)
        if number < _MAX_SAFE_INTEGER:
            return number
        try:
            return float(number)
        except OverflowError:
            return math.inf

    if _DECIMAL.fullmatch(text):
        return _normalize(float(text))

    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf

    return math.nan


def to_boolean(value: Any) -> Any:
    """Cast a form value to a boolean.

    ``"on"`` and ``"true"`` are true, as is any string whose numeric value is
    not zero. Since ``nan != 0``, non-numeric strings such as ``"false"`` are
    true as well; only strings that parse to zero (``"0"``, ``"-0"``, ``""``)
    are false.
    """
    if not isinstance(value, str):
        return value
    return value == "on" or value == "true" or to_number(value) != 0
