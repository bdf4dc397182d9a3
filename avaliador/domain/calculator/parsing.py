"""Numeric parsing for raw form input.

Two flavours are provided:

* permissive (``parse_float``/``parse_int``): reads the leading number and
  ignores trailing text such as units, used by the valuation formulas;
* strict (``parse_strict_number``): the whole string must be a number, used
  by step validation.

None of these raise; ``None`` signals an unparseable value.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")
_STRICT_RE = re.compile(r"^[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)$")
_NON_DIGIT_RE = re.compile(r"\D")


def _to_float(token: str) -> Optional[float]:
    try:
        val = float(token.replace(",", "."))
    except ValueError:
        return None
    return val if math.isfinite(val) else None


def parse_float(text: str | None) -> Optional[float]:
    """Read the leading decimal number of ``text`` ("80 m2" -> 80.0)."""
    if not text:
        return None
    m = _LEADING_FLOAT_RE.match(text.strip())
    if not m:
        return None
    return _to_float(m.group(0))


def parse_int(text: str | None) -> Optional[int]:
    """Read the leading integer of ``text`` ("2010.5" -> 2010)."""
    if not text:
        return None
    m = _LEADING_INT_RE.match(text.strip())
    if not m:
        return None
    try:
        return int(m.group(0))
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        return None


def parse_strict_number(text: str | None) -> Optional[float]:
    """Parse ``text`` only if the whole trimmed string is a number."""
    if text is None:
        return None
    t = text.strip()
    if not _STRICT_RE.match(t):
        return None
    return _to_float(t)


def parse_year(text: str | None) -> Optional[int]:
    """Parse a construction year, requiring exactly four leading digits."""
    year = parse_int(text)
    if year is None or not 1000 <= year <= 9999:
        return None
    return year


def count_digits(text: str | None) -> int:
    """Number of digit characters in ``text`` (formatting is ignored)."""
    return len(_NON_DIGIT_RE.sub("", text or ""))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (0 for inf or NaN)."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)
