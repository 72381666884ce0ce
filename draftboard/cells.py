# draftboard/cells.py
"""
Typed accessors for raw row cells.

Historical rows may hold blanks, stray text in numeric columns, or be
shorter than the full schema. Every accessor here returns a defined
fallback instead of raising, so one dirty cell never aborts an
aggregation over the whole store.
"""

from __future__ import annotations

import math
from typing import Any, Sequence


def cell(row: Sequence[Any], index: int) -> Any:
    """Return the cell at `index`, or "" when the row is too short."""
    if row is None or index < 0 or index >= len(row):
        return ""
    value = row[index]
    return "" if value is None else value


def as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_trimmed_string(value: Any) -> str:
    return as_string(value).strip()


def as_int(value: Any, default: int | None = 0) -> int | None:
    """Parse a cell as an integer, truncating decimals. Falls back to `default`."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default

    text = str(value).strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return default
    return int(parsed) if math.isfinite(parsed) else default


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def percent(part: float, whole: float) -> int:
    """Whole-number percentage of `part` in `whole`; 0 on an empty denominator."""
    if whole <= 0:
        return 0
    return round_half_up(100 * part / whole)


def split_percents(first: float, second: float, whole: float) -> tuple[int, int]:
    """Percentages for two disjoint shares of `whole` whose sum never exceeds 100.

    When the shares cover the whole, the second rate is `100 - first`; two
    .5 shares would otherwise both round up to a 101 total.
    """
    first_rate = percent(first, whole)
    if whole > 0 and first + second == whole:
        return first_rate, 100 - first_rate
    return first_rate, percent(second, whole)


def kda(kills: int, deaths: int, assists: int) -> float:
    if deaths > 0:
        return (kills + assists) / deaths
    return float(kills + assists)
