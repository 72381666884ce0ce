# draftboard/duration.py
"""
Game duration codec.

Input accepts `mm:ss` and `h:mm:ss`; output is always `M:SS`, so hour-long
games come back as e.g. "62:03". Components are not range-checked:
"75:999" is read as 75 minutes plus 999 seconds, matching rows already in
the store.
"""

from __future__ import annotations

from typing import Any

from draftboard.cells import as_int, as_trimmed_string, round_half_up


def parse_duration(text: Any) -> int:
    """Convert a duration cell to whole seconds. Unrecognized shapes give 0."""
    raw = as_trimmed_string(text)
    if not raw:
        return 0

    parts = raw.split(":")
    if len(parts) == 2:
        minutes, seconds = (as_int(p) for p in parts)
        return minutes * 60 + seconds
    if len(parts) == 3:
        hours, minutes, seconds = (as_int(p) for p in parts)
        return hours * 3600 + minutes * 60 + seconds
    return 0


def format_duration(seconds: float) -> str:
    total = max(0, round_half_up(seconds or 0))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"
