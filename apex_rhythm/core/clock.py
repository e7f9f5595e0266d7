"""
Clock Arithmetic — converts between "HH:MM" strings and minutes since midnight.

Minute values are allowed to run past 1440 (or below 0) while the engine does
interval math. They are only folded back into a single day when formatted.
"""

from __future__ import annotations

import math

MINUTES_PER_DAY = 1440
MINUTES_PER_HOUR = 60


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def parse_clock_time(text: str) -> int:
    """Convert "HH:MM" to minutes from midnight.

    No range checking is done here. Non-numeric parts raise ValueError.
    """
    hours, minutes = text.split(":")
    return int(hours) * MINUTES_PER_HOUR + int(minutes)


def format_clock_time(minutes: float) -> str:
    """Convert minutes from midnight to "HH:MM", wrapping around midnight."""
    # Python's modulo is always non-negative for a positive divisor, so this
    # folds any number of whole days (either direction) into [0, 1440).
    total = round_half_up(minutes) % MINUTES_PER_DAY
    hours, mins = divmod(total, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def is_clock_time(text: str) -> bool:
    """True if text is a well-formed 24h "H:MM" or "HH:MM" value."""
    parts = text.split(":")
    if len(parts) != 2:
        return False
    hours, minutes = parts
    # ASCII only: isdigit() also accepts "²" and friends, which int() rejects
    if not all(p.isascii() and p.isdigit() for p in parts):
        return False
    if len(hours) not in (1, 2) or len(minutes) != 2:
        return False
    return 0 <= int(hours) < 24 and 0 <= int(minutes) < 60
