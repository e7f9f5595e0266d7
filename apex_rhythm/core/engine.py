"""
Rhythm Engine — turns a wake/sleep window into scored ultradian cycles.

Design:
  - 90 min peak + 20 min rest, repeated for the whole awake window.
  - First peak starts 100 min after waking (cortisol awakening response).
  - Each cycle gets a deterministic heuristic score; the best one is the
    "peak performance window".
  - Pure functions only. Same inputs, same schedule, every time.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from apex_rhythm.core.clock import MINUTES_PER_DAY, MINUTES_PER_HOUR
from apex_rhythm.core.models import (
    FULL_CYCLE_MIN,
    PEAK_LENGTH_MIN,
    Cycle,
    Genre,
    Intensity,
    ProfileInput,
    ScheduleResult,
)

logger = logging.getLogger(__name__)

FIRST_PEAK_DELAY_MIN = 100
BASE_SCORE = 100.0

# (low_h, high_h, factor) checked in order; first match wins, so exactly
# 6h lands in the first band and exactly 10h in the second.
CIRCADIAN_BANDS = [
    (2.0, 6.0, 1.3),    # prime time
    (6.0, 10.0, 1.1),   # good
    (10.0, 14.0, 0.9),  # afternoon dip
]
CIRCADIAN_FALLBACK = 0.7  # too early or too late

FATIGUE_STEP = 0.05
FATIGUE_FLOOR = 0.7


def compute_awake_duration(wake: int, sleep: int) -> int:
    """Minutes awake. A sleep time at or before wake means the next day."""
    if sleep > wake:
        return sleep - wake
    return (MINUTES_PER_DAY - wake) + sleep


def circadian_factor(hours_awake: float) -> float:
    for low, high, factor in CIRCADIAN_BANDS:
        if low <= hours_awake <= high:
            return factor
    return CIRCADIAN_FALLBACK


def fatigue_factor(cycle_index: int) -> float:
    """1.0, 0.95, 0.90 ... never below 0.7."""
    return max(FATIGUE_FLOOR, 1.0 - cycle_index * FATIGUE_STEP)


def score_performance(
    time: int,
    wake: int,
    cycle_index: int,
    genre: Genre,
    intensity: Intensity,
) -> float:
    """Heuristic performance score for a peak starting at `time`."""
    hours_awake = (time - wake) / MINUTES_PER_HOUR
    return (
        BASE_SCORE
        * circadian_factor(hours_awake)
        * fatigue_factor(cycle_index)
        * genre.factor
        * intensity.factor
    )


def select_optimal(cycles: Sequence[Cycle]) -> Optional[Cycle]:
    """Highest-scoring cycle; earliest wins ties. None for an empty list."""
    best: Optional[Cycle] = None
    for cycle in cycles:
        if best is None or cycle.performance_score > best.performance_score:
            best = cycle
    return best


def generate_cycles(
    wake: int,
    sleep: int,
    genre: Genre,
    intensity: Intensity,
) -> ScheduleResult:
    """
    Build the full cycle list for one awake window.

    A cycle is only emitted while its start is before
    `wake + total - PEAK_LENGTH_MIN`, so every peak fits inside the window.
    """
    total_minutes = compute_awake_duration(wake, sleep)
    last_start = wake + total_minutes - PEAK_LENGTH_MIN

    cycles: List[Cycle] = []
    t = wake + FIRST_PEAK_DELAY_MIN
    index = 0

    while t < last_start:
        peak_end = t + PEAK_LENGTH_MIN
        rest_end = t + FULL_CYCLE_MIN
        cycles.append(Cycle(
            index=index,
            peak_start=t,
            peak_end=peak_end,
            rest_end=rest_end,
            performance_score=score_performance(t, wake, index, genre, intensity),
        ))
        t = rest_end
        index += 1

    optimal = select_optimal(cycles)
    if optimal is None:
        logger.warning(
            "Awake window of %d min is too short for a single cycle.", total_minutes
        )
    else:
        logger.info(
            "Generated %d cycles over %d min; optimal is cycle %d (%.1f).",
            len(cycles), total_minutes, optimal.index, optimal.performance_score,
        )

    return ScheduleResult(
        wake=wake,
        total_minutes=total_minutes,
        cycles=tuple(cycles),
        optimal_cycle=optimal,
    )


def generate_schedule(profile: ProfileInput) -> ScheduleResult:
    """Run the engine for a validated profile."""
    return generate_cycles(
        profile.wake_minutes,
        profile.sleep_minutes,
        profile.genre,
        profile.intensity,
    )


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The actual "brain" of the app. Given wake/sleep minutes and the two
#   selectors, it walks a cursor through the day in 110-minute steps and
#   scores each peak.
#
# Key decisions:
#   - Minutes are never wrapped during generation. A 23:00 -> 07:00 night
#     owl schedule just runs past 1440, which keeps cycles sorted. Only
#     format_clock_time() folds them back into a clock.
#   - Score = 100 x circadian x fatigue x genre x intensity. Four small
#     multiplicative knobs are easy to reason about and to test one by one.
#   - select_optimal() uses strict ">" so the earliest cycle wins a tie.
#
# Interviewer-friendly talking points:
#   1. O(n) in cycle count, and n <= 1440 / 110 ~ 13. No performance concern.
#   2. Empty result is explicit (optimal_cycle=None) instead of an index
#      that blows up later in the UI.
