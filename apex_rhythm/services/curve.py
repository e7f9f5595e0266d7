"""
Rhythm Curve — samples the schedule into (time, value) points for charting.

Peak phases are held at the cycle's score; rest phases drop to 40% of it.
Times are minutes since wake, so the x-axis starts at 0.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from apex_rhythm.core.models import ScheduleResult

PEAK_SAMPLES = 11
REST_SAMPLES = 6
REST_VALUE_RATIO = 0.4


def build_curve_points(result: ScheduleResult) -> Tuple[np.ndarray, np.ndarray]:
    """Return (times, values) arrays, in cycle order."""
    times = []
    values = []

    for cycle in result.cycles:
        start = cycle.peak_start - result.wake
        end = cycle.peak_end - result.wake
        rest_end = cycle.rest_end - result.wake

        peak_t = np.linspace(start, end, PEAK_SAMPLES)
        times.append(peak_t)
        values.append(np.full(PEAK_SAMPLES, cycle.performance_score))

        rest_t = np.linspace(end, rest_end, REST_SAMPLES)
        times.append(rest_t)
        values.append(np.full(REST_SAMPLES, cycle.performance_score * REST_VALUE_RATIO))

    if not times:
        return np.empty(0), np.empty(0)
    return np.concatenate(times), np.concatenate(values)


def normalize(values: np.ndarray) -> np.ndarray:
    """Scale to [0, 1]. A flat series maps to all zeros."""
    if values.size == 0:
        return values
    lo = float(values.min())
    span = float(values.max()) - lo
    if span == 0:
        return np.zeros_like(values, dtype=float)
    return (values - lo) / span
