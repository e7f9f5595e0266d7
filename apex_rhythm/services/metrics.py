"""
Display Metrics — secondary numbers shown next to the peak window.

  - APM potential: genre base APM scaled by the optimal cycle's score.
  - Metabolic flush rate: a four-step rating driven by how many rest
    phases the day contains.

These are presentation heuristics, not physiology.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from apex_rhythm.core.clock import round_half_up
from apex_rhythm.core.models import Genre

FLUSH_LABELS: List[str] = ["LOW", "MEDIUM", "HIGH", "VERY HIGH"]


@dataclass(frozen=True)
class FlushRate:
    level: int         # 0..3
    label: str
    percentage: float  # progress bar fill, 25 / 50 / 75 / 100


def apm_potential(genre: Genre, optimal_score: float) -> int:
    """Estimated actions-per-minute at the optimal window."""
    return round_half_up(genre.base_apm * (optimal_score / 100.0))


def flush_rate(cycle_count: int) -> FlushRate:
    """One level per two cycles, capped at VERY HIGH."""
    level = min(len(FLUSH_LABELS) - 1, cycle_count // 2)
    return FlushRate(
        level=level,
        label=FLUSH_LABELS[level],
        percentage=(level + 1) / len(FLUSH_LABELS) * 100.0,
    )
