"""
Data models for ApexRhythm.

Plain frozen dataclasses and enums shared by the engine, the services and the
UI. Nothing here knows about Qt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from apex_rhythm.core.clock import parse_clock_time

PEAK_LENGTH_MIN = 90
REST_LENGTH_MIN = 20
FULL_CYCLE_MIN = PEAK_LENGTH_MIN + REST_LENGTH_MIN

DEFAULT_BASE_APM = 200


class Genre(Enum):
    """Game genre: (display label, score multiplier, base APM)."""

    FPS = ("FPS", 1.2, 180)
    MOBA = ("MOBA", 1.15, 200)
    BATTLE_ROYALE = ("Battle Royale", 1.18, 170)
    FIGHTING = ("Fighting", 1.22, 250)
    RTS = ("RTS", 1.1, 300)
    RACING = ("Racing", 1.2, 150)
    OTHER = ("Other", 1.0, DEFAULT_BASE_APM)

    def __init__(self, label: str, factor: float, base_apm: int) -> None:
        self.label = label
        self.factor = factor
        self.base_apm = base_apm

    @classmethod
    def from_label(cls, label: str) -> "Genre":
        for genre in cls:
            if genre is not cls.OTHER and genre.label == label:
                return genre
        return cls.OTHER


class Intensity(Enum):
    """Session intensity: (display label, score multiplier)."""

    CASUAL = ("Casual", 0.8)
    COMPETITIVE = ("Competitive", 1.0)
    RANKED_GRIND = ("Ranked Grind", 1.15)
    PRO_PRACTICE = ("Pro Practice", 1.25)
    OTHER = ("Other", 1.0)

    def __init__(self, label: str, factor: float) -> None:
        self.label = label
        self.factor = factor

    @classmethod
    def from_label(cls, label: str) -> "Intensity":
        for intensity in cls:
            if intensity is not cls.OTHER and intensity.label == label:
                return intensity
        return cls.OTHER


@dataclass(frozen=True)
class ProfileInput:
    """One analysis request, already validated by the service layer.

    `genre_label` / `intensity_label` keep whatever the user typed or picked,
    so an unrecognized value still displays as entered.
    """
    username: str
    wake_time: str
    sleep_time: str
    genre_label: str
    intensity_label: str

    @property
    def wake_minutes(self) -> int:
        return parse_clock_time(self.wake_time)

    @property
    def sleep_minutes(self) -> int:
        return parse_clock_time(self.sleep_time)

    @property
    def genre(self) -> Genre:
        return Genre.from_label(self.genre_label)

    @property
    def intensity(self) -> Intensity:
        return Intensity.from_label(self.intensity_label)


@dataclass(frozen=True)
class Cycle:
    """One peak + rest unit. Minute offsets are NOT wrapped to 24h."""
    index: int
    peak_start: int
    peak_end: int
    rest_end: int
    performance_score: float

    @property
    def peak_length(self) -> int:
        return self.peak_end - self.peak_start

    @property
    def rest_length(self) -> int:
        return self.rest_end - self.peak_end


@dataclass(frozen=True)
class ScheduleResult:
    """Engine output for one analysis run."""
    wake: int
    total_minutes: int
    cycles: Tuple[Cycle, ...] = field(default_factory=tuple)
    optimal_cycle: Optional[Cycle] = None

    @property
    def is_empty(self) -> bool:
        return not self.cycles

    @property
    def window_end(self) -> int:
        """Sleep time in the same (unwrapped) frame as the cycles."""
        return self.wake + self.total_minutes

    @property
    def optimal_index(self) -> Optional[int]:
        return self.optimal_cycle.index if self.optimal_cycle else None


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Defines the vocabulary of the app: genres and intensities (with their
#   multipliers baked into the enum), the user's profile, a single ultradian
#   cycle, and the whole schedule.
#
# Key points:
#   - Genre / Intensity carry an OTHER member with the neutral 1.0 multiplier,
#     so unknown strings never need a dict.get(..., 1.0) fallback.
#   - Everything is frozen: a new analysis builds new objects instead of
#     mutating the old ones.
#   - ScheduleResult.optimal_cycle is Optional. An awake window too short for
#     a single cycle produces an empty result, and callers have to check
#     is_empty before displaying anything.
