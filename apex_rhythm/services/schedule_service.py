"""
Schedule Service — orchestrates one analysis from raw form fields to results.

Handles: validating the form, building the ProfileInput, running the engine,
computing display metrics and timeline slots, and resetting back to the
configured defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from apex_rhythm.core.clock import format_clock_time, is_clock_time
from apex_rhythm.core.engine import generate_schedule
from apex_rhythm.core.models import ProfileInput, ScheduleResult
from apex_rhythm.services.metrics import FlushRate, apm_potential, flush_rate
from apex_rhythm.services.timeline import TimeSlot, build_time_slots

logger = logging.getLogger(__name__)


class ProfileError(ValueError):
    """The form can't be turned into a ProfileInput."""


class EmptyScheduleError(RuntimeError):
    """The awake window is too short for even one cycle."""


class ServiceState:
    IDLE = "idle"
    ANALYZED = "analyzed"


@dataclass(frozen=True)
class Analysis:
    """Everything the results screen needs for one run."""
    profile: ProfileInput
    result: ScheduleResult
    apm: int
    flush: FlushRate
    slots: List[TimeSlot]

    @property
    def peak_window(self) -> str:
        optimal = self.result.optimal_cycle
        return f"{format_clock_time(optimal.peak_start)} - {format_clock_time(optimal.peak_end)}"


class ScheduleService:
    """
    Holds the single current analysis.

    State transitions:
        idle → analyzed (analyze) → analyzed (re-analyze) → idle (reset)
    A failed analyze leaves the previous state untouched.
    """

    def __init__(self, form_defaults: Dict[str, str]) -> None:
        self.form_defaults = dict(form_defaults)
        self.current: Optional[Analysis] = None
        self.state: str = ServiceState.IDLE

    # ── Validation ──────────────────────────────────────────────────────────

    @staticmethod
    def build_profile(form: Dict[str, str]) -> ProfileInput:
        username = (form.get("username") or "").strip()
        wake_time = (form.get("wake_time") or "").strip()
        sleep_time = (form.get("sleep_time") or "").strip()

        if not username:
            raise ProfileError("Please enter your operator alias")
        if not wake_time or not sleep_time:
            raise ProfileError("Please set your wake and sleep times")
        for value in (wake_time, sleep_time):
            if not is_clock_time(value):
                raise ProfileError(f"Invalid time '{value}': expected HH:MM")

        return ProfileInput(
            username=username,
            wake_time=wake_time,
            sleep_time=sleep_time,
            genre_label=form.get("genre") or "",
            intensity_label=form.get("intensity") or "",
        )

    # ── Analysis lifecycle ──────────────────────────────────────────────────

    def analyze(self, form: Dict[str, str]) -> Analysis:
        """Validate, run the engine, and replace the current analysis."""
        profile = self.build_profile(form)
        result = generate_schedule(profile)

        if result.is_empty:
            raise EmptyScheduleError(
                f"Awake window {profile.wake_time}-{profile.sleep_time} is too "
                "short for a full peak cycle."
            )

        analysis = Analysis(
            profile=profile,
            result=result,
            apm=apm_potential(profile.genre, result.optimal_cycle.performance_score),
            flush=flush_rate(len(result.cycles)),
            slots=build_time_slots(result),
        )
        self.current = analysis
        self.state = ServiceState.ANALYZED
        logger.info(
            "Analysis for %s: %d cycles, peak window %s",
            profile.username, len(result.cycles), analysis.peak_window,
        )
        return analysis

    def reset(self) -> Dict[str, str]:
        """Drop the current analysis and return the form defaults."""
        self.current = None
        self.state = ServiceState.IDLE
        logger.info("Schedule reset to defaults.")
        return dict(self.form_defaults)

    def require_analysis(self, action: str) -> Analysis:
        if self.state != ServiceState.ANALYZED or self.current is None:
            raise RuntimeError(f"Cannot {action}: no analysis yet.")
        return self.current


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The glue between the form and the engine. The UI hands over a dict of
#   raw strings; this service either raises ProfileError / EmptyScheduleError
#   or returns an Analysis with everything the results screen draws.
#
# Data flow:
#   Analyze click → ScheduleService.analyze(form) → build_profile() →
#   generate_schedule() → metrics + timeline → Analysis → MainWindow.
#   Reset click → ScheduleService.reset() → defaults dict → form fields.
#
# Interviewer-friendly talking points:
#   1. Validation lives at the boundary so the engine can assume clean ints.
#   2. Analysis is immutable and swapped wholesale; a failed run never
#      leaves half-updated state behind.
