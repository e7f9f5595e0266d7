"""
Timeline — builds the list of phase slots shown under the peak window.

Each cycle contributes a peak slot and, if the rest fits before sleep, a rest
slot. The first peak is the warm-up ("biological calibration"); later peaks
are numbered arena entries starting from #1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from apex_rhythm.core.clock import format_clock_time
from apex_rhythm.core.models import ScheduleResult

CALIBRATION_TITLE = "BIOLOGICAL CALIBRATION"
CALIBRATION_DESC = "CORTISOL SPIKE"
ARENA_TITLE = "ARENA ENTRY #{n}"
ARENA_DESC = "DOPAMINE / NOREPINEPHRINE"
REST_TITLE = "NEURAL DESENSITIZATION"
REST_DESC = "GABA RESYNTHESIS"


class SlotKind:
    PREP = "prep"
    PEAK = "peak"
    REST = "rest"


@dataclass(frozen=True)
class TimeSlot:
    start: int          # unwrapped minutes
    kind: str           # SlotKind value
    title: str
    description: str
    cycle_index: int
    is_optimal: bool = False

    @property
    def clock(self) -> str:
        return format_clock_time(self.start)


def build_time_slots(result: ScheduleResult) -> List[TimeSlot]:
    slots: List[TimeSlot] = []
    arena_count = 1

    for cycle in result.cycles:
        is_optimal = cycle.index == result.optimal_index
        if cycle.index == 0:
            slots.append(TimeSlot(
                start=cycle.peak_start,
                kind=SlotKind.PREP,
                title=CALIBRATION_TITLE,
                description=CALIBRATION_DESC,
                cycle_index=cycle.index,
                is_optimal=is_optimal,
            ))
        else:
            slots.append(TimeSlot(
                start=cycle.peak_start,
                kind=SlotKind.PEAK,
                title=ARENA_TITLE.format(n=arena_count),
                description=ARENA_DESC,
                cycle_index=cycle.index,
                is_optimal=is_optimal,
            ))
            arena_count += 1

        # Rest must finish before sleep to be listed
        if cycle.rest_end <= result.window_end:
            slots.append(TimeSlot(
                start=cycle.peak_end,
                kind=SlotKind.REST,
                title=REST_TITLE,
                description=REST_DESC,
                cycle_index=cycle.index,
            ))

    return slots
