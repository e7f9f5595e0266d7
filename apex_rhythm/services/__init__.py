from .metrics import FlushRate, apm_potential, flush_rate
from .schedule_service import Analysis, EmptyScheduleError, ProfileError, ScheduleService
from .timeline import TimeSlot, build_time_slots

__all__ = [
    "FlushRate", "apm_potential", "flush_rate",
    "Analysis", "EmptyScheduleError", "ProfileError", "ScheduleService",
    "TimeSlot", "build_time_slots",
]
