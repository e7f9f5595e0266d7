from .clock import format_clock_time, parse_clock_time
from .engine import compute_awake_duration, generate_cycles, generate_schedule, score_performance
from .models import Cycle, Genre, Intensity, ProfileInput, ScheduleResult

__all__ = [
    "format_clock_time", "parse_clock_time",
    "compute_awake_duration", "generate_cycles", "generate_schedule", "score_performance",
    "Cycle", "Genre", "Intensity", "ProfileInput", "ScheduleResult",
]
