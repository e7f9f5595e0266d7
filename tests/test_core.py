"""Unit tests for the core layer (clock arithmetic, models, rhythm engine)."""

import math

import pytest

from apex_rhythm.core.clock import (
    format_clock_time, is_clock_time, parse_clock_time, round_half_up,
)
from apex_rhythm.core.engine import (
    circadian_factor, compute_awake_duration, fatigue_factor,
    generate_cycles, generate_schedule, score_performance, select_optimal,
)
from apex_rhythm.core.models import Cycle, Genre, Intensity, ProfileInput


class TestClock:
    def test_parse(self):
        assert parse_clock_time("06:00") == 360
        assert parse_clock_time("22:30") == 1350
        assert parse_clock_time("00:00") == 0
        assert parse_clock_time("7:05") == 425

    def test_parse_malformed_raises(self):
        with pytest.raises(ValueError):
            parse_clock_time("ab:cd")
        with pytest.raises(ValueError):
            parse_clock_time("0600")

    def test_round_trip_every_minute(self):
        for hour in range(24):
            for minute in range(60):
                text = f"{hour:02d}:{minute:02d}"
                assert format_clock_time(parse_clock_time(text)) == text

    def test_wraparound(self):
        assert format_clock_time(1440) == "00:00"
        assert format_clock_time(1480) == "00:40"
        assert format_clock_time(2890) == "00:10"
        assert format_clock_time(-30) == "23:30"
        assert format_clock_time(1_000_000) == "10:40"

    def test_periodic_in_one_day(self):
        for x in (-2000, -1, 0, 59, 719, 1439, 5000):
            assert format_clock_time(x) == format_clock_time(x + 1440)
            assert format_clock_time(x) == format_clock_time(x - 3 * 1440)

    def test_idempotent(self):
        once = format_clock_time(1500)
        assert format_clock_time(parse_clock_time(once)) == once

    def test_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert format_clock_time(59.5) == "01:00"

    def test_is_clock_time(self):
        assert is_clock_time("06:00")
        assert is_clock_time("6:00")
        assert is_clock_time("23:59")
        assert not is_clock_time("24:00")
        assert not is_clock_time("12:60")
        assert not is_clock_time("12:5")
        assert not is_clock_time("noon")
        assert not is_clock_time("")
        assert not is_clock_time("1:2:3")
        assert not is_clock_time("0²:00")
        assert not is_clock_time("06:0\u0663")


class TestModels:
    def test_genre_lookup(self):
        assert Genre.from_label("Battle Royale") is Genre.BATTLE_ROYALE
        assert Genre.FIGHTING.factor == 1.22
        assert Genre.RTS.base_apm == 300

    def test_unrecognized_genre_is_neutral(self):
        other = Genre.from_label("Chess")
        assert other is Genre.OTHER
        assert other.factor == 1.0
        assert other.base_apm == 200

    def test_intensity_lookup(self):
        assert Intensity.from_label("Ranked Grind") is Intensity.RANKED_GRIND
        assert Intensity.from_label("Pro Practice").factor == 1.25
        assert Intensity.from_label("casual") is Intensity.OTHER
        assert Intensity.OTHER.factor == 1.0

    def test_profile_derived_fields(self):
        profile = ProfileInput("Viper", "06:00", "22:30", "MOBA", "Chill")
        assert profile.wake_minutes == 360
        assert profile.sleep_minutes == 1350
        assert profile.genre is Genre.MOBA
        assert profile.intensity is Intensity.OTHER


class TestAwakeDuration:
    def test_same_day(self):
        assert compute_awake_duration(360, 1350) == 990

    def test_crosses_midnight(self):
        assert compute_awake_duration(1380, 420) == 480

    def test_equal_times_means_full_day(self):
        assert compute_awake_duration(600, 600) == 1440


class TestScoring:
    def test_circadian_bands(self):
        assert circadian_factor(1.99) == 0.7
        assert circadian_factor(2.0) == 1.3
        assert circadian_factor(6.0) == 1.3
        assert circadian_factor(6.5) == 1.1
        assert circadian_factor(10.0) == 1.1
        assert circadian_factor(12.0) == 0.9
        assert circadian_factor(14.0) == 0.9
        assert circadian_factor(14.01) == 0.7

    def test_fatigue_sequence(self):
        expected = [1.0, 0.95, 0.9, 0.85, 0.8, 0.75, 0.7, 0.7, 0.7]
        actual = [fatigue_factor(i) for i in range(len(expected))]
        assert actual == pytest.approx(expected)
        assert fatigue_factor(50) == 0.7

    def test_score_formula(self):
        # 3h awake, cycle 1: 100 * 1.3 * 0.95 * 1.2 * 0.8
        score = score_performance(540, 360, 1, Genre.FPS, Intensity.CASUAL)
        assert score == pytest.approx(118.56)

    def test_score_positive_and_finite(self):
        for genre in Genre:
            for intensity in Intensity:
                for offset in (100, 210, 600, 900, 1300):
                    for idx in (0, 3, 12):
                        s = score_performance(300 + offset, 300, idx, genre, intensity)
                        assert s > 0
                        assert math.isfinite(s)


class TestGenerateCycles:
    def test_default_day(self):
        result = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        assert result.total_minutes == 990
        assert len(result.cycles) == 8

        first = result.cycles[0]
        assert (first.peak_start, first.peak_end, first.rest_end) == (460, 550, 570)
        assert [c.index for c in result.cycles] == list(range(8))

    def test_optimal_window(self):
        result = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        best = result.optimal_cycle
        assert best is not None
        assert best.index == 1
        assert format_clock_time(best.peak_start) == "09:30"
        assert format_clock_time(best.peak_end) == "11:00"
        assert best.performance_score == pytest.approx(118.56)

    def test_deterministic(self):
        a = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        b = generate_cycles(360, 1350, Genre.FPS, Intensity.CASUAL)
        assert a == b

    def test_cycle_shape(self):
        result = generate_cycles(420, 1380, Genre.RTS, Intensity.PRO_PRACTICE)
        for prev, cur in zip(result.cycles, result.cycles[1:]):
            assert cur.peak_start == prev.rest_end
        for c in result.cycles:
            assert c.peak_length == 90
            assert c.rest_length == 20

    def test_peaks_never_overrun_window(self):
        for wake in range(0, 1440, 30):
            for sleep in range(0, 1440, 30):
                result = generate_cycles(wake, sleep, Genre.MOBA, Intensity.COMPETITIVE)
                for c in result.cycles:
                    assert c.peak_end - wake <= result.total_minutes

    def test_crosses_midnight_stays_unwrapped(self):
        result = generate_cycles(1380, 420, Genre.FPS, Intensity.CASUAL)
        starts = [c.peak_start for c in result.cycles]
        assert starts == [1480, 1590, 1700]
        assert format_clock_time(starts[0]) == "00:40"
        assert result.window_end == 1860

    def test_short_window_is_empty(self):
        result = generate_cycles(360, 540, Genre.FPS, Intensity.CASUAL)
        assert result.is_empty
        assert result.optimal_cycle is None
        assert result.optimal_index is None

    def test_minimum_window(self):
        # 190 min leaves no room (strict <); 191 fits exactly one cycle
        assert generate_cycles(0, 190, Genre.FPS, Intensity.CASUAL).is_empty
        one = generate_cycles(0, 191, Genre.FPS, Intensity.CASUAL)
        assert len(one.cycles) == 1

    def test_generate_schedule_from_profile(self):
        profile = ProfileInput("Viper", "06:00", "22:30", "FPS", "Casual")
        assert generate_schedule(profile) == generate_cycles(
            360, 1350, Genre.FPS, Intensity.CASUAL
        )


class TestSelectOptimal:
    def _cycle(self, index: int, score: float) -> Cycle:
        start = index * 110
        return Cycle(index, start, start + 90, start + 110, score)

    def test_earliest_wins_tie(self):
        cycles = [self._cycle(0, 90.0), self._cycle(1, 120.0),
                  self._cycle(2, 120.0), self._cycle(3, 80.0)]
        assert select_optimal(cycles).index == 1

    def test_empty(self):
        assert select_optimal([]) is None
