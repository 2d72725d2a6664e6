"""Tests for slot generation, HH:MM arithmetic and display status."""

from datetime import date, datetime

import pytest

from app.config import OperatingHours
from app.domain.scheduling.time_calculator import (
    calculate_end_time,
    crosses_midnight,
    effective_status,
    ends_after_closing,
    generate_slots,
    minutes_to_time,
    starts_before_opening,
    time_to_minutes,
)


class TestGenerateSlots:
    def test_default_window_has_eighteen_half_hour_slots(self):
        slots = generate_slots()
        assert len(slots) == 18
        assert slots[0] == "09:00"
        assert slots[1] == "09:30"
        assert slots[-1] == "17:30"

    def test_close_time_is_exclusive(self):
        assert "18:00" not in generate_slots()

    def test_slots_are_ascending_and_zero_padded(self):
        slots = generate_slots()
        assert slots == sorted(slots)
        assert all(len(s) == 5 and s[2] == ":" for s in slots)

    def test_custom_operating_hours(self):
        hours = OperatingHours.from_strings("08:00", "10:00", 20)
        assert generate_slots(hours) == ["08:00", "08:20", "08:40", "09:00", "09:20", "09:40"]

    def test_interval_not_dividing_window(self):
        hours = OperatingHours.from_strings("09:00", "10:00", 25)
        assert generate_slots(hours) == ["09:00", "09:25", "09:50"]

    def test_deterministic(self):
        assert generate_slots() == generate_slots()


class TestTimeArithmetic:
    def test_time_to_minutes(self):
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("09:30") == 570
        assert time_to_minutes("23:59") == 1439

    def test_minutes_to_time_pads(self):
        assert minutes_to_time(65) == "01:05"

    def test_minutes_to_time_wraps_at_midnight(self):
        assert minutes_to_time(24 * 60) == "00:00"
        assert minutes_to_time(25 * 60 + 30) == "01:30"

    def test_calculate_end_time(self):
        assert calculate_end_time("09:00", 45) == "09:45"
        assert calculate_end_time("17:30", 120) == "19:30"

    def test_calculate_end_time_wraps(self):
        assert calculate_end_time("23:30", 60) == "00:30"

    def test_crosses_midnight(self):
        assert crosses_midnight("23:30", 60)
        assert not crosses_midnight("23:00", 60)
        assert not crosses_midnight("16:00", 480)
        assert crosses_midnight("17:30", 480)

    def test_ends_after_closing(self):
        assert ends_after_closing("17:30", 45)
        assert not ends_after_closing("17:30", 30)
        assert not ends_after_closing("09:00", 60)

    def test_starts_before_opening(self):
        assert starts_before_opening("08:30")
        assert not starts_before_opening("09:00")
        assert not starts_before_opening("12:15")


class TestEffectiveStatus:
    def test_past_confirmed_booking_shows_completed(self):
        now = datetime(2025, 6, 10, 12, 0)
        assert effective_status("confirmed", date(2025, 6, 10), "10:00", now) == "completed"

    def test_booking_in_progress_keeps_status(self):
        now = datetime(2025, 6, 10, 9, 30)
        assert effective_status("confirmed", date(2025, 6, 10), "09:45", now) == "confirmed"

    def test_future_pending_booking_keeps_status(self):
        now = datetime(2025, 6, 9, 12, 0)
        assert effective_status("pending", date(2025, 6, 10), "09:45", now) == "pending"

    def test_cancelled_is_never_completed(self):
        now = datetime(2030, 1, 1)
        assert effective_status("cancelled", date(2025, 6, 10), "09:45", now) == "cancelled"

    def test_midnight_end_belongs_to_next_day(self):
        now = datetime(2025, 6, 10, 23, 59)
        assert effective_status("confirmed", date(2025, 6, 10), "00:00", now) == "confirmed"
        later = datetime(2025, 6, 11, 0, 0)
        assert effective_status("confirmed", date(2025, 6, 10), "00:00", later) == "completed"


class TestOperatingHours:
    def test_default_strings(self):
        hours = OperatingHours.from_strings("09:00", "18:00", 30)
        assert hours.open_minute == 540
        assert hours.close_minute == 1080

    def test_open_after_close_rejected(self):
        with pytest.raises(ValueError, match="BUSINESS_OPEN_TIME"):
            OperatingHours.from_strings("18:00", "09:00", 30)

    def test_zero_interval_rejected(self):
        with pytest.raises(ValueError, match="SLOT_INTERVAL_MINUTES"):
            OperatingHours.from_strings("09:00", "18:00", 0)

    def test_interval_longer_than_window_rejected(self):
        with pytest.raises(ValueError, match="SLOT_INTERVAL_MINUTES"):
            OperatingHours.from_strings("09:00", "10:00", 90)

    def test_bad_time_format_rejected(self):
        with pytest.raises(ValueError, match="BUSINESS_CLOSE_TIME"):
            OperatingHours.from_strings("09:00", "6pm", 30)
