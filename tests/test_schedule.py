from datetime import date

import pytest

from salon_agenda.core.schedule import (
    ScheduleRow,
    WeekDay,
    WeeklySchedule,
    WorkScheduleDay,
)


def test_weekday_from_date():
    assert WeekDay.from_date(date(2024, 1, 1)) is WeekDay.MONDAY
    assert WeekDay.from_date(date(2024, 1, 6)) is WeekDay.SATURDAY
    assert WeekDay.from_date(date(2024, 1, 7)) is WeekDay.SUNDAY


def test_empty_schedule_has_seven_disabled_days():
    s = WeeklySchedule.empty()
    assert len(s) == 7
    assert [d.day for d in s] == list(WeekDay)
    assert not s.has_enabled_day()
    assert s.to_rows(1) == []


def test_lookup_is_by_key_not_position():
    s = WeeklySchedule([
        WorkScheduleDay(WeekDay.FRIDAY, True, "10:00", "16:00"),
        WorkScheduleDay(WeekDay.MONDAY, True, "09:00", "18:00"),
    ])
    assert s.day(WeekDay.MONDAY).start_time == "09:00"
    assert s.day("friday").end_time == "16:00"
    assert s.for_date(date(2024, 1, 5)).day is WeekDay.FRIDAY
    assert not s.day(WeekDay.TUESDAY).enabled


def test_duplicate_day_rejected():
    with pytest.raises(ValueError):
        WeeklySchedule([WorkScheduleDay(WeekDay.MONDAY), WorkScheduleDay(WeekDay.MONDAY, True)])


def test_rows_round_trip_keeps_only_enabled_days():
    rows = [
        ScheduleRow(7, WeekDay.MONDAY, "09:00:00", "18:00:00"),
        ScheduleRow(7, WeekDay.SATURDAY, "08:00", "12:00"),
    ]
    s = WeeklySchedule.from_rows(rows)
    assert s.day(WeekDay.MONDAY) == WorkScheduleDay(WeekDay.MONDAY, True, "09:00", "18:00")
    assert not s.day(WeekDay.SUNDAY).enabled
    assert s.to_rows(7) == [
        ScheduleRow(7, WeekDay.MONDAY, "09:00", "18:00"),
        ScheduleRow(7, WeekDay.SATURDAY, "08:00", "12:00"),
    ]


def test_with_day_enabled_fills_defaults_and_clears():
    s = WeeklySchedule.empty().with_day_enabled(WeekDay.TUESDAY, True)
    assert s.day(WeekDay.TUESDAY) == WorkScheduleDay(WeekDay.TUESDAY, True, "09:00", "18:00")

    s = s.with_day(WorkScheduleDay(WeekDay.TUESDAY, True, "11:00", "19:00"))
    s = s.with_day_enabled(WeekDay.TUESDAY, True)
    assert s.day(WeekDay.TUESDAY).start_time == "11:00"

    s = s.with_day_enabled(WeekDay.TUESDAY, False)
    assert s.day(WeekDay.TUESDAY) == WorkScheduleDay(WeekDay.TUESDAY)


def test_summary():
    assert WeeklySchedule.empty().summary() == "No working hours configured"
    s = WeeklySchedule([
        WorkScheduleDay(WeekDay.WEDNESDAY, True, "13:00", "20:00"),
        WorkScheduleDay(WeekDay.MONDAY, True, "09:00", "18:00"),
    ])
    assert s.summary() == "Mon: 09:00-18:00 | Wed: 13:00-20:00"
