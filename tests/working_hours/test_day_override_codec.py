from __future__ import annotations

import pytest

from src.hr_admin.hr_admin.core.enums import DayKey, DayType
from src.hr_admin.hr_admin.working_hours.codec import (
    compress_to_grouped,
    default_overrides,
    expand_to_individual,
    format_group_label,
    set_day_type,
    set_enabled,
    set_override_break,
    set_override_hours,
    set_time,
    with_day,
    with_days,
)
from src.hr_admin.hr_admin.working_hours.model import (
    DayOverride,
    GroupedOverrides,
    IndividualOverrides,
    OverrideGroup,
    parse_day_overrides,
)

MON, TUE, WED, THU, FRI, SAT, SUN = DayKey.ordered()

FULL = DayOverride(enabled=True, day_type=DayType.FULL)
OFF = DayOverride(enabled=False, day_type=DayType.FULL)
SHORT_FRIDAY = DayOverride(
    enabled=True, override_hours=True, start_time="10:00", end_time="14:00", day_type=DayType.CUSTOM
)


def week(**days: DayOverride) -> IndividualOverrides:
    base = {d: FULL for d in DayKey.ordered()}
    base.update({DayKey(k): v for k, v in days.items()})
    return IndividualOverrides(days=base)


def test_expand_none_synthesizes_default_week():
    result = expand_to_individual(None)

    assert len(result) == 7
    for day in (MON, TUE, WED, THU, FRI):
        assert result[day].enabled is True
        assert result[day].day_type == DayType.FULL
    assert result[SAT].enabled is False
    assert result[SUN].enabled is False
    for _, day in result.items():
        assert day.override_hours is False
        assert day.override_break is False
        assert (day.start_time, day.end_time, day.start_break_time, day.end_break_time) == ("", "", "", "")


def test_expand_individual_is_pass_through():
    individual = week(friday=SHORT_FRIDAY)
    assert expand_to_individual(individual) is individual


def test_expand_grouped_writes_each_day():
    grouped = GroupedOverrides(
        groups=(
            OverrideGroup(days=(MON, TUE, WED, THU), config=FULL),
            OverrideGroup(days=(FRI,), config=SHORT_FRIDAY),
            OverrideGroup(days=(SAT, SUN), config=OFF),
        )
    )

    result = expand_to_individual(grouped)

    assert result == week(friday=SHORT_FRIDAY, saturday=OFF, sunday=OFF)


def test_expand_overlapping_groups_last_write_wins():
    grouped = GroupedOverrides(
        groups=(
            OverrideGroup(days=(MON, TUE), config=FULL),
            OverrideGroup(days=(TUE,), config=OFF),
        )
    )

    result = expand_to_individual(grouped)

    assert result[MON] == FULL
    assert result[TUE] == OFF


def test_expand_grouped_missing_days_are_absent_not_an_error():
    grouped = GroupedOverrides(groups=(OverrideGroup(days=(MON,), config=FULL),))

    result = expand_to_individual(grouped)

    assert MON in result
    assert result.get(SUN) is None


def test_expand_raw_grouped_null_times_become_empty_strings():
    raw = [
        {
            "days": ["monday"],
            "enabled": True,
            "overrideHours": False,
            "startTime": None,
            "endTime": None,
            "overrideBreak": False,
            "startBreakTime": None,
            "endBreakTime": None,
            "dayType": "half",
        }
    ]

    result = expand_to_individual(parse_day_overrides(raw))

    assert result[MON] == DayOverride(enabled=True, day_type=DayType.HALF)


def test_compress_groups_in_order_of_first_appearance():
    individual = week(friday=SHORT_FRIDAY, saturday=OFF, sunday=OFF)

    grouped = compress_to_grouped(individual)

    assert [g.days for g in grouped] == [(MON, TUE, WED, THU), (FRI,), (SAT, SUN)]
    assert grouped.groups[1].config == SHORT_FRIDAY


def test_compress_is_not_run_length_encoding():
    individual = week(tuesday=OFF, thursday=OFF, saturday=OFF, sunday=OFF)

    grouped = compress_to_grouped(individual)

    assert [g.days for g in grouped] == [(MON, WED, FRI), (TUE, THU, SAT, SUN)]


def test_compress_time_strings_compare_exactly():
    a = DayOverride(override_hours=True, start_time="09:00", end_time="17:00")
    b = DayOverride(override_hours=True, start_time="9:00", end_time="17:00")

    grouped = compress_to_grouped(week(monday=a, tuesday=b))

    assert grouped.groups[0].days == (MON,)
    assert grouped.groups[1].days == (TUE,)


def test_compress_skips_missing_days():
    individual = IndividualOverrides(days={MON: FULL, SUN: OFF})

    grouped = compress_to_grouped(individual)

    assert [g.days for g in grouped] == [(MON,), (SUN,)]


@pytest.mark.parametrize(
    "individual",
    [
        default_overrides(),
        week(friday=SHORT_FRIDAY, saturday=OFF, sunday=OFF),
        week(tuesday=OFF, thursday=SHORT_FRIDAY),
        IndividualOverrides(days={d: OFF for d in DayKey.ordered()}),
    ],
)
def test_compress_then_expand_round_trips_and_partitions(individual):
    grouped = compress_to_grouped(individual)

    days = [d for g in grouped for d in g.days]
    assert sorted(days, key=DayKey.ordered().index) == list(DayKey.ordered())
    assert len(days) == len(set(days))
    assert expand_to_individual(grouped) == individual


def test_expand_is_idempotent():
    grouped = compress_to_grouped(week(friday=SHORT_FRIDAY))
    for value in (None, grouped, week(saturday=OFF)):
        once = expand_to_individual(value)
        assert expand_to_individual(once) == once


def test_format_group_label():
    assert format_group_label([MON, TUE, WED, THU]) == "Mon-Thu"
    assert format_group_label([MON, WED, FRI]) == "Mon, Wed, Fri"
    assert format_group_label([FRI]) == "Friday"


def test_format_group_label_sorts_contiguous_runs_but_not_scattered_days():
    assert format_group_label([THU, MON, WED, TUE]) == "Mon-Thu"
    assert format_group_label([FRI, MON, WED]) == "Fri, Mon, Wed"


def test_format_group_label_empty_days():
    assert format_group_label([]) == ""


def test_with_day_returns_new_mapping():
    original = default_overrides()

    updated = with_day(original, SAT, enabled=True, day_type=DayType.HALF)

    assert original[SAT].enabled is False
    assert updated[SAT] == DayOverride(enabled=True, day_type=DayType.HALF)
    assert updated[MON] is original[MON]


def test_with_days_patches_every_day_of_a_group():
    updated = with_days(default_overrides(), (SAT, SUN), enabled=True)

    assert updated[SAT].enabled and updated[SUN].enabled


def test_override_hours_toggle_clears_times_when_unchecked():
    start = with_days(week(), (MON, TUE), override_hours=True, start_time="08:00", end_time="12:00")

    off = set_override_hours(start, (MON, TUE), False)
    on_again = set_override_hours(start, (MON, TUE), True)

    assert off[MON].override_hours is False
    assert (off[TUE].start_time, off[TUE].end_time) == ("", "")
    assert (on_again[TUE].start_time, on_again[TUE].end_time) == ("08:00", "12:00")


def test_override_break_toggle_clears_break_times_when_unchecked():
    start = with_day(week(), FRI, override_break=True, start_break_time="12:00", end_break_time="12:30")

    off = set_override_break(start, (FRI,), False)

    assert off[FRI] == DayOverride()


def test_group_edit_helpers():
    overrides = set_enabled(default_overrides(), (SAT,), True)
    overrides = set_day_type(overrides, (SAT,), "half")
    overrides = set_time(overrides, (SAT,), "end_time", "13:00")

    assert overrides[SAT] == DayOverride(enabled=True, end_time="13:00", day_type=DayType.HALF)

    with pytest.raises(ValueError):
        set_time(overrides, (SAT,), "enabled", "13:00")


def test_expand_accepts_raw_json_of_either_shape():
    raw_grouped = [{"days": ["saturday", "sunday"], "enabled": True, "dayType": "half"}]
    raw_individual = {"saturday": {"enabled": True, "dayType": "half"}}

    assert expand_to_individual(raw_grouped)[SUN] == DayOverride(enabled=True, day_type=DayType.HALF)
    assert expand_to_individual(raw_individual) == IndividualOverrides(
        days={SAT: DayOverride(enabled=True, day_type=DayType.HALF)}
    )


@pytest.mark.parametrize("raw", ["", [], {}])
def test_expand_empty_value_synthesizes_default_week(raw):
    assert expand_to_individual(raw) == default_overrides()
