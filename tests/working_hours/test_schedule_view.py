from src.hr_admin.hr_admin.working_hours.model import WorkingHoursPolicy
from src.hr_admin.hr_admin.working_hours.view import build_schedule_view

GROUPED = [
    {"days": ["monday", "tuesday", "wednesday", "thursday"], "enabled": True, "overrideHours": False,
     "startTime": "", "endTime": "", "overrideBreak": False, "startBreakTime": "", "endBreakTime": "",
     "dayType": "full"},
    {"days": ["friday"], "enabled": True, "overrideHours": True, "startTime": "10:00", "endTime": "14:00",
     "overrideBreak": True, "startBreakTime": "12:00", "endBreakTime": "12:15", "dayType": "custom"},
    {"days": ["saturday", "sunday"], "enabled": False, "overrideHours": False, "startTime": "", "endTime": "",
     "overrideBreak": False, "startBreakTime": "", "endBreakTime": "", "dayType": "full"},
]


def make_policy(**changes) -> WorkingHoursPolicy:
    record = {
        "id": "p1",
        "name": "Head Office",
        "startWorkingHours": "09:00",
        "endWorkingHours": "18:00",
        "startBreakTime": "13:00",
        "endBreakTime": "14:00",
        "dayOverrides": GROUPED,
    }
    record.update(changes)
    return WorkingHoursPolicy.from_dict(record)


def test_view_groups_and_effective_times():
    view = build_schedule_view(make_policy())

    assert view.working_hours == "09:00 AM - 06:00 PM"
    assert view.break_time == "01:00 PM - 02:00 PM"
    assert view.half_day_start_time == "N/A"
    assert view.has_overrides is True

    weekdays, friday, weekend = view.groups

    assert weekdays.label == "Mon-Thu"
    assert weekdays.applies_to == "Monday, Tuesday, Wednesday, Thursday"
    assert weekdays.badges == ["Full Day"]
    assert weekdays.working_hours == "09:00 AM - 06:00 PM"
    assert weekdays.break_time == "01:00 PM - 02:00 PM"

    assert friday.label == "Friday"
    assert friday.badges == ["Custom Hours", "Custom Break", "Custom"]
    assert friday.working_hours == "10:00 AM - 02:00 PM"
    assert friday.break_time == "12:00 PM - 12:15 PM"

    assert weekend.label == "Sat-Sun (Off Day)"
    assert weekend.badges == ["Off Day"]
    assert weekend.working_hours is None
    assert weekend.break_time is None


def test_view_without_overrides_uses_default_week_and_no_break():
    view = build_schedule_view(make_policy(dayOverrides=None, startBreakTime=None, endBreakTime=None))

    assert view.has_overrides is False
    assert view.break_time is None
    assert [g.label for g in view.groups] == ["Mon-Fri", "Sat-Sun (Off Day)"]
    assert view.groups[0].break_time is None


def test_view_accepts_legacy_individual_form_and_envelope():
    individual = {
        "monday": {"enabled": True, "overrideHours": False, "dayType": "half"},
        "wednesday": {"enabled": True, "overrideHours": False, "dayType": "half"},
        "friday": {"enabled": True, "overrideHours": False, "dayType": "half"},
    }

    view = build_schedule_view(WorkingHoursPolicy.from_dict({"status": True, "data": {
        "name": "Shop", "startWorkingHours": "08:00", "endWorkingHours": "12:00", "dayOverrides": individual,
    }}))

    assert view.name == "Shop"
    assert [g.label for g in view.groups] == ["Mon, Wed, Fri"]
    assert view.groups[0].badges == ["Half Day"]
    assert view.to_dict()["groups"][0]["days"] == ["monday", "wednesday", "friday"]


def test_view_with_empty_overrides_list_uses_default_week():
    view = build_schedule_view(make_policy(dayOverrides=[]))

    assert view.has_overrides is False
    assert [g.label for g in view.groups] == ["Mon-Fri", "Sat-Sun (Off Day)"]
