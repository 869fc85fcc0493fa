import pytest

from src.hr_admin.hr_admin.core.enums import DayKey, DayType
from src.hr_admin.hr_admin.working_hours.model import (
    DayOverride,
    GroupedOverrides,
    IndividualOverrides,
    WorkingHoursPolicy,
    parse_day_overrides,
)


def test_parse_day_overrides_decides_shape_once():
    assert parse_day_overrides(None) is None
    assert isinstance(parse_day_overrides([{"days": ["monday"]}]), GroupedOverrides)
    assert isinstance(parse_day_overrides({"monday": {}}), IndividualOverrides)

    already = IndividualOverrides()
    assert parse_day_overrides(already) is already


def test_parse_day_overrides_skips_unknown_days():
    grouped = parse_day_overrides([{"days": ["Monday", "funday"], "enabled": True, "dayType": "half"}])
    individual = parse_day_overrides({"funday": {"enabled": True}, "sunday": {"enabled": False}})

    assert grouped.groups[0].days == (DayKey.MONDAY,)
    assert grouped.groups[0].config == DayOverride(enabled=True, day_type=DayType.HALF)
    assert list(individual.days) == [DayKey.SUNDAY]


def test_parse_day_overrides_rejects_other_types():
    with pytest.raises(TypeError):
        parse_day_overrides("weekdays")


def test_policy_from_dict():
    policy = WorkingHoursPolicy.from_dict(
        {
            "id": 7,
            "name": "Night",
            "startWorkingHours": "22:00",
            "endWorkingHours": "06:00",
            "applyDeductionAfterHalfDays": "2",
            "halfDayDeductionAmount": 500,
            "isDefault": True,
            "createdBy": "admin",
        }
    )

    assert policy.id == "7"
    assert policy.apply_deduction_after_half_days == 2
    assert policy.half_day_deduction_amount == 500.0
    assert policy.day_overrides is None
    assert policy.status == "active"
    assert policy.is_default is True


def test_group_payload_lists_days_first():
    grouped = parse_day_overrides([{"days": ["saturday", "sunday"], "enabled": False}])

    assert grouped.to_payload() == [
        {
            "days": ["saturday", "sunday"],
            "enabled": False,
            "overrideHours": False,
            "startTime": "",
            "endTime": "",
            "overrideBreak": False,
            "startBreakTime": "",
            "endBreakTime": "",
            "dayType": "full",
        }
    ]


@pytest.mark.parametrize("raw", ["", [], {}])
def test_parse_day_overrides_empty_values_are_absent(raw):
    assert parse_day_overrides(raw) is None


def test_unknown_day_type_falls_back_to_full():
    grouped = parse_day_overrides([{"days": ["friday"], "enabled": True, "dayType": "quarter"}])
    individual = parse_day_overrides({"friday": {"enabled": True, "dayType": "HALF"}})

    assert grouped.groups[0].config.day_type == DayType.FULL
    assert individual[DayKey.FRIDAY].day_type == DayType.HALF
