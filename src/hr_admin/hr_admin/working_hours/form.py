from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import (
    Number,
    compact_number,
    empty_to_none,
    number_to_field,
    parse_optional_float,
    parse_optional_int,
    require_non_empty,
)
from ..core.constants import WEEK_ORDER, WeekDay
from ..core.enums import ShortDayUnit
from ..core.exceptions import ValidationError
from .codec import compress_to_grouped, default_overrides, expand_to_individual
from .model import IndividualOverrides, WorkingHoursPolicy

# (form attribute, JSON key) for the plain string fields.
_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "name"),
    ("start_working_hours", "startWorkingHours"),
    ("end_working_hours", "endWorkingHours"),
    ("short_day_value", "shortDayValue"),
    ("start_break_time", "startBreakTime"),
    ("end_break_time", "endBreakTime"),
    ("half_day_start_time", "halfDayStartTime"),
    ("late_start_time", "lateStartTime"),
    ("late_deduction_type", "lateDeductionType"),
    ("apply_deduction_after_lates", "applyDeductionAfterLates"),
    ("late_deduction_percent", "lateDeductionPercent"),
    ("half_day_deduction_type", "halfDayDeductionType"),
    ("apply_deduction_after_half_days", "applyDeductionAfterHalfDays"),
    ("half_day_deduction_amount", "halfDayDeductionAmount"),
    ("short_day_deduction_type", "shortDayDeductionType"),
    ("apply_deduction_after_short_days", "applyDeductionAfterShortDays"),
    ("short_day_deduction_amount", "shortDayDeductionAmount"),
    ("overtime_rate", "overtimeRate"),
    ("gazzeted_overtime_rate", "gazzetedOvertimeRate"),
    ("status", "status"),
)


@dataclass
class WorkingHoursPolicyForm:
    """Create/edit form state: every field as typed by the user."""

    name: str = ""
    start_working_hours: str = ""
    end_working_hours: str = ""
    short_day_unit: ShortDayUnit = ShortDayUnit.MINS
    short_day_value: str = ""
    start_break_time: str = ""
    end_break_time: str = ""
    half_day_start_time: str = ""
    late_start_time: str = ""
    late_deduction_type: str = ""
    apply_deduction_after_lates: str = ""
    late_deduction_percent: str = ""
    half_day_deduction_type: str = ""
    apply_deduction_after_half_days: str = ""
    half_day_deduction_amount: str = ""
    short_day_deduction_type: str = ""
    apply_deduction_after_short_days: str = ""
    short_day_deduction_amount: str = ""
    overtime_rate: str = ""
    gazzeted_overtime_rate: str = ""
    status: str = ""
    day_overrides: IndividualOverrides = field(default_factory=default_overrides)

    @classmethod
    def blank(cls) -> "WorkingHoursPolicyForm":
        return cls()

    @classmethod
    def from_policy(cls, policy: WorkingHoursPolicy) -> "WorkingHoursPolicyForm":
        unit, value = ShortDayUnit.MINS, ""
        if policy.short_day_mins:
            mins = compact_number(policy.short_day_mins)
            if mins % 60 == 0:
                unit, value = ShortDayUnit.HOURS, number_to_field(mins / 60)
            else:
                value = number_to_field(mins)

        return cls(
            name=policy.name,
            start_working_hours=policy.start_working_hours,
            end_working_hours=policy.end_working_hours,
            short_day_unit=unit,
            short_day_value=value,
            start_break_time=policy.start_break_time or "",
            end_break_time=policy.end_break_time or "",
            half_day_start_time=policy.half_day_start_time or "",
            late_start_time=policy.late_start_time or "",
            late_deduction_type=policy.late_deduction_type or "",
            apply_deduction_after_lates=number_to_field(policy.apply_deduction_after_lates),
            late_deduction_percent=number_to_field(policy.late_deduction_percent),
            half_day_deduction_type=policy.half_day_deduction_type or "",
            apply_deduction_after_half_days=number_to_field(policy.apply_deduction_after_half_days),
            half_day_deduction_amount=number_to_field(policy.half_day_deduction_amount),
            short_day_deduction_type=policy.short_day_deduction_type or "",
            apply_deduction_after_short_days=number_to_field(policy.apply_deduction_after_short_days),
            short_day_deduction_amount=number_to_field(policy.short_day_deduction_amount),
            overtime_rate=number_to_field(policy.overtime_rate),
            gazzeted_overtime_rate=number_to_field(policy.gazzeted_overtime_rate),
            status=policy.status,
            day_overrides=expand_to_individual(policy.day_overrides),
        )

    @classmethod
    def from_dict(cls, r: Mapping[str, Any]) -> "WorkingHoursPolicyForm":
        values = {attr: _field(r.get(key)) for attr, key in _TEXT_FIELDS}
        return cls(
            short_day_unit=ShortDayUnit(r.get("shortDayUnit") or ShortDayUnit.MINS.value),
            day_overrides=expand_to_individual(r.get("dayOverrides")),
            **values,
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {key: getattr(self, attr) for attr, key in _TEXT_FIELDS}
        out["shortDayUnit"] = self.short_day_unit.value
        out["dayOverrides"] = self.day_overrides.to_payload()
        return out

    def short_day_mins(self) -> Optional[Number]:
        value = parse_optional_float(self.short_day_value)
        if value is None:
            return None
        if self.short_day_unit == ShortDayUnit.HOURS:
            value *= 60
        return compact_number(value)

    def validate(self, *, creating: bool = False, week_order: Sequence[WeekDay] = WEEK_ORDER) -> None:
        if creating:
            require_non_empty(self.name, "Working Hours Policy Name is required")
            if not self.start_working_hours:
                raise ValidationError("Start Working Hours Time is required")
            if not self.end_working_hours:
                raise ValidationError("End Working Hours Time is required")
        else:
            require_non_empty(self.name, "Policy name is required")
            if not self.start_working_hours or not self.end_working_hours:
                raise ValidationError("Start and end working hours are required")

        enabled = [(d.label, self.day_overrides[d.key]) for d in week_order if d.key in self.day_overrides]
        enabled = [(label, day) for label, day in enabled if day.enabled]
        if not enabled:
            raise ValidationError("At least one day must be enabled")

        for label, day in enabled:
            if day.override_hours and (not day.start_time or not day.end_time):
                raise ValidationError(f'Please set start and end times for {label} or uncheck "Override Hours"')

    def to_payload(self, *, creating: bool = False, week_order: Sequence[WeekDay] = WEEK_ORDER) -> dict:
        """Validate and build the create/update request body."""
        self.validate(creating=creating, week_order=week_order)

        payload: dict[str, Any] = {
            "name": self.name.strip(),
            "startWorkingHours": self.start_working_hours,
            "endWorkingHours": self.end_working_hours,
            "shortDayMins": self.short_day_mins(),
            "startBreakTime": empty_to_none(self.start_break_time),
            "endBreakTime": empty_to_none(self.end_break_time),
            "halfDayStartTime": empty_to_none(self.half_day_start_time),
            "lateStartTime": empty_to_none(self.late_start_time),
            "lateDeductionType": empty_to_none(self.late_deduction_type),
            "applyDeductionAfterLates": parse_optional_int(self.apply_deduction_after_lates),
            "lateDeductionPercent": parse_optional_float(self.late_deduction_percent),
            "halfDayDeductionType": empty_to_none(self.half_day_deduction_type),
            "applyDeductionAfterHalfDays": parse_optional_int(self.apply_deduction_after_half_days),
            "halfDayDeductionAmount": parse_optional_float(self.half_day_deduction_amount),
            "shortDayDeductionType": empty_to_none(self.short_day_deduction_type),
            "applyDeductionAfterShortDays": parse_optional_int(self.apply_deduction_after_short_days),
            "shortDayDeductionAmount": parse_optional_float(self.short_day_deduction_amount),
            "overtimeRate": _overtime_rate(self.overtime_rate),
            "gazzetedOvertimeRate": _overtime_rate(self.gazzeted_overtime_rate),
        }
        if not creating:
            payload["status"] = self.status
        payload["dayOverrides"] = compress_to_grouped(self.day_overrides, week_order).to_payload()
        return payload


def _field(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_to_field(value)
    return str(value)


def _overtime_rate(value: str) -> Optional[float]:
    # "0" is the "None" option of the overtime select.
    if not value or value == "0":
        return None
    return parse_optional_float(value)
