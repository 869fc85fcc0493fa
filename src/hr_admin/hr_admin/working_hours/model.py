from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union

from ..common.logging import get_logger
from ..core.enums import DayKey, DayType

logger = get_logger("working_hours.model")


def _parse_day_type(raw: Any) -> DayType:
    if not raw:
        return DayType.FULL
    try:
        return DayType(raw.lower() if isinstance(raw, str) else raw)
    except ValueError:
        logger.warning("Unknown dayType %r in day overrides, using full", raw)
        return DayType.FULL


@dataclass(frozen=True)
class DayOverride:
    """Per-day deviation from a policy's default working hours and break.

    Times are 24-hour ``HH:MM`` strings or ``""``; they only count when the
    matching override flag is set.
    """

    enabled: bool = True
    override_hours: bool = False
    start_time: str = ""
    end_time: str = ""
    override_break: bool = False
    start_break_time: str = ""
    end_break_time: str = ""
    day_type: DayType = DayType.FULL

    def config_key(self) -> tuple:
        """Identity used when grouping days with the same configuration."""
        return (
            self.enabled,
            self.override_hours,
            self.start_time,
            self.end_time,
            self.override_break,
            self.start_break_time,
            self.end_break_time,
            self.day_type,
        )

    @classmethod
    def from_dict(cls, r: Mapping[str, Any]) -> "DayOverride":
        return cls(
            enabled=bool(r.get("enabled", False)),
            override_hours=bool(r.get("overrideHours", False)),
            start_time=r.get("startTime") or "",
            end_time=r.get("endTime") or "",
            override_break=bool(r.get("overrideBreak", False)),
            start_break_time=r.get("startBreakTime") or "",
            end_break_time=r.get("endBreakTime") or "",
            day_type=_parse_day_type(r.get("dayType")),
        )

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "overrideHours": self.override_hours,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "overrideBreak": self.override_break,
            "startBreakTime": self.start_break_time,
            "endBreakTime": self.end_break_time,
            "dayType": self.day_type.value,
        }


@dataclass(frozen=True)
class OverrideGroup:
    """Days sharing one override configuration."""

    days: tuple[DayKey, ...]
    config: DayOverride

    @classmethod
    def from_dict(cls, r: Mapping[str, Any]) -> "OverrideGroup":
        return cls(days=_parse_days(r.get("days") or ()), config=DayOverride.from_dict(r))

    def to_dict(self) -> dict:
        return {"days": [d.value for d in self.days], **self.config.to_dict()}


@dataclass(frozen=True)
class GroupedOverrides:
    """Storage form: ordered partition of the week by configuration."""

    groups: tuple[OverrideGroup, ...] = ()

    def __iter__(self) -> Iterator[OverrideGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def to_payload(self) -> list[dict]:
        return [g.to_dict() for g in self.groups]


@dataclass(frozen=True)
class IndividualOverrides:
    """Editing form: one DayOverride per weekday."""

    days: Mapping[DayKey, DayOverride] = field(default_factory=dict)

    def __getitem__(self, day: DayKey) -> DayOverride:
        return self.days[day]

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def __len__(self) -> int:
        return len(self.days)

    def get(self, day: DayKey) -> Optional[DayOverride]:
        return self.days.get(day)

    def items(self) -> Iterator[tuple[DayKey, DayOverride]]:
        """Present days in week order."""
        for day in DayKey.ordered():
            if day in self.days:
                yield day, self.days[day]

    def to_payload(self) -> dict:
        return {day.value: override.to_dict() for day, override in self.items()}


DayOverrides = Union[GroupedOverrides, IndividualOverrides]


def _parse_days(raw_days) -> tuple[DayKey, ...]:
    days: list[DayKey] = []
    for raw in raw_days:
        day = DayKey.parse(raw)
        if day is None:
            logger.warning("Skipping unknown day %r in day overrides", raw)
            continue
        days.append(day)
    return tuple(days)


def parse_day_overrides(raw: Any) -> Optional[DayOverrides]:
    """Decide the stored shape of ``dayOverrides`` once, at the JSON boundary.

    A list is the grouped form, an object keyed by day name is the legacy
    individual form. A missing, null or empty field stays None so callers
    fall back to the default week.
    """
    if isinstance(raw, (GroupedOverrides, IndividualOverrides)):
        return raw
    if raw is None or (isinstance(raw, (str, list, Mapping)) and not raw):
        return None

    if isinstance(raw, list):
        return GroupedOverrides(groups=tuple(OverrideGroup.from_dict(g) for g in raw))

    if isinstance(raw, Mapping):
        days: dict[DayKey, DayOverride] = {}
        for raw_day, data in raw.items():
            day = DayKey.parse(raw_day)
            if day is None:
                logger.warning("Skipping unknown day %r in day overrides", raw_day)
                continue
            days[day] = DayOverride.from_dict(data or {})
        return IndividualOverrides(days=days)

    raise TypeError(f"Unsupported dayOverrides value type: {type(raw)!r}")


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


@dataclass(frozen=True)
class WorkingHoursPolicy:
    """Working hours policy as returned by the HR REST API."""

    id: str
    name: str
    start_working_hours: str
    end_working_hours: str
    short_day_mins: Optional[float] = None
    start_break_time: Optional[str] = None
    end_break_time: Optional[str] = None
    half_day_start_time: Optional[str] = None
    late_start_time: Optional[str] = None
    late_deduction_type: Optional[str] = None
    apply_deduction_after_lates: Optional[int] = None
    late_deduction_percent: Optional[float] = None
    half_day_deduction_type: Optional[str] = None
    apply_deduction_after_half_days: Optional[int] = None
    half_day_deduction_amount: Optional[float] = None
    short_day_deduction_type: Optional[str] = None
    apply_deduction_after_short_days: Optional[int] = None
    short_day_deduction_amount: Optional[float] = None
    overtime_rate: Optional[float] = None
    gazzeted_overtime_rate: Optional[float] = None
    day_overrides: Optional[DayOverrides] = None
    status: str = "active"
    is_default: bool = False
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, r: Mapping[str, Any]) -> "WorkingHoursPolicy":
        """Build from a policy record or a ``{"status": ..., "data": {...}}`` envelope."""
        if "data" in r and isinstance(r["data"], Mapping):
            r = r["data"]

        return cls(
            id=str(r.get("id") or ""),
            name=r.get("name") or "",
            start_working_hours=r.get("startWorkingHours") or "",
            end_working_hours=r.get("endWorkingHours") or "",
            short_day_mins=_opt_float(r.get("shortDayMins")),
            start_break_time=r.get("startBreakTime"),
            end_break_time=r.get("endBreakTime"),
            half_day_start_time=r.get("halfDayStartTime"),
            late_start_time=r.get("lateStartTime"),
            late_deduction_type=r.get("lateDeductionType"),
            apply_deduction_after_lates=_opt_int(r.get("applyDeductionAfterLates")),
            late_deduction_percent=_opt_float(r.get("lateDeductionPercent")),
            half_day_deduction_type=r.get("halfDayDeductionType"),
            apply_deduction_after_half_days=_opt_int(r.get("applyDeductionAfterHalfDays")),
            half_day_deduction_amount=_opt_float(r.get("halfDayDeductionAmount")),
            short_day_deduction_type=r.get("shortDayDeductionType"),
            apply_deduction_after_short_days=_opt_int(r.get("applyDeductionAfterShortDays")),
            short_day_deduction_amount=_opt_float(r.get("shortDayDeductionAmount")),
            overtime_rate=_opt_float(r.get("overtimeRate")),
            gazzeted_overtime_rate=_opt_float(r.get("gazzetedOvertimeRate")),
            day_overrides=parse_day_overrides(r.get("dayOverrides")),
            status=r.get("status") or "active",
            is_default=bool(r.get("isDefault", False)),
            created_by=r.get("createdBy"),
            created_at=r.get("createdAt"),
            updated_at=r.get("updatedAt"),
        )
