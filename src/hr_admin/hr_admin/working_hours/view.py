from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.time_format import format_time_for_display
from ..core.constants import OFF_DAY_SUFFIX, WEEK_ORDER, WeekDay
from ..core.enums import DayType
from .codec import applies_to_label, compress_to_grouped, expand_to_individual, format_group_label
from .model import OverrideGroup, WorkingHoursPolicy

DAY_TYPE_BADGES = {
    DayType.FULL: "Full Day",
    DayType.HALF: "Half Day",
    DayType.CUSTOM: "Custom",
}


@dataclass(frozen=True)
class DayGroupRow:
    """Read-model of one day group in the policy view dialog."""

    label: str
    applies_to: str
    days: list[str]
    enabled: bool
    badges: list[str]
    working_hours: Optional[str]
    break_time: Optional[str]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "appliesTo": self.applies_to,
            "days": list(self.days),
            "enabled": self.enabled,
            "badges": list(self.badges),
            "workingHours": self.working_hours,
            "breakTime": self.break_time,
        }


@dataclass(frozen=True)
class PolicyScheduleView:
    name: str
    working_hours: str
    break_time: Optional[str]
    half_day_start_time: str
    late_start_time: str
    has_overrides: bool
    groups: list[DayGroupRow]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "workingHours": self.working_hours,
            "breakTime": self.break_time,
            "halfDayStartTime": self.half_day_start_time,
            "lateStartTime": self.late_start_time,
            "hasOverrides": self.has_overrides,
            "groups": [g.to_dict() for g in self.groups],
        }


def _time_range(start: Optional[str], end: Optional[str]) -> str:
    return f"{format_time_for_display(start, True)} - {format_time_for_display(end, True)}"


def _badges(group: OverrideGroup) -> list[str]:
    config = group.config
    if not config.enabled:
        return ["Off Day"]

    badges: list[str] = []
    if config.override_hours:
        badges.append("Custom Hours")
    if config.override_break:
        badges.append("Custom Break")
    badges.append(DAY_TYPE_BADGES[config.day_type])
    return badges


def _group_row(group: OverrideGroup, policy: WorkingHoursPolicy, week_order: Sequence[WeekDay]) -> DayGroupRow:
    config = group.config
    label = format_group_label(group.days, week_order)
    if not config.enabled:
        label += OFF_DAY_SUFFIX

    working_hours = break_time = None
    if config.enabled:
        start = config.start_time if config.override_hours else policy.start_working_hours
        end = config.end_time if config.override_hours else policy.end_working_hours
        working_hours = _time_range(start, end)

        start_break = config.start_break_time if config.override_break else policy.start_break_time
        end_break = config.end_break_time if config.override_break else policy.end_break_time
        if start_break or end_break:
            break_time = _time_range(start_break, end_break)

    return DayGroupRow(
        label=label,
        applies_to=applies_to_label(group.days, week_order),
        days=[d.value for d in group.days],
        enabled=config.enabled,
        badges=_badges(group),
        working_hours=working_hours,
        break_time=break_time,
    )


def build_schedule_view(policy: WorkingHoursPolicy, week_order: Sequence[WeekDay] = WEEK_ORDER) -> PolicyScheduleView:
    """Group the policy's week for display, whichever form it was stored in."""
    grouped = compress_to_grouped(expand_to_individual(policy.day_overrides), week_order)

    default_break = None
    if policy.start_break_time or policy.end_break_time:
        default_break = _time_range(policy.start_break_time, policy.end_break_time)

    return PolicyScheduleView(
        name=policy.name,
        working_hours=_time_range(policy.start_working_hours, policy.end_working_hours),
        break_time=default_break,
        half_day_start_time=format_time_for_display(policy.half_day_start_time, True),
        late_start_time=format_time_for_display(policy.late_start_time, True),
        has_overrides=policy.day_overrides is not None,
        groups=[_group_row(g, policy, week_order) for g in grouped],
    )
