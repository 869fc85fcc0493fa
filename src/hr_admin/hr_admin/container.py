from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .core.constants import WEEK_ORDER, WeekDay
from .working_hours.service import WorkingHoursPolicyService


@dataclass(frozen=True)
class Container:
    working_hours_service: WorkingHoursPolicyService


def build_container(*, week_order: Sequence[WeekDay] = WEEK_ORDER) -> Container:
    working_hours_service = WorkingHoursPolicyService(week_order=week_order)

    return Container(
        working_hours_service=working_hours_service,
    )
