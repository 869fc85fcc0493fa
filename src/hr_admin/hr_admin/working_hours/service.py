from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.logging import get_logger
from ..core.constants import WEEK_ORDER, WeekDay
from ..core.exceptions import ValidationError
from .codec import applies_to_label, compress_to_grouped, format_group_label
from .form import WorkingHoursPolicyForm
from .model import WorkingHoursPolicy
from .view import build_schedule_view

logger = get_logger("working_hours.service")


class WorkingHoursPolicyService:
    """Edit, save and view flows of the working hours policy screens.

    Stateless: callers hand in the JSON they fetched from the HR API and get
    back the form model, the request body to send, or the display model.
    """

    def __init__(self, *, week_order: Sequence[WeekDay] = WEEK_ORDER):
        self._week_order = tuple(week_order)

    def _policy(self, raw: Mapping[str, Any]) -> WorkingHoursPolicy:
        try:
            return WorkingHoursPolicy.from_dict(raw)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid working hours policy: {e}") from e

    def _form(self, raw: Mapping[str, Any]) -> WorkingHoursPolicyForm:
        try:
            return WorkingHoursPolicyForm.from_dict(raw)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid working hours policy form: {e}") from e

    def blank_form(self) -> dict:
        return WorkingHoursPolicyForm.blank().to_dict()

    def edit_form(self, raw_policy: Mapping[str, Any]) -> dict:
        policy = self._policy(raw_policy)
        logger.debug("Preparing edit form for policy %s", policy.id or "<new>")
        return WorkingHoursPolicyForm.from_policy(policy).to_dict()

    def save_payload(self, raw_form: Mapping[str, Any], *, creating: bool = False) -> dict:
        form = self._form(raw_form)
        payload = form.to_payload(creating=creating, week_order=self._week_order)
        logger.info(
            "Built %s payload for policy %r with %d day group(s)",
            "create" if creating else "update",
            payload["name"],
            len(payload["dayOverrides"]),
        )
        return payload

    def group_preview(self, raw_form: Mapping[str, Any]) -> list[dict]:
        """Day groups of the form as the edit dialog's accordion shows them."""
        form = self._form(raw_form)
        grouped = compress_to_grouped(form.day_overrides, self._week_order)
        return [
            {
                "label": format_group_label(g.days, self._week_order),
                "appliesTo": applies_to_label(g.days, self._week_order),
                **g.to_dict(),
            }
            for g in grouped
        ]

    def schedule_view(self, raw_policy: Mapping[str, Any]) -> dict:
        policy = self._policy(raw_policy)
        return build_schedule_view(policy, self._week_order).to_dict()
