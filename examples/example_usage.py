"""Example: using the service layer directly (no Flask).

Controllers stay thin; the policy edit/save/view flows live in the service.
"""

import json

from src.hr_admin.hr_admin.container import build_container

POLICY = {
    "status": True,
    "data": {
        "id": "whp-1",
        "name": "Head Office",
        "startWorkingHours": "09:00",
        "endWorkingHours": "18:00",
        "startBreakTime": "13:00",
        "endBreakTime": "14:00",
        "shortDayMins": 120,
        "status": "active",
        "dayOverrides": [
            {"days": ["monday", "tuesday", "wednesday", "thursday"], "enabled": True, "overrideHours": False,
             "startTime": "", "endTime": "", "overrideBreak": False, "startBreakTime": "", "endBreakTime": "",
             "dayType": "full"},
            {"days": ["friday"], "enabled": True, "overrideHours": True, "startTime": "10:00", "endTime": "14:00",
             "overrideBreak": False, "startBreakTime": "", "endBreakTime": "", "dayType": "custom"},
            {"days": ["saturday", "sunday"], "enabled": False, "overrideHours": False, "startTime": "",
             "endTime": "", "overrideBreak": False, "startBreakTime": "", "endBreakTime": "", "dayType": "full"},
        ],
    },
}


def main():
    service = build_container().working_hours_service

    form = service.edit_form(POLICY)
    form["dayOverrides"]["saturday"]["enabled"] = True
    form["dayOverrides"]["saturday"]["dayType"] = "half"

    print(json.dumps(service.group_preview(form), indent=2))
    print(json.dumps(service.save_payload(form), indent=2))
    print(json.dumps(service.schedule_view(POLICY), indent=2))


if __name__ == "__main__":
    main()
