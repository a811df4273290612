"""
Persistent storage for parsed schedules.

Parsing needs the schedule and every themes workbook, possibly downloaded
from the cloud. Saving the result as JSON lets later commands (e.g. file
verification) run without parsing again.

JSON schema:

    {"days": [{"date": ..., "commission_members": [...],
               "commission_meetings": [{"time_and_auditorium": ...,
                                        "meeting_info": ...,
                                        "student_works": [{...}]}]}]}
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, List

from defenseschedule.errors import ScheduleError
from defenseschedule.model import CommissionMeeting, DaySchedule, StudentWork


def save_days(days: Iterable[DaySchedule], path: str | Path) -> None:
    """
    Save days to a JSON file. Creates parent directories if needed.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {"days": [asdict(day) for day in days]}
    out_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def _day_from_dict(data: dict[str, Any]) -> DaySchedule:
    meetings = [
        CommissionMeeting(
            time_and_auditorium=m["time_and_auditorium"],
            meeting_info=m["meeting_info"],
            student_works=[StudentWork(**w) for w in m.get("student_works", [])],
        )
        for m in data.get("commission_meetings", [])
    ]
    return DaySchedule(
        date=data["date"],
        commission_members=list(data.get("commission_members", [])),
        commission_meetings=meetings,
    )


def load_days(path: str | Path) -> List[DaySchedule]:
    """
    Load days saved by save_days().

    A missing or broken file raises ScheduleError.
    """
    in_path = Path(path)
    try:
        data = json.loads(in_path.read_text(encoding="utf-8"))
        return [_day_from_dict(d) for d in data["days"]]
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ScheduleError(f"Cannot read saved schedule {in_path}: {exc}") from exc
    except (KeyError, TypeError, AttributeError) as exc:
        raise ScheduleError(f"Saved schedule {in_path} has an unexpected format: {exc!r}") from exc
