"""
Central data model definitions used across the project.

The parser produces exactly this shape:

    DaySchedule -> CommissionMeeting -> StudentWork

so that the JSON storage, the file verifier and the CLI all share the same
field names.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class StudentWork:
    """
    Represents one student's defense record inside a commission meeting.

    ``consultant`` is None while no consultant was found in the themes
    workbook. An empty string means the themes workbook lists the student
    with a blank consultant cell.

    The ``has_*`` flags are filled in later by the file verifier.
    """

    number: int
    student_name: str
    theme: str
    supervisor: str
    reviewer: str
    consultant: Optional[str] = None
    has_report: bool = False
    has_presentation: bool = False
    has_supervisor_review: bool = False
    has_consultant_review: bool = False
    has_reviewer_review: bool = False

    def has_all_files(self) -> bool:
        return (
            self.has_report
            and self.has_presentation
            and self.has_supervisor_review
            and self.has_consultant_review
            and self.has_reviewer_review
        )


@dataclass
class CommissionMeeting:
    """
    Represents one defense session of a state examination commission.

    ``meeting_info`` has the form "<chair>, <level>, <identifier>".
    """

    time_and_auditorium: str
    meeting_info: str
    student_works: List[StudentWork] = field(default_factory=list)


@dataclass
class DaySchedule:
    """
    Represents one calendar day of the schedule.

    ``commission_members`` is taken from the first block of the day only.
    """

    date: str
    commission_members: List[str] = field(default_factory=list)
    commission_meetings: List[CommissionMeeting] = field(default_factory=list)

    def student_works(self) -> List[StudentWork]:
        works: List[StudentWork] = []
        for meeting in self.commission_meetings:
            works.extend(meeting.student_works)
        return works
