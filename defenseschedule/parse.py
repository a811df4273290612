"""
Parsing (schedule workbook -> days -> meetings -> student works).

- Reads sheet 0 of the schedule workbook
- Splits it into blank-row separated blocks (see segment.py)
- Builds ONE CommissionMeeting per block
- Groups consecutive meetings with the same date into ONE DaySchedule
- Fills in consultants from the themes workbooks

Important rules:
- Only bachelors / masters meetings are kept, other blocks are skipped whole
- Blocks without a meeting header row are skipped as well
- The roster of a day comes from the first block of that day
- Any malformed block aborts the whole parse
"""

from __future__ import annotations

import re

from typing import Any, Callable, Iterable, List, Optional, Sequence

from defenseschedule.config import Config
from defenseschedule.consultants import ConsultantResolver
from defenseschedule.descriptor import is_defense_meeting, parse_meeting_info
from defenseschedule.errors import ScheduleFormatError
from defenseschedule.model import CommissionMeeting, DaySchedule, StudentWork
from defenseschedule.resources import open_resource, read_workbook
from defenseschedule.segment import ClassifiedBlock, StudentRow, cell_text, is_blank, iter_blocks


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

# Annotations like " (вторник)" after the date
TEXT_IN_BRACKETS = re.compile(r" \([^)]*\)")

CHAIR_PREFIX = "Председатель: "
SECRETARY_PREFIX = "Секретарь:"


# ---------------------------------------------------------------------------
# Meeting assembly
# ---------------------------------------------------------------------------


def _parse_number(row: StudentRow) -> int:
    """
    Read the ordinal number cell of a student row.
    """
    value = row.number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScheduleFormatError(
            f"Row {row.row_index + 1}: expected a number, got {value!r}",
            text=cell_text(value),
        )
    if isinstance(value, float) and not value.is_integer():
        raise ScheduleFormatError(
            f"Row {row.row_index + 1}: expected a whole number, got {value!r}",
            text=cell_text(value),
        )
    return int(value)


def assemble_student_work(row: StudentRow) -> StudentWork:
    return StudentWork(
        number=_parse_number(row),
        student_name=row.student_name,
        theme=row.theme,
        supervisor=row.supervisor,
        reviewer=row.reviewer,
    )


def assemble_meeting(block: ClassifiedBlock) -> CommissionMeeting:
    """
    Build a meeting from one block. Student rows without a name are dropped.
    """
    works = [assemble_student_work(row) for row in block.student_rows if row.student_name]
    return CommissionMeeting(
        time_and_auditorium=block.header_row.time_and_auditorium,
        meeting_info=block.header_row.meeting_info,
        student_works=works,
    )


# ---------------------------------------------------------------------------
# Day assembly
# ---------------------------------------------------------------------------


def strip_annotations(text: str) -> str:
    """
    Remove every " (...)" annotation, e.g. "26 мая (вторник)" -> "26 мая".
    """
    return TEXT_IN_BRACKETS.sub("", text)


def derive_roster(block: ClassifiedBlock) -> List[str]:
    """
    Collect commission members from the top of the block.

    Stops at the first blank member cell. The secretary is not a member;
    the chair keeps their name without the role prefix.
    """
    members: List[str] = []
    for value in block.member_cells():
        if is_blank(value):
            break
        member = cell_text(value)
        if member.startswith(SECRETARY_PREFIX):
            continue
        if member.startswith(CHAIR_PREFIX):
            member = member[len(CHAIR_PREFIX):].strip()
        members.append(member)
    return members


def assemble_days(
    rows: Iterable[Sequence[Any]],
    enrich: Optional[Callable[[CommissionMeeting], None]] = None,
) -> List[DaySchedule]:
    """
    Turn schedule rows into days in a single forward pass.

    ``enrich`` is called for every kept meeting before it is placed into a
    day (used to fill in consultants).
    """
    days: List[DaySchedule] = []

    for raw_block in iter_blocks(rows):
        # a lone row such as "1 июня (выходной)" has no meeting header
        if len(raw_block.rows) < 2:
            continue

        block = raw_block.classify()
        if not is_defense_meeting(block.header_row.meeting_info):
            continue

        # fail fast on malformed descriptors, even without enrichment
        parse_meeting_info(block.header_row.meeting_info)

        meeting = assemble_meeting(block)

        if enrich is not None:
            enrich(meeting)

        date = strip_annotations(block.date_row.date_text)

        if days and days[-1].date == date:
            days[-1].commission_meetings.append(meeting)
        else:
            days.append(DaySchedule(date, derive_roster(block), [meeting]))

    return days


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class ScheduleParser:
    """
    Parses the configured schedule workbook into a list of days.
    """

    def __init__(self, config: Config, opener: Callable[[str], Any] = open_resource) -> None:
        self.config = config
        self.opener = opener
        self.consultants = ConsultantResolver(config, opener)

    def parse(self) -> List[DaySchedule]:
        with self.opener(self.config.schedule) as stream:
            workbook = read_workbook(stream, self.config.schedule)
            try:
                sheet = workbook.worksheets[0]
                return assemble_days(sheet.iter_rows(values_only=True), self.consultants.enrich)
            finally:
                workbook.close()


def parse_schedule(config: Config) -> List[DaySchedule]:
    return ScheduleParser(config).parse()
