"""
Consultant lookup in the themes workbooks.

Every level of education has its own themes workbook with one sheet per
chair. Each sheet lists student names (column A) and consultants (column E).
A meeting's descriptor tells which workbook and which sheet to read; the
students of the meeting are then matched by exact name.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from defenseschedule.config import Config
from defenseschedule.descriptor import parse_meeting_info
from defenseschedule.errors import ScheduleFormatError
from defenseschedule.model import CommissionMeeting, StudentWork
from defenseschedule.resources import open_resource, read_workbook
from defenseschedule.segment import cell_text, cells_are_blank


THEMES_STUDENT_NAME_COLUMN = 0
THEMES_CONSULTANT_COLUMN = 4


# ---------------------------------------------------------------------------
# Sheets
# ---------------------------------------------------------------------------


def merge_sheets(sheets: Sequence[Worksheet]) -> Worksheet:
    """
    Union worksheets that share the same header row into one new sheet.

    The header is copied from the first sheet, then the data rows of every
    sheet follow in order. Only cell values are copied, as text. Headers are
    assumed to match by position and are not compared.
    """
    merged = Workbook().active

    header = next(sheets[0].iter_rows(min_row=1, max_row=1, values_only=True), ())
    merged.append([_text_or_none(value) for value in header])

    for sheet in sheets:
        for row in sheet.iter_rows(min_row=2, values_only=True):
            merged.append([_text_or_none(value) for value in row])

    return merged


def _text_or_none(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _get_sheet(workbook: Workbook, name: str) -> Worksheet:
    if name not in workbook.sheetnames:
        raise ScheduleFormatError(f"Themes workbook has no sheet named {name!r}", text=name)
    return workbook[name]


def resolve_chair_sheet(
    workbook: Workbook,
    chair: str,
    chair_sheets: Dict[str, List[str]],
) -> Worksheet:
    """
    Pick the sheet for a chair.

    A chair listed in ``chair_sheets`` with several names is merged from
    those sheets, with one name it is an alias. Any other chair is looked
    up by its own name.
    """
    names = chair_sheets.get(chair) or [chair]
    if len(names) == 1:
        return _get_sheet(workbook, names[0])
    return merge_sheets([_get_sheet(workbook, name) for name in names])


def read_consultant_pairs(sheet: Worksheet) -> List[Tuple[str, str]]:
    """
    Read (student name, consultant) from every row below the header.
    """
    pairs: List[Tuple[str, str]] = []
    for row in sheet.iter_rows(min_row=2, values_only=True):
        if cells_are_blank(row):
            continue
        name = cell_text(row[THEMES_STUDENT_NAME_COLUMN]) if len(row) > THEMES_STUDENT_NAME_COLUMN else ""
        consultant = cell_text(row[THEMES_CONSULTANT_COLUMN]) if len(row) > THEMES_CONSULTANT_COLUMN else ""
        pairs.append((name, consultant))
    return pairs


# ---------------------------------------------------------------------------
# Join
# ---------------------------------------------------------------------------


def apply_consultants(works: Sequence[StudentWork], pairs: Sequence[Tuple[str, str]]) -> None:
    """
    Set each work's consultant from the pairs with exactly the same name.

    If a name occurs several times, the last row wins. Works without a
    match are left untouched.
    """
    # TODO: decide with the secretaries whether duplicate names in a themes
    # sheet should be reported instead of silently taking the last row.
    for work in works:
        for name, consultant in pairs:
            if name == work.student_name:
                work.consultant = consultant


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class ConsultantResolver:
    """
    Fills in consultants for the students of a meeting.
    """

    def __init__(self, config: Config, opener: Callable[[str], Any] = open_resource) -> None:
        self.config = config
        self.opener = opener

    def load_pairs(self, location: str, chair: str) -> List[Tuple[str, str]]:
        """
        Open a themes workbook and read the pairs of a chair's sheet.
        """
        with self.opener(location) as stream:
            workbook = read_workbook(stream, location)
            try:
                sheet = resolve_chair_sheet(workbook, chair, self.config.chair_sheets)
                return read_consultant_pairs(sheet)
            finally:
                workbook.close()

    def enrich(self, meeting: CommissionMeeting) -> None:
        info = parse_meeting_info(meeting.meeting_info)

        if self.config.strict_levels and info.level not in self.config.themes:
            raise ScheduleFormatError(f"Unknown level of education: {info.level!r}", text=info.level)

        location = self.config.themes_location(info.level)
        if not location:
            return

        pairs = self.load_pairs(location, info.chair)
        apply_consultants(meeting.student_works, pairs)
