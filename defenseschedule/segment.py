"""
Row-block segmentation of the schedule sheet.

The schedule is a flat grid maintained by hand. Its structure is recovered
from blank rows only:

    row 0             title (skipped)
    <blank>
    date row          | 26 мая (вторник)  |                      | ... | Председатель: ...
    meeting header    | 11:00, ауд. 3381  | ИАС, бакалавры ...   | ... | Секретарь: ...
    student row   1   | Surname Name      | theme | supervisor | reviewer | ... | member
    student row   2   | ...
    <blank>
    next block ...

The same column holds different data depending on the role of the row, so
every role has its own column table below and rows are turned into typed
records before anything else looks at them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from defenseschedule.errors import ScheduleFormatError


# ---------------------------------------------------------------------------
# Column tables (0-based), one per row role
# ---------------------------------------------------------------------------

ROW_WIDTH = 8

DATE_ROW_COLUMNS: Dict[str, int] = {
    "date": 1,
    "member": 6,
}

HEADER_ROW_COLUMNS: Dict[str, int] = {
    "time_and_auditorium": 1,
    "meeting_info": 2,
    "member": 6,
}

STUDENT_ROW_COLUMNS: Dict[str, int] = {
    "number": 0,
    "student_name": 1,
    "theme": 2,
    "supervisor": 3,
    "reviewer": 4,
    "member": 6,
}


# ---------------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------------


def is_blank(value: Any) -> bool:
    """
    A cell is blank when it holds nothing or only whitespace.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def cells_are_blank(cells: Iterable[Any]) -> bool:
    return all(is_blank(value) for value in cells)


def cell_text(value: Any) -> str:
    """
    Convert a cell value to trimmed text ('' for empty cells).
    """
    if value is None:
        return ""
    return str(value).strip()


def _pad(row: Sequence[Any]) -> Tuple[Any, ...]:
    cells = tuple(row[:ROW_WIDTH])
    return cells + (None,) * (ROW_WIDTH - len(cells))


# ---------------------------------------------------------------------------
# Typed row records
# ---------------------------------------------------------------------------


@dataclass
class DateRow:
    row_index: int
    date_text: str
    member: Any


@dataclass
class HeaderRow:
    row_index: int
    time_and_auditorium: str
    meeting_info: str
    member: Any


@dataclass
class StudentRow:
    row_index: int
    number: Any
    student_name: str
    theme: str
    supervisor: str
    reviewer: str
    member: Any


@dataclass
class RowBlock:
    """
    One run of non-blank rows. ``rows`` holds (sheet row index, 8 cells)
    pairs; decorative rows are already removed.
    """

    start_row: int
    rows: List[Tuple[int, Tuple[Any, ...]]] = field(default_factory=list)

    def classify(self) -> "ClassifiedBlock":
        """
        Turn the raw rows into typed records by position:
        date row, meeting header row, student rows.
        """
        if len(self.rows) < 2:
            raise ScheduleFormatError(
                f"Schedule block at row {self.start_row + 1} has no meeting header row"
            )

        date_index, date_cells = self.rows[0]
        date_row = DateRow(
            row_index=date_index,
            date_text=cell_text(date_cells[DATE_ROW_COLUMNS["date"]]),
            member=date_cells[DATE_ROW_COLUMNS["member"]],
        )

        header_index, header_cells = self.rows[1]
        header_row = HeaderRow(
            row_index=header_index,
            time_and_auditorium=cell_text(header_cells[HEADER_ROW_COLUMNS["time_and_auditorium"]]),
            meeting_info=cell_text(header_cells[HEADER_ROW_COLUMNS["meeting_info"]]),
            member=header_cells[HEADER_ROW_COLUMNS["member"]],
        )

        student_rows = [
            StudentRow(
                row_index=index,
                number=cells[STUDENT_ROW_COLUMNS["number"]],
                student_name=cell_text(cells[STUDENT_ROW_COLUMNS["student_name"]]),
                theme=cell_text(cells[STUDENT_ROW_COLUMNS["theme"]]),
                supervisor=cell_text(cells[STUDENT_ROW_COLUMNS["supervisor"]]),
                reviewer=cell_text(cells[STUDENT_ROW_COLUMNS["reviewer"]]),
                member=cells[STUDENT_ROW_COLUMNS["member"]],
            )
            for index, cells in self.rows[2:]
        ]

        return ClassifiedBlock(date_row, header_row, student_rows)


@dataclass
class ClassifiedBlock:
    date_row: DateRow
    header_row: HeaderRow
    student_rows: List[StudentRow]

    def member_cells(self) -> List[Any]:
        """
        Commission member column of every row, top to bottom.
        """
        cells = [self.date_row.member, self.header_row.member]
        cells.extend(row.member for row in self.student_rows)
        return cells


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def iter_blocks(rows: Iterable[Sequence[Any]], first_row: int = 1) -> Iterator[RowBlock]:
    """
    Lazily split sheet rows into blocks separated by blank rows.

    Rows before ``first_row`` are skipped (row 0 is the sheet title).
    Inside a block, rows whose cells after the first are all blank are
    dropped, but they do not end the block.
    """
    block: Optional[RowBlock] = None

    for index, row in enumerate(rows):
        if index < first_row:
            continue

        if cells_are_blank(row):
            if block is not None and block.rows:
                yield block
            block = None
            continue

        if block is None:
            block = RowBlock(start_row=index)

        if cells_are_blank(row[1:]):
            continue

        block.rows.append((index, _pad(row)))

    if block is not None and block.rows:
        yield block
