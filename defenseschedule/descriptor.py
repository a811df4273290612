"""
Meeting descriptor parsing.

The second row of every schedule block carries a free-text descriptor such as

    "ИАС, бакалавры техпрога, ГЭК 5006-02"

which encodes three values: chair, level of education and commission id.
"""

from __future__ import annotations

from typing import NamedTuple

from defenseschedule.errors import ScheduleFormatError


# Only meetings for these levels are defenses. The terms are matched
# against existing workbooks and must stay verbatim.
DEFENSE_MARKERS = ("бакалавры", "магистры")

DESCRIPTOR_SEPARATOR = ", "


class MeetingInfo(NamedTuple):
    chair: str
    level: str
    identifier: str


def is_defense_meeting(meeting_info: str) -> bool:
    """
    Return True if the descriptor mentions bachelors or masters.
    """
    text = meeting_info.casefold()
    return any(marker in text for marker in DEFENSE_MARKERS)


def parse_meeting_info(meeting_info: str) -> MeetingInfo:
    """
    Split a descriptor into (chair, level, identifier).

    Raises ScheduleFormatError unless there are exactly three fields.
    """
    parts = meeting_info.split(DESCRIPTOR_SEPARATOR)
    if len(parts) != 3:
        raise ScheduleFormatError(
            f"Invalid meeting descriptor (expected 'chair, level, id'): {meeting_info!r}",
            text=meeting_info,
        )
    chair, level, identifier = parts
    return MeetingInfo(chair, level, identifier)
