"""
Exception hierarchy.

Library code never prints: every failure surfaces as one of these exceptions
and the CLI turns it into a single message and a nonzero exit code.
"""

from __future__ import annotations

from typing import Optional


class ScheduleError(Exception):
    """
    Base class for all errors raised by defenseschedule.
    """


class ScheduleFormatError(ScheduleError, ValueError):
    """
    The schedule or a themes workbook does not have the expected shape.

    The offending raw text (a meeting descriptor, a cell value, a sheet name)
    is kept in ``text`` so callers can show exactly what was wrong.
    """

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text


class ConfigError(ScheduleError):
    """
    The configuration file is missing or invalid.
    """


class ResourceError(ScheduleError, OSError):
    """
    A workbook could not be opened or downloaded.
    """
