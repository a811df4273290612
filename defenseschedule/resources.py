"""
Resource resolution: turn a configured location into a readable byte stream.

A location is either a local path or an absolute URI of a shared file. The
distinction is purely syntactic; URIs are handed to a downloader, everything
else is opened from disk.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import BinaryIO, Callable, Optional
from urllib.parse import urlparse

import requests
from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from defenseschedule.errors import ResourceError
from defenseschedule.yadisk import download_public_file


Downloader = Callable[[str], bytes]


def is_absolute_uri(location: str) -> bool:
    """
    Return True for well-formed absolute URIs (scheme + host).

    Windows paths like "C:\\data\\a.xlsx" have a one-letter scheme but no
    host and are treated as paths.
    """
    parsed = urlparse(location.strip())
    return bool(parsed.scheme) and bool(parsed.netloc)


def open_resource(location: str, downloader: Optional[Downloader] = None) -> BinaryIO:
    """
    Open a path or URI for binary reading.

    The returned object is a context manager; callers must close it.
    Raises ResourceError if the file cannot be opened or downloaded.
    """
    location = location.strip()

    if is_absolute_uri(location):
        fetch = downloader or download_public_file
        try:
            content = fetch(location)
        except (requests.RequestException, ValueError) as exc:
            raise ResourceError(f"Cannot download {location}: {exc}") from exc
        return io.BytesIO(content)

    try:
        return Path(location).open("rb")
    except OSError as exc:
        raise ResourceError(f"Cannot open {location}: {exc}") from exc


def read_workbook(stream: BinaryIO, location: str) -> Workbook:
    """
    Load an xlsx workbook from an open stream.

    A file that is not a workbook (truncated, or an HTML error page served
    instead of the file) raises ResourceError naming the location.
    """
    try:
        return load_workbook(stream, data_only=True)
    except (zipfile.BadZipFile, InvalidFileException, KeyError, OSError) as exc:
        raise ResourceError(f"Cannot read workbook {location}: {exc}") from exc
