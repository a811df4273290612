"""
Yandex.Disk downloader for publicly shared files.

A public link cannot be fetched directly: the public API first returns a
temporary direct link ("href"), which is then downloaded.
"""

from __future__ import annotations

from typing import Optional

import requests


# ---------------------------------------------------------------------------
# Yandex.Disk public API
# ---------------------------------------------------------------------------

DOWNLOAD_API_URL = "https://cloud-api.yandex.net/v1/disk/public/resources/download"


def _fetch_download_href(public_url: str, session: requests.Session, timeout: float) -> str:
    """
    Ask the public API for a direct download link of a shared file.
    """
    params = {"public_key": public_url}
    resp = session.get(DOWNLOAD_API_URL, params=params, timeout=timeout)
    resp.raise_for_status()

    href = resp.json().get("href")
    if not href:
        raise ValueError(f"No download link returned for: {public_url}")
    return href


def download_public_file(
    public_url: str,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> bytes:
    """
    Download a publicly shared Yandex.Disk file and return its content.
    """
    http = session or requests.Session()
    try:
        href = _fetch_download_href(public_url, http, timeout)
        resp = http.get(href, timeout=timeout)
        resp.raise_for_status()
        return resp.content
    finally:
        if session is None:
            http.close()
