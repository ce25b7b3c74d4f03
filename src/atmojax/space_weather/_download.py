"""Fetch the CelesTrak CSSI space weather file."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

CELESTRAK_SW_URL: str = "https://celestrak.org/SpaceData/SW-All.txt"
"""CelesTrak CSSI space weather file, full history since 1957."""

SW_FILENAME: str = "sw19571001.txt"
"""Filename of the cached space weather file."""

DEFAULT_TIMEOUT: float = 120.0
"""HTTP timeout in seconds."""


def download_sw_file(
    filepath: str | Path,
    *,
    url: str = CELESTRAK_SW_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """Download the CSSI space weather file to *filepath*.

    Parent directories are created as needed. The file is written only
    after a successful response, so a failed download leaves any previous
    copy untouched.

    Args:
        filepath: Destination path.
        url: Source URL. Defaults to :data:`CELESTRAK_SW_URL`.
        timeout: HTTP timeout in seconds.

    Returns:
        Resolved path of the written file.

    Raises:
        httpx.HTTPStatusError: On a non-2xx response.
        httpx.TransportError: On network failures (DNS, timeout, ...).
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading space weather data from %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        response = client.get(url)
        response.raise_for_status()

    filepath.write_text(response.text, encoding="utf-8")
    logger.info("Wrote %d bytes of space weather data to %s", len(response.content), filepath)
    return filepath.resolve()
