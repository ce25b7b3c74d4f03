"""Parser for CelesTrak CSSI space weather files (``SW-All.txt``).

The file has three data sections (``OBSERVED``, ``DAILY_PREDICTED`` and
``MONTHLY_PREDICTED``) of fixed-width records, one per UTC day. The
monthly-predicted section carries only the F10.7 columns; its Kp/Ap
fields are reported as NaN.
"""

from __future__ import annotations

import datetime
import math
from pathlib import Path
from typing import NamedTuple

# MJD of 0001-01-01 in the proleptic Gregorian ordinal numbering.
_MJD_ORDINAL_OFFSET = 678576

# Fixed-width column ranges (0-indexed, end exclusive).
_DATE_COLUMNS = ((0, 4), (4, 7), (7, 10))
_KP_START, _KP_WIDTH = 18, 3
_AP_START, _AP_WIDTH = 46, 4
_AP_DAILY_COLUMNS = (78, 82)
_F107_OBS_COLUMNS = (92, 98)
_F107_ADJ_CTR81_COLUMNS = (100, 106)
_F107_ADJ_LST81_COLUMNS = (106, 112)
_F107_OBS_CTR81_COLUMNS = (112, 118)
_F107_OBS_LST81_COLUMNS = (118, 124)

_MIN_LENGTH_DAILY = 130
_MIN_LENGTH_MONTHLY = 124

_SECTIONS = {
    "BEGIN OBSERVED": "OBSERVED",
    "BEGIN DAILY_PREDICTED": "DAILY_PREDICTED",
    "BEGIN MONTHLY_PREDICTED": "MONTHLY_PREDICTED",
}


class CssiRecord(NamedTuple):
    """One parsed day of a CSSI file."""

    mjd: float
    kp: list[float]
    ap: list[float]
    ap_daily: float
    f107_obs: float
    f107_adj: float
    f107_obs_ctr81: float
    f107_obs_lst81: float
    f107_adj_ctr81: float
    f107_adj_lst81: float


def kp_from_code(code: int) -> float:
    """Convert a CSSI Kp code (0-90) to the 0.0-9.0 scale.

    The code is ten times the Kp value with thirds rounded to 3 and 7:
    ``13`` is 1+ (1.333), ``17`` is 2- (1.667).

    Args:
        code: Integer Kp code.

    Returns:
        Kp value.
    """
    whole, tenth = divmod(code, 10)
    if tenth == 3:
        return whole + 1.0 / 3.0
    if tenth == 7:
        return whole + 2.0 / 3.0
    return whole + tenth / 10.0


def _field(line: str, columns: tuple[int, int]) -> str:
    start, end = columns
    if end > len(line):
        return ""
    return line[start:end].strip()


def _float_field(line: str, columns: tuple[int, int]) -> float:
    text = _field(line, columns)
    try:
        return float(text) if text else math.nan
    except ValueError:
        return math.nan


def _int_field(line: str, columns: tuple[int, int]) -> int | None:
    text = _field(line, columns)
    try:
        return int(text) if text else None
    except ValueError:
        return None


def is_data_line(line: str) -> bool:
    """Return whether *line* starts with a 4-digit year."""
    return len(line) >= 4 and line[:4].strip().isdigit()


def parse_cssi_line(line: str, monthly: bool = False) -> CssiRecord | None:
    """Parse one fixed-width CSSI data line.

    Args:
        line: Data line, without the trailing newline.
        monthly: Whether the line belongs to the monthly-predicted section.

    Returns:
        The parsed record, or ``None`` if the line is too short or its
        date is malformed.
    """
    if len(line) < (_MIN_LENGTH_MONTHLY if monthly else _MIN_LENGTH_DAILY):
        return None

    year, month, day = (_int_field(line, cols) for cols in _DATE_COLUMNS)
    if year is None or month is None or day is None:
        return None
    try:
        mjd = float(datetime.date(year, month, day).toordinal() - _MJD_ORDINAL_OFFSET)
    except ValueError:
        return None

    if monthly:
        kp = [math.nan] * 8
        ap = [math.nan] * 8
        ap_daily = math.nan
    else:
        kp = []
        for i in range(8):
            code = _int_field(line, (_KP_START + i * _KP_WIDTH, _KP_START + (i + 1) * _KP_WIDTH))
            kp.append(math.nan if code is None else kp_from_code(code))
        ap = [_float_field(line, (_AP_START + i * _AP_WIDTH, _AP_START + (i + 1) * _AP_WIDTH)) for i in range(8)]
        ap_daily = _float_field(line, _AP_DAILY_COLUMNS)

    f107_adj_ctr81 = _float_field(line, _F107_ADJ_CTR81_COLUMNS)

    return CssiRecord(
        mjd=mjd,
        kp=kp,
        ap=ap,
        ap_daily=ap_daily,
        f107_obs=_float_field(line, _F107_OBS_COLUMNS),
        f107_adj=f107_adj_ctr81,
        f107_obs_ctr81=_float_field(line, _F107_OBS_CTR81_COLUMNS),
        f107_obs_lst81=_float_field(line, _F107_OBS_LST81_COLUMNS),
        f107_adj_ctr81=f107_adj_ctr81,
        f107_adj_lst81=_float_field(line, _F107_ADJ_LST81_COLUMNS),
    )


def parse_cssi_file(filepath: str | Path) -> list[CssiRecord]:
    """Parse every data line of a CSSI space weather file.

    Args:
        filepath: Path to the file (e.g. ``sw19571001.txt``).

    Returns:
        Records in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file holds no parsable data line.
    """
    records: list[CssiRecord] = []
    section: str | None = None

    with open(filepath, encoding="utf-8") as f:
        for raw in f:
            line = raw.rstrip("\n")
            text = line.strip()
            if not text:
                continue

            marker = next((name for prefix, name in _SECTIONS.items() if text.startswith(prefix)), None)
            if marker is not None:
                section = marker
                continue
            if text.startswith("END ") or section is None or not is_data_line(text):
                continue

            record = parse_cssi_line(line, monthly=section == "MONTHLY_PREDICTED")
            if record is not None:
                records.append(record)

    if not records:
        raise ValueError(f"No valid space weather data found in {filepath}")

    return records
