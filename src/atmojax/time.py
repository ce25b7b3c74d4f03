"""Calendar and Julian Date conversions for model drivers.

Dates are proleptic Gregorian. Calendar days are handled as integer day
counts (civil-from-days arithmetic), and the time of day is resolved to
whole milliseconds, so a date and time survive a round trip through JD
exactly at float64 precision. All functions are branchless and work
under ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import JD_MJD_OFFSET, SECONDS_PER_DAY

# Days from 0000-03-01 to 1970-01-01, and the MJD of 1970-01-01
_EPOCH_SHIFT = 719468
_MJD_UNIX_EPOCH = 40587
_DAYS_PER_ERA = 146097
_MS_PER_DAY = 86400000


def _days_from_civil(year, month, day) -> jax.Array:
    """MJD (integer) of a calendar date."""
    year = jnp.asarray(year, dtype=jnp.int32)
    month = jnp.asarray(month, dtype=jnp.int32)
    day = jnp.asarray(day, dtype=jnp.int32)

    # Years start in March so the leap day is the last day of the year
    year = year - (month <= 2).astype(jnp.int32)
    era = year // 400
    yoe = year - era * 400
    doy = (153 * ((month + 9) % 12) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _EPOCH_SHIFT + _MJD_UNIX_EPOCH


def _civil_from_days(mjd_day) -> tuple[jax.Array, jax.Array, jax.Array]:
    """Calendar date of an integer MJD."""
    z = mjd_day - _MJD_UNIX_EPOCH + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = jnp.where(mp < 10, mp + 3, mp - 9)
    year = yoe + era * 400 + (month <= 2).astype(jnp.int32)
    return year, month, day


def _split_mjd(mjd: ArrayLike) -> tuple[jax.Array, jax.Array]:
    """Integer day and millisecond of day, with rounding carried into the day."""
    mjd = jnp.asarray(mjd, dtype=get_dtype())
    day = jnp.floor(mjd)
    ms = jnp.round((mjd - day) * _MS_PER_DAY).astype(jnp.int32)
    carry = ms // _MS_PER_DAY
    return day.astype(jnp.int32) + carry, ms - carry * _MS_PER_DAY


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date and UTC time of day to Modified Julian Date.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date (1-12).
        day (ArrayLike): Day of the month.
        hour (ArrayLike): Hour of the day. Default: ``0``
        minute (ArrayLike): Minute of the hour. Default: ``0``
        second (ArrayLike): Second of the minute. Default: ``0.0``

    Returns:
        Modified Julian Date.

    Examples:
        ```python
        caldate_to_mjd(2000, 1, 1, 12)  # 51544.5
        ```
    """
    dtype = get_dtype()
    seconds = (
        jnp.asarray(hour, dtype=dtype) * 3600.0
        + jnp.asarray(minute, dtype=dtype) * 60.0
        + jnp.asarray(second, dtype=dtype)
    )
    return _days_from_civil(year, month, day).astype(dtype) + seconds / SECONDS_PER_DAY


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date and UTC time of day to Julian Date."""
    return caldate_to_mjd(year, month, day, hour, minute, second) + JD_MJD_OFFSET


def jd_to_mjd(jd: ArrayLike) -> jax.Array:
    """Convert Julian Date to Modified Julian Date."""
    return jnp.asarray(jd, dtype=get_dtype()) - JD_MJD_OFFSET


def mjd_to_jd(mjd: ArrayLike) -> jax.Array:
    """Convert Modified Julian Date to Julian Date."""
    return jnp.asarray(mjd, dtype=get_dtype()) + JD_MJD_OFFSET


def mjd_to_caldate(
    mjd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert Modified Julian Date to calendar date and time of day.

    The time of day is rounded to the nearest millisecond; a time that
    rounds up to midnight rolls over to the next day.

    Args:
        mjd (ArrayLike): Modified Julian Date.

    Returns:
        tuple[jax.Array, ...]: ``(year, month, day, hour, minute, second)``
            where all but ``second`` are int32.
    """
    day_number, ms = _split_mjd(mjd)
    year, month, day = _civil_from_days(day_number)

    hour = ms // 3600000
    minute = (ms % 3600000) // 60000
    second = (ms % 60000).astype(get_dtype()) / 1000.0
    return year, month, day, hour, minute, second


def jd_to_caldate(
    jd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert Julian Date to calendar date and time of day.

    See :func:`mjd_to_caldate`.
    """
    return mjd_to_caldate(jd_to_mjd(jd))


def day_of_year(year: ArrayLike, month: ArrayLike, day: ArrayLike) -> jax.Array:
    """Return the day of year (1 = January 1st) of a calendar date.

    Returns:
        Day of year as int32, in ``[1, 366]``.
    """
    return _days_from_civil(year, month, day) - _days_from_civil(year, 1, 1) + 1


def jd_to_doy_sec(jd: ArrayLike) -> tuple[jax.Array, jax.Array, jax.Array]:
    """Split a Julian Date into year, day of year and seconds of the UTC day.

    These are the time arguments of the NRLMSISE-00 model.

    Args:
        jd (ArrayLike): Julian Date (UTC).

    Returns:
        tuple[jax.Array, jax.Array, jax.Array]: ``(year, doy, sec)`` with
            ``year`` and ``doy`` int32 and ``sec`` in ``[0, 86400)`` at
            millisecond resolution.
    """
    day_number, ms = _split_mjd(jd_to_mjd(jd))
    year, month, day = _civil_from_days(day_number)
    doy = day_of_year(year, month, day)
    return year, doy, ms.astype(get_dtype()) / 1000.0
