"""Constructors for :class:`SpaceWeatherData`.

- :func:`static_space_weather`: constant indices over a date range.
- :func:`load_sw_from_file`: parse a CSSI file.
- :func:`load_cached_sw`: use the cached CelesTrak file, refreshing it
  when it is missing or stale.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp

from atmojax.config import get_dtype
from atmojax.space_weather._download import SW_FILENAME, download_sw_file
from atmojax.space_weather._parsers import CssiRecord, parse_cssi_file
from atmojax.space_weather._types import SpaceWeatherData
from atmojax.utils.caching import get_sw_cache_dir, is_file_stale

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_DAYS: float = 1.0
"""Age after which the cached space weather file is downloaded again."""


def static_space_weather(
    ap: float = 4.0,
    f107: float = 150.0,
    f107a: float = 150.0,
    kp: float = 1.0,
    mjd_min: float = 0.0,
    mjd_max: float = 99999.0,
) -> SpaceWeatherData:
    """Space weather with the same indices on every day of a date range.

    The dataset has two records (``mjd_min`` and ``mjd_max``) holding
    identical values, so any lookup inside the range returns the constants.

    Args:
        ap: Ap index (3-hourly and daily).
        f107: Observed and adjusted F10.7 flux [sfu].
        f107a: 81-day averages of F10.7 [sfu].
        kp: Kp index.
        mjd_min: First covered day.
        mjd_max: Last covered day.

    Returns:
        Constant-valued :class:`SpaceWeatherData`.

    Examples:
        ```python
        from atmojax.space_weather import static_space_weather, get_sw_f107_obs
        sw = static_space_weather(f107=200.0)
        get_sw_f107_obs(sw, 59569.0)  # 200.0
        ```
    """
    dtype = get_dtype()

    def daily(value: float):
        return jnp.full((2,), value, dtype=dtype)

    return SpaceWeatherData(
        mjd=jnp.array([mjd_min, mjd_max], dtype=dtype),
        kp=jnp.full((2, 8), kp, dtype=dtype),
        ap=jnp.full((2, 8), ap, dtype=dtype),
        ap_daily=daily(ap),
        f107_obs=daily(f107),
        f107_adj=daily(f107),
        f107_obs_ctr81=daily(f107a),
        f107_obs_lst81=daily(f107a),
        f107_adj_ctr81=daily(f107a),
        f107_adj_lst81=daily(f107a),
        mjd_min=jnp.array(mjd_min, dtype=dtype),
        mjd_max=jnp.array(mjd_max, dtype=dtype),
    )


def _from_records(records: list[CssiRecord]) -> SpaceWeatherData:
    dtype = get_dtype()
    columns = {name: jnp.array([getattr(r, name) for r in records], dtype=dtype) for name in CssiRecord._fields}
    return SpaceWeatherData(
        **columns,
        mjd_min=columns["mjd"][0],
        mjd_max=columns["mjd"][-1],
    )


def load_sw_from_file(filepath: str | Path) -> SpaceWeatherData:
    """Load space weather data from a CSSI file.

    Args:
        filepath: Path to the CSSI file (e.g. ``sw19571001.txt``).

    Returns:
        The parsed dataset.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file holds no valid data.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Space weather file not found: {filepath}")

    records = parse_cssi_file(filepath)
    logger.debug("Loaded %d days of space weather data from %s", len(records), filepath)
    return _from_records(records)


def load_cached_sw(
    filepath: str | Path | None = None,
    *,
    max_age_days: float = DEFAULT_MAX_AGE_DAYS,
) -> SpaceWeatherData:
    """Load the cached CelesTrak space weather file, refreshing it if stale.

    The file is downloaded when it is missing or older than
    *max_age_days*. Download and parse errors propagate to the caller.

    Args:
        filepath: Cache file path. Defaults to
            ``<cache_dir>/space_weather/sw19571001.txt``.
        max_age_days: Maximum age of the cached file in days.

    Returns:
        The loaded dataset.

    Raises:
        httpx.HTTPError: If a needed download fails.
        ValueError: If the file holds no valid data.
    """
    filepath = get_sw_cache_dir() / SW_FILENAME if filepath is None else Path(filepath)

    if is_file_stale(filepath, max_age_days * 86400.0):
        logger.info("Space weather cache %s is missing or stale", filepath)
        download_sw_file(filepath)

    return load_sw_from_file(filepath)
