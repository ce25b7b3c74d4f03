"""Space weather queries by Modified Julian Date.

Day lookups bracket the date with ``jnp.searchsorted`` on the sorted day
grid, so every query here is usable inside ``jax.jit`` and ``jax.vmap``.
Only :func:`get_sw_nrlmsise00_indices` inspects its arguments eagerly, to
reject dates the dataset does not cover.
"""

from __future__ import annotations

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from atmojax.constants import JD_MJD_OFFSET
from atmojax.space_weather._types import SpaceWeatherData
from atmojax.utils.validation import concrete_value

# Hour offsets of the 3-hourly Ap samples used by the NRLMSISE-00 Ap array:
# the current interval, 3/6/9 hours before, and two blocks of eight.
_AP_RECENT_HOURS = jnp.array([0.0, -3.0, -6.0, -9.0])
_AP_BLOCK_12_33_HOURS = -12.0 - 3.0 * jnp.arange(8)
_AP_BLOCK_36_57_HOURS = -36.0 - 3.0 * jnp.arange(8)

# Oldest sample of the Ap array, in days before the query time.
_AP_ARRAY_LOOKBACK_DAYS = 57.0 / 24.0


def _day_index(sw: SpaceWeatherData, mjd: Array) -> Array:
    """Index of the day containing *mjd*, clamped to the table."""
    idx = jnp.searchsorted(sw.mjd, jnp.floor(mjd), side="right") - 1
    return jnp.clip(idx, 0, sw.mjd.shape[0] - 1)


def _interval_index(mjd: Array) -> Array:
    """3-hour interval (0-7) of the UTC day containing *mjd*."""
    hours = (mjd - jnp.floor(mjd)) * 24.0
    return jnp.clip(jnp.floor(hours / 3.0).astype(jnp.int32), 0, 7)


def _as_mjd(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    return jnp.asarray(mjd, dtype=sw.mjd.dtype)


def _three_hourly(sw: SpaceWeatherData, table: Array, mjd: Array) -> Array:
    return table[_day_index(sw, mjd), _interval_index(mjd)]


def get_sw_kp(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """3-hourly Kp index for the interval containing *mjd*.

    Args:
        sw: Space weather dataset.
        mjd: Modified Julian Date to query.

    Returns:
        Kp index (0.0-9.0).
    """
    return _three_hourly(sw, sw.kp, _as_mjd(sw, mjd))


def get_sw_ap(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """3-hourly Ap index for the interval containing *mjd*.

    Args:
        sw: Space weather dataset.
        mjd: Modified Julian Date to query.

    Returns:
        Ap index.
    """
    return _three_hourly(sw, sw.ap, _as_mjd(sw, mjd))


def get_sw_ap_daily(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """Daily Ap index of the day containing *mjd*."""
    return sw.ap_daily[_day_index(sw, _as_mjd(sw, mjd))]


def get_sw_f107_obs(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """Observed F10.7 flux [sfu] of the day containing *mjd*."""
    return sw.f107_obs[_day_index(sw, _as_mjd(sw, mjd))]


def get_sw_f107_adj(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """Adjusted F10.7 flux [sfu] of the day containing *mjd*."""
    return sw.f107_adj[_day_index(sw, _as_mjd(sw, mjd))]


def get_sw_f107_obs_ctr81(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """81-day centred average of the observed F10.7 flux [sfu]."""
    return sw.f107_obs_ctr81[_day_index(sw, _as_mjd(sw, mjd))]


def get_sw_f107_obs_lst81(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """81-day trailing average of the observed F10.7 flux [sfu]."""
    return sw.f107_obs_lst81[_day_index(sw, _as_mjd(sw, mjd))]


def get_sw_ap_array(sw: SpaceWeatherData, mjd: ArrayLike) -> Array:
    """Build the 7-element magnetic activity array used by NRLMSISE-00.

    - ``[0]``: daily Ap
    - ``[1]``: 3-hour Ap of the current interval
    - ``[2]``, ``[3]``, ``[4]``: 3-hour Ap 3, 6 and 9 hours before
    - ``[5]``: mean of the eight 3-hour Ap from 12 to 33 hours before
    - ``[6]``: mean of the eight 3-hour Ap from 36 to 57 hours before

    Args:
        sw: Space weather dataset.
        mjd: Modified Julian Date to query.

    Returns:
        Array of shape ``(7,)``.
    """
    mjd = _as_mjd(sw, mjd)

    recent = _three_hourly(sw, sw.ap, mjd + _AP_RECENT_HOURS / 24.0)
    block_12_33 = _three_hourly(sw, sw.ap, mjd + _AP_BLOCK_12_33_HOURS / 24.0)
    block_36_57 = _three_hourly(sw, sw.ap, mjd + _AP_BLOCK_36_57_HOURS / 24.0)

    return jnp.concatenate(
        [
            get_sw_ap_daily(sw, mjd)[None],
            recent,
            jnp.mean(block_12_33)[None],
            jnp.mean(block_36_57)[None],
        ]
    )


def _check_coverage(sw: SpaceWeatherData, first_mjd: ArrayLike, last_mjd: ArrayLike, jd: ArrayLike) -> None:
    first = concrete_value(first_mjd)
    last = concrete_value(last_mjd)
    mjd_min = concrete_value(sw.mjd_min)
    mjd_max = concrete_value(sw.mjd_max)
    if first is None or last is None or mjd_min is None or mjd_max is None:
        return
    if np.any(np.floor(first) < mjd_min) or np.any(np.floor(last) > mjd_max):
        raise ValueError(
            f"space weather data unavailable for requested date (JD {np.asarray(jd)!r}); "
            f"loaded data covers MJD {float(mjd_min)} to {float(mjd_max)}"
        )


def get_sw_nrlmsise00_indices(
    sw: SpaceWeatherData,
    jd: ArrayLike,
    use_ap_array: bool = False,
) -> tuple[Array, Array, Array]:
    """Space weather indices driving NRLMSISE-00 at Julian Date *jd*.

    - F10.7A: 81-day centred average of the observed flux on day *jd*.
    - F10.7: observed flux of the previous day (*jd* - 1).
    - Ap: daily Ap on day *jd*, or the 7-element array of
      :func:`get_sw_ap_array` when *use_ap_array* is set.

    Dates are checked against the loaded range when they are concrete;
    traced dates are clamped to the first or last record instead.

    Args:
        sw: Space weather dataset.
        jd: Julian Date (UTC).
        use_ap_array: Return the 7-element Ap array instead of daily Ap.

    Returns:
        Tuple ``(f107A, f107, ap)``.

    Raises:
        ValueError: If a concrete *jd* (or the previous day used for F10.7)
            falls outside the dataset, or if any selected index is missing
            (NaN) for that date.
    """
    mjd = _as_mjd(sw, jd) - JD_MJD_OFFSET

    oldest = mjd - (_AP_ARRAY_LOOKBACK_DAYS if use_ap_array else 1.0)
    _check_coverage(sw, oldest, mjd, jd)

    f107a = get_sw_f107_obs_ctr81(sw, mjd)
    f107 = get_sw_f107_obs(sw, mjd - 1.0)
    ap = get_sw_ap_array(sw, mjd) if use_ap_array else get_sw_ap_daily(sw, mjd)

    for name, value in (("F10.7A", f107a), ("F10.7", f107), ("Ap", ap)):
        concrete = concrete_value(value)
        if concrete is not None and np.any(np.isnan(concrete)):
            raise ValueError(
                f"space weather data unavailable for requested date (JD {np.asarray(jd)!r}): {name} is missing"
            )

    return f107a, f107, ap
