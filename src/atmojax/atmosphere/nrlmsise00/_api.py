"""Convenience entry point for NRLMSISE-00 density at a date and position."""

from __future__ import annotations

import logging

import jax.numpy as jnp
import numpy as np
from jax.typing import ArrayLike

from atmojax.atmosphere.nrlmsise00._model import build_config, gtd7, gtd7d
from atmojax.atmosphere.nrlmsise00._types import NRLMSISE00Flags, NRLMSISE00Output
from atmojax.config import get_dtype
from atmojax.constants import (
    DEFAULT_AP,
    DEFAULT_F107,
    DEFAULT_F107A,
    LOW_ALTITUDE_SW_CUTOFF,
)
from atmojax.space_weather import SpaceWeatherData, get_sw_nrlmsise00_indices, load_cached_sw
from atmojax.time import jd_to_doy_sec
from atmojax.utils.validation import check_finite, concrete_value

logger = logging.getLogger(__name__)

_DGTR: float = 1.74533e-2  # Degrees to radians (model value)


def _resolve_indices(
    jd: ArrayLike,
    alt_m: ArrayLike,
    f107A: ArrayLike | None,
    f107: ArrayLike | None,
    ap: ArrayLike | None,
    sw: SpaceWeatherData | None,
):
    given = {"f107A": f107A, "f107": f107, "ap": ap}
    missing = [name for name, value in given.items() if value is None]
    if not missing:
        for name, value in given.items():
            check_finite(name, value)
        return f107A, f107, ap
    if len(missing) != len(given):
        raise ValueError(
            "f107A, f107 and ap must be given together or all omitted; missing "
            + ", ".join(missing)
        )

    alt_value = concrete_value(alt_m)
    if alt_value is not None and np.all(alt_value < LOW_ALTITUDE_SW_CUTOFF):
        logger.debug(
            "Altitude below %.0f m; using default space weather indices", LOW_ALTITUDE_SW_CUTOFF
        )
        return DEFAULT_F107A, DEFAULT_F107, DEFAULT_AP

    if sw is None:
        sw = load_cached_sw()
    f107A_sw, f107_sw, ap_sw = get_sw_nrlmsise00_indices(sw, jd)

    low = jnp.asarray(alt_m) < LOW_ALTITUDE_SW_CUTOFF
    return (
        jnp.where(low, DEFAULT_F107A, f107A_sw),
        jnp.where(low, DEFAULT_F107, f107_sw),
        jnp.where(low, DEFAULT_AP, ap_sw),
    )


def evaluate_density(
    jd: ArrayLike,
    alt_m: ArrayLike,
    lat_rad: ArrayLike,
    lon_rad: ArrayLike,
    f107A: ArrayLike | None = None,
    f107: ArrayLike | None = None,
    ap: ArrayLike | None = None,
    *,
    output_si: bool = True,
    use_drag_variant: bool = True,
    sw: SpaceWeatherData | None = None,
) -> NRLMSISE00Output:
    """NRLMSISE-00 densities and temperatures at a Julian Date and position.

    When the solar and geomagnetic indices are omitted they are taken from
    *sw* (the cached CelesTrak file by default): F10.7A is the 81-day
    centred observed average on day *jd*, F10.7 the observed flux of the
    previous day and Ap the daily Ap on day *jd*. Below 80 km the quiet
    defaults (150, 150, 4) are used instead and *sw* is not consulted for
    concrete altitudes.

    Args:
        jd: Julian Date (UTC).
        alt_m: Geodetic altitude [m].
        lat_rad: Geodetic latitude [rad].
        lon_rad: Geodetic longitude [rad].
        f107A: 81-day average of F10.7 [sfu].
        f107: Daily F10.7 of the previous day [sfu].
        ap: Daily Ap, or the 7-element Ap history.
        output_si: Return SI units (m^-3, kg/m^3) instead of CGS.
        use_drag_variant: Include anomalous oxygen in the total mass
            density (:func:`gtd7d`).
        sw: Space weather dataset used for omitted indices.

    Returns:
        The model output.

    Raises:
        ValueError: If only some of the indices are given, if a concrete
            input is not finite, or if the space weather data do not cover
            *jd*.

    Examples:
        ```python
        from atmojax.atmosphere import evaluate_density
        out = evaluate_density(2451544.5, 400e3, 0.0, 0.0, 150.0, 150.0, 4.0)
        out.den_Total  # kg/m^3
        ```
    """
    for name, value in (("jd", jd), ("alt_m", alt_m), ("lat_rad", lat_rad), ("lon_rad", lon_rad)):
        check_finite(name, value)

    f107A, f107, ap = _resolve_indices(jd, alt_m, f107A, f107, ap, sw)

    dtype = get_dtype()
    year, doy, sec = jd_to_doy_sec(jd)
    lon_rad = jnp.asarray(lon_rad, dtype=dtype)
    lst = sec / 3600.0 + lon_rad * 12.0 / jnp.pi

    inp = build_config(
        year,
        doy,
        sec,
        jnp.asarray(alt_m, dtype=dtype) / 1000.0,
        jnp.asarray(lat_rad, dtype=dtype) / _DGTR,
        lon_rad / _DGTR,
        lst,
        f107A,
        f107,
        ap,
        NRLMSISE00Flags(output_m_kg=output_si),
    )
    model = gtd7d if use_drag_variant else gtd7
    return model(inp)
