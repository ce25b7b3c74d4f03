"""Container type for daily space weather records.

``SpaceWeatherData`` is a :class:`~typing.NamedTuple` and therefore a JAX
pytree: it can be passed straight through ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class SpaceWeatherData(NamedTuple):
    """Daily geomagnetic and solar-flux indices, sorted by date.

    One row per UTC day. Entries that the source file leaves blank (the
    3-hourly Kp/Ap of the monthly-predicted section, for example) are NaN.

    Attributes:
        mjd: Modified Julian Date at 0h UTC of each day, shape ``(N,)``.
        kp: 3-hourly Kp indices (0.0-9.0 scale), shape ``(N, 8)``.
        ap: 3-hourly Ap indices, shape ``(N, 8)``.
        ap_daily: Daily Ap index, shape ``(N,)``.
        f107_obs: Observed F10.7 flux [sfu], shape ``(N,)``.
        f107_adj: Adjusted (1 AU) F10.7 flux [sfu], shape ``(N,)``.
        f107_obs_ctr81: 81-day centred average of the observed flux, shape ``(N,)``.
        f107_obs_lst81: 81-day trailing average of the observed flux, shape ``(N,)``.
        f107_adj_ctr81: 81-day centred average of the adjusted flux, shape ``(N,)``.
        f107_adj_lst81: 81-day trailing average of the adjusted flux, shape ``(N,)``.
        mjd_min: First day covered by the dataset.
        mjd_max: Last day covered by the dataset.
    """

    mjd: Array
    kp: Array
    ap: Array
    ap_daily: Array
    f107_obs: Array
    f107_adj: Array
    f107_obs_ctr81: Array
    f107_obs_lst81: Array
    f107_adj_ctr81: Array
    f107_adj_lst81: Array
    mjd_min: Array
    mjd_max: Array
