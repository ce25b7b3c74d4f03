"""Space weather indices for the atmosphere models.

Daily Kp/Ap and F10.7 records stored as sorted JAX arrays. All ``get_sw_*``
queries work inside ``jax.jit`` and ``jax.vmap``.

Typical usage::

    from atmojax.space_weather import load_cached_sw, get_sw_nrlmsise00_indices
    sw = load_cached_sw()
    f107a, f107, ap = get_sw_nrlmsise00_indices(sw, 2460000.5)
"""

from atmojax.space_weather._download import CELESTRAK_SW_URL, download_sw_file
from atmojax.space_weather._lookup import (
    get_sw_ap,
    get_sw_ap_array,
    get_sw_ap_daily,
    get_sw_f107_adj,
    get_sw_f107_obs,
    get_sw_f107_obs_ctr81,
    get_sw_f107_obs_lst81,
    get_sw_kp,
    get_sw_nrlmsise00_indices,
)
from atmojax.space_weather._parsers import parse_cssi_file
from atmojax.space_weather._providers import (
    load_cached_sw,
    load_sw_from_file,
    static_space_weather,
)
from atmojax.space_weather._types import SpaceWeatherData

__all__ = [
    "CELESTRAK_SW_URL",
    "SpaceWeatherData",
    "download_sw_file",
    "get_sw_ap",
    "get_sw_ap_array",
    "get_sw_ap_daily",
    "get_sw_f107_adj",
    "get_sw_f107_obs",
    "get_sw_f107_obs_ctr81",
    "get_sw_f107_obs_lst81",
    "get_sw_kp",
    "get_sw_nrlmsise00_indices",
    "load_cached_sw",
    "load_sw_from_file",
    "parse_cssi_file",
    "static_space_weather",
]
