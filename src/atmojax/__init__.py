"""
atmojax provides atmospheric density models implemented in JAX.
"""

from .config import get_dtype

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JD_MJD_OFFSET,
)

from .time import (
    caldate_to_jd,
    caldate_to_mjd,
    jd_to_caldate,
    jd_to_mjd,
    mjd_to_caldate,
    mjd_to_jd,
    day_of_year,
    jd_to_doy_sec,
)

from .atmosphere import (
    NRLMSISE00Flags,
    NRLMSISE00Input,
    NRLMSISE00Output,
    build_config,
    density_exponential,
    evaluate_density,
    gtd7,
    gtd7d,
    gts7,
)
