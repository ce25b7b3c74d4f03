"""Atmospheric density models.

- :func:`density_exponential`: piecewise exponential atmosphere.
- :mod:`atmojax.atmosphere.nrlmsise00`: the NRLMSISE-00 empirical model.
"""

from atmojax.atmosphere.exponential import density_exponential
from atmojax.atmosphere.nrlmsise00 import (
    NRLMSISE00Flags,
    NRLMSISE00Input,
    NRLMSISE00Output,
    build_config,
    evaluate_density,
    gtd7,
    gtd7d,
    gts7,
)

__all__ = [
    "NRLMSISE00Flags",
    "NRLMSISE00Input",
    "NRLMSISE00Output",
    "build_config",
    "density_exponential",
    "evaluate_density",
    "gtd7",
    "gtd7d",
    "gts7",
]
