"""NRLMSISE-00 empirical atmosphere model.

Number densities of He, O, N2, O2, Ar, H, N and anomalous O, total mass
density and temperature from the ground to the exosphere, implemented as
pure JAX functions.

Typical usage::

    from atmojax.atmosphere.nrlmsise00 import build_config, gtd7
    inp = build_config(0, 172, 29000.0, 400.0, 60.0, -70.0, 16.0, 150.0, 150.0, 4.0)
    out = gtd7(inp)
"""

from atmojax.atmosphere.nrlmsise00._api import evaluate_density
from atmojax.atmosphere.nrlmsise00._model import (
    ThermosphereState,
    build_config,
    gtd7,
    gtd7d,
    gts7,
)
from atmojax.atmosphere.nrlmsise00._types import (
    SWITCH_FIELDS,
    NRLMSISE00Flags,
    NRLMSISE00Input,
    NRLMSISE00Output,
)

__all__ = [
    "NRLMSISE00Flags",
    "NRLMSISE00Input",
    "NRLMSISE00Output",
    "SWITCH_FIELDS",
    "ThermosphereState",
    "build_config",
    "evaluate_density",
    "gtd7",
    "gtd7d",
    "gts7",
]
