"""Module-wide floating-point precision configuration.

The empirical coefficient sets used by the atmosphere models are only
meaningful at double precision, so atmojax runs with JAX's 64-bit mode
enabled. Importing this module turns on ``jax_enable_x64``; there is no
runtime precision switch.

``get_dtype`` is kept as the single place where array dtypes are chosen so
that every module creates its constants and inputs the same way.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

jax.config.update("jax_enable_x64", True)

_dtype = jnp.float64


def get_dtype():
    """Return the module-wide float dtype.

    Returns:
        The active float dtype (always ``jnp.float64``).
    """
    return _dtype
