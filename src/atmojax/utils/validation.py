"""Eager precondition checks for values that may be traced.

The atmosphere models are pure JAX functions, so their inputs may be
tracers under ``jax.jit``/``jax.vmap``. Preconditions are checked only when
the value is concrete (an eager call, or a closure constant captured during
tracing); traced values pass through unchecked.
"""

from __future__ import annotations

import jax
import numpy as np
from jax.typing import ArrayLike

_TRACED_ERRORS = (
    jax.errors.TracerArrayConversionError,
    jax.errors.ConcretizationTypeError,
)


def concrete_value(x: ArrayLike) -> np.ndarray | None:
    """Return *x* as a NumPy array, or ``None`` if it is a tracer.

    Args:
        x: Python scalar, NumPy array, or JAX array.

    Returns:
        The concrete value as a ``np.ndarray``, or ``None`` when *x* is
        traced and cannot be inspected.
    """
    try:
        return np.asarray(x)
    except _TRACED_ERRORS:
        return None


def check_finite(name: str, x: ArrayLike) -> None:
    """Raise if a concrete *x* contains NaN or infinite values.

    Args:
        name: Input name used in the error message.
        x: Value to check.

    Raises:
        ValueError: If *x* is concrete and not finite everywhere.
    """
    value = concrete_value(x)
    if value is not None and not np.all(np.isfinite(value)):
        raise ValueError(f"{name} must be finite, got {value!r}")


def check_non_negative(name: str, x: ArrayLike) -> None:
    """Raise if a concrete *x* is negative (or NaN).

    Raises:
        ValueError: If *x* is concrete and not ``>= 0`` everywhere.
    """
    value = concrete_value(x)
    if value is not None and not np.all(value >= 0):
        raise ValueError(f"{name} must be non-negative, got {value!r}")
