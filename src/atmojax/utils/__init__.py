"""Shared utility functions for atmojax.

Provides filesystem cache management and eager precondition checks for
values that may be traced.
"""

from atmojax.utils.caching import (
    file_age_days,
    file_age_seconds,
    get_cache_dir,
    get_sw_cache_dir,
    is_file_stale,
)
from atmojax.utils.validation import (
    check_finite,
    check_non_negative,
    concrete_value,
)

__all__ = [
    "check_finite",
    "check_non_negative",
    "concrete_value",
    "file_age_days",
    "file_age_seconds",
    "get_cache_dir",
    "get_sw_cache_dir",
    "is_file_stale",
]
