"""Shared configuration objects for the tour-improvement engine."""

from .defaults import (
    DEFAULT_INSTANCE,
    DEFAULT_LOCAL_SEARCH_PARAMS,
    InstanceDefaults,
    LocalSearchParams,
)

__all__ = [
    "DEFAULT_INSTANCE",
    "DEFAULT_LOCAL_SEARCH_PARAMS",
    "InstanceDefaults",
    "LocalSearchParams",
]
