"""Core utilities for ModelRadar."""

from .dates import (
    DATE_FORMAT,
    days_back,
    now_utc,
    as_utc,
    parse_iso,
    today,
)

__all__ = [
    "today",
    "now_utc",
    "parse_iso",
    "as_utc",
    "days_back",
    "DATE_FORMAT",
]
