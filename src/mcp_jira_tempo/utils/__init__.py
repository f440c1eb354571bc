"""
Utility functions for the MCP Jira Tempo server.
"""

from .dates import (
    DateRange,
    format_date,
    format_seconds,
    get_week_bounds,
    parse_date,
    parse_duration,
    resolve_period,
    weekday_range,
)
from .io import is_read_only_mode
from .logging import setup_logging

__all__ = [
    "DateRange",
    "format_date",
    "format_seconds",
    "get_week_bounds",
    "is_read_only_mode",
    "parse_date",
    "parse_duration",
    "resolve_period",
    "setup_logging",
    "weekday_range",
]
