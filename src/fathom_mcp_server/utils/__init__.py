"""Utility functions for parsing and formatting.

This package includes helpers for ISO 8601 date parsing, day-bound
normalization and display formatting used by the MCP tools.
"""

from .date_parser import (
    end_of_day,
    format_display_time,
    parse_calendar_date,
    parse_iso8601,
    start_of_day,
)

__all__ = [
    "end_of_day",
    "format_display_time",
    "parse_calendar_date",
    "parse_iso8601",
    "start_of_day",
]
