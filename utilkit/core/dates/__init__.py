"""
Calendar module для utilkit: форматы дат и операции над датами.
"""

from utilkit.core.dates.date_ops import (
    date_difference,
    format_date,
    make_date,
    parse_date,
    validate_date_format,
)
from utilkit.core.dates.formats import (
    DATE_PATTERNS,
    MONTH_NAMES,
    PARSE_PRIORITY,
    DateFormat,
    DatePattern,
    resolve_format,
    supported_formats,
)

__all__ = [
    # Formats
    "DATE_PATTERNS",
    "MONTH_NAMES",
    "PARSE_PRIORITY",
    "DateFormat",
    "DatePattern",
    "resolve_format",
    "supported_formats",
    # Operations
    "date_difference",
    "format_date",
    "make_date",
    "parse_date",
    "validate_date_format",
]
