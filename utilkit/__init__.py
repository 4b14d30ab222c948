"""
utilkit — набор независимых утилит

- Numeric: factorial, gcd, is_prime
- Text: is_palindrome, count_char, reverse_string
- Calendar: parse_date, validate_date_format, format_date, date_difference
- Storage: read_file, write_file, append_to_file
"""

import logging

from utilkit.core.dates import (
    DateFormat,
    date_difference,
    format_date,
    make_date,
    parse_date,
    supported_formats,
    validate_date_format,
)
from utilkit.core.domain import DateDifference, FileOperation, FileOperationKind
from utilkit.core.math import factorial, gcd, is_prime
from utilkit.core.storage import append_to_file, read_file, write_file
from utilkit.core.text import count_char, is_palindrome, reverse_string
from utilkit.exceptions import (
    DateParseError,
    InvalidDateError,
    StorageError,
    UtilkitError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Numeric
    "factorial",
    "gcd",
    "is_prime",
    # Text
    "count_char",
    "is_palindrome",
    "reverse_string",
    # Calendar
    "DateDifference",
    "DateFormat",
    "date_difference",
    "format_date",
    "make_date",
    "parse_date",
    "supported_formats",
    "validate_date_format",
    # Storage
    "FileOperation",
    "FileOperationKind",
    "append_to_file",
    "read_file",
    "write_file",
    # Exceptions
    "DateParseError",
    "InvalidDateError",
    "StorageError",
    "UtilkitError",
]
