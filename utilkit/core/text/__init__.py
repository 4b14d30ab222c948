"""
Text processing для utilkit.
"""

from utilkit.core.text.string_ops import (
    count_char,
    is_palindrome,
    reverse_string,
)

__all__ = [
    "count_char",
    "is_palindrome",
    "reverse_string",
]
