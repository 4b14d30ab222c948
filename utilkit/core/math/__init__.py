"""
Core math modules для utilkit

Целочисленные примитивы (u64-домен) и элементарная теория чисел.
"""

# Integer Safeguards
from utilkit.core.math.integer_safeguards import (
    checked_mul,
    integer_sqrt,
    truncating_div,
    validate_unsigned,
)

# Number Theory
from utilkit.core.math.number_theory import (
    factorial,
    gcd,
    is_prime,
)

__all__ = [
    # Integer Safeguards
    "checked_mul",
    "integer_sqrt",
    "truncating_div",
    "validate_unsigned",
    # Number Theory
    "factorial",
    "gcd",
    "is_prime",
]
