"""
Domain models and value objects.

Contains the exact numeric value types: Finite (decimal) and Ratio (rational).
"""

from src.core.domain.exact_number import (
    ONE,
    ZERO,
    ExactNumber,
    ExactNumberField,
    Finite,
    Ratio,
    absolute,
    add,
    as_fraction,
    compare,
    divide,
    fraction,
    from_float,
    from_int,
    is_zero,
    multiply,
    negate,
    parse,
    strict_equals,
    subtract,
    to_float,
    to_int,
    to_string,
    with_scale,
)

__all__ = [
    # Variants
    "Finite",
    "Ratio",
    "ExactNumber",
    "ExactNumberField",
    # Constants
    "ZERO",
    "ONE",
    # Construction
    "from_int",
    "from_float",
    "fraction",
    "parse",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "absolute",
    # Comparison
    "compare",
    "strict_equals",
    # Rounding
    "with_scale",
    # Views & conversions
    "as_fraction",
    "is_zero",
    "to_int",
    "to_float",
    "to_string",
]
