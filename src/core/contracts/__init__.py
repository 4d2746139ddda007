"""
Contract Validation Module

JSON Schema контракт канонической строковой формы exact-чисел.
"""

from .canonical_text import (
    CANONICAL_TEXT_SCHEMA,
    canonical_text_validator,
    check_canonical,
    is_canonical,
    parse_canonical,
)

__all__ = [
    "CANONICAL_TEXT_SCHEMA",
    "canonical_text_validator",
    "check_canonical",
    "is_canonical",
    "parse_canonical",
]
