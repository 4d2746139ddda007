"""
Core math modules для exact-арифметики

Целочисленные примитивы, движок округления, promotion rule и текстовый кодек.
Модули работают только с int и не зависят от моделей domain.
"""

# Exceptions
from src.core.math.exceptions import (
    DivisionByZero,
    ExactArithmeticError,
    FormatError,
    InternalInvariantViolation,
    RoundingRequired,
)

# Integer primitives
from src.core.math.integer_ops import (
    fraction_hash,
    normalize_sign,
    pow10,
    reduce_fraction,
    strip_factor,
    truncated_divmod,
)

# Rounding engine
from src.core.math.rounding import (
    DEFAULT_ROUNDING_MODE,
    RoundingMode,
    rescale_fraction,
    rescale_unscaled,
    round_division,
)

# Promotion rule
from src.core.math.promotion import PromotedFraction, promote_fraction

# Text codec
from src.core.math.text_codec import (
    format_decimal,
    format_fraction,
    is_fraction_text,
    parse_decimal_text,
    parse_fraction_text,
)

# Float bridge
from src.core.math.float_bridge import (
    FLOAT_INTEGER_TAG_LIMIT,
    FLOAT_MIN_TRIMMED_SCALE,
    FloatConversionConfig,
    float_to_decimal_parts,
    float_to_plain_text,
)

__all__ = [
    # Exceptions
    "ExactArithmeticError",
    "FormatError",
    "DivisionByZero",
    "RoundingRequired",
    "InternalInvariantViolation",
    # Integer primitives
    "pow10",
    "reduce_fraction",
    "normalize_sign",
    "strip_factor",
    "truncated_divmod",
    "fraction_hash",
    # Rounding engine
    "DEFAULT_ROUNDING_MODE",
    "RoundingMode",
    "round_division",
    "rescale_unscaled",
    "rescale_fraction",
    # Promotion rule
    "PromotedFraction",
    "promote_fraction",
    # Text codec
    "is_fraction_text",
    "parse_decimal_text",
    "parse_fraction_text",
    "format_decimal",
    "format_fraction",
    # Float bridge
    "FLOAT_INTEGER_TAG_LIMIT",
    "FLOAT_MIN_TRIMMED_SCALE",
    "FloatConversionConfig",
    "float_to_plain_text",
    "float_to_decimal_parts",
]
