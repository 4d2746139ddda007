"""
Text Codec — Парсинг и форматирование канонической строковой формы

Десятичная форма:   [+-]? digits* ( '.' digits* )?
Рациональная форма: [+-]? digits+ '/' [+-]? digits+  (пробелы вокруг '/' допустимы)

Scale десятичной формы равен числу цифр после точки и сохраняется при
форматировании: "-0.2000" -> (-2000, 4) -> "-0.2000".

Примеры:
    "2"      -> "2"
    ".0"     -> "0.0"
    "-.25"   -> "-0.25"
    "1."     -> "1"
    "-0."    -> "0"
    "+.230"  -> "0.230"
    "."      -> "0"
"""

import re
from typing import Final

from src.core.math.exceptions import FormatError
from src.core.math.integer_ops import normalize_sign, pow10

# Только ASCII-цифры (str.isdigit пропускает unicode-цифры)
_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]*")
_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

FRACTION_SEPARATOR: Final[str] = "/"
DECIMAL_POINT: Final[str] = "."


# =============================================================================
# PARSING
# =============================================================================


def is_fraction_text(text: str) -> bool:
    """True если строка записана в рациональной форме 'num/den'."""
    return FRACTION_SEPARATOR in text


def _digits_to_int(segment: str, text: str) -> int:
    if not _DIGITS.fullmatch(segment):
        raise FormatError(f"Invalid decimal format: {text!r}")
    return int(segment) if segment else 0


def parse_decimal_text(text: str) -> tuple[int, int]:
    """
    Парсинг десятичной строки в (unscaled, scale).

    Args:
        text: Строка вида '[+-]digits[.digits]'

    Returns:
        (unscaled, scale)

    Raises:
        FormatError: Пустая строка, больше одной точки, нецифровой сегмент

    Examples:
        >>> parse_decimal_text("-0.2000")
        (-2000, 4)
        >>> parse_decimal_text("1.")
        (1, 0)
    """
    value = text.strip()
    if not value:
        raise FormatError("Empty string cannot be parsed as a decimal")

    negative = value.startswith("-")
    if negative or value.startswith("+"):
        value = value[1:]

    parts = value.split(DECIMAL_POINT)
    if len(parts) > 2:
        raise FormatError(f"Invalid decimal format: {text!r}")

    integer_part = parts[0]
    fractional_part = parts[1] if len(parts) == 2 else ""
    scale = len(fractional_part)

    integer = _digits_to_int(integer_part, text)
    fractional = _digits_to_int(fractional_part, text)
    unscaled = integer * pow10(scale) + fractional

    return (-unscaled if negative else unscaled), scale


def parse_fraction_text(text: str) -> tuple[int, int]:
    """
    Парсинг рациональной строки 'num/den' в (numerator, denominator).

    Сокращение не выполняется, знак нормализуется в числитель.

    Raises:
        FormatError: Нет ровно одного '/', операнд не целое число
        DivisionByZero: Знаменатель равен нулю

    Examples:
        >>> parse_fraction_text("  4  /  -8  ")
        (-4, 8)
    """
    parts = text.strip().split(FRACTION_SEPARATOR)
    if len(parts) != 2:
        raise FormatError(f"Invalid fraction format: {text!r}")

    numerator_text, denominator_text = (part.strip() for part in parts)
    if not (_INTEGER.fullmatch(numerator_text) and _INTEGER.fullmatch(denominator_text)):
        raise FormatError(f"Invalid fraction format: {text!r}")

    return normalize_sign(int(numerator_text), int(denominator_text))


# =============================================================================
# FORMATTING
# =============================================================================


def format_decimal(unscaled: int, scale: int) -> str:
    """
    Каноническая строка десятичного числа с ровно scale цифрами после точки.

    Examples:
        >>> format_decimal(-2000, 4)
        '-0.2000'
        >>> format_decimal(12345, 2)
        '123.45'
        >>> format_decimal(7, 0)
        '7'
    """
    sign = "-" if unscaled < 0 else ""
    digits = str(abs(unscaled))

    if scale == 0:
        return f"{sign}{digits}"

    if len(digits) <= scale:
        return f"{sign}0.{digits.rjust(scale, '0')}"

    return f"{sign}{digits[:-scale]}.{digits[-scale:]}"


def format_fraction(numerator: int, denominator: int) -> str:
    """Каноническая строка дроби 'numerator/denominator'."""
    return f"{numerator}{FRACTION_SEPARATOR}{denominator}"
