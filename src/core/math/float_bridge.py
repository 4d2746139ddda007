"""
Float Bridge — Явно lossy граница float -> exact

Конверсия float в десятичную форму через shortest round-trip текст (repr),
с тем же парсером, что и для пользовательского ввода, и политикой обрезки
хвостовых нулей:

- scale > 1: хвостовые нули unscaled удаляются, но остаётся минимум
  FLOAT_MIN_TRIMMED_SCALE цифр после точки
- scale == 0 и float целочисленный с |x| < FLOAT_INTEGER_TAG_LIMIT:
  добавляется одна дробная цифра (2.0 -> "2.0", а не "2")

Пороги сохранены буквально; граница 1e15 эмпирическая.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf не конвертируются (FormatError)
2. Экспоненциальная запись repr ("1e-05", "1e+16") разворачивается
   в позиционную до парсинга
"""

import logging
import math
from dataclasses import dataclass
from typing import Final

from src.core.math.exceptions import FormatError
from src.core.math.integer_ops import pow10
from src.core.math.text_codec import parse_decimal_text

logger = logging.getLogger(__name__)

# =============================================================================
# FLOAT CONVERSION ПАРАМЕТРЫ
# =============================================================================

# Порог |x| для добавления дробной цифры целочисленным float
FLOAT_INTEGER_TAG_LIMIT: Final[float] = 1e15

# Минимум цифр после точки при обрезке хвостовых нулей
FLOAT_MIN_TRIMMED_SCALE: Final[int] = 1


@dataclass(frozen=True)
class FloatConversionConfig:
    """Конфигурация политики обрезки при конверсии float."""

    integer_tag_limit: float = FLOAT_INTEGER_TAG_LIMIT
    min_trimmed_scale: int = FLOAT_MIN_TRIMMED_SCALE


# =============================================================================
# FLOAT -> TEXT
# =============================================================================


def float_to_plain_text(value: float) -> str:
    """
    Shortest round-trip текст float в позиционной записи (без экспоненты).

    Args:
        value: Конечный float

    Returns:
        Строка вида '-123.45'

    Raises:
        FormatError: Если value NaN или Inf

    Examples:
        >>> float_to_plain_text(0.234)
        '0.234'
        >>> float_to_plain_text(1e-05)
        '0.00001'
        >>> float_to_plain_text(1e16)
        '10000000000000000'
    """
    if not math.isfinite(value):
        raise FormatError(f"Non-finite float cannot be converted: {value!r}")

    text = repr(float(value))
    if "e" not in text:
        return text

    mantissa, _, exponent = text.partition("e")
    sign = ""
    if mantissa.startswith("-"):
        sign, mantissa = "-", mantissa[1:]

    integer_part, _, fractional_part = mantissa.partition(".")
    digits = integer_part + fractional_part
    point = len(integer_part) + int(exponent)

    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


# =============================================================================
# TRIM POLICY
# =============================================================================


def _trailing_zeros(unscaled: int) -> int:
    digits = str(abs(unscaled))
    return len(digits) - len(digits.rstrip("0"))


def float_to_decimal_parts(
    value: float,
    config: FloatConversionConfig | None = None,
) -> tuple[int, int]:
    """
    Конверсия float в (unscaled, scale) с политикой обрезки нулей.

    Args:
        value: Конечный float
        config: Параметры политики (default: FloatConversionConfig())

    Returns:
        (unscaled, scale)

    Raises:
        FormatError: Если value NaN или Inf

    Examples:
        >>> float_to_decimal_parts(0.234)
        (234, 3)
        >>> float_to_decimal_parts(0.0)
        (0, 1)
        >>> float_to_decimal_parts(1e16)
        (10000000000000000, 0)
    """
    config = config or FloatConversionConfig()

    text = float_to_plain_text(value)
    unscaled, scale = parse_decimal_text(text)

    if scale > config.min_trimmed_scale:
        zeros = _trailing_zeros(unscaled)
        if zeros > 0:
            new_scale = max(config.min_trimmed_scale, scale - zeros)
            unscaled //= pow10(scale - new_scale)
            scale = new_scale
    elif scale == 0 and value == math.trunc(value) and abs(value) < config.integer_tag_limit:
        unscaled, scale = round(value * 10), 1

    logger.debug("Float %r converted to unscaled=%d scale=%d", value, unscaled, scale)
    return unscaled, scale
