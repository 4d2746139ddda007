"""
Rounding — Движок округления exact-чисел

Восемь режимов округления поверх представления (unscaled, scale).
Единая целочисленная процедура round_division используется и для Finite
(делитель 10^(s-t)), и для Ratio (точное деление numerator * 10^t / denominator).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни один режим не меняет знак результата
2. Увеличение scale всегда точное (умножение на степень десяти)
3. UNNECESSARY никогда не округляет молча — RoundingRequired
4. Повторное применение (scale, mode) к результату — no-op

ФОРМУЛЫ:
    q = trunc(n / d), r = |n| - |q| * d  (0 <= r < d)
    "away from zero": |q| += 1 (для отрицательных q -= 1)
    midpoint: 2r == d; для десятичного d = 10^k это эквивалентно r == d // 2
"""

from enum import Enum
from typing import Final

from src.core.math.exceptions import RoundingRequired
from src.core.math.integer_ops import pow10


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """
    Режимы округления.

    Примеры для scale 0:
        UP:          2.3 -> 3,  -2.3 -> -3
        DOWN:        2.3 -> 2,  -2.3 -> -2
        CEILING:     2.3 -> 3,  -2.3 -> -2
        FLOOR:       2.3 -> 2,  -2.3 -> -3
        HALF_UP:     2.5 -> 3,  -2.5 -> -3
        HALF_DOWN:   2.5 -> 2,  -2.5 -> -2
        HALF_EVEN:   2.5 -> 2,   3.5 -> 4
        UNNECESSARY: 2.0 -> 2,   2.3 -> RoundingRequired
    """

    UP = "up"
    DOWN = "down"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    UNNECESSARY = "unnecessary"


# Режим по умолчанию для divide(..., scale=...) и half_up()
DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP


# =============================================================================
# ROUNDING ENGINE
# =============================================================================


def _away_from_zero(quotient: int, remainder: int, denominator: int, negative: bool, mode: RoundingMode) -> bool:
    """Решение: сдвигать ли |quotient| на единицу от нуля."""
    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative

    twice = 2 * remainder
    if mode is RoundingMode.HALF_UP:
        return twice >= denominator
    if mode is RoundingMode.HALF_DOWN:
        return twice > denominator
    if mode is RoundingMode.HALF_EVEN:
        if twice == denominator:
            return quotient % 2 == 1
        return twice > denominator

    raise ValueError(f"Unsupported rounding mode: {mode!r}")


def round_division(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Целое частное numerator / denominator, округлённое по режиму mode.

    Args:
        numerator: Делимое (любого знака)
        denominator: Строго положительный делитель
        mode: Режим округления

    Returns:
        Округлённое частное

    Raises:
        ValueError: Если denominator <= 0
        RoundingRequired: Если mode == UNNECESSARY и деление не нацело

    Examples:
        >>> round_division(25, 10, RoundingMode.HALF_EVEN)
        2
        >>> round_division(-25, 10, RoundingMode.HALF_UP)
        -3
        >>> round_division(1, 3, RoundingMode.CEILING)
        1
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    mode = RoundingMode(mode)

    negative = numerator < 0
    quotient, remainder = divmod(abs(numerator), denominator)

    if remainder != 0:
        if mode is RoundingMode.UNNECESSARY:
            raise RoundingRequired(
                f"Rounding necessary: {numerator}/{denominator} is not an integer"
            )
        if _away_from_zero(quotient, remainder, denominator, negative, mode):
            quotient += 1

    return -quotient if negative else quotient


def rescale_unscaled(unscaled: int, scale: int, target_scale: int, mode: RoundingMode) -> int:
    """
    Новое unscaled-значение при переходе scale -> target_scale.

    Args:
        unscaled: Текущее unscaled-значение
        scale: Текущий scale (>= 0)
        target_scale: Целевой scale (>= 0)
        mode: Режим округления (используется только при уменьшении scale)

    Returns:
        unscaled-значение для target_scale

    Raises:
        ValueError: Если target_scale отрицательный
        RoundingRequired: Если mode == UNNECESSARY и теряются ненулевые цифры

    Examples:
        >>> rescale_unscaled(12345, 5, 4, RoundingMode.HALF_UP)
        1235
        >>> rescale_unscaled(12345, 5, 7, RoundingMode.UNNECESSARY)
        1234500
    """
    if target_scale < 0:
        raise ValueError(f"scale must be non-negative, got {target_scale}")

    if target_scale == scale:
        return unscaled
    if target_scale > scale:
        return unscaled * pow10(target_scale - scale)

    try:
        return round_division(unscaled, pow10(scale - target_scale), mode)
    except RoundingRequired:
        raise RoundingRequired(
            f"Rounding necessary: value with scale {scale} cannot be "
            f"represented exactly with scale {target_scale}"
        ) from None


def rescale_fraction(numerator: int, denominator: int, target_scale: int, mode: RoundingMode) -> int:
    """
    unscaled-значение дроби numerator/denominator в scale target_scale.

    Точное long-division округление без промежуточного float.

    Raises:
        ValueError: Если target_scale отрицательный
        RoundingRequired: Если mode == UNNECESSARY и дробь не представима точно
    """
    if target_scale < 0:
        raise ValueError(f"scale must be non-negative, got {target_scale}")

    try:
        return round_division(numerator * pow10(target_scale), denominator, mode)
    except RoundingRequired:
        raise RoundingRequired(
            f"Rounding necessary: {numerator}/{denominator} cannot be "
            f"represented exactly with scale {target_scale}"
        ) from None
