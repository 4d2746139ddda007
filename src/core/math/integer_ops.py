"""
Integer Ops — Целочисленные примитивы exact-арифметики

Общие помощники для Finite и Ratio:
- pow10 с кэшем степеней десяти
- Сокращение дроби по GCD с нормализацией знака
- Выделение множителей 2 и 5 из знаменателя
- Модульный hash дроби, совместимый с числовой башней Python

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После reduce_fraction знаменатель строго положителен
2. gcd(|numerator|, denominator) == 1 после reduce_fraction
3. Кэш pow10 только читается после вычисления
"""

import math
import sys
from functools import lru_cache
from typing import Final

from src.core.math.exceptions import DivisionByZero

# =============================================================================
# CONSTANTS
# =============================================================================

# Размер кэша степеней десяти (типичные scale << 256)
POW10_CACHE_SIZE: Final[int] = 256

# Параметры numeric hash (как у int/Fraction/Decimal в CPython)
_HASH_MODULUS: Final[int] = sys.hash_info.modulus
_HASH_INF: Final[int] = sys.hash_info.inf


# =============================================================================
# POWERS OF TEN
# =============================================================================


@lru_cache(maxsize=POW10_CACHE_SIZE)
def pow10(exponent: int) -> int:
    """
    10 в степени exponent.

    Args:
        exponent: Неотрицательный показатель

    Returns:
        10**exponent как int

    Raises:
        ValueError: Если exponent отрицательный

    Examples:
        >>> pow10(0)
        1
        >>> pow10(3)
        1000
    """
    if exponent < 0:
        raise ValueError(f"pow10 exponent must be non-negative, got {exponent}")
    return 10**exponent


# =============================================================================
# FRACTIONS
# =============================================================================


def reduce_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Сокращение дроби по GCD с нормализацией знака.

    Знак переносится в числитель, знаменатель всегда > 0.
    Ноль сокращается до 0/1.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ненулевой)

    Returns:
        (numerator, denominator) в несократимой форме

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> reduce_fraction(10, 20)
        (1, 2)
        >>> reduce_fraction(4, -8)
        (-1, 2)
        >>> reduce_fraction(0, -5)
        (0, 1)
    """
    if denominator == 0:
        raise DivisionByZero(f"Zero denominator in fraction {numerator}/0")

    divisor = math.gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    return numerator, denominator


def normalize_sign(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Нормализация знака без сокращения (знаменатель > 0).

    Raises:
        DivisionByZero: Если denominator == 0
    """
    if denominator == 0:
        raise DivisionByZero(f"Zero denominator in fraction {numerator}/0")
    if denominator < 0:
        return -numerator, -denominator
    return numerator, denominator


def strip_factor(value: int, factor: int) -> tuple[int, int]:
    """
    Выделение всех множителей factor из положительного value.

    Args:
        value: Положительное целое
        factor: Простой множитель (2 или 5)

    Returns:
        (остаток после деления, количество снятых множителей)

    Examples:
        >>> strip_factor(40, 2)
        (5, 3)
        >>> strip_factor(7, 5)
        (7, 0)
    """
    count = 0
    while value % factor == 0:
        value //= factor
        count += 1
    return value, count


def truncated_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю (в отличие от floor-деления Python).

    Остаток имеет знак делимого: numerator == q * denominator + r.

    Examples:
        >>> truncated_divmod(-23, 10)
        (-2, -3)
        >>> truncated_divmod(23, 10)
        (2, 3)
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


# =============================================================================
# HASHING
# =============================================================================


def fraction_hash(numerator: int, denominator: int) -> int:
    """
    Hash дроби, согласованный с hash(int) и hash(Fraction).

    Равные по значению дроби (в т.ч. несокращённые) дают одинаковый hash,
    а целые значения совпадают с hash соответствующего int.

    Args:
        numerator: Числитель
        denominator: Положительный знаменатель
    """
    try:
        inverse = pow(denominator, -1, _HASH_MODULUS)
    except ValueError:
        # denominator кратен модулю: обратного нет
        result = _HASH_INF
    else:
        result = hash(hash(abs(numerator)) * inverse)

    if numerator < 0:
        result = -result
    return -2 if result == -1 else result
