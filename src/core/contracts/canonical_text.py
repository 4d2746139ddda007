"""
Canonical Text — JSON Schema контракт строковой формы exact-числа

Каноническая строка — единственный внешний формат значения:
- Finite: '-0.2000', '12', '0.0' (ровно scale дробных цифр)
- Ratio: '-1/3', '2/6' (numerator/denominator как хранятся)

Схема schema/exact_number.json поставляется вместе с пакетом и загружается
лениво при первой проверке.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. str(value) всегда канонична для любого Finite/Ratio
2. parse_canonical(text) структурно сохраняет значение:
   str(parse_canonical(text)) == text для любой канонической строки
3. Знак '-' только у ненулевых значений ('-0.00' не канонична)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from src.core.domain.exact_number import Finite, Ratio, parse
from src.core.math.exceptions import FormatError
from src.core.math.text_codec import is_fraction_text

CANONICAL_TEXT_SCHEMA: Final[Path] = Path(__file__).parent / "schema" / "exact_number.json"


@lru_cache(maxsize=1)
def canonical_text_validator() -> Draft202012Validator:
    """
    Валидатор канонической строки (схема загружается один раз).

    Raises:
        FileNotFoundError: Если файл схемы не установлен
        jsonschema.SchemaError: Если схема не проходит meta-validation
    """
    with open(CANONICAL_TEXT_SCHEMA, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def is_canonical(text: Any) -> bool:
    """True если text — каноническая строка exact-числа."""
    return canonical_text_validator().is_valid(text)


def check_canonical(text: Any) -> None:
    """
    Проверка канонической формы.

    Args:
        text: Проверяемое значение (не-строки всегда некорректны)

    Raises:
        FormatError: С наиболее релевантной ошибкой схемы

    Examples:
        "-0.20" -> OK
        ".5"    -> FormatError
        "1/-3"  -> FormatError
    """
    error = best_match(canonical_text_validator().iter_errors(text))
    if error is not None:
        raise FormatError(f"Not a canonical exact number: {text!r} ({error.message})")


def parse_canonical(text: str) -> Finite | Ratio:
    """
    Строгий парсинг канонической строки.

    В отличие от parse(), принимает только каноническую форму и не
    сокращает дробь: '2/6' остаётся 2/6.

    Raises:
        FormatError: Если строка не каноническая
    """
    check_canonical(text)
    if is_fraction_text(text):
        return Ratio.parse(text, reduce=False)
    return parse(text)
