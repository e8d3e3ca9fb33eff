"""
Numeric helpers: валидация, точное сравнение и форматирование float

Модуль содержит примитивы, общие для семейства функций и слоя валидации:
- Проверка float на конечность (NaN/Inf не допускаются)
- Трёхзначное сравнение без толерантности
- Форматирование чисел в кратчайшей round-trip форме

ИНВАРИАНТЫ:
1. Сравнение точное: никакого epsilon, 38.5 != 38.50000001
2. Целые значения печатаются без дробной части ("2", а не "2.0")
"""

import math
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Точка, в которой сравниваются функции при упорядочивании
COMPARISON_POINT: Final[float] = 1.0

# Выше этого порога целые float печатаются в экспоненциальной форме
INTEGRAL_FORMAT_LIMIT: Final[float] = 1e16


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def three_way_compare(a: float, b: float) -> int:
    """
    Точное трёхзначное сравнение двух float.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> three_way_compare(1.0, 5.0)
        -1
        >>> three_way_compare(5.0, 5.0)
        0
        >>> three_way_compare(5.0, 1.0)
        1
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float) -> str:
    """
    Форматирование числа для человекочитаемых описаний.

    Целые значения печатаются без дробной части, остальные в кратчайшей
    форме, которая однозначно восстанавливает исходный float.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(-4)
        '-4'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(0.1 + 0.2)
        '0.30000000000000004'
        >>> format_number(1e300)
        '1e+300'
    """
    number = float(value)
    if is_valid_float(number) and number.is_integer() and abs(number) < INTEGRAL_FORMAT_LIMIT:
        return str(int(number))
    return repr(number)
