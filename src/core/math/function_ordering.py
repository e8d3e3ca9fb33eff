"""
Function Ordering: пакетные операции над набором функций

- sort_functions: стабильная сортировка по значению в COMPARISON_POINT
- describe_all:   описания всех функций в заданной точке
- clone_all:      независимые копии набора

Сортировка стабильна: при равных значениях сохраняется исходный порядок.
Функции, не определённые в точке сравнения, уходят в конец.
"""

import logging
from functools import cmp_to_key
from typing import Iterable

from src.core.math.functions import FunctionBase

logger = logging.getLogger(__name__)


def _compare(left: FunctionBase, right: FunctionBase) -> int:
    return left.compare(right)


def sort_functions(functions: Iterable[FunctionBase]) -> list[FunctionBase]:
    """
    Стабильная сортировка функций по возрастанию значения в COMPARISON_POINT.

    Args:
        functions: Исходный набор (не изменяется)

    Returns:
        Новый отсортированный список

    Examples:
        >>> [f.label for f in sort_functions([Line(a=2, b=3), Quadratic(a=1, b=-4, c=4)])]
        ['Quadratic', 'Line']
    """
    ordered = sorted(functions, key=cmp_to_key(_compare))
    logger.debug("Sorted %d functions: %s", len(ordered), [f.label for f in ordered])
    return ordered


def describe_all(functions: Iterable[FunctionBase], x: float) -> list[str]:
    """Описания всех функций в точке x, в исходном порядке."""
    return [function.describe(x) for function in functions]


def clone_all(functions: Iterable[FunctionBase]) -> list[FunctionBase]:
    return [function.clone() for function in functions]
