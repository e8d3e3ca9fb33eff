"""
Тесты для пакетных операций над функциями: sort_functions, describe_all, clone_all

Проверяет:
1. Порядок демонстрационного набора (Quadratic, Line, Hyperbola)
2. Стабильность сортировки при равных значениях
3. Неопределённые в точке сравнения функции уходят в конец
4. Исходный список не изменяется
"""

import pytest

from src.core.math.function_ordering import clone_all, describe_all, sort_functions
from src.core.math.functions import (
    EvaluationResult,
    FunctionBase,
    Hyperbola,
    Line,
    Quadratic,
)


class UndefinedAtOne(FunctionBase):
    def evaluate_result(self, x: float) -> EvaluationResult:
        if x == 1:
            return EvaluationResult.undefined(x, "undefined at 1")
        return EvaluationResult.defined(x, 0.0)

    def formula(self) -> str:
        return "y = 0 (x != 1)"


@pytest.fixture
def demo_functions() -> list[FunctionBase]:
    return [Line(a=2, b=3), Quadratic(a=1, b=-4, c=4), Hyperbola(a=5)]


class TestSortFunctions:
    """Тесты sort_functions"""

    def test_demo_order(self, demo_functions: list[FunctionBase]) -> None:
        """Значения в 1: Line→5, Quadratic→1, Hyperbola→5"""
        ordered = sort_functions(demo_functions)

        assert [type(f) for f in ordered] == [Quadratic, Line, Hyperbola]
        assert [f.evaluate(1) for f in ordered] == [1, 5, 5]

    def test_stable_for_ties(self) -> None:
        hyperbola = Hyperbola(a=5)
        line = Line(a=2, b=3)

        assert sort_functions([hyperbola, line]) == [hyperbola, line]
        assert sort_functions([line, hyperbola]) == [line, hyperbola]

    def test_input_not_modified(self, demo_functions: list[FunctionBase]) -> None:
        before = list(demo_functions)
        sort_functions(demo_functions)
        assert demo_functions == before

    def test_builtin_sorted_agrees(self, demo_functions: list[FunctionBase]) -> None:
        """Rich comparisons дают тот же порядок, что и compare"""
        assert sorted(demo_functions) == sort_functions(demo_functions)

    def test_undefined_sorted_last(self) -> None:
        undefined = UndefinedAtOne()
        functions = [undefined, Line(a=100, b=0), Quadratic(a=0, b=0, c=-50)]

        ordered = sort_functions(functions)

        assert ordered[-1] is undefined
        assert [f.evaluate(1) for f in ordered[:-1]] == [-50, 100]

    def test_empty(self) -> None:
        assert sort_functions([]) == []


class TestDescribeAll:
    """Тесты describe_all"""

    def test_demo_listing_at_two(self, demo_functions: list[FunctionBase]) -> None:
        assert describe_all(demo_functions, 2) == [
            "[Line] y = 2x + 3; x = 2; y = 7",
            "[Quadratic] y = 1x² + -4x + 4; x = 2; y = 0",
            "[Hyperbola] y = 5/x; x = 2; y = 2.5",
        ]

    def test_sorted_listing_at_one(self, demo_functions: list[FunctionBase]) -> None:
        assert describe_all(sort_functions(demo_functions), 1) == [
            "[Quadratic] y = 1x² + -4x + 4; x = 1; y = 1",
            "[Line] y = 2x + 3; x = 1; y = 5",
            "[Hyperbola] y = 5/x; x = 1; y = 5",
        ]

    def test_listing_at_zero_does_not_raise(self, demo_functions: list[FunctionBase]) -> None:
        lines = describe_all(demo_functions, 0)
        assert lines[2].startswith("[Hyperbola] x = 0; Error:")


class TestCloneAll:
    """Тесты clone_all"""

    def test_clones_are_independent(self, demo_functions: list[FunctionBase]) -> None:
        copies = clone_all(demo_functions)

        assert copies == demo_functions
        assert all(c is not f for c, f in zip(copies, demo_functions))

        copies[0].b = 100
        assert demo_functions[0].b == 3
