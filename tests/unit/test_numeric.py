"""
Тесты для числовых примитивов: three_way_compare, format_number

Проверяет:
1. Точное трёхзначное сравнение без толерантности
2. Кратчайшую форму чисел, включая большие целые float
"""

import pytest

from src.core.math.numeric import (
    INTEGRAL_FORMAT_LIMIT,
    format_number,
    is_valid_float,
    three_way_compare,
)


class TestThreeWayCompare:
    """Тесты three_way_compare"""

    @pytest.mark.parametrize("a,b,expected", [(1.0, 5.0, -1), (5.0, 5.0, 0), (5.0, 1.0, 1)])
    def test_ordering(self, a: float, b: float, expected: int) -> None:
        assert three_way_compare(a, b) == expected

    def test_no_tolerance(self) -> None:
        assert three_way_compare(38.5, 38.5 + 1e-12) == -1


class TestFormatNumber:
    """Тесты format_number"""

    @pytest.mark.parametrize(
        "value,expected",
        [(2.0, "2"), (-4, "-4"), (2.5, "2.5"), (0.0, "0"), (1e15, "1000000000000000")],
    )
    def test_short_forms(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    @pytest.mark.parametrize("value,expected", [(1e300, "1e+300"), (-1e20, "-1e+20"), (1e16, "1e+16")])
    def test_large_integral_values_use_exponent(self, value: float, expected: str) -> None:
        assert format_number(value) == expected
        assert abs(value) >= INTEGRAL_FORMAT_LIMIT

    def test_large_value_round_trips(self) -> None:
        assert float(format_number(1e300)) == 1e300

    def test_non_finite(self) -> None:
        assert format_number(float("inf")) == "inf"
        assert format_number(float("nan")) == "nan"
        assert not is_valid_float(float("nan"))
