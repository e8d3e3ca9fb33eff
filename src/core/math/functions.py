"""
Functions: закрытое семейство функций одной переменной

Три варианта, различаемые дискриминатором `kind`:
- Line:       y = a*x + b
- Quadratic:  y = a*x² + b*x + c  (парабола)
- Hyperbola:  y = a / x           (не определена при x = 0)

Каждый вариант умеет:
- evaluate_result(x): вычисление в явной форме результата (значение или DomainError)
- evaluate(x):        вычисление с исключением DomainError
- describe(x):        текстовое описание; никогда не бросает исключений
- clone():            независимая копия
- compare(other):     упорядочивание по значению в точке COMPARISON_POINT

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. describe() тотальна: DomainError встраивается в текст, а не пробрасывается
2. compare() тотальна: сторона, не вычислимая в точке сравнения, считается большей
3. clone() не разделяет изменяемое состояние с оригиналом
"""

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from src.core.math.numeric import (
    COMPARISON_POINT,
    format_number,
    three_way_compare,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(ArithmeticError):
    """
    Вычисление математически не определено в данной точке.

    Пример: гипербола a/x при x = 0.
    """

    pass


# =============================================================================
# EVALUATION RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления функции: либо значение, либо DomainError."""

    x: float
    value: Optional[float] = None
    error: Optional[DomainError] = None

    @property
    def is_defined(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """
        Значение результата.

        Raises:
            DomainError: Если функция не определена в точке x
        """
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def defined(cls, x: float, value: float) -> "EvaluationResult":
        return cls(x=x, value=value)

    @classmethod
    def undefined(cls, x: float, message: str) -> "EvaluationResult":
        return cls(x=x, error=DomainError(message))


# =============================================================================
# BASE MODEL
# =============================================================================


class FunctionBase(BaseModel):
    """
    Общее поведение всех функций семейства.

    Подклассы реализуют evaluate_result() и formula();
    всё остальное (evaluate, describe, clone, compare) строится поверх них.
    Коэффициенты изменяемы, но ядро их после создания не меняет.
    """

    model_config = {"validate_assignment": True}

    label: ClassVar[str] = ""

    def evaluate_result(self, x: float) -> EvaluationResult:
        raise NotImplementedError

    def formula(self) -> str:
        raise NotImplementedError

    def evaluate(self, x: float) -> float:
        """
        Значение функции в точке x.

        Raises:
            DomainError: Если функция не определена в точке x
        """
        return self.evaluate_result(x).unwrap()

    def describe(self, x: float) -> str:
        """
        Описание функции в точке x. Никогда не бросает исключений.

        Для неопределённой точки возвращает текст ошибки вместо значения.
        """
        result = self.evaluate_result(x)
        if result.is_defined:
            return (
                f"[{self.label}] {self.formula()}; "
                f"x = {format_number(x)}; y = {format_number(result.value)}"
            )
        return f"[{self.label}] x = {format_number(x)}; Error: {result.error}"

    def clone(self):
        """Независимая копия того же варианта с теми же коэффициентами."""
        return self.model_copy(deep=True)

    def compare(self, other: "FunctionBase") -> int:
        """
        Сравнение по значению в COMPARISON_POINT (по возрастанию).

        Сторона, не определённая в точке сравнения, считается большей;
        две неопределённые стороны равны.

        Returns:
            -1, 0 или +1
        """
        mine = self.evaluate_result(COMPARISON_POINT)
        theirs = other.evaluate_result(COMPARISON_POINT)

        if not mine.is_defined and not theirs.is_defined:
            return 0
        if not mine.is_defined:
            return 1
        if not theirs.is_defined:
            return -1

        return three_way_compare(mine.value, theirs.value)

    def __lt__(self, other: "FunctionBase") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "FunctionBase") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "FunctionBase") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "FunctionBase") -> bool:
        return self.compare(other) >= 0


# =============================================================================
# VARIANTS
# =============================================================================


class Line(FunctionBase):
    """Прямая y = a*x + b."""

    kind: Literal["line"] = "line"
    label: ClassVar[str] = "Line"
    a: float = Field(..., allow_inf_nan=False, description="Угловой коэффициент")
    b: float = Field(..., allow_inf_nan=False, description="Свободный член")

    def evaluate_result(self, x: float) -> EvaluationResult:
        return EvaluationResult.defined(x, self.a * x + self.b)

    def formula(self) -> str:
        return f"y = {format_number(self.a)}x + {format_number(self.b)}"


class Quadratic(FunctionBase):
    """Парабола y = a*x² + b*x + c."""

    kind: Literal["quadratic"] = "quadratic"
    label: ClassVar[str] = "Quadratic"
    a: float = Field(..., allow_inf_nan=False, description="Коэффициент при x²")
    b: float = Field(..., allow_inf_nan=False, description="Коэффициент при x")
    c: float = Field(..., allow_inf_nan=False, description="Свободный член")

    def evaluate_result(self, x: float) -> EvaluationResult:
        return EvaluationResult.defined(x, self.a * x * x + self.b * x + self.c)

    def formula(self) -> str:
        return (
            f"y = {format_number(self.a)}x² + {format_number(self.b)}x + "
            f"{format_number(self.c)}"
        )


class Hyperbola(FunctionBase):
    """Гипербола y = a / x. Не определена при x = 0."""

    kind: Literal["hyperbola"] = "hyperbola"
    label: ClassVar[str] = "Hyperbola"
    a: float = Field(..., allow_inf_nan=False, description="Числитель")

    def evaluate_result(self, x: float) -> EvaluationResult:
        if x == 0:
            return EvaluationResult.undefined(
                x, "division by zero: x cannot be 0 for a hyperbola"
            )
        return EvaluationResult.defined(x, self.a / x)

    def formula(self) -> str:
        return f"y = {format_number(self.a)}/x"


# =============================================================================
# TAGGED UNION
# =============================================================================

Function = Annotated[Union[Line, Quadratic, Hyperbola], Field(discriminator="kind")]

_FUNCTION_ADAPTER: TypeAdapter = TypeAdapter(Function)


def parse_function(payload: dict[str, Any]) -> FunctionBase:
    """
    Построение функции нужного варианта из словаря.

    Args:
        payload: Словарь с ключом 'kind' и коэффициентами

    Returns:
        Line, Quadratic или Hyperbola

    Raises:
        pydantic.ValidationError: Неизвестный kind или невалидные коэффициенты

    Examples:
        >>> parse_function({"kind": "hyperbola", "a": 5})
        Hyperbola(kind='hyperbola', a=5.0)
    """
    return _FUNCTION_ADAPTER.validate_python(payload)
