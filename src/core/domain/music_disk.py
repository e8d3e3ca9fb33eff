"""
MusicDisk: модель музыкального диска

Immutable Pydantic модель. Диск создаётся один раз и далее не изменяется;
коллекция хранит диски как значения.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.numeric import format_number

# Шаг квантования цены (копейки/центы)
PRICE_QUANTUM: Final[Decimal] = Decimal("0.01")

# Символ валюты в листинге
CURRENCY_SYMBOL: Final[str] = "$"


def format_price(price: Decimal, currency_symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Форматирование цены как валюты.

    Examples:
        >>> format_price(Decimal("200"))
        '$200.00'
        >>> format_price(Decimal("1234.5"))
        '$1,234.50'
    """
    quantized = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{currency_symbol}{quantized:,.2f}"


class MusicDisk(BaseModel):
    """
    Модель музыкального диска.

    Immutable модель (frozen=True). Для удаления из коллекции диски
    сопоставляются только по duration_minutes (точное равенство).
    """

    name: str = Field(..., min_length=1, description="Название альбома")
    author: str = Field(..., min_length=1, description="Исполнитель")
    duration_minutes: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Длительность в минутах"
    )
    price: Decimal = Field(..., ge=0, description="Цена")

    model_config = {"frozen": True}  # Immutable

    @field_validator("price")
    @classmethod
    def quantize_price(cls, v: Decimal) -> Decimal:
        """Цена хранится с точностью до PRICE_QUANTUM."""
        if not v.is_finite():
            raise ValueError(f"price must be finite, got {v}")
        return v.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)

    @property
    def formatted_price(self) -> str:
        return format_price(self.price)

    def describe(self) -> str:
        """Строка листинга: name | author | duration min | price."""
        return (
            f"{self.name} | {self.author} | "
            f"{format_number(self.duration_minutes)} min | {self.formatted_price}"
        )
