"""
Input Parsing: разбор токенов консольного ввода

- parse_duration: вещественное число ("38.5", "38,5", "4.2e1")
- parse_index:    целое число со знаком ("0", "-1", "+2")

Любой токен, который не разбирается, приводит к FormatError.
Нечисловые значения float (nan, inf) также отклоняются.
"""

import re
from typing import Final, Optional

from src.core.math.numeric import is_valid_float
from src.validation.errors import FormatError

_INDEX_PATTERN: Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")


def parse_duration(token: Optional[str]) -> float:
    """
    Разбор длительности в минутах.

    Допускается одна запятая как десятичный разделитель, если точки нет.

    Args:
        token: Сырой текст (None трактуется как пустой ввод)

    Returns:
        Конечное значение float

    Raises:
        FormatError: Пустой, нечисловой или неконечный токен

    Examples:
        >>> parse_duration(" 38.5 ")
        38.5
        >>> parse_duration("38,5")
        38.5
    """
    text = (token or "").strip()
    if "," in text and "." not in text and text.count(",") == 1:
        text = text.replace(",", ".")

    # float() принимает "1_000", консольный ввод так не пишут
    if "_" in text:
        raise FormatError(f"Invalid duration format: {token!r}")

    try:
        value = float(text)
    except ValueError:
        raise FormatError(f"Invalid duration format: {token!r}") from None

    if not is_valid_float(value):
        raise FormatError(f"Duration must be a finite number, got {token!r}")

    return value


def parse_index(token: Optional[str]) -> int:
    """
    Разбор индекса вставки.

    Args:
        token: Сырой текст (None трактуется как пустой ввод)

    Returns:
        Целое число

    Raises:
        FormatError: Токен не является десятичным целым

    Examples:
        >>> parse_index("-1")
        -1
    """
    text = (token or "").strip()
    if not _INDEX_PATTERN.fullmatch(text):
        raise FormatError(f"Invalid index format: {token!r}")

    # int() ограничен sys.get_int_max_str_digits()
    try:
        return int(text)
    except ValueError:
        raise FormatError(f"Invalid index format: {token!r}") from None
