"""Validation layer: разбор консольного ввода в проверенные команды над коллекцией.

- Ошибки ввода: FormatError / NotFoundError / RangeError
- Разбор токенов: parse_duration, parse_index
- Команды: RemoveAt, InsertBlock (строятся plan_removal / plan_insertion)
"""

from .errors import (
    CollectionInputError,
    FormatError,
    NotFoundError,
    RangeError,
)
from .input_parsing import parse_duration, parse_index
from .mutation_commands import (
    InsertBlock,
    RemoveAt,
    plan_insertion,
    plan_removal,
)

__all__ = [
    # Errors
    "CollectionInputError",
    "FormatError",
    "NotFoundError",
    "RangeError",
    # Parsing
    "parse_duration",
    "parse_index",
    # Commands
    "InsertBlock",
    "RemoveAt",
    "plan_insertion",
    "plan_removal",
]
