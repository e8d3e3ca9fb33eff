"""
Core math modules

Семейство функций одной переменной и численные примитивы для них.
"""

# Numeric helpers
from src.core.math.numeric import (
    COMPARISON_POINT,
    format_number,
    is_valid_float,
    three_way_compare,
)

# Functions
from src.core.math.functions import (
    DomainError,
    EvaluationResult,
    Function,
    FunctionBase,
    Hyperbola,
    Line,
    Quadratic,
    parse_function,
)

# Ordering
from src.core.math.function_ordering import (
    clone_all,
    describe_all,
    sort_functions,
)

__all__ = [
    # Numeric: Constants
    "COMPARISON_POINT",
    # Numeric: Functions
    "format_number",
    "is_valid_float",
    "three_way_compare",
    # Functions: Exceptions
    "DomainError",
    # Functions: Types
    "EvaluationResult",
    "Function",
    "FunctionBase",
    "Hyperbola",
    "Line",
    "Quadratic",
    "parse_function",
    # Ordering
    "clone_all",
    "describe_all",
    "sort_functions",
]
