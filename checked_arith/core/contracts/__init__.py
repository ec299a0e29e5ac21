"""
Contract Validation Module

Модуль для валидации JSON контрактов отказов checked-арифметики.
"""

from .validators import (
    ArithmeticFailureValidator,
    ContractValidator,
    SchemaLoader,
    to_failure,
    validate_arithmetic_failure,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticFailureValidator",
    # Functions
    "to_failure",
    "validate_arithmetic_failure",
]
