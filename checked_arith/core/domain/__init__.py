"""
Domain models and value objects.

Contains the failure record reported by checked arithmetic operations.
"""

from checked_arith.core.domain.failure import X, Y, ArithmeticErrorKind, ArithmeticFailure

__all__ = [
    # Context keys
    "X",
    "Y",
    # Failure model
    "ArithmeticErrorKind",
    "ArithmeticFailure",
]
