"""
ArithmeticFailure — Модель отказа checked-операции

Immutable Pydantic модель, описывающая, какой инвариант нарушен и на каких
операндах. Создаётся один раз в точке отказа и никогда не изменяется.
Сериализуется в payload, соответствующий контракту arithmetic_failure.json.
"""

from enum import Enum
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field

# Ключи контекста операндов
X: Final[str] = "x"
Y: Final[str] = "y"


# =============================================================================
# ENUMS
# =============================================================================


class ArithmeticErrorKind(str, Enum):
    """Вид отказа checked-операции"""

    ADDITION_OVERFLOW = "ADDITION_OVERFLOW"
    SUBTRACTION_OVERFLOW = "SUBTRACTION_OVERFLOW"
    MULTIPLICATION_OVERFLOW_32 = "MULTIPLICATION_OVERFLOW_32"
    MULTIPLICATION_OVERFLOW_64 = "MULTIPLICATION_OVERFLOW_64"
    GCD_OVERFLOW_32 = "GCD_OVERFLOW_32"
    GCD_OVERFLOW_64 = "GCD_OVERFLOW_64"
    LCM_OVERFLOW_32 = "LCM_OVERFLOW_32"
    LCM_OVERFLOW_64 = "LCM_OVERFLOW_64"
    EXPONENTIATION_OVERFLOW_32 = "EXPONENTIATION_OVERFLOW_32"
    EXPONENTIATION_OVERFLOW_64 = "EXPONENTIATION_OVERFLOW_64"
    NEGATIVE_EXPONENT = "NEGATIVE_EXPONENT"


# Шаблоны сообщений; подставляются операнды из контекста
_MESSAGES: Final[Dict[ArithmeticErrorKind, str]] = {
    ArithmeticErrorKind.ADDITION_OVERFLOW: "overflow in addition: {x} + {y}",
    ArithmeticErrorKind.SUBTRACTION_OVERFLOW: "overflow in subtraction: {x} - {y}",
    ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_32: "32-bit int overflow in multiplication: {x} * {y}",
    ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_64: "64-bit long overflow in multiplication: {x} * {y}",
    ArithmeticErrorKind.GCD_OVERFLOW_32: "gcd({x}, {y}) is 2^31 and cannot be represented as a non-negative int",
    ArithmeticErrorKind.GCD_OVERFLOW_64: "gcd({x}, {y}) is 2^63 and cannot be represented as a non-negative long",
    ArithmeticErrorKind.LCM_OVERFLOW_32: "lcm({x}, {y}) is 2^31 and cannot be represented as a non-negative int",
    ArithmeticErrorKind.LCM_OVERFLOW_64: "lcm({x}, {y}) is 2^63 and cannot be represented as a non-negative long",
    ArithmeticErrorKind.EXPONENTIATION_OVERFLOW_32: "32-bit int overflow in exponentiation: {x} ^ {y}",
    ArithmeticErrorKind.EXPONENTIATION_OVERFLOW_64: "64-bit long overflow in exponentiation: {x} ^ {y}",
    ArithmeticErrorKind.NEGATIVE_EXPONENT: "exponent must be non-negative, got {y}",
}


# =============================================================================
# FAILURE MODEL
# =============================================================================


class ArithmeticFailure(BaseModel):
    """
    Отказ checked-операции: вид и операнды, вызвавшие отказ.

    Immutable модель (frozen=True). Операнды, не относящиеся к отказу
    (например, x для NEGATIVE_EXPONENT), остаются None и не попадают
    в контекст.
    """

    kind: ArithmeticErrorKind = Field(..., description="Вид отказа")
    x: Optional[int] = Field(default=None, description="Первый операнд")
    y: Optional[int] = Field(default=None, description="Второй операнд")

    model_config = {"frozen": True}  # Immutable

    @property
    def context(self) -> Dict[str, int]:
        """
        Key-value контекст операндов (ключи "x", "y").

        Returns:
            Новый dict; изменение результата не влияет на модель
        """
        ctx: Dict[str, int] = {}
        if self.x is not None:
            ctx[X] = self.x
        if self.y is not None:
            ctx[Y] = self.y
        return ctx

    @property
    def message(self) -> str:
        """Человекочитаемое описание отказа."""
        return _MESSAGES[self.kind].format(x=self.x, y=self.y)

    def to_payload(self) -> Dict[str, Any]:
        """
        JSON-ready представление отказа.

        Returns:
            {"kind": ..., "message": ..., "context": {"x": ..., "y": ...}}
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "context": self.context,
        }
