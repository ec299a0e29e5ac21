"""
MathError — исключение checked-арифметики

Единственный тип исключения для всех видов отказа. Вид отказа различается
по ArithmeticFailure.kind, а не по подклассу.
"""

import logging
from typing import Any, Dict, Optional

from checked_arith.core.domain.failure import ArithmeticErrorKind, ArithmeticFailure

logger = logging.getLogger(__name__)


class MathError(ArithmeticError):
    """
    Отказ checked-операции: результат не представим или аргумент недопустим.

    Оборачивающие отказы (exponentiation overflow, 64-bit subtraction overflow)
    выбрасываются через `raise ... from original`, исходный отказ доступен
    в __cause__.
    """

    def __init__(self, failure: ArithmeticFailure):
        super().__init__(failure.message)
        self.failure = failure
        # repr отказа форматируется, только если DEBUG включён
        logger.debug("arithmetic failure %r", failure)

    def __reduce__(self):
        # args хранят только сообщение: pickle и copy восстанавливают из failure
        return (type(self), (self.failure,), {"__cause__": self.__cause__})

    @property
    def kind(self) -> ArithmeticErrorKind:
        return self.failure.kind

    @property
    def x(self) -> Optional[int]:
        return self.failure.x

    @property
    def y(self) -> Optional[int]:
        return self.failure.y

    @property
    def context(self) -> Dict[str, int]:
        return self.failure.context

    def to_payload(self) -> Dict[str, Any]:
        return self.failure.to_payload()


def math_error(
    kind: ArithmeticErrorKind,
    x: Optional[int] = None,
    y: Optional[int] = None,
) -> MathError:
    """
    Построение MathError в точке отказа.

    Args:
        kind: Вид отказа
        x: Первый операнд (optional)
        y: Второй операнд (optional)

    Returns:
        MathError, готовый к raise
    """
    return MathError(ArithmeticFailure(kind=kind, x=x, y=y))
