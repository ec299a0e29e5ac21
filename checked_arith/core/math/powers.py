"""
Powers — возведение в степень и проверка степени двойки

Binary exponentiation (square-and-multiply) для пяти комбинаций
(основание, показатель):

    pow_int       int    ^ int
    pow_long      long   ^ int
    pow_big       bigint ^ int
    pow_big_long  bigint ^ long
    pow_big_big   bigint ^ bigint

Для fixed-width оснований каждое умножение checked; переполнение
перевыбрасывается как EXPONENTIATION_OVERFLOW_{32,64} с исходным
MULTIPLICATION_OVERFLOW в __cause__. Для arbitrary precision умножение
переполниться не может, проверка не применяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. pow(x, 0) = 1 для любого x, включая 0
2. Отрицательный показатель → NEGATIVE_EXPONENT (контекст: y)
3. Частичный результат никогда не возвращается
"""

from typing import Callable

from checked_arith.core.domain.failure import ArithmeticErrorKind
from checked_arith.core.math.checked_ops import mul_and_check_int, mul_and_check_long
from checked_arith.core.math.errors import MathError, math_error
from checked_arith.core.math.integer_bounds import (
    INT32,
    INT64,
    validate_big_int,
    validate_int,
)

# =============================================================================
# FIXED-WIDTH ОСНОВАНИЕ
# =============================================================================


def _check_exponent(y: int) -> None:
    if y < 0:
        raise math_error(ArithmeticErrorKind.NEGATIVE_EXPONENT, y=y)


def _pow_checked(x: int, y: int, mul: Callable[[int, int], int]) -> int:
    """Square-and-multiply; mul выбрасывает MathError при переполнении."""
    exp = y
    result = 1
    x2y = x
    while True:
        if exp & 0x1:
            result = mul(result, x2y)

        exp >>= 1
        if exp == 0:
            break

        x2y = mul(x2y, x2y)

    return result


def pow_int(x: int, y: int) -> int:
    """
    Возведение 32-bit int в степень 32-bit int.

    Args:
        x: Основание
        y: Показатель (>= 0)

    Returns:
        x^y

    Raises:
        MathError: NEGATIVE_EXPONENT если y < 0;
            EXPONENTIATION_OVERFLOW_32 если результат не представим как int

    Examples:
        >>> pow_int(21, 7)
        1801088541
        >>> pow_int(0, 0)
        1
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)
    _check_exponent(y)

    try:
        return _pow_checked(x, y, mul_and_check_int)
    except MathError as e:
        raise math_error(ArithmeticErrorKind.EXPONENTIATION_OVERFLOW_32, x, y) from e


def pow_long(x: int, y: int) -> int:
    """
    Возведение 64-bit long в степень 32-bit int.

    Raises:
        MathError: NEGATIVE_EXPONENT если y < 0;
            EXPONENTIATION_OVERFLOW_64 если результат не представим как long
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT32)
    _check_exponent(y)

    try:
        return _pow_checked(x, y, mul_and_check_long)
    except MathError as e:
        raise math_error(ArithmeticErrorKind.EXPONENTIATION_OVERFLOW_64, x, y) from e


# =============================================================================
# ARBITRARY PRECISION ОСНОВАНИЕ
# =============================================================================


def _pow_unbounded(x: int, y: int) -> int:
    result = 1
    x2y = x
    while y != 0:
        if y & 0x1:
            result *= x2y
        y >>= 1
        if y != 0:
            x2y *= x2y
    return result


def pow_big(x: int, y: int) -> int:
    """
    Возведение arbitrary-precision целого в степень 32-bit int.

    Raises:
        MathError: NEGATIVE_EXPONENT если y < 0
    """
    validate_big_int(x, "x")
    validate_int(y, "y", INT32)
    _check_exponent(y)

    return x**y


def pow_big_long(x: int, y: int) -> int:
    """
    Возведение arbitrary-precision целого в степень 64-bit long.

    Raises:
        MathError: NEGATIVE_EXPONENT если y < 0
    """
    validate_big_int(x, "x")
    validate_int(y, "y", INT64)
    _check_exponent(y)

    return _pow_unbounded(x, y)


def pow_big_big(x: int, y: int) -> int:
    """
    Возведение arbitrary-precision целого в arbitrary-precision степень.

    Показатель обходится сдвигами вправо и проверкой младшего бита.

    Raises:
        MathError: NEGATIVE_EXPONENT если y < 0
    """
    validate_big_int(x, "x")
    validate_big_int(y, "y")
    _check_exponent(y)

    return _pow_unbounded(x, y)


# =============================================================================
# СТЕПЕНЬ ДВОЙКИ
# =============================================================================


def is_power_of_two(n: int) -> bool:
    """
    Проверка, является ли 64-bit long степенью двойки.

    Returns:
        True если n > 0 и в n ровно один установленный бит

    Examples:
        >>> is_power_of_two(1024)
        True
        >>> is_power_of_two(0)
        False
    """
    validate_int(n, "n", INT64)
    return n > 0 and (n & (n - 1)) == 0
