"""
Checked Ops — сложение, вычитание и умножение с проверкой переполнения

Для 32-bit и 64-bit signed integers. Результат возвращается только если
точное значение представимо в ширине операндов, иначе MathError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не маскируется wrap-ом
2. 32-bit: вычисление в широком аккумуляторе + проверка границ
3. 64-bit add: знаковый анализ wrapped результата
4. 64-bit mul: проверка делением ДО умножения
5. 64-bit sub: y == INT64_MIN обрабатывается отдельно (-y не представим)
"""

from checked_arith.core.domain.failure import ArithmeticErrorKind
from checked_arith.core.math.errors import MathError, math_error
from checked_arith.core.math.integer_bounds import (
    INT32,
    INT64,
    INT64_MAX,
    INT64_MIN,
    is_representable,
    trunc_div,
    validate_int,
    wrap,
)

# =============================================================================
# 32-BIT
# =============================================================================


def add_and_check_int(x: int, y: int) -> int:
    """
    Сложение двух 32-bit int с проверкой переполнения.

    Args:
        x: Слагаемое
        y: Слагаемое

    Returns:
        x + y

    Raises:
        MathError: ADDITION_OVERFLOW если сумма не представима как int

    Examples:
        >>> add_and_check_int(2**31 - 1, 0)
        2147483647
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)

    s = x + y
    if not is_representable(s, INT32):
        raise math_error(ArithmeticErrorKind.ADDITION_OVERFLOW, x, y)
    return s


def sub_and_check_int(x: int, y: int) -> int:
    """
    Вычитание двух 32-bit int с проверкой переполнения.

    Raises:
        MathError: SUBTRACTION_OVERFLOW если разность не представима как int
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)

    s = x - y
    if not is_representable(s, INT32):
        raise math_error(ArithmeticErrorKind.SUBTRACTION_OVERFLOW, x, y)
    return s


def mul_and_check_int(x: int, y: int) -> int:
    """
    Умножение двух 32-bit int с проверкой переполнения.

    Raises:
        MathError: MULTIPLICATION_OVERFLOW_32 если произведение не представимо
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)

    m = x * y
    if not is_representable(m, INT32):
        raise math_error(ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_32, x, y)
    return m


# =============================================================================
# 64-BIT
# =============================================================================


def add_and_check_long(x: int, y: int) -> int:
    """
    Сложение двух 64-bit long с проверкой переполнения.

    Переполнение произошло тогда и только тогда, когда операнды одного знака,
    а знак wrapped результата отличается от их знака.

    Args:
        x: Слагаемое
        y: Слагаемое

    Returns:
        x + y

    Raises:
        MathError: ADDITION_OVERFLOW если сумма не представима как long
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT64)

    result = wrap(x + y, INT64)
    if (x ^ y) >= 0 and (x ^ result) < 0:
        raise math_error(ArithmeticErrorKind.ADDITION_OVERFLOW, x, y)
    return result


def sub_and_check_long(x: int, y: int) -> int:
    """
    Вычитание двух 64-bit long с проверкой переполнения.

    Реализовано как add_and_check_long(x, -y), кроме y == INT64_MIN:
    тогда x - y представимо только при x < 0.

    Raises:
        MathError: SUBTRACTION_OVERFLOW; при переполнении сложения исходный
            ADDITION_OVERFLOW доступен в __cause__
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT64)

    if y == INT64_MIN:
        if x < 0:
            return x - y
        raise math_error(ArithmeticErrorKind.SUBTRACTION_OVERFLOW, x, y)

    try:
        return add_and_check_long(x, -y)
    except MathError as e:
        raise math_error(ArithmeticErrorKind.SUBTRACTION_OVERFLOW, x, y) from e


def mul_and_check_long(x: int, y: int) -> int:
    """
    Умножение двух 64-bit long с проверкой переполнения.

    Операнды упорядочиваются (x <= y), что сводит проверку к трём случаям
    знаков. Граница проверяется делением с усечением до умножения.

    Raises:
        MathError: MULTIPLICATION_OVERFLOW_64 если произведение не представимо

    Examples:
        >>> mul_and_check_long(INT64_MIN // 2, 2) == INT64_MIN
        True
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT64)

    a, b = (y, x) if x > y else (x, y)

    if a < 0:
        if b < 0:
            # оба отрицательные: положительное переполнение
            if a >= trunc_div(INT64_MAX, b):
                return a * b
        elif b > 0:
            # разные знаки: отрицательное переполнение
            if trunc_div(INT64_MIN, b) <= a:
                return a * b
        else:
            return 0
    elif a > 0:
        # оба положительные
        if a <= trunc_div(INT64_MAX, b):
            return a * b
    else:
        return 0

    raise math_error(ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_64, x, y)
