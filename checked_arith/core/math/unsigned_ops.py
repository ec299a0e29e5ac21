"""
Unsigned Ops — беззнаковое деление и остаток поверх signed представления

Оба операнда интерпретируются как unsigned битовые паттерны, результат
возвращается как signed значение той же ширины. Расширение до более
широкого типа не используется: алгоритм "Unsigned short division from
signed division" (Hacker's Delight).

Сложение, вычитание и умножение побитово совпадают для signed и unsigned
операндов в two's complement, поэтому отдельные unsigned варианты для них
не нужны.

Деление на нулевой паттерн → ZeroDivisionError (не MathError).
"""

from typing import Tuple

from checked_arith.core.math.integer_bounds import (
    INT32,
    INT64,
    IntWidth,
    unsigned_shift_right,
    validate_int,
    wrap,
)

# =============================================================================
# WIDTH-GENERIC АЛГОРИТМ
# =============================================================================


def _check_divisor(divisor: int) -> None:
    if divisor == 0:
        raise ZeroDivisionError("division by zero")


def _short_division(dividend: int, divisor: int, width: IntWidth) -> Tuple[int, int]:
    """
    Деление отрицательного (unsigned >= 2^(bits-1)) делимого на
    неотрицательный делитель.

    Оценка частного: ((dividend >>> 1) / divisor) << 1, ошибка не больше
    единицы; корректируется одним шагом. Промежуточные значения
    wrap-ятся, как в нативной fixed-width арифметике.

    Returns:
        (quotient, remainder) как signed паттерны ширины width
    """
    q = wrap((unsigned_shift_right(dividend, width) // divisor) << 1, width)
    r = wrap(dividend - q * divisor, width)
    if r < 0 or r >= divisor:
        q = wrap(q + 1, width)
        r = wrap(r - divisor, width)
    return q, r


def _divide_unsigned(dividend: int, divisor: int, width: IntWidth) -> int:
    _check_divisor(divisor)

    if divisor >= 0:
        if dividend >= 0:
            return dividend // divisor
        q, _ = _short_division(dividend, divisor, width)
        return q

    # unsigned делитель >= 2^(bits-1): частное только 0 или 1
    return 0 if dividend >= 0 or dividend < divisor else 1


def _remainder_unsigned(dividend: int, divisor: int, width: IntWidth) -> int:
    _check_divisor(divisor)

    if divisor >= 0:
        if dividend >= 0:
            return dividend % divisor
        _, r = _short_division(dividend, divisor, width)
        return r

    return dividend if dividend >= 0 or dividend < divisor else dividend - divisor


# =============================================================================
# 32-BIT / 64-BIT
# =============================================================================


def divide_unsigned_int(dividend: int, divisor: int) -> int:
    """
    Беззнаковое частное двух 32-bit int.

    Args:
        dividend: Делимое (signed паттерн)
        divisor: Делитель (signed паттерн)

    Returns:
        Беззнаковое частное как signed int

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> divide_unsigned_int(-3, 2)
        2147483646
        >>> divide_unsigned_int(-1, 2147483647)
        2
    """
    validate_int(dividend, "dividend", INT32)
    validate_int(divisor, "divisor", INT32)
    return _divide_unsigned(dividend, divisor, INT32)


def remainder_unsigned_int(dividend: int, divisor: int) -> int:
    """
    Беззнаковый остаток двух 32-bit int.

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> remainder_unsigned_int(-2147479015, 63)
        36
    """
    validate_int(dividend, "dividend", INT32)
    validate_int(divisor, "divisor", INT32)
    return _remainder_unsigned(dividend, divisor, INT32)


def divide_unsigned_long(dividend: int, divisor: int) -> int:
    """
    Беззнаковое частное двух 64-bit long.

    Raises:
        ZeroDivisionError: Если divisor == 0
    """
    validate_int(dividend, "dividend", INT64)
    validate_int(divisor, "divisor", INT64)
    return _divide_unsigned(dividend, divisor, INT64)


def remainder_unsigned_long(dividend: int, divisor: int) -> int:
    """
    Беззнаковый остаток двух 64-bit long.

    Raises:
        ZeroDivisionError: Если divisor == 0
    """
    validate_int(dividend, "dividend", INT64)
    validate_int(divisor, "divisor", INT64)
    return _remainder_unsigned(dividend, divisor, INT64)
