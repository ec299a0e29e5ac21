"""
Divisors — наибольший общий делитель и наименьшее общее кратное

Binary GCD (Stein, 1961; Knuth 4.5.2 algorithm B) для 32-bit и 64-bit,
LCM через GCD с делением до умножения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не отрицателен
2. gcd(MIN, 0), gcd(0, MIN), gcd(MIN, MIN) = 2^(bits-1) → GCD_OVERFLOW
3. gcd(0, 0) = 0 — единственный случай нулевого результата
4. lcm(x, 0) = lcm(0, y) = 0
5. lcm = |(x / gcd(x, y)) * y|: промежуточное произведение не переполняется,
   если представим итоговый lcm
"""

from checked_arith.core.domain.failure import ArithmeticErrorKind
from checked_arith.core.math.checked_ops import mul_and_check_int, mul_and_check_long
from checked_arith.core.math.errors import math_error
from checked_arith.core.math.integer_bounds import (
    INT32,
    INT32_MAX,
    INT32_MIN,
    INT64,
    INT64_MIN,
    trailing_zeros,
    trunc_div,
    validate_int,
)

# =============================================================================
# GCD
# =============================================================================


def gcd_int(x: int, y: int) -> int:
    """
    НОД абсолютных значений двух 32-bit int.

    Если один из операндов равен INT32_MIN, выполняется один шаг деления
    с остатком в широком аккумуляторе, после чего оба значения помещаются
    в int и применяется binary gcd.

    Args:
        x: Число
        y: Число

    Returns:
        gcd(|x|, |y|), никогда не отрицательный

    Raises:
        MathError: GCD_OVERFLOW_32 если результат равен 2^31

    Examples:
        >>> gcd_int(30, 50)
        10
        >>> gcd_int(-30, 0)
        30
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)

    if x == 0 or y == 0:
        if x == INT32_MIN or y == INT32_MIN:
            raise math_error(ArithmeticErrorKind.GCD_OVERFLOW_32, x, y)
        return abs(x + y)

    a = abs(x)
    b = abs(y)

    if x == INT32_MIN or y == INT32_MIN:
        if a == b:
            raise math_error(ArithmeticErrorKind.GCD_OVERFLOW_32, x, y)
        a, b = b % a, a
        if a == 0:
            if b > INT32_MAX:
                raise math_error(ArithmeticErrorKind.GCD_OVERFLOW_32, x, y)
            return b
        # теперь a и b помещаются в int
        a, b = b % a, a

    return _gcd_positive(a, b)


def _gcd_positive(a: int, b: int) -> int:
    """
    Binary gcd для неотрицательных значений (предусловие не проверяется).

    gcd(a, 0) = a, gcd(0, b) = b.
    """
    if a == 0:
        return b
    if b == 0:
        return a

    # Делаем a и b нечётными, запоминая общую степень двойки
    a_twos = trailing_zeros(a)
    a >>= a_twos
    b_twos = trailing_zeros(b)
    b >>= b_twos
    shift = min(a_twos, b_twos)

    # a: модуль разности, b: минимум текущих значений
    while a != b:
        delta = a - b
        b = min(a, b)
        a = abs(delta)
        # b гарантированно нечётное
        a >>= trailing_zeros(a)

    return a << shift


def gcd_long(x: int, y: int) -> int:
    """
    НОД абсолютных значений двух 64-bit long.

    Оба рабочих значения держатся отрицательными на протяжении всего
    алгоритма: отрицательный диапазон доходит до -2^63, положительный
    только до 2^63 - 1.

    Args:
        x: Число
        y: Число

    Returns:
        gcd(|x|, |y|), никогда не отрицательный

    Raises:
        MathError: GCD_OVERFLOW_64 если результат равен 2^63
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT64)

    u = x
    v = y
    if u == 0 or v == 0:
        if u == INT64_MIN or v == INT64_MIN:
            raise math_error(ArithmeticErrorKind.GCD_OVERFLOW_64, x, y)
        return abs(u) + abs(v)

    if u > 0:
        u = -u
    if v > 0:
        v = -v

    # B1. Общая степень двойки
    k = 0
    while (u & 1) == 0 and (v & 1) == 0 and k < 63:
        u //= 2
        v //= 2
        k += 1
    if k == 63:
        raise math_error(ArithmeticErrorKind.GCD_OVERFLOW_64, x, y)

    # B2. Хотя бы одно из u, v нечётное.
    # t < 0: u нечётное, t заменяет v; t > 0: u чётное, t заменяет u
    t = v if (u & 1) == 1 else -(u // 2)
    while True:
        # B3/B4. Выбрасываем двойки из t
        while (t & 1) == 0:
            t //= 2
        # B5. Заменяем max(|u|, |v|)
        if t > 0:
            u = -t
        else:
            v = t
        # B6. u и v нечётные, разность чётная
        t = (v - u) // 2
        if t == 0:
            break

    return -u * (1 << k)


# =============================================================================
# LCM
# =============================================================================


def lcm_int(x: int, y: int) -> int:
    """
    НОК абсолютных значений двух 32-bit int: |(x / gcd(x, y)) * y|.

    Raises:
        MathError: LCM_OVERFLOW_32 если результат равен 2^31;
            MULTIPLICATION_OVERFLOW_32 если не помещается промежуточное
            произведение; GCD_OVERFLOW_32 для lcm(INT32_MIN, INT32_MIN)

    Examples:
        >>> lcm_int(30, 50)
        150
    """
    validate_int(x, "x", INT32)
    validate_int(y, "y", INT32)

    if x == 0 or y == 0:
        return 0

    product = mul_and_check_int(trunc_div(x, gcd_int(x, y)), y)
    if product == INT32_MIN:
        raise math_error(ArithmeticErrorKind.LCM_OVERFLOW_32, x, y)
    return abs(product)


def lcm_long(x: int, y: int) -> int:
    """
    НОК абсолютных значений двух 64-bit long: |(x / gcd(x, y)) * y|.

    Raises:
        MathError: LCM_OVERFLOW_64 если результат равен 2^63;
            MULTIPLICATION_OVERFLOW_64 если не помещается промежуточное
            произведение; GCD_OVERFLOW_64 для lcm(INT64_MIN, INT64_MIN)
    """
    validate_int(x, "x", INT64)
    validate_int(y, "y", INT64)

    if x == 0 or y == 0:
        return 0

    product = mul_and_check_long(trunc_div(x, gcd_long(x, y)), y)
    if product == INT64_MIN:
        raise math_error(ArithmeticErrorKind.LCM_OVERFLOW_64, x, y)
    return abs(product)
