"""
Integer Bounds — границы fixed-width типов и валидация аргументов

Модуль описывает два числовых домена библиотеки:
- fixed-width signed integers (32-bit int, 64-bit long) в two's complement
- arbitrary-precision integers (встроенный Python int)

Содержит:
- Константы границ INT32/INT64
- IntWidth — конфигурация ширины (bits, min, max, mask)
- Валидацию аргументов (TypeError/ValueError)
- Реинтерпретацию битового паттерна signed <-> unsigned
- Деление с усечением к нулю (семантика fixed-width деления)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. abs(MIN) не представим в той же ширине
2. wrap() всегда возвращает значение в [min_value, max_value]
3. trunc_div усекает к нулю, а не к -inf как //
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ГРАНИЦЫ FIXED-WIDTH ТИПОВ
# =============================================================================

INT32_MIN: Final[int] = -(1 << 31)
INT32_MAX: Final[int] = (1 << 31) - 1

INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1


@dataclass(frozen=True)
class IntWidth:
    """Ширина fixed-width signed integer.

    Все width-generic helpers принимают IntWidth, а не голое число бит.
    """

    name: str
    bits: int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1


INT32: Final[IntWidth] = IntWidth(name="int", bits=32)
INT64: Final[IntWidth] = IntWidth(name="long", bits=64)


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def validate_big_int(value: int, name: str) -> None:
    """
    Валидация, что значение является целым числом (arbitrary precision).

    bool формально является int в Python, но как операнд арифметики
    считается ошибкой вызывающего кода.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_int(value: int, name: str, width: IntWidth) -> None:
    """
    Валидация, что значение представимо в заданной fixed-width.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        width: Целевая ширина (INT32 или INT64)

    Raises:
        TypeError: Если value не int или является bool
        ValueError: Если value вне [width.min_value, width.max_value]

    Examples:
        >>> validate_int(2**31 - 1, "x", INT32)
        >>> validate_int(2**31, "x", INT32)
        Traceback (most recent call last):
            ...
        ValueError: x must be a 32-bit int in [-2147483648, 2147483647], got 2147483648
    """
    validate_big_int(value, name)

    if value < width.min_value or value > width.max_value:
        raise ValueError(
            f"{name} must be a {width.bits}-bit {width.name} in "
            f"[{width.min_value}, {width.max_value}], got {value}"
        )


def is_representable(value: int, width: IntWidth) -> bool:
    """
    Проверка, помещается ли точное значение в fixed-width без переполнения.

    Args:
        value: Точное (arbitrary precision) значение
        width: Целевая ширина

    Returns:
        True если width.min_value <= value <= width.max_value
    """
    return width.min_value <= value <= width.max_value


# =============================================================================
# РЕИНТЕРПРЕТАЦИЯ БИТОВОГО ПАТТЕРНА
# =============================================================================


def wrap(value: int, width: IntWidth) -> int:
    """
    Two's complement wrap: приведение по модулю 2^bits в signed диапазон.

    Эквивалент молчаливого переполнения нативной fixed-width арифметики.
    Используется только внутри алгоритмов, где wrap ожидаем и корректируется.

    Examples:
        >>> wrap(2**31, INT32)
        -2147483648
        >>> wrap(-1 - 2 * (2**31 - 1), INT32)
        1
    """
    value &= width.mask
    if value > width.max_value:
        value -= width.modulus
    return value


def to_unsigned(value: int, width: IntWidth) -> int:
    """
    Signed битовый паттерн → unsigned значение.

    Examples:
        >>> to_unsigned(-1, INT32)
        4294967295
        >>> to_unsigned(5, INT64)
        5
    """
    return value & width.mask


def to_signed(value: int, width: IntWidth) -> int:
    """
    Unsigned значение → signed битовый паттерн той же ширины.

    Raises:
        ValueError: Если value вне [0, 2^bits)
    """
    if value < 0 or value > width.mask:
        raise ValueError(
            f"value must be an unsigned {width.bits}-bit pattern, got {value}"
        )
    return wrap(value, width)


def unsigned_shift_right(value: int, width: IntWidth, count: int = 1) -> int:
    """Логический (unsigned) сдвиг вправо битового паттерна."""
    return (value & width.mask) >> count


def trailing_zeros(value: int) -> int:
    """Количество младших нулевых бит положительного значения."""
    return (value & -value).bit_length() - 1


# =============================================================================
# ДЕЛЕНИЕ С УСЕЧЕНИЕМ К НУЛЮ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python // округляет к -inf, fixed-width деление усекает к нулю.
    Алгоритмы проверки переполнения полагаются именно на усечение.

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q

