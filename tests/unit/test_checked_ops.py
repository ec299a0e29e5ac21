"""
Тесты для модуля Checked Ops

Проверяет:
1. Сложение/вычитание/умножение 32-bit с проверкой переполнения
2. Сложение/вычитание/умножение 64-bit с проверкой переполнения
3. Граничные случаи INT_MIN / INT_MAX
4. Контекст отказа (x, y) и цепочку __cause__
"""

import pytest

from checked_arith.core.domain.failure import ArithmeticErrorKind
from checked_arith.core.math.checked_ops import (
    add_and_check_int,
    add_and_check_long,
    mul_and_check_int,
    mul_and_check_long,
    sub_and_check_int,
    sub_and_check_long,
)
from checked_arith.core.math.errors import MathError
from checked_arith.core.math.integer_bounds import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

# =============================================================================
# 32-BIT
# =============================================================================


class TestAddAndCheckInt:
    """Тесты для add_and_check_int"""

    def test_identity(self) -> None:
        assert add_and_check_int(INT32_MAX, 0) == INT32_MAX
        assert add_and_check_int(INT32_MIN, 0) == INT32_MIN

    def test_positive_overflow(self) -> None:
        """MAX + 1 → ADDITION_OVERFLOW с операндами в контексте"""
        with pytest.raises(MathError) as exc_info:
            add_and_check_int(INT32_MAX, 1)

        assert exc_info.value.kind == ArithmeticErrorKind.ADDITION_OVERFLOW
        assert exc_info.value.context == {"x": INT32_MAX, "y": 1}

    def test_negative_overflow(self) -> None:
        with pytest.raises(MathError) as exc_info:
            add_and_check_int(INT32_MIN, -1)

        assert exc_info.value.kind == ArithmeticErrorKind.ADDITION_OVERFLOW

    def test_min_plus_max(self) -> None:
        assert add_and_check_int(INT32_MIN, INT32_MAX) == -1

    def test_rejects_long_operand(self) -> None:
        """64-bit значение не является допустимым int"""
        with pytest.raises(ValueError):
            add_and_check_int(INT32_MAX + 1, 0)


class TestSubAndCheckInt:
    """Тесты для sub_and_check_int"""

    def test_values(self) -> None:
        assert sub_and_check_int(INT32_MAX, 0) == INT32_MAX
        assert sub_and_check_int(INT32_MIN, -1) == INT32_MIN + 1
        assert sub_and_check_int(INT32_MIN, -INT32_MAX) == -1

    def test_overflow(self) -> None:
        with pytest.raises(MathError) as exc_info:
            sub_and_check_int(INT32_MAX, -1)
        assert exc_info.value.kind == ArithmeticErrorKind.SUBTRACTION_OVERFLOW

        with pytest.raises(MathError):
            sub_and_check_int(INT32_MIN, 1)

    def test_error_message(self) -> None:
        """Сообщение об ошибке непустое и содержит операнды"""
        with pytest.raises(MathError) as exc_info:
            sub_and_check_int(INT32_MAX, -1)

        message = str(exc_info.value)
        assert len(message) > 1
        assert str(INT32_MAX) in message


class TestMulAndCheckInt:
    """Тесты для mul_and_check_int"""

    def test_values(self) -> None:
        assert mul_and_check_int(INT32_MAX, 1) == INT32_MAX
        assert mul_and_check_int(INT32_MIN, 1) == INT32_MIN
        assert mul_and_check_int(-(1 << 30), 2) == INT32_MIN

    @pytest.mark.parametrize(
        "x, y",
        [(INT32_MAX, 2), (INT32_MIN, 2), (INT32_MIN, -1), (1 << 16, 1 << 15)],
    )
    def test_overflow(self, x: int, y: int) -> None:
        with pytest.raises(MathError) as exc_info:
            mul_and_check_int(x, y)

        assert exc_info.value.kind == ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_32
        assert (exc_info.value.x, exc_info.value.y) == (x, y)


# =============================================================================
# 64-BIT
# =============================================================================


class TestAddAndCheckLong:
    """Тесты для add_and_check_long: знаковый анализ wrapped результата"""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (INT64_MAX, 0, INT64_MAX),
            (INT64_MIN, 0, INT64_MIN),
            (0, INT64_MAX, INT64_MAX),
            (0, INT64_MIN, INT64_MIN),
            (-1, 2, 1),
            (2, -1, 1),
            (-2, -1, -3),
            (INT64_MIN + 1, -1, INT64_MIN),
            (INT64_MIN, INT64_MAX, -1),
        ],
    )
    def test_values(self, x: int, y: int, expected: int) -> None:
        assert add_and_check_long(x, y) == expected

    @pytest.mark.parametrize(
        "x, y",
        [
            (INT64_MAX, 1),
            (INT64_MIN, -1),
            (1, INT64_MAX),
            (-1, INT64_MIN),
            (INT64_MAX, INT64_MAX),
            (INT64_MIN, INT64_MIN),
        ],
    )
    def test_overflow(self, x: int, y: int) -> None:
        with pytest.raises(MathError) as exc_info:
            add_and_check_long(x, y)

        assert exc_info.value.kind == ArithmeticErrorKind.ADDITION_OVERFLOW


class TestSubAndCheckLong:
    """Тесты для sub_and_check_long"""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (INT64_MAX, 0, INT64_MAX),
            (INT64_MIN, 0, INT64_MIN),
            (0, INT64_MAX, -INT64_MAX),
            (INT64_MIN, -1, INT64_MIN + 1),
            (-INT64_MAX - 1, -INT64_MAX, -1),
            (-1, -1 - INT64_MAX, INT64_MAX),
        ],
    )
    def test_values(self, x: int, y: int, expected: int) -> None:
        assert sub_and_check_long(x, y) == expected

    def test_min_subtrahend_with_negative_minuend(self) -> None:
        """y == INT64_MIN: x - y представимо при x < 0"""
        assert sub_and_check_long(-1, INT64_MIN) == INT64_MAX
        assert sub_and_check_long(INT64_MIN, INT64_MIN) == 0

    def test_min_subtrahend_with_non_negative_minuend(self) -> None:
        """y == INT64_MIN, x >= 0 → переполнение без __cause__"""
        with pytest.raises(MathError) as exc_info:
            sub_and_check_long(0, INT64_MIN)

        assert exc_info.value.kind == ArithmeticErrorKind.SUBTRACTION_OVERFLOW
        assert exc_info.value.__cause__ is None

    @pytest.mark.parametrize("x, y", [(INT64_MAX, -1), (INT64_MIN, 1)])
    def test_overflow_keeps_addition_cause(self, x: int, y: int) -> None:
        """Переполнение сложения перевыбрасывается как SUBTRACTION_OVERFLOW"""
        with pytest.raises(MathError) as exc_info:
            sub_and_check_long(x, y)

        assert exc_info.value.kind == ArithmeticErrorKind.SUBTRACTION_OVERFLOW
        assert exc_info.value.context == {"x": x, "y": y}

        cause = exc_info.value.__cause__
        assert isinstance(cause, MathError)
        assert cause.kind == ArithmeticErrorKind.ADDITION_OVERFLOW
        assert cause.y == -y


class TestMulAndCheckLong:
    """Тесты для mul_and_check_long: проверка делением до умножения"""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (INT64_MAX, 1, INT64_MAX),
            (INT64_MIN, 1, INT64_MIN),
            (INT64_MAX, 0, 0),
            (INT64_MIN, 0, 0),
            (1, INT64_MAX, INT64_MAX),
            (1, INT64_MIN, INT64_MIN),
            (0, INT64_MAX, 0),
            (0, INT64_MIN, 0),
            (-1, -1, 1),
            (INT64_MIN // 2, 2, INT64_MIN),
            (-3037000499, -3037000499, 9223372030926249001),
        ],
    )
    def test_values(self, x: int, y: int, expected: int) -> None:
        assert mul_and_check_long(x, y) == expected

    @pytest.mark.parametrize(
        "x, y",
        [
            (INT64_MAX, 2),
            (2, INT64_MAX),
            (INT64_MIN, 2),
            (2, INT64_MIN),
            (INT64_MIN, -1),
            (-1, INT64_MIN),
            (-3037000500, -3037000500),
        ],
    )
    def test_overflow(self, x: int, y: int) -> None:
        with pytest.raises(MathError) as exc_info:
            mul_and_check_long(x, y)

        assert exc_info.value.kind == ArithmeticErrorKind.MULTIPLICATION_OVERFLOW_64
        assert exc_info.value.context == {"x": x, "y": y}
