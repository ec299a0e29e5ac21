"""
Core math modules для checked-arith

Точные integer примитивы с проверкой переполнения для 32-bit, 64-bit
и arbitrary-precision доменов.
"""

# Integer Bounds
from checked_arith.core.math.integer_bounds import (
    # Width constants
    INT32,
    INT32_MAX,
    INT32_MIN,
    INT64,
    INT64_MAX,
    INT64_MIN,
    IntWidth,
    # Validation
    is_representable,
    validate_big_int,
    validate_int,
    # Bit reinterpretation
    to_signed,
    to_unsigned,
    trunc_div,
    wrap,
)

# Errors
from checked_arith.core.math.errors import MathError

# Checked Ops
from checked_arith.core.math.checked_ops import (
    add_and_check_int,
    add_and_check_long,
    mul_and_check_int,
    mul_and_check_long,
    sub_and_check_int,
    sub_and_check_long,
)

# Divisors
from checked_arith.core.math.divisors import gcd_int, gcd_long, lcm_int, lcm_long

# Powers
from checked_arith.core.math.powers import (
    is_power_of_two,
    pow_big,
    pow_big_big,
    pow_big_long,
    pow_int,
    pow_long,
)

# Unsigned Ops
from checked_arith.core.math.unsigned_ops import (
    divide_unsigned_int,
    divide_unsigned_long,
    remainder_unsigned_int,
    remainder_unsigned_long,
)

__all__ = [
    # Integer Bounds: Width constants
    "INT32",
    "INT32_MAX",
    "INT32_MIN",
    "INT64",
    "INT64_MAX",
    "INT64_MIN",
    "IntWidth",
    # Integer Bounds: Validation
    "is_representable",
    "validate_big_int",
    "validate_int",
    # Integer Bounds: Bit reinterpretation
    "to_signed",
    "to_unsigned",
    "trunc_div",
    "wrap",
    # Errors
    "MathError",
    # Checked Ops
    "add_and_check_int",
    "add_and_check_long",
    "mul_and_check_int",
    "mul_and_check_long",
    "sub_and_check_int",
    "sub_and_check_long",
    # Divisors
    "gcd_int",
    "gcd_long",
    "lcm_int",
    "lcm_long",
    # Powers
    "is_power_of_two",
    "pow_big",
    "pow_big_big",
    "pow_big_long",
    "pow_int",
    "pow_long",
    # Unsigned Ops
    "divide_unsigned_int",
    "divide_unsigned_long",
    "remainder_unsigned_int",
    "remainder_unsigned_long",
]
