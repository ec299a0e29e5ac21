"""
Общие fixtures: наборы граничных значений для grid-тестов.

Значения у границ диапазона, около нуля, их отрицания (MIN вместо -0)
и псевдослучайные значения с фиксированным seed.
"""

import random

import pytest

from checked_arith.core.math.integer_bounds import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

_SEED = 20240611
_GRID_SIZE = 100


@pytest.fixture
def int_special_cases() -> list[int]:
    """Граничные 32-bit значения."""
    ints = [INT32_MAX, INT32_MAX - 1, 100, 101, 102, 300, 567]
    ints.extend(range(20))
    ints.extend([-v if v > 0 else INT32_MIN for v in reversed(ints)])

    rng = random.Random(_SEED)
    while len(ints) < _GRID_SIZE:
        ints.append(rng.randint(INT32_MIN, INT32_MAX))
    return ints


@pytest.fixture
def long_special_cases() -> list[int]:
    """Граничные 64-bit значения."""
    longs = [
        INT64_MAX,
        INT64_MAX - 1,
        INT32_MAX + 1,
        INT32_MAX,
        INT32_MAX - 1,
        100,
        101,
        102,
        300,
        567,
    ]
    longs.extend(range(20))
    longs.extend([-v if v > 0 else INT64_MIN for v in reversed(longs)])

    rng = random.Random(_SEED)
    while len(longs) < _GRID_SIZE:
        longs.append(rng.randint(INT64_MIN, INT64_MAX))
    return longs
