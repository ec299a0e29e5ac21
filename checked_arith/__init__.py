"""
checked-arith — точная integer арифметика с проверкой переполнения.

Публичный API: checked_arith.core.math.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
