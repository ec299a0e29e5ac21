"""
Core domain models, arithmetic primitives, and contracts.

This module contains the foundational building blocks: fixed-width checked
arithmetic, the failure model it reports with, and the JSON contract for
serialized failures.
"""
