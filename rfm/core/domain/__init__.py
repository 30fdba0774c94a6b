"""
Domain models and value objects.

Contains the signed number types built on the magnitude kernel: Sign, Integer, Rational.
"""

from rfm.core.domain.integer import Integer
from rfm.core.domain.primitives import (
    PRIMITIVE_WIDTHS,
    from_i8,
    from_i16,
    from_i32,
    from_i64,
    from_i128,
    from_signed,
    from_u8,
    from_u16,
    from_u32,
    from_u64,
    from_u128,
    from_unsigned,
)
from rfm.core.domain.rational import Rational
from rfm.core.domain.sign import DivisionByZero, Sign

__all__ = [
    # Sign algebra
    "Sign",
    "DivisionByZero",
    # Integer model
    "Integer",
    # Rational model
    "Rational",
    # Primitive conversions
    "PRIMITIVE_WIDTHS",
    "from_signed",
    "from_unsigned",
    "from_i8",
    "from_i16",
    "from_i32",
    "from_i64",
    "from_i128",
    "from_u8",
    "from_u16",
    "from_u32",
    "from_u64",
    "from_u128",
]
