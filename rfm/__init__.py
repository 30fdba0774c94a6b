"""
rfm — целые и рациональные числа произвольной точности.

Публичный API:
    Integer, Rational, Sign — значения
    from_i8 … from_u128 — конверсия машинных целых
    DivisionByZero, InvariantViolation — ошибки
    gcd, power, reduce — теоретико-числовые функции
"""

import logging

from rfm.algorithms import gcd, power, reduce
from rfm.core.domain import (
    DivisionByZero,
    Integer,
    Rational,
    Sign,
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
from rfm.core.math import InvariantViolation, ReciprocalConfig

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Integer",
    "Rational",
    "Sign",
    "DivisionByZero",
    "InvariantViolation",
    "ReciprocalConfig",
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
    "gcd",
    "power",
    "reduce",
]
