"""
Reference oracles для тестов

Эталонные реализации на встроенном int: конверсия magnitude ↔ int,
наивное умножение O(n²) и генерация случайных magnitudes.
"""

import random

from rfm.core.domain.integer import Integer
from rfm.core.domain.sign import Sign
from rfm.core.math.limbs import LIMB_BITS, LIMB_MAX, Magnitude, trim


def to_python_int(limbs) -> int:
    """Magnitude → int."""
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | limb
    return value


def from_python_int(value: int) -> Magnitude:
    """Неотрицательный int → каноническая magnitude."""
    if value < 0:
        raise ValueError("value must be non-negative")
    limbs = [value & LIMB_MAX]
    value >>= LIMB_BITS
    while value:
        limbs.append(value & LIMB_MAX)
        value >>= LIMB_BITS
    return tuple(limbs)


def integer_from_python(value: int) -> Integer:
    """int → Integer без ограничения ширины."""
    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return Integer.from_limbs(from_python_int(abs(value)), sign)


def integer_to_python(value: Integer) -> int:
    """Integer → int."""
    return value.sign.to_int() * to_python_int(value.limbs)


def schoolbook_multiply(lhs, rhs) -> Magnitude:
    """Умножение столбиком O(n²) с переносом в каждой позиции."""
    result = [0] * (len(lhs) + len(rhs))
    for i, lhs_limb in enumerate(lhs):
        carry = 0
        for j, rhs_limb in enumerate(rhs):
            total = result[i + j] + lhs_limb * rhs_limb + carry
            result[i + j] = total & LIMB_MAX
            carry = total >> LIMB_BITS
        position = i + len(rhs)
        while carry:
            total = result[position] + carry
            result[position] = total & LIMB_MAX
            carry = total >> LIMB_BITS
            position += 1
    return trim(result)


def twos_complement(limbs) -> tuple[int, ...]:
    """(LIMB_BASE^n - value) mod LIMB_BASE^n той же длины n."""
    size = len(limbs)
    modulus = 1 << (LIMB_BITS * size)
    value = (modulus - to_python_int(limbs)) % modulus
    return tuple((value >> (LIMB_BITS * i)) & LIMB_MAX for i in range(size))


def random_magnitude(rng: random.Random, max_limbs: int, min_limbs: int = 1) -> Magnitude:
    """Случайная каноническая magnitude; старший limb смещён к границам диапазона."""
    size = rng.randint(min_limbs, max_limbs)
    limbs = [rng.choice((0, 1, LIMB_MAX, rng.getrandbits(LIMB_BITS))) for _ in range(size)]
    return trim(limbs)
