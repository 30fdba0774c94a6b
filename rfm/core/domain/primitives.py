"""
Primitives — конверсия fixed-width примитивов в Integer

Единственный допустимый способ построить Integer из машинного целого:
значение проверяется на диапазон своей ширины и раскладывается на limb'ы,
после чего Integer строится через конструктор (limbs, sign).
"""

from typing import Final

from rfm.core.domain.integer import Integer
from rfm.core.domain.sign import Sign
from rfm.core.math.limbs import LIMB_BITS, LIMB_MAX


# =============================================================================
# ДОПУСТИМЫЕ ШИРИНЫ
# =============================================================================

PRIMITIVE_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def _validate_width(bits: int) -> None:
    if bits not in PRIMITIVE_WIDTHS:
        raise ValueError(f"bits must be one of {PRIMITIVE_WIDTHS}, got {bits}")


def _split_limbs(value: int) -> list[int]:
    """Разложение неотрицательного значения на limb'ы (least-significant first)."""
    limbs = [value & LIMB_MAX]
    value >>= LIMB_BITS
    while value:
        limbs.append(value & LIMB_MAX)
        value >>= LIMB_BITS
    return limbs


def from_unsigned(value: int, bits: int = 64) -> Integer:
    """
    Конверсия беззнакового примитива шириной bits.

    Args:
        value: Значение в [0, 2^bits - 1]
        bits: Ширина примитива (8, 16, 32, 64, 128)

    Raises:
        ValueError: Если значение вне диапазона или ширина не поддерживается

    Examples:
        >>> from_unsigned(2**64, bits=128).limbs
        (0, 1)
    """
    _validate_width(bits)
    if value < 0 or value > (1 << bits) - 1:
        raise ValueError(f"value {value} out of range for u{bits}")
    return Integer.from_limbs(_split_limbs(value), Sign.POSITIVE)


def from_signed(value: int, bits: int = 64) -> Integer:
    """
    Конверсия знакового примитива шириной bits.

    Args:
        value: Значение в [-2^(bits-1), 2^(bits-1) - 1]
        bits: Ширина примитива (8, 16, 32, 64, 128)

    Raises:
        ValueError: Если значение вне диапазона или ширина не поддерживается

    Examples:
        >>> from_signed(-5).sign
        <Sign.NEGATIVE: 'NEGATIVE'>
    """
    _validate_width(bits)
    bound = 1 << (bits - 1)
    if value < -bound or value > bound - 1:
        raise ValueError(f"value {value} out of range for i{bits}")
    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return Integer.from_limbs(_split_limbs(abs(value)), sign)


# =============================================================================
# FIXED-WIDTH ВАРИАНТЫ
# =============================================================================


def from_i8(value: int) -> Integer:
    return from_signed(value, 8)


def from_i16(value: int) -> Integer:
    return from_signed(value, 16)


def from_i32(value: int) -> Integer:
    return from_signed(value, 32)


def from_i64(value: int) -> Integer:
    return from_signed(value, 64)


def from_i128(value: int) -> Integer:
    return from_signed(value, 128)


def from_u8(value: int) -> Integer:
    return from_unsigned(value, 8)


def from_u16(value: int) -> Integer:
    return from_unsigned(value, 16)


def from_u32(value: int) -> Integer:
    return from_unsigned(value, 32)


def from_u64(value: int) -> Integer:
    return from_unsigned(value, 64)


def from_u128(value: int) -> Integer:
    return from_unsigned(value, 128)
