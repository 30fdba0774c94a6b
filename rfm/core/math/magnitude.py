"""
Magnitude Kernel — беззнаковая арифметика над последовательностями limb'ов

Модуль реализует арифметику неотрицательных целых произвольной точности:
- Сложение с переносом (carry), O(n)
- Вычитание с заёмом (borrow) и восстановлением знака через дополнение, O(n)
- Умножение одиночных limb'ов через half-limb split
- Рекурсивное умножение Karatsuba, O(n^1.585)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. carry/borrow после каждой позиции только 0 или 1
2. Все возвращаемые magnitudes в канонической форме (trim)
3. Входные последовательности не модифицируются (результат всегда новый tuple)
"""

from typing import NamedTuple, Sequence

from rfm.core.math.limbs import (
    HALF_LIMB_BITS,
    LIMB_MAX,
    ZERO_MAGNITUDE,
    InvariantViolation,
    Magnitude,
    is_one,
    is_zero,
    overflowing_add,
    overflowing_sub,
    shift_up,
    split_half,
    trim,
    zero_extend,
)


# =============================================================================
# RESULT TYPES
# =============================================================================


class SubtractionResult(NamedTuple):
    """Результат вычитания magnitudes: модуль разности и её знак."""

    magnitude: Magnitude  # |lhs - rhs| в канонической форме
    is_negative: bool  # True если lhs < rhs


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add(lhs: Sequence[int], rhs: Sequence[int]) -> Magnitude:
    """
    Сложение magnitudes столбиком.

    В каждой позиции возможны два переполнения: limb + limb и затем + carry.
    Оба события учитываются в исходящем carry.

    Args:
        lhs: Левый операнд (least-significant first)
        rhs: Правый операнд

    Returns:
        Сумма, не более чем на один limb длиннее большего операнда

    Raises:
        InvariantViolation: Если carry вышел за пределы {0, 1}

    Examples:
        >>> add((LIMB_MAX,), (1,))
        (0, 1)
    """
    size = max(len(lhs), len(rhs))
    result: list[int] = []
    carry = 0

    for index in range(size):
        lhs_limb = lhs[index] if index < len(lhs) else 0
        rhs_limb = rhs[index] if index < len(rhs) else 0

        partial, first_overflow = overflowing_add(lhs_limb, rhs_limb)
        limb, second_overflow = overflowing_add(partial, carry)

        carry = int(first_overflow) + int(second_overflow)
        if carry > 1:
            raise InvariantViolation(
                f"Multiple carry at limb {index}: carry={carry}"
            )
        result.append(limb)

    if carry:
        result.append(carry)

    return trim(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def complement_to_magnitude(limbs: Sequence[int]) -> Magnitude:
    """
    Восстановление модуля из дополнительного кода.

    После вычитания с оставшимся заёмом массив содержит LIMB_BASE^n - |d|.
    Младшие нулевые limb'ы не могут породить заём и остаются нулями;
    первый ненулевой limb заменяется на LIMB_MAX - limb + 1,
    все последующие — на LIMB_MAX - limb.

    Функция является собственной обратной для ненулевых входов.
    Длина результата совпадает с длиной входа (без trim).

    Examples:
        >>> complement_to_magnitude((LIMB_MAX,))
        (1,)
        >>> complement_to_magnitude((0, LIMB_MAX))
        (0, 1)
    """
    result: list[int] = []
    need_increment = True

    for limb in limbs:
        if need_increment and limb == 0:
            result.append(0)
        elif need_increment:
            result.append(LIMB_MAX - limb + 1)
            need_increment = False
        else:
            result.append(LIMB_MAX - limb)

    return tuple(result)


def subtract(lhs: Sequence[int], rhs: Sequence[int]) -> SubtractionResult:
    """
    Вычитание magnitudes столбиком с производным знаком.

    Args:
        lhs: Уменьшаемое
        rhs: Вычитаемое

    Returns:
        SubtractionResult(|lhs - rhs|, lhs < rhs)

    Raises:
        InvariantViolation: Если заём после последнего limb'а вне {0, 1}

    Examples:
        >>> subtract((0, 1), (1,)) == ((LIMB_MAX,), False)
        True
        >>> subtract((0,), (1,))
        SubtractionResult(magnitude=(1,), is_negative=True)
    """
    size = max(len(lhs), len(rhs))
    result: list[int] = []
    borrow = 0

    for index in range(size):
        lhs_limb = lhs[index] if index < len(lhs) else 0
        rhs_limb = rhs[index] if index < len(rhs) else 0

        partial, first_borrow = overflowing_sub(lhs_limb, rhs_limb)
        limb, second_borrow = overflowing_sub(partial, borrow)

        borrow = int(first_borrow) + int(second_borrow)
        result.append(limb)

    if borrow == 0:
        return SubtractionResult(trim(result), False)

    if borrow == 1:
        # Массив содержит дополнительный код отрицательной разности
        return SubtractionResult(trim(complement_to_magnitude(result)), True)

    raise InvariantViolation(
        f"Multiple borrow after final limb: borrow={borrow}"
    )


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def _shift_half(value: int) -> Magnitude:
    """value * 2^HALF_LIMB_BITS для value, помещающегося в один limb."""
    low, high = split_half(value)
    return (low << HALF_LIMB_BITS, high)


def multiply_limb(lhs: int, rhs: int) -> Magnitude:
    """
    Умножение двух limb'ов через разбиение на половины.

    Произведение двух half-limb значений не превышает LIMB_MAX, поэтому все
    четыре частичных произведения точно помещаются в limb. Перекрёстные
    произведения сдвигаются на половину limb'а, сборка идёт через add().

    Examples:
        >>> multiply_limb(LIMB_MAX, 2) == (LIMB_MAX - 1, 1)
        True
    """
    lhs_low, lhs_high = split_half(lhs)
    rhs_low, rhs_high = split_half(rhs)

    low = lhs_low * rhs_low
    cross_left = lhs_low * rhs_high
    cross_right = lhs_high * rhs_low
    high = lhs_high * rhs_high

    result = add((low,), _shift_half(cross_left))
    result = add(result, _shift_half(cross_right))
    return add(result, (0, high))


def multiply(lhs: Sequence[int], rhs: Sequence[int]) -> Magnitude:
    """
    Умножение magnitudes алгоритмом Karatsuba.

    Для равных длин > 1 операнды делятся пополам (low, high):
        low_product  = lhs_low × rhs_low
        high_product = lhs_high × rhs_high
        middle       = |lhs_high - lhs_low| × |rhs_low - rhs_high|
        cross        = low_product + high_product ∓ middle
    Вычитание middle выполняется, когда знаки разностей расходятся (XOR).
    Результат: low_product + cross·B^split + high_product·B^(2·split).

    Args:
        lhs: Левый множитель
        rhs: Правый множитель

    Returns:
        Произведение в канонической форме

    Raises:
        InvariantViolation: При пустом операнде или пустой половине split

    Examples:
        >>> multiply((LIMB_MAX,), (2,)) == (LIMB_MAX - 1, 1)
        True
        >>> multiply((0, 1), (1234567,))
        (0, 1234567)
    """
    if len(lhs) == 0 or len(rhs) == 0:
        raise InvariantViolation("Cannot multiply an empty limb sequence")

    if is_zero(lhs) or is_zero(rhs):
        return ZERO_MAGNITUDE

    if is_one(lhs):
        return trim(rhs)

    if is_one(rhs):
        return trim(lhs)

    if len(lhs) != len(rhs):
        size = max(len(lhs), len(rhs))
        return multiply(zero_extend(lhs, size), zero_extend(rhs, size))

    length = len(lhs)
    if length == 1:
        return multiply_limb(lhs[0], rhs[0])

    split = length // 2
    lhs_low, lhs_high = lhs[:split], lhs[split:]
    rhs_low, rhs_high = rhs[:split], rhs[split:]

    if len(lhs_low) == 0 or len(lhs_high) == 0:
        raise InvariantViolation(
            f"Zero-length split: length={length}, split={split}"
        )

    low_product = multiply(lhs_low, rhs_low)
    high_product = multiply(lhs_high, rhs_high)

    lhs_difference = subtract(lhs_high, lhs_low)
    rhs_difference = subtract(rhs_low, rhs_high)
    middle = multiply(lhs_difference.magnitude, rhs_difference.magnitude)

    outer_sum = add(low_product, high_product)
    if lhs_difference.is_negative ^ rhs_difference.is_negative:
        cross_result = subtract(outer_sum, middle)
        if cross_result.is_negative:
            raise InvariantViolation("Negative Karatsuba cross term")
        cross = cross_result.magnitude
    else:
        cross = add(outer_sum, middle)

    result = add(low_product, shift_up(cross, split))
    return add(result, shift_up(high_product, 2 * split))
