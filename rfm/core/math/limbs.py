"""
Limbs — базовые примитивы limb-представления

Magnitude хранится как tuple limb'ов (least-significant first). Каждый limb —
беззнаковое машинное слово шириной LIMB_BITS, эмулируемое Python int.

Модуль содержит:
- Константы limb-представления
- Эмуляцию overflowing_add / overflowing_sub машинного слова
- Нормализацию (trim, zero-extend) и сдвиги на целые limb'ы
- Сравнение magnitudes

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb в диапазоне [0, LIMB_MAX]
2. Каноническая форма не содержит ведущих нулевых limb'ов (кроме (0,))
3. Пустая последовательность limb'ов никогда не является magnitude
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ LIMB-ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина одного limb в битах (основание системы счисления 2^LIMB_BITS)
LIMB_BITS: Final[int] = 64

LIMB_BASE: Final[int] = 1 << LIMB_BITS
LIMB_MAX: Final[int] = LIMB_BASE - 1

# Половина limb'а: произведение двух half-limb значений всегда помещается в limb
HALF_LIMB_BITS: Final[int] = LIMB_BITS // 2
HALF_LIMB_MASK: Final[int] = (1 << HALF_LIMB_BITS) - 1

# Порог округления guard limb (половина диапазона limb'а)
LIMB_HALF_RANGE: Final[int] = 1 << (LIMB_BITS - 1)

Magnitude = tuple[int, ...]

ZERO_MAGNITUDE: Final[Magnitude] = (0,)
ONE_MAGNITUDE: Final[Magnitude] = (1,)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvariantViolation(Exception):
    """
    Нарушение внутреннего инварианта arithmetic kernel.

    Означает дефект реализации, а не ошибку вызывающего кода:
    - нулевой magnitude с ненулевым знаком (или наоборот)
    - carry/borrow вне {0, 1}
    - пустой operand или пустая половина при split
    - reciprocal estimate вышел за 1/divisor или не сошёлся

    Внутри библиотеки никогда не перехватывается.
    """

    pass


# =============================================================================
# МАШИННОЕ СЛОВО
# =============================================================================


def overflowing_add(lhs: int, rhs: int) -> tuple[int, bool]:
    """
    Сложение двух limb'ов с переполнением (wrap-around).

    Returns:
        (сумма по модулю LIMB_BASE, флаг переполнения)

    Examples:
        >>> overflowing_add(LIMB_MAX, 1)
        (0, True)
        >>> overflowing_add(2, 3)
        (5, False)
    """
    total = lhs + rhs
    if total > LIMB_MAX:
        return total - LIMB_BASE, True
    return total, False


def overflowing_sub(lhs: int, rhs: int) -> tuple[int, bool]:
    """
    Вычитание limb'ов с заёмом (wrap-around).

    Returns:
        (разность по модулю LIMB_BASE, флаг заёма)

    Examples:
        >>> overflowing_sub(0, 1) == (LIMB_MAX, True)
        True
    """
    difference = lhs - rhs
    if difference < 0:
        return difference + LIMB_BASE, True
    return difference, False


def split_half(limb: int) -> tuple[int, int]:
    """Разбиение limb'а на (low, high) половины ширины HALF_LIMB_BITS."""
    return limb & HALF_LIMB_MASK, limb >> HALF_LIMB_BITS


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def validate_limbs(limbs: Sequence[int], name: str = "limbs") -> None:
    """
    Валидация последовательности limb'ов, пришедшей от вызывающего кода.

    Raises:
        ValueError: Если последовательность пуста или limb вне [0, LIMB_MAX]
    """
    if len(limbs) == 0:
        raise ValueError(f"{name} must contain at least one limb")

    for index, limb in enumerate(limbs):
        if limb < 0 or limb > LIMB_MAX:
            raise ValueError(
                f"{name}[{index}] must be in [0, {LIMB_MAX}], got {limb}"
            )


def trim(limbs: Sequence[int]) -> Magnitude:
    """
    Удаление ведущих (старших) нулевых limb'ов.

    Единственный нулевой limb сохраняется: trim((0, 0, 0)) == (0,).

    Raises:
        InvariantViolation: Если последовательность пуста
    """
    if len(limbs) == 0:
        raise InvariantViolation("Cannot trim an empty limb sequence")

    end = len(limbs)
    while end > 1 and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


def zero_extend(limbs: Sequence[int], size: int) -> Magnitude:
    """Дополнение старшими нулевыми limb'ами до длины size."""
    if len(limbs) >= size:
        return tuple(limbs)
    return tuple(limbs) + (0,) * (size - len(limbs))


def is_zero(limbs: Sequence[int]) -> bool:
    """True если все limb'ы нулевые (в том числе для неканоничной формы)."""
    return all(limb == 0 for limb in limbs)


def is_one(limbs: Sequence[int]) -> bool:
    """True если magnitude равен единице (ведущие нули допускаются)."""
    return len(limbs) > 0 and limbs[0] == 1 and is_zero(limbs[1:])


# =============================================================================
# СДВИГИ НА ЦЕЛЫЕ LIMB'Ы
# =============================================================================


def shift_up(limbs: Sequence[int], count: int) -> Magnitude:
    """
    Умножение на LIMB_BASE^count (добавление count младших нулевых limb'ов).

    Нулевой magnitude не сдвигается, чтобы не порождать неканоничные нули.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if is_zero(limbs):
        return ZERO_MAGNITUDE
    return (0,) * count + tuple(limbs)


def drop_low(limbs: Sequence[int], count: int) -> Magnitude:
    """
    Отбрасывание count младших limb'ов (floor-деление на LIMB_BASE^count).

    Если отбрасываются все limb'ы, результат — канонический ноль.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count >= len(limbs):
        return ZERO_MAGNITUDE
    return trim(limbs[count:])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Сравнение двух magnitudes.

    Операнды приводятся к канонической форме, затем сравниваются по длине
    и лексикографически от старшего limb'а к младшему.

    Returns:
        -1 если lhs < rhs
         0 если lhs == rhs
        +1 если lhs > rhs

    Examples:
        >>> compare((0, 1), (LIMB_MAX,))
        1
        >>> compare((5, 0, 0), (5,))
        0
    """
    lhs_trimmed = trim(lhs)
    rhs_trimmed = trim(rhs)

    if len(lhs_trimmed) != len(rhs_trimmed):
        return -1 if len(lhs_trimmed) < len(rhs_trimmed) else 1

    for index in range(len(lhs_trimmed) - 1, -1, -1):
        if lhs_trimmed[index] != rhs_trimmed[index]:
            return -1 if lhs_trimmed[index] < rhs_trimmed[index] else 1

    return 0
