"""
Тесты для Limbs — представление magnitude и эмуляция машинного слова

Проверяемые инварианты:
1. overflowing_add / overflowing_sub работают по модулю LIMB_BASE
2. trim оставляет единственный нулевой limb, пустой вход — InvariantViolation
3. Сдвиги на целые limb'ы не порождают неканоничные нули
4. compare игнорирует ведущие нули
"""

import pytest

from rfm.core.math.limbs import (
    HALF_LIMB_BITS,
    HALF_LIMB_MASK,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MAX,
    InvariantViolation,
    compare,
    drop_low,
    is_one,
    is_zero,
    overflowing_add,
    overflowing_sub,
    shift_up,
    split_half,
    trim,
    validate_limbs,
    zero_extend,
)


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestConstants:
    """Согласованность констант limb-представления."""

    def test_limb_base(self):
        assert LIMB_BASE == 2**LIMB_BITS
        assert LIMB_MAX == LIMB_BASE - 1

    def test_half_limb(self):
        """Произведение двух половин помещается в limb."""
        assert HALF_LIMB_BITS * 2 == LIMB_BITS
        assert HALF_LIMB_MASK * HALF_LIMB_MASK <= LIMB_MAX


# =============================================================================
# ТЕСТЫ: Машинное слово
# =============================================================================


class TestOverflowingArithmetic:
    """Тесты overflowing_add / overflowing_sub."""

    def test_add_without_overflow(self):
        assert overflowing_add(2, 3) == (5, False)
        assert overflowing_add(0, LIMB_MAX) == (LIMB_MAX, False)

    def test_add_wraps(self):
        assert overflowing_add(LIMB_MAX, 1) == (0, True)
        assert overflowing_add(LIMB_MAX, LIMB_MAX) == (LIMB_MAX - 1, True)

    def test_sub_without_borrow(self):
        assert overflowing_sub(5, 3) == (2, False)
        assert overflowing_sub(7, 7) == (0, False)

    def test_sub_wraps(self):
        assert overflowing_sub(0, 1) == (LIMB_MAX, True)
        assert overflowing_sub(1, LIMB_MAX) == (2, True)

    def test_split_half(self):
        low, high = split_half(LIMB_MAX)
        assert low == HALF_LIMB_MASK
        assert high == HALF_LIMB_MASK
        assert split_half(1 << HALF_LIMB_BITS) == (0, 1)


# =============================================================================
# ТЕСТЫ: Нормализация
# =============================================================================


class TestNormalization:
    """Тесты validate_limbs, trim, zero_extend, предикатов."""

    def test_validate_accepts_range(self):
        validate_limbs((0, LIMB_MAX, 1))

    def test_validate_rejects_empty(self):
        with pytest.raises(ValueError, match="at least one limb"):
            validate_limbs(())

    def test_validate_rejects_out_of_range(self):
        with pytest.raises(ValueError, match=r"limbs\[1\]"):
            validate_limbs((0, LIMB_BASE))
        with pytest.raises(ValueError):
            validate_limbs((-1,))

    def test_trim_removes_leading_zeros(self):
        assert trim((5, 0, 0)) == (5,)
        assert trim((0, 7, 0)) == (0, 7)

    def test_trim_keeps_single_zero(self):
        assert trim((0, 0, 0)) == (0,)
        assert trim((0,)) == (0,)

    def test_trim_empty_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            trim(())

    def test_zero_extend(self):
        assert zero_extend((1,), 3) == (1, 0, 0)
        assert zero_extend((1, 2), 1) == (1, 2)

    def test_predicates(self):
        assert is_zero((0, 0))
        assert not is_zero((0, 1))
        assert is_one((1, 0, 0))
        assert not is_one((1, 1))
        assert not is_one(())


# =============================================================================
# ТЕСТЫ: Сдвиги
# =============================================================================


class TestShifts:
    """Тесты shift_up / drop_low."""

    def test_shift_up(self):
        assert shift_up((3,), 2) == (0, 0, 3)
        assert shift_up((3,), 0) == (3,)

    def test_shift_up_zero_stays_canonical(self):
        assert shift_up((0,), 5) == (0,)

    def test_shift_up_negative_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            shift_up((1,), -1)

    def test_drop_low(self):
        assert drop_low((1, 2, 3), 1) == (2, 3)
        assert drop_low((1, 2, 0), 1) == (2,)

    def test_drop_low_everything(self):
        assert drop_low((1, 2), 2) == (0,)
        assert drop_low((1, 2), 10) == (0,)

    def test_drop_low_negative_count(self):
        with pytest.raises(ValueError):
            drop_low((1,), -2)


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestCompare:
    """Тесты compare."""

    def test_by_length(self):
        assert compare((0, 1), (LIMB_MAX,)) == 1
        assert compare((LIMB_MAX,), (0, 1)) == -1

    def test_lexicographic_from_top(self):
        assert compare((9, 1), (0, 2)) == -1
        assert compare((0, 2), (9, 1)) == 1

    def test_equal_with_leading_zeros(self):
        assert compare((5, 0, 0), (5,)) == 0
        assert compare((0,), (0, 0)) == 0
