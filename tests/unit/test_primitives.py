"""
Тесты для конверсии fixed-width примитивов в Integer
"""

import pytest

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
from rfm.core.domain.sign import Sign
from rfm.core.math.limbs import LIMB_MAX

SIGNED = [(from_i8, 8), (from_i16, 16), (from_i32, 32), (from_i64, 64), (from_i128, 128)]
UNSIGNED = [(from_u8, 8), (from_u16, 16), (from_u32, 32), (from_u64, 64), (from_u128, 128)]


class TestSignedConversion:
    """Тесты from_signed и from_iN."""

    @pytest.mark.parametrize("convert,bits", SIGNED)
    def test_bounds_accepted(self, convert, bits):
        low = convert(-(1 << (bits - 1)))
        high = convert((1 << (bits - 1)) - 1)
        assert low.sign is Sign.NEGATIVE
        assert high.sign is Sign.POSITIVE

    @pytest.mark.parametrize("convert,bits", SIGNED)
    def test_out_of_range(self, convert, bits):
        with pytest.raises(ValueError, match=f"i{bits}"):
            convert(1 << (bits - 1))
        with pytest.raises(ValueError):
            convert(-(1 << (bits - 1)) - 1)

    def test_zero(self):
        value = from_i32(0)
        assert value.sign is Sign.ZERO
        assert value.limbs == (0,)

    def test_negative_magnitude(self):
        assert from_i64(-5).limbs == (5,)
        assert from_i64(-(1 << 63)).limbs == (1 << 63,)

    def test_i128_splits_limbs(self):
        value = from_i128(-(1 << 127))
        assert value.limbs == (0, 1 << 63)
        assert value.sign is Sign.NEGATIVE


class TestUnsignedConversion:
    """Тесты from_unsigned и from_uN."""

    @pytest.mark.parametrize("convert,bits", UNSIGNED)
    def test_bounds(self, convert, bits):
        assert convert(0).sign is Sign.ZERO
        assert convert((1 << bits) - 1).sign is Sign.POSITIVE
        with pytest.raises(ValueError, match=f"u{bits}"):
            convert(1 << bits)
        with pytest.raises(ValueError):
            convert(-1)

    def test_u64_max_is_single_limb(self):
        assert from_u64(LIMB_MAX).limbs == (LIMB_MAX,)

    def test_u128_two_limbs(self):
        assert from_u128((1 << 128) - 1).limbs == (LIMB_MAX, LIMB_MAX)
        assert from_unsigned(1 << 64, bits=128).limbs == (0, 1)

    def test_small_widths(self):
        assert from_u8(255).limbs == (255,)
        assert from_u16(65535).limbs == (65535,)
        assert from_u32(7).limbs == (7,)


class TestWidthValidation:
    def test_supported_widths(self):
        assert PRIMITIVE_WIDTHS == (8, 16, 32, 64, 128)

    @pytest.mark.parametrize("bits", [0, 7, 63, 256])
    def test_unsupported_width(self, bits):
        with pytest.raises(ValueError, match="bits"):
            from_signed(1, bits)
        with pytest.raises(ValueError, match="bits"):
            from_unsigned(1, bits)
