"""
Тесты для Number Theory — gcd, power, reduce
"""

import math
import random

import pytest

from rfm.algorithms.number_theory import gcd, power, reduce
from rfm.core.domain.integer import Integer
from rfm.core.domain.primitives import from_i64
from rfm.core.domain.rational import Rational
from rfm.core.domain.sign import Sign
from tests.oracles import integer_from_python, integer_to_python


# =============================================================================
# ТЕСТЫ: gcd
# =============================================================================


class TestGcd:
    """Тесты алгоритма Евклида."""

    def test_simple(self):
        assert gcd(from_i64(12), from_i64(18)) == from_i64(6)

    def test_signs_ignored(self):
        assert gcd(from_i64(-12), from_i64(18)) == from_i64(6)
        assert gcd(from_i64(-12), from_i64(-18)) == from_i64(6)

    def test_zero_operands(self):
        assert gcd(Integer.zero(), Integer.zero()) == Integer.zero()
        assert gcd(from_i64(-7), Integer.zero()) == from_i64(7)
        assert gcd(Integer.zero(), from_i64(7)) == from_i64(7)

    def test_matches_math_gcd(self):
        rng = random.Random(1101)
        for _ in range(40):
            common = rng.getrandbits(90) + 1
            a = common * rng.getrandbits(150) * rng.choice((-1, 1))
            b = common * rng.getrandbits(120) * rng.choice((-1, 1))
            result = gcd(integer_from_python(a), integer_from_python(b))
            assert integer_to_python(result) == math.gcd(a, b)


# =============================================================================
# ТЕСТЫ: power
# =============================================================================


class TestPower:
    """Тесты бинарного возведения в степень."""

    def test_small_powers(self):
        assert power(from_i64(2), from_i64(10)) == from_i64(1024)
        assert power(from_i64(-3), from_i64(3)) == from_i64(-27)

    def test_zero_exponent(self):
        assert power(from_i64(5), Integer.zero()) == Integer.one()
        assert power(Integer.zero(), Integer.zero()) == Integer.one()

    def test_crosses_limb_boundary(self):
        assert integer_to_python(power(from_i64(2), from_i64(200))) == 2**200

    def test_matches_int_pow(self):
        rng = random.Random(1102)
        for _ in range(20):
            base = rng.randint(-(10**6), 10**6)
            exponent = rng.randint(0, 40)
            result = power(integer_from_python(base), from_i64(exponent))
            assert integer_to_python(result) == base**exponent

    def test_negative_exponent(self):
        with pytest.raises(ValueError, match="non-negative"):
            power(from_i64(2), from_i64(-1))


# =============================================================================
# ТЕСТЫ: reduce
# =============================================================================


class TestReduce:
    """Тесты сокращения дробей."""

    def test_reduces_by_gcd(self):
        value = reduce(Rational.new(from_i64(8), from_i64(16)))
        assert value.numerator == from_i64(1)
        assert value.denominator == from_i64(2)

    def test_denominator_made_positive(self):
        value = reduce(Rational.new(from_i64(4), from_i64(-8)))
        assert value.numerator == from_i64(-1)
        assert value.denominator == from_i64(2)
        assert value.denominator.sign is Sign.POSITIVE

    def test_zero(self):
        value = reduce(Rational.new(Integer.zero(), from_i64(-9)))
        assert value.numerator == Integer.zero()
        assert value.denominator == Integer.one()

    def test_preserves_value(self):
        original = Rational.new(from_i64(1), from_i64(2)) + Rational.new(from_i64(1), from_i64(3))
        reduced = reduce(original * original)
        assert reduced == original * original
        assert reduced.numerator == from_i64(25)
        assert reduced.denominator == from_i64(36)
