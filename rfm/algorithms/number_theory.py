"""
Number Theory — gcd, возведение в степень, сокращение дробей

Все функции работают только через публичные операции Integer/Rational
и не обращаются к limb'ам напрямую.
"""

import logging

from rfm.core.domain.integer import Integer
from rfm.core.domain.rational import Rational
from rfm.core.domain.sign import Sign

logger = logging.getLogger(__name__)


def gcd(lhs: Integer, rhs: Integer) -> Integer:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат неотрицателен; gcd(0, 0) = 0.

    Examples:
        >>> from rfm.core.domain.primitives import from_i64
        >>> gcd(from_i64(-12), from_i64(18)) == from_i64(6)
        True
    """
    a = lhs.absolute()
    b = rhs.absolute()
    while not b.is_zero():
        a, b = b, a % b
    return a


def power(base: Integer, exponent: Integer) -> Integer:
    """
    base ** exponent бинарным возведением в степень.

    Args:
        base: Основание
        exponent: Показатель (>= 0)

    Raises:
        ValueError: Если exponent отрицателен

    Note:
        power(0, 0) = 1
    """
    if exponent.sign is Sign.NEGATIVE:
        raise ValueError("exponent must be non-negative")

    two = Integer.from_limbs((2,), Sign.POSITIVE)
    result = Integer.one()
    square = base
    remaining = exponent

    while not remaining.is_zero():
        if remaining.is_odd():
            result = result * square
        remaining, _ = remaining.div_rem(two)
        if not remaining.is_zero():
            square = square * square

    return result


def reduce(value: Rational) -> Rational:
    """
    Сокращение дроби: деление на gcd и положительный знаменатель.

    Ноль приводится к 0/1.

    Examples:
        >>> from rfm.core.domain.primitives import from_i64
        >>> r = reduce(Rational.new(from_i64(4), from_i64(-8)))
        >>> (r.numerator, r.denominator) == (from_i64(-1), from_i64(2))
        True
    """
    if value.is_zero():
        return Rational.from_integer(Integer.zero())

    divisor = gcd(value.numerator, value.denominator)
    if value.denominator.sign is Sign.NEGATIVE:
        divisor = divisor.negate()

    reduced = Rational.new(value.numerator // divisor, value.denominator // divisor)
    logger.debug(
        "Reduced rational by gcd of %d limbs", len(divisor.limbs)
    )
    return reduced
