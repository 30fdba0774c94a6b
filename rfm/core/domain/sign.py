"""
Sign — трёхзначный знак числа

Знак моделируется как enum {NEGATIVE, ZERO, POSITIVE}, а не bool:
"отрицательный ноль" непредставим. Нулевое значение всегда имеет знак ZERO.

Алгебра знаков:
- Отрицание: POSITIVE ↔ NEGATIVE, ZERO неподвижен
- Умножение: стандартная таблица, ZERO поглощает
- Деление: та же таблица, ZERO в делителе → DivisionByZero
"""

from enum import Enum


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление на ноль (ошибка вызывающего кода).

    Проверяется до запуска reciprocal engine: в Integer.divide,
    при создании Rational с нулевым знаменателем и в Rational.divide.
    """

    pass


# =============================================================================
# ENUMS
# =============================================================================


class Sign(Enum):
    """Знак целого числа"""

    NEGATIVE = "NEGATIVE"
    ZERO = "ZERO"
    POSITIVE = "POSITIVE"

    def __neg__(self) -> "Sign":
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        return Sign.ZERO

    def __mul__(self, other: object) -> "Sign":
        if not isinstance(other, Sign):
            return NotImplemented
        if self is Sign.ZERO or other is Sign.ZERO:
            return Sign.ZERO
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE

    def __truediv__(self, other: object) -> "Sign":
        """
        Знак частного.

        Raises:
            DivisionByZero: Если делитель имеет знак ZERO
        """
        if not isinstance(other, Sign):
            return NotImplemented
        if other is Sign.ZERO:
            raise DivisionByZero("Division by a value with ZERO sign")
        return self * other

    def to_int(self) -> int:
        """Знак как -1 / 0 / +1."""
        if self is Sign.NEGATIVE:
            return -1
        if self is Sign.POSITIVE:
            return 1
        return 0

    @classmethod
    def from_negative_flag(cls, is_negative: bool) -> "Sign":
        """Знак ненулевого результата по флагу отрицательности из kernel."""
        return cls.NEGATIVE if is_negative else cls.POSITIVE
