"""
Rational — несокращённая дробь из двух Integer

Immutable Pydantic модель (numerator, denominator). Арифметика через
перекрёстное умножение без сокращения: знаменатели растут при каждой
операции. Сокращение — явная операция вызывающего кода
(rfm.algorithms.reduce).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator.sign != Sign.ZERO (иначе DivisionByZero)
2. Равенство — по значению: 1/2 == 2/4 == (-1)/(-2)
3. Rational не hashable: у равных значений множество представлений
"""

from pydantic import BaseModel, Field, model_validator

from rfm.core.domain.integer import Integer
from rfm.core.domain.sign import DivisionByZero, Sign


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Дробь numerator / denominator.

    Знак знаменателя не нормализуется: -1/2 и 1/-2 — разные представления
    одного значения, compare() учитывает ориентацию знаменателя.
    """

    numerator: Integer = Field(..., description="Числитель")
    denominator: Integer = Field(..., description="Знаменатель (ненулевой)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_denominator_nonzero(self) -> "Rational":
        """Запрет нулевого знаменателя."""
        if self.denominator.sign is Sign.ZERO:
            raise DivisionByZero("Rational denominator must be non-zero")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, numerator: Integer, denominator: Integer) -> "Rational":
        """
        Новая дробь numerator / denominator.

        Raises:
            DivisionByZero: Если denominator равен нулю
        """
        return cls(numerator=numerator, denominator=denominator)

    @classmethod
    def from_integer(cls, value: Integer) -> "Rational":
        """Целое как дробь value / 1."""
        return cls(numerator=value, denominator=Integer.one())

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator.sign is Sign.ZERO

    def negate(self) -> "Rational":
        return Rational(numerator=self.numerator.negate(), denominator=self.denominator)

    def add(self, other: "Rational") -> "Rational":
        """(a/b) + (c/d) = (a·d + c·b) / (b·d)"""
        return Rational(
            numerator=self.numerator * other.denominator + other.numerator * self.denominator,
            denominator=self.denominator * other.denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        """(a/b) - (c/d) = (a·d - c·b) / (b·d)"""
        return Rational(
            numerator=self.numerator * other.denominator - other.numerator * self.denominator,
            denominator=self.denominator * other.denominator,
        )

    def multiply(self, other: "Rational") -> "Rational":
        """(a/b) · (c/d) = (a·c) / (b·d)"""
        return Rational(
            numerator=self.numerator * other.numerator,
            denominator=self.denominator * other.denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        """
        (a/b) / (c/d) = (a·d) / (b·c)

        Raises:
            DivisionByZero: Если числитель делителя равен нулю
        """
        if other.numerator.sign is Sign.ZERO:
            raise DivisionByZero("Rational division by zero")
        return Rational(
            numerator=self.numerator * other.denominator,
            denominator=self.denominator * other.numerator,
        )

    def compare(self, other: "Rational") -> int:
        """
        Сравнение несокращённых дробей.

        Знак разности = знак числителя × знак знаменателя (b·d),
        так как знаменатели могут быть отрицательными.

        Returns:
            -1 / 0 / +1
        """
        difference = self.subtract(other)
        return (difference.numerator.sign * difference.denominator.sign).to_int()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) >= 0
