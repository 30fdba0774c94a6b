"""
Integer — знаковое целое произвольной точности

Immutable Pydantic модель (magnitude, sign). Операторы маршрутизируются
в Sign algebra и Magnitude Kernel; деление — в reciprocal engine.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. limbs в канонической форме (без ведущих нулевых limb'ов)
2. limbs == (0,) ⇔ sign == Sign.ZERO (нарушение → InvariantViolation)
3. Все операции возвращают новый экземпляр, операнды не изменяются

Деление (// и %) усекает к нулю, как decimal.Decimal:
    Integer(-7) // Integer(2) == -3,  Integer(-7) % Integer(2) == -1
"""

from typing import Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from rfm.core.domain.sign import DivisionByZero, Sign
from rfm.core.math import magnitude as kernel
from rfm.core.math.limbs import (
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    InvariantViolation,
    trim,
    validate_limbs,
)
from rfm.core.math.reciprocal import divide_magnitudes


# =============================================================================
# INTEGER MODEL
# =============================================================================


class Integer(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): все арифметические операции создают
    новый экземпляр. Для построения из произвольной последовательности
    limb'ов используйте Integer.from_limbs — он нормализует magnitude и
    канонизирует знак нуля.
    """

    limbs: tuple[int, ...] = Field(
        ..., min_length=1, description="Модуль числа, least-significant limb first"
    )
    sign: Sign = Field(..., description="Знак числа (NEGATIVE/ZERO/POSITIVE)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_canonical_limbs(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Диапазон limb'ов и отсутствие ведущих нулевых limb'ов."""
        validate_limbs(v)
        if len(v) > 1 and v[-1] == 0:
            raise ValueError(f"limbs must be canonical (no leading zero limbs), got {v}")
        return v

    @model_validator(mode="after")
    def validate_sign_matches_magnitude(self) -> "Integer":
        """
        Проверка согласованности знака и модуля.

        Несогласованная пара означает дефект вызывающего kernel-кода,
        поэтому возбуждается InvariantViolation, а не ValidationError.
        """
        magnitude_is_zero = self.limbs == ZERO_MAGNITUDE
        if magnitude_is_zero and self.sign is not Sign.ZERO:
            raise InvariantViolation(f"Zero magnitude paired with {self.sign.value} sign")
        if not magnitude_is_zero and self.sign is Sign.ZERO:
            raise InvariantViolation(f"Non-zero magnitude {self.limbs} paired with ZERO sign")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_limbs(cls, limbs: Sequence[int], sign: Sign) -> "Integer":
        """
        Создание из последовательности limb'ов и знака.

        Нулевой magnitude канонизируется в Sign.ZERO независимо от
        переданного знака. Ненулевой magnitude со знаком ZERO — нарушение
        инварианта.

        Args:
            limbs: Модуль (least-significant first), ведущие нули допустимы
            sign: Знак

        Raises:
            ValueError: Пустая последовательность или limb вне диапазона
            InvariantViolation: Ненулевой magnitude со знаком ZERO
        """
        validate_limbs(limbs)
        magnitude = trim(limbs)

        if magnitude == ZERO_MAGNITUDE:
            return cls(limbs=ZERO_MAGNITUDE, sign=Sign.ZERO)

        if sign is Sign.ZERO:
            raise InvariantViolation(f"Non-zero magnitude {magnitude} paired with ZERO sign")

        return cls(limbs=magnitude, sign=sign)

    @classmethod
    def zero(cls) -> "Integer":
        """Аддитивная единица (0)."""
        return cls(limbs=ZERO_MAGNITUDE, sign=Sign.ZERO)

    @classmethod
    def one(cls) -> "Integer":
        """Мультипликативная единица (1)."""
        return cls(limbs=ONE_MAGNITUDE, sign=Sign.POSITIVE)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.sign is Sign.ZERO

    def is_even(self) -> bool:
        return self.limbs[0] & 1 == 0

    def is_odd(self) -> bool:
        return self.limbs[0] & 1 == 1

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Integer":
        return Integer(limbs=self.limbs, sign=-self.sign)

    def absolute(self) -> "Integer":
        if self.sign is Sign.NEGATIVE:
            return Integer(limbs=self.limbs, sign=Sign.POSITIVE)
        return self

    def add(self, other: "Integer") -> "Integer":
        """
        Сложение.

        - Один из операндов ноль → другой операнд без изменений
        - Одинаковые знаки → сложение модулей, знак сохраняется
        - Разные знаки → |положительный| - |отрицательный|,
          знак результата по флагу отрицательности вычитания
        """
        if self.sign is Sign.ZERO:
            return other
        if other.sign is Sign.ZERO:
            return self

        if self.sign is other.sign:
            return Integer.from_limbs(kernel.add(self.limbs, other.limbs), self.sign)

        if self.sign is Sign.POSITIVE:
            positive, negative = self, other
        else:
            positive, negative = other, self

        result = kernel.subtract(positive.limbs, negative.limbs)
        return Integer.from_limbs(result.magnitude, Sign.from_negative_flag(result.is_negative))

    def subtract(self, other: "Integer") -> "Integer":
        return self.add(other.negate())

    def multiply(self, other: "Integer") -> "Integer":
        """Умножение: знак по таблице Sign, ноль не доходит до kernel."""
        sign = self.sign * other.sign
        if sign is Sign.ZERO:
            return Integer.zero()
        return Integer.from_limbs(kernel.multiply(self.limbs, other.limbs), sign)

    def divide(self, other: "Integer") -> "Integer":
        """
        Частное с усечением к нулю.

        Raises:
            DivisionByZero: Если делитель равен нулю (до запуска reciprocal engine)

        Examples:
            >>> from rfm.core.domain.primitives import from_i64
            >>> from_i64(20).divide(from_i64(7)) == from_i64(2)
            True
        """
        if other.sign is Sign.ZERO:
            raise DivisionByZero("Integer division by zero")

        quotient_sign = self.sign / other.sign
        if quotient_sign is Sign.ZERO:
            return Integer.zero()

        return Integer.from_limbs(divide_magnitudes(self.limbs, other.limbs), quotient_sign)

    def remainder(self, other: "Integer") -> "Integer":
        """Остаток lhs - divide(lhs, rhs) · rhs (знак следует делимому)."""
        return self.subtract(self.divide(other).multiply(other))

    def div_rem(self, other: "Integer") -> tuple["Integer", "Integer"]:
        """Частное и остаток за одно деление."""
        quotient = self.divide(other)
        return quotient, self.subtract(quotient.multiply(other))

    def compare(self, other: "Integer") -> int:
        """
        Сравнение через знак разности.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        return self.subtract(other).sign.to_int()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Integer":
        if not isinstance(other, Integer):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Integer":
        if not isinstance(other, Integer):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Integer":
        if not isinstance(other, Integer):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: object) -> "Integer":
        if not isinstance(other, Integer):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: object) -> "Integer":
        if not isinstance(other, Integer):
            return NotImplemented
        return self.remainder(other)

    def __divmod__(self, other: object) -> tuple["Integer", "Integer"]:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.div_rem(other)

    def __neg__(self) -> "Integer":
        return self.negate()

    def __abs__(self) -> "Integer":
        return self.absolute()

    def __bool__(self) -> bool:
        return self.sign is not Sign.ZERO

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.limbs == other.limbs and self.sign is other.sign

    def __hash__(self) -> int:
        return hash((self.limbs, self.sign))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.compare(other) >= 0
