"""
Reciprocal Engine — деление через fixed-point reciprocal (Newton-Raphson)

В kernel нет деления limb на limb. Вместо этого вычисляется приближение 1/b
в fixed-point форме (mantissa, exponent), значение mantissa · LIMB_BASE^exponent,
после чего частное получается умножением и сдвигом.

Алгоритм compute_reciprocal:
    n = len(b), P = precision (по умолчанию n + guard_limbs), s = n + P - 1
    x_0      = seed < 1/b, x_0 · b ≥ 1/2
    x_{k+1}  = floor(x_k · (2·B^s - b·x_k) / B^s)     (Newton для f(x) = 1/x - b)
    стоп, когда x_{k+1} == x_k (fixed point)
    коррекция до точного floor(B^s / b), округление guard limb'ов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Estimate никогда не превышает B^s / b (residual 2·B^s - b·x всегда > 0)
2. Последовательность estimates монотонно не убывает, поэтому fixed point
   достигается за O(log precision) итераций
3. Итоговый exponent ≤ 0
4. Нулевой divisor в engine не попадает (проверяется на уровне Integer)
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional, Sequence

from rfm.core.math.limbs import (
    LIMB_BITS,
    LIMB_HALF_RANGE,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    InvariantViolation,
    Magnitude,
    compare,
    drop_low,
    is_zero,
    shift_up,
    trim,
)
from rfm.core.math.magnitude import add, multiply, subtract

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ReciprocalConfig:
    """Конфигурация reciprocal engine.

    guard_limbs — запас точности под округление (отбрасывается в конце)
    max_iterations — предел итераций Newton; превышение означает дефект kernel
    """

    guard_limbs: int = 1
    max_iterations: int = 256


DEFAULT_RECIPROCAL_CONFIG: Final[ReciprocalConfig] = ReciprocalConfig()


@dataclass(frozen=True)
class Reciprocal:
    """Fixed-point приближение 1/divisor: mantissa · LIMB_BASE^exponent."""

    mantissa: Magnitude
    exponent: int
    precision: int  # рабочая точность (limbs), включая guard
    iterations: int  # итераций Newton до fixed point

    def scaled_one(self) -> Magnitude:
        """Единица в масштабе reciprocal: LIMB_BASE^(-exponent)."""
        return shift_up(ONE_MAGNITUDE, -self.exponent)


# =============================================================================
# NEWTON-RAPHSON
# =============================================================================


def _seed(divisor: Magnitude, working: int) -> Magnitude:
    """
    Начальное приближение 2^(-L) · B^(-(n-1)) в масштабе B^(-s).

    L — битовая длина старшего limb'а divisor, поэтому
    2^(L-1) · B^(n-1) ≤ b < 2^L · B^(n-1) и 1/2 ≤ seed · b < 1.
    При L = LIMB_BITS seed равен B^(-n), т.е. (value=1, exponent=-n).
    """
    leading_bits = divisor[-1].bit_length()
    return shift_up((1 << (LIMB_BITS - leading_bits),), working - 1)


def _newton_iterate(
    divisor: Magnitude,
    working: int,
    scale: int,
    config: ReciprocalConfig,
) -> tuple[Magnitude, int]:
    """Итерации Newton до fixed point. Возвращает (estimate, iterations)."""
    scaled_two = shift_up((2,), scale)
    estimate = _seed(divisor, working)

    for iteration in range(1, config.max_iterations + 1):
        # b · x_k (exponent -s)
        product = multiply(divisor, estimate)

        # 2 - b · x_k (exponent -s)
        residual = subtract(scaled_two, product)
        if residual.is_negative:
            raise InvariantViolation(
                f"Reciprocal estimate overshoot at iteration {iteration}"
            )

        # x_k · (2 - b · x_k): exponent -2s, отбрасываем s младших limb'ов
        refined = drop_low(multiply(residual.magnitude, estimate), scale)

        if compare(refined, estimate) == 0:
            return estimate, iteration

        estimate = refined

    raise InvariantViolation(
        f"Reciprocal did not converge in {config.max_iterations} iterations "
        f"(divisor_limbs={len(divisor)}, precision={working})"
    )


def _correct_estimate(
    divisor: Magnitude,
    estimate: Magnitude,
    scale: int,
) -> tuple[Magnitude, int]:
    """
    Доводка fixed point до точного floor(B^s / b).

    В точке останова B^s/b - x < 2, поэтому требуется не более двух шагов.
    """
    remainder = subtract(shift_up(ONE_MAGNITUDE, scale), multiply(divisor, estimate))
    if remainder.is_negative:
        raise InvariantViolation("Reciprocal estimate exceeds B^s / divisor")

    steps = 0
    current = remainder.magnitude
    while compare(current, divisor) >= 0:
        estimate = add(estimate, ONE_MAGNITUDE)
        current = subtract(current, divisor).magnitude
        steps += 1

    return estimate, steps


def _round_guard(
    estimate: Magnitude,
    scale: int,
    guard_limbs: int,
) -> tuple[Magnitude, int]:
    """
    Округление до ближайшего с отбрасыванием guard limb'ов.

    Если старший отбрасываемый limb ≥ LIMB_BASE / 2, к оставшейся части
    прибавляется единица (перенос распространяется через add).
    """
    rounding_limb = estimate[guard_limbs - 1] if len(estimate) >= guard_limbs else 0
    mantissa = drop_low(estimate, guard_limbs)

    if rounding_limb >= LIMB_HALF_RANGE:
        mantissa = add(mantissa, ONE_MAGNITUDE)

    exponent = -scale + guard_limbs
    if exponent > 0:
        raise InvariantViolation(f"Reciprocal exponent must be <= 0, got {exponent}")

    return mantissa, exponent


def compute_reciprocal(
    divisor: Sequence[int],
    precision: Optional[int] = None,
    config: ReciprocalConfig = DEFAULT_RECIPROCAL_CONFIG,
) -> Reciprocal:
    """
    Fixed-point reciprocal divisor методом Newton-Raphson.

    Args:
        divisor: Ненулевой magnitude
        precision: Рабочая точность в limb'ах, включая guard
            (default: len(divisor) + guard_limbs)
        config: Конфигурация engine

    Returns:
        Reciprocal: mantissa · LIMB_BASE^exponent ≈ 1/divisor,
        |mantissa · divisor - LIMB_BASE^(-exponent)| < divisor

    Raises:
        InvariantViolation: Нулевой divisor, overshoot или отсутствие сходимости
        ValueError: Некорректные precision / guard_limbs

    Examples:
        >>> r = compute_reciprocal((2,))
        >>> r.mantissa == (LIMB_HALF_RANGE,), r.exponent
        (True, -1)
    """
    if config.guard_limbs < 1:
        raise ValueError(f"guard_limbs must be >= 1, got {config.guard_limbs}")

    divisor = trim(divisor)
    if is_zero(divisor):
        raise InvariantViolation("Reciprocal engine received a zero divisor")

    divisor_limbs = len(divisor)
    working = divisor_limbs + config.guard_limbs if precision is None else precision
    if working < config.guard_limbs + 1:
        raise ValueError(
            f"precision must be > guard_limbs ({config.guard_limbs}), got {working}"
        )

    scale = divisor_limbs + working - 1

    estimate, iterations = _newton_iterate(divisor, working, scale, config)
    estimate, corrections = _correct_estimate(divisor, estimate, scale)
    mantissa, exponent = _round_guard(estimate, scale, config.guard_limbs)

    logger.debug(
        "Reciprocal converged: divisor_limbs=%d precision=%d iterations=%d corrections=%d",
        divisor_limbs,
        working,
        iterations,
        corrections,
    )

    return Reciprocal(
        mantissa=mantissa,
        exponent=exponent,
        precision=working,
        iterations=iterations,
    )


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_magnitudes(
    dividend: Sequence[int],
    divisor: Sequence[int],
    config: ReciprocalConfig = DEFAULT_RECIPROCAL_CONFIG,
) -> Magnitude:
    """
    Целая часть dividend / divisor через reciprocal.

    Точность reciprocal растёт с длиной dividend так, чтобы оценка частного
    отличалась от истинной не более чем на единицу; затем частное доводится
    до условия 0 ≤ dividend - q · divisor < divisor.

    Args:
        dividend: Делимое
        divisor: Ненулевой делитель

    Returns:
        floor(dividend / divisor) в канонической форме

    Raises:
        InvariantViolation: Если divisor нулевой

    Examples:
        >>> divide_magnitudes((2048,), (2,))
        (1024,)
        >>> divide_magnitudes((20,), (7,))
        (2,)
    """
    dividend = trim(dividend)
    divisor = trim(divisor)

    if is_zero(divisor):
        raise InvariantViolation("Reciprocal engine received a zero divisor")

    if compare(dividend, divisor) < 0:
        return ZERO_MAGNITUDE

    divisor_limbs = len(divisor)
    precision = max(
        divisor_limbs + config.guard_limbs,
        len(dividend) - divisor_limbs + 1 + config.guard_limbs,
    )

    reciprocal = compute_reciprocal(divisor, precision, config)
    quotient = drop_low(multiply(dividend, reciprocal.mantissa), -reciprocal.exponent)

    # Коррекция оценки: остаток должен лечь в [0, divisor)
    corrections = 0
    remainder = subtract(dividend, multiply(quotient, divisor))
    while remainder.is_negative:
        quotient = subtract(quotient, ONE_MAGNITUDE).magnitude
        remainder = subtract(divisor, remainder.magnitude)
        corrections += 1

    current = remainder.magnitude
    while compare(current, divisor) >= 0:
        quotient = add(quotient, ONE_MAGNITUDE)
        current = subtract(current, divisor).magnitude
        corrections += 1

    if corrections:
        logger.debug(
            "Quotient corrected by %d step(s): dividend_limbs=%d divisor_limbs=%d",
            corrections,
            len(dividend),
            divisor_limbs,
        )

    return quotient
