"""
Core math modules для rfm

Беззнаковая арифметика произвольной точности над последовательностями limb'ов.
"""

# Limbs
from rfm.core.math.limbs import (
    # Constants
    HALF_LIMB_BITS,
    HALF_LIMB_MASK,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_HALF_RANGE,
    LIMB_MAX,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    # Exceptions
    InvariantViolation,
    # Types
    Magnitude,
    # Functions
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

# Magnitude Kernel
from rfm.core.math.magnitude import (
    SubtractionResult,
    add,
    complement_to_magnitude,
    multiply,
    multiply_limb,
    subtract,
)

# Reciprocal Engine
from rfm.core.math.reciprocal import (
    DEFAULT_RECIPROCAL_CONFIG,
    Reciprocal,
    ReciprocalConfig,
    compute_reciprocal,
    divide_magnitudes,
)

__all__ = [
    # Limbs — Constants
    "HALF_LIMB_BITS",
    "HALF_LIMB_MASK",
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_HALF_RANGE",
    "LIMB_MAX",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Limbs — Exceptions
    "InvariantViolation",
    # Limbs — Types
    "Magnitude",
    # Limbs — Functions
    "compare",
    "drop_low",
    "is_one",
    "is_zero",
    "overflowing_add",
    "overflowing_sub",
    "shift_up",
    "split_half",
    "trim",
    "validate_limbs",
    "zero_extend",
    # Magnitude Kernel
    "SubtractionResult",
    "add",
    "complement_to_magnitude",
    "multiply",
    "multiply_limb",
    "subtract",
    # Reciprocal Engine
    "DEFAULT_RECIPROCAL_CONFIG",
    "Reciprocal",
    "ReciprocalConfig",
    "compute_reciprocal",
    "divide_magnitudes",
]
