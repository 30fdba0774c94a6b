"""
Algorithms — вычисления поверх Integer и Rational.
"""

from rfm.algorithms.number_theory import gcd, power, reduce

__all__ = [
    "gcd",
    "power",
    "reduce",
]
