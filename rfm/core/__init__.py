"""
Core arithmetic kernel and value types.

This package contains the magnitude arithmetic (limbs, Karatsuba, reciprocal)
and the signed Integer / Rational value types built on it.
"""
