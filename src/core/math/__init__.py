"""
Core math modules

Точная арифметика: целые произвольной точности (BigInt) и дроби (Rational).
"""

# BigInt engine
from src.core.math.bigint import (
    # Representation constants
    DIGIT_WIDTH,
    NATIVE_INT_BITS,
    NATIVE_INT_MAX,
    NATIVE_INT_MIN,
    RADIX,
    ONE,
    ZERO,
    # Exceptions
    DivisionByZero,
    ExactArithmeticError,
    InvalidDigit,
    # Types
    BigInt,
    Ordering,
    # Magnitude helpers
    add_magnitude,
    compare_magnitude,
    divmod_magnitude,
    multiply_magnitude,
    subtract_magnitude,
    # Functions
    gcd,
)

# Rational engine
from src.core.math.rational import (
    Rational,
    ZeroDenominator,
)

__all__ = [
    # BigInt — Constants
    "DIGIT_WIDTH",
    "NATIVE_INT_BITS",
    "NATIVE_INT_MAX",
    "NATIVE_INT_MIN",
    "RADIX",
    "ONE",
    "ZERO",
    # BigInt — Exceptions
    "DivisionByZero",
    "ExactArithmeticError",
    "InvalidDigit",
    # BigInt — Types
    "BigInt",
    "Ordering",
    # BigInt — Magnitude helpers
    "add_magnitude",
    "compare_magnitude",
    "divmod_magnitude",
    "multiply_magnitude",
    "subtract_magnitude",
    # BigInt — Functions
    "gcd",
    # Rational
    "Rational",
    "ZeroDenominator",
]
