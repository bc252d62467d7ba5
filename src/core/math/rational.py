"""
Rational — Точные дроби поверх BigInt

Дробь numerator / denominator всегда хранится в нормальной форме:
- denominator > 0
- gcd(|numerator|, denominator) == 1
- ноль представлен как 0/1

Каждый путь конструирования проходит через нормализацию; арифметика
раскрывается в несколько операций BigInt и один вызов нормализующего
конструктора.
"""

import logging
from dataclasses import dataclass

from src.core.math.bigint import (
    ONE,
    ZERO,
    BigInt,
    DivisionByZero,
    ExactArithmeticError,
    gcd,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominator(ExactArithmeticError, ZeroDivisionError):
    """Попытка построить дробь с нулевым знаменателем."""


# =============================================================================
# RATIONAL
# =============================================================================


def _as_bigint(value: object, name: str) -> BigInt:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    raise TypeError(f"Rational {name} must be BigInt or int, got {type(value).__name__}")


@dataclass(frozen=True, eq=False, repr=False)
class Rational:
    """
    Рациональное число произвольной точности.

    Immutable (frozen dataclass). Rational(n, d) нормализует дробь;
    Rational(n) == n/1; Rational() == 0/1.

    Raises:
        ZeroDenominator: Если denominator == 0
        TypeError: Если numerator/denominator не BigInt и не int

    Examples:
        >>> str(Rational(2, 4))
        '1/2'
        >>> str(Rational(3, -6))
        '-1/2'
        >>> str(Rational(0, -5))
        '0'
    """

    numerator: BigInt = ZERO
    denominator: BigInt = ONE

    def __post_init__(self) -> None:
        num = _as_bigint(self.numerator, "numerator")
        den = _as_bigint(self.denominator, "denominator")

        if den.is_zero:
            logger.debug("Rejected zero denominator, numerator=%s", num)
            raise ZeroDenominator(f"Rational denominator cannot be zero (numerator={num})")

        num, den = _normalize(num, den)
        # frozen dataclass: нормализация возможна только здесь
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def from_bigint(cls, value: BigInt) -> "Rational":
        return cls(value, ONE)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.numerator.is_zero

    @property
    def is_integer(self) -> bool:
        return self.denominator == ONE

    def signum(self) -> int:
        return self.numerator.signum()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "Rational":
        return Rational(self.numerator.negate(), self.denominator)

    def add(self, other: "Rational") -> "Rational":
        """a/b + c/d = (a*d + c*b) / (b*d)"""
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        return self.add(other.negate())

    def multiply(self, other: "Rational") -> "Rational":
        """a/b * c/d = (a*c) / (b*d)"""
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        """
        (a/b) / (c/d) = (a*d) / (b*c)

        Raises:
            DivisionByZero: Если other == 0
        """
        if other.is_zero:
            logger.debug("Division by zero fraction requested, dividend=%s", self)
            raise DivisionByZero(f"Cannot divide {self} by zero fraction")

        return Rational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def equals(self, other: "Rational") -> bool:
        """Сравнение перекрёстным умножением: a*d == c*b."""
        return self.numerator * other.denominator == other.numerator * self.denominator

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self)

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        if self.is_integer:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        if self.is_integer:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _normalize(num: BigInt, den: BigInt) -> tuple[BigInt, BigInt]:
    """
    Приведение пары (num, den != 0) к нормальной форме.

    1. Отрицательный знаменатель → смена знака у обоих
    2. Сокращение на g = gcd(|num|, den) при g > 1 (остаток ровно 0)
    3. Нулевой числитель → знаменатель ровно 1
    """
    if den.is_negative:
        num, den = num.negate(), den.negate()

    g = gcd(num, den)
    if g > ONE:
        num, _ = num.divide_with_remainder(g)
        den, _ = den.divide_with_remainder(g)

    if num.is_zero:
        den = ONE

    return num, den


def _coerce(value: object):
    """Rational как есть, BigInt/int → n/1, остальное → NotImplemented."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, BigInt):
        return Rational.from_bigint(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return NotImplemented
