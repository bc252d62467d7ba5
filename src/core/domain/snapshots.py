"""
Number Snapshots — Модели чисел как plain data

Immutable Pydantic модели для передачи BigInt/Rational в виде данных
(dict/JSON). Полная совместимость с JSON Schema
(src/core/contracts/schema/bigint.json, rational.json).

Snapshot не обязан быть каноническим: to_bigint()/to_rational() всегда
нормализуют. from_bigint()/from_rational() всегда дают каноническую форму.
"""

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator

from src.core.math.bigint import RADIX, BigInt
from src.core.math.rational import Rational


# =============================================================================
# BIGINT SNAPSHOT
# =============================================================================


class BigIntSnapshot(BaseModel):
    """
    Снапшот BigInt: знак и цифры magnitude (младшая первой).
    """

    sign: StrictBool = Field(False, description="True — отрицательное значение")
    # bool/float как цифры отвергаются
    magnitude: tuple[StrictInt, ...] = Field(
        (), description=f"Цифры по основанию {RADIX}, младшая первой"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра в [0, RADIX)."""
        for position, digit in enumerate(v):
            if not 0 <= digit < RADIX:
                raise ValueError(
                    f"magnitude digit {digit} at position {position} outside [0, {RADIX})"
                )
        return v

    @classmethod
    def from_bigint(cls, value: BigInt) -> "BigIntSnapshot":
        return cls(sign=value.sign, magnitude=value.magnitude)

    def to_bigint(self) -> BigInt:
        return BigInt(self.sign, self.magnitude)


# =============================================================================
# RATIONAL SNAPSHOT
# =============================================================================


class RationalSnapshot(BaseModel):
    """
    Снапшот Rational: числитель и знаменатель.

    Знаменатель может быть отрицательным и несокращённым, но не нулевым.
    """

    numerator: BigIntSnapshot = Field(default_factory=BigIntSnapshot, description="Числитель")
    denominator: BigIntSnapshot = Field(
        default_factory=lambda: BigIntSnapshot(magnitude=(1,)), description="Знаменатель (≠ 0)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("denominator")
    @classmethod
    def validate_denominator_nonzero(cls, v: BigIntSnapshot) -> BigIntSnapshot:
        if not any(v.magnitude):
            raise ValueError("denominator must be non-zero")
        return v

    @classmethod
    def from_rational(cls, value: Rational) -> "RationalSnapshot":
        return cls(
            numerator=BigIntSnapshot.from_bigint(value.numerator),
            denominator=BigIntSnapshot.from_bigint(value.denominator),
        )

    def to_rational(self) -> Rational:
        return Rational(self.numerator.to_bigint(), self.denominator.to_bigint())
