"""
BigInt — Знаковые целые произвольной точности

Модуль реализует целочисленное ядро точной арифметики:
- Хранение модуля в виде цифр по основанию RADIX (младшая цифра первой)
- Каноническая форма (нет старших нулевых цифр, ноль всегда неотрицательный)
- Сложение/вычитание/умножение модулей (school-book алгоритмы)
- Деление с остатком с усечением к нулю и GCD (Euclid)
- Полный порядок и десятичный рендеринг

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой BigInt, доступный вызывающему коду, находится в канонической форме
2. Ноль представлен пустым magnitude и sign=False
3. Ни одна операция не изменяет операнды (все значения immutable)
4. Остаток деления имеет знак делимого: a == q * b + r, |r| < |b|
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание для одной цифры magnitude
RADIX: Final[int] = 100

# Ширина (в символах) одной цифры при десятичном рендеринге: len("99") == 2
DIGIT_WIDTH: Final[int] = len(str(RADIX - 1))

# Эталонный native-диапазон (int64) для round-trip проверок
NATIVE_INT_BITS: Final[int] = 64
NATIVE_INT_MIN: Final[int] = -(1 << (NATIVE_INT_BITS - 1))
NATIVE_INT_MAX: Final[int] = (1 << (NATIVE_INT_BITS - 1)) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExactArithmeticError(ArithmeticError):
    """Базовый класс для нарушений контракта точной арифметики."""


class InvalidDigit(ExactArithmeticError, ValueError):
    """
    Цифра magnitude вне диапазона [0, RADIX).

    Attributes:
        digit: Переданное значение
        position: Индекс цифры (0 — младшая)
    """

    def __init__(self, digit: object, position: int):
        self.digit = digit
        self.position = position
        super().__init__(
            f"Invalid digit {digit!r} at position {position}: "
            f"expected integer in [0, {RADIX})"
        )


class DivisionByZero(ExactArithmeticError, ZeroDivisionError):
    """Деление на нулевой BigInt или на нулевую дробь."""


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(int, Enum):
    """Результат трёхстороннего сравнения."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# АРИФМЕТИКА МОДУЛЕЙ (magnitude)
# =============================================================================
# Все функции принимают последовательности цифр (младшая первой) без
# старших нулей и возвращают канонический tuple.


def _trim(digits: Sequence[int]) -> tuple[int, ...]:
    """Отбрасывает старшие нулевые цифры."""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Сравнение |a| и |b| без учёта знака.

    Сначала по длине (старших нулей нет, поэтому длиннее = больше),
    затем поцифрово от старшей к младшей.

    Examples:
        >>> compare_magnitude((45, 23, 1), (99, 99))
        <Ordering.GREATER: 1>
        >>> compare_magnitude((), ())
        <Ordering.EQUAL: 0>
    """
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.LESS if a[i] < b[i] else Ordering.GREATER

    return Ordering.EQUAL


def add_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    |a| + |b| — сложение столбиком с переносом по основанию RADIX.

    Длина результата до trim: max(len(a), len(b)) + 1.
    """
    width = max(len(a), len(b))
    result = [0] * (width + 1)
    carry = 0

    for i in range(width):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, result[i] = divmod(total, RADIX)

    result[width] = carry
    return _trim(result)


def subtract_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    |a| - |b| — вычитание столбиком с заёмом.

    Args:
        a: Уменьшаемое (|a| >= |b|)
        b: Вычитаемое

    Returns:
        Канонический magnitude разности

    Raises:
        ValueError: Если |a| < |b| (вызывающий код обязан сравнить модули заранее)
    """
    if compare_magnitude(a, b) is Ordering.LESS:
        raise ValueError("subtract_magnitude requires |a| >= |b|")

    result = [0] * len(a)
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    return _trim(result)


def multiply_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    |a| * |b| — school-book умножение (O(n*m)).

    Произведения digit[i] * digit[j] накапливаются в позиции i + j
    локального буфера длины len(a) + len(b); переносы распространяются
    сразу по основанию RADIX.
    """
    if not a or not b:
        return ()

    acc = [0] * (len(a) + len(b))

    for i, da in enumerate(a):
        if da == 0:
            continue
        carry = 0
        for j, db in enumerate(b):
            carry, acc[i + j] = divmod(acc[i + j] + da * db + carry, RADIX)
        pos = i + len(b)
        while carry:
            carry, acc[pos] = divmod(acc[pos] + carry, RADIX)
            pos += 1

    return _trim(acc)


def _multiply_digit(a: Sequence[int], digit: int) -> tuple[int, ...]:
    """|a| * digit для одной цифры 0 <= digit < RADIX."""
    if digit == 0 or not a:
        return ()

    result = []
    carry = 0
    for da in a:
        carry, low = divmod(da * digit + carry, RADIX)
        result.append(low)
    while carry:
        carry, low = divmod(carry, RADIX)
        result.append(low)

    return _trim(result)


def divmod_magnitude(
    a: Sequence[int], b: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Деление столбиком модулей: (|a| // |b|, |a| % |b|).

    Каждая цифра частного подбирается двоичным поиском в [0, RADIX),
    так что на цифру уходит O(log RADIX) умножений на одну цифру.

    Args:
        a: Делимое
        b: Делитель (непустой)

    Returns:
        (quotient, remainder) — оба канонические, remainder < |b|

    Raises:
        DivisionByZero: Если b пустой (ноль)
    """
    if not b:
        raise DivisionByZero("divmod_magnitude: division by zero magnitude")

    if compare_magnitude(a, b) is Ordering.LESS:
        return (), _trim(a)

    quotient_msd_first = []
    remainder: tuple[int, ...] = ()

    for i in range(len(a) - 1, -1, -1):
        # remainder = remainder * RADIX + a[i]
        remainder = _trim((a[i],) + remainder)

        lo, hi = 0, RADIX - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if compare_magnitude(_multiply_digit(b, mid), remainder) is Ordering.GREATER:
                hi = mid - 1
            else:
                lo = mid

        if lo:
            remainder = subtract_magnitude(remainder, _multiply_digit(b, lo))
        quotient_msd_first.append(lo)

    return _trim(quotient_msd_first[::-1]), remainder


# =============================================================================
# BIGINT
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class BigInt:
    """
    Знаковое целое произвольной точности.

    Immutable значение (frozen dataclass): любая операция возвращает новый
    экземпляр в канонической форме. Конструктор BigInt(sign, magnitude)
    валидирует каждую цифру (InvalidDigit) и нормализует значение.

    Attributes:
        sign: True — отрицательное значение (у нуля всегда False)
        magnitude: Цифры по основанию RADIX, младшая первой, без старших нулей
    """

    sign: bool = False
    magnitude: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sign, bool):
            raise TypeError(f"BigInt sign must be bool, got {type(self.sign).__name__}")

        digits = tuple(self.magnitude)

        for position, digit in enumerate(digits):
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit < RADIX:
                logger.debug("Rejected digit %r at position %d", digit, position)
                raise InvalidDigit(digit, position)

        digits = _trim(digits)
        # frozen dataclass: нормализация возможна только здесь
        object.__setattr__(self, "magnitude", digits)
        object.__setattr__(self, "sign", self.sign and bool(digits))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Конструирование из встроенного int.

        Python int не переполняется, поэтому abs() корректен и для
        NATIVE_INT_MIN (в отличие от фиксированной разрядности).

        Raises:
            TypeError: Если value не int (bool не принимается)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt.from_int expects int, got {type(value).__name__}")

        rest = abs(value)
        digits = []
        while rest:
            rest, low = divmod(rest, RADIX)
            digits.append(low)

        return cls(value < 0, digits)

    def to_int(self) -> int:
        """Конверсия во встроенный int."""
        value = 0
        for digit in reversed(self.magnitude):
            value = value * RADIX + digit
        return -value if self.sign else value

    def fits_native(self) -> bool:
        """Значение помещается в [NATIVE_INT_MIN, NATIVE_INT_MAX]."""
        return NATIVE_INT_MIN <= self.to_int() <= NATIVE_INT_MAX

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return not self.magnitude

    @property
    def is_negative(self) -> bool:
        return self.sign

    def signum(self) -> int:
        """-1, 0 или 1."""
        if self.is_zero:
            return 0
        return -1 if self.sign else 1

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInt":
        """Смена знака; ноль остаётся неотрицательным."""
        return BigInt(not self.sign, self.magnitude)

    def absolute(self) -> "BigInt":
        return BigInt(False, self.magnitude)

    def add(self, other: "BigInt") -> "BigInt":
        """
        Сложение с учётом знаков.

        Одинаковые знаки → add_magnitude с этим знаком.
        Разные знаки → знак операнда с большим модулем,
        модуль = subtract_magnitude(больший, меньший); равные модули → 0.
        """
        if self.sign == other.sign:
            return BigInt(self.sign, add_magnitude(self.magnitude, other.magnitude))

        order = compare_magnitude(self.magnitude, other.magnitude)
        if order is Ordering.EQUAL:
            return ZERO
        if order is Ordering.GREATER:
            return BigInt(self.sign, subtract_magnitude(self.magnitude, other.magnitude))
        return BigInt(other.sign, subtract_magnitude(other.magnitude, self.magnitude))

    def subtract(self, other: "BigInt") -> "BigInt":
        return self.add(other.negate())

    def multiply(self, other: "BigInt") -> "BigInt":
        """Произведение; знак результата = XOR знаков операндов."""
        if self.is_zero or other.is_zero:
            return ZERO
        return BigInt(self.sign != other.sign, multiply_magnitude(self.magnitude, other.magnitude))

    def divide_with_remainder(self, other: "BigInt") -> tuple["BigInt", "BigInt"]:
        """
        Деление с остатком, усечение к нулю.

        Гарантирует: self == quotient * other + remainder,
        |remainder| < |other|, знак remainder совпадает со знаком self
        (или remainder == 0).

        Args:
            other: Делитель

        Returns:
            (quotient, remainder)

        Raises:
            DivisionByZero: Если other == 0

        Examples:
            >>> q, r = BigInt.from_int(-7).divide_with_remainder(BigInt.from_int(2))
            >>> str(q), str(r)
            ('-3', '-1')
        """
        if other.is_zero:
            logger.debug("Division by zero requested, dividend=%s", self)
            raise DivisionByZero(f"Cannot divide {self} by zero")

        quotient, remainder = divmod_magnitude(self.magnitude, other.magnitude)
        return (
            BigInt(self.sign != other.sign, quotient),
            BigInt(self.sign, remainder),
        )

    def gcd(self, other: "BigInt") -> "BigInt":
        return gcd(self, other)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInt") -> Ordering:
        """
        Полный порядок: сначала знак, затем модуль.

        Для двух отрицательных больший модуль означает меньшее значение.
        """
        if self.sign != other.sign:
            return Ordering.LESS if self.sign else Ordering.GREATER

        order = compare_magnitude(self.magnitude, other.magnitude)
        if self.sign:
            return Ordering(-order.value)
        return order

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return self.absolute()

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

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.sign == other.sign and self.magnitude == other.magnitude

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __hash__(self) -> int:
        # согласован с равенством BigInt == int
        return hash(self.to_int())

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        """
        Канонический десятичный рендеринг.

        Старшая цифра без дополнения, остальные — с дополнением нулями
        до DIGIT_WIDTH символов.

        Examples:
            >>> str(BigInt(True, (45, 23, 1)))
            '-12345'
            >>> str(BigInt(False, (5, 0, 7)))
            '70005'
        """
        if self.is_zero:
            return "0"

        parts = ["-"] if self.sign else []
        parts.append(str(self.magnitude[-1]))
        for digit in reversed(self.magnitude[:-1]):
            parts.append(str(digit).zfill(DIGIT_WIDTH))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"BigInt.from_int({self})"


def _coerce(value: object):
    """BigInt как есть, int → BigInt, остальное → NotImplemented."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return NotImplemented


ZERO: Final[BigInt] = BigInt()
ONE: Final[BigInt] = BigInt(False, (1,))


# =============================================================================
# GCD
# =============================================================================


def gcd(a: BigInt, b: BigInt) -> BigInt:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Результат всегда неотрицательный: gcd(0, 0) == 0, gcd(x, 0) == |x|.

    Examples:
        >>> str(gcd(BigInt.from_int(-12), BigInt.from_int(18)))
        '6'
    """
    x, y = a.absolute(), b.absolute()
    while not y.is_zero:
        _, remainder = x.divide_with_remainder(y)
        x, y = y, remainder
    return x
