"""
Fraction32 — Точная дробь фиксированной разрядности

Immutable Pydantic модель рационального числа numerator/denominator:
- numerator: знаковое 16-битное целое (-32768..32767)
- denominator: положительное целое (1..32767)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дробь всегда несократима: gcd(|numerator|, denominator) == 1,
   ноль хранится только как 0/1
2. denominator никогда не 0 и никогда не больше 32767
3. Переполнение никогда не происходит молча: операторы выбрасывают
   FractionOverflow, checked_* варианты возвращают None
4. Все пути создания проходят через new() (smart constructor)

Текстовая форма: "<numerator>/<denominator>" (всегда, включая "3/1" и "0/1").
"""

import re
from enum import Enum
from typing import Any, ClassVar, Final, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.integer_kernel import (
    I16_MAX,
    I16_MIN,
    U16_MAX,
    FixedWidthOverflow,
    fits_i16,
    gcd,
    lcm,
    try_i16,
)

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

NUMERATOR_MIN: Final[int] = I16_MIN
NUMERATOR_MAX: Final[int] = I16_MAX

# Знаменатель ограничен i16::MAX, а не u16::MAX: масштабные множители
# должны оставаться в знаковом диапазоне
DENOMINATOR_MAX: Final[int] = I16_MAX

_SIGNED_TOKEN: Final = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_TOKEN: Final = re.compile(r"\+?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionContractViolation(Exception):
    """
    Нарушение контракта фиксированной разрядности.

    Ошибка программирования, а не runtime-условие: знаменатель 0 или больше
    DENOMINATOR_MAX, числитель вне i16, несравнимые значения в total order.
    """

    pass


class FractionOverflow(FractionContractViolation, FixedWidthOverflow):
    """Точный результат арифметики не помещается в 16 бит."""

    pass


class FractionDivisionByZero(FractionContractViolation, ZeroDivisionError):
    """Деление на каноничный ноль 0/1."""

    pass


class ParseErrorKind(str, Enum):
    """Причина ошибки разбора текстовой формы"""

    BAD_INTEGER = "bad_integer"
    ZERO_DENOMINATOR = "zero_denominator"


class ParseFractionError(ValueError):
    """
    Восстановимая ошибка разбора текста в Fraction32.

    Attributes:
        kind: BAD_INTEGER или ZERO_DENOMINATOR
        token: Токен, на котором разбор остановился
    """

    def __init__(self, kind: ParseErrorKind, token: str):
        self.kind = kind
        self.token = token
        if kind is ParseErrorKind.ZERO_DENOMINATOR:
            message = f"denominator must be nonzero, got {token!r}"
        else:
            message = f"invalid integer {token!r}"
        super().__init__(message)


# =============================================================================
# HELPERS
# =============================================================================


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _narrow(value: int, what: str) -> int:
    """Checked-сужение до i16 для промежуточных значений арифметики."""
    if not fits_i16(value):
        raise FractionOverflow(f"{what} {value} does not fit in 16 bits")
    return value


def _parse_integer(token: str, pattern: "re.Pattern[str]", low: int, high: int) -> int:
    if pattern.fullmatch(token) is None:
        raise ParseFractionError(ParseErrorKind.BAD_INTEGER, token)

    value = int(token)
    if not low <= value <= high:
        raise ParseFractionError(ParseErrorKind.BAD_INTEGER, token)

    return value


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction32(BaseModel):
    """
    Точная дробь с 16-битным числителем и 16-битным знаменателем.

    Immutable модель (frozen=True): операторы возвращают новые значения.
    Прямое создание Fraction32(numerator=..., denominator=...) принимает
    только несократимую пару; для произвольной пары используйте new().
    """

    numerator: int = Field(
        ..., ge=NUMERATOR_MIN, le=NUMERATOR_MAX, description="Числитель (со знаком)"
    )
    denominator: int = Field(
        ..., ge=1, le=DENOMINATOR_MAX, description="Знаменатель (строго положительный)"
    )

    model_config = {"frozen": True, "strict": True}

    ZERO: ClassVar["Fraction32"]
    ONE: ClassVar["Fraction32"]
    NEG_ONE: ClassVar["Fraction32"]

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def parse_text_form(cls, data: Any) -> Any:
        """Текстовая форма "3/4" принимается наравне с dict."""
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {"numerator": parsed.numerator, "denominator": parsed.denominator}
        return data

    @model_validator(mode="after")
    def check_reduced_form(self) -> "Fraction32":
        """Проверка несократимости и каноничного нуля."""
        if self.numerator == 0:
            if self.denominator != 1:
                raise ValueError(f"zero must be stored as 0/1, got 0/{self.denominator}")
        elif gcd(abs(self.numerator), self.denominator) != 1:
            raise ValueError(
                f"{self.numerator}/{self.denominator} is not in lowest terms"
            )
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_bounds(numerator: int, denominator: int) -> None:
        if not fits_i16(numerator):
            raise FractionContractViolation(
                f"numerator must be in {NUMERATOR_MIN}..{NUMERATOR_MAX}, got {numerator}"
            )
        if denominator == 0:
            raise FractionContractViolation("denominator must be nonzero")
        if not 1 <= denominator <= DENOMINATOR_MAX:
            raise FractionContractViolation(
                f"denominator must be in 1..{DENOMINATOR_MAX}, got {denominator}"
            )

    @classmethod
    def new(cls, numerator: int, denominator: int) -> "Fraction32":
        """
        Создание дроби с автоматическим сокращением.

        Единственная точка входа для произвольной пары: parse и все
        операторы проходят через new().

        Args:
            numerator: Числитель (i16)
            denominator: Знаменатель (1..DENOMINATOR_MAX)

        Returns:
            Несократимая дробь

        Raises:
            FractionContractViolation: Если числитель вне i16 или знаменатель
                равен 0 / больше DENOMINATOR_MAX
            TypeError: Если аргументы не int

        Examples:
            >>> str(Fraction32.new(2, 4))
            '1/2'
        """
        _require_int(numerator, "numerator")
        _require_int(denominator, "denominator")
        cls._check_bounds(numerator, denominator)
        return cls.new_unchecked(numerator, denominator).reduce()

    @classmethod
    def new_unchecked(cls, numerator: int, denominator: int) -> "Fraction32":
        """
        Создание без валидации и сокращения.

        Вызывающий гарантирует: знаменатель в 1..DENOMINATOR_MAX, числитель
        в i16, пара несократима (иначе результат нужно сократить через reduce()).
        """
        return cls.model_construct(numerator=numerator, denominator=denominator)

    @classmethod
    def whole(cls, value: int) -> "Fraction32":
        """Целое число value/1; уже несократимо."""
        _require_int(value, "value")
        cls._check_bounds(value, 1)
        return cls.new_unchecked(value, 1)

    @classmethod
    def from_int(cls, value: int) -> "Fraction32":
        return cls.whole(value)

    @classmethod
    def parse(cls, text: str) -> "Fraction32":
        """
        Разбор текстовой формы.

        Формы:
            "<signed-int>"                  → целое
            "<signed-int>/<unsigned-int>"   → new(numerator, denominator)

        Числитель должен помещаться в i16, знаменатель в u16. Знаменатель
        больше DENOMINATOR_MAX проходит в new() и даёт тот же
        FractionContractViolation, что и прямое создание.

        Raises:
            ParseFractionError: BAD_INTEGER для некорректного токена,
                ZERO_DENOMINATOR для явного нулевого знаменателя
            FractionContractViolation: Знаменатель больше DENOMINATOR_MAX

        Examples:
            >>> str(Fraction32.parse("6/8"))
            '3/4'
            >>> str(Fraction32.parse("-7"))
            '-7/1'
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        numerator_text, separator, denominator_text = text.partition("/")

        numerator = _parse_integer(numerator_text, _SIGNED_TOKEN, I16_MIN, I16_MAX)
        if not separator:
            return cls.whole(numerator)

        denominator = _parse_integer(denominator_text, _UNSIGNED_TOKEN, 0, U16_MAX)
        if denominator == 0:
            raise ParseFractionError(ParseErrorKind.ZERO_DENOMINATOR, denominator_text)

        return cls.new(numerator, denominator)

    # -------------------------------------------------------------------------
    # Reduction / reciprocal
    # -------------------------------------------------------------------------

    def reduce(self) -> "Fraction32":
        """
        Сокращение дроби.

        Ноль → каноничный 0/1. Иначе делим обе части на
        gcd(|numerator|, denominator). Идемпотентно.
        """
        if self.numerator == 0:
            return self.ZERO

        divisor = gcd(abs(self.numerator), self.denominator)
        numerator = self.numerator // divisor
        denominator = self.denominator // divisor

        self._check_bounds(numerator, denominator)
        return type(self)(numerator=numerator, denominator=denominator)

    def reciprocal(self) -> Optional["Fraction32"]:
        """
        Обратная дробь.

        Returns:
            (sign * denominator) / |numerator|, либо None если числитель 0
            или |numerator| не помещается в знаменатель (numerator == -32768)
        """
        if self.numerator == 0:
            return None

        magnitude = abs(self.numerator)
        if magnitude > DENOMINATOR_MAX:
            return None

        sign = 1 if self.numerator > 0 else -1
        return self.new(sign * self.denominator, magnitude)

    # -------------------------------------------------------------------------
    # Arithmetic kernel
    # -------------------------------------------------------------------------

    def _add(self, rhs: "Fraction32") -> "Fraction32":
        try:
            denominator = lcm(self.denominator, rhs.denominator)
        except FixedWidthOverflow as exc:
            raise FractionOverflow(
                f"common denominator of {self} and {rhs} does not fit in 16 bits"
            ) from exc

        self_scale = _narrow(denominator // self.denominator, "scale factor")
        rhs_scale = _narrow(denominator // rhs.denominator, "scale factor")

        numerator = _narrow(
            _narrow(self.numerator * self_scale, "scaled numerator")
            + _narrow(rhs.numerator * rhs_scale, "scaled numerator"),
            "numerator sum",
        )

        if denominator > DENOMINATOR_MAX:
            raise FractionOverflow(
                f"common denominator {denominator} exceeds {DENOMINATOR_MAX}"
            )

        return self.new(numerator, denominator)

    def _mul(self, rhs: "Fraction32") -> "Fraction32":
        numerator = _narrow(self.numerator * rhs.numerator, "numerator product")

        denominator = self.denominator * rhs.denominator
        if denominator > DENOMINATOR_MAX:
            raise FractionOverflow(
                f"denominator product {denominator} exceeds {DENOMINATOR_MAX}"
            )

        return self.new(numerator, denominator)

    def _sub(self, rhs: "Fraction32") -> "Fraction32":
        # a - b = a + b * (-1)
        return self._add(rhs._mul(self.NEG_ONE))

    def _div(self, rhs: "Fraction32") -> "Fraction32":
        if rhs.numerator == 0:
            raise FractionDivisionByZero(f"division of {self} by zero")

        inverse = rhs.reciprocal()
        if inverse is None:
            raise FractionOverflow(f"reciprocal of {rhs} does not fit in 16 bits")

        return self._mul(inverse)

    @classmethod
    def _coerce(cls, other: Any) -> Optional["Fraction32"]:
        if isinstance(other, Fraction32):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls.whole(other)
        return None

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Union["Fraction32", int]) -> "Fraction32":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: int) -> "Fraction32":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other: Union["Fraction32", int]) -> "Fraction32":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sub(rhs)

    def __rsub__(self, other: int) -> "Fraction32":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._sub(self)

    def __mul__(self, other: Union["Fraction32", int]) -> "Fraction32":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._mul(rhs)

    def __rmul__(self, other: int) -> "Fraction32":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._mul(self)

    def __truediv__(self, other: Union["Fraction32", int]) -> "Fraction32":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._div(rhs)

    def __rtruediv__(self, other: int) -> "Fraction32":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._div(self)

    def __neg__(self) -> "Fraction32":
        return self._mul(self.NEG_ONE)

    # -------------------------------------------------------------------------
    # Checked arithmetic
    # -------------------------------------------------------------------------

    def checked_add(self, other: Union["Fraction32", int]) -> Optional["Fraction32"]:
        """self + other, либо None при переполнении."""
        try:
            return self + other
        except FractionOverflow:
            return None

    def checked_sub(self, other: Union["Fraction32", int]) -> Optional["Fraction32"]:
        """self - other, либо None при переполнении."""
        try:
            return self - other
        except FractionOverflow:
            return None

    def checked_mul(self, other: Union["Fraction32", int]) -> Optional["Fraction32"]:
        """self * other, либо None при переполнении."""
        try:
            return self * other
        except FractionOverflow:
            return None

    def checked_div(self, other: Union["Fraction32", int]) -> Optional["Fraction32"]:
        """self / other, либо None при переполнении или делении на ноль."""
        try:
            return self / other
        except (FractionOverflow, FractionDivisionByZero):
            return None

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def partial_cmp(self, other: Union["Fraction32", int]) -> Optional[int]:
        """
        Частичное сравнение через общий знаменатель.

        Обе дроби масштабируются к lcm(denominators). Если НОК не помещается
        в u16 или масштабный множитель не помещается в i16 — значения
        несравнимы в рамках контракта.

        Returns:
            -1 / 0 / +1, либо None если значения несравнимы
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare Fraction32 with {type(other).__name__}")

        try:
            common = lcm(self.denominator, rhs.denominator)
        except FixedWidthOverflow:
            return None

        self_scale = try_i16(common // self.denominator)
        rhs_scale = try_i16(common // rhs.denominator)
        if self_scale is None or rhs_scale is None:
            return None

        left = self.numerator * self_scale
        right = rhs.numerator * rhs_scale
        return (left > right) - (left < right)

    def cmp(self, other: Union["Fraction32", int]) -> int:
        """
        Полное сравнение: -1 / 0 / +1.

        Raises:
            FractionContractViolation: Если partial_cmp вернул None
        """
        ordering = self.partial_cmp(other)
        if ordering is None:
            raise FractionContractViolation(
                f"{self} and {other} cannot be ordered within 16 bits"
            )
        return ordering

    def __lt__(self, other: Union["Fraction32", int]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: Union["Fraction32", int]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: Union["Fraction32", int]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: Union["Fraction32", int]) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.cmp(other) >= 0

    def __eq__(self, other: object) -> bool:
        # Обе стороны всегда несократимы: достаточно покомпонентного сравнения
        if isinstance(other, Fraction32):
            return (self.numerator, self.denominator) == (
                other.numerator,
                other.denominator,
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # whole(n) хешируется как n
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Fraction32.ZERO = Fraction32.whole(0)
Fraction32.ONE = Fraction32.whole(1)
Fraction32.NEG_ONE = Fraction32.whole(-1)

ZERO: Final[Fraction32] = Fraction32.ZERO
ONE: Final[Fraction32] = Fraction32.ONE
NEG_ONE: Final[Fraction32] = Fraction32.NEG_ONE
