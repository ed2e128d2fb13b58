"""
Numeral — Модель десятичного числа фиксированной точности

Моделируемый тип: 128-битное десятичное число
    value = ±coefficient × 10^-scale
    coefficient: 96-битное беззнаковое целое (0 .. 2^96 - 1)
    scale: 0 .. 28

Python-представление — decimal.Decimal под единым контекстом ядра:
- prec = 29 значащих цифр
- Etiny = -28 (Emin = 0): всё, что меньше 10^-28, округляется до кратного
  10^-28, поэтому исчезающе малые члены рядов становятся ровно нулём
- Emax = 28: модули >= 10^29 вызывают Overflow

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое значение, возвращаемое ядром, проходит через fit():
   |value| <= 2^96 - 1, коэффициент <= 2^96 - 1, scale <= 28
2. Контекст ядра — неизменяемый шаблон; вычисления идут в его
   потоко-локальной копии (decimal.localcontext)
3. NaN/Infinity на входе запрещены (тип не имеет таких значений)
"""

from dataclasses import dataclass
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Final, Union

from pydantic import BaseModel, Field

from decimath.core.errors import DomainError, NumericOverflowError


# =============================================================================
# ПРОФИЛЬ ЧИСЛА
# =============================================================================


@dataclass(frozen=True)
class NumeralProfile:
    """Параметры моделируемого числа фиксированной точности.

    - max_scale: максимальное число дробных цифр (28)
    - precision: значащие цифры рабочей арифметики (29)
    - coefficient_bits: разрядность беззнакового коэффициента (96)
    """

    max_scale: int = 28
    precision: int = 29
    coefficient_bits: int = 96

    @property
    def max_coefficient(self) -> int:
        return (1 << self.coefficient_bits) - 1

    def build_context(self) -> Context:
        """
        Построение decimal-контекста, эмулирующего число.

        Etiny = Emin - prec + 1, поэтому Emin = precision - 1 - max_scale
        даёт наименьшую экспоненту ровно -max_scale.
        """
        return Context(
            prec=self.precision,
            rounding=ROUND_HALF_EVEN,
            Emin=self.precision - 1 - self.max_scale,
            Emax=self.max_scale,
            capitals=1,
            clamp=0,
            flags=[],
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )


NUMERAL_PROFILE: Final[NumeralProfile] = NumeralProfile()

MAX_SCALE: Final[int] = NUMERAL_PROFILE.max_scale
MAX_COEFFICIENT: Final[int] = NUMERAL_PROFILE.max_coefficient

# Шаблон контекста. Никогда не используется напрямую для вычислений:
# только через localcontext(KERNEL_CONTEXT), который делает копию.
KERNEL_CONTEXT: Final[Context] = NUMERAL_PROFILE.build_context()

_MAX_MAGNITUDE: Final[Decimal] = Decimal(MAX_COEFFICIENT)

DecimalLike = Union[Decimal, int, str, float]


# =============================================================================
# ПРЕДСТАВЛЕНИЕ (sign, coefficient, scale)
# =============================================================================


class DecimalParts(BaseModel):
    """
    Хранимое представление числа: знак, 96-битный коэффициент и scale.

    Immutable модель (frozen=True). Инварианты типа проверяются Field-ограничениями.
    """

    negative: bool = Field(False, description="Знак (True для отрицательных)")
    coefficient: int = Field(
        ..., ge=0, le=MAX_COEFFICIENT, description="Беззнаковый 96-битный коэффициент"
    )
    scale: int = Field(
        ..., ge=0, le=MAX_SCALE, description="Число хранимых дробных цифр (0-28)"
    )

    model_config = {"frozen": True}  # Immutable

    def to_decimal(self) -> Decimal:
        """Обратная сборка значения: ±coefficient × 10^-scale."""
        digits = tuple(int(ch) for ch in str(self.coefficient))
        return Decimal((int(self.negative), digits, -self.scale))


def decompose(value: DecimalLike) -> DecimalParts:
    """
    Разбор значения на (negative, coefficient, scale).

    Положительная экспонента Decimal (например, 1E+3) переносится в
    коэффициент: у моделируемого типа scale не бывает отрицательным.

    Examples:
        >>> decompose(Decimal("-1.50"))
        DecimalParts(negative=True, coefficient=150, scale=2)
        >>> decompose(Decimal("1E+3"))
        DecimalParts(negative=False, coefficient=1000, scale=0)
    """
    value = to_decimal(value)
    sign, digits, exponent = value.as_tuple()

    coefficient = int("".join(str(digit) for digit in digits))
    if exponent > 0:
        coefficient *= 10**exponent
        exponent = 0

    return DecimalParts(negative=bool(sign), coefficient=coefficient, scale=-exponent)


# =============================================================================
# ПРИВЕДЕНИЕ И ПОДГОНКА
# =============================================================================


def fit(value: Decimal) -> Decimal:
    """
    Подгонка значения под представимый диапазон типа.

    Вызывается внутри контекста ядра. Значение с 29-значным коэффициентом,
    превышающим 2^96 - 1, округляется на одну дробную цифру.

    Raises:
        NumericOverflowError: если |value| > 2^96 - 1
    """
    if abs(value) > _MAX_MAGNITUDE:
        raise NumericOverflowError(
            f"Value {value} is outside the representable range ±{_MAX_MAGNITUDE}"
        )

    sign, digits, exponent = value.as_tuple()
    if exponent >= 0 or len(digits) < NUMERAL_PROFILE.precision:
        return value

    coefficient = int("".join(str(digit) for digit in digits))
    if coefficient <= MAX_COEFFICIENT:
        return value

    # Модуль <= 2^96 - 1, поэтому после потери одной цифры коэффициент влезает
    return value.quantize(Decimal((0, (1,), exponent + 1)))


def to_decimal(value: DecimalLike, name: str = "value") -> Decimal:
    """
    Приведение аргумента к числу ядра.

    Принимает Decimal, int, str и float (float — через кратчайший repr,
    чтобы 0.1 стало 0.1, а не двоичным хвостом). Лишние цифры округляются,
    величины меньше 10^-28 становятся нулём.

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Decimal, представимый в типе

    Raises:
        TypeError: bool или неподдерживаемый тип
        DomainError: NaN/Infinity или строка, не являющаяся числом
        NumericOverflowError: значение вне диапазона типа

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("1e-40")
        Decimal('0E-28')
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str, float)):
        raise TypeError(
            f"{name} must be Decimal, int, str or float, got {type(value).__name__}"
        )

    if isinstance(value, float):
        value = repr(value)

    try:
        candidate = Decimal(value)
    except InvalidOperation as exc:
        raise DomainError(f"{name} is not a decimal numeral: {value!r}") from exc

    if not candidate.is_finite():
        raise DomainError(f"{name} must be finite (no NaN/Infinity), got {candidate}")

    with localcontext(KERNEL_CONTEXT) as ctx:
        try:
            return fit(ctx.create_decimal(candidate))
        except Overflow as exc:
            raise NumericOverflowError(
                f"{name}={candidate} is outside the representable range"
            ) from exc
