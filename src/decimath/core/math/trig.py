"""
Trig — Тригонометрические функции в десятичной точности

Модуль вычисляет:
- sin/cos рядом Тейлора после сведения аргумента к [-2π, 2π] через
  remainder (сохраняет младшие разряды даже для аргументов ~1e27)
  и далее к [0, π/2] формулами приведения
- tan = sin / cos
- atan ускоренным рядом Эйлера:
      atan(x) = Σ 2^(2n) (n!)^2 / (2n+1)! × x^(2n+1) / (1+x^2)^(n+1)
  |x| > 1 сводится к [-1, 1] тождеством atan(x) = ±π/2 - atan(1/x)
- asin/acos через atan: прямой ряд около ±1 требует миллионов членов
- atan2 с явной таблицей квадрантов
- Нормализация углов в радианах и градусах, перевод градусы ↔ радианы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В нулях и экстремумах (0, π/2, π, 3π/2, 2π) результаты точные
2. tan в нечётных кратных π/2 → UndefinedError, не деление на ноль
3. asin/acos вне [-1, 1] → InverseTrigDomainError
4. normalize_angle(a) ∈ [0, 2π), normalize_angle_deg(a) ∈ [0, 360)
"""

import logging
from decimal import Decimal

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import InverseTrigDomainError, UndefinedError
from decimath.core.math.constants import (
    PI,
    PI_HALF,
    PI_QUARTER,
    PI_THREE_HALVES,
    PI_TWELFTH,
    TWO_PI,
)
from decimath.core.math.numerical_safeguards import (
    MAX_SERIES_ITERATIONS,
    fixed_precision,
    warn_iteration_limit,
)
from decimath.core.math.remainder import remainder
from decimath.core.math.roots import sqrt

logger = logging.getLogger(__name__)

_DEGREES_FULL_TURN = Decimal(360)

# Градусные углы, кратные которым переводятся в радианы без деления на 180
_EXACT_DEGREE_STEPS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal(360), TWO_PI),
    (Decimal(270), PI_THREE_HALVES),
    (Decimal(180), PI),
    (Decimal(90), PI_HALF),
    (Decimal(45), PI_QUARTER),
    (Decimal(15), PI_TWELFTH),
)


# =============================================================================
# ПЕРЕВОД И НОРМАЛИЗАЦИЯ УГЛОВ
# =============================================================================


@fixed_precision
def to_rad(degrees: DecimalLike) -> Decimal:
    """
    Градусы → радианы (π радиан = 180 градусов).

    Углы, кратные 360/270/180/90/45/15 градусам, переводятся через
    соответствующую константу, чтобы to_rad(90) == PI_HALF точно.
    """
    degrees = to_decimal(degrees, "degrees")

    for step, radians in _EXACT_DEGREE_STEPS:
        if degrees % step == 0:
            return (degrees / step) * radians

    return degrees * PI / 180


@fixed_precision
def to_deg(radians: DecimalLike) -> Decimal:
    """Радианы → градусы (π радиан = 180 градусов)."""
    radians = to_decimal(radians, "radians")
    return radians * 180 / PI


@fixed_precision
def normalize_angle(radians: DecimalLike) -> Decimal:
    """
    Нормализация угла в радианах к [0, 2π).

    Идемпотентна: normalize_angle(normalize_angle(a)) == normalize_angle(a).
    """
    radians = remainder(to_decimal(radians, "radians"), TWO_PI)

    if radians < 0:
        radians += TWO_PI

    # Сложение могло округлиться ровно до 2π
    if radians >= TWO_PI:
        radians -= TWO_PI

    return radians


@fixed_precision
def normalize_angle_deg(degrees: DecimalLike) -> Decimal:
    """
    Нормализация угла в градусах к [0, 360).

    Examples:
        >>> normalize_angle_deg(-360)
        Decimal('0')
        >>> normalize_angle_deg(450)
        Decimal('90')
    """
    degrees = remainder(to_decimal(degrees, "degrees"), _DEGREES_FULL_TURN)

    if degrees < 0:
        degrees += _DEGREES_FULL_TURN

    # Сложение могло округлиться ровно до 360
    if degrees >= _DEGREES_FULL_TURN:
        degrees -= _DEGREES_FULL_TURN

    return degrees


# =============================================================================
# SIN / COS / TAN
# =============================================================================


@fixed_precision
def sin(x: DecimalLike) -> Decimal:
    """
    Синус угла в радианах (ряд Тейлора).

        sin(x) = x - x^3/3! + x^5/5! - ...

    Аргумент сводится к [0, π/2] формулами приведения
    sin(-x) = -sin(x), sin(2π - x) = -sin(x), sin(π - x) = sin(x).
    На этом отрезке члены ряда не превышают 1.6.

    Examples:
        >>> sin(0)
        Decimal('0')
        >>> sin(PI_HALF)
        Decimal('1')
    """
    # Сведение к [-2π, 2π]
    x = remainder(to_decimal(x, "x"), TWO_PI)

    negative = x < 0
    x = abs(x)

    if x == 0 or x == PI or x == TWO_PI:
        return Decimal(0)
    if x == PI_HALF:
        return Decimal(-1) if negative else Decimal(1)
    if x == PI_THREE_HALVES:
        return Decimal(1) if negative else Decimal(-1)

    # Вычитания точные: оба операнда не длиннее 28 дробных знаков
    if x > PI:
        x = TWO_PI - x
        negative = not negative
    if x > PI_HALF:
        x = PI - x

    result = x
    next_add = x
    x_squared = x * x

    for iteration in range(1, MAX_SERIES_ITERATIONS + 1):
        double_iteration = 2 * iteration
        # == next_add × -x^2 / ((2i) × (2i + 1)): знак чередуется
        next_add *= -1 * x_squared / (double_iteration * double_iteration + double_iteration)

        if next_add == 0:
            logger.debug("sin(%s) converged after %d terms", x, iteration)
            break

        result += next_add
    else:
        warn_iteration_limit("sin", x)

    return -result if negative else result


@fixed_precision
def cos(x: DecimalLike) -> Decimal:
    """
    Косинус угла в радианах (ряд Тейлора).

        cos(x) = 1 - x^2/2! + x^4/4! - ...

    Аргумент сводится к [0, π/2] формулами приведения
    cos(-x) = cos(x), cos(2π - x) = cos(x), cos(π - x) = -cos(x).

    Examples:
        >>> cos(0)
        Decimal('1')
        >>> cos(PI)
        Decimal('-1')
    """
    x = abs(remainder(to_decimal(x, "x"), TWO_PI))

    if x == 0 or x == TWO_PI:
        return Decimal(1)
    if x == PI:
        return Decimal(-1)
    if x == PI_HALF or x == PI_THREE_HALVES:
        return Decimal(0)

    negative = False
    if x > PI:
        x = TWO_PI - x
    if x > PI_HALF:
        x = PI - x
        negative = True

    result = Decimal(1)
    next_add = Decimal(1)
    x_squared = x * x

    for iteration in range(1, MAX_SERIES_ITERATIONS + 1):
        double_iteration = 2 * iteration
        # == next_add × -x^2 / ((2i - 1) × (2i))
        next_add *= -1 * x_squared / (double_iteration * double_iteration - double_iteration)

        if next_add == 0:
            logger.debug("cos(%s) converged after %d terms", x, iteration)
            break

        result += next_add
    else:
        warn_iteration_limit("cos", x)

    return -result if negative else result


@fixed_precision
def tan(radians: DecimalLike) -> Decimal:
    """
    Тангенс угла в радианах: sin / cos.

    Raises:
        UndefinedError: Если cos(radians) == 0 (нечётное кратное π/2)
    """
    radians = to_decimal(radians, "radians")

    cosine = cos(radians)
    if cosine == 0:
        raise UndefinedError(f"Tangent is undefined at {radians} (cosine is 0)")

    return sin(radians) / cosine


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def _validate_unit_interval(z: Decimal) -> None:
    if z < -1 or z > 1:
        raise InverseTrigDomainError(
            f"Argument must be in the range -1 to 1 inclusive, got {z}"
        )


@fixed_precision
def asin(z: DecimalLike) -> Decimal:
    """
    Арксинус: asin(z) = 2 × atan(z / (1 + √(1 - z²))).

    Raises:
        InverseTrigDomainError: Если z ∉ [-1, 1]

    Examples:
        >>> asin(1) == PI_HALF
        True
    """
    z = to_decimal(z, "z")
    _validate_unit_interval(z)

    if z == -1:
        return -PI_HALF
    if z == 0:
        return Decimal(0)
    if z == 1:
        return PI_HALF

    return 2 * atan(z / (1 + sqrt(1 - z * z)))


@fixed_precision
def acos(z: DecimalLike) -> Decimal:
    """
    Арккосинус: acos(z) = 2 × atan(√(1 - z²) / (1 + z)).

    Raises:
        InverseTrigDomainError: Если z ∉ [-1, 1]

    Examples:
        >>> acos(-1) == PI
        True
    """
    z = to_decimal(z, "z")
    _validate_unit_interval(z)

    if z == -1:
        return PI
    if z == 0:
        return PI_HALF
    if z == 1:
        return Decimal(0)

    return 2 * atan(sqrt(1 - z * z) / (1 + z))


@fixed_precision
def atan(x: DecimalLike) -> Decimal:
    """
    Арктангенс ускоренным рядом Эйлера.

    Examples:
        >>> atan(1) == PI_QUARTER
        True
    """
    x = to_decimal(x, "x")

    if x == -1:
        return -PI_QUARTER
    if x == 0:
        return Decimal(0)
    if x == 1:
        return PI_QUARTER

    # Сведение к [-1, 1] для быстрой сходимости
    if x < -1:
        return -PI_HALF - atan(1 / x)
    if x > 1:
        return PI_HALF - atan(1 / x)

    x_squared = x * x
    y = x_squared / (1 + x_squared)

    # == y / x, но точнее для очень малых x
    next_add = x / (1 + x_squared)
    result = next_add

    for iteration in range(1, MAX_SERIES_ITERATIONS + 1):
        double_iteration = 2 * iteration
        next_add *= y * double_iteration / (double_iteration + 1)

        if next_add == 0:
            logger.debug("atan(%s) converged after %d terms", x, iteration)
            break

        result += next_add
    else:
        warn_iteration_limit("atan", x)

    return result


@fixed_precision
def atan2(y: DecimalLike, x: DecimalLike) -> Decimal:
    """
    Угол θ точки (x, y), -π < θ <= π, такой что tan(θ) = y / x.

    Квадранты:
        Q1 (x+, y+): 0 < θ < π/2
        Q2 (x-, y+): π/2 < θ <= π
        Q3 (x-, y-): -π < θ < -π/2
        Q4 (x+, y-): -π/2 < θ < 0

    Examples:
        >>> atan2(0, 0)
        Decimal('0')
        >>> atan2(0, -1) == PI
        True
    """
    y = to_decimal(y, "y")
    x = to_decimal(x, "x")

    if x == 0 and y == 0:
        return Decimal(0)

    if x == 0:
        return PI_HALF if y > 0 else -PI_HALF

    if y == 0:
        return Decimal(0) if x > 0 else PI

    a_tan = atan(y / x)

    # Q1 и Q4
    if x > 0:
        return a_tan

    return a_tan + PI if y > 0 else a_tan - PI
