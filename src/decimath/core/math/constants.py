"""
Constants — Таблица констант ядра

Все константы — 29-значные десятичные литералы, равные математическим
значениям с точностью до последнего представимого разряда типа.
Побитовое совпадение с double-вычислением тех же констант НЕ гарантируется.

Таблица инициализируется один раз при импорте и никогда не изменяется
(tuple, Final), поэтому не требует блокировок при параллельном чтении.
"""

from decimal import Decimal
from typing import Final

from decimath.core.domain.numeral import MAX_COEFFICIENT, MAX_SCALE

# =============================================================================
# π И ЕГО ДОЛИ
# =============================================================================

# 180 градусов
PI: Final[Decimal] = Decimal("3.1415926535897932384626433833")

# 90 градусов
PI_HALF: Final[Decimal] = Decimal("1.5707963267948966192313216916")

# 45 градусов
PI_QUARTER: Final[Decimal] = Decimal("0.7853981633974483096156608458")

# 15 градусов
PI_TWELFTH: Final[Decimal] = Decimal("0.2617993877991494365385536153")

# 270 градусов
PI_THREE_HALVES: Final[Decimal] = Decimal("4.7123889803846898576939650749")

# 360 градусов
TWO_PI: Final[Decimal] = Decimal("6.2831853071795864769252867666")


# =============================================================================
# e И ЛОГАРИФМЫ
# =============================================================================

# Полное значение: 2.718281828459045235360287471352662497757
E: Final[Decimal] = Decimal("2.7182818284590452353602874714")

# Полное значение: 2.30258509299404568401799145468436420760110148862877 (OEIS A002392)
LN10: Final[Decimal] = Decimal("2.3025850929940456840179914547")

# Полное значение: 0.69314718055994530941723212145817656807550013436025 (OEIS A002162)
LN2: Final[Decimal] = Decimal("0.6931471805599453094172321215")


# =============================================================================
# ГРАНИЦЫ ТИПА
# =============================================================================

# Наименьшее положительное представимое значение (10^-28)
SMALLEST_NON_ZERO: Final[Decimal] = Decimal("1E-28")

MAX_VALUE: Final[Decimal] = Decimal(MAX_COEFFICIENT)
MIN_VALUE: Final[Decimal] = Decimal(-MAX_COEFFICIENT)

# Быстрый доступ к 10^n, n = 0..28 (точные целые, без экспоненты)
POWERS_OF_10: Final[tuple[Decimal, ...]] = tuple(
    Decimal(10**exponent) for exponent in range(MAX_SCALE + 1)
)
