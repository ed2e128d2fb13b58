"""
Logarithm — Натуральный логарифм и логарифмы по основанию

Натуральный логарифм вычисляется рядом по y = (x - 1) / (x + 1):

    ln(x) = 2 × (y + y^3/3 + y^5/5 + ...)

Ряд быстро сходится только при x около 1, поэтому аргумент сначала
сводится степенями 10: d = x × 10^k, где k — десятичный порядок числа
(adjusted exponent, точная целочисленная операция над представлением).
Если x всё ещё больше √10, делим ещё раз на 10. В итоге
x ∈ [√10/10, √10], |y| <= 0.52, и ряд сходится примерно за 50 членов:

    ln(d) = ln(x) + k × ln(10)

Тот же приём работает для d < 1 (k < 0), где ряд без сведения сходился бы
сколь угодно медленно.

log10/log2 распознают точные степени десяти двоичным поиском по таблице
POWERS_OF_10 и возвращают результат без ряда (log10(10^k) == k точно).
"""

import logging
from bisect import bisect_left
from decimal import Decimal
from typing import Optional

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import DomainError, NumericOverflowError, UndefinedBaseError
from decimath.core.math.constants import E, LN2, LN10, POWERS_OF_10
from decimath.core.math.numerical_safeguards import (
    MAX_SERIES_ITERATIONS,
    fixed_precision,
    warn_iteration_limit,
)

logger = logging.getLogger(__name__)


# =============================================================================
# НАТУРАЛЬНЫЙ ЛОГАРИФМ
# =============================================================================


def _ln_series(x: Decimal) -> Decimal:
    """Ряд atanh для x, близкого к 1."""
    y = (x - 1) / (x + 1)
    y_squared = y * y

    result = Decimal(0)
    exponent = 2 * y  # == 2 × y^(2i+1)

    for iteration in range(MAX_SERIES_ITERATIONS):
        next_add = exponent / (2 * iteration + 1)

        if next_add == 0:
            logger.debug("ln series for %s converged after %d terms", x, iteration)
            break

        result += next_add
        exponent *= y_squared
    else:
        warn_iteration_limit("ln", x)

    return result


@fixed_precision
def ln(d: DecimalLike) -> Decimal:
    """
    Натуральный логарифм.

    Args:
        d: Положительное число

    Returns:
        ln(d)

    Raises:
        DomainError: Если d < 0 (результат комплексный)
        NumericOverflowError: Если d == 0 (результат -Infinity непредставим)

    Examples:
        >>> ln(1)
        Decimal('0')
        >>> ln(10) == LN10
        True
    """
    d = to_decimal(d, "d")

    if d < 0:
        raise DomainError(f"Natural logarithm is a complex number for values less than zero, got {d}")
    if d == 0:
        raise NumericOverflowError(
            "Natural logarithm is negative infinity at zero, "
            "which the decimal type cannot represent"
        )

    if d == 1:
        return Decimal(0)
    if d == 2:
        return LN2
    if d == 10:
        return LN10
    if d == E:
        return Decimal(1)

    # d = x × 10^scale, x ∈ [1, 10)
    scale = d.adjusted()
    x = d.scaleb(-scale)

    # x ∈ [√10/10, √10]
    if x * x > 10:
        x = x.scaleb(-1)
        scale += 1

    return _ln_series(x) + scale * LN10


def log(d: DecimalLike, b: Optional[DecimalLike] = None) -> Decimal:
    """
    Логарифм по основанию b (натуральный, если b не задан).

    log_b(1) == 0 для любого основания, даже недопустимого.

    Args:
        d: Положительное число
        b: Основание (b > 0, b != 1)

    Returns:
        ln(d) / ln(b)

    Raises:
        UndefinedBaseError: Если b == 1
        DomainError: Если b <= 0 или d < 0
        NumericOverflowError: Если d == 0

    Examples:
        >>> log(1, 1)
        Decimal('0')
        >>> log(1, -5)
        Decimal('0')
    """
    if b is None:
        return ln(d)

    return _log_base(d, b)


@fixed_precision
def _log_base(d: DecimalLike, b: DecimalLike) -> Decimal:
    d = to_decimal(d, "d")
    b = to_decimal(b, "b")

    if d == 1:
        return Decimal(0)

    if b == 1:
        raise UndefinedBaseError("Logarithms are undefined for a base of 1")
    if b <= 0:
        raise DomainError(f"Logarithm base must be positive, got {b}")

    # ln(d) поднимает DomainError для d < 0 и NumericOverflowError для d == 0
    return ln(d) / ln(b)


# =============================================================================
# log10 / log2
# =============================================================================


def _exact_power_of_ten(d: Decimal) -> Optional[int]:
    """
    k, если d == 10^k (k ∈ [-28, 28]), иначе None.

    Двоичный поиск по POWERS_OF_10; для d < 1 ищется обратная величина.
    """
    if d >= 1:
        index = bisect_left(POWERS_OF_10, d)
        if index < len(POWERS_OF_10) and POWERS_OF_10[index] == d:
            return index
        return None

    reciprocal = 1 / d
    index = bisect_left(POWERS_OF_10, reciprocal)
    if index < len(POWERS_OF_10) and POWERS_OF_10[index] == reciprocal:
        return -index
    return None


@fixed_precision
def log10(d: DecimalLike) -> Decimal:
    """
    Десятичный логарифм.

    Точные степени десяти дают точное целое без ряда.

    Raises:
        DomainError: Если d < 0
        NumericOverflowError: Если d == 0

    Examples:
        >>> log10(Decimal("1000.000"))
        Decimal('3')
        >>> log10(Decimal("0.0001"))
        Decimal('-4')
    """
    d = to_decimal(d, "d")

    if d > 0:
        exponent = _exact_power_of_ten(d)
        if exponent is not None:
            return Decimal(exponent)

    return ln(d) / LN10


@fixed_precision
def log2(d: DecimalLike) -> Decimal:
    """
    Двоичный логарифм.

    Для точных степеней десяти ряд не нужен: log2(10^k) = k × ln10 / ln2.

    Raises:
        DomainError: Если d < 0
        NumericOverflowError: Если d == 0
    """
    d = to_decimal(d, "d")

    if d > 0:
        exponent = _exact_power_of_ten(d)
        if exponent is not None:
            return exponent * LN10 / LN2

    return ln(d) / LN2
