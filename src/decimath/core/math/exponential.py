"""
Exponential — Степени и экспонента

Модуль вычисляет:
- Целые степени возведением в квадрат (O(log y) умножений)
- Вещественные степени через разложение y = trunc(y) + frac:
      x^y = x^trunc(y) × exp(frac × ln(x))
  Это точнее, чем exp(y × ln(x)): аргумент ряда Тейлора остаётся малым
- exp(d) через разложение на целую и дробную части; дробная часть —
  прямое суммирование ряда Σ d^i / i! до члена, округлившегося в ноль

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательная степень нуля → NumericOverflowError (результат бесконечен)
2. Дробная степень отрицательного основания → DomainError (через ln)
3. Рекурсия exp → exp строго уменьшает аргумент до базового случая
"""

import logging
from decimal import ROUND_DOWN, Decimal

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import DomainError, NumericOverflowError
from decimath.core.math.constants import E
from decimath.core.math.logarithm import ln
from decimath.core.math.numerical_safeguards import (
    MAX_SERIES_ITERATIONS,
    fixed_precision,
    validate_non_negative_integer,
    warn_iteration_limit,
)

logger = logging.getLogger(__name__)


# =============================================================================
# СТЕПЕНИ
# =============================================================================


@fixed_precision
def power(x: DecimalLike, y: DecimalLike) -> Decimal:
    """
    x в степени y.

    Args:
        x: Основание
        y: Показатель (любой знак, может быть дробным)

    Returns:
        x^y

    Raises:
        NumericOverflowError: 0 в отрицательной степени
        DomainError: дробная степень отрицательного основания (комплексный результат)

    Examples:
        >>> power(5, 40)
        Decimal('9094947017729282379150390625')
        >>> power(2, -2)
        Decimal('0.25')
    """
    x = to_decimal(x, "x")
    y = to_decimal(y, "y")

    is_negative_exponent = y < 0
    y = abs(y)

    if y == 0:
        result = Decimal(1)
    elif y == 1:
        result = x
    elif x == 0:
        # 0^y = 0 для y > 0; ln(0) ниже не определён
        result = Decimal(0)
    else:
        t = y.to_integral_value(rounding=ROUND_DOWN)

        if y == t:
            result = exp_by_squaring(x, y)
        else:
            result = exp_by_squaring(x, t) * exp((y - t) * ln(x))

    if is_negative_exponent:
        # Для IEEE float это было бы Infinity
        if result == 0:
            raise NumericOverflowError("Negative power of 0 is undefined")

        result = 1 / result

    return result


@fixed_precision
def exp_by_squaring(x: DecimalLike, y: DecimalLike) -> Decimal:
    """
    x в неотрицательной целой степени y возведением в квадрат.

    Raises:
        DomainError: Если y < 0 или y не целое
    """
    x = to_decimal(x, "x")
    y = to_decimal(y, "y")
    validate_non_negative_integer(y, "y")

    exponent = int(y)
    result = Decimal(1)
    multiplier = x

    while exponent > 0:
        if exponent % 2 == 1:
            result *= multiplier
            exponent -= 1
            # Последнее возведение в квадрат не нужно и может переполниться
            if exponent == 0:
                break

        multiplier *= multiplier
        exponent //= 2

    return result


@fixed_precision
def pow10(y: DecimalLike) -> Decimal:
    """10 в степени y."""
    return power(10, y)


@fixed_precision
def pow2(y: DecimalLike) -> Decimal:
    """2 в степени y."""
    return power(2, y)


# =============================================================================
# ЭКСПОНЕНТА
# =============================================================================


@fixed_precision
def exp(d: DecimalLike) -> Decimal:
    """
    e в степени d.

    Args:
        d: Показатель

    Returns:
        e^d

    Raises:
        NumericOverflowError: Если e^d вне диапазона типа (d > ~66.5)

    Examples:
        >>> exp(0)
        Decimal('1')
        >>> exp(1) == E
        True
    """
    d = to_decimal(d, "d")

    reciprocal = d < 0
    d = abs(d)
    t = d.to_integral_value(rounding=ROUND_DOWN)

    if d == 0:
        result = Decimal(1)
    elif d == 1:
        result = E
    elif d > 1 and t != d:
        # Целая и дробная части отдельно: аргумент ряда остаётся < 1
        result = exp(t) * exp(d - t)
    elif d == t:
        result = exp_by_squaring(E, d)
    else:
        # Дробная степень < 1: Σ d^i / i!
        result = Decimal(1)
        next_add = Decimal(1)

        for iteration in range(1, MAX_SERIES_ITERATIONS + 1):
            next_add *= d / iteration  # == d^i / i!

            if next_add == 0:
                logger.debug("exp(%s) converged after %d terms", d, iteration)
                break

            result += next_add
        else:
            warn_iteration_limit("exp", d)

    # result никогда не равен нулю здесь
    if reciprocal:
        result = 1 / result

    return result


# =============================================================================
# ФАКТОРИАЛ
# =============================================================================


@fixed_precision
def factorial(n: DecimalLike) -> Decimal:
    """
    n! = n × (n - 1) × ... × 1

    Поддерживаются только неотрицательные целые. 27! — наибольший
    факториал, представимый в типе.

    Raises:
        DomainError: Если n < 0 или n не целое
        NumericOverflowError: Если n! вне диапазона типа

    Examples:
        >>> factorial(5)
        Decimal('120')
    """
    n = to_decimal(n, "n")
    validate_non_negative_integer(n, "n")

    result = Decimal(1)
    for i in range(int(n), 1, -1):
        result *= i

    return result
