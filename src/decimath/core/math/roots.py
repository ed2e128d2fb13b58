"""
Roots — Квадратный корень (метод Ньютона / вавилонский метод)

    x_{n+1} = x_n / 2 + (s / 2) / x_n

Начальное приближение берётся из двоичного math.sqrt — это только
затравка, не влияющая на итоговую точность. Итерации останавливаются,
когда следующее приближение совпало с текущим или с позапрошлым
(колебание на полу точности). Фиксированного числа итераций нет:
пол точности типа зависит от модуля значения.
"""

import logging
import math
from decimal import Decimal

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import DomainError
from decimath.core.math.constants import SMALLEST_NON_ZERO
from decimath.core.math.numerical_safeguards import (
    MAX_SERIES_ITERATIONS,
    fixed_precision,
    warn_iteration_limit,
)

logger = logging.getLogger(__name__)


@fixed_precision
def sqrt(s: DecimalLike) -> Decimal:
    """
    Квадратный корень неотрицательного числа.

    Args:
        s: Неотрицательное число

    Returns:
        √s с точностью до последнего представимого разряда

    Raises:
        DomainError: Если s < 0

    Examples:
        >>> sqrt(9) == 3
        True
        >>> sqrt(4294967296) == 65536
        True
    """
    s = to_decimal(s, "s")

    if s < 0:
        raise DomainError(f"Square root is not defined for values less than zero, got {s}")

    # 0 и 1e-28: деление ниже сошлось бы к нулю через бесконечную
    # последовательность всё меньших half_s / x
    if s == 0 or s == SMALLEST_NON_ZERO:
        return Decimal(0)

    half_s = s / 2
    last_x = Decimal(-1)

    # Затравка от двоичной арифметики
    x = to_decimal(math.sqrt(float(s)))
    next_x = x

    for iteration in range(MAX_SERIES_ITERATIONS):
        next_x = x / 2 + half_s / x

        # Кончилась точность типа
        if next_x == x or next_x == last_x:
            logger.debug("sqrt(%s) converged after %d iterations", s, iteration + 1)
            break

        last_x = x
        x = next_x
    else:
        warn_iteration_limit("sqrt", s)

    return next_x
