"""
Aggregates — Агрегаты над несколькими значениями

- gcf: наибольший общий делитель (алгоритм Евклида), работает и для
  дробных значений: gcf(1.2, 0.42) == 0.06. Остатки считаются точно на
  целых, приведённых к общей экспоненте, поэтому частное любой длины
  не упирается в точность контекста
- ag_mean: арифметико-геометрическое среднее
- average: среднее арифметическое с обходом переполнения суммы
- maximum/minimum: наибольшее и наименьшее из набора значений
"""

import logging
from decimal import Decimal, Overflow

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import DomainError, RangeError
from decimath.core.math.numerical_safeguards import (
    MAX_SERIES_ITERATIONS,
    decimal_sign,
    fixed_precision,
    warn_iteration_limit,
)
from decimath.core.math.roots import sqrt

logger = logging.getLogger(__name__)


def _scaled_integer(value: Decimal, exponent: int) -> int:
    """value × 10^-exponent как точное целое (exponent <= экспоненты value)."""
    sign, digits, value_exponent = value.as_tuple()
    coefficient = int("".join(str(digit) for digit in digits))
    coefficient *= 10 ** (value_exponent - exponent)
    return -coefficient if sign else coefficient


def _gcf_pair(a: Decimal, b: Decimal) -> Decimal:
    exponent = min(a.as_tuple().exponent, b.as_tuple().exponent)
    x = _scaled_integer(a, exponent)
    y = _scaled_integer(b, exponent)

    # Остаток усечённого деления: знак делимого
    while y != 0:
        rest = abs(x) % abs(y)
        x, y = y, -rest if x < 0 else rest

    # |НОД| <= min(|a|, |b|): обратное масштабирование не переполняется
    return Decimal(x).scaleb(exponent)


@fixed_precision
def gcf(a: DecimalLike, b: DecimalLike, *values: DecimalLike) -> Decimal:
    """
    Наибольший общий делитель двух и более чисел.

    Examples:
        >>> gcf(12, 18)
        Decimal('6')
        >>> gcf(Decimal("1.2"), Decimal("0.42"))
        Decimal('0.06')
    """
    result = _gcf_pair(to_decimal(a, "a"), to_decimal(b, "b"))

    for index, value in enumerate(values):
        result = _gcf_pair(result, to_decimal(value, f"values[{index}]"))

    return result


@fixed_precision
def ag_mean(x: DecimalLike, y: DecimalLike) -> Decimal:
    """
    Арифметико-геометрическое среднее.

        a_{n+1} = (a_n + g_n) / 2,  g_{n+1} = √(a_n × g_n)

    Для двух отрицательных значений считается AGM модулей со знаком минус.

    Raises:
        DomainError: Если знаки x и y различаются (результат комплексный)

    Examples:
        >>> ag_mean(0, 6)
        Decimal('0')
    """
    x = to_decimal(x, "x")
    y = to_decimal(y, "y")

    if x == 0 or y == 0:
        return Decimal(0)

    sign = decimal_sign(x)
    if sign != decimal_sign(y):
        raise DomainError(
            f"Arithmetic-geometric mean of {x} and {y} is a complex number"
        )

    if sign == -1:
        x = -x
        y = -y

    a = x
    for iteration in range(MAX_SERIES_ITERATIONS):
        a = x / 2 + y / 2
        g = sqrt(x * y)

        # Сошлось или застряло на полу точности
        if a == g or (g == y and a == x):
            logger.debug("ag_mean converged after %d iterations", iteration + 1)
            break

        x = a
        y = g
    else:
        warn_iteration_limit("ag_mean", a)

    return -a if sign == -1 else a


def _coerce_values(values: tuple[DecimalLike, ...], operation: str) -> list[Decimal]:
    if not values:
        raise RangeError(f"{operation} requires at least one value")

    return [to_decimal(value, f"values[{index}]") for index, value in enumerate(values)]


@fixed_precision
def average(*values: DecimalLike) -> Decimal:
    """
    Среднее арифметическое.

    Если сумма не помещается в тип, значения сначала делятся на их
    количество (чуть менее точно, но без переполнения).

    Raises:
        RangeError: Если значений нет

    Examples:
        >>> average(5, 10, 34, 8)
        Decimal('14.25')
    """
    numbers = _coerce_values(values, "Average")
    count = len(numbers)

    try:
        return sum(numbers) / count
    except Overflow:
        logger.debug("average: sum of %d values overflows, dividing first", count)
        return sum(number / count for number in numbers)


@fixed_precision
def maximum(*values: DecimalLike) -> Decimal:
    """
    Наибольшее значение набора.

    При равенстве возвращается первое из равных.

    Raises:
        RangeError: Если значений нет

    Examples:
        >>> maximum(3, "7.5", -2)
        Decimal('7.5')
    """
    return max(_coerce_values(values, "Maximum"))


@fixed_precision
def minimum(*values: DecimalLike) -> Decimal:
    """
    Наименьшее значение набора.

    Raises:
        RangeError: Если значений нет

    Examples:
        >>> minimum(3, "7.5", -2)
        Decimal('-2')
    """
    return min(_coerce_values(values, "Minimum"))
