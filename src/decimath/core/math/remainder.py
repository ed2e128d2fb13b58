"""
Remainder — Остаток от деления с сохранением точности

Используется для сведения углов к [-2π, 2π] на очень больших модулях,
где обычный остаток (d1 - trunc(d1/d2) * d2) теряет младшие разряды:
произведение trunc(d1/d2) * d2 для d2 с 29 значащими цифрами не
представимо целиком и округляется.

Алгоритм: вычитаем trunc(d1/d2) × d2 поразрядно — сначала целую часть d2,
затем каждую дробную цифру d2 со сдвигом на 10^i. Каждое отдельное
произведение содержит лишь одну значащую цифру d2 и не округляется.

Пример:
    remainder(1.7e27, 2π) = 4.5962074945229569987647604598...
"""

from decimal import ROUND_DOWN, Decimal

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.errors import DomainError
from decimath.core.math.constants import POWERS_OF_10
from decimath.core.math.numerical_safeguards import decimal_sign, fixed_precision
from decimath.core.math.rounding import get_decimal_places


@fixed_precision
def remainder(d1: DecimalLike, d2: DecimalLike) -> Decimal:
    """
    Остаток d1 по модулю d2 с максимальным сохранением точности.

    Знак результата совпадает со знаком d1 (как у усечённого деления).

    Args:
        d1: Делимое
        d2: Делитель (ненулевой)

    Returns:
        d1 - trunc(d1 / d2) * d2, вычисленный поразрядно

    Raises:
        DomainError: Если d2 == 0

    Examples:
        >>> remainder(Decimal(12), Decimal("2.5"))
        Decimal('2.0')
        >>> remainder(Decimal(-450), Decimal(360))
        Decimal('-90')
    """
    d1 = to_decimal(d1, "d1")
    d2 = to_decimal(d2, "d2")

    if d2 == 0:
        raise DomainError("Remainder is undefined for a divisor of 0")

    if abs(d1) < abs(d2):
        return d1

    times_into = (d1 / d2).to_integral_value(rounding=ROUND_DOWN)
    shifting_number = d2
    sign = decimal_sign(d1)

    for i in range(get_decimal_places(d2, True) + 1):
        # Первая "цифра": целая часть d2
        digit = shifting_number.to_integral_value(rounding=ROUND_DOWN)

        d1 -= times_into * (digit / POWERS_OF_10[i])

        # Убираем использованную цифру и сдвигаем следующую
        shifting_number = (shifting_number - digit) * 10
        if shifting_number == 0:
            break

    # Несовпадение точностей могло перевести результат через ноль:
    # возвращаем один целый d2
    if d1 != 0 and decimal_sign(d1) != sign:
        d1 = d1 + d2 if decimal_sign(d2) == sign else d1 - d2

    return d1
