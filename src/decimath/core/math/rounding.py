"""
Rounding — Десятичное округление и интроспекция

Модуль работает с хранимым представлением числа, а не с его float-образом:
- floor/ceiling на заданном числе дробных знаков
- Округление half-away-from-zero (round_from_zero)
- Подсчёт дробных знаков с хвостовыми нулями и без них
- Проверки попадания в диапазон (включительно/исключительно)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. places < 0 → RangeError, никогда не молчаливая подмена
2. places >= 28 → значение возвращается без изменений (предел точности типа)
3. Значение, уже имеющее не больше places дробных знаков, не переквантуется
"""

from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal

from decimath.core.domain.numeral import MAX_SCALE, DecimalLike, decompose, to_decimal
from decimath.core.errors import RangeError
from decimath.core.math.numerical_safeguards import fixed_precision, validate_places


# =============================================================================
# ОКРУГЛЕНИЕ НА ЗАДАННОМ ЧИСЛЕ ЗНАКОВ
# =============================================================================


def _quantize(value: Decimal, places: int, rounding: str) -> Decimal:
    # Уже не точнее нужного: quantize лишь добавил бы нули (и мог бы
    # превысить точность контекста для больших значений)
    if value.as_tuple().exponent >= -places:
        return value

    return value.quantize(Decimal((0, (1,), -places)), rounding=rounding)


@fixed_precision
def floor(value: DecimalLike, places: int = 0) -> Decimal:
    """
    Floor значения на заданном числе дробных знаков.

    Args:
        value: Исходное значение
        places: Максимальное число дробных знаков результата

    Returns:
        Наибольшее число с places знаками, не превышающее value

    Raises:
        RangeError: Если places < 0

    Examples:
        >>> floor(Decimal("1.239"), 2)
        Decimal('1.23')
        >>> floor(Decimal("-1.231"), 2)
        Decimal('-1.24')
    """
    validate_places(places, "places")
    value = to_decimal(value)

    # На пределе точности типа или за ним
    if places >= MAX_SCALE:
        return value

    return _quantize(value, places, ROUND_FLOOR)


@fixed_precision
def ceiling(value: DecimalLike, places: int = 0) -> Decimal:
    """
    Ceiling значения на заданном числе дробных знаков.

    Args:
        value: Исходное значение
        places: Максимальное число дробных знаков результата

    Returns:
        Наименьшее число с places знаками, не меньшее value

    Raises:
        RangeError: Если places < 0

    Examples:
        >>> ceiling(Decimal("1.231"), 2)
        Decimal('1.24')
        >>> ceiling(Decimal("-1.239"), 2)
        Decimal('-1.23')
    """
    validate_places(places, "places")
    value = to_decimal(value)

    if places >= MAX_SCALE:
        return value

    return _quantize(value, places, ROUND_CEILING)


@fixed_precision
def round_from_zero(value: DecimalLike, decimals: int) -> Decimal:
    """
    Округление до decimals знаков, середина — от нуля.

    В отличие от банковского округления (ROUND_HALF_EVEN) середина
    всегда уходит от нуля: 2.5 → 3, -2.5 → -3.
    В модуле decimal это ROUND_HALF_UP.

    Raises:
        RangeError: Если decimals < 0

    Examples:
        >>> round_from_zero(Decimal("2.5"), 0)
        Decimal('3')
        >>> round_from_zero(Decimal("-0.125"), 2)
        Decimal('-0.13')
    """
    validate_places(decimals, "decimals")
    value = to_decimal(value)

    if decimals >= MAX_SCALE:
        return value

    return _quantize(value, decimals, ROUND_HALF_UP)


# =============================================================================
# ИНТРОСПЕКЦИЯ
# =============================================================================


def get_decimal_places(value: DecimalLike, count_trailing_zeros: bool) -> int:
    """
    Число дробных знаков значения.

    Args:
        value: Исходное значение
        count_trailing_zeros: True — хранимый scale как есть (1.50 → 2);
            False — только значащие дробные цифры (1.50 → 1)

    Returns:
        Число дробных знаков (0..28)

    Examples:
        >>> get_decimal_places(Decimal("1.500"), True)
        3
        >>> get_decimal_places(Decimal("1.500"), False)
        1
    """
    parts = decompose(value)
    result = parts.scale

    if count_trailing_zeros or result == 0:
        return result

    # Снимаем хвостовые нули по одной цифре
    raw_value = parts.coefficient
    while result > 0 and raw_value % 10 == 0:
        result -= 1
        raw_value //= 10

    return result


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def _validate_limits(lower_limit: Decimal, upper_limit: Decimal) -> None:
    if upper_limit < lower_limit:
        raise RangeError(
            f"Upper limit {upper_limit} is less than lower limit {lower_limit}"
        )


def in_range_incl(
    value: DecimalLike, lower_limit: DecimalLike, upper_limit: DecimalLike
) -> bool:
    """
    Проверка lower_limit <= value <= upper_limit.

    Raises:
        RangeError: Если upper_limit < lower_limit
    """
    value = to_decimal(value)
    lower_limit = to_decimal(lower_limit, "lower_limit")
    upper_limit = to_decimal(upper_limit, "upper_limit")
    _validate_limits(lower_limit, upper_limit)

    return lower_limit <= value <= upper_limit


def in_range_excl(
    value: DecimalLike, lower_limit: DecimalLike, upper_limit: DecimalLike
) -> bool:
    """
    Проверка lower_limit < value < upper_limit.

    Raises:
        RangeError: Если upper_limit < lower_limit
    """
    value = to_decimal(value)
    lower_limit = to_decimal(lower_limit, "lower_limit")
    upper_limit = to_decimal(upper_limit, "upper_limit")
    _validate_limits(lower_limit, upper_limit)

    return lower_limit < value < upper_limit
