"""
Numerical Safeguards — Precision & Termination Primitives

Модуль обеспечивает численную дисциплину всех функций ядра:
- Выполнение в контексте фиксированной точности (fixed_precision)
- Подгонка результата под представимый диапазон типа
- Трансляция decimal.Overflow в NumericOverflowError, decimal.InvalidOperation в DomainError
- Страховочный предел итераций для рядов и итерационных методов
- Сравнения Decimal с учётом пола точности (precision floor)
- Валидация целочисленных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая публичная функция ядра работает в копии KERNEL_CONTEXT
   (потоко-локально, без общей изменяемой памяти)
2. Каждый возвращаемый Decimal представим в типе
3. Ни один цикл не выполняется бесконечно: ряд останавливается на нулевом
   члене, а предел итераций — лишь страховка, которая логируется
4. Все операции детерминированы и воспроизводимы
"""

import functools
import logging
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Callable, Final, TypeVar

from decimath.core.domain.numeral import KERNEL_CONTEXT, DecimalLike, decompose, fit, to_decimal
from decimath.core.errors import DomainError, NumericOverflowError, RangeError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Страховочный предел итераций для рядов и итерационных методов.
# Самый медленный ряд ядра (Euler-ряд ATan при |x| = 1) сходится
# примерно за сто итераций.
MAX_SERIES_ITERATIONS: Final[int] = 1000

# Абсолютная толерантность по умолчанию: одна единица последнего разряда
EPS_DECIMAL_ABS: Final[Decimal] = Decimal("1E-28")

# Относительная толерантность по умолчанию (~28 значащих цифр)
EPS_DECIMAL_REL: Final[Decimal] = Decimal("1E-27")


# =============================================================================
# КОНТЕКСТ ФИКСИРОВАННОЙ ТОЧНОСТИ
# =============================================================================


def _fit_result(result: Any) -> Any:
    if isinstance(result, Decimal):
        return fit(result)
    if isinstance(result, tuple):
        return tuple(fit(item) if isinstance(item, Decimal) else item for item in result)
    return result


def fixed_precision(func: F) -> F:
    """
    Декоратор: выполнение функции в контексте ядра.

    - Открывает localcontext(KERNEL_CONTEXT) — вложенные вызовы безопасны
    - Подгоняет Decimal-результат (и элементы tuple) под диапазон типа
    - Переводит decimal.Overflow в NumericOverflowError (с цепочкой from)
    - Переводит decimal.InvalidOperation в DomainError (с цепочкой from)
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with localcontext(KERNEL_CONTEXT):
            try:
                return _fit_result(func(*args, **kwargs))
            except Overflow as exc:
                raise NumericOverflowError(
                    f"{func.__name__}: intermediate result exceeds the decimal range"
                ) from exc
            except InvalidOperation as exc:
                raise DomainError(
                    f"{func.__name__}: operation is undefined in the decimal type"
                ) from exc

    return wrapper  # type: ignore[return-value]


# =============================================================================
# СТРАХОВКА ОТ БЕСКОНЕЧНЫХ ЦИКЛОВ
# =============================================================================


def warn_iteration_limit(operation: str, argument: Decimal) -> None:
    """
    Фиксация срабатывания страховочного предела итераций.

    Вызывается из ветки else цикла for, т.е. только если ряд не дошёл
    до нулевого члена за MAX_SERIES_ITERATIONS шагов. Возвращается
    частичная сумма.
    """
    logger.warning(
        "%s(%s) did not reach the precision floor after %d iterations; "
        "returning the partial result",
        operation,
        argument,
        MAX_SERIES_ITERATIONS,
    )


# =============================================================================
# СРАВНЕНИЯ DECIMAL
# =============================================================================


def decimal_sign(value: Decimal) -> int:
    """
    Знак значения: -1, 0 или +1.

    Examples:
        >>> decimal_sign(Decimal("-0.5"))
        -1
        >>> decimal_sign(Decimal("0E-28"))
        0
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def is_close(
    a: Decimal,
    b: Decimal,
    rel_tol: Decimal = EPS_DECIMAL_REL,
    abs_tol: Decimal = EPS_DECIMAL_ABS,
) -> bool:
    """
    Сравнение Decimal с учётом пола точности.

    Алгоритм (как math.isclose, но без перевода в float):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(Decimal("1"), Decimal("1.0000000000000000000000000001"))
        True
        >>> is_close(Decimal("1"), Decimal("1.001"))
        False
    """
    with localcontext(KERNEL_CONTEXT):
        diff = abs(a - b)
        return diff <= max(rel_tol * max(abs(a), abs(b)), abs_tol)


def is_zero(value: Decimal, tol: Decimal = EPS_DECIMAL_ABS) -> bool:
    """
    Проверка близости к нулю: abs(value) <= tol.
    """
    return abs(value) <= tol


def scaled_tolerance(reference: DecimalLike, units: int) -> Decimal:
    """
    Толерантность в единицах последнего хранимого разряда reference.

    Хвостовые нули учитываются: у 1.50 последний разряд — сотые.

    Examples:
        >>> scaled_tolerance(Decimal("0.125"), 5)
        Decimal('0.005')
        >>> scaled_tolerance(Decimal("1.50"), 1)
        Decimal('0.01')
    """
    with localcontext(KERNEL_CONTEXT):
        return Decimal(units).scaleb(-decompose(reference).scale)


def is_within_units(actual: DecimalLike, expected: DecimalLike, units: int) -> bool:
    """
    Сравнение с допуском в units единиц последнего разряда expected.

    expected сначала приводится к типу (лишние цифры литерала округляются),
    поэтому допуск отсчитывается от представимого значения.

    Examples:
        >>> is_within_units(Decimal("0.1234"), Decimal("0.1230"), 5)
        True
        >>> is_within_units(Decimal("0.1236"), Decimal("0.1230"), 5)
        False
    """
    expected = to_decimal(expected, "expected")
    actual = to_decimal(actual, "actual")

    return is_close(
        actual,
        expected,
        rel_tol=Decimal(0),
        abs_tol=scaled_tolerance(expected, units),
    )


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_integral(value: Decimal) -> bool:
    """True если значение целое (1, 1.000, 1E+3)."""
    return value == value.to_integral_value()


def validate_non_negative_integer(value: Decimal, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    Raises:
        DomainError: Если value < 0 или имеет дробную часть
    """
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}")

    if not is_integral(value):
        raise DomainError(f"{name} must be an integer, got {value}")


def validate_places(places: int, name: str) -> None:
    """
    Валидация числа десятичных знаков.

    Raises:
        TypeError: Если places не int
        RangeError: Если places < 0
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise TypeError(f"{name} must be an int, got {type(places).__name__}")

    if places < 0:
        raise RangeError(f"{name} must be greater than or equal to 0, got {places}")
