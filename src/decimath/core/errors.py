"""
Errors — Таксономия ошибок ядра

Все ошибки ядра — ошибки входных данных вызывающей стороны: они никогда не
повторяются внутри и никогда не подавляются. Десятичный тип не имеет
NaN/Inf, поэтому любое неопределённое значение поднимается как исключение.

Каждый класс дополнительно наследует ближайшее встроенное исключение
(ValueError, OverflowError, ZeroDivisionError), чтобы код, не знающий
о decimath, мог перехватывать их привычным образом.
"""


class DecimalMathError(ArithmeticError):
    """Базовый класс всех ошибок ядра."""

    pass


class DomainError(DecimalMathError, ValueError):
    """
    Аргумент вне области определения функции над вещественными числами.

    Примеры: sqrt(-1), ln(-5), нецелый показатель там, где нужен целый,
    NaN/Infinity на входе.
    """

    pass


class NumericOverflowError(DecimalMathError, OverflowError):
    """
    Математический результат бесконечен или непредставим.

    Примеры: ln(0) (= -Infinity), pow(0, -1), результат > 2^96 - 1.
    """

    pass


class UndefinedBaseError(DecimalMathError, ValueError):
    """Логарифм по основанию 1 не определён."""

    pass


class UndefinedError(DecimalMathError, ZeroDivisionError):
    """Тангенс в нечётном кратном π/2 (деление на нулевой косинус)."""

    pass


class RangeError(DecimalMathError, ValueError):
    """
    Параметр вызывающей стороны нарушает предусловие.

    Примеры: отрицательное число знаков округления, upper < lower.
    """

    pass


class InverseTrigDomainError(DomainError, RangeError):
    """
    Аргумент asin/acos вне [-1, 1].

    Одновременно DomainError (результат комплексный) и RangeError
    (аргумент вне допустимого диапазона).
    """

    pass
