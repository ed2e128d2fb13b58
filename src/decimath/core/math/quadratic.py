"""
Quadratic — Вещественные корни a·x² + b·x + c = 0

Классическая формула (-b ± √D) / 2a теряет точность при |b| ≫ |4ac|:
один из корней получается вычитанием почти равных чисел. Поэтому корень,
для которого -b и √D одного знака, считается по классической формуле,
а второй — по сопряжённой (формула Мюллера):

    x = 2c / (-b ∓ √D)

Перед вычислением все коэффициенты, меньшие 1 по модулю, масштабируются
степенями 10 (корни от этого не меняются), чтобы b² и 4ac не ушли под пол
точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет вещественных корней → пустой tuple, не исключение
2. Двойной корень возвращается один раз
3. a == 0 → линейное уравнение (один корень или ни одного)
"""

from decimal import Decimal

from decimath.core.domain.numeral import DecimalLike, to_decimal
from decimath.core.math.constants import SMALLEST_NON_ZERO
from decimath.core.math.numerical_safeguards import fixed_precision
from decimath.core.math.roots import sqrt


def _in_unit_interval(value: Decimal) -> bool:
    return -1 < value < 1


@fixed_precision
def solve_quadratic(a: DecimalLike, b: DecimalLike, c: DecimalLike) -> tuple[Decimal, ...]:
    """
    Вещественные корни уравнения a·x² + b·x + c = 0.

    Args:
        a: Коэффициент при x²
        b: Коэффициент при x
        c: Свободный член

    Returns:
        () — вещественных корней нет (или a == b == 0)
        (x,) — один корень (линейное уравнение или двойной корень)
        (x1, x2) — два различных корня

    Examples:
        >>> solve_quadratic(1, -3, 2) == (2, 1)
        True
        >>> solve_quadratic(1, 0, 1)
        ()
    """
    a = to_decimal(a, "a")
    b = to_decimal(b, "b")
    c = to_decimal(c, "c")

    if a == 0:
        if b == 0:
            return ()
        return (-c / b,)

    # Масштабирование не меняет корней
    while _in_unit_interval(a) and _in_unit_interval(b) and _in_unit_interval(c):
        a *= 10
        b *= 10
        c *= 10

    discriminant = b * b - 4 * a * c

    # Ошибка округления в последнем разряде не должна терять двойной корень
    if discriminant == -SMALLEST_NON_ZERO:
        discriminant = Decimal(0)

    if discriminant < 0:
        return ()

    root = sqrt(discriminant)

    if b == 0:
        # Сопряжённая формула дала бы 0 / 0 при c == 0
        h = root / (2 * a)
        k = -root / (2 * a)
    else:
        h = (-b + root) / (2 * a) if b < 0 else (2 * c) / (-b - root)
        k = (-b - root) / (2 * a) if b > 0 else (2 * c) / (-b + root)

    if h == k:
        return (h,)

    return (h, k)
