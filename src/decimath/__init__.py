"""
decimath — Fixed-Precision Decimal Math Kernel

Трансцендентные функции (sqrt, pow/exp, ln/log, тригонометрия), остаток
с сохранением точности, устойчивый квадратный решатель и десятичное
округление, вычисляемые исключительно десятичной арифметикой в пределах
128-битного числа фиксированной точности (96-битный коэффициент, scale 0–28).
"""

from decimath.core.math import *  # noqa: F401,F403
from decimath.core.math import __all__ as _math_all

__version__ = "1.0.0"

__all__ = list(_math_all)
