"""
Core math modules для decimath

Трансцендентные функции, округление и решатели в десятичной арифметике
фиксированной точности.
"""

# Errors
from decimath.core.errors import (
    DecimalMathError,
    DomainError,
    InverseTrigDomainError,
    NumericOverflowError,
    RangeError,
    UndefinedBaseError,
    UndefinedError,
)

# Constants
from decimath.core.math.constants import (
    E,
    LN2,
    LN10,
    MAX_VALUE,
    MIN_VALUE,
    PI,
    PI_HALF,
    PI_QUARTER,
    PI_THREE_HALVES,
    PI_TWELFTH,
    POWERS_OF_10,
    SMALLEST_NON_ZERO,
    TWO_PI,
)

# Numerical Safeguards
from decimath.core.math.numerical_safeguards import (
    EPS_DECIMAL_ABS,
    EPS_DECIMAL_REL,
    MAX_SERIES_ITERATIONS,
    fixed_precision,
    is_close,
    is_within_units,
    is_zero,
    scaled_tolerance,
)

# Rounding & introspection
from decimath.core.math.rounding import (
    ceiling,
    floor,
    get_decimal_places,
    in_range_excl,
    in_range_incl,
    round_from_zero,
)

# Remainder
from decimath.core.math.remainder import remainder

# Roots
from decimath.core.math.roots import sqrt

# Logarithms
from decimath.core.math.logarithm import ln, log, log2, log10

# Powers & exponential
from decimath.core.math.exponential import (
    exp,
    exp_by_squaring,
    factorial,
    pow2,
    pow10,
    power,
)

# Trigonometry
from decimath.core.math.trig import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    normalize_angle,
    normalize_angle_deg,
    sin,
    tan,
    to_deg,
    to_rad,
)

# Quadratic solver
from decimath.core.math.quadratic import solve_quadratic

# Aggregates
from decimath.core.math.aggregates import ag_mean, average, gcf, maximum, minimum

__all__ = [
    # Errors
    "DecimalMathError",
    "DomainError",
    "InverseTrigDomainError",
    "NumericOverflowError",
    "RangeError",
    "UndefinedBaseError",
    "UndefinedError",
    # Constants
    "E",
    "LN10",
    "LN2",
    "MAX_VALUE",
    "MIN_VALUE",
    "PI",
    "PI_HALF",
    "PI_QUARTER",
    "PI_THREE_HALVES",
    "PI_TWELFTH",
    "POWERS_OF_10",
    "SMALLEST_NON_ZERO",
    "TWO_PI",
    # Numerical Safeguards
    "EPS_DECIMAL_ABS",
    "EPS_DECIMAL_REL",
    "MAX_SERIES_ITERATIONS",
    "fixed_precision",
    "is_close",
    "is_within_units",
    "is_zero",
    "scaled_tolerance",
    # Rounding & introspection
    "ceiling",
    "floor",
    "get_decimal_places",
    "in_range_excl",
    "in_range_incl",
    "round_from_zero",
    # Remainder
    "remainder",
    # Roots
    "sqrt",
    # Logarithms
    "ln",
    "log",
    "log10",
    "log2",
    # Powers & exponential
    "exp",
    "exp_by_squaring",
    "factorial",
    "pow10",
    "pow2",
    "power",
    # Trigonometry
    "acos",
    "asin",
    "atan",
    "atan2",
    "cos",
    "normalize_angle",
    "normalize_angle_deg",
    "sin",
    "tan",
    "to_deg",
    "to_rad",
    # Quadratic solver
    "solve_quadratic",
    # Aggregates
    "ag_mean",
    "average",
    "gcf",
    "maximum",
    "minimum",
]
