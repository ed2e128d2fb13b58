"""
Domain model of the kernel.

Contains the fixed-point numeral: its profile, decimal context,
stored representation (DecimalParts) and coercion into the type.
"""

from decimath.core.domain.numeral import (
    KERNEL_CONTEXT,
    MAX_COEFFICIENT,
    MAX_SCALE,
    NUMERAL_PROFILE,
    DecimalLike,
    DecimalParts,
    NumeralProfile,
    decompose,
    fit,
    to_decimal,
)

__all__ = [
    # Profile & context
    "NUMERAL_PROFILE",
    "NumeralProfile",
    "KERNEL_CONTEXT",
    "MAX_COEFFICIENT",
    "MAX_SCALE",
    # Types
    "DecimalLike",
    "DecimalParts",
    # Functions
    "decompose",
    "fit",
    "to_decimal",
]
