"""
Arrow Engine — Display Rounding

Fixed-point rounding used at the display boundary. Ties round half away
from zero on the exact binary value of the float; non-finite values pass
through unchanged and render as ``NaN`` / ``Infinity`` / ``-Infinity``.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Decimal places per ArrowMetrics field
DISPLAY_PRECISION = {
    "total_weight": 1,
    "foc": 2,
    "balance_point": 2,
    "kinetic_energy": 1,
    "momentum": 2,
}


# Enough significant digits for any finite float (max ~1.8e308) plus decimals
QUANTIZE_PRECISION = 400


def _quantize(value: float, ndigits: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = QUANTIZE_PRECISION
        return Decimal(value).quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP)


def round_half_up(value: float, ndigits: int) -> float:
    """Round to ``ndigits`` decimals, ties away from zero."""
    if not math.isfinite(value):
        return value
    return float(_quantize(value, ndigits))


def format_fixed(value: float, ndigits: int) -> str:
    """Render ``value`` with exactly ``ndigits`` decimals.

    >>> format_fixed(396.25, 1)
    '396.3'
    >>> format_fixed(float("nan"), 2)
    'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(_quantize(value, ndigits))
