"""Fixed-point policy and helpers shared by the engines.

All rounding is ROUND_HALF_UP. Quotients are computed exactly up to the requested
scale and rounded once. Ratios and slopes keep extra digits; only values handed
back to callers are rounded to MONEY_SCALE.
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, localcontext

# Fractional digits of every value handed back to callers (estimates, money)
MONEY_SCALE = 2
# Fractional digits kept for the interpolation slope
SLOPE_SCALE = 10
# Fractional digits kept for the tenant/total consumption ratio
RATIO_SCALE = 6

# Significant digits of the local context used for all engine arithmetic
WORKING_PRECISION = 60


def wide_context():
    """Local decimal context wide enough for exact engine arithmetic."""
    return localcontext(prec=WORKING_PRECISION)


def to_scale(value: Decimal, scale: int) -> Decimal:
    """Round value half-up to `scale` fractional digits."""
    with wide_context():
        return value.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)


def divide(numerator: Decimal, denominator: Decimal, scale: int) -> Decimal:
    """Divide and round half-up to `scale` fractional digits.

    The quotient is truncated toward zero at a precision wider than `scale + 1`
    digits first; truncation keeps the half-up decision intact, so the result is
    the same as rounding the exact quotient.
    """
    with wide_context() as ctx:
        ctx.rounding = ROUND_DOWN
        quotient = Decimal(numerator) / Decimal(denominator)
    return to_scale(quotient, scale)
