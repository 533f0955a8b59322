"""
Decimal rounding of float values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from typing import Literal

# Constants ------------------------------------------------------------------------------------------------------------

_MODES = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
}


# Methods --------------------------------------------------------------------------------------------------------------

def round_half(
        value: float,
        digits: int = 0,
        *,
        mode: Literal["half_up", "half_even"] = "half_up",
) -> float:
    """
    Round a float to a number of fractional digits.

    Rounding is done on the shortest decimal representation of the float (its
    repr), so values that print as an exact tie are treated as ties.

    Args:
        value: Finite float to round.
        digits: Number of fractional digits to keep, >= 0.
        mode: "half_up" rounds ties away from zero, "half_even" rounds ties to
            the even neighbour.

    Returns:
        The rounded value as float. Signed zero is preserved.

    Raises:
        ValueError: If digits is negative or mode is unknown.

    Examples:
        >>> round_half(2.675, 2)
        2.68
        >>> round_half(-2.5)
        -3.0
        >>> round_half(2.5, mode="half_even")
        2.0
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, but got {digits}")
    if mode not in _MODES:
        raise ValueError(f"mode must be 'half_up' or 'half_even', but got {mode!r}")
    if value == 0 or not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # quantize fails when the result needs more digits than the context precision
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=_MODES[mode]))
