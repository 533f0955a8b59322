"""
Normalize numeric input for the number formatter.

Accepts Python numbers, stdlib Decimal/Fraction and duck-typed third-party
scalars (NumPy, PyTorch, ...) and converts them to a finite float.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


# Methods --------------------------------------------------------------------------------------------------------------

def as_number(value) -> float | None:
    """
    Convert a numeric value to a finite float for formatting.

    Parameters
    ----------
    value : various
        Number to convert. Supports int, float, None, Decimal, Fraction and
        third-party scalars via __index__, .item() or __float__.

    Returns
    -------
    float
        The value as float.

    None
        For None input.

    Raises
    ------
    TypeError
        When value is a bool or an unsupported type (str, list, ...).

    ValueError
        When value is NaN or infinite, or too large to be represented as float.

    Detection Priority
    ------------------
    1. int, float fast path
    2. __index__() (NumPy integers)
    3. .item() (array and tensor scalars)
    4. __float__() (Decimal, Fraction, NumPy floats)

    Examples
    --------
    >>> as_number(42)
    42.0
    >>> from decimal import Decimal
    >>> as_number(Decimal("0.25"))
    0.25
    >>> as_number(None) is None
    True
    >>> as_number(float("nan"))
    Traceback (most recent call last):
        ...
    ValueError: cannot format non-finite value nan
    """
    if value is None:
        return None

    # bool is an int subclass, but True is never meant as 1 here
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        return _finite(value)

    # Priority 1: exact integers, e.g. numpy.int64
    if hasattr(value, "__index__"):
        try:
            return _finite(operator.index(value))
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {type(value).__name__} to int via __index__: {e}") from e

    # Priority 2: array/tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            raise TypeError(f"boolean values not supported (from .item()), got {value}")
        if isinstance(result, (int, float)):
            return _finite(result)

    # Priority 3: Decimal, Fraction, numpy floats and friends
    if isinstance(value, SupportsFloat):
        try:
            result = float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {type(value).__name__} to float: {e}") from e
        return _finite(result)

    raise TypeError(
        f"unsupported numeric type: {type(value).__name__}. "
        f"Expected int, float, None, or types implementing __index__, __float__ or .item()"
    )


# Private Methods ------------------------------------------------------------------------------------------------------

def _finite(value: int | float) -> float:
    try:
        result = float(value)
    except OverflowError as e:
        raise ValueError(f"value is too large to format as float: {e}") from e
    if not math.isfinite(result):
        raise ValueError(f"cannot format non-finite value {result}")
    return result
