"""
fn:format-number for Python.

Formats numbers with XPath/XQuery F&O 3.1 picture strings such as "#,##0.00",
"0.00e0" or "#0%;(#0%)", using a configurable set of decimal format symbols.

Example:
    >>> format_number(1234567.891, "#,##0.00")
    '1,234,567.89'
    >>> format_number(-0.25, "#0%")
    '-25%'
    >>> format_number(1234.5, "#.##0,00", {"decimal-separator": ",", "grouping-separator": "."})
    '1.234,50'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import as_number
from .picture import AnalyzedPicture, parse_picture
from .render import render
from .symbols import SymbolTable, resolve_symbols


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class CompiledPicture:
    """
    A validated and analyzed picture string, ready to format any number of values.

    Attributes:
        picture: The picture string.
        symbols: Symbols the picture was compiled with.
        positive: Sub-picture for values >= 0.
        negative: Sub-picture for values < 0. Derived from positive with the
            minus sign prepended to its prefix when the picture has a single sub-picture.
    """
    picture: str
    symbols: SymbolTable
    positive: AnalyzedPicture
    negative: AnalyzedPicture

    def format(self, value) -> str | None:
        """Format a value, returning None for None."""
        number = as_number(value)
        if number is None:
            return None
        return render(number, self.positive, self.negative, self.symbols)


# Public API -----------------------------------------------------------------------------------------------------------

def compile_picture(picture: str, options: "Mapping[str, Any] | SymbolTable | None" = None) -> CompiledPicture:
    """
    Parse, validate and analyze a picture string.

    Results are memoized per (picture, symbols) pair, so repeated calls with the
    same picture and options return the same CompiledPicture.

    Args:
        picture: Picture string, e.g. "#,##0.00".
        options: Decimal format symbol overrides, see resolve_symbols().

    Returns:
        CompiledPicture for the picture.

    Raises:
        TypeError: If picture is not a str.
        PictureError: If the picture is malformed.
    """
    if not isinstance(picture, str):
        raise TypeError(f"picture must be a str, but got {type(picture).__name__}")
    return _compile(picture, resolve_symbols(options))


def format_number(
        value,
        picture: str,
        options: "Mapping[str, Any] | SymbolTable | None" = None,
) -> str | None:
    """
    Format a number using an F&O fn:format-number picture string.

    Args:
        value: Number to format: int, float, Decimal, Fraction or a numeric
            scalar of a third-party library. None is passed through.
        picture: Picture string with an optional negative sub-picture after the
            pattern separator, e.g. "#,##0.00;(#,##0.00)".
        options: Overrides for the decimal format symbols keyed by F&O property
            name ("decimal-separator", "grouping-separator", "exponent-separator",
            "infinity", "minus-sign", "NaN", "percent", "per-mille", "zero-digit",
            "digit", "pattern-separator") or by SymbolTable attribute name.
            Unknown keys are ignored. A SymbolTable may be passed instead.

    Returns:
        The formatted string, or None if value is None.

    Raises:
        PictureError: If the picture is malformed; error.code tells which rule failed.
        TypeError: If value is not numeric or picture is not a str.
        ValueError: If value is NaN or infinite.

    Examples:
        >>> format_number(None, "#") is None
        True
        >>> format_number(1234, "0.00e0")
        '1.23e3'
        >>> format_number(1234567, "#,##,##0")
        '12,34,567'
        >>> format_number(42, "٠٠٠", {"zero-digit": "٠"})
        '٠٤٢'
    """
    if value is None:
        return None
    return compile_picture(picture, options).format(value)


# Private Methods ------------------------------------------------------------------------------------------------------

@lru_cache(maxsize=256)
def _compile(picture: str, symbols: SymbolTable) -> CompiledPicture:
    analyzed = parse_picture(picture, symbols)
    positive = analyzed[0]
    if len(analyzed) > 1:
        negative = analyzed[1]
    else:
        negative = replace(positive, prefix=symbols.minus_sign + positive.prefix)
    return CompiledPicture(picture=picture, symbols=symbols, positive=positive, negative=negative)
