"""
Render a number with an analyzed picture (F&O 4.7.5).
"""

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .picture import AnalyzedPicture
from .rounding import round_half
from .symbols import SymbolTable


# Methods --------------------------------------------------------------------------------------------------------------

def render(value: float, positive: AnalyzedPicture, negative: AnalyzedPicture, symbols: SymbolTable) -> str:
    """
    Format a finite float with the positive or negative sub-picture.

    The value must already be finite; the negative sub-picture is expected to
    carry the minus sign in its prefix when the picture did not supply one.

    Examples:
        >>> from numfmt.picture import parse_picture
        >>> pos, = parse_picture("#,##0.00", SymbolTable())
        >>> render(1234.5, pos, pos, SymbolTable())
        '1,234.50'
    """
    pic = positive if value >= 0 else negative
    zero = symbols.digit_family[0]
    dsep = symbols.decimal_separator

    if symbols.percent in pic.picture:
        adjusted = value * 100
    elif symbols.per_mille in pic.picture:
        adjusted = value * 1000
    else:
        adjusted = value

    mantissa, exponent = _split_exponent(abs(adjusted), pic)

    rounded = round_half(mantissa, pic.maximum_fractional_digits)
    if exponent is not None and rounded >= 10 ** pic.scaling_factor:
        # Rounding carried into the next power, e.g. 9.999 -> 10.00
        exponent += 1
        rounded = round_half(_shift(rounded, -1), pic.maximum_fractional_digits)
    text = symbols.to_family(format(abs(rounded), f".{pic.maximum_fractional_digits}f"))
    if "." in text:
        text = text.replace(".", dsep, 1)
    else:
        text += dsep

    # Strip zeros on both ends, the decimal separator keeps them apart
    text = text.lstrip(zero).rstrip(zero)

    decimal_pos = text.find(dsep)
    pad_left = pic.minimum_integer_digits - decimal_pos
    pad_right = pic.minimum_fractional_digits - (len(text) - decimal_pos - len(dsep))
    text = zero * max(pad_left, 0) + text + zero * max(pad_right, 0)

    text = _group_integer(text, pic, symbols)
    text = _group_fraction(text, pic, symbols)

    if text.endswith(dsep):
        text = text[:-len(dsep)]

    if exponent is not None:
        digits = symbols.to_family(str(abs(exponent)))
        digits = zero * max(pic.minimum_exponent_digits - len(digits), 0) + digits
        sign = symbols.minus_sign if exponent < 0 else ""
        text += symbols.exponent_separator + sign + digits

    return pic.prefix + text + pic.suffix


# Private Methods ------------------------------------------------------------------------------------------------------

def _split_exponent(magnitude: float, pic: AnalyzedPicture) -> tuple[float, int | None]:
    """Scale magnitude into [10**(scaling_factor-1), 10**scaling_factor) and count the exponent."""
    if pic.minimum_exponent_digits == 0:
        return magnitude, None
    if magnitude == 0:
        return magnitude, 0
    # adjusted() is the exponent of the leading digit, counted on the exact decimal form
    exponent = Decimal(repr(magnitude)).adjusted() + 1 - pic.scaling_factor
    return _shift(magnitude, -exponent), exponent


def _shift(value: float, places: int) -> float:
    """Multiply value by 10**places on its decimal form, without binary drift."""
    return float(Decimal(repr(value)).scaleb(places))


def _group_integer(text: str, pic: AnalyzedPicture, symbols: SymbolTable) -> str:
    gsep = symbols.grouping_separator
    decimal_pos = text.find(symbols.decimal_separator)
    if pic.regular_grouping > 0:
        interval = pic.regular_grouping
        for group in range(1, (decimal_pos - 1) // interval + 1):
            at = decimal_pos - group * interval
            text = text[:at] + gsep + text[at:]
        return text
    # Explicit positions are listed left to right, each insertion shifts the decimal separator
    for pos in pic.integer_grouping_positions:
        if 0 < pos < decimal_pos:
            at = decimal_pos - pos
            text = text[:at] + gsep + text[at:]
            decimal_pos += len(gsep)
    return text


def _group_fraction(text: str, pic: AnalyzedPicture, symbols: SymbolTable) -> str:
    gsep = symbols.grouping_separator
    start = text.find(symbols.decimal_separator) + len(symbols.decimal_separator)
    inserted = 0
    for pos in pic.fractional_grouping_positions:
        if 0 < pos < len(text) - start - inserted:
            at = start + pos + inserted
            text = text[:at] + gsep + text[at:]
            inserted += len(gsep)
    return text
