"""
Picture string parsing for fn:format-number.

A picture holds one or two sub-pictures separated by the pattern separator.
Each sub-picture is split into its parts (split_picture), checked against the
F&O 4.7.3 rules (validate_parts) and reduced to the numbers the renderer needs
(analyze_parts).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from functools import reduce

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import PictureError, PictureErrorCode as Code
from .symbols import SymbolTable


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PictureParts:
    """
    The parts of one sub-picture.

    Attributes:
        subpicture: Full sub-picture text.
        prefix: Passive characters before the first active character.
        suffix: Passive characters after the last active character.
        active_part: Text between prefix and suffix.
        mantissa_part: Active part before the exponent separator.
        exponent_part: Active part after the exponent separator, None if there is no exponent.
        integer_part: Mantissa before the decimal separator.
        fractional_part: Mantissa after the decimal separator. Holds the suffix
            when the mantissa has no decimal separator.
    """
    subpicture: str
    prefix: str
    suffix: str
    active_part: str
    mantissa_part: str
    exponent_part: str | None
    integer_part: str
    fractional_part: str

    @property
    def has_exponent(self) -> bool:
        return self.exponent_part is not None


@dataclass(frozen=True)
class AnalyzedPicture:
    """
    Formatting parameters derived from one sub-picture (F&O 4.7.4).

    Grouping positions count digit positions away from the decimal separator.
    regular_grouping is the constant grouping interval, or 0 if the integer
    grouping positions are irregular and must be used as listed.
    """
    integer_grouping_positions: tuple[int, ...]
    regular_grouping: int
    minimum_integer_digits: int
    scaling_factor: int
    prefix: str
    fractional_grouping_positions: tuple[int, ...]
    minimum_fractional_digits: int
    maximum_fractional_digits: int
    minimum_exponent_digits: int
    suffix: str
    picture: str


# Methods --------------------------------------------------------------------------------------------------------------

def split_picture(picture: str, symbols: SymbolTable) -> tuple[PictureParts, ...]:
    """
    Split a picture string into the parts of its one or two sub-pictures.

    Raises:
        PictureError: D3080 if the picture has more than two sub-pictures.

    Examples:
        >>> parts, = split_picture("#,##0.00 EUR", SymbolTable())
        >>> parts.integer_part, parts.fractional_part, parts.suffix
        ('#,##0', '00', ' EUR')
    """
    subpictures = picture.split(symbols.pattern_separator)
    if len(subpictures) > 2:
        raise PictureError(Code.TOO_MANY_SUBPICTURES, picture)
    return tuple(_split_subpicture(sub, symbols) for sub in subpictures)


def validate_parts(parts: PictureParts, symbols: SymbolTable) -> None:
    """
    Check a sub-picture against the F&O 4.7.3 rules.

    Every rule is evaluated in order and the last violated rule is reported, so
    a sub-picture that breaks several rules raises only one error.

    Raises:
        PictureError: With the code of the last violated rule.
    """
    sub = parts.subpicture
    dsep = symbols.decimal_separator
    gsep = symbols.grouping_separator
    error = None

    decimal_pos = sub.find(dsep)
    if decimal_pos != sub.rfind(dsep):
        error = Code.MULTIPLE_DECIMAL_SEPARATORS
    if sub.find(symbols.percent) != sub.rfind(symbols.percent):
        error = Code.MULTIPLE_PERCENT
    if sub.find(symbols.per_mille) != sub.rfind(symbols.per_mille):
        error = Code.MULTIPLE_PER_MILLE
    has_percent = symbols.percent in sub
    has_per_mille = symbols.per_mille in sub
    if has_percent and has_per_mille:
        error = Code.PERCENT_AND_PER_MILLE
    if not any(symbols.is_digit_or_optional(ch) for ch in parts.mantissa_part):
        error = Code.NO_DIGIT
    if any(ch not in symbols.active_chars for ch in parts.active_part):
        error = Code.PASSIVE_IN_ACTIVE

    if decimal_pos != -1:
        if sub[:decimal_pos].endswith(gsep) or sub[decimal_pos + len(dsep):].startswith(gsep):
            error = Code.GROUPING_NEXT_TO_DECIMAL
    elif parts.integer_part.endswith(gsep):
        error = Code.GROUPING_AT_END
    if gsep + gsep in sub:
        error = Code.ADJACENT_GROUPING

    # Optional digits lead the integer part and trail the fractional part
    optional_pos = parts.integer_part.rfind(symbols.digit)
    if optional_pos != -1 and any(symbols.is_digit(ch) for ch in parts.integer_part[:optional_pos]):
        error = Code.INTEGER_OPTIONAL_AFTER_MANDATORY
    optional_pos = parts.fractional_part.find(symbols.digit)
    if optional_pos != -1 and any(symbols.is_digit(ch) for ch in parts.fractional_part[optional_pos:]):
        error = Code.FRACTION_MANDATORY_AFTER_OPTIONAL

    if parts.has_exponent:
        if parts.exponent_part and (has_percent or has_per_mille):
            error = Code.EXPONENT_WITH_PERCENT
        if not parts.exponent_part or not all(symbols.is_digit(ch) for ch in parts.exponent_part):
            error = Code.MALFORMED_EXPONENT

    if error is not None:
        raise PictureError(error, sub)


def analyze_parts(parts: PictureParts, symbols: SymbolTable) -> AnalyzedPicture:
    """
    Derive formatting parameters from a validated sub-picture (F&O 4.7.4).

    Examples:
        >>> parts, = split_picture("#,##,##0.0#", SymbolTable())
        >>> pic = analyze_parts(parts, SymbolTable())
        >>> pic.integer_grouping_positions, pic.regular_grouping
        ((5, 3), 0)
        >>> pic.minimum_fractional_digits, pic.maximum_fractional_digits
        (1, 2)
    """
    integer_positions = _grouping_positions(parts.integer_part, symbols, from_right=True)
    fractional_positions = _grouping_positions(parts.fractional_part, symbols, from_right=False)

    min_integer = sum(1 for ch in parts.integer_part if symbols.is_digit(ch))
    scaling_factor = min_integer
    min_fractional = sum(1 for ch in parts.fractional_part if symbols.is_digit(ch))
    max_fractional = sum(1 for ch in parts.fractional_part if symbols.is_digit_or_optional(ch))

    if min_integer == 0 and max_fractional == 0:
        if parts.has_exponent:
            min_fractional = 1
            max_fractional = 1
        else:
            min_integer = 1
    if parts.has_exponent and min_integer == 0 and symbols.digit in parts.integer_part:
        min_integer = 1
    if min_integer == 0 and min_fractional == 0:
        min_fractional = 1

    min_exponent = 0
    if parts.has_exponent:
        min_exponent = sum(1 for ch in parts.exponent_part if symbols.is_digit(ch))

    return AnalyzedPicture(
        integer_grouping_positions=integer_positions,
        regular_grouping=_regular_interval(integer_positions),
        minimum_integer_digits=min_integer,
        scaling_factor=scaling_factor,
        prefix=parts.prefix,
        fractional_grouping_positions=fractional_positions,
        minimum_fractional_digits=min_fractional,
        maximum_fractional_digits=max_fractional,
        minimum_exponent_digits=min_exponent,
        suffix=parts.suffix,
        picture=parts.subpicture,
    )


def parse_picture(picture: str, symbols: SymbolTable) -> tuple[AnalyzedPicture, ...]:
    """Split, validate and analyze every sub-picture of a picture string."""
    parts = split_picture(picture, symbols)
    for p in parts:
        validate_parts(p, symbols)
    return tuple(analyze_parts(p, symbols) for p in parts)


# Private Methods ------------------------------------------------------------------------------------------------------

def _split_subpicture(sub: str, symbols: SymbolTable) -> PictureParts:
    active = symbols.active_chars
    esep = symbols.exponent_separator

    # The exponent separator alone never ends a prefix or starts a suffix
    def is_boundary(ch: str) -> bool:
        return ch in active and ch != esep

    start = next((i for i, ch in enumerate(sub) if is_boundary(ch)), len(sub))
    end = next((i + 1 for i in range(len(sub) - 1, -1, -1) if is_boundary(sub[i])), start)
    prefix, suffix = sub[:start], sub[end:]
    active_part = sub[start:end]

    exponent_pos = sub.find(esep, start)
    if exponent_pos == -1 or exponent_pos > end:
        mantissa_part = active_part
        exponent_part = None
    else:
        exponent_pos -= start
        mantissa_part = active_part[:exponent_pos]
        exponent_part = active_part[exponent_pos + len(esep):]

    decimal_pos = mantissa_part.find(symbols.decimal_separator)
    if decimal_pos == -1:
        integer_part = mantissa_part
        fractional_part = suffix
    else:
        integer_part = mantissa_part[:decimal_pos]
        fractional_part = mantissa_part[decimal_pos + len(symbols.decimal_separator):]

    return PictureParts(
        subpicture=sub,
        prefix=prefix,
        suffix=suffix,
        active_part=active_part,
        mantissa_part=mantissa_part,
        exponent_part=exponent_part,
        integer_part=integer_part,
        fractional_part=fractional_part,
    )


def _grouping_positions(part: str, symbols: SymbolTable, from_right: bool) -> tuple[int, ...]:
    """
    Digit positions of the grouping separators in an integer or fractional part.

    Integer positions count digits to the right of each separator, fractional
    positions count digits to its left.
    """
    gsep = symbols.grouping_separator
    positions = []
    pos = part.find(gsep)
    while pos != -1:
        span = part[pos:] if from_right else part[:pos]
        positions.append(sum(1 for ch in span if symbols.is_digit_or_optional(ch)))
        pos = part.find(gsep, pos + len(gsep))
    return tuple(positions)


def _regular_interval(positions: tuple[int, ...]) -> int:
    """Return the common grouping interval, or 0 if the positions are not evenly spaced."""
    if not positions:
        return 0
    factor = reduce(math.gcd, positions)
    for i in range(1, len(positions) + 1):
        if i * factor not in positions:
            return 0
    return factor
