"""
Picture string errors raised by the number formatter.

Every malformed picture maps to exactly one member of PictureErrorCode, numbered
after the F&O dynamic errors (FODF1310 family) as D3080..D3093.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique


# Enums ----------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class PictureErrorCode(StrEnum):
    """
    Closed set of picture string error codes.

    Attributes:
        TOO_MANY_SUBPICTURES (str)      : D3080 - more than one pattern separator
        MULTIPLE_DECIMAL_SEPARATORS (str): D3081 - decimal separator appears twice
        MULTIPLE_PERCENT (str)          : D3082 - percent sign appears twice
        MULTIPLE_PER_MILLE (str)        : D3083 - per-mille sign appears twice
        PERCENT_AND_PER_MILLE (str)     : D3084 - both percent and per-mille
        NO_DIGIT (str)                  : D3085 - mantissa has no digit or optional digit
        PASSIVE_IN_ACTIVE (str)         : D3086 - passive character between active characters
        GROUPING_NEXT_TO_DECIMAL (str)  : D3087 - grouping separator adjacent to decimal separator
        GROUPING_AT_END (str)           : D3088 - integer part ends with grouping separator
        ADJACENT_GROUPING (str)         : D3089 - two grouping separators in a row
        INTEGER_OPTIONAL_AFTER_MANDATORY (str)   : D3090 - optional digit right of a mandatory digit
        FRACTION_MANDATORY_AFTER_OPTIONAL (str)  : D3091 - mandatory digit right of an optional digit
        EXPONENT_WITH_PERCENT (str)     : D3092 - exponent combined with percent or per-mille
        MALFORMED_EXPONENT (str)        : D3093 - exponent empty or not made of digits
    """
    TOO_MANY_SUBPICTURES = "D3080"
    MULTIPLE_DECIMAL_SEPARATORS = "D3081"
    MULTIPLE_PERCENT = "D3082"
    MULTIPLE_PER_MILLE = "D3083"
    PERCENT_AND_PER_MILLE = "D3084"
    NO_DIGIT = "D3085"
    PASSIVE_IN_ACTIVE = "D3086"
    GROUPING_NEXT_TO_DECIMAL = "D3087"
    GROUPING_AT_END = "D3088"
    ADJACENT_GROUPING = "D3089"
    INTEGER_OPTIONAL_AFTER_MANDATORY = "D3090"
    FRACTION_MANDATORY_AFTER_OPTIONAL = "D3091"
    EXPONENT_WITH_PERCENT = "D3092"
    MALFORMED_EXPONENT = "D3093"
# @formatter:on


_MESSAGES = {
    PictureErrorCode.TOO_MANY_SUBPICTURES:
        "the picture string must not contain more than one pattern separator",
    PictureErrorCode.MULTIPLE_DECIMAL_SEPARATORS:
        "a sub-picture must not contain more than one decimal separator",
    PictureErrorCode.MULTIPLE_PERCENT:
        "a sub-picture must not contain more than one percent character",
    PictureErrorCode.MULTIPLE_PER_MILLE:
        "a sub-picture must not contain more than one per-mille character",
    PictureErrorCode.PERCENT_AND_PER_MILLE:
        "a sub-picture must not contain both a percent and a per-mille character",
    PictureErrorCode.NO_DIGIT:
        "the mantissa part of a sub-picture must contain at least one digit or optional digit character",
    PictureErrorCode.PASSIVE_IN_ACTIVE:
        "a sub-picture must not contain a passive character between two active characters",
    PictureErrorCode.GROUPING_NEXT_TO_DECIMAL:
        "a grouping separator must not be adjacent to the decimal separator",
    PictureErrorCode.GROUPING_AT_END:
        "the integer part must not end with a grouping separator",
    PictureErrorCode.ADJACENT_GROUPING:
        "a sub-picture must not contain two adjacent grouping separators",
    PictureErrorCode.INTEGER_OPTIONAL_AFTER_MANDATORY:
        "the integer part must not contain an optional digit to the right of a mandatory digit",
    PictureErrorCode.FRACTION_MANDATORY_AFTER_OPTIONAL:
        "the fractional part must not contain a mandatory digit to the right of an optional digit",
    PictureErrorCode.EXPONENT_WITH_PERCENT:
        "a sub-picture with an exponent must not contain a percent or per-mille character",
    PictureErrorCode.MALFORMED_EXPONENT:
        "the exponent part must be non-empty and contain only decimal digit characters",
}


# Classes --------------------------------------------------------------------------------------------------------------

class PictureError(ValueError):
    """
    Raised when a picture string cannot be used for formatting.

    Attributes:
        code: The PictureErrorCode of the violated rule.
        picture: The picture or sub-picture text that failed.
    """

    def __init__(self, code: PictureErrorCode | str, picture: str | None = None) -> None:
        self.code = PictureErrorCode(code)
        self.picture = picture
        message = f"{self.code}: {_MESSAGES[self.code]}"
        if picture is not None:
            message += f" (picture {picture!r})"
        super().__init__(message)

    @property
    def description(self) -> str:
        return _MESSAGES[self.code]
