"""
Decimal format symbols used to read picture strings and to render numbers.

A SymbolTable is an immutable set of the eleven F&O decimal-format properties.
Callers never touch DEFAULT_SYMBOLS directly; overrides always produce a new table.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from functools import cached_property
from typing import Any, Self

# Constants ------------------------------------------------------------------------------------------------------------

# @formatter:off
# F&O property names mapped to SymbolTable attributes
PROPERTY_NAMES = {
    "decimal-separator":  "decimal_separator",
    "grouping-separator": "grouping_separator",
    "exponent-separator": "exponent_separator",
    "infinity":           "infinity",
    "minus-sign":         "minus_sign",
    "NaN":                "nan",
    "percent":            "percent",
    "per-mille":          "per_mille",
    "zero-digit":         "zero_digit",
    "digit":              "digit",
    "pattern-separator":  "pattern_separator",
}
# @formatter:on

# Symbols that may legitimately span several characters
_MULTI_CHAR_SYMBOLS = ("infinity", "nan")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class SymbolTable:
    """
    Immutable decimal format symbols.

    Defaults follow the F&O default decimal format. The zero_digit must be the
    first character of ten consecutive code points forming the digit family.

    Attributes:
        decimal_separator: Separates integer and fractional parts.
        grouping_separator: Separates digit groups.
        exponent_separator: Introduces the exponent in scientific notation.
        infinity: Text for infinite values.
        minus_sign: Prepended to negative values without an explicit negative sub-picture.
        nan: Text for NaN.
        percent: Scales the value by 100 when present in a sub-picture.
        per_mille: Scales the value by 1000 when present in a sub-picture.
        zero_digit: First code point of the digit family.
        digit: Optional digit placeholder.
        pattern_separator: Separates the positive and negative sub-pictures.
    """
    decimal_separator: str = "."
    grouping_separator: str = ","
    exponent_separator: str = "e"
    infinity: str = "Infinity"
    minus_sign: str = "-"
    nan: str = "NaN"
    percent: str = "%"
    per_mille: str = "‰"
    zero_digit: str = "0"
    digit: str = "#"
    pattern_separator: str = ";"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise TypeError(f"symbol {f.name} must be a str, but got {type(value).__name__}")
            if not value:
                raise ValueError(f"symbol {f.name} must not be empty")
            if len(value) > 1 and f.name not in _MULTI_CHAR_SYMBOLS:
                warnings.warn(
                    f"symbol {f.name} is expected to be a single character, got {value!r}",
                    UserWarning,
                    stacklevel=4,
                )
        if ord(self.zero_digit[0]) + 9 > 0x10FFFF:
            raise ValueError(f"zero_digit {self.zero_digit!r} does not start a 10 code point digit family")

    @cached_property
    def digit_family(self) -> tuple[str, ...]:
        """Ten characters for digits 0-9, starting at zero_digit."""
        zero = ord(self.zero_digit[0])
        return tuple(chr(cp) for cp in range(zero, zero + 10))

    @cached_property
    def active_chars(self) -> frozenset[str]:
        """Characters that belong to the active part of a sub-picture."""
        return frozenset(self.digit_family) | {
            self.decimal_separator,
            self.exponent_separator,
            self.grouping_separator,
            self.digit,
            self.pattern_separator,
        }

    def is_digit(self, ch: str) -> bool:
        return ch in self.digit_family

    def is_digit_or_optional(self, ch: str) -> bool:
        return ch in self.digit_family or ch == self.digit

    def to_family(self, text: str) -> str:
        """Replace ASCII digits in text with the matching digit family characters."""
        if self.zero_digit == "0":
            return text
        offset = ord(self.zero_digit[0]) - ord("0")
        return "".join(chr(ord(ch) + offset) if "0" <= ch <= "9" else ch for ch in text)

    def merge(self, /, **overrides: Any) -> Self:
        """
        Return a new SymbolTable with overrides applied.

        Keys may use either the attribute spelling (decimal_separator) or the
        F&O property spelling (decimal-separator). Unknown keys are ignored.
        """
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = PROPERTY_NAMES.get(key, key)
            if name in known:
                changes[name] = value
        if not changes:
            return self
        return replace(self, **changes)

    def as_properties(self) -> dict[str, str]:
        """Symbols keyed by their F&O property names."""
        return {prop: getattr(self, name) for prop, name in PROPERTY_NAMES.items()}


DEFAULT_SYMBOLS = SymbolTable()


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_symbols(options: "Mapping[str, Any] | SymbolTable | None" = None) -> SymbolTable:
    """
    Build the symbol table for a formatting call.

    Args:
        options: Overrides keyed by F&O property name or attribute name, an
            existing SymbolTable, or None for the defaults.

    Returns:
        SymbolTable with every recognized override applied on top of the defaults.

    Raises:
        TypeError: If options is not a mapping, a SymbolTable or None, or if a
            recognized override is not a str.
        ValueError: If a recognized override is an empty string.

    Examples:
        >>> resolve_symbols({"decimal-separator": ",", "grouping-separator": "."}).decimal_separator
        ','
        >>> resolve_symbols({"no-such-symbol": "x"}) == DEFAULT_SYMBOLS
        True
    """
    if options is None:
        return DEFAULT_SYMBOLS
    if isinstance(options, SymbolTable):
        return options
    if not isinstance(options, Mapping):
        raise TypeError(f"options must be a mapping or SymbolTable, but got {type(options).__name__}")
    return DEFAULT_SYMBOLS.merge(**{str(k): v for k, v in options.items()})
