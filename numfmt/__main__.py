"""
CLI interface for the number formatter.

Usage:
    python -m numfmt "#,##0.00" 1234.5 -0.25
    python -m numfmt "#.##0,00" 1234.5 --option decimal-separator=, --option grouping-separator=.
"""

import sys
import argparse
from decimal import Decimal, InvalidOperation

from .errors import PictureError
from .format import compile_picture


def _parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def _parse_value(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point, returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Format numbers with an XPath fn:format-number picture string", prog="python -m numfmt"
    )
    parser.add_argument("picture", help="Picture string, e.g. '#,##0.00' or '0.00e0'")
    parser.add_argument("values", nargs="+", type=_parse_value, help="Numbers to format")
    parser.add_argument(
        "--option", "-o", action="append", default=[], type=_parse_option, metavar="KEY=VALUE",
        help="Decimal format symbol override, e.g. decimal-separator=, (repeatable)"
    )

    args = parser.parse_args(argv)

    try:
        compiled = compile_picture(args.picture, dict(args.option))
        for value in args.values:
            print(compiled.format(value))
    except PictureError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
