#
# numfmt - Picture Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.errors import PictureError, PictureErrorCode
from numfmt.picture import analyze_parts, parse_picture, split_picture, validate_parts


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSplitPicture:

    @pytest.mark.parametrize(
        "picture, expected",
        [
            pytest.param(
                "#,##0.00",
                ("", "", "#,##0.00", "#,##0.00", None, "#,##0", "00"),
                id="plain",
            ),
            pytest.param(
                "$#,##0.00 EUR",
                ("$", " EUR", "#,##0.00", "#,##0.00", None, "#,##0", "00"),
                id="prefix-suffix",
            ),
            pytest.param(
                "0.00e0",
                ("", "", "0.00e0", "0.00", "0", "0", "00"),
                id="exponent",
            ),
            pytest.param(
                "~0.00e00~",
                ("~", "~", "0.00e00", "0.00", "00", "0", "00"),
                id="exponent-with-prefix",
            ),
            pytest.param(
                "0 apples",
                ("", " apples", "0", "0", None, "0", " apples"),
                id="exponent-separator-in-suffix",
            ),
            pytest.param(
                "#0 kg",
                ("", " kg", "#0", "#0", None, "#0", " kg"),
                id="no-decimal-fraction-is-suffix",
            ),
            pytest.param(
                "text",
                ("text", "", "", "", None, "", ""),
                id="all-passive",
            ),
        ],
    )
    def test_parts(self, symbols, picture, expected):
        """Split sub-picture into prefix, suffix and active parts."""
        parts, = split_picture(picture, symbols)
        assert (
                   parts.prefix,
                   parts.suffix,
                   parts.active_part,
                   parts.mantissa_part,
                   parts.exponent_part,
                   parts.integer_part,
                   parts.fractional_part,
               ) == expected

    def test_two_subpictures(self, symbols):
        """Split positive and negative sub-pictures."""
        positive, negative = split_picture("#0;(#0)", symbols)
        assert positive.subpicture == "#0"
        assert (negative.prefix, negative.integer_part, negative.suffix) == ("(", "#0", ")")

    def test_too_many_subpictures(self, symbols):
        """Reject more than two sub-pictures."""
        with pytest.raises(PictureError) as exc_info:
            split_picture("#;#;#", symbols)
        assert exc_info.value.code is PictureErrorCode.TOO_MANY_SUBPICTURES

    def test_custom_pattern_separator(self, symbols):
        """Split on the configured pattern separator only."""
        parts = split_picture("#0;x|(#0)", symbols.merge(pattern_separator="|"))
        assert len(parts) == 2
        assert parts[0].suffix == ";x"


class TestValidateParts:

    @pytest.mark.parametrize(
        "picture, code",
        [
            pytest.param("#.#.#", "D3081", id="two-decimal-separators"),
            pytest.param("#0%%", "D3082", id="two-percent"),
            pytest.param("#0‰‰", "D3083", id="two-per-mille"),
            pytest.param("#0%‰", "D3084", id="percent-and-per-mille"),
            pytest.param("%", "D3085", id="no-digit"),
            pytest.param("", "D3085", id="empty"),
            pytest.param("#a0", "D3086", id="passive-in-active"),
            pytest.param("#,.00", "D3087", id="grouping-before-decimal"),
            pytest.param("#.,00", "D3087", id="grouping-after-decimal"),
            pytest.param("#,##0,", "D3088", id="grouping-at-end"),
            pytest.param("#,,##0", "D3089", id="adjacent-grouping"),
            pytest.param("0#", "D3090", id="optional-after-mandatory"),
            pytest.param("#0#", "D3090", id="optional-after-mandatory-inner"),
            pytest.param("#.#0", "D3091", id="mandatory-after-optional"),
            pytest.param("0.0e0%", "D3092", id="exponent-with-percent"),
            pytest.param("0.0e", "D3093", id="empty-exponent"),
            pytest.param("0.0e#", "D3093", id="optional-digit-exponent"),
        ],
    )
    def test_rule(self, symbols, picture, code):
        """Raise the code of the violated rule."""
        parts, = split_picture(picture, symbols)
        with pytest.raises(PictureError) as exc_info:
            validate_parts(parts, symbols)
        assert exc_info.value.code == code
        assert exc_info.value.picture == picture

    @pytest.mark.parametrize(
        "picture, code",
        [
            pytest.param("#.#.#%%", "D3082", id="decimal-then-percent"),
            pytest.param("0#%%", "D3090", id="percent-then-optional"),
        ],
    )
    def test_last_violation_wins(self, symbols, picture, code):
        """Report the last failing rule when several rules fail."""
        parts, = split_picture(picture, symbols)
        with pytest.raises(PictureError) as exc_info:
            validate_parts(parts, symbols)
        assert exc_info.value.code == code

    @pytest.mark.parametrize(
        "picture",
        ["#", "0", "#,##0.00", "#,##,##0", "$#0.0#", "0.00e00", "#0%", "#0‰", ".00", "#0 kg", "0.000,000"],
    )
    def test_valid(self, symbols, picture):
        """Accept well-formed pictures."""
        parts, = split_picture(picture, symbols)
        assert validate_parts(parts, symbols) is None


class TestAnalyzeParts:

    def _analyze(self, picture, symbols):
        parts, = split_picture(picture, symbols)
        validate_parts(parts, symbols)
        return analyze_parts(parts, symbols)

    @pytest.mark.parametrize(
        "picture, positions, regular",
        [
            pytest.param("0", (), 0, id="none"),
            pytest.param("#,##0", (3,), 3, id="thousands"),
            pytest.param("#,###,##0", (6, 3), 3, id="thousands-twice"),
            pytest.param("#,##,##0", (5, 3), 0, id="south-asian"),
            pytest.param("#,###,###,##0", (9, 6, 3), 3, id="thousands-three-times"),
            pytest.param("#,######,##0", (9, 3), 0, id="missing-multiple"),
            pytest.param("#,#,##0", (4, 3), 0, id="irregular"),
        ],
    )
    def test_integer_grouping(self, symbols, picture, positions, regular):
        """Count grouping positions and detect regular intervals."""
        pic = self._analyze(picture, symbols)
        assert pic.integer_grouping_positions == positions
        assert pic.regular_grouping == regular

    def test_fractional_grouping(self, symbols):
        """Count fractional grouping positions from the decimal separator."""
        pic = self._analyze("0.000,000,0", symbols)
        assert pic.fractional_grouping_positions == (3, 6)

    @pytest.mark.parametrize(
        "picture, min_int, min_frac, max_frac",
        [
            pytest.param("#,##0.00##", 1, 2, 4, id="mixed"),
            pytest.param("000", 3, 0, 0, id="integers"),
            pytest.param("#", 1, 0, 0, id="degenerate"),
            pytest.param(".00", 0, 2, 2, id="fraction-only"),
            pytest.param(".##", 0, 1, 2, id="optional-fraction-only"),
            pytest.param("#e0", 1, 1, 1, id="degenerate-exponent"),
            pytest.param("#.00e0", 1, 2, 2, id="optional-integer-exponent"),
        ],
    )
    def test_digit_counts(self, symbols, picture, min_int, min_frac, max_frac):
        """Derive minimum and maximum digit counts."""
        pic = self._analyze(picture, symbols)
        assert pic.minimum_integer_digits == min_int
        assert pic.minimum_fractional_digits == min_frac
        assert pic.maximum_fractional_digits == max_frac

    @pytest.mark.parametrize(
        "picture, scaling, exponent",
        [
            pytest.param("0.00", 1, 0, id="no-exponent"),
            pytest.param("0.00e0", 1, 1, id="one-digit"),
            pytest.param("00.0e000", 2, 3, id="two-integer-digits"),
            pytest.param("#.00e0", 0, 1, id="scaling-before-adjustment"),
        ],
    )
    def test_exponent(self, symbols, picture, scaling, exponent):
        """Derive scaling factor and minimum exponent digits."""
        pic = self._analyze(picture, symbols)
        assert pic.scaling_factor == scaling
        assert pic.minimum_exponent_digits == exponent

    def test_prefix_suffix_kept(self, symbols):
        """Carry prefix, suffix and sub-picture text."""
        pic = self._analyze("[#0.0%]", symbols)
        assert (pic.prefix, pic.suffix, pic.picture) == ("[", "%]", "[#0.0%]")

    def test_custom_digit_family(self, arabic_symbols):
        """Count only characters of the configured digit family."""
        pic = self._analyze("#,##٠.٠٠#", arabic_symbols)
        assert pic.minimum_integer_digits == 1
        assert (pic.minimum_fractional_digits, pic.maximum_fractional_digits) == (2, 3)


class TestParsePicture:

    def test_positive_only(self, symbols):
        assert len(parse_picture("#0", symbols)) == 1

    def test_validates_every_subpicture(self, symbols):
        """Validate the negative sub-picture too."""
        with pytest.raises(PictureError) as exc_info:
            parse_picture("#0;#.#.#", symbols)
        assert exc_info.value.code is PictureErrorCode.MULTIPLE_DECIMAL_SEPARATORS
