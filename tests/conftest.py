#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.format import _compile
from numfmt.symbols import DEFAULT_SYMBOLS, SymbolTable

ARABIC_INDIC_ZERO = "٠"
FULLWIDTH_ZERO = "０"


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def symbols() -> SymbolTable:
    """Default decimal format symbols."""
    return DEFAULT_SYMBOLS


@pytest.fixture
def arabic_symbols() -> SymbolTable:
    """Symbols with the Arabic-Indic digit family."""
    return DEFAULT_SYMBOLS.merge(zero_digit=ARABIC_INDIC_ZERO)


@pytest.fixture
def european() -> dict[str, str]:
    """Options swapping decimal and grouping separators."""
    return {"decimal-separator": ",", "grouping-separator": "."}


@pytest.fixture(autouse=True)
def clear_picture_cache():
    """Start every test with an empty compiled picture cache."""
    _compile.cache_clear()
    yield
    _compile.cache_clear()
