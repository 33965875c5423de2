"""
String Adder - sums delimited integers with custom delimiters

This package contains:
- adder: the Adder and the add()/clear_cache() functions
- parser: header, delimiter and tokenizer logic
- cache: memoized sums per input string
- errors: NegativesNotAllowed and InvalidDelimiterHeader
- shell: interactive loop
- config: configuration loading
"""

from .adder import Adder, add, clear_cache
from .cache import SumCache
from .config import Config
from .errors import AdderError, InvalidDelimiterHeader, NegativesNotAllowed
from .result import AddResult

__version__ = "0.1.0"
__all__ = [
    "Adder",
    "AddResult",
    "AdderError",
    "Config",
    "InvalidDelimiterHeader",
    "NegativesNotAllowed",
    "SumCache",
    "add",
    "clear_cache",
]
