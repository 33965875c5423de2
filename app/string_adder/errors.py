"""
Errors Module

The failures an addition can report. Both are recoverable: the shell
prints the message and keeps reading.
"""

from typing import List


class AdderError(Exception):
    """Base exception for failures reported by the adder."""

    kind = "adder_error"


class NegativesNotAllowed(AdderError):
    """Raised when the input contains one or more negative numbers."""

    kind = "negatives_not_allowed"

    def __init__(self, negatives: List[str]):
        # Decimal text, so arbitrarily long values need no int conversion
        self.negatives = list(negatives)
        super().__init__("negatives not allowed " + " ".join(self.negatives))


class InvalidDelimiterHeader(AdderError):
    """Raised when a '//' header has no terminating newline."""

    kind = "invalid_delimiter_header"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid delimiter header: {text!r}")
