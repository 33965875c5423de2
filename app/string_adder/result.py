"""
Result Module

Tagged result of an addition. Adder.evaluate() returns one of these
instead of raising, so callers branch on success explicitly.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import AdderError


@dataclass
class AddResult:
    """
    Result of evaluating one input string.

    - success: did the input parse?
    - value: the sum (0 on failure)
    - error: the typed failure, if any
    - cached: was the sum served from the cache?
    """
    success: bool
    value: int = 0
    error: Optional[AdderError] = None
    cached: bool = False

    def __str__(self) -> str:
        """What the shell prints for this result."""
        if self.success:
            return str(self.value)
        return str(self.error)

    @property
    def kind(self) -> Optional[str]:
        """Failure variant name, or None on success."""
        return self.error.kind if self.error else None

    @classmethod
    def ok(cls, value: int, cached: bool = False) -> "AddResult":
        """Create a successful result."""
        return cls(success=True, value=value, cached=cached)

    @classmethod
    def fail(cls, error: AdderError) -> "AddResult":
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> int:
        """Return the sum, or raise the carried error."""
        if not self.success:
            raise self.error
        return self.value
