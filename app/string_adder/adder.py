"""
Adder Module

The public face of the package: add(text) returns the sum of the
numbers in text, answering repeated inputs from a SumCache.

    >>> Adder().add("//[*][%]\\n1*2%3")
    6
"""

from typing import Optional

from .cache import SumCache
from .config import Config
from .errors import AdderError
from .logging_config import get_logger
from .parser import DEFAULT_CEILING, accumulate, parse, tokenize
from .result import AddResult

logger = get_logger("adder")


class Adder:
    """
    Sums delimited integers, memoizing results per exact input string.

    Args:
        cache: Cache to use (a private one is created if omitted)
        ceiling: Values above this are left out of the sum (0 = no ceiling)
        strict_headers: Reject "//" headers with no newline instead of
                        treating the input as a plain body
    """

    def __init__(
        self,
        cache: Optional[SumCache] = None,
        ceiling: int = DEFAULT_CEILING,
        strict_headers: bool = True,
    ):
        self.cache = cache if cache is not None else SumCache()
        self.ceiling = ceiling
        self.strict_headers = strict_headers

    @classmethod
    def from_config(cls, config: Config, cache: Optional[SumCache] = None) -> "Adder":
        """Create an adder using the ceiling and header mode from config."""
        return cls(
            cache=cache,
            ceiling=config.ceiling,
            strict_headers=config.strict_headers,
        )

    def evaluate(self, text: Optional[str]) -> AddResult:
        """
        Sum text and report the outcome as an AddResult.

        Known failures (negatives, malformed header) come back as failed
        results; they are not cached.
        """
        if not text:
            return AddResult.ok(0)

        cached = self.cache.get(text)
        if cached is not None:
            logger.debug(f"Cache hit for {text[:50]!r}")
            return AddResult.ok(cached, cached=True)

        logger.debug(f"Cache miss for {text[:50]!r}")
        try:
            delimiters, body = parse(text, strict=self.strict_headers)
            logger.debug(f"Delimiters: {list(delimiters)!r}")
            total = accumulate(tokenize(body, delimiters), ceiling=self.ceiling)
        except AdderError as e:
            logger.info(f"Rejected input ({e.kind}): {e}")
            return AddResult.fail(e)

        self.cache.put(text, total)
        return AddResult.ok(total)

    def add(self, text: Optional[str]) -> int:
        """
        Sum text.

        Raises:
            NegativesNotAllowed: text contains negative numbers
            InvalidDelimiterHeader: text starts with "//" but has no newline
        """
        return self.evaluate(text).unwrap()

    def clear_cache(self) -> None:
        """Forget every memoized sum."""
        self.cache.clear()

    def get_status(self) -> dict:
        """Get current adder settings and cache statistics."""
        return {
            "ceiling": self.ceiling,
            "strict_headers": self.strict_headers,
            "cache": self.cache.get_stats(),
        }


# === Module-level convenience ===

_default_adder: Optional[Adder] = None


def get_default_adder() -> Adder:
    """Get the shared adder used by add() and clear_cache()."""
    global _default_adder
    if _default_adder is None:
        _default_adder = Adder()
    return _default_adder


def add(text: Optional[str]) -> int:
    """Sum text with the shared adder. See Adder.add()."""
    return get_default_adder().add(text)


def clear_cache() -> None:
    """Clear the shared adder's cache."""
    get_default_adder().clear_cache()
