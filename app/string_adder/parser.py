"""
Parser Module

Turns an input like "//[*][%]\\n1*2%3" into a sum. The pipeline is:

1. split_header()       - find the optional "//...\\n" header
2. extract_delimiters() - pull custom delimiters out of the header
3. tokenize()           - split the body on every delimiter at once
4. accumulate()         - add up the numeric tokens

Every step is a single left-to-right (or right-to-left) pass, so the
whole pipeline runs in time linear in the input.
"""

import re
from collections import deque
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .errors import InvalidDelimiterHeader, NegativesNotAllowed

HEADER_PREFIX = "//"
DEFAULT_DELIMITERS = (",", "\n")
DEFAULT_CEILING = 1000

_INTEGER = re.compile(r"-?[0-9]+")
_CHUNK_DIGITS = 4000


class DelimiterSet:
    """
    Ordered, duplicate-free collection of delimiter strings.

    Always starts with "," and "\\n". Empty strings are never added:
    they would split between every character.
    """

    def __init__(self, delimiters: Iterable[str] = DEFAULT_DELIMITERS):
        self._delimiters: List[str] = []
        self._seen: Set[str] = set()
        for delimiter in delimiters:
            self.add(delimiter)

    def add(self, delimiter: str) -> bool:
        """Add a delimiter. Returns False if it was empty or already present."""
        if not delimiter or delimiter in self._seen:
            return False
        self._seen.add(delimiter)
        self._delimiters.append(delimiter)
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._delimiters)

    def __len__(self) -> int:
        return len(self._delimiters)

    def __contains__(self, delimiter: object) -> bool:
        return delimiter in self._seen

    def __repr__(self) -> str:
        return f"DelimiterSet({self._delimiters!r})"


def split_header(text: str, strict: bool = True) -> Tuple[Optional[str], str]:
    """
    Separate the delimiter header from the body.

    Returns (header contents, body). The contents exclude the leading
    "//" and the terminating newline; they are None when there is no
    header.

    Raises:
        InvalidDelimiterHeader: "//" with no newline after it (strict mode).
            In lenient mode the whole text is returned as the body.
    """
    if not text.startswith(HEADER_PREFIX):
        return None, text

    newline = text.find("\n", len(HEADER_PREFIX))
    if newline == -1:
        if strict:
            raise InvalidDelimiterHeader(text)
        return None, text

    return text[len(HEADER_PREFIX):newline], text[newline + 1:]


def extract_delimiters(contents: str) -> List[str]:
    """
    Extract the delimiters declared in a header.

    "[***][%]" gives ["***", "%"]. A "[" inside a group is ordinary
    content and the group ends at the first "]". Without any complete
    group the whole contents is a single delimiter (legacy "//;" form).
    Empty strings are returned as found; DelimiterSet drops them.
    """
    groups: List[str] = []
    start: Optional[int] = None

    for index, char in enumerate(contents):
        if start is None:
            if char == "[":
                start = index + 1
        elif char == "]":
            groups.append(contents[start:index])
            start = None

    if groups:
        return groups
    return [contents]


class DelimiterMatcher:
    """
    Aho-Corasick automaton over the reversed delimiters.

    Scanning the text right to left tells us, for every position, the
    longest delimiter that starts there. Building costs the total
    delimiter length and scanning costs the text length.
    """

    def __init__(self, delimiters: Iterable[str]):
        self._goto: List[dict] = [{}]
        self._fail: List[int] = [0]
        # Length of the longest delimiter recognised in each state
        self._longest: List[int] = [0]

        for delimiter in delimiters:
            self._insert(delimiter)
        self._link()

    def _insert(self, delimiter: str) -> None:
        state = 0
        for char in reversed(delimiter):
            child = self._goto[state].get(char)
            if child is None:
                child = len(self._goto)
                self._goto.append({})
                self._fail.append(0)
                self._longest.append(0)
                self._goto[state][char] = child
            state = child
        if delimiter:
            self._longest[state] = len(delimiter)

    def _link(self) -> None:
        queue = deque(self._goto[0].values())
        while queue:
            state = queue.popleft()
            # A terminal state is deeper than anything on its failure chain
            if not self._longest[state]:
                self._longest[state] = self._longest[self._fail[state]]

            for char, child in self._goto[state].items():
                fallback = self._fail[state]
                while fallback and char not in self._goto[fallback]:
                    fallback = self._fail[fallback]
                self._fail[child] = self._goto[fallback].get(char, 0)
                queue.append(child)

    def match_lengths(self, text: str) -> List[int]:
        """For each index, the length of the longest delimiter starting there (0 if none)."""
        lengths = [0] * len(text)
        state = 0
        for index in range(len(text) - 1, -1, -1):
            char = text[index]
            while state and char not in self._goto[state]:
                state = self._fail[state]
            state = self._goto[state].get(char, 0)
            lengths[index] = self._longest[state]
        return lengths


def tokenize(body: str, delimiters: Iterable[str]) -> List[str]:
    """
    Split body on every delimiter simultaneously.

    Delimiters are literal strings. Where several start at the same
    position the longest one is consumed. Characters consumed by one
    delimiter are never reused by another. Empty tokens are kept; the
    accumulator skips them.
    """
    lengths = DelimiterMatcher(delimiters).match_lengths(body)

    tokens: List[str] = []
    start = index = 0
    while index < len(body):
        length = lengths[index]
        if length:
            tokens.append(body[start:index])
            index += length
            start = index
        else:
            index += 1
    tokens.append(body[start:])
    return tokens


def normalize_integer(token: str) -> Optional[str]:
    """
    Canonical decimal text of a plain base-10 integer, else None.

    "007" gives "7", "-0" gives "0". The token is never passed to int(),
    so digit runs of any length are safe.
    """
    if _INTEGER.fullmatch(token) is None:
        return None
    negative = token.startswith("-")
    digits = token.lstrip("-").lstrip("0") or "0"
    if negative and digits != "0":
        return "-" + digits
    return digits


def _digits_to_int(digits: str) -> int:
    # int() refuses very long digit strings, so convert in pieces
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def accumulate(tokens: Iterable[str], ceiling: int = DEFAULT_CEILING) -> int:
    """
    Add up the numeric tokens.

    Non-numeric and empty tokens are skipped. Values above ceiling are
    ignored (ceiling 0 disables the check). Negatives are collected in
    the order found, as normalised decimal text.

    Raises:
        NegativesNotAllowed: if any token was negative
    """
    total = 0
    negatives: List[str] = []
    ceiling_width = len(str(ceiling))

    for token in tokens:
        number = normalize_integer(token)
        if number is None:
            continue
        if number.startswith("-"):
            negatives.append(number)
        elif not ceiling:
            total += _digits_to_int(number)
        elif len(number) <= ceiling_width and int(number) <= ceiling:
            total += int(number)

    if negatives:
        raise NegativesNotAllowed(negatives)
    return total


def parse(text: str, strict: bool = True) -> Tuple[DelimiterSet, str]:
    """
    Read the header of text and return the active delimiters and the body.

    Raises:
        InvalidDelimiterHeader: see split_header()
    """
    delimiters = DelimiterSet()
    contents, body = split_header(text, strict=strict)
    if contents is not None:
        for delimiter in extract_delimiters(contents):
            delimiters.add(delimiter)
    return delimiters, body
