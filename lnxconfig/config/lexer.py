"""
Line scanner for the lnx configuration format.

An lnx file holds one directive per line. This module handles the
line-level concerns:
- Full-line comments (first character is '#')
- Extraction of the leading keyword
- Fixed-format field scanning, one immutable pattern per directive

Scanning works like a classic fixed-format scan: fields are matched in
order and scanning stops at the first mismatch. The number of matched
fields is what the parser checks against the directive's arity. Text
after the last field of a pattern is not examined.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator
import re


class FieldType(Enum):
    """Field types that can appear in a directive."""

    WORD = auto()       # any run of non-whitespace characters
    ADDRESS = auto()    # IPv4 address in dotted-quad form
    PREFIX = auto()     # prefix length, 1-2 decimal digits
    INTEGER = auto()    # unsigned decimal integer
    IFNAME = auto()     # interface name, ends at whitespace or '#'


@dataclass(frozen=True)
class Token:
    """A single field scanned from a directive line."""

    type: FieldType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


@dataclass(frozen=True)
class Field:
    """A typed field in a scan pattern."""

    type: FieldType
    regex: re.Pattern


def field(field_type: FieldType, stop: str = "") -> Field:
    """
    Build a field matcher.

    Args:
        field_type: Type of the field
        stop: Extra characters that end an ADDRESS or WORD field
              (e.g. '/' before a prefix length, ':' before a port)
    """
    if field_type == FieldType.PREFIX:
        pattern = r"\d{1,2}"
    elif field_type == FieldType.INTEGER:
        pattern = r"\d+"
    elif field_type == FieldType.IFNAME:
        pattern = r"[^\s#]+"
    else:
        pattern = rf"[^\s{re.escape(stop)}]+" if stop else r"\S+"
    return Field(field_type, re.compile(pattern))


_WHITESPACE = re.compile(r"\s*")
_FIRST_TOKEN = re.compile(r"\s*(\S+)")


@dataclass(frozen=True)
class ScanPattern:
    """
    Fixed-arity pattern for one directive.

    `keyword` may hold several words ("rip advertise-to"). `parts` is a
    sequence of Field objects and literal strings. Word literals
    ("at", "via") and fields skip leading whitespace; punctuation
    literals ("/", ":") must follow the previous field immediately.

    Example:
        route <ip>/<prefix> via <ip>
        -> ScanPattern("route", (field(ADDRESS, "/"), "/", field(PREFIX),
                                 "via", field(ADDRESS)))
    """

    keyword: str
    parts: tuple[Field | str, ...]

    @property
    def arity(self) -> int:
        """Number of fields a complete match yields."""
        return sum(1 for part in self.parts if isinstance(part, Field))

    def scan(self, text: str, line: int = 0) -> tuple[Token, ...]:
        """
        Scan a line against this pattern.

        Returns:
            Tokens for the fields matched before the first mismatch.
            A complete match has `arity` tokens.
        """
        pos = 0

        for word in self.keyword.split():
            pos = _WHITESPACE.match(text, pos).end()
            if not text.startswith(word, pos):
                return ()
            pos += len(word)
            if pos < len(text) and not text[pos].isspace():
                return ()

        tokens: list[Token] = []

        for part in self.parts:
            if isinstance(part, Field):
                pos = _WHITESPACE.match(text, pos).end()
                match = part.regex.match(text, pos)
                if not match:
                    break
                tokens.append(Token(part.type, match.group(), line, pos + 1))
                pos = match.end()
            else:
                if part[:1].isalpha():
                    pos = _WHITESPACE.match(text, pos).end()
                if not text.startswith(part, pos):
                    break
                pos += len(part)

        return tuple(tokens)


@dataclass(frozen=True)
class DirectiveLine:
    """A non-comment line with its leading keyword."""

    number: int
    text: str
    keyword: str


def first_token(text: str) -> str | None:
    """Get the first whitespace-delimited token of a line, if any."""
    match = _FIRST_TOKEN.match(text)
    return match.group(1) if match else None


def iter_directive_lines(lines: Iterable[str]) -> Iterator[DirectiveLine]:
    """
    Classify physical lines, yielding the ones that carry a directive.

    Line numbers are 1-based and count every physical line, including
    comments and blank lines.
    """
    for number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")

        if text.startswith("#"):
            continue

        keyword = first_token(text)
        if keyword is None:
            continue

        yield DirectiveLine(number=number, text=text, keyword=keyword)
