"""Grammar primitives for minibasic.

A `Scanner` walks a single source line character by character. The
grammar functions built on top of it are plain functions taking the
scanner; each either consumes what it recognizes and returns a value,
or raises `ParseError` describing what it expected. Ordered alternatives
are expressed with `first_of`, which rewinds the scanner between
attempts so that every alternative starts from the same position.
"""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from .errors import ParseError
from .types import I64_MAX, I64_MIN, U64_MAX

T = TypeVar('T')

ESCAPES = {'\\': '\\', '"': '"'}


class Scanner:
    def __init__(self, text: str, line: int = 1):
        self.text = text
        self.line = line
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def rest(self) -> str:
        return self.text[self.pos:]

    def error(self, expected: str, pos: Optional[int] = None) -> ParseError:
        if pos is None:
            pos = self.pos
        found = self.text[pos] if pos < len(self.text) else None
        return ParseError(expected, self.line, pos + 1, found)

    def match(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def consume(self, literal: str) -> str:
        if not self.match(literal):
            raise self.error(repr(literal))
        self.pos += len(literal)
        return literal

    def advance(self) -> str:
        c = self.peek()
        if c is None:
            raise self.error('a character')
        self.pos += 1
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def expect_end(self):
        if not self.at_end():
            raise self.error('end of line')


def first_of(scanner: Scanner, *rules: Callable[[Scanner], T]) -> T:
    """Return the result of the first rule that succeeds.

    The scanner is rewound before each attempt. If every rule fails, the
    error that got furthest into the input is raised.
    """
    start = scanner.pos
    failures: List[ParseError] = []
    for rule in rules:
        try:
            return rule(scanner)
        except ParseError as e:
            failures.append(e)
            scanner.pos = start
    raise max(failures, key=lambda e: e.column)


def read_string(scanner: Scanner) -> str:
    """Read a double quoted string, undoing `\\\\` and `\\"` escapes."""
    scanner.consume('"')
    chars: List[str] = []
    while True:
        c = scanner.peek()
        if c is None:
            raise scanner.error('closing \'"\'')
        if c == '"':
            scanner.pos += 1
            return ''.join(chars)
        if c == '\\':
            scanner.pos += 1
            escaped = scanner.peek()
            if escaped not in ESCAPES:
                raise scanner.error("'\\\\' or '\"' after '\\\\'")
            chars.append(ESCAPES[escaped])
            scanner.pos += 1
            continue
        chars.append(c)
        scanner.pos += 1


def escape_string(text: str) -> str:
    """Quote `text` so that `read_string` gives it back unchanged."""
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


def consume_line(scanner: Scanner) -> str:
    # Take everything until a newline, if there is one
    return scanner.take_while(lambda c: c != '\n')


def _digits(scanner: Scanner) -> str:
    digits = scanner.take_while(lambda c: '0' <= c <= '9')
    if not digits:
        raise scanner.error('a digit')
    return digits


def read_unsigned(scanner: Scanner) -> int:
    start = scanner.pos
    value = int(_digits(scanner))
    if value > U64_MAX:
        raise scanner.error('an unsigned 64-bit integer', start)
    return value


def read_signed(scanner: Scanner) -> int:
    start = scanner.pos
    sign = 1
    if scanner.peek() in ('+', '-'):
        if scanner.advance() == '-':
            sign = -1
    value = sign * int(_digits(scanner))
    if value < I64_MIN or value > I64_MAX:
        raise scanner.error('a signed 64-bit integer', start)
    return value
