"""Parser for minibasic programs.

Every source line has the shape `line_number ' ' keyword ' ' payload`.
The keyword is matched literally and case-sensitively against `PRINT`,
`GO TO`, `LET` and `REM`, in that order, and selects how the payload is
read:

* `PRINT` takes a string variable name, an integer variable name or a
  quoted string, tried in that order, so `PRINT a$` prints a variable
  and `PRINT "a$"` prints the text `a$`.
* `GO TO` takes an unsigned line number.
* `LET` takes an assignment, see `variables.parse_var`.
* `REM` swallows the rest of the line.

A word that is not a keyword still parses as long as a space follows
it; the line becomes an `Empty` command and the rest of it is ignored.

`parse_program` is the public entry point. It parses newline separated
lines in file order and builds a `Program`; the first line that does not
parse raises `ParseError` and nothing is returned.
"""

from __future__ import annotations

from typing import List

from .ast import Assign, Comment, Empty, Jump, Line, Literal, Print, PrintTarget, VariableRef
from .errors import ParseError
from .program import Program
from .scanner import Scanner, consume_line, first_of, read_string, read_unsigned
from .variables import parse_int_variable_name, parse_str_variable_name, parse_var

KEYWORDS = ('PRINT', 'GO TO', 'LET', 'REM')


def match_command(scanner: Scanner) -> str:
    for keyword in KEYWORDS:
        if scanner.match(keyword):
            return scanner.consume(keyword)
    return ''


def parse_print_target(scanner: Scanner) -> PrintTarget:
    return first_of(
        scanner,
        lambda s: VariableRef(parse_str_variable_name(s)),
        lambda s: VariableRef(parse_int_variable_name(s)),
        lambda s: Literal(read_string(s)),
    )


def parse_command(scanner: Scanner):
    keyword = match_command(scanner)
    if not keyword:
        scanner.take_while(lambda c: c != ' ' and c != '\n')
    scanner.consume(' ')

    if keyword == 'PRINT':
        return Print(parse_print_target(scanner))
    if keyword == 'GO TO':
        return Jump(read_unsigned(scanner))
    if keyword == 'LET':
        name, value = parse_var(scanner)
        return Assign(name, value)
    if keyword == 'REM':
        consume_line(scanner)
        return Comment()
    consume_line(scanner)
    return Empty()


def parse_line(text: str, line: int = 1) -> Line:
    """Parse one source line into a `Line`.

    `line` is the position of the text in its source file and is only
    used for error reporting.
    """
    scanner = Scanner(text, line)
    number = read_unsigned(scanner)
    scanner.consume(' ')
    command = parse_command(scanner)
    scanner.expect_end()
    return Line(number, command)


def parse_lines(source: str) -> List[Line]:
    lines: List[Line] = []
    for index, text in enumerate(source.split('\n'), start=1):
        # blank lines, including the one after a trailing newline, carry no command
        if text == '':
            continue
        lines.append(parse_line(text, index))
    return lines


def parse_program(source: str) -> Program:
    """Parse minibasic source code into a `Program`.

    Any syntax error is raised as a `ParseError` carrying the source line
    and column where parsing stopped.
    """
    return Program.build(parse_lines(source))


__all__ = ['parse_program', 'parse_line', 'parse_command', 'parse_print_target', 'ParseError']
