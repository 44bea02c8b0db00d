"""Variable names and LET assignment forms.

Integer variables are named by one or more ASCII letters and digits,
never starting with a digit. String variables are a single letter
followed by `$`. The assignment forms are tried in a fixed order,
integer, then string, then alias: `a=5` also fits the alias shape and
must still come out as an integer assignment.
"""

from typing import Tuple

from .scanner import Scanner, consume_line, first_of, read_signed, read_string
from .types import Alias, Integer, Primitive, Text


def _is_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def parse_int_variable_name(scanner: Scanner) -> str:
    c = scanner.peek()
    if c is None or not _is_name_char(c) or c.isdigit():
        raise scanner.error('an integer variable name')
    return scanner.take_while(_is_name_char)


def parse_str_variable_name(scanner: Scanner) -> str:
    c = scanner.peek()
    if c is None or not c.isalpha():
        raise scanner.error('a string variable name')
    scanner.advance()
    scanner.consume('$')
    return f"{c}$"


def parse_int(scanner: Scanner) -> Tuple[str, Primitive]:
    name = parse_int_variable_name(scanner)
    scanner.consume('=')
    return name, Integer(read_signed(scanner))


def parse_str(scanner: Scanner) -> Tuple[str, Primitive]:
    name = parse_str_variable_name(scanner)
    scanner.consume('=')
    return name, Text(read_string(scanner))


def parse_alias(scanner: Scanner) -> Tuple[str, Primitive]:
    name = first_of(scanner, parse_str_variable_name, parse_int_variable_name)
    scanner.consume('=')
    return name, Alias(consume_line(scanner))


def parse_var(scanner: Scanner) -> Tuple[str, Primitive]:
    return first_of(scanner, parse_int, parse_str, parse_alias)
