"""Binary arithmetic expressions.

Expressions are written without spaces, `operand operator operand`,
with any number of further `operator operand` pairs. There is no
operator precedence: grouping is strictly left to right, so `1+1+2`
is read as `((1+1)+2)` and `1+2*3` as `((1+2)*3)`.

The grammar is handled by a Lark LALR parser. Its contextual lexer only
offers the terminals valid in the current parser state, which is what
lets `1-1` lex as `1`, `-`, `1` while `1--1` lexes as `1`, `-`, `-1`.

Nothing in the command parser or the interpreter uses this module yet;
expressions can be parsed but are never evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken, VisitError

from .errors import ParseError
from .types import I64_MAX, I64_MIN, Integer


class Operator(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operator':
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"unrecognised operator {symbol!r}") from None


@dataclass(frozen=True)
class BinaryExpression:
    left: 'Operand'
    operator: Operator
    right: 'Operand'


Operand = Union[Integer, BinaryExpression]


EXPRESSION_GRAMMAR = r"""
    expression: SIGNED_INT (OPERATOR SIGNED_INT)+

    OPERATOR: "+" | "-" | "*" | "/"

    %import common.SIGNED_INT
"""


EXPRESSION_PARSER = Lark(
    EXPRESSION_GRAMMAR,
    start='expression',
    parser='lalr',
    lexer='contextual',
)


class ExpressionTransformer(Transformer):
    """Folds the flat operand/operator sequence into a left-leaning tree."""

    def __init__(self, line: int = 1):
        super().__init__()
        self.line = line

    def SIGNED_INT(self, token):
        value = int(token.value)
        if value < I64_MIN or value > I64_MAX:
            raise ParseError('a signed 64-bit integer', self.line, token.column, token.value)
        return Integer(value)

    def OPERATOR(self, token):
        return Operator.from_symbol(token.value)

    def expression(self, items):
        left = items[0]
        i = 1
        while i < len(items):
            left = BinaryExpression(left, items[i], items[i + 1])
            i += 2
        return left


def _expected(e: UnexpectedInput) -> str:
    if isinstance(e, UnexpectedCharacters):
        names = e.allowed
    elif isinstance(e, (UnexpectedToken, UnexpectedEOF)):
        names = e.expected
    else:
        names = ()
    names = sorted(n for n in names if n != '$END')
    if not names:
        return 'end of expression'
    if len(names) == 1:
        return names[0]
    return 'one of ' + ', '.join(names)


def parse_expression(text: str, line: int = 1) -> BinaryExpression:
    """Parse `text` as a complete arithmetic expression."""
    try:
        tree = EXPRESSION_PARSER.parse(text)
    except UnexpectedInput as e:
        column = getattr(e, 'column', -1)
        if isinstance(e, UnexpectedToken) and e.token.type == '$END':
            column = -1
        if not isinstance(column, int) or column < 1:
            column = len(text) + 1
        found = text[column - 1] if column <= len(text) else None
        raise ParseError(_expected(e), line, column, found) from None
    try:
        return ExpressionTransformer(line).transform(tree)
    except VisitError as e:
        # Transformer callbacks are wrapped by Lark; surface the original
        raise e.orig_exc from None
