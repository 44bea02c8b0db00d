# minibasic language package
# This package provides a parser and interpreter for a line-numbered BASIC dialect.
from .interpreter import run_program, compile_module, Interpreter
from .parser import parse_program, parse_line
from .expressions import parse_expression, BinaryExpression, Operator
from .errors import BasicError, ParseError

__all__ = [
    'run_program',
    'compile_module',
    'Interpreter',
    'parse_program',
    'parse_line',
    'parse_expression',
    'BinaryExpression',
    'Operator',
    'BasicError',
    'ParseError',
]
