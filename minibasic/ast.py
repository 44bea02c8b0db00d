"""Abstract Syntax Tree (AST) definitions for minibasic.

Each program line is parsed into a `Line` holding its line number and
exactly one command node. Commands are immutable so that a built
`Program` can be shared freely between interpreters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .types import Primitive


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


# Print targets

@dataclass(frozen=True)
class Literal(Node):
    text: str


@dataclass(frozen=True)
class VariableRef(Node):
    name: str


PrintTarget = Union[Literal, VariableRef]


# Commands

@dataclass(frozen=True)
class Print(Node):
    target: PrintTarget


@dataclass(frozen=True)
class Jump(Node):
    line_number: int


@dataclass(frozen=True)
class Assign(Node):
    name: str
    value: Primitive


@dataclass(frozen=True)
class Comment(Node):
    pass


@dataclass(frozen=True)
class Empty(Node):
    pass


Command = Union[Print, Jump, Assign, Comment, Empty]


@dataclass(frozen=True)
class Line:
    number: int
    command: Command
