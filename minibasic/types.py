"""Value definitions and helpers for minibasic.

This module defines the scalar values a program can assign and print.
Only two kinds are ever stored: `Integer` and `Text`. `Alias` is the
transient marker produced by `LET a=b`; the interpreter resolves it to a
copy of the named variable's value before anything is stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
U64_MAX = 2 ** 64 - 1


@dataclass(frozen=True)
class Integer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Alias:
    """Names another variable whose current value should be copied."""
    name: str

    def __str__(self) -> str:
        return f"Assignment from {self.name}"


Primitive = Union[Integer, Text, Alias]
Value = Union[Integer, Text]


@dataclass
class ErrorVal:
    """Represents a minibasic runtime error.

    Errors carry a kind (`NameError`, `JumpError`, `TypeError`) and a
    human readable message.
    """
    name: str
    message: str


def is_value(value: Any) -> bool:
    return isinstance(value, (Integer, Text))


def to_string(value: Any) -> str:
    """Render a stored value the way PRINT shows it."""
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Text):
        return value.value
    return str(value)


def type_name(value: Any) -> str:
    if isinstance(value, Integer):
        return 'Integer'
    if isinstance(value, Text):
        return 'Text'
    if isinstance(value, Alias):
        return 'Alias'
    return type(value).__name__
