"""JSON serialization/deserialization for minibasic programs.

This module converts between parsed programs and plain Python dict/list
structures suitable for JSON encoding. It supports a full round-trip
for every command, print target and primitive.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import Assign, Comment, Empty, Jump, Line, Literal, Print, VariableRef
from .program import Program
from .types import Alias, Integer, Text


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    # Program structure
    if isinstance(node, Program):
        return {"type": "Program", "lines": [ast_to_obj(line) for line in node]}
    if isinstance(node, Line):
        return {"type": "Line", "number": node.number, "command": ast_to_obj(node.command)}

    # Commands
    if isinstance(node, Print):
        return {"type": "Print", "target": ast_to_obj(node.target)}
    if isinstance(node, Jump):
        return {"type": "Jump", "line_number": node.line_number}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, Comment):
        return {"type": "Comment"}
    if isinstance(node, Empty):
        return {"type": "Empty"}

    # Print targets
    if isinstance(node, Literal):
        return {"type": "Literal", "text": node.text}
    if isinstance(node, VariableRef):
        return {"type": "VariableRef", "name": node.name}

    # Primitives
    if isinstance(node, Integer):
        return {"type": "Integer", "value": node.value}
    if isinstance(node, Text):
        return {"type": "Text", "value": node.value}
    if isinstance(node, Alias):
        return {"type": "Alias", "name": node.name}

    raise TypeError(f"Unsupported node type for serialization: {type(node).__name__}")


def ast_from_obj(o: Any) -> Any:
    if o is None:
        return None
    if not isinstance(o, dict) or "type" not in o:
        raise ValueError(f"Invalid AST object: {o!r}")
    t = o["type"]

    if t == "Program":
        return Program.build(ast_from_obj(x) for x in o.get("lines", []))
    if t == "Line":
        return Line(int(o["number"]), ast_from_obj(o["command"]))

    if t == "Print":
        return Print(ast_from_obj(o["target"]))
    if t == "Jump":
        return Jump(int(o["line_number"]))
    if t == "Assign":
        return Assign(o["name"], ast_from_obj(o["value"]))
    if t == "Comment":
        return Comment()
    if t == "Empty":
        return Empty()

    if t == "Literal":
        return Literal(o["text"])
    if t == "VariableRef":
        return VariableRef(o["name"])

    if t == "Integer":
        return Integer(int(o["value"]))
    if t == "Text":
        return Text(o["value"])
    if t == "Alias":
        return Alias(o["name"])

    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(program: Program) -> Dict[str, Any]:
    return ast_to_obj(program)


def program_from_obj(o: Dict[str, Any]) -> Program:
    program = ast_from_obj(o)
    if not isinstance(program, Program):
        raise ValueError(f"Expected a Program object, got {o.get('type')!r}")
    return program
