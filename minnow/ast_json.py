"""JSON serialization/deserialization for Minnow AST.

This module converts between Minnow AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for programs and all five node types.

Nodes nest as JSON objects, and the ``json`` module recurses once per
level, so trees deeper than ``MAX_DEPTH`` are rejected with
``ValueError`` in both directions. Loading also re-checks what the parser
guarantees: integer literals fit in 32 bits and names are identifiers.
"""

from __future__ import annotations

import re
from typing import Any

from .ast import (
    Program,
    IntLiteral,
    Identifier,
    BinaryExpr,
    LetStatement,
    ExitStatement,
)
from .types import fits_int32

MAX_DEPTH = 400

NAME_RE = re.compile(r'[A-Za-z][A-Za-z0-9]*\Z')


def check_depth(depth: int) -> None:
    if depth > MAX_DEPTH:
        raise ValueError(f"AST nested deeper than {MAX_DEPTH} levels")


def check_name(name: Any) -> str:
    if not isinstance(name, str) or not NAME_RE.match(name):
        raise ValueError(f"invalid identifier name {name!r}")
    return name


def ast_to_obj(node: Any, depth: int = 0) -> Any:
    check_depth(depth)
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n, depth + 1) for n in node.body]}
    if isinstance(node, IntLiteral):
        return {"type": "IntLiteral", "value": node.value}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, BinaryExpr):
        return {
            "type": "BinaryExpr",
            "op": node.op,
            "left": ast_to_obj(node.left, depth + 1),
            "right": ast_to_obj(node.right, depth + 1),
        }
    if isinstance(node, LetStatement):
        return {"type": "LetStatement", "name": node.name, "value": ast_to_obj(node.value, depth + 1)}
    if isinstance(node, ExitStatement):
        return {"type": "ExitStatement", "value": ast_to_obj(node.value, depth + 1)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any, depth: int = 0) -> Any:
    check_depth(depth)
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n, depth + 1) for n in obj["body"]])
    if t == "IntLiteral":
        value = obj["value"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"IntLiteral value must be an integer, got {value!r}")
        if not fits_int32(value):
            raise ValueError(f"IntLiteral value {value} out of 32-bit range")
        return IntLiteral(value=value)
    if t == "Identifier":
        return Identifier(name=check_name(obj["name"]))
    if t == "BinaryExpr":
        return BinaryExpr(
            op=obj["op"],
            left=ast_from_obj(obj["left"], depth + 1),
            right=ast_from_obj(obj["right"], depth + 1),
        )
    if t == "LetStatement":
        return LetStatement(name=check_name(obj["name"]), value=ast_from_obj(obj["value"], depth + 1))
    if t == "ExitStatement":
        return ExitStatement(value=ast_from_obj(obj["value"], depth + 1))

    raise ValueError(f"Unknown AST node type: {t}")
