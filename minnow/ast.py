"""Abstract Syntax Tree (AST) definitions for the Minnow language.

A Minnow program is a flat list of statements. Each node is one of five
immutable dataclasses; children are owned by their parent node, so the
structure is always a tree. Nodes compare structurally, which makes two
parses of the same input equal to each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class IntLiteral:
    value: int


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryExpr:
    op: str  # one of '+', '-', '*', '/'
    left: 'Node'
    right: 'Node'


@dataclass(frozen=True)
class LetStatement:
    name: str
    value: 'Node'


@dataclass(frozen=True)
class ExitStatement:
    value: 'Node'


Node = Union[IntLiteral, Identifier, BinaryExpr, LetStatement, ExitStatement]


@dataclass
class Program:
    body: List[Node] = field(default_factory=list)
