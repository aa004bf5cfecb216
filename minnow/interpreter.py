"""Tree-walking interpreter for the Minnow language.

The interpreter evaluates a :class:`~minnow.ast.Program` statement by
statement against an :class:`~minnow.environment.Environment` it owns.
The environment outlives a single program, so an interactive session can
feed one line at a time to the same interpreter and see earlier bindings.

Every node evaluates to an integer. A ``let`` yields the value it bound;
an ``exit`` never yields at all: it raises :class:`ProgramExit`, which
terminates the process with the evaluated code.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Tuple

from .ast import (
    Program, IntLiteral, Identifier, BinaryExpr, LetStatement, ExitStatement,
    Node,
)
from .environment import Environment
from .errors import (
    MinnowError, DivisionByZeroError, UnknownOperatorError, ProgramExit,
)
from .parser import parse_program
from .types import wrap_int32, truncating_div


class Interpreter:
    """Core interpreter that executes Minnow AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.env = Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None
        self.handlers: Dict[type, Callable[[Node, Environment], int]] = {
            IntLiteral: self.eval_int_literal,
            Identifier: self.eval_identifier,
            BinaryExpr: self.eval_binary,
            LetStatement: self.eval_let,
            ExitStatement: self.eval_exit,
        }

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> int:
        """Evaluate a whole program once and release the debug trace."""
        try:
            return self.eval_program(program, env)
        finally:
            self.close()

    def eval_program(self, program: Program, env: Optional[Environment] = None) -> int:
        if env is None:
            env = self.env
        result = 0
        for index, stmt in enumerate(program.body):
            self.debug(f"statement {index}: {type(stmt).__name__}")
            result = self.evaluate(stmt, env)
        return result

    def evaluate(self, node: Node, env: Environment) -> int:
        handler = self.handlers.get(type(node))
        if handler is None:
            raise MinnowError(f"unknown node type {type(node).__name__}")
        return handler(node, env)

    def eval_int_literal(self, node: IntLiteral, env: Environment) -> int:
        return node.value

    def eval_identifier(self, node: Identifier, env: Environment) -> int:
        return env.get(node.name)

    def eval_binary(self, node: BinaryExpr, env: Environment) -> int:
        # Explicit post-order stack: a long chain like `0 + 1 + 1 ...` is as
        # deep as it has operators, far past Python's recursion limit.
        # Left subtrees are pushed last so they are always evaluated first.
        values: List[int] = []
        stack: List[Tuple[Node, bool]] = [(node, False)]
        while stack:
            current, operands_ready = stack.pop()
            if operands_ready:
                right = values.pop()
                left = values.pop()
                result = self.apply_binary_op(current.op, left, right)
                if self.debug_level >= 3:
                    self.debug(f"{left} {current.op} {right} -> {result}")
                values.append(result)
            elif isinstance(current, BinaryExpr):
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
            else:
                values.append(self.evaluate(current, env))
        return values.pop()

    def eval_let(self, node: LetStatement, env: Environment) -> int:
        value = self.evaluate(node.value, env)
        env.set(node.name, value)
        if self.debug_level >= 2:
            self.debug(f"let {node.name} = {value}")
        return value

    def eval_exit(self, node: ExitStatement, env: Environment) -> int:
        code = self.evaluate(node.value, env)
        self.debug(f"exit {code}")
        self.close()
        sys.stdout.flush()
        sys.stderr.flush()
        raise ProgramExit(code)

    def apply_binary_op(self, op: str, a: int, b: int) -> int:
        if op == '+':
            return wrap_int32(a + b)
        if op == '-':
            return wrap_int32(a - b)
        if op == '*':
            return wrap_int32(a * b)
        if op == '/':
            if b == 0:
                raise DivisionByZeroError()
            return truncating_div(a, b)
        raise UnknownOperatorError(op)


def run_program(source: str, debug_level: int = 0) -> int:
    """Convenience function to parse and run a Minnow program from source string."""
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.run(ast_program)


def run_file(file_path: str, debug_level: int = 0) -> int:
    """Parse and run a Minnow file with a fresh interpreter."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
