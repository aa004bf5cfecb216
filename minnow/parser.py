"""Parser for the Minnow language.

A predictive recursive-descent parser over the token list produced by
:func:`minnow.lexer.tokenize`. The grammar is small:

    program        := statement* EOF
    statement      := let_statement | exit_statement
    let_statement  := 'let' IDENT '=' expr ';'
    exit_statement := 'exit' expr ';'
    expr           := primary (('+' | '-' | '*' | '/') primary)*
    primary        := INT | IDENT

All four operators share one precedence level and associate to the left,
so ``2 + 3 * 4`` is ``(2 + 3) * 4``. Existing programs depend on this, so
it must not be "fixed". There is no grouping syntax.

The parser never recovers: the first mismatch raises :class:`ParseError`
and no partial program is returned.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Program, IntLiteral, Identifier, BinaryExpr, LetStatement, ExitStatement,
    Node,
)
from .errors import ParseError
from .lexer import (
    Token, tokenize,
    INT, IDENT, EQUALS, SEMI, LET, EXIT, EOF, PLUS, MINUS, STAR, SLASH,
    OPERATOR_TOKENS,
)
from .types import fits_int32


OPERATOR_SYMBOLS = {
    PLUS: '+',
    MINUS: '-',
    STAR: '*',
    SLASH: '/',
}


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def match(self, *expected: str) -> bool:
        token = self.peek()
        if token is None:
            return False
        return token.type in expected

    def consume(self, *expected: str) -> Token:
        token = self.peek()
        if token is None:
            raise ParseError(f"unexpected end of input, expected {' or '.join(expected)}")
        if expected and token.type not in expected:
            raise ParseError(
                f"expected {' or '.join(expected)} at {token.line}:{token.column}, "
                f"got {describe(token)}"
            )
        self.pos += 1
        return token

    def parse_program(self) -> Program:
        statements: List[Node] = []
        while not self.match(EOF):
            statements.append(self.parse_statement())
        self.consume(EOF)
        return Program(statements)

    def parse_statement(self) -> Node:
        token = self.peek()
        if token is None:
            raise ParseError("unexpected end of input")
        if token.type == LET:
            return self.parse_let()
        if token.type == EXIT:
            return self.parse_exit()
        raise ParseError(
            f"expected 'let' or 'exit' at {token.line}:{token.column}, got {describe(token)}"
        )

    def parse_let(self) -> LetStatement:
        self.consume(LET)
        name = self.consume(IDENT).value
        self.consume(EQUALS)
        value = self.parse_expr()
        self.consume(SEMI)
        return LetStatement(name, value)

    def parse_exit(self) -> ExitStatement:
        self.consume(EXIT)
        value = self.parse_expr()
        self.consume(SEMI)
        return ExitStatement(value)

    # expr: primary (op primary)*, folded to the left with no precedence
    def parse_expr(self) -> Node:
        node = self.parse_primary()
        while self.match(*OPERATOR_TOKENS):
            op_token = self.consume(*OPERATOR_TOKENS)
            right = self.parse_primary()
            node = BinaryExpr(OPERATOR_SYMBOLS[op_token.type], node, right)
        return node

    def parse_primary(self) -> Node:
        token = self.peek()
        if token is None:
            raise ParseError("unexpected end of input in expression")
        if token.type == INT:
            self.consume(INT)
            value = int(token.value)
            if not fits_int32(value):
                raise ParseError(
                    f"integer literal {token.value} out of range at {token.line}:{token.column}"
                )
            return IntLiteral(value)
        if token.type == IDENT:
            self.consume(IDENT)
            return Identifier(token.value)
        raise ParseError(
            f"expected primary expression at {token.line}:{token.column}, got {describe(token)}"
        )


def describe(token: Token) -> str:
    if token.type == EOF:
        return 'end of input'
    if not token.value:
        return token.type
    return f"{token.type} {token.value!r}"


def parse_tokens(tokens: List[Token]) -> Program:
    return Parser(tokens).parse_program()


def parse_program(source: str) -> Program:
    """Parse Minnow source code into a Program AST."""
    return parse_tokens(tokenize(source))
