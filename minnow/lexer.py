"""Tokenizer for the Minnow language.

Scanning is delegated to a Lark basic lexer built from the terminal
definitions below. Lark resolves the keyword/identifier overlap itself:
``let`` and ``exit`` are matched by the ``IDENT`` pattern and retyped to
their keyword terminals. Whitespace is ignored, and so is any character
that no other terminal accepts (``STRAY`` has the lowest priority and is
ignored), which keeps the lexer total.

The Lark tokens are copied into :class:`Token` records and the list is
closed with a single ``EOF`` token, so the parser only ever sees Minnow's
own token contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from lark import Lark


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    line: int = 0
    column: int = 0


INT = 'INT'
IDENT = 'IDENT'
PLUS = 'PLUS'
MINUS = 'MINUS'
STAR = 'STAR'
SLASH = 'SLASH'
EQUALS = 'EQUALS'
SEMI = 'SEMI'
LET = 'LET'
EXIT = 'EXIT'
EOF = 'EOF'

OPERATOR_TOKENS = (PLUS, MINUS, STAR, SLASH)

# only these keep their source text; punctuation and EOF carry an empty value
TEXT_TOKENS = (INT, IDENT, LET, EXIT)


MINNOW_TOKENS = r"""
    start: _token*
    _token: INT | IDENT | LET | EXIT
          | PLUS | MINUS | STAR | SLASH | EQUALS | SEMI

    LET.1: "let"
    EXIT.1: "exit"
    IDENT.1: /[A-Za-z][A-Za-z0-9]*/
    INT.1: /[0-9]+/

    PLUS.1: "+"
    MINUS.1: "-"
    STAR.1: "*"
    SLASH.1: "/"
    EQUALS.1: "="
    SEMI.1: ";"

    WS: /[ \t\f\r\n\v]+/
    %ignore WS

    // anything else is dropped without a diagnostic
    STRAY: /./s
    %ignore STRAY
"""


MINNOW_LEXER = Lark(
    MINNOW_TOKENS,
    parser='lalr',
    lexer='basic',
)


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with ``EOF``."""
    tokens: List[Token] = []
    line, column = 1, 1
    for tok in MINNOW_LEXER.lex(source):
        value = str(tok) if tok.type in TEXT_TOKENS else ''
        tokens.append(Token(tok.type, value, tok.line, tok.column))
        line = tok.end_line if tok.end_line is not None else tok.line
        column = tok.end_column if tok.end_column is not None else tok.column
    tokens.append(Token(EOF, '', line, column))
    return tokens
