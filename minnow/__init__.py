# Minnow language package
# This package provides a tokenizer, parser and tree-walking interpreter for
# the Minnow language.
from .errors import (
    ErrorKind, MinnowError, ParseError, UnboundNameError, DivisionByZeroError,
    UnknownOperatorError, ProgramExit,
)
from .lexer import Token, tokenize
from .parser import Parser, parse_program
from .interpreter import Interpreter, run_program, run_file

__all__ = [
    'ErrorKind',
    'MinnowError',
    'ParseError',
    'UnboundNameError',
    'DivisionByZeroError',
    'UnknownOperatorError',
    'ProgramExit',
    'Token',
    'tokenize',
    'Parser',
    'parse_program',
    'Interpreter',
    'run_program',
    'run_file',
]
