from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds a Minnow pipeline can report."""
    SYNTAX = 'SyntaxError'
    UNBOUND_NAME = 'UnboundName'
    DIVISION_BY_ZERO = 'DivisionByZero'
    UNKNOWN_OPERATOR = 'UnknownOperator'
    INTERNAL = 'InternalError'


class MinnowError(Exception):
    """Base exception for parse and evaluation failures."""
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class ParseError(MinnowError):
    kind = ErrorKind.SYNTAX


class UnboundNameError(MinnowError):
    kind = ErrorKind.UNBOUND_NAME

    def __init__(self, name: str):
        super().__init__(f"undefined variable {name}")
        self.name = name


class DivisionByZeroError(MinnowError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self):
        super().__init__('division by zero')


class UnknownOperatorError(MinnowError):
    kind = ErrorKind.UNKNOWN_OPERATOR

    def __init__(self, op: str):
        super().__init__(f"unknown binary operator {op}")
        self.op = op


class ProgramExit(SystemExit):
    """Raised by an exit statement to terminate the hosting process."""
    def __init__(self, code: int):
        super().__init__(code)
