import pytest

from minnow.interpreter import Interpreter
from minnow.parser import parse_program


def test_program_3_parentheses_are_ignored(example_source):
    """Parentheses are not part of the grammar.

    The lexer drops them, so `(1 + 2) * (5 - 3)` reads as
    `1 + 2 * 5 - 3`, which folds left to ((1 + 2) * 5) - 3 = 12.
    """
    ast = parse_program(example_source('program_3.minnow'))
    with pytest.raises(SystemExit) as excinfo:
        Interpreter().run(ast)
    assert excinfo.value.code == 12
