import pytest

from minnow.interpreter import Interpreter
from minnow.parser import parse_program


def test_program_1(example_source):
    ast = parse_program(example_source('program_1.minnow'))
    interp = Interpreter()
    with pytest.raises(SystemExit) as excinfo:
        interp.run(ast)
    assert excinfo.value.code == 7
    assert interp.env.values == {'x': 5, 'y': 10}
