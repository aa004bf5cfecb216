from minnow.interpreter import Interpreter
from minnow.parser import parse_program


def test_program_4_no_exit_returns_last_value(example_source):
    ast = parse_program(example_source('program_4.minnow'))
    interp = Interpreter()
    assert interp.run(ast) == 3
    assert interp.env.values == {'total': 3}
