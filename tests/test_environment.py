import pytest

from minnow.environment import Environment
from minnow.errors import UnboundNameError


def test_set_and_get():
    env = Environment()
    env.set('x', 3)
    assert env.get('x') == 3
    assert env['x'] == 3
    assert 'x' in env
    assert len(env) == 1


def test_overwrite():
    env = Environment()
    env.set('x', 3)
    env.set('x', -1)
    assert env.get('x') == -1
    assert list(env) == ['x']


def test_missing_name():
    env = Environment()
    with pytest.raises(UnboundNameError, match='undefined variable nope'):
        env.get('nope')
    assert 'nope' not in env
