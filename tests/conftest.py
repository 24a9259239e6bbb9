import pytest

from mallow.types.environment import Environment
from mallow.builtin.env_builtin import register
from mallow.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
