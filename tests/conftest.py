import pytest

from eta.builtin.env_builtin import register
from eta.interpreter import Interpreter
from eta.types.environment import Environment


@pytest.fixture
def env():
    """A fresh root environment with the builtins installed."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
