import pytest

from mal import runtime_context
from mal.builtin.core_builtin import register
from mal.interpreter import Interpreter
from mal.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with the builtin table loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()


@pytest.fixture(autouse=True)
def _reset_call_depth_limit(monkeypatch):
    # Tests that tweak the depth limit or MAL_* variables must not leak it.
    monkeypatch.delenv("MAL_MAX_CALL_DEPTH", raising=False)
    yield
    runtime_context.set_max_call_depth(None)
