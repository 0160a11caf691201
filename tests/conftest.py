import pytest

from schemelet.interpreter import Interpreter


@pytest.fixture
def interp():
    """Fresh interpreter with default settings."""
    return Interpreter()


@pytest.fixture
def run(interp):
    return interp.run
