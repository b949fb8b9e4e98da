import pytest

from listscript.interpreter import Interpreter
from listscript.printer import to_display


@pytest.fixture
def interp():
    """Fresh interpreter with the primitives loaded; write goes to sys.stdout."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source line by line in `interp` and return the last result's display form."""
    def _run(source: str) -> str:
        return to_display(interp.eval(source))
    return _run
