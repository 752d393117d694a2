import pytest

from hyoka.interpreter import Interpreter
from hyoka.reader.parser import parse
from hyoka.evaluation.evaluator import evaluate
from hyoka.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return Environment.new_empty()


@pytest.fixture
def run(env):
    """Parse and evaluate each source string against the shared `env`; return the last result."""
    def _run(*sources, max_depth=None):
        result = None
        for source in sources:
            result = evaluate(parse(source), env, max_depth=max_depth)
        return result
    return _run


@pytest.fixture
def interp():
    return Interpreter(max_depth=100)


@pytest.fixture(autouse=True)
def _clean_hyoka_environment(monkeypatch):
    # Configuration is read from HYOKA_* variables; start every test from the defaults.
    for var in ("HYOKA_MAX_DEPTH", "HYOKA_PROMPT", "HYOKA_EXIT_COMMANDS", "HYOKA_COLOR", "HYOKA_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
