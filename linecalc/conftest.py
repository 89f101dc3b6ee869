import pytest
from prompt_toolkit.history import InMemoryHistory

from linecalc.config import Settings
from linecalc.repl import REPL


class ScriptedSession:
    """Stands in for a PromptSession: replays lines, raising any exception items."""

    def __init__(self, lines, history=None):
        self.lines = iter(lines)
        self.history = history or InMemoryHistory()
        self.prompts = []

    def prompt(self, message, completer=None):
        self.prompts.append(message)
        item = next(self.lines, EOFError)
        if isinstance(item, type) and issubclass(item, BaseException):
            raise item()
        if isinstance(item, BaseException):
            raise item
        self.history.append_string(item)
        return item


@pytest.fixture
def settings():
    return Settings(history_file=None)


@pytest.fixture
def make_repl(settings):
    def _make(lines=(), history=None, **overrides):
        session = ScriptedSession(lines, history)
        return REPL(settings.model_copy(update=overrides), session=session)
    return _make


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in ("LINECALC_PROMPT", "LINECALC_HISTORY_FILE", "LINECALC_LOG_LEVEL", "LINECALC_PRECISION"):
        monkeypatch.delenv(key, raising=False)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
