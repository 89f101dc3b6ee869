# test_repl.py

import math

import pytest
from prompt_toolkit.history import FileHistory, InMemoryHistory

from linecalc.config import Settings
from linecalc.repl import HISTORY_LIMIT, REPL, format_result, show_help

# ---------------------------
# Result formatting
# ---------------------------


@pytest.mark.parametrize("value,precision,expected", [
    (14.0, None, "14"),
    (-3.0, None, "-3"),
    (0.5, None, "0.5"),
    (1e20, None, "1e+20"),
    (math.inf, None, "inf"),
    (-math.inf, None, "-inf"),
    (math.nan, None, "nan"),
    (math.pi, 3, "3.14"),
    (math.inf, 3, "inf"),
])
def test_format_result(value, precision, expected):
    assert format_result(value, precision) == expected

# ---------------------------
# Help
# ---------------------------


def test_show_help_general():
    text = show_help()
    assert "Calculator REPL help" in text
    assert "Commands" in text


def test_show_help_topics():
    assert "left-assoc" in show_help("operators")
    assert "tau" in show_help("Constants")
    assert "No help available" in show_help("nope")

# ---------------------------
# Line evaluation
# ---------------------------


def test_evaluate_line_expression(make_repl):
    assert make_repl().evaluate_line("2 + 2") == (True, "= 4")


def test_evaluate_line_uses_precision(make_repl):
    assert make_repl(precision=4).evaluate_line("pi") == (True, "= 3.142")


def test_evaluate_line_parse_error(make_repl):
    ok, out = make_repl().evaluate_line("1 +")
    assert not ok
    assert out == "error: expected one of Number, UnaryOperator, ParenthesisOpen but found end of input at index 3"


def test_evaluate_line_empty(make_repl):
    ok, out = make_repl().evaluate_line("")
    assert not ok
    assert "end of input at index 0" in out


@pytest.mark.parametrize("line", ["help", ":help", "HELP"])
def test_evaluate_line_help(make_repl, line):
    ok, out = make_repl().evaluate_line(line)
    assert ok
    assert "Calculator REPL help" in out


def test_evaluate_line_help_topic(make_repl):
    assert "Operators and precedence" in make_repl().evaluate_line("help operators")[1]


def test_evaluate_line_unknown_command(make_repl):
    assert make_repl().evaluate_line(":vars") == (True, "Unknown command: :vars")


@pytest.mark.parametrize("line", ["exit", "quit", ":exit", " QUIT "])
def test_evaluate_line_exit(make_repl, line):
    with pytest.raises(EOFError):
        make_repl().evaluate_line(line)


def test_history_command(make_repl):
    history = InMemoryHistory()
    for line in ("1+1", "2*3"):
        history.append_string(line)
    ok, out = make_repl(history=history).evaluate_line(":history")
    assert ok
    assert out.splitlines() == ["1+1", "2*3"]


def test_history_command_limits_entries(make_repl):
    history = InMemoryHistory()
    for i in range(HISTORY_LIMIT + 10):
        history.append_string(str(i))
    out = make_repl(history=history).evaluate_line(":history")[1].splitlines()
    assert len(out) == HISTORY_LIMIT
    assert out[-1] == str(HISTORY_LIMIT + 9)


def test_history_command_empty(make_repl):
    assert make_repl().evaluate_line(":history") == (True, "(no history)")

# ---------------------------
# History backend
# ---------------------------


def test_history_disabled_uses_memory(make_repl):
    assert isinstance(make_repl()._make_history(), InMemoryHistory)


def test_history_file(tmp_path, make_repl):
    path = tmp_path / "history"
    history = make_repl(history_file=path)._make_history()
    assert isinstance(history, FileHistory)
    history.append_string("1+2")
    assert "1+2" in path.read_text()

# ---------------------------
# Loop
# ---------------------------


def test_repl_loop_prints_results(make_repl, capsys):
    repl = make_repl(["2*3", "", "1 2", "exit"])
    repl.repl_loop()
    out = capsys.readouterr().out
    assert "= 6" in out
    assert "error: expected one of InfixOperator, Eof but found '2' at index 2" in out
    assert out.rstrip().endswith("Exiting.")


def test_repl_loop_uses_configured_prompt(make_repl):
    repl = make_repl(["1"], prompt="calc> ")
    repl.repl_loop()
    assert repl.session.prompts[0] == "calc> "


def test_repl_loop_keyboard_interrupt_continues(make_repl, capsys):
    repl = make_repl([KeyboardInterrupt, "5"])
    repl.repl_loop()
    out = capsys.readouterr().out
    assert "^C" in out
    assert "= 5" in out


def test_repl_loop_eof(make_repl, capsys):
    make_repl([]).repl_loop()
    out = capsys.readouterr().out
    assert "Interactive Calculator REPL" in out
    assert "Exiting." in out


def test_repl_defaults_settings():
    class Session:
        history = InMemoryHistory()

    repl = REPL(session=Session())
    assert repl.settings == Settings()
