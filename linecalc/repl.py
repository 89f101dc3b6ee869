# repl.py

"""Interactive read-eval-print loop and result formatting."""

import logging
import math
from itertools import islice
from typing import Dict, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from .config import Settings
from .constants import CONSTANT_NAMES
from .errors import CalculatorError
from .evaluator import evaluate

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50
EXIT_COMMANDS = frozenset({'exit', 'quit', ':exit', ':quit'})


def format_result(value: float, precision: Optional[int] = None) -> str:
    """Integral values print without a fractional part; inf and nan print as such."""
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    if precision is not None:
        return f"{value:.{precision}g}"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# --------------------------
# Help
# --------------------------

_HELP_TOPICS: Dict[str, str] = {
    'general': (
        "Calculator REPL help:\n"
        "Evaluates one arithmetic expression per line.\n"
        "Examples:\n"
        "  2 + 3 * 4        -> 14\n"
        "  (1 + 2) * 3      -> 9\n"
        "  --2              -> 2\n"
        "  1 + -pi * tau    -> -18.739208802178716\n"
        "Commands:\n"
        "  help [topic], :help [topic]   show help (topics: operators, constants)\n"
        "  :history                      show recent history\n"
        "  exit, quit, :exit             exit\n"
    ),
    'operators': (
        "Operators and precedence (high -> low):\n"
        "  prefix: + -   (may be chained: --2 == 2, +-2 == -2)\n"
        "  ^             (left-assoc: 2^3^2 == (2^3)^2 == 64)\n"
        "  * /\n"
        "  + -\n"
        "Notes:\n"
        "  - A sign applies to its operand before '^': -2^2 == 4.\n"
        "  - Division by zero gives inf or nan, not an error.\n"
    ),
    'constants': (
        "Named constants:\n"
        "  pi, tau (2*pi), e\n"
    ),
}


def show_help(topic: Optional[str] = None) -> str:
    """Return help text for topic or general if None."""
    if not topic:
        return _HELP_TOPICS['general']
    return _HELP_TOPICS.get(topic.lower(), f"No help available for topic '{topic}'")


# --------------------------
# REPL
# --------------------------

class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[PromptSession] = None):
        self.settings = settings or Settings()
        if session is None:
            session = PromptSession(history=self._make_history())
        self.session = session
        self.completer = WordCompleter(list(CONSTANT_NAMES) + ['help', ':help', ':history', 'exit'],
                                       ignore_case=True)

    def _make_history(self) -> History:
        path = self.settings.history_file
        if path is None:
            logger.info("Persistent history disabled")
            return InMemoryHistory()
        logger.info(f"Using history file {path}")
        return FileHistory(str(path))

    def history_entries(self) -> List[str]:
        """Most recent entries, oldest first."""
        # load_history_strings() yields newest first, straight from the backing store
        entries = list(islice(self.session.history.load_history_strings(), HISTORY_LIMIT))
        entries.reverse()
        return entries

    def _process_command(self, line: str) -> Optional[str]:
        """Returns the response when line is a command, else None. Raises EOFError on exit."""
        s = line.strip()
        if not s:
            return None
        if s.lower() in EXIT_COMMANDS:
            raise EOFError()
        parts = s.split(None, 1)
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else None
        if cmd in ('help', ':help'):
            return show_help(arg)
        if cmd == ':history':
            entries = self.history_entries()
            return "\n".join(entries) if entries else "(no history)"
        if cmd.startswith(':'):
            return f"Unknown command: {cmd}"
        return None

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            value = evaluate(line)
        except CalculatorError as e:
            logger.debug(f"Rejected {line!r}: {e!r}")
            return False, f"error: {e}"
        return True, f"= {format_result(value, self.settings.precision)}"

    def repl_loop(self) -> None:
        """Interactive loop; Ctrl-C cancels the current line, Ctrl-D exits."""
        print("Interactive Calculator REPL. Type help for help. Ctrl-D or exit to quit.")
        while True:
            try:
                line = self.session.prompt(self.settings.prompt, completer=self.completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                ok, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)
