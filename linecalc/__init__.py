"""linecalc: single-line arithmetic expression evaluator."""

from .constants import CONSTANTS
from .errors import CalculatorError, GrammarStateError, ParseError
from .evaluator import evaluate
from .tokens import TokenKind

__version__ = "0.1.0"

__all__ = [
    "CONSTANTS",
    "CalculatorError",
    "GrammarStateError",
    "ParseError",
    "TokenKind",
    "evaluate",
]
