# errors.py

"""Exception types raised by the expression evaluator."""

from typing import Optional, Tuple

from .tokens import TokenKind


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class ParseError(CalculatorError):
    """
    Raised when no acceptable token matches at the cursor.

    Carries the character offset of the failure, the ordered token kinds that
    would have been accepted there, and the character actually found (None when
    the input ended).
    """

    def __init__(self, position: int, expected: Tuple[TokenKind, ...], found: Optional[str],
                 hint: Optional[str] = None):
        self.position = position
        self.expected = tuple(expected)
        self.found = found
        self.hint = hint
        super().__init__(self.render())

    @property
    def at_end(self) -> bool:
        return self.found is None

    def render(self) -> str:
        kinds = ", ".join(kind.value for kind in self.expected)
        if self.found is None:
            found = "end of input"
        else:
            found = repr(self.found)
        message = f"expected one of {kinds} but found {found} at index {self.position}"
        if self.hint:
            message = f"{message} ({self.hint})"
        return message

    def __repr__(self):
        return f"ParseError(position={self.position}, expected={self.expected}, found={self.found!r})"


class GrammarStateError(RuntimeError):
    """Raised when the evaluator reaches a non-terminal state with nothing acceptable."""
    pass
