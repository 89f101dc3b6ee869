# state.py

"""Per-expression evaluation state and precedence folding."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .operators import ADDITIVE, Operator

logger = logging.getLogger(__name__)


@dataclass
class PendingOperation:
    """A binary operation waiting for its right operand."""
    left_operand: float
    operator: Operator


@dataclass
class EvaluationState:
    """
    Running state of one expression or parenthesized sub-expression.

    `pending` is a stack of deferred operations. Precedence strictly increases
    from the bottom of the stack to the top, so it never holds two operations of
    the same level.
    """
    enclosed_in_parens: bool = False
    accumulator: float = 0.0
    pending_unary: Optional[str] = None
    pending: List[PendingOperation] = field(default_factory=list)

    @property
    def last_operator_precedence(self) -> Optional[int]:
        if not self.pending:
            return None
        return self.pending[-1].operator.precedence

    def push_unary(self, sign: str) -> None:
        """Composes a sign with the one already pending: '-' twice gives '+'."""
        if self.pending_unary is None:
            self.pending_unary = sign
        else:
            self.pending_unary = '+' if self.pending_unary == sign else '-'

    def set_operand(self, value: float) -> None:
        """Stores a freshly read operand, applying and clearing the pending sign."""
        if self.pending_unary == '-':
            value = -value
        self.pending_unary = None
        self.accumulator = value

    def push_operator(self, operator: Operator) -> None:
        self.fold(operator.precedence)
        self.pending.append(PendingOperation(self.accumulator, operator))

    def fold(self, min_precedence: int = ADDITIVE) -> None:
        """Applies pending operations of precedence >= min_precedence, top first."""
        while self.pending and self.pending[-1].operator.precedence >= min_precedence:
            operation = self.pending.pop()
            result = operation.operator.apply(operation.left_operand, self.accumulator)
            logger.debug(
                "fold %r %s %r -> %r",
                operation.left_operand, operation.operator.symbol, self.accumulator, result,
            )
            self.accumulator = result
