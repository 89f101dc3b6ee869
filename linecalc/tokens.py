# tokens.py

"""Token kinds and the acceptable-kind sets of the evaluator state machine."""

from enum import Enum
from typing import Tuple


class TokenKind(Enum):
    """Kinds of token the evaluator can accept at a position."""
    NUMBER = 'Number'
    UNARY_OPERATOR = 'UnaryOperator'
    INFIX_OPERATOR = 'InfixOperator'
    PARENTHESIS_OPEN = 'ParenthesisOpen'
    PARENTHESIS_CLOSE = 'ParenthesisClose'
    EOF = 'Eof'

    def __str__(self):
        return self.value


AcceptableSet = Tuple[TokenKind, ...]

# Start of an expression, and after an infix operator or a unary sign.
EXPECT_OPERAND: AcceptableSet = (
    TokenKind.NUMBER,
    TokenKind.UNARY_OPERATOR,
    TokenKind.PARENTHESIS_OPEN,
)

# After a complete operand in the outermost expression.
EXPECT_OPERATOR_OR_END: AcceptableSet = (
    TokenKind.INFIX_OPERATOR,
    TokenKind.EOF,
)

# After a complete operand inside parentheses.
EXPECT_OPERATOR_OR_CLOSE: AcceptableSet = (
    TokenKind.INFIX_OPERATOR,
    TokenKind.PARENTHESIS_CLOSE,
)

TERMINAL_KINDS = frozenset({TokenKind.EOF, TokenKind.PARENTHESIS_CLOSE})

# Returned by a terminal recognizer: nothing follows.
FINISHED: AcceptableSet = ()


def after_operand(enclosed_in_parens: bool) -> AcceptableSet:
    if enclosed_in_parens:
        return EXPECT_OPERATOR_OR_CLOSE
    return EXPECT_OPERATOR_OR_END
