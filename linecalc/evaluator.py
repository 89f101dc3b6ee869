# evaluator.py

"""
Single-pass expression evaluator.

Tokenizing, precedence resolution and arithmetic happen in one left-to-right
scan: no token list and no syntax tree are built. The evaluator keeps the set
of token kinds acceptable at the cursor, tries the matching recognizers in
order, and recurses once per parenthesis level.

    >>> evaluate("2 + 3 * 4")
    14.0
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from .constants import CONSTANT_NAMES
from .cursor import Cursor
from .errors import GrammarStateError, ParseError
from .recognizers import recognize_eof, recognize_infix, recognize_number, recognize_unary
from .state import EvaluationState
from .tokens import (
    EXPECT_OPERAND,
    FINISHED,
    TERMINAL_KINDS,
    AcceptableSet,
    TokenKind,
    after_operand,
)

logger = logging.getLogger(__name__)

Recognizer = Callable[[Cursor, EvaluationState], Optional[AcceptableSet]]


def recognize_parenthesis_open(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    if cursor.peek() != '(':
        return None
    cursor.advance()
    value = evaluate_expression(cursor, enclosed_in_parens=True)
    state.set_operand(value)
    return after_operand(state.enclosed_in_parens)


def recognize_parenthesis_close(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    if not state.enclosed_in_parens or cursor.peek() != ')':
        return None
    cursor.advance()
    return FINISHED


RECOGNIZERS: Dict[TokenKind, Recognizer] = {
    TokenKind.NUMBER: recognize_number,
    TokenKind.UNARY_OPERATOR: recognize_unary,
    TokenKind.INFIX_OPERATOR: recognize_infix,
    TokenKind.PARENTHESIS_OPEN: recognize_parenthesis_open,
    TokenKind.PARENTHESIS_CLOSE: recognize_parenthesis_close,
    TokenKind.EOF: recognize_eof,
}


def _syntax_error(cursor: Cursor, acceptable: AcceptableSet) -> ParseError:
    found = cursor.peek()
    hint = None
    if found is not None and found.isalpha() and TokenKind.NUMBER in acceptable:
        hint = "known constants: " + ", ".join(CONSTANT_NAMES)
    return ParseError(cursor.position, acceptable, found, hint=hint)


def _next_token(cursor: Cursor, state: EvaluationState,
                acceptable: AcceptableSet) -> Tuple[TokenKind, AcceptableSet]:
    for kind in acceptable:
        following = RECOGNIZERS[kind](cursor, state)
        if following is not None:
            return kind, following
    raise _syntax_error(cursor, acceptable)


def evaluate_expression(cursor: Cursor, enclosed_in_parens: bool = False) -> float:
    """
    Evaluates from the cursor up to the end of input, or up to and including
    the matching ')' when enclosed_in_parens is set.
    """
    state = EvaluationState(enclosed_in_parens=enclosed_in_parens)
    acceptable = EXPECT_OPERAND
    cursor.skip_whitespace()
    while True:
        if not acceptable:
            raise GrammarStateError(f"no acceptable token kinds at index {cursor.position}")
        kind, acceptable = _next_token(cursor, state, acceptable)
        if kind in TERMINAL_KINDS:
            break
        # Signs bind to the very next character.
        if kind is not TokenKind.UNARY_OPERATOR:
            cursor.skip_whitespace()
    state.fold()
    if enclosed_in_parens:
        logger.debug("sub-expression closed at index %d = %r", cursor.position, state.accumulator)
    return state.accumulator


def evaluate(text: str) -> float:
    """
    Evaluates one arithmetic expression and returns its value.

    Raises ParseError at the first token that does not fit the grammar.
    Division by zero and invalid powers are not errors: they produce inf or nan.
    """
    result = evaluate_expression(Cursor(text))
    logger.debug("evaluated %r = %r", text, result)
    return result
