# recognizers.py

"""
Token recognizers.

Each recognizer takes the cursor and the current EvaluationState, tries to
consume the upcoming input and returns the token kinds acceptable after it.
On a mismatch it returns None and leaves the cursor where it was. The
parenthesis recognizers recurse into the evaluator and live there.
"""

from typing import Optional

from .constants import CONSTANT_NAMES, CONSTANTS
from .cursor import Cursor
from .operators import OPERATORS, UNARY_SIGNS
from .state import EvaluationState
from .tokens import EXPECT_OPERAND, FINISHED, AcceptableSet, after_operand

DIGITS = frozenset('0123456789')


def _scan_digits(text: str, index: int) -> int:
    while index < len(text) and text[index] in DIGITS:
        index += 1
    return index


def recognize_constant(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    for name in CONSTANT_NAMES:
        if cursor.remaining_starts_with(name):
            cursor.advance_by(len(name))
            state.set_operand(CONSTANTS[name])
            return after_operand(state.enclosed_in_parens)
    return None


def recognize_number_literal(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    """
    Reads digits, optionally followed by '.' and more digits.

    The point is part of the number only when a digit sits on at least one
    side of it: '5.', '.5' and '5.5' are numbers, a lone '.' is not.
    """
    text, start = cursor.text, cursor.position
    end = _scan_digits(text, start)
    if end < len(text) and text[end] == '.':
        fraction_end = _scan_digits(text, end + 1)
        if end > start or fraction_end > end + 1:
            end = fraction_end
    if end == start:
        return None
    cursor.advance_by(end - start)
    state.set_operand(float(text[start:end]))
    return after_operand(state.enclosed_in_parens)


def recognize_number(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    """Number kind: a numeric literal or a named constant."""
    following = recognize_number_literal(cursor, state)
    if following is None:
        following = recognize_constant(cursor, state)
    return following


def recognize_unary(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    sign = cursor.peek()
    if sign not in UNARY_SIGNS:
        return None
    cursor.advance()
    state.push_unary(sign)
    return EXPECT_OPERAND


def recognize_infix(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    operator = OPERATORS.get(cursor.peek() or '')
    if operator is None:
        return None
    cursor.advance()
    state.push_operator(operator)
    return EXPECT_OPERAND


def recognize_eof(cursor: Cursor, state: EvaluationState) -> Optional[AcceptableSet]:
    if cursor.at_end and not state.enclosed_in_parens:
        return FINISHED
    return None
