# reference.py

"""
Reference tree evaluator.

A conventional lexer, Pratt parser, AST and tree-walking evaluator for the
same expression grammar as the single-pass evaluator. It exists as an oracle:
the property tests check that both agree on randomly generated expressions.

Grammar:
    expr    : prefix (INFIX prefix)*        all infix operators left-assoc
    prefix  : ('+' | '-')* primary          signs bind tighter than '^'
    primary : NUMBER | CONSTANT | '(' expr ')'
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .constants import CONSTANT_NAMES, CONSTANTS
from .errors import CalculatorError
from .operators import OPERATORS


class TreeSyntaxError(CalculatorError):
    """Raised when the reference lexer or parser rejects its input."""
    pass


# --------------------------
# Lexer
# --------------------------

@dataclass
class Token:
    """Represents a token with type, value, and character position."""
    type: str
    value: object
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


_TOKEN_SPECIFICATION = [
    ('NUMBER', r'[0-9]+\.?[0-9]*|\.[0-9]+'),
    ('CONSTANT', '|'.join(CONSTANT_NAMES)),
    ('OP', r'[-+*/^]'),
    ('LPAREN', r'\('),
    ('RPAREN', r'\)'),
    ('SKIP', r'\s+'),
    ('MISMATCH', r'.'),
]
_TOKEN_RE = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in _TOKEN_SPECIFICATION))


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    for mo in _TOKEN_RE.finditer(text):
        kind = mo.lastgroup
        value = mo.group()
        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise TreeSyntaxError(f"Unexpected character {value!r} at pos {mo.start()}")
        if kind == 'NUMBER':
            tokens.append(Token(kind, float(value), mo.start()))
        else:
            tokens.append(Token(kind, value, mo.start()))
    tokens.append(Token('EOF', None, len(text)))
    return tokens


# --------------------------
# AST Nodes
# --------------------------

@dataclass
class ASTNode:
    """Base AST node."""
    pass


@dataclass
class Number(ASTNode):
    value: float


@dataclass
class UnaryOp(ASTNode):
    op: str
    operand: ASTNode


@dataclass
class BinaryOp(ASTNode):
    op: str
    left: ASTNode
    right: ASTNode


# --------------------------
# Parser (Pratt/top-down precedence)
# --------------------------

# Binding powers derived from the operator table; higher binds tighter.
INFIX_BP: Dict[str, int] = {symbol: 10 * (op.precedence + 1) for symbol, op in OPERATORS.items()}
PREFIX_BP = 100


class Parser:
    """Pratt parser producing an AST for expressions."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _expect(self, typ: str) -> Token:
        tok = self._current()
        if tok.type != typ:
            raise TreeSyntaxError(f"Expected {typ} at pos {tok.pos}; got {tok.type} {tok.value!r}")
        return self._advance()

    def parse(self) -> ASTNode:
        node = self.parse_expression(0)
        if self._current().type != 'EOF':
            tok = self._current()
            raise TreeSyntaxError(f"Unexpected token {tok.value!r} at pos {tok.pos}")
        return node

    def parse_expression(self, rbp: int = 0) -> ASTNode:
        left = self.nud(self._advance())
        while True:
            cur = self._current()
            if cur.type != 'OP':
                break
            bp = INFIX_BP[cur.value]
            if bp <= rbp:
                break
            self._advance()
            # Left-assoc: the right operand only takes tighter operators.
            right = self.parse_expression(bp)
            left = BinaryOp(cur.value, left, right)
        return left

    def nud(self, tok: Token) -> ASTNode:
        """Null denotation (prefix/primary)."""
        if tok.type == 'NUMBER':
            return Number(tok.value)
        if tok.type == 'CONSTANT':
            return Number(CONSTANTS[tok.value])
        if tok.type == 'LPAREN':
            expr = self.parse_expression(0)
            self._expect('RPAREN')
            return expr
        if tok.type == 'OP' and tok.value in '+-':
            return UnaryOp(tok.value, self.parse_expression(PREFIX_BP))
        raise TreeSyntaxError(f"Unexpected token {tok.type} {tok.value!r} at pos {tok.pos}")


# --------------------------
# Evaluator
# --------------------------

def evaluate_tree(node: ASTNode) -> float:
    """Recursively evaluates an AST node."""
    if isinstance(node, Number):
        return node.value
    if isinstance(node, UnaryOp):
        operand = evaluate_tree(node.operand)
        return -operand if node.op == '-' else operand
    if isinstance(node, BinaryOp):
        return OPERATORS[node.op].apply(evaluate_tree(node.left), evaluate_tree(node.right))
    raise TypeError(f"Unsupported AST node: {type(node).__name__}")


def parse(text: str) -> ASTNode:
    return Parser(tokenize(text)).parse()


def evaluate_reference(text: str) -> float:
    return evaluate_tree(parse(text))
