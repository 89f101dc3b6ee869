# operators.py

"""
Binary operator table shared by the single-pass evaluator and the reference
tree evaluator.

Arithmetic follows IEEE-754 float semantics: division by zero and invalid
powers produce inf or nan instead of raising.
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

ADDITIVE = 0
MULTIPLICATIVE = 1
EXPONENTIAL = 2

INF = float('inf')
NAN = float('nan')


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return NAN
        return math.copysign(INF, left) * math.copysign(1.0, right)


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        # math.pow raises for 0 ** negative and negative ** fractional
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


class Operator(NamedTuple):
    symbol: str
    precedence: int
    apply: Callable[[float, float], float]

    def __repr__(self):
        return f"Operator({self.symbol!r}, precedence={self.precedence})"


OPERATORS: Mapping[str, Operator] = MappingProxyType({
    '+': Operator('+', ADDITIVE, lambda a, b: a + b),
    '-': Operator('-', ADDITIVE, lambda a, b: a - b),
    '*': Operator('*', MULTIPLICATIVE, lambda a, b: a * b),
    '/': Operator('/', MULTIPLICATIVE, divide),
    '^': Operator('^', EXPONENTIAL, power),
})

UNARY_SIGNS = frozenset('+-')
