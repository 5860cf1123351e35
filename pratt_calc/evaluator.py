# evaluator.py
"""Tree-walking evaluator.

Every value is a float. Division and exponentiation follow IEEE-754: a zero
divisor gives a signed infinity or NaN and invalid powers give NaN instead of
raising, which Python floats would otherwise do.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional

from pratt_calc.errors import EvalError, MalformedTreeError
from pratt_calc.nodes import Application, ASTNode, Number, Variable

logger = logging.getLogger(__name__)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def divide(lhs: float, rhs: float) -> float:
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def power(base: float, exponent: float) -> float:
    """``base`` raised to ``exponent`` with C ``pow`` results for edge cases."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # zero to a negative power
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def factorial(value: float) -> float:
    """Sign-preserving factorial: ``n!`` for ``|trunc(value)|``, negated for negative operands.

    ``(-3)!`` is therefore ``-6``. The product stops growing once it reaches
    infinity.
    """
    if math.isnan(value) or math.isinf(value):
        return value
    n = int(value)
    result = 1.0
    for k in range(2, abs(n) + 1):
        result *= k
        if math.isinf(result):
            break
    return -result if n < 0 else result


class Evaluator:
    """Evaluates syntax trees against a mutable variable store (``env``)."""

    def __init__(self, env: Optional[Dict[str, float]] = None):
        self.env: Dict[str, float] = dict(env) if env else {}

    def reset(self) -> None:
        """Forget every variable binding."""
        self.env.clear()

    def eval(self, node: ASTNode) -> float:
        """Evaluate given AST node and return the result or raise EvalError."""
        if isinstance(node, Number):
            return node.value
        if isinstance(node, Variable):
            if node.name in self.env:
                return self.env[node.name]
            raise EvalError(f"unbound variable {node.name!r}")
        if isinstance(node, Application):
            return self._eval_application(node)
        raise self._malformed(f"unsupported node {type(node).__name__}")

    def _eval_application(self, node: Application) -> float:
        op = node.op
        arity = len(node.operands)

        if arity == 1 and op in ('+', '-'):
            operand = self.eval(node.operands[0])
            return -operand if op == '-' else operand

        if arity == 1 and op == '!':
            return factorial(self.eval(node.operands[0]))

        if arity == 2 and op == '=':
            # Right side first; the target is only checked afterwards.
            value = self.eval(node.operands[1])
            target = node.operands[0]
            if not isinstance(target, Variable):
                raise EvalError(f"invalid assignment target {str(target)!r}")
            self.env[target.name] = value
            logger.debug("Assigned %s = %r", target.name, value)
            return value

        if arity == 2 and op in ('+', '-', '*', '/', '^'):
            left = self.eval(node.operands[0])
            right = self.eval(node.operands[1])
            if op == '+':
                return left + right
            if op == '-':
                return left - right
            if op == '*':
                return left * right
            if op == '/':
                return divide(left, right)
            return power(left, right)

        raise self._malformed(f"operator {op!r} with {arity} operand(s)")

    @staticmethod
    def _malformed(detail: str) -> MalformedTreeError:
        logger.error("Malformed syntax tree: %s", detail)
        return MalformedTreeError(f"malformed syntax tree: {detail}")
