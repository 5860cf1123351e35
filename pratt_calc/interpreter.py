# interpreter.py
"""Calculator session: scan, parse and evaluate one line at a time.

Variables assigned in one call stay visible to later calls on the same
``Interpreter``. Calls are not thread-safe; callers sharing a session must
serialize them.
"""

from __future__ import annotations

import logging

from pratt_calc.errors import CalculatorError, EvalError, MalformedTreeError, ParseError
from pratt_calc.evaluator import Evaluator
from pratt_calc.lexer import tokenize
from pratt_calc.nodes import ASTNode
from pratt_calc.parser import parse

logger = logging.getLogger(__name__)


class Interpreter:
    """A long-lived calculator session owning one variable store."""

    def __init__(self):
        self.evaluator = Evaluator()

    @property
    def env(self):
        return self.evaluator.env

    def parse(self, text: str) -> ASTNode:
        try:
            return parse(tokenize(text))
        except RecursionError:
            raise ParseError("expression nested too deeply") from None

    def interpret(self, text: str) -> float:
        """Evaluate ``text`` and return its value.

        Raises LexError, ParseError or EvalError; no partial result is kept
        except assignments completed before an evaluation error.
        """
        try:
            tree = self.parse(text)
            try:
                return self.evaluator.eval(tree)
            except RecursionError:
                raise EvalError("expression nested too deeply") from None
        except CalculatorError as e:
            # malformed trees are already logged at ERROR by the evaluator
            if not isinstance(e, MalformedTreeError):
                logger.debug("Failed to interpret %r: %s", text, e)
            raise

    def to_tree_string(self, text: str) -> str:
        """Return the S-expression for ``text`` without evaluating it."""
        tree = self.parse(text)
        try:
            return str(tree)
        except RecursionError:
            raise ParseError("expression nested too deeply") from None
