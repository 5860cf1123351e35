# errors.py
"""Exceptions raised by each stage of the calculator pipeline."""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors.

    Carries the pipeline stage that failed, the bare message and, when known,
    the character position in the input.
    """
    stage = "calculator"

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return f"{self.stage} error: {self.message}"
        return f"{self.stage} error: {self.message} at position {self.pos}"


class LexError(CalculatorError):
    """Raised for errors during tokenization."""
    stage = "lex"


class ParseError(CalculatorError):
    """Raised when the token sequence does not form an expression."""
    stage = "parse"


class EvalError(CalculatorError):
    """Raised for errors during evaluation, e.g. unbound variables."""
    stage = "eval"


class MalformedTreeError(EvalError):
    """Raised when the evaluator meets a tree the parser should never build."""
    pass
