"""Pratt Calculator: scanner, Pratt parser and tree-walking evaluator for arithmetic expressions."""

from pratt_calc.errors import CalculatorError, EvalError, LexError, MalformedTreeError, ParseError
from pratt_calc.interpreter import Interpreter

__version__ = "0.1.0"

__all__ = [
    "CalculatorError",
    "EvalError",
    "Interpreter",
    "LexError",
    "MalformedTreeError",
    "ParseError",
    "__version__",
]
