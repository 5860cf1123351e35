# nodes.py
"""Syntax tree nodes.

Leaves are ``Number`` and ``Variable``; every operator is an ``Application``
holding one operand (prefix ``+ -``, postfix ``!``) or two (infix and ``=``).
``str(node)`` renders the tree as an S-expression, e.g. ``(+ 3 (* 5 6))``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


def format_number(value: float) -> str:
    """Render a float the way results are shown: ``3`` rather than ``3.0``."""
    if math.isnan(value):
        return 'nan'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class ASTNode:
    """Base AST node."""
    pass


@dataclass(frozen=True)
class Number(ASTNode):
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Variable(ASTNode):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Application(ASTNode):
    op: str
    operands: Tuple[ASTNode, ...]

    def __str__(self) -> str:
        return '(' + ' '.join([self.op] + [str(operand) for operand in self.operands]) + ')'
