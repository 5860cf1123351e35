# parser.py
"""Pratt (precedence climbing) parser producing a syntax tree from tokens."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from pratt_calc.errors import ParseError
from pratt_calc.lexer import Token, TokenType
from pratt_calc.nodes import Application, ASTNode, Number, Variable

logger = logging.getLogger(__name__)

# Binding powers, lower binds looser. A right power below the left one makes
# the operator right-associative (``a=b=c``, ``2^3^2``), above it left-associative.
INFIX_BP: Dict[str, Tuple[int, int]] = {
    '=': (2, 1),
    '+': (3, 4),
    '-': (3, 4),
    '^': (6, 5),
    '*': (7, 8),
    '/': (7, 8),
}

# Prefix operators: bp used to parse the operand
PREFIX_BP: Dict[str, int] = {
    '+': 9,
    '-': 9,
}

POSTFIX_BP: Dict[str, int] = {
    '!': 11,  # factorial
}


class Parser:
    """Pratt parser over a token list ending in EOF."""

    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token sequence must end with an EOF token")
        self.tokens = tokens
        self.pos = 0

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        # EOF is never consumed, so peeking past the end keeps returning it
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def parse(self) -> ASTNode:
        """Parse the whole token sequence into a single tree."""
        node = self.parse_expression(0)
        tok = self._current()
        if tok.type != TokenType.EOF:
            if tok.type == TokenType.OP and tok.value == ')':
                raise ParseError("unmatched parenthesis", tok.pos)
            raise ParseError(f"unexpected token {str(tok)!r}", tok.pos)
        logger.debug("Parsed tree %s", node)
        return node

    def parse_expression(self, min_bp: int = 0) -> ASTNode:
        left = self.nud(self._advance())
        while True:
            cur = self._current()
            if cur.type != TokenType.OP:
                # EOF ends the expression; anything else is left for the caller
                break
            op = cur.value
            if op in POSTFIX_BP:
                if POSTFIX_BP[op] < min_bp:
                    break
                self._advance()
                left = Application(op, (left,))
                continue
            if op in INFIX_BP:
                l_bp, r_bp = INFIX_BP[op]
                if l_bp < min_bp:
                    break
                self._advance()
                right = self.parse_expression(r_bp)
                left = Application(op, (left, right))
                continue
            break
        return left

    def nud(self, tok: Token) -> ASTNode:
        """Null denotation: a literal, a parenthesized expression or a prefix operator."""
        if tok.type == TokenType.NUMBER:
            return Number(tok.value)
        if tok.type == TokenType.IDENT:
            return Variable(tok.value)
        if tok.type == TokenType.OP:
            if tok.value == '(':
                expr = self.parse_expression(0)
                closing = self._advance()
                if closing.type != TokenType.OP or closing.value != ')':
                    raise ParseError("unmatched parenthesis", tok.pos)
                return expr
            if tok.value in PREFIX_BP:
                operand = self.parse_expression(PREFIX_BP[tok.value])
                return Application(tok.value, (operand,))
        raise ParseError(f"invalid expression at token {str(tok)!r}", tok.pos)


def parse(tokens: List[Token]) -> ASTNode:
    """Parse a token list (as produced by ``tokenize``) into a syntax tree."""
    return Parser(tokens).parse()
