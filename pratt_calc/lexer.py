# lexer.py
"""Tokenizer for calculator expressions.

Produces OP, NUMBER, IDENT and a single trailing EOF token. The input is
scanned once, left to right, with one character of lookahead.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Union

from pratt_calc.errors import LexError
from pratt_calc.nodes import format_number

logger = logging.getLogger(__name__)


class TokenType:
    """Enumeration of token types."""
    OP = 'OP'
    NUMBER = 'NUMBER'
    IDENT = 'IDENT'
    EOF = 'EOF'


OPERATOR_CHARS = frozenset('()+-*/^!=')

_ASCII_LETTERS = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ')
_ASCII_DIGITS = frozenset('0123456789')


@dataclass(frozen=True)
class Token:
    """Represents a token with type, value, and character position."""
    type: str
    value: Union[str, float, None]
    pos: int

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return 'EOF'
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        return str(self.value)

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


def _is_ident_start(ch: str) -> bool:
    return ch in _ASCII_LETTERS or ch == '_'


def _is_ident_char(ch: str) -> bool:
    # only the first character is restricted to ASCII
    return ch.isalnum() or ch == '_'


class Lexer:
    """Converts an input string into a list of tokens."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def _read_number(self) -> Token:
        start = self.pos
        seen_dot = False
        while True:
            ch = self._peek()
            if ch in _ASCII_DIGITS:
                self._advance()
            elif ch == '.':
                if seen_dot:
                    raise LexError("malformed number: multiple decimal points", self.pos)
                seen_dot = True
                self._advance()
            else:
                break
        raw = self.text[start:self.pos]
        value = float(raw)
        if math.isinf(value):
            raise LexError(f"numeric literal out of range: {raw}", start)
        return Token(TokenType.NUMBER, value, start)

    def _read_ident(self) -> Token:
        start = self.pos
        while _is_ident_char(self._peek()):
            self._advance()
        return Token(TokenType.IDENT, self.text[start:self.pos], start)

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while True:
            ch = self._peek()
            if ch == '':
                break
            if ch.isspace():
                self._advance()
            elif ch in OPERATOR_CHARS:
                tokens.append(Token(TokenType.OP, ch, self.pos))
                self._advance()
            elif _is_ident_start(ch):
                tokens.append(self._read_ident())
            elif ch in _ASCII_DIGITS:
                tokens.append(self._read_number())
            else:
                raise LexError(f"unexpected character {ch!r}", self.pos)
        tokens.append(Token(TokenType.EOF, None, self.pos))
        logger.debug("Tokenized %r into %s", self.text, tokens)
        return tokens


def tokenize(text: str) -> List[Token]:
    """Tokenize ``text``, always ending the result with an EOF token."""
    return Lexer(text).tokenize()
