import pytest

from pratt_calc.errors import LexError
from pratt_calc.lexer import Lexer, Token, TokenType, tokenize


def types_of(text):
    return [t.type for t in tokenize(text)]


def test_lex_simple_expression():
    toks = tokenize("1 + 2")
    assert [t.type for t in toks] == [TokenType.NUMBER, TokenType.OP, TokenType.NUMBER, TokenType.EOF]
    assert [t.value for t in toks] == [1.0, '+', 2.0, None]


def test_lex_numbers_are_floats():
    toks = tokenize("3.14 42 7.")
    assert toks[0].value == 3.14
    assert isinstance(toks[1].value, float) and toks[1].value == 42.0
    assert toks[2].value == 7.0


def test_lex_identifiers_span_letters_digits_underscores():
    toks = tokenize("foo_bar1 _x X2y")
    assert [t.value for t in toks if t.type == TokenType.IDENT] == ['foo_bar1', '_x', 'X2y']


def test_lex_number_followed_by_identifier_splits():
    toks = tokenize("2x")
    assert [(t.type, t.value) for t in toks[:2]] == [(TokenType.NUMBER, 2.0), (TokenType.IDENT, 'x')]


def test_lex_all_operator_characters():
    toks = tokenize("()+-*/^!=")
    assert [t.value for t in toks[:-1]] == list("()+-*/^!=")
    assert all(t.type == TokenType.OP for t in toks[:-1])


def test_lex_skips_whitespace():
    assert types_of("  1\t+\n2  ") == [TokenType.NUMBER, TokenType.OP, TokenType.NUMBER, TokenType.EOF]


def test_lex_empty_input_is_single_eof():
    toks = tokenize("")
    assert len(toks) == 1
    assert toks[0].type == TokenType.EOF
    assert tokenize("   ")[-1].type == TokenType.EOF


def test_lex_positions():
    toks = tokenize("ab + 12.5")
    assert [t.pos for t in toks] == [0, 3, 5, 9]


def test_lex_multiple_decimal_points_raises():
    with pytest.raises(LexError) as e:
        tokenize("3.1.4")
    assert "multiple decimal points" in str(e.value)
    assert e.value.pos == 3


@pytest.mark.parametrize("text,bad", [("1 + $", '$'), ("2 % 3", '%'), ("é", 'é'), (".5", '.'), ("1,2", ',')])
def test_lex_unexpected_character_raises(text, bad):
    with pytest.raises(LexError) as e:
        tokenize(text)
    assert "unexpected character" in str(e.value)
    assert repr(bad) in str(e.value)


def test_lex_non_ascii_digits_rejected():
    with pytest.raises(LexError):
        tokenize("٣")  # ARABIC-INDIC DIGIT THREE


def test_lex_overflowing_literal_raises():
    with pytest.raises(LexError) as e:
        tokenize("9" * 400)
    assert "out of range" in str(e.value)


def test_token_str():
    assert str(Token(TokenType.NUMBER, 3.0, 0)) == '3'
    assert str(Token(TokenType.OP, '+', 0)) == '+'
    assert str(Token(TokenType.EOF, None, 0)) == 'EOF'


def test_lexer_class_matches_function():
    assert Lexer("a=1").tokenize() == tokenize("a=1")


def test_lex_identifier_continues_through_unicode_letters():
    toks = tokenize("aé1_ + 2")
    assert (toks[0].type, toks[0].value) == (TokenType.IDENT, 'aé1_')
    assert toks[1].value == '+'


def test_lex_identifier_must_start_with_ascii():
    with pytest.raises(LexError) as e:
        tokenize("éa")
    assert e.value.pos == 0
