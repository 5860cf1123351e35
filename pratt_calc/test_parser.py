import pytest

from pratt_calc.errors import ParseError
from pratt_calc.lexer import Token, TokenType, tokenize
from pratt_calc.nodes import Application, Number, Variable
from pratt_calc.parser import Parser, parse


def tree(text):
    return str(parse(tokenize(text)))


def test_parse_number_atom():
    node = parse(tokenize("3.14"))
    assert node == Number(3.14)


def test_parse_variable_atom():
    assert parse(tokenize("x")) == Variable('x')


def test_parse_simple_expression():
    assert tree("3 + 4") == "(+ 3 4)"


@pytest.mark.parametrize("text,expected", [
    ("3+5*6", "(+ 3 (* 5 6))"),
    ("3*5+6", "(+ (* 3 5) 6)"),
    ("2^3^2", "(^ 2 (^ 3 2))"),
    ("3-4-5", "(- (- 3 4) 5)"),
    ("8/4/2", "(/ (/ 8 4) 2)"),
    ("a=b=c", "(= a (= b c))"),
    ("(3+4)*2", "(* (+ 3 4) 2)"),
    ("((2))", "2"),
    ("-3!", "(- (! 3))"),
    ("3!!", "(! (! 3))"),
    ("--3", "(- (- 3))"),
    ("+-3", "(+ (- 3))"),
    ("-2^2", "(^ (- 2) 2)"),
    ("2*3^2", "(^ (* 2 3) 2)"),
    ("x = 1 + 2", "(= x (+ 1 2))"),
    ("2*3=4", "(= (* 2 3) 4)"),
    ("1.5 * x!", "(* 1.5 (! x))"),
])
def test_parse_binding_powers(text, expected):
    assert tree(text) == expected


def test_parse_application_operands_are_tuples():
    node = parse(tokenize("-x"))
    assert node == Application('-', (Variable('x'),))


def test_parse_unmatched_open_paren():
    with pytest.raises(ParseError) as e:
        parse(tokenize("(3+4"))
    assert "unmatched parenthesis" in str(e.value)


def test_parse_unmatched_close_paren():
    with pytest.raises(ParseError) as e:
        parse(tokenize("3+4)"))
    assert "unmatched parenthesis" in str(e.value)


def test_parse_dangling_prefix_operator():
    with pytest.raises(ParseError) as e:
        parse(tokenize("3++"))
    assert "invalid expression at token 'EOF'" in str(e.value)


@pytest.mark.parametrize("text,token", [("*1", '*'), ("!3", '!'), ("=2", '='), ("()", ')'), ("2*/3", '/')])
def test_parse_operator_without_prefix_role(text, token):
    with pytest.raises(ParseError) as e:
        parse(tokenize(text))
    assert f"invalid expression at token {token!r}" in str(e.value)


def test_parse_empty_input():
    with pytest.raises(ParseError) as e:
        parse(tokenize(""))
    assert "EOF" in str(e.value)


@pytest.mark.parametrize("text", ["3 4", "a b", "2(3)"])
def test_parse_trailing_tokens(text):
    with pytest.raises(ParseError) as e:
        parse(tokenize(text))
    assert "unexpected token" in str(e.value)


def test_parser_requires_eof_terminated_tokens():
    with pytest.raises(ValueError):
        Parser([Token(TokenType.NUMBER, 1.0, 0)])
