import pytest
from lispread.lexer import tokenize
from lispread.parser import parse, read
from lispread.errors import (
    DepthExceeded, IntegerOutOfRange, MissingClosingParen, UnbalancedParens,
    UnexpectedEndOfInput, UnexpectedToken,
)
from lispread.types import (
    Integer, ListValue, ReaderConfig, String, Symbol, Token, TokenKind, depth,
)


def L(*items):
    return ListValue(tuple(items))


def test_parse_integer():
    assert read("42") == Integer(42)


def test_parse_symbol():
    assert read("foo") == Symbol("foo")


def test_parse_nested():
    assert read("(1 2 (3 4))") == L(Integer(1), Integer(2), L(Integer(3), Integer(4)))


def test_parse_empty_list():
    ast = read("()")
    assert ast == L()
    assert len(ast) == 0


def test_operator_becomes_symbol():
    ast = read("(+ 1 2)")
    assert ast == L(Symbol("+"), Integer(1), Integer(2))
    assert ast[0].kind is TokenKind.OPERATOR


def test_identifier_and_string():
    ast = read('(a-b1 "hi there")')
    assert ast == L(Symbol("a-b1"), String('"hi there"'))
    assert ast[0].kind is TokenKind.IDENTIFIER


def test_trailing_tokens_ignored():
    assert read("1 2") == Integer(1)
    assert read("(a) (b)") == L(Symbol("a"))


def test_depth_matches_nesting():
    assert depth(read("x")) == 0
    assert depth(read("()")) == 1
    assert depth(read("(a (b (c)) (d))")) == 3


def test_empty_tokens():
    with pytest.raises(UnexpectedEndOfInput):
        parse([])


def test_missing_close_from_raw_tokens():
    tokens = [Token(TokenKind.OPEN_PAREN, "(", 0), Token(TokenKind.NUMBER, "1", 1)]
    with pytest.raises(MissingClosingParen) as info:
        parse(tokens)
    assert info.value.position == 0


def test_unexpected_close_paren():
    with pytest.raises(UnexpectedToken) as info:
        parse([Token(TokenKind.CLOSE_PAREN, ")", 0)])
    assert info.value.token.kind is TokenKind.CLOSE_PAREN


def test_unbalanced_never_reaches_parser():
    with pytest.raises(UnbalancedParens):
        read(")")
    with pytest.raises(UnbalancedParens):
        read("(1 2")


def test_depth_limit():
    src = "(" * 5 + ")" * 5
    assert depth(read(src, ReaderConfig(max_depth=5))) == 5
    with pytest.raises(DepthExceeded):
        read(src, ReaderConfig(max_depth=4))


def test_default_depth_limit_beats_recursion_limit():
    src = "(" * 2000 + ")" * 2000
    with pytest.raises(DepthExceeded):
        read(src)


def test_malformed_number_token_is_fatal():
    with pytest.raises(RuntimeError, match="malformed number"):
        parse([Token(TokenKind.NUMBER, "1x")])


def test_parse_consumes_given_tokens():
    tokens = tokenize("(a b)")
    assert parse(tokens) == L(Symbol("a"), Symbol("b"))


def test_string_swallowing_close_paren_leaves_list_open():
    # Balanced as text, but the string runs to the end and takes the ')'.
    with pytest.raises(MissingClosingParen) as info:
        read('(a "b)')
    assert info.value.position == 0


def test_largest_integer():
    assert read("9223372036854775807") == Integer(2**63 - 1)
    assert read("000000000000000000000042") == Integer(42)


def test_integer_past_64_bits():
    with pytest.raises(IntegerOutOfRange) as info:
        read("(x 9223372036854775808)")
    assert info.value.position == 3


def test_integer_past_int_conversion_limit():
    with pytest.raises(IntegerOutOfRange):
        read("1" * 5000)


def test_recursion_limit_reported_as_depth_error():
    src = "(" * 3000 + ")" * 3000
    with pytest.raises(DepthExceeded):
        read(src, ReaderConfig(max_depth=5000))
