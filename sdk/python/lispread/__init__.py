from .errors import (
    ReadError, LexError, ParseError, UnbalancedParens, UnexpectedCharacter,
    UnterminatedString, UnexpectedEndOfInput, MissingClosingParen,
    UnexpectedToken, DepthExceeded, IntegerOutOfRange,
)
from .lexer import tokenize, check_balance
from .parser import parse, read
from .printer import render, to_sexpr, to_data, format_tokens
from .types import (
    Token, TokenKind, Integer, Symbol, String, ListValue, ReaderConfig, depth,
)

__all__ = [
    "tokenize", "check_balance", "parse", "read",
    "render", "to_sexpr", "to_data", "format_tokens",
    "Token", "TokenKind", "Integer", "Symbol", "String", "ListValue",
    "ReaderConfig", "depth",
    "ReadError", "LexError", "ParseError", "UnbalancedParens",
    "UnexpectedCharacter", "UnterminatedString", "UnexpectedEndOfInput",
    "MissingClosingParen", "UnexpectedToken", "DepthExceeded", "IntegerOutOfRange",
]
