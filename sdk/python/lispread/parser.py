"""Recursive-descent parser turning a token list into a value tree."""

import logging
from typing import Optional

from .errors import (
    DepthExceeded,
    IntegerOutOfRange,
    MissingClosingParen,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .lexer import tokenize
from .types import (
    Integer,
    ListValue,
    ReaderConfig,
    String,
    Symbol,
    Token,
    TokenKind,
    Value,
)

logger = logging.getLogger(__name__)

INT_MAX = 2**63 - 1


class TokenCursor:
    """Forward-only view over a token list."""

    __slots__ = ("tokens", "index", "depth", "max_depth")

    def __init__(self, tokens: list[Token], max_depth: int):
        self.tokens = tokens
        self.index = 0
        self.depth = 0
        self.max_depth = max_depth

    def peek(self) -> Optional[Token]:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def consume(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfInput()
        self.index += 1
        return tok


def parse_expression(cur: TokenCursor) -> Value:
    tok = cur.consume()
    kind = tok.kind

    if kind is TokenKind.OPEN_PAREN:
        cur.depth += 1
        if cur.depth > cur.max_depth:
            raise DepthExceeded(cur.max_depth, tok.position)
        items: list[Value] = []
        while True:
            nxt = cur.peek()
            if nxt is None:
                raise MissingClosingParen(tok.position)
            if nxt.kind is TokenKind.CLOSE_PAREN:
                cur.index += 1
                break
            items.append(parse_expression(cur))
        cur.depth -= 1
        return ListValue(tuple(items))

    if kind is TokenKind.NUMBER:
        if not tok.text.isdecimal():
            raise RuntimeError(f"malformed number token {tok.text!r}")
        # Longer than any i64 once leading zeros are gone.
        if len(tok.text.lstrip("0")) > 19:
            raise IntegerOutOfRange(tok)
        value = int(tok.text, 10)
        if value > INT_MAX:
            raise IntegerOutOfRange(tok)
        return Integer(value)

    if kind in (TokenKind.IDENTIFIER, TokenKind.OPERATOR):
        return Symbol(tok.text, kind)

    if kind is TokenKind.STRING:
        return String(tok.text)

    raise UnexpectedToken(tok)


def parse(tokens: list[Token], config: Optional[ReaderConfig] = None) -> Value:
    """Parse the first complete expression in tokens.

    Tokens after that expression are ignored.
    """
    cfg = config or ReaderConfig()
    cur = TokenCursor(tokens, cfg.max_depth)
    try:
        try:
            result = parse_expression(cur)
        except RecursionError:
            tok = cur.peek() or (tokens[-1] if tokens else None)
            raise DepthExceeded(cur.depth, tok.position if tok else 0) from None
    except ParseError as exc:
        logger.debug("parse failed after %d of %d tokens: %s", cur.index, len(tokens), exc)
        raise
    if cur.index < len(tokens):
        logger.debug("ignoring %d trailing tokens", len(tokens) - cur.index)
    return result


def read(src: str, config: Optional[ReaderConfig] = None) -> Value:
    """Tokenize and parse an S-expression string."""
    return parse(tokenize(src, config), config)
