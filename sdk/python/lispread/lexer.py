"""Tokenizer for S-expressions.

Validates paren balance over the whole input first, then classifies
characters left to right into a flat list of tokens.
"""

import logging
from typing import Optional

from .errors import UnbalancedParens, UnexpectedCharacter, UnterminatedString
from .types import ReaderConfig, Token, TokenKind

logger = logging.getLogger(__name__)

OPERATORS = frozenset("+-*/<>=,")


class _Cursor:
    __slots__ = ("src", "pos")

    def __init__(self, src: str):
        self.src = src
        self.pos = 0

    def done(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self) -> str:
        return self.src[self.pos]

    def take_while(self, pred) -> str:
        start = self.pos
        while self.pos < len(self.src) and pred(self.src[self.pos]):
            self.pos += 1
        return self.src[start:self.pos]


def check_balance(src: str) -> None:
    """Raise UnbalancedParens unless every '(' in src has a matching ')'."""
    opened: list[int] = []
    for i, ch in enumerate(src):
        if ch == "(":
            opened.append(i)
        elif ch == ")":
            if not opened:
                raise UnbalancedParens(i)
            opened.pop()
    if opened:
        raise UnbalancedParens(opened[-1], unclosed=True)


def _is_ident_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch == "-"


def _scan_string(cur: _Cursor, strict: bool) -> str:
    start = cur.pos
    end = cur.src.find('"', start + 1)
    if end == -1:
        if strict:
            raise UnterminatedString(start)
        # Runs to end of input; the closing quote is supplied.
        cur.pos = len(cur.src)
        return cur.src[start:] + '"'
    cur.pos = end + 1
    return cur.src[start:cur.pos]


def tokenize(src: str, config: Optional[ReaderConfig] = None) -> list[Token]:
    cfg = config or ReaderConfig()
    check_balance(src)

    tokens: list[Token] = []
    cur = _Cursor(src)
    while not cur.done():
        start = cur.pos
        ch = cur.peek()
        if ch.isspace():
            cur.pos += 1
            continue
        if ch == "(":
            cur.pos += 1
            tokens.append(Token(TokenKind.OPEN_PAREN, ch, start))
        elif ch == ")":
            cur.pos += 1
            tokens.append(Token(TokenKind.CLOSE_PAREN, ch, start))
        elif ch.isdecimal():
            text = cur.take_while(str.isdecimal)
            tokens.append(Token(TokenKind.NUMBER, text, start))
        elif ch.isalpha():
            text = cur.take_while(_is_ident_char)
            tokens.append(Token(TokenKind.IDENTIFIER, text, start))
        elif ch == '"':
            text = _scan_string(cur, cfg.strict_strings)
            tokens.append(Token(TokenKind.STRING, text, start))
        elif ch in OPERATORS:
            cur.pos += 1
            tokens.append(Token(TokenKind.OPERATOR, ch, start))
        else:
            logger.debug("rejecting %r at offset %d", ch, start)
            raise UnexpectedCharacter(ch, start)

    logger.debug("tokenized %d chars into %d tokens", len(src), len(tokens))
    return tokens
