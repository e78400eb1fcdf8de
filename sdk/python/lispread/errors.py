"""Error types raised while reading S-expressions.

Every error carries the data needed to branch on it (offending character,
token, offset) as attributes in addition to a readable message.
"""

from typing import Optional

from .types import Token


class ReadError(SyntaxError):
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class LexError(ReadError):
    pass


class UnbalancedParens(LexError):
    def __init__(self, position: int, unclosed: bool = False):
        if unclosed:
            msg = f"unbalanced parentheses: '(' at {position} is never closed"
        else:
            msg = f"unbalanced parentheses: unmatched ')' at {position}"
        super().__init__(msg, position)
        self.unclosed = unclosed


class UnexpectedCharacter(LexError):
    def __init__(self, char: str, position: int):
        super().__init__(f"unexpected character {char!r} at {position}", position)
        self.char = char


class UnterminatedString(LexError):
    def __init__(self, position: int):
        super().__init__(f"unterminated string starting at {position}", position)


class ParseError(ReadError):
    pass


class UnexpectedEndOfInput(ParseError):
    def __init__(self):
        super().__init__("unexpected end of input")


class MissingClosingParen(ParseError):
    def __init__(self, position: int):
        super().__init__(f"missing ')' for '(' at {position}", position)


class UnexpectedToken(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"unexpected {token.text!r} at {token.position}", token.position)
        self.token = token


class DepthExceeded(ParseError):
    def __init__(self, limit: int, position: int):
        super().__init__(f"max nesting depth {limit} exceeded at {position}", position)
        self.limit = limit


class IntegerOutOfRange(ParseError):
    def __init__(self, token: Token):
        text = token.text if len(token.text) <= 24 else token.text[:24] + "..."
        super().__init__(f"integer {text} at {token.position} does not fit in 64 bits", token.position)
        self.token = token
