import enum
from dataclasses import dataclass, field
from typing import Iterator, Union

DEFAULT_MAX_DEPTH = 256


class TokenKind(enum.Enum):
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    NUMBER = "Number"
    IDENTIFIER = "Identifier"
    STRING = "String"
    OPERATOR = "Operator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    # Offset of the first character; not part of equality.
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"Token{{kind={self.kind.value}, text='{self.text}'}}"


# Value types. Identifiers and operators both become Symbol; the source
# token kind rides along but does not affect equality.

@dataclass(frozen=True)
class Integer:
    value: int


@dataclass(frozen=True)
class Symbol:
    name: str
    kind: TokenKind = field(default=TokenKind.IDENTIFIER, compare=False)


@dataclass(frozen=True)
class String:
    # Literal token text, quotes included.
    text: str


@dataclass(frozen=True)
class ListValue:
    items: tuple = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


Value = Union[Integer, Symbol, String, ListValue]


@dataclass
class ReaderConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    strict_strings: bool = False


def depth(value: Value) -> int:
    """Paren nesting depth of a value: 0 for atoms, 1 for a flat list."""
    if not isinstance(value, ListValue):
        return 0
    return 1 + max((depth(v) for v in value.items), default=0)
