"""Human- and machine-readable renderings of tokens and values."""

from typing import Any

from .types import Integer, ListValue, String, Symbol, Token, Value


def render(value: Value) -> str:
    """Bracket notation, e.g. ``[+, 1, [2, 3]]``."""
    if isinstance(value, ListValue):
        return "[" + ", ".join(render(v) for v in value) + "]"
    return _atom_text(value)


def to_sexpr(value: Value) -> str:
    """Render back to S-expression source, e.g. ``(+ 1 (2 3))``."""
    if isinstance(value, ListValue):
        return "(" + " ".join(to_sexpr(v) for v in value) + ")"
    return _atom_text(value)


def to_data(value: Value) -> Any:
    """Convert to plain JSON-serializable data (ints, strings, lists)."""
    if isinstance(value, ListValue):
        return [to_data(v) for v in value]
    if isinstance(value, Integer):
        return value.value
    return _atom_text(value)


def token_to_data(token: Token) -> dict[str, Any]:
    return {"kind": token.kind.value, "text": token.text, "position": token.position}


def format_tokens(tokens: list[Token]) -> str:
    return "\n".join(str(t) for t in tokens)


def _atom_text(value: Value) -> str:
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, String):
        return value.text
    raise TypeError(f"not a value: {value!r}")
