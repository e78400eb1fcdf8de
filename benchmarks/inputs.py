from __future__ import annotations

from typing import Final

SMALL: Final[str] = "(a b c d e)"

MEDIUM: Final[str] = (
    '(node (kind widget) (id 42) (pos 12 3) (size 100 200) (label "main view") (zorder 3))'
)


def generate(depth: int, width: int) -> str:
    atoms = " ".join(f"a{i}" for i in range(width))

    def _build(d: int) -> str:
        if d == 0:
            return atoms
        return f"(w{d} {_build(d - 1)} {atoms})"

    return _build(depth)


LARGE: Final[str] = "(root " + " ".join(
    f'(entry {i} (p {i * 3} {i * 7}) (q = {i}) "item {i}")' for i in range(40)
) + ")"

DEEP: Final[str] = generate(8, 6)
WIDE: Final[str] = generate(1, 34)
