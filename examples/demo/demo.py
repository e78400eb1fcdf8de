"""
lispread walkthrough

Demonstrates the full pipeline:
1. Tokenize an expression
2. Parse the tokens into a value tree
3. Render the tree
4. Handle structured errors from each stage

Run: pip install -e . && python examples/demo/demo.py
"""

from lispread import (
    ListValue, ReaderConfig, ReadError, UnbalancedParens, UnexpectedCharacter,
    depth, parse, read, render, to_sexpr, tokenize,
)

print("=== lispread demo ===\n")

# 1. Tokenize
src = '(define (greet name) (concat "hello, " name))'
tokens = tokenize(src)
print(f"1. Tokenized {src}")
for tok in tokens:
    print(f"   {tok}")
print()

# 2. Parse
value = parse(tokens)
print("2. Parsed structure")
print(f"   {render(value)}")
print(f"   Depth: {depth(value)}\n")

# 3. Walk the tree
print("3. Top-level items")
for item in value:
    kind = "list" if isinstance(item, ListValue) else type(item).__name__
    print(f"   {kind:8} {to_sexpr(item)}")
print()

# 4. Lexical errors carry their position
print("4. Lexical errors")
for bad in ["(+ 1 2", "(a ? b)"]:
    try:
        tokenize(bad)
    except UnbalancedParens as e:
        print(f"   {bad!r}: unbalanced, offending paren at {e.position}")
    except UnexpectedCharacter as e:
        print(f"   {bad!r}: bad character {e.char!r} at {e.position}")
print()

# 5. Strict strings
try:
    read('"unfinished', ReaderConfig(strict_strings=True))
except ReadError as e:
    print(f"5. Strict mode: {e}")
lenient = read('"unfinished')
print(f"   Lenient mode: {render(lenient)}")

print("\n=== done ===")
