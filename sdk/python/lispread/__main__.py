"""CLI: python -m lispread [EXPR]"""

import argparse
import json
import logging
import sys

from .errors import ReadError
from .lexer import tokenize
from .parser import parse
from .printer import format_tokens, render, to_data, token_to_data
from .types import DEFAULT_MAX_DEPTH, ReaderConfig

PROMPT = "Enter a Lisp expression: "


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="lispread", description="Tokenize and parse an S-expression.")
    ap.add_argument("expr", nargs="?", help="expression to read; prompts on stdin when omitted")
    ap.add_argument("--tokens-only", action="store_true", help="stop after tokenizing")
    ap.add_argument("--json", action="store_true", help="print a single JSON document")
    ap.add_argument("--strict-strings", action="store_true", help="reject unterminated strings")
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
    ap.add_argument("--debug", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.expr is not None:
        src = args.expr
    else:
        print(PROMPT, end="", flush=True)
        src = sys.stdin.readline().rstrip("\n")

    config = ReaderConfig(max_depth=args.max_depth, strict_strings=args.strict_strings)
    try:
        tokens = tokenize(src, config)
        value = None if args.tokens_only else parse(tokens, config)
    except ReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        doc = {"tokens": [token_to_data(t) for t in tokens]}
        if value is not None:
            doc["value"] = to_data(value)
        json.dump(doc, sys.stdout, indent=2)
        print()
        return 0

    print("Tokens:")
    if tokens:
        print(format_tokens(tokens))
    if value is not None:
        print("Parsed structure:")
        print(render(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
