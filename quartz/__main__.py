"""CLI: python -m quartz <source.qz>"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import ParseError
from .lexer import tokenize
from .parser import iter_expressions
from .types import DEFAULT_MAX_DEPTH, ReaderOptions, StringLiteral, Symbol


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="python -m quartz",
        description="Read Quartz source and print its top-level expressions.",
    )
    ap.add_argument("file", type=Path, help="source file to read")
    ap.add_argument("--tokens", action="store_true", help="print tokens instead of expressions")
    ap.add_argument("--strict", action="store_true", help="reject unterminated string literals")
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                    help=f"maximum list nesting depth (default {DEFAULT_MAX_DEPTH}, 0 for unlimited)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = args.file.read_text()
    except OSError as e:
        print(f"{args.file}: {e.strerror or e}", file=sys.stderr)
        return 2

    options = ReaderOptions(
        strict_strings=args.strict,
        max_depth=args.max_depth or None,
    )

    try:
        tokens = tokenize(source, options)
        if args.tokens:
            for tok in tokens:
                fields = [str(tok.location), type(tok).__name__]
                if isinstance(tok, (Symbol, StringLiteral)):
                    fields.append(repr(tok.content))
                print("\t".join(fields))
            return 0
        for exp in iter_expressions(tokens, options):
            print(exp)
    except ParseError as e:
        print(f"{args.file}:{e.line}:{e.column}: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
