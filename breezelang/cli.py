"""Command line entry point: tokenize a breeze source file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .lexer import LexError, Lexer, Token

DEFAULT_SOURCE = "main.bl"


def tokenize_file(path) -> list[Token]:
    """Read ``path`` and return its tokens."""
    path = Path(path)
    return list(Lexer(str(path), path.read_text(encoding="utf-8")))


def _describe(token: Token) -> str:
    where = token.where
    head = token.type.value
    if token.value:
        head += f"{{id={len(token.value)}({token.value})}}"
    return f"{head} @ {where.filename}({where.line}:{where.col}); "


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="breezelang", description="Tokenize a breeze source file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_SOURCE, help="source file to read")
    parser.add_argument("--debug", action="store_true", help="print every token")
    args = parser.parse_args(argv)

    try:
        tokens = tokenize_file(args.path)
    except OSError as exc:
        print(f"breezelang: {exc}", file=sys.stderr)
        return 1
    except LexError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.debug:
        print("".join(_describe(token) for token in tokens))
    else:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())