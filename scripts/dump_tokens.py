#!/usr/bin/env python
"""Print the token stream of a GMML file."""

import argparse
from pathlib import Path

from gmml.diagnostics import LexError
from gmml.lexer import dump_tokens, lex


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump GMML tokens for debugging")
    parser.add_argument("path", type=Path)
    parser.add_argument("--crlf", action="store_true", help="Accept \\r\\n line endings")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    try:
        tokens = lex(text, allow_crlf=args.crlf)
    except LexError as error:
        print(error.diagnostic.render(text))
        return 1

    dump_tokens(tokens, text)
    print(f"\n{len(tokens)} tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
