#!/usr/bin/env python3
"""Parse every GMML file under the given paths and print the documents."""

from __future__ import annotations

import argparse
from pathlib import Path
from pprint import pformat

from tqdm import tqdm

from gmml import ParserOptions, parse_result

DEFAULT_EXAMPLE_ROOT = Path("example")


def _collect_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(child for child in path.iterdir() if child.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            raise SystemExit(f"No such file or directory: {path}")
    return files


def main() -> int:
    parser = argparse.ArgumentParser(description="Parse GMML example files and print the resulting documents")
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[DEFAULT_EXAMPLE_ROOT],
        help="Files or directories to parse (default: ./example)",
    )
    parser.add_argument("--crlf", action="store_true", help="Accept \\r\\n line endings")
    parser.add_argument(
        "--require-trailing-newline",
        action="store_true",
        help="Reject files whose last line has no newline",
    )
    parser.add_argument("--quiet", action="store_true", help="Only report failures")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar",
    )
    args = parser.parse_args()

    options = ParserOptions(
        allow_crlf=args.crlf,
        require_trailing_newline=args.require_trailing_newline,
    )
    files = _collect_files(args.paths)

    failures = 0
    for path in tqdm(files, desc="parse", unit="file", disable=args.no_progress):
        text = path.read_text(encoding="utf-8")
        result = parse_result(text, options)
        if result.has_errors:
            failures += 1
            for line in result.render_diagnostics():
                tqdm.write(f"{path}: {line}")
            continue
        if not args.quiet:
            tqdm.write(f"{path}:")
            tqdm.write(pformat(result.document) + "\n")

    print(f"Parsed {len(files) - failures}/{len(files)} files")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
