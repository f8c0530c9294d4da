#!/usr/bin/env python
"""Print the tokens and parse tree of a signature."""

from __future__ import annotations

import argparse
import logging

from dbussig import ParseMode, SignatureError, parse_result
from dbussig.lexer import dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens and parse tree of a D-Bus type signature.")
    parser.add_argument("signature", help="Signature text, e.g. 'a{sv}'")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Parser mode (default: strict)",
    )
    parser.add_argument("--no-tokens", action="store_true", help="Only print the tree")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        result = parse_result(args.signature, mode=args.mode)
    except SignatureError as exc:
        print(f"error: {exc}")
        return 1

    if not args.no_tokens:
        print(dump_tokens(result.tokens))
        print()
    print(result.pretty())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
