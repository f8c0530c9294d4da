"""Shared debug printers for lexer/parser/visitor tests."""

from __future__ import annotations

import os

from dbussig.ast import SignatureTree
from dbussig.lexer import TokenKind, dump_tokens
from dbussig.visitor import pretty_print

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_TREE = os.getenv("PRINT_TREE", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_tokens(test_name: str, source: str, tokens: list[TokenKind]) -> None:
    if not PRINT_TOKENS:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)
    print(f"===== {test_name} TOKENS =====")
    print(dump_tokens(tokens))


def debug_dump_tree(test_name: str, source: str, tree: SignatureTree) -> None:
    if not PRINT_TREE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)
    print(f"===== {test_name} TREE =====")
    print(pretty_print(tree))
