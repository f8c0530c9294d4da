"""Indented, human-readable rendering of a parse tree."""

from __future__ import annotations

import sys
from typing import TextIO

from dbussig.ast import (
    ArrayNode,
    BasicNode,
    DictNode,
    SignatureNode,
    SignatureTree,
    StructNode,
    VariantNode,
)
from dbussig.visitor.visitor import SignatureVisitor, traverse


class PrettyPrinter(SignatureVisitor):
    """Collects one line per node, indented by container depth.

    ``a(is)`` renders as::

        [array]
          [structure]
            [basic] int32
            [basic] string
    """

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent
        self._level = 0
        self.lines: list[str] = []

    def _emit(self, text: str) -> None:
        self.lines.append(f"{self._indent * self._level}{text}")

    def _open(self, label: str) -> None:
        self._emit(f"[{label}]")
        self._level += 1

    def _close(self) -> None:
        self._level -= 1

    def enter_basic(self, node: BasicNode) -> None:
        self._emit(f"[{node.kind.label}] {node.type.type_name}")

    def enter_variant(self, node: VariantNode) -> None:
        self._emit(f"[{node.kind.label}]")

    def enter_array(self, node: ArrayNode) -> None:
        self._open(node.kind.label)

    def leave_array(self, node: ArrayNode) -> None:
        self._close()

    def enter_struct(self, node: StructNode) -> None:
        self._open(node.kind.label)

    def leave_struct(self, node: StructNode) -> None:
        self._close()

    def enter_dict(self, node: DictNode) -> None:
        self._open(node.kind.label)

    def leave_dict(self, node: DictNode) -> None:
        self._close()


def pretty_print(tree: SignatureTree | SignatureNode, indent: str = "  ") -> str:
    printer = PrettyPrinter(indent)
    traverse(tree, printer)
    return "\n".join(printer.lines)


def print_tree(
    tree: SignatureTree | SignatureNode,
    file: TextIO | None = None,
    indent: str = "  ",
) -> None:
    text = pretty_print(tree, indent)
    if text:
        print(text, file=file if file is not None else sys.stdout)
