"""Render a parse tree back into signature text."""

from __future__ import annotations

from dbussig.ast import (
    ArrayNode,
    BasicNode,
    DictNode,
    SignatureNode,
    SignatureTree,
    StructNode,
    VariantNode,
)
from dbussig.lexer import TokenKind, token_text
from dbussig.visitor.visitor import SignatureVisitor, traverse


class SignatureWriter(SignatureVisitor):
    def __init__(self) -> None:
        self._parts: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def enter_basic(self, node: BasicNode) -> None:
        self._parts.append(node.type.code)

    def enter_variant(self, node: VariantNode) -> None:
        self._parts.append(token_text(TokenKind.VARIANT))

    def enter_array(self, node: ArrayNode) -> None:
        self._parts.append(token_text(TokenKind.ARRAY))

    def enter_struct(self, node: StructNode) -> None:
        self._parts.append(token_text(TokenKind.STRUCT_OPEN))

    def leave_struct(self, node: StructNode) -> None:
        self._parts.append(token_text(TokenKind.STRUCT_CLOSE))

    def enter_dict(self, node: DictNode) -> None:
        self._parts.append(token_text(TokenKind.DICT_OPEN))

    def leave_dict(self, node: DictNode) -> None:
        self._parts.append(token_text(TokenKind.DICT_CLOSE))


def format_signature(tree: SignatureTree | SignatureNode) -> str:
    """Inverse of `parse_signature` for any tree it produced."""
    writer = SignatureWriter()
    traverse(tree, writer)
    return writer.text
