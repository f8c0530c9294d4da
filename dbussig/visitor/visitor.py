"""Depth-first traversal of signature parse trees."""

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


class SignatureVisitor:
    """Paired enter/leave hooks per node kind.

    Every hook is a no-op; subclasses override only the ones they need.
    """

    def enter_basic(self, node: BasicNode) -> None:
        pass

    def leave_basic(self, node: BasicNode) -> None:
        pass

    def enter_variant(self, node: VariantNode) -> None:
        pass

    def leave_variant(self, node: VariantNode) -> None:
        pass

    def enter_array(self, node: ArrayNode) -> None:
        pass

    def leave_array(self, node: ArrayNode) -> None:
        pass

    def enter_struct(self, node: StructNode) -> None:
        pass

    def leave_struct(self, node: StructNode) -> None:
        pass

    def enter_dict(self, node: DictNode) -> None:
        pass

    def leave_dict(self, node: DictNode) -> None:
        pass


def traverse(tree: SignatureTree | SignatureNode, visitor: SignatureVisitor) -> None:
    """Walk `tree` (a parse result or a single node) and fire `visitor` hooks."""
    if isinstance(tree, (tuple, list)):
        for node in tree:
            visit_node(node, visitor)
        return
    visit_node(tree, visitor)


def visit_node(node: SignatureNode, visitor: SignatureVisitor) -> None:
    match node:
        case BasicNode():
            visitor.enter_basic(node)
            visitor.leave_basic(node)
        case VariantNode():
            visitor.enter_variant(node)
            visitor.leave_variant(node)
        case ArrayNode():
            visitor.enter_array(node)
            visit_node(node.element, visitor)
            visitor.leave_array(node)
        case StructNode():
            visitor.enter_struct(node)
            for child in node.fields:
                visit_node(child, visitor)
            visitor.leave_struct(node)
        case DictNode():
            visitor.enter_dict(node)
            visit_node(node.key, visitor)
            visit_node(node.value, visitor)
            visitor.leave_dict(node)
        case _:
            raise TypeError(f"Not a signature node: {node!r}")
