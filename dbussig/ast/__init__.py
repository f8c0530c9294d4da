"""Typed parse tree for D-Bus type signatures."""

from dbussig.ast.model import (
    ArrayNode,
    BasicNode,
    DictNode,
    SignatureNode,
    SignatureTree,
    StructNode,
    VariantNode,
)

__all__ = [
    "ArrayNode",
    "BasicNode",
    "DictNode",
    "SignatureNode",
    "SignatureTree",
    "StructNode",
    "VariantNode",
]
