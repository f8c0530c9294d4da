"""Parse-tree data model for D-Bus type signatures."""

from __future__ import annotations

from dataclasses import dataclass

from dbussig.syntax import BasicType, NodeKind


@dataclass(frozen=True, slots=True)
class BasicNode:
    """Scalar type, e.g. `i` or `s`."""

    type: BasicType

    @property
    def kind(self) -> NodeKind:
        return NodeKind.BASIC


@dataclass(frozen=True, slots=True)
class VariantNode:
    """`v`: concrete type is carried alongside each value, not in the signature."""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.VARIANT


@dataclass(frozen=True, slots=True)
class ArrayNode:
    """`a<element>`: homogeneous sequence of one element type."""

    element: SignatureNode

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ARRAY


@dataclass(frozen=True, slots=True)
class StructNode:
    """`(...)`: fields in declared order."""

    fields: tuple[SignatureNode, ...]

    @property
    def kind(self) -> NodeKind:
        return NodeKind.STRUCT


@dataclass(frozen=True, slots=True)
class DictNode:
    """`{<key><value>}`: dict entry, normally the element type of an array."""

    key: SignatureNode
    value: SignatureNode

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DICT


type SignatureNode = BasicNode | VariantNode | ArrayNode | StructNode | DictNode
type SignatureTree = tuple[SignatureNode, ...]


__all__ = [
    "ArrayNode",
    "BasicNode",
    "DictNode",
    "SignatureNode",
    "SignatureTree",
    "StructNode",
    "VariantNode",
]
