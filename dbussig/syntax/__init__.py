"""Syntax kinds."""

from dbussig.syntax.kind import BasicType, NodeKind

__all__ = ["BasicType", "NodeKind"]
