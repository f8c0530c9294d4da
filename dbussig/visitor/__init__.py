"""Tree visitors and the consumers built on them."""

from dbussig.visitor.pretty import PrettyPrinter, pretty_print, print_tree
from dbussig.visitor.visitor import SignatureVisitor, traverse, visit_node
from dbussig.visitor.writer import SignatureWriter, format_signature

__all__ = [
    "PrettyPrinter",
    "SignatureVisitor",
    "SignatureWriter",
    "format_signature",
    "pretty_print",
    "print_tree",
    "traverse",
    "visit_node",
]
