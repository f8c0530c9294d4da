"""D-Bus type signature parsing: lexer, tree builder and tree visitors."""

from dbussig.ast import (
    ArrayNode,
    BasicNode,
    DictNode,
    SignatureNode,
    SignatureTree,
    StructNode,
    VariantNode,
)
from dbussig.diagnostics import (
    Diagnostic,
    DictionaryOverflowError,
    EmptyStructError,
    IncompleteDictionaryError,
    InvalidCharacterError,
    InvalidDictionaryKeyError,
    MismatchedContainerError,
    SignatureError,
    UnbalancedContainerError,
    UnterminatedContainerError,
)
from dbussig.lexer import TokenKind, tokenize
from dbussig.parser import (
    ParseMode,
    ParserOptions,
    SignatureParseResult,
    TreeBuilder,
    build_tree,
    parse_result,
    parse_signature,
)
from dbussig.syntax import BasicType, NodeKind
from dbussig.visitor import (
    PrettyPrinter,
    SignatureVisitor,
    SignatureWriter,
    format_signature,
    pretty_print,
    print_tree,
    traverse,
)

__all__ = [
    "ArrayNode",
    "BasicNode",
    "BasicType",
    "Diagnostic",
    "DictNode",
    "DictionaryOverflowError",
    "EmptyStructError",
    "IncompleteDictionaryError",
    "InvalidCharacterError",
    "InvalidDictionaryKeyError",
    "MismatchedContainerError",
    "NodeKind",
    "ParseMode",
    "ParserOptions",
    "PrettyPrinter",
    "SignatureError",
    "SignatureNode",
    "SignatureParseResult",
    "SignatureTree",
    "SignatureVisitor",
    "SignatureWriter",
    "StructNode",
    "TokenKind",
    "TreeBuilder",
    "UnbalancedContainerError",
    "UnterminatedContainerError",
    "VariantNode",
    "build_tree",
    "format_signature",
    "parse_result",
    "parse_signature",
    "pretty_print",
    "print_tree",
    "traverse",
    "tokenize",
]
