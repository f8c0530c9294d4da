"""Parser infrastructure (tree builder + entrypoints)."""

from dbussig.parser.builder import TreeBuilder, build_tree
from dbussig.parser.options import ParseMode, ParserOptions
from dbussig.parser.result import SignatureParseResult
from dbussig.parser.signature import parse_result, parse_signature

__all__ = [
    "ParseMode",
    "ParserOptions",
    "SignatureParseResult",
    "TreeBuilder",
    "build_tree",
    "parse_result",
    "parse_signature",
]
