"""High-level parse entrypoints for signature text."""

from __future__ import annotations

import logging

from dbussig.ast import SignatureTree
from dbussig.lexer import tokenize
from dbussig.parser.builder import build_tree
from dbussig.parser.options import ParseMode, ParserOptions
from dbussig.parser.result import SignatureParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_signature(
    signature: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SignatureTree:
    """Lex and build the parse tree for `signature`.

    Raises a `SignatureError` subclass for malformed input; no partial tree is returned.
    """
    return parse_result(signature, options, mode=mode).tree


def parse_result(
    signature: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SignatureParseResult:
    resolved_options = _resolve_options(options=options, mode=mode)
    tokens = tuple(tokenize(signature))
    tree = build_tree(tokens, resolved_options)
    logger.debug(
        "Parsed signature %r into %d top-level type(s) (%s mode)",
        signature,
        len(tree),
        resolved_options.mode,
    )
    return SignatureParseResult(
        source_text=signature,
        tokens=tokens,
        tree=tree,
        options=resolved_options,
    )
