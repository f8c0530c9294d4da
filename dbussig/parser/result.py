"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field

from dbussig.ast import SignatureTree
from dbussig.lexer import TokenKind
from dbussig.parser.options import ParserOptions


@dataclass(slots=True)
class SignatureParseResult:
    """Signature text together with its tokens, tree and lazily rendered views."""

    source_text: str
    tokens: tuple[TokenKind, ...]
    tree: SignatureTree
    options: ParserOptions
    _pretty: str | None = field(default=None, init=False, repr=False)
    _signature: str | None = field(default=None, init=False, repr=False)

    @property
    def is_single_complete_type(self) -> bool:
        """True when the signature describes exactly one type, as a variant payload must."""
        return len(self.tree) == 1

    def pretty(self) -> str:
        if self._pretty is None:
            from dbussig.visitor import pretty_print

            self._pretty = pretty_print(self.tree)
        return self._pretty

    def signature(self) -> str:
        if self._signature is None:
            from dbussig.visitor import format_signature

            self._signature = format_signature(self.tree)
        return self._signature
