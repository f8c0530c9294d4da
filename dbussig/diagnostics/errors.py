"""Exception taxonomy raised by the lexer and tree builder.

Every error is a ``ValueError`` carrying the ``Diagnostic`` that describes it, so
callers can either catch the specific class or inspect ``error.diagnostic.code``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbussig.diagnostics.codes import (
    LEXER_INVALID_CHARACTER,
    PARSER_DICTIONARY_OVERFLOW,
    PARSER_EMPTY_STRUCT,
    PARSER_INCOMPLETE_DICTIONARY,
    PARSER_INVALID_DICTIONARY_KEY,
    PARSER_MISMATCHED_CONTAINER,
    PARSER_UNBALANCED_CONTAINER,
    PARSER_UNTERMINATED_CONTAINER,
    DiagnosticSpec,
)
from dbussig.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from dbussig.syntax import NodeKind


class SignatureError(ValueError):
    """Base class for malformed type signatures."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.render())
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def offset(self) -> int | None:
        return self.diagnostic.offset


def _diagnostic(spec: DiagnosticSpec, message: str, offset: int | None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message,
        offset=offset,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


class InvalidCharacterError(SignatureError):
    def __init__(self, character: str, offset: int) -> None:
        self.character = character
        super().__init__(
            _diagnostic(
                LEXER_INVALID_CHARACTER,
                f"{LEXER_INVALID_CHARACTER.message} Got {character!r}.",
                offset,
            )
        )


class DictionaryOverflowError(SignatureError):
    def __init__(self, offset: int) -> None:
        super().__init__(
            _diagnostic(PARSER_DICTIONARY_OVERFLOW, PARSER_DICTIONARY_OVERFLOW.message, offset)
        )


class MismatchedContainerError(SignatureError):
    def __init__(self, expected: NodeKind, found: NodeKind, offset: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            _diagnostic(
                PARSER_MISMATCHED_CONTAINER,
                f"{PARSER_MISMATCHED_CONTAINER.message} "
                f"Expected the {expected.label} to be closed, found a {found.label} close.",
                offset,
            )
        )


class UnbalancedContainerError(SignatureError):
    def __init__(self, found: NodeKind, offset: int) -> None:
        self.found = found
        super().__init__(
            _diagnostic(
                PARSER_UNBALANCED_CONTAINER,
                f"{PARSER_UNBALANCED_CONTAINER.message} Found a {found.label} close.",
                offset,
            )
        )


class UnterminatedContainerError(SignatureError):
    def __init__(self, unclosed: tuple[NodeKind, ...], offset: int) -> None:
        self.unclosed = unclosed
        names = ", ".join(kind.label for kind in unclosed)
        super().__init__(
            _diagnostic(
                PARSER_UNTERMINATED_CONTAINER,
                f"{PARSER_UNTERMINATED_CONTAINER.message} Unclosed: {names}.",
                offset,
            )
        )


class InvalidDictionaryKeyError(SignatureError):
    def __init__(self, found: NodeKind, offset: int) -> None:
        self.found = found
        super().__init__(
            _diagnostic(
                PARSER_INVALID_DICTIONARY_KEY,
                f"{PARSER_INVALID_DICTIONARY_KEY.message} Got a {found.label}.",
                offset,
            )
        )


class IncompleteDictionaryError(SignatureError):
    def __init__(self, offset: int) -> None:
        super().__init__(
            _diagnostic(PARSER_INCOMPLETE_DICTIONARY, PARSER_INCOMPLETE_DICTIONARY.message, offset)
        )


class EmptyStructError(SignatureError):
    def __init__(self, offset: int) -> None:
        super().__init__(_diagnostic(PARSER_EMPTY_STRUCT, PARSER_EMPTY_STRUCT.message, offset))
