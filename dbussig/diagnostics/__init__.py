"""Diagnostics."""

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
from dbussig.diagnostics.diagnostic import Diagnostic, Severity
from dbussig.diagnostics.errors import (
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

__all__ = [
    "LEXER_INVALID_CHARACTER",
    "PARSER_DICTIONARY_OVERFLOW",
    "PARSER_EMPTY_STRUCT",
    "PARSER_INCOMPLETE_DICTIONARY",
    "PARSER_INVALID_DICTIONARY_KEY",
    "PARSER_MISMATCHED_CONTAINER",
    "PARSER_UNBALANCED_CONTAINER",
    "PARSER_UNTERMINATED_CONTAINER",
    "Diagnostic",
    "DiagnosticSpec",
    "DictionaryOverflowError",
    "EmptyStructError",
    "IncompleteDictionaryError",
    "InvalidCharacterError",
    "InvalidDictionaryKeyError",
    "MismatchedContainerError",
    "Severity",
    "SignatureError",
    "UnbalancedContainerError",
    "UnterminatedContainerError",
]
