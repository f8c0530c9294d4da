"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from dbussig.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_CHARACTER",
    message="Invalid character in type signature.",
    hint="Use one of the D-Bus type codes `ybnqiuxtdhsogav` or `(){}`.",
    category="lexer",
)

PARSER_DICTIONARY_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DICTIONARY_OVERFLOW",
    message="Dictionary entry already has a key and a value.",
    hint="A dict entry holds exactly one key type and one value type, e.g. `{sv}`.",
    category="parser",
)

PARSER_MISMATCHED_CONTAINER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_CONTAINER",
    message="Closing token does not match the innermost open container.",
    category="parser",
)

PARSER_UNBALANCED_CONTAINER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNBALANCED_CONTAINER",
    message="Closing token without a matching open container.",
    category="parser",
)

PARSER_UNTERMINATED_CONTAINER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_CONTAINER",
    message="Signature ended with containers still open.",
    hint="Close every `(` with `)`, every `{` with `}` and give every `a` an element type.",
    category="parser",
)

PARSER_INVALID_DICTIONARY_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_DICTIONARY_KEY",
    message="Dictionary key must be a basic type.",
    hint="Use a basic type such as `s` or `u` as the key, or parse in permissive mode.",
    category="parser",
)

PARSER_INCOMPLETE_DICTIONARY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INCOMPLETE_DICTIONARY",
    message="Dictionary entry closed before both key and value were given.",
    category="parser",
)

PARSER_EMPTY_STRUCT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_STRUCT",
    message="Structure has no fields.",
    hint="Empty structures are only accepted in permissive mode.",
    category="parser",
)
