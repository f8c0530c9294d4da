"""Lexer."""

from collections.abc import Iterable

from dbussig.diagnostics import InvalidCharacterError
from dbussig.lexer.tokens import CHAR_TO_TOKEN, TOKEN_TO_CHAR, TokenKind


class Lexer:
    """Maps each signature character to exactly one token kind."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        """Original signature text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> TokenKind:
        """Lex the character at the current position and advance past it.

        Raises `InvalidCharacterError` for characters outside the signature alphabet.
        """
        if self.is_eof:
            raise IndexError("Lexer is already at end of input")

        char = self._source[self._position]
        kind = CHAR_TO_TOKEN.get(char)
        if kind is None:
            raise InvalidCharacterError(char, self._position)

        self._position += 1
        return kind

    def lex(self) -> list[TokenKind]:
        tokens: list[TokenKind] = []
        while not self.is_eof:
            tokens.append(self.next_token())
        return tokens


def tokenize(signature: str) -> list[TokenKind]:
    """Tokenize a signature, one token per character."""
    return Lexer(signature).lex()


def token_text(kind: TokenKind) -> str:
    return TOKEN_TO_CHAR[kind]


def dump_tokens(tokens: Iterable[TokenKind]) -> str:
    return "\n".join(
        f"{index:03d} {kind.name:<12} {token_text(kind)!r}" for index, kind in enumerate(tokens)
    )
