"""Lexer."""

from dbussig.lexer.lexer import Lexer, dump_tokens, token_text, tokenize
from dbussig.lexer.tokens import CHAR_TO_TOKEN, TOKEN_TO_CHAR, TokenKind

__all__ = [
    "CHAR_TO_TOKEN",
    "TOKEN_TO_CHAR",
    "Lexer",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "tokenize",
]
