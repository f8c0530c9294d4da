"""Lexer tokens."""

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Basic (scalar) type codes
    # -------------------------
    BYTE = 1  # y
    BOOLEAN = 2  # b
    INT16 = 3  # n
    UINT16 = 4  # q
    INT32 = 5  # i
    UINT32 = 6  # u
    INT64 = 7  # x
    UINT64 = 8  # t
    DOUBLE = 9  # d
    UNIX_FD = 10  # h
    STRING = 11  # s
    OBJECT_PATH = 12  # o
    SIGNATURE = 13  # g

    # -------------------------
    # Containers / variant
    # -------------------------
    ARRAY = 14  # a
    STRUCT_OPEN = 15  # (
    STRUCT_CLOSE = 16  # )
    VARIANT = 17  # v
    DICT_OPEN = 18  # {
    DICT_CLOSE = 19  # }

    @property
    def is_basic(self) -> bool:
        return TokenKind.BYTE <= self <= TokenKind.SIGNATURE

    @property
    def is_container_open(self) -> bool:
        return self in (TokenKind.ARRAY, TokenKind.STRUCT_OPEN, TokenKind.DICT_OPEN)

    @property
    def is_container_close(self) -> bool:
        return self in (TokenKind.STRUCT_CLOSE, TokenKind.DICT_CLOSE)


CHAR_TO_TOKEN: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "y": TokenKind.BYTE,
        "b": TokenKind.BOOLEAN,
        "n": TokenKind.INT16,
        "q": TokenKind.UINT16,
        "i": TokenKind.INT32,
        "u": TokenKind.UINT32,
        "x": TokenKind.INT64,
        "t": TokenKind.UINT64,
        "d": TokenKind.DOUBLE,
        "h": TokenKind.UNIX_FD,
        "s": TokenKind.STRING,
        "o": TokenKind.OBJECT_PATH,
        "g": TokenKind.SIGNATURE,
        "a": TokenKind.ARRAY,
        "(": TokenKind.STRUCT_OPEN,
        ")": TokenKind.STRUCT_CLOSE,
        "v": TokenKind.VARIANT,
        "{": TokenKind.DICT_OPEN,
        "}": TokenKind.DICT_CLOSE,
    }
)
"""Signature character -> token kind. Read-only, shared by every lexer."""

TOKEN_TO_CHAR: Final[Mapping[TokenKind, str]] = MappingProxyType(
    {kind: char for char, kind in CHAR_TO_TOKEN.items()}
)
