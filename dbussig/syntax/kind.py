"""Parse-tree node kinds and basic (scalar) type tags."""

from enum import IntEnum

from dbussig.lexer import TokenKind, token_text


class NodeKind(IntEnum):
    """Parse-tree node vocabulary."""

    BASIC = 1
    VARIANT = 2
    ARRAY = 3
    STRUCT = 4
    DICT = 5

    @property
    def label(self) -> str:
        match self:
            case NodeKind.BASIC:
                return "basic"
            case NodeKind.VARIANT:
                return "variant"
            case NodeKind.ARRAY:
                return "array"
            case NodeKind.STRUCT:
                return "structure"
            case NodeKind.DICT:
                return "dictionary"


class BasicType(IntEnum):
    """Scalar type carried by a basic node."""

    BYTE = 1
    BOOLEAN = 2
    INT16 = 3
    UINT16 = 4
    INT32 = 5
    UINT32 = 6
    INT64 = 7
    UINT64 = 8
    DOUBLE = 9
    UNIX_FD = 10
    STRING = 11
    OBJECT_PATH = 12
    SIGNATURE = 13

    @property
    def type_name(self) -> str:
        match self:
            case BasicType.UNIX_FD:
                return "unix-fd"
            case BasicType.OBJECT_PATH:
                return "path"
            case _:
                return self.name.lower()

    @property
    def token_kind(self) -> TokenKind:
        return TokenKind[self.name]

    @property
    def code(self) -> str:
        """Single-character signature code, e.g. ``i`` for INT32."""
        return token_text(self.token_kind)

    @staticmethod
    def from_token(kind: TokenKind) -> "BasicType":
        if not kind.is_basic:
            raise ValueError(f"Not a basic TokenKind: {kind!r}")
        return BasicType[kind.name]
