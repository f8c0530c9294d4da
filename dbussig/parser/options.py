"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which grammar checks the tree builder applies."""

    mode: ParseMode = ParseMode.STRICT
    require_basic_dict_keys: bool = True
    allow_empty_struct: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                require_basic_dict_keys=False,
                allow_empty_struct=True,
            )

        return ParserOptions(
            mode=mode,
            require_basic_dict_keys=True,
            allow_empty_struct=False,
        )
