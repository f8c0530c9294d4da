import pytest

from dbussig.diagnostics import InvalidCharacterError
from dbussig.lexer import CHAR_TO_TOKEN, Lexer, TokenKind, dump_tokens, token_text, tokenize
from tests._debug import debug_dump_tokens


def test_one_token_per_character_in_order() -> None:
    source = "a(iis{si}i)"
    tokens = tokenize(source)
    debug_dump_tokens("one_token_per_character_in_order", source, tokens)

    assert len(tokens) == len(source)
    assert tokens == [
        TokenKind.ARRAY,
        TokenKind.STRUCT_OPEN,
        TokenKind.INT32,
        TokenKind.INT32,
        TokenKind.STRING,
        TokenKind.DICT_OPEN,
        TokenKind.STRING,
        TokenKind.INT32,
        TokenKind.DICT_CLOSE,
        TokenKind.INT32,
        TokenKind.STRUCT_CLOSE,
    ]


def test_empty_signature_has_no_tokens() -> None:
    assert tokenize("") == []


def test_character_table_covers_all_token_kinds() -> None:
    assert len(CHAR_TO_TOKEN) == 19
    assert set(CHAR_TO_TOKEN.values()) == set(TokenKind)
    for char, kind in CHAR_TO_TOKEN.items():
        assert token_text(kind) == char


def test_token_kind_categories() -> None:
    basics = [kind for kind in TokenKind if kind.is_basic]
    assert len(basics) == 13
    assert TokenKind.VARIANT not in basics

    assert {kind for kind in TokenKind if kind.is_container_open} == {
        TokenKind.ARRAY,
        TokenKind.STRUCT_OPEN,
        TokenKind.DICT_OPEN,
    }
    assert {kind for kind in TokenKind if kind.is_container_close} == {
        TokenKind.STRUCT_CLOSE,
        TokenKind.DICT_CLOSE,
    }


def test_character_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CHAR_TO_TOKEN["z"] = TokenKind.BYTE  # type: ignore[index]


def test_invalid_character_reports_character_and_offset() -> None:
    with pytest.raises(InvalidCharacterError) as excinfo:
        tokenize("a{sZ}")

    error = excinfo.value
    assert error.character == "Z"
    assert error.offset == 3
    assert error.code == "LEXER_INVALID_CHARACTER"
    assert "'Z'" in str(error)


def test_invalid_character_alone() -> None:
    with pytest.raises(InvalidCharacterError) as excinfo:
        tokenize("Z")
    assert excinfo.value.offset == 0


@pytest.mark.parametrize("source", [" ", "i s", "I", "r", "e", "m", "ai\n"])
def test_characters_outside_the_alphabet_are_rejected(source: str) -> None:
    with pytest.raises(InvalidCharacterError):
        tokenize(source)


def test_lexer_advances_one_character_per_token() -> None:
    lexer = Lexer("ai")
    assert lexer.source == "ai"
    assert lexer.next_token() == TokenKind.ARRAY
    assert lexer.position == 1
    assert lexer.next_token() == TokenKind.INT32
    assert lexer.is_eof

    with pytest.raises(IndexError):
        lexer.next_token()


def test_lexer_does_not_advance_past_invalid_character() -> None:
    lexer = Lexer("i?")
    lexer.next_token()
    with pytest.raises(InvalidCharacterError):
        lexer.next_token()
    assert lexer.position == 1


def test_dump_tokens_lists_index_kind_and_text() -> None:
    dumped = dump_tokens(tokenize("av"))
    assert dumped.splitlines() == [
        "000 ARRAY        'a'",
        "001 VARIANT      'v'",
    ]
