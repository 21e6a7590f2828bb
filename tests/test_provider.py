"""Tests for the tokens provider protocol, language metadata and registry."""

import pytest

from dtslex import (
    DTS_LANGUAGE,
    DtsTokensProvider,
    LanguageDefinition,
    LexerState,
    LineTokens,
    TokenizedDocument,
    TokensProvider,
    get_language,
    get_tokens_provider,
    register_language,
    registered_languages,
)
from dtslex.errors import UnknownLanguageError
from dtslex.lexer import COMMENT_STATE, ROOT_STATE, Scanner
from dtslex.provider import _registry


@pytest.fixture
def clean_registry():
    saved = dict(_registry)
    yield
    _registry.clear()
    _registry.update(saved)


class TestLanguageDefinition:
    def test_dts_metadata(self) -> None:
        assert DTS_LANGUAGE.language_id == "dts"
        assert DTS_LANGUAGE.token_postfix == ".dts"
        assert DTS_LANGUAGE.line_comment == "//"
        assert DTS_LANGUAGE.block_comment == ("/*", "*/")

    @pytest.mark.parametrize(
        "char,token",
        [
            ("{", "delimiter.curly"),
            ("}", "delimiter.curly"),
            ("(", "delimiter.parenthesis"),
            ("]", "delimiter.square"),
        ],
    )
    def test_bracket_for(self, char: str, token: str) -> None:
        pair = DTS_LANGUAGE.bracket_for(char)
        assert pair is not None
        assert pair.token == token

    def test_bracket_for_non_bracket(self) -> None:
        assert DTS_LANGUAGE.bracket_for("<") is None


class TestDtsTokensProvider:
    def test_implements_protocol(self) -> None:
        assert isinstance(DtsTokensProvider(), TokensProvider)

    def test_initial_state(self) -> None:
        assert DtsTokensProvider().get_initial_state() == ROOT_STATE

    def test_tokenize_chains_state(self) -> None:
        provider = DtsTokensProvider()
        state = provider.get_initial_state()
        painted = []
        for line in ["/* a", "b */ c;"]:
            result = provider.tokenize(line, state)
            painted.append(list(result.triples(provider.language.token_postfix)))
            state = result.exit_state
        assert painted[1] == [
            (0, 2, "comment.dts"),
            (2, 2, "comment.dts"),
            (4, 1, ""),
            (5, 1, "type.identifier.dts"),
            (6, 1, "delimiter.dts"),
        ]
        assert state == ROOT_STATE

    def test_delegates_to_scanner(self) -> None:
        provider = DtsTokensProvider()
        scanner = Scanner()
        assert provider.get_initial_state() == scanner.initial_state
        assert provider.tokenize("b */ c;", COMMENT_STATE) == scanner.scan("b */ c;", COMMENT_STATE)

    def test_brackets_tagged_by_direction(self) -> None:
        provider = DtsTokensProvider()
        result = provider.tokenize("{}", provider.get_initial_state())
        assert [name for _, _, name in result.triples(".dts")] == [
            "delimiter.open.dts",
            "delimiter.close.dts",
        ]
        assert provider.language.bracket_for("{").token == "delimiter.curly"

    def test_cell_list_scope(self) -> None:
        result = DtsTokensProvider().tokenize("<1 2>", ROOT_STATE)
        assert list(result.triples(".dts")) == [(0, 5, "number.list.dts")]

    def test_create_document(self) -> None:
        doc = DtsTokensProvider().create_document("a;\n/* b")
        assert isinstance(doc, TokenizedDocument)
        assert len(doc) == 2


class TestRegistry:
    def test_dts_registered_on_import(self) -> None:
        assert "dts" in registered_languages()
        assert isinstance(get_tokens_provider("dts"), DtsTokensProvider)
        assert get_language("dts") is DTS_LANGUAGE

    def test_unknown_language(self) -> None:
        with pytest.raises(UnknownLanguageError) as excinfo:
            get_tokens_provider("verilog")
        assert excinfo.value.language_id == "verilog"
        with pytest.raises(UnknownLanguageError):
            get_language("verilog")

    def test_register_custom_provider(self, clean_registry) -> None:
        class NullProvider:
            def get_initial_state(self) -> LexerState:
                return ROOT_STATE

            def tokenize(self, line: str, state: LexerState) -> LineTokens:
                return LineTokens((), state)

        provider = NullProvider()
        register_language(LanguageDefinition("dtsi-lite"), provider)
        assert get_tokens_provider("dtsi-lite") is provider
        assert registered_languages() == ["dts", "dtsi-lite"]

    def test_register_replaces(self, clean_registry) -> None:
        replacement = DtsTokensProvider()
        register_language(DTS_LANGUAGE, replacement)
        assert get_tokens_provider("dts") is replacement
