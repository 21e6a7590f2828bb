"""Tests for ContextVar-based tokenizer configuration.

Validates thread isolation, context manager behavior, and the effect of
configuration on scope names and provider lookup.
"""

import logging
from threading import Thread

import pytest

from dtslex import (
    TokenizedDocument,
    TokenizerConfig,
    get_tokenizer_config,
    get_tokens_provider,
    reset_tokenizer_config,
    scan_line,
    set_tokenizer_config,
    tokenizer_config_context,
)
from dtslex.errors import UnknownLanguageError


class TestTokenizerConfigDataclass:
    def test_default_values(self) -> None:
        config = TokenizerConfig()
        assert config.token_postfix == ".dts"
        assert config.language_id == "dts"
        assert config.log_propagation is False

    def test_immutability(self) -> None:
        config = TokenizerConfig()
        with pytest.raises(AttributeError):
            config.token_postfix = ""  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TokenizerConfig.from_dict({"token_postfix": "", "bogus": 1})
        assert config.token_postfix == ""
        assert config.language_id == "dts"


class TestContextVarFunctions:
    def test_default(self) -> None:
        reset_tokenizer_config()
        assert get_tokenizer_config() == TokenizerConfig()

    def test_set_and_reset(self) -> None:
        try:
            set_tokenizer_config(TokenizerConfig(token_postfix=".x"))
            assert get_tokenizer_config().token_postfix == ".x"
        finally:
            reset_tokenizer_config()
        assert get_tokenizer_config().token_postfix == ".dts"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(ValueError):
            with tokenizer_config_context(TokenizerConfig(token_postfix=".x")):
                raise ValueError("boom")
        assert get_tokenizer_config().token_postfix == ".dts"

    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, str] = {}

        def worker(thread_id: int) -> None:
            set_tokenizer_config(TokenizerConfig(token_postfix=f".t{thread_id}"))
            results[thread_id] = scan_line("x").tokens[0].scope_name()

        threads = [Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: f"type.identifier.t{i}" for i in range(4)}
        assert get_tokenizer_config().token_postfix == ".dts"


class TestConfigEffects:
    def test_postfix_applies_to_triples(self) -> None:
        result = scan_line("/dts-v1/;")
        assert list(result.triples()) == [(0, 8, "keyword.dts"), (8, 1, "delimiter.dts")]
        with tokenizer_config_context(TokenizerConfig(token_postfix="")):
            assert list(result.triples()) == [(0, 8, "keyword"), (8, 1, "delimiter")]

    def test_explicit_postfix_wins(self) -> None:
        result = scan_line("x")
        assert list(result.triples(".y")) == [(0, 1, "type.identifier.y")]

    def test_language_id_selects_provider(self) -> None:
        assert get_tokens_provider() is get_tokens_provider("dts")
        with tokenizer_config_context(TokenizerConfig(language_id="nope")):
            with pytest.raises(UnknownLanguageError):
                get_tokens_provider()

    def test_log_propagation(self, caplog: pytest.LogCaptureFixture) -> None:
        doc = TokenizedDocument("a;\nb;\nc;")
        with caplog.at_level(logging.DEBUG, logger="dtslex"):
            with tokenizer_config_context(TokenizerConfig(log_propagation=True)):
                doc.set_line(0, "/* x")
        per_line = [r for r in caplog.records if r.getMessage().startswith("line ")]
        assert len(per_line) == 3
