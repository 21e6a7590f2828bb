"""Tokens provider protocol and language registry.

An editor registers a language id and a tokens provider for it, then asks
the provider for the initial state and for the tokens of each line given
the previous line's exit state. The DTS provider is registered on import.

Usage:
    from dtslex.provider import get_tokens_provider

    provider = get_tokens_provider("dts")
    state = provider.get_initial_state()
    for line in lines:
        result = provider.tokenize(line, state)
        paint(list(result.triples(provider.language.token_postfix)))
        state = result.exit_state

Custom providers:
    Any object with get_initial_state() and tokenize(line, state) can be
    registered with register_language(). Registering an id again replaces
    the previous provider.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dtslex.config import get_tokenizer_config
from dtslex.document import TokenizedDocument
from dtslex.errors import UnknownLanguageError
from dtslex.language import DTS_LANGUAGE, LanguageDefinition
from dtslex.lexer.scanner import Scanner
from dtslex.lexer.state import LexerState
from dtslex.tokens import LineTokens
from dtslex.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class TokensProvider(Protocol):
    """Protocol for line tokenizers consumed by an editor.

    Contract:
        - tokenize() MUST NOT raise for any line text
        - tokens MUST cover the line exactly, in order, without gaps
        - states MUST compare equal when they would tokenize alike

    """

    def get_initial_state(self) -> LexerState:
        """Entry state of the first line of a document."""
        ...

    def tokenize(self, line: str, state: LexerState) -> LineTokens:
        """Tokenize one line starting in ``state``."""
        ...


class DtsTokensProvider:
    """Tokens provider for Device Tree Source."""

    __slots__ = ("_language", "_scanner")

    def __init__(self, language: LanguageDefinition = DTS_LANGUAGE) -> None:
        self._language = language
        self._scanner = Scanner()

    @property
    def language(self) -> LanguageDefinition:
        return self._language

    def get_initial_state(self) -> LexerState:
        return self._scanner.initial_state

    def tokenize(self, line: str, state: LexerState) -> LineTokens:
        return self._scanner.scan(line, state)

    def create_document(self, source: str = "") -> TokenizedDocument:
        """Open ``source`` as an incrementally tokenized document."""
        return TokenizedDocument(source)


_registry: dict[str, tuple[LanguageDefinition, TokensProvider]] = {}


def register_language(language: LanguageDefinition, provider: TokensProvider) -> None:
    """Register ``provider`` under ``language.language_id``.

    Args:
        language: Language metadata
        provider: Object implementing the TokensProvider protocol
    """
    if language.language_id in _registry:
        logger.debug("replacing tokens provider for %r", language.language_id)
    else:
        logger.debug("registering tokens provider for %r", language.language_id)
    _registry[language.language_id] = (language, provider)


def get_tokens_provider(language_id: str | None = None) -> TokensProvider:
    """Look up the provider for ``language_id``.

    Args:
        language_id: Registered id; defaults to the configured language id

    Raises:
        UnknownLanguageError: If nothing is registered under the id.
    """
    if language_id is None:
        language_id = get_tokenizer_config().language_id
    try:
        return _registry[language_id][1]
    except KeyError:
        raise UnknownLanguageError(language_id) from None


def get_language(language_id: str) -> LanguageDefinition:
    """Look up the metadata registered for ``language_id``."""
    try:
        return _registry[language_id][0]
    except KeyError:
        raise UnknownLanguageError(language_id) from None


def registered_languages() -> list[str]:
    """Ids of all registered languages, sorted."""
    return sorted(_registry)


register_language(DTS_LANGUAGE, DtsTokensProvider())
