"""
dtslex — Incremental syntax classification for Device Tree Source

A finite-state line tokenizer for DTS files. Every character of a line is
classified (comment, directive, keyword, string, number, label reference,
identifier, cell list, delimiter, bracket, or unknown), block comments
carry state across lines, and edits re-tokenize only until the per-line
state stream converges again.

Quick Start:
    >>> from dtslex import tokenize_line
    >>> result = tokenize_line("#size-cells = <1>;")
    >>> [t.scope.name for t in result.tokens]
    ['DIRECTIVE', 'UNKNOWN', 'DELIMITER', 'UNKNOWN', 'ANGLE_VALUE', 'DELIMITER']

    >>> # Incremental document tokenization
    >>> from dtslex import TokenizedDocument
    >>> doc = TokenizedDocument("/dts-v1/;\\n/ {\\n};")
    >>> doc.set_line(1, "/* / {")
    frozenset({1, 2})

Installation:
    pip install dtslex
"""

from dtslex.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from dtslex.document import LineRecord, TokenizedDocument, split_lines
from dtslex.errors import (
    DtsLexError,
    EditRangeError,
    InconsistentStateError,
    UnknownLanguageError,
)
from dtslex.language import DTS_LANGUAGE, BracketPair, LanguageDefinition
from dtslex.lexer import (
    COMMENT_STATE,
    ROOT_STATE,
    LexerState,
    Rule,
    Scanner,
    StateName,
    Transition,
    match,
    rules_for,
    scan_line,
)
from dtslex.profiling import RetokenizeAccumulator, profiled_retokenize
from dtslex.provider import (
    DtsTokensProvider,
    TokensProvider,
    get_language,
    get_tokens_provider,
    register_language,
    registered_languages,
)
from dtslex.tokens import ClassificationTag, LineTokens, Token

__version__ = "0.1.0"


def tokenize_line(text: str, state: LexerState = ROOT_STATE) -> LineTokens:
    """Tokenize a single line.

    Args:
        text: Line content without its terminator
        state: Exit state of the previous line (ROOT for the first line)

    Returns:
        LineTokens with the line's tokens and its exit state
    """
    return scan_line(text, state)


def tokenize(source: str) -> list[LineTokens]:
    """Tokenize a whole document, one LineTokens per line.

    Each line is scanned from the previous line's exit state. For documents
    that are edited afterwards, use TokenizedDocument instead.

    Args:
        source: Full document text

    Returns:
        One LineTokens per line of ``split_lines(source)``
    """
    results: list[LineTokens] = []
    state = ROOT_STATE
    for line in split_lines(source):
        result = scan_line(line, state)
        results.append(result)
        state = result.exit_state
    return results


__all__ = [
    "BracketPair",
    "COMMENT_STATE",
    "ClassificationTag",
    "DTS_LANGUAGE",
    "DtsLexError",
    "DtsTokensProvider",
    "EditRangeError",
    "InconsistentStateError",
    "LanguageDefinition",
    "LexerState",
    "LineRecord",
    "LineTokens",
    "ROOT_STATE",
    "RetokenizeAccumulator",
    "Rule",
    "Scanner",
    "StateName",
    "Token",
    "TokenizedDocument",
    "TokenizerConfig",
    "Transition",
    "TokensProvider",
    "UnknownLanguageError",
    "__version__",
    "get_language",
    "get_tokenizer_config",
    "get_tokens_provider",
    "match",
    "profiled_retokenize",
    "register_language",
    "registered_languages",
    "reset_tokenizer_config",
    "rules_for",
    "scan_line",
    "set_tokenizer_config",
    "split_lines",
    "tokenize",
    "tokenize_line",
    "tokenizer_config_context",
]
