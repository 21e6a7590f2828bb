"""ContextVar-based tokenizer configuration for dtslex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration only affects presentation and diagnostics (scope name
postfix, language id, propagation logging); token classification is fixed
by the rule tables.

Usage:
    from dtslex.config import TokenizerConfig, tokenizer_config_context

    with tokenizer_config_context(TokenizerConfig(token_postfix="")):
        triples = list(scan_line("/dts-v1/;").triples())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        token_postfix: Appended to every scope name handed to an editor
        language_id: Identifier the DTS provider registers under
        log_propagation: Log every line re-scanned by the incremental
            driver at DEBUG level (off by default; one record per line)

    """

    token_postfix: str = ".dts"
    language_id: str = "dts"
    log_propagation: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizerConfig":
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown
        keys are silently ignored.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "token_postfix": "",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.token_postfix
            ''

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context."""
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to the default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: TokenizerConfig to use within the context.
    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
