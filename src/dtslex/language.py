"""Static description of the DTS language for editor registration.

Holds what an editor needs besides the tokens themselves: the language id,
the postfix appended to scope names, the default token for unclassified
characters, comment markers, and bracket pairs for bracket matching.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BracketPair:
    """An open/close bracket pair and the scope an editor colors it with."""

    open: str
    close: str
    token: str


@dataclass(frozen=True, slots=True)
class LanguageDefinition:
    """Editor-facing language metadata.

    Attributes:
        language_id: Identifier the language is registered under
        token_postfix: Appended to every scope name
        default_token: Scope name of characters no rule classifies
        brackets: Bracket pairs for matching and colorization
        line_comment: Line comment marker
        block_comment: Block comment open/close markers

    """

    language_id: str
    token_postfix: str = ""
    default_token: str = ""
    brackets: tuple[BracketPair, ...] = ()
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None

    def bracket_for(self, char: str) -> BracketPair | None:
        """Return the pair ``char`` opens or closes, or None."""
        for pair in self.brackets:
            if char in (pair.open, pair.close):
                return pair
        return None


DTS_BRACKETS: tuple[BracketPair, ...] = (
    BracketPair("{", "}", "delimiter.curly"),
    BracketPair("(", ")", "delimiter.parenthesis"),
    BracketPair("[", "]", "delimiter.square"),
)

DTS_LANGUAGE = LanguageDefinition(
    language_id="dts",
    token_postfix=".dts",
    default_token="",
    brackets=DTS_BRACKETS,
    line_comment="//",
    block_comment=("/*", "*/"),
)
