"""Token and ClassificationTag definitions for the dtslex tokenizer.

The scanner produces one LineTokens per line: an ordered tuple of Token
objects covering every character of the line, plus the lexer state the
line exits in.

Thread Safety:
Token and LineTokens are frozen (immutable) and safe to share across threads.
ClassificationTag is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from dtslex.config import get_tokenizer_config

if TYPE_CHECKING:
    from dtslex.lexer.state import LexerState


class ClassificationTag(Enum):
    """Classification assigned to a token.

    Member values are the stable scope names handed to an editor. They are
    independent of any theme; an editor maps them to visual styles.

    """

    COMMENT = "comment"  # // ... and /* ... */
    DIRECTIVE = "keyword.directive"  # #include, #address-cells
    KEYWORD = "keyword"  # /dts-v1/, true, false
    STRING = "string"
    NUMBER_HEX = "number.hex"  # 0x1A
    NUMBER_DECIMAL = "number"  # 42
    LABEL_REFERENCE = "variable.parameter"  # &label
    IDENTIFIER = "type.identifier"  # node and property names
    ANGLE_VALUE = "number.list"  # <0x0 0x1000>
    DELIMITER = "delimiter"  # = ; ,
    BRACKET_OPEN = "delimiter.open"  # { ( [
    BRACKET_CLOSE = "delimiter.close"  # } ) ]
    UNKNOWN = ""  # default token, one character at a time

    def scope_name(self, postfix: str = "") -> str:
        """Scope name with the language postfix appended.

        UNKNOWN has no scope name and always renders as the empty string.
        """
        if self is ClassificationTag.UNKNOWN:
            return ""
        return f"{self.value}{postfix}"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, contiguous span of characters within one line.

    Attributes:
        start_column: 0-indexed column of the first character
        length: Number of characters covered (always >= 1)
        scope: Classification of the span

    """

    start_column: int
    length: int
    scope: ClassificationTag

    @property
    def end_column(self) -> int:
        """Column just past the last character of the token."""
        return self.start_column + self.length

    def scope_name(self, postfix: str | None = None) -> str:
        """Scope name of the token, using the active config postfix by default."""
        if postfix is None:
            postfix = get_tokenizer_config().token_postfix
        return self.scope.scope_name(postfix)

    def text(self, line: str) -> str:
        """Slice of ``line`` covered by this token."""
        return line[self.start_column : self.end_column]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.scope.name}, {self.start_column}+{self.length})"


@dataclass(frozen=True, slots=True)
class LineTokens:
    """Result of scanning one line.

    Attributes:
        tokens: Tokens in increasing start_column order, gap-free
        exit_state: Lexer state after the last character of the line

    """

    tokens: tuple[Token, ...]
    exit_state: LexerState

    def triples(self, postfix: str | None = None) -> Iterator[tuple[int, int, str]]:
        """Yield ``(start_column, length, scope_name)`` for each token.

        This is the shape an editor consumes when painting a line.
        """
        if postfix is None:
            postfix = get_tokenizer_config().token_postfix
        for token in self.tokens:
            yield token.start_column, token.length, token.scope.scope_name(postfix)

    def scopes(self) -> list[ClassificationTag]:
        """Classification of each token, in order."""
        return [token.scope for token in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)
