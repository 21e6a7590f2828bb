"""Exception classes for dtslex.

The tokenizer itself never raises for any line text: unmatched characters
become UNKNOWN tokens and unterminated comments are a valid exit state.
These exceptions are raised only at API seams when a caller passes
arguments that cannot describe a document edit or a registered language.
"""

from __future__ import annotations


class DtsLexError(Exception):
    """Base exception for all dtslex errors.

    Subclass this for specific error categories.
    """

    pass


class EditRangeError(DtsLexError):
    """Invalid line range or position passed to a TokenizedDocument.

    The document is left unchanged when this is raised.
    """

    def __init__(
        self,
        message: str,
        start: int | None = None,
        end: int | None = None,
        line_count: int | None = None,
    ) -> None:
        """Initialize edit range error.

        Args:
            message: Error description
            start: First line of the rejected range
            end: End (exclusive) of the rejected range
            line_count: Number of lines in the document at the time
        """
        self.message = message
        self.start = start
        self.end = end
        self.line_count = line_count

        details = ""
        if start is not None:
            details = f" [{start}:{end if end is not None else start}]"
            if line_count is not None:
                details += f" of {line_count} lines"

        super().__init__(f"{message}{details}")


class InconsistentStateError(DtsLexError):
    """A cached exit state does not match a fresh scan of its line.

    Raised by TokenizedDocument.verify(); indicates a bug in propagation.
    """

    def __init__(self, lineno: int, message: str = "cached exit state is stale") -> None:
        self.lineno = lineno
        super().__init__(f"line {lineno}: {message}")


class UnknownLanguageError(DtsLexError):
    """No tokens provider is registered for a language id."""

    def __init__(self, language_id: str) -> None:
        self.language_id = language_id
        super().__init__(f"No tokens provider registered for language '{language_id}'")
