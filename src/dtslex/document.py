"""Incremental re-tokenization of a whole DTS document.

A TokenizedDocument keeps one LineRecord per line: the line text, its
tokens, and the lexer state it exits in. The exit state of line N is the
entry state of line N+1, so an edit only needs re-scanning from the first
changed line forward until a re-scanned line exits in the same state as
before (a fixed point). Every line after that point already holds tokens
consistent with its entry state.

Records live in a plain list indexed by line number; inserting or deleting
lines shifts indices and leaves the remaining records untouched.

Worst case a single pass is O(document length), e.g. when a "/*" is typed
near the top of a large file and nothing closes it.

Atomicity:
    A pass computes every new record first and commits them in one step.
    If scanning raises part way through, the cache is left as it was, and
    an edit that fails during its pass leaves the line list as it was.

Thread Safety:
    TokenizedDocument is not thread-safe. It is meant to be owned by one
    editor and driven from its single edit-handling thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from dtslex.config import get_tokenizer_config
from dtslex.errors import EditRangeError, InconsistentStateError
from dtslex.lexer.scanner import scan_line
from dtslex.lexer.state import ROOT_STATE, LexerState
from dtslex.profiling import get_retokenize_accumulator
from dtslex.tokens import LineTokens, Token
from dtslex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class LineRecord:
    """Cached tokenization of one document line.

    Attributes:
        text: Line content without its terminator
        tokens: Tokens from the last scan of this line
        exit_state: State after the line; None until first scanned

    """

    text: str
    tokens: tuple[Token, ...] = ()
    exit_state: LexerState | None = None


def split_lines(source: str) -> list[str]:
    """Split source into editor lines.

    Lines are separated by ``\\n``; a ``\\r`` directly before it is part of
    the separator. A ``\\r`` anywhere else, including at the very end, is
    line content. The result always has at least one line, and a trailing
    newline produces a final empty line, as in a text editor.
    """
    parts = source.split("\n")
    return [part.removesuffix("\r") for part in parts[:-1]] + [parts[-1]]


class TokenizedDocument:
    """Per-line token cache with fixed-point propagation on edits.

    Usage:
        >>> doc = TokenizedDocument("/ {\\n\\tmodel = \\"x\\";\\n};")
        >>> doc.set_line(0, "/* / {")
        frozenset({0, 1, 2})
        >>> doc.exit_state(2)
        LexerState(ROOT/COMMENT)

    """

    __slots__ = ("_lines",)

    def __init__(self, source: str = "") -> None:
        """Create the document and tokenize every line once.

        Args:
            source: Full document text
        """
        self._lines: list[LineRecord] = [LineRecord(text) for text in split_lines(source)]
        self.on_edit(range(len(self._lines)))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> TokenizedDocument:
        """Create a document from already split lines."""
        return cls("\n".join(lines))

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LineRecord]:
        return iter(self._lines)

    @property
    def text(self) -> str:
        """Full document text, lines joined with ``\\n``."""
        return "\n".join(record.text for record in self._lines)

    @property
    def lines(self) -> list[str]:
        return [record.text for record in self._lines]

    def line(self, index: int) -> str:
        return self._record(index).text

    def tokens(self, index: int) -> tuple[Token, ...]:
        return self._record(index).tokens

    def exit_state(self, index: int) -> LexerState:
        """State line ``index`` exits in (entry state of the next line)."""
        state = self._record(index).exit_state
        return state if state is not None else ROOT_STATE

    def entry_state(self, index: int) -> LexerState:
        """State line ``index`` is scanned from: ROOT for line 0."""
        self._record(index)
        return self._entry_state(index)

    def line_tokens(self, index: int) -> LineTokens:
        record = self._record(index)
        return LineTokens(record.tokens, self.exit_state(index))

    # =========================================================================
    # Editing
    # =========================================================================

    def on_edit(self, changed: range) -> frozenset[int]:
        """Re-tokenize after the lines in ``changed`` were modified.

        Scanning starts at ``changed.start`` from the previous line's cached
        exit state. Every line in ``changed`` is re-scanned. Past the range,
        propagation continues only while a line's new exit state differs
        from its cached one; a line never scanned before has no cached state
        and never stops propagation. Lines spliced in by replace_lines carry
        the state the following line was last scanned from, so an edit that
        preserves that state stops right after the changed range. The line
        at ``changed.start`` is always re-scanned, so an empty range (lines
        deleted above it) still refreshes the line whose predecessor changed.

        Args:
            changed: Line indices whose text changed, in the current document

        Returns:
            Indices of lines whose tokens and exit state were recomputed.

        Raises:
            EditRangeError: If ``changed`` is not a forward range within the
                document.
        """
        line_count = len(self._lines)
        start, stop = changed.start, changed.stop
        if changed.step != 1 or start < 0 or stop < start or stop > line_count:
            raise EditRangeError("invalid changed line range", start, stop, line_count)
        if start == line_count:
            return frozenset()

        config = get_tokenizer_config()
        logger.debug("re-tokenizing from line %d (%d changed)", start, stop - start)

        pending: list[tuple[LineRecord, LineTokens]] = []
        state = self._entry_state(start)
        must_scan_until = max(stop, start + 1)
        converged = False
        index = start
        while index < line_count:
            record = self._lines[index]
            result = scan_line(record.text, state)
            pending.append((record, result))
            if config.log_propagation:
                logger.debug("line %d: %r -> %r", index, state, result.exit_state)
            state = result.exit_state
            index += 1
            if index >= must_scan_until and result.exit_state == record.exit_state:
                converged = True
                break

        for record, result in pending:
            record.tokens = result.tokens
            record.exit_state = result.exit_state

        if converged:
            logger.debug("fixed point after line %d (%d lines scanned)", index - 1, len(pending))
        else:
            logger.debug("propagated to end of document (%d lines scanned)", len(pending))

        acc = get_retokenize_accumulator()
        if acc is not None:
            acc.record_pass(len(pending), converged=converged)

        return frozenset(range(start, index))

    def replace_lines(self, start: int, end: int, new_lines: Sequence[str]) -> frozenset[int]:
        """Replace lines ``[start, end)`` with ``new_lines`` and re-tokenize.

        ``start == end`` inserts; an empty ``new_lines`` deletes. Entries of
        ``new_lines`` containing newlines are split into several lines. A
        document always keeps at least one (possibly empty) line.

        Returns:
            Indices (after the edit) of lines whose tokens were recomputed.

        Raises:
            EditRangeError: If the range is outside the document.
        """
        line_count = len(self._lines)
        if start < 0 or end < start or end > line_count:
            raise EditRangeError("invalid line range", start, end, line_count)

        texts = [part for line in new_lines for part in split_lines(line)]
        records = [LineRecord(text) for text in texts]
        if records:
            # The line after the splice was last scanned from this state
            records[-1].exit_state = self._entry_state(end)
        previous = self._lines
        self._lines = previous[:start] + records + previous[end:]
        if not self._lines:
            self._lines.append(LineRecord(""))
        try:
            return self.on_edit(range(start, start + len(texts)))
        except Exception:
            # on_edit commits nothing on failure; restoring the list undoes the splice
            self._lines = previous
            raise

    def set_line(self, index: int, text: str) -> frozenset[int]:
        """Replace the text of one line."""
        self._record(index)
        return self.replace_lines(index, index + 1, [text])

    def insert_lines(self, index: int, lines: Sequence[str]) -> frozenset[int]:
        """Insert ``lines`` before line ``index`` (``len(doc)`` appends)."""
        return self.replace_lines(index, index, lines)

    def delete_lines(self, start: int, end: int) -> frozenset[int]:
        """Delete lines ``[start, end)``."""
        return self.replace_lines(start, end, [])

    def apply_text_edit(
        self,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
        text: str,
    ) -> frozenset[int]:
        """Replace the text between two (line, column) positions.

        This is the shape of an editor change notification: the span from
        ``(start_line, start_column)`` to ``(end_line, end_column)`` is
        replaced by ``text``, which may contain newlines.

        Returns:
            Indices (after the edit) of lines whose tokens were recomputed.

        Raises:
            EditRangeError: If either position is outside the document or
                the end precedes the start.
        """
        first = self._record(start_line)
        last = self._record(end_line)
        if (end_line, end_column) < (start_line, start_column):
            raise EditRangeError("edit end precedes start", start_line, end_line, len(self))
        if not 0 <= start_column <= len(first.text):
            raise EditRangeError(f"column {start_column} outside line", start_line)
        if not 0 <= end_column <= len(last.text):
            raise EditRangeError(f"column {end_column} outside line", end_line)

        merged = first.text[:start_column] + text + last.text[end_column:]
        return self.replace_lines(start_line, end_line + 1, split_lines(merged))

    # =========================================================================
    # Consistency
    # =========================================================================

    def verify(self) -> None:
        """Re-scan the whole document and compare against the cache.

        Raises:
            InconsistentStateError: On the first line whose cached tokens or
                exit state differ from a fresh scan.
        """
        state = ROOT_STATE
        for index, record in enumerate(self._lines):
            result = scan_line(record.text, state)
            if result.exit_state != record.exit_state:
                raise InconsistentStateError(index)
            if result.tokens != record.tokens:
                raise InconsistentStateError(index, "cached tokens are stale")
            state = result.exit_state

    # =========================================================================
    # Internals
    # =========================================================================

    def _record(self, index: int) -> LineRecord:
        if not 0 <= index < len(self._lines):
            raise EditRangeError("line out of range", index, index + 1, len(self._lines))
        return self._lines[index]

    def _entry_state(self, index: int) -> LexerState:
        if index == 0:
            return ROOT_STATE
        state = self._lines[index - 1].exit_state
        return state if state is not None else ROOT_STATE
