"""Line scanner: drives the matcher across one line.

Consumes one line of text and an entry state; produces the line's tokens
and the state the next line starts in. Each iteration consumes at least
one character, so a line of n characters takes at most n iterations.

Thread Safety:
scan_line is a pure function. Scanner instances hold no mutable state.

"""

from __future__ import annotations

from dtslex.lexer.matcher import match
from dtslex.lexer.rules import Transition
from dtslex.lexer.state import ROOT_STATE, LexerState
from dtslex.tokens import LineTokens, Token


def scan_line(text: str, entry_state: LexerState = ROOT_STATE) -> LineTokens:
    """Tokenize one line.

    Args:
        text: Line content without its line terminator
        entry_state: Exit state of the previous line (ROOT for line 0)

    Returns:
        LineTokens whose tokens cover ``text`` exactly, in order, with no
        gaps, and whose exit_state seeds the next line.

    Complexity: O(len(text)) matcher calls at most.
    """
    tokens: list[Token] = []
    state = entry_state
    pos = 0
    text_len = len(text)
    while pos < text_len:
        result = match(state.top, text, pos)
        tokens.append(Token(pos, result.consumed_length, result.scope))
        if result.transition is Transition.PUSH and result.target is not None:
            state = state.push(result.target)
        elif result.transition is Transition.POP:
            state = state.pop()
        pos += result.consumed_length
    return LineTokens(tuple(tokens), state)


class Scanner:
    """Stateless scanner object for hosts that want a callable pair.

    Usage:
        >>> scanner = Scanner()
        >>> state = scanner.initial_state
        >>> for line in ["/* a", "b */ x;"]:
        ...     result = scanner.scan(line, state)
        ...     state = result.exit_state

    """

    __slots__ = ()

    @property
    def initial_state(self) -> LexerState:
        """Entry state of the first line of a document."""
        return ROOT_STATE

    def scan(self, text: str, state: LexerState | None = None) -> LineTokens:
        """Scan ``text`` starting in ``state`` (ROOT when omitted)."""
        return scan_line(text, ROOT_STATE if state is None else state)
