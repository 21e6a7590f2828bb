"""Lexer states carried across line boundaries.

The grammar has two states: ROOT (between constructs) and COMMENT (inside
a block comment). The active state is the top of a small stack whose base
is always ROOT. Comments do not nest, so the stack never grows past two.

Thread Safety:
LexerState is frozen and hashable; it is shared between adjacent line
records as the exit state of one line and the entry state of the next.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class StateName(Enum):
    """Grammar contexts.

    - ROOT: Default context, every construct may start here
    - COMMENT: Inside a /* ... */ block comment

    """

    ROOT = auto()
    COMMENT = auto()


@dataclass(frozen=True, slots=True)
class LexerState:
    """Stack of active grammar contexts.

    Value equality is what the incremental driver compares to detect that
    propagation has reached a fixed point.

    Attributes:
        stack: States from bottom to top; the bottom is always ROOT

    """

    stack: tuple[StateName, ...] = (StateName.ROOT,)

    @property
    def top(self) -> StateName:
        """The active state consulted by the matcher."""
        return self.stack[-1]

    @property
    def depth(self) -> int:
        return len(self.stack)

    def push(self, name: StateName) -> LexerState:
        """Return a new state with ``name`` on top."""
        return LexerState(self.stack + (name,))

    def pop(self) -> LexerState:
        """Return a new state with the top removed.

        ROOT is never popped: popping a ROOT-only state returns it unchanged.
        """
        if len(self.stack) <= 1:
            return self
        return LexerState(self.stack[:-1])

    def __repr__(self) -> str:
        return f"LexerState({'/'.join(name.name for name in self.stack)})"


ROOT_STATE = LexerState((StateName.ROOT,))
COMMENT_STATE = ROOT_STATE.push(StateName.COMMENT)
