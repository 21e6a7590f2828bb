"""Pattern matcher: picks the winning rule at a scan position."""

from __future__ import annotations

from typing import NamedTuple

from dtslex.lexer.rules import Rule, Transition, rules_for
from dtslex.lexer.state import StateName
from dtslex.tokens import ClassificationTag


class Match(NamedTuple):
    """Outcome of matching at one position.

    ``rule`` is None for the single-character UNKNOWN fallback.
    """

    consumed_length: int
    scope: ClassificationTag
    transition: Transition = Transition.NONE
    target: StateName | None = None
    rule: Rule | None = None


FALLBACK = Match(1, ClassificationTag.UNKNOWN)


def match(state: StateName, text: str, pos: int = 0) -> Match:
    """Find the highest-priority rule matching at ``text[pos:]``.

    Patterns are applied with ``Pattern.match(text, pos)``: anchored at
    ``pos`` exactly as if matched against the remaining slice, while word
    boundaries still see the character before ``pos``. Zero-length matches
    never win.

    Args:
        state: Active lexer state
        text: Full line text
        pos: Scan position, must be < len(text)

    Returns:
        The winning Match, or FALLBACK (one UNKNOWN character) when no rule
        matches. consumed_length is always >= 1.
    """
    for rule in rules_for(state):
        m = rule.pattern.match(text, pos)
        if m is not None and m.end() > pos:
            return Match(m.end() - pos, rule.scope, rule.transition, rule.target, rule)
    return FALLBACK
