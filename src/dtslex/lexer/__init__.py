"""Finite-state line lexer for Device Tree Source.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── state.py             # StateName, LexerState (bounded state stack)
├── rules.py             # Per-state ordered rule tables
├── matcher.py           # First-match-wins rule selection, UNKNOWN fallback
└── scanner.py           # scan_line: one line + entry state -> tokens + exit state

Usage:
    >>> from dtslex.lexer import scan_line
    >>> result = scan_line("/dts-v1/;")
    >>> [t.scope.name for t in result.tokens]
    ['KEYWORD', 'DELIMITER']

"""

from dtslex.lexer.matcher import FALLBACK, Match, match
from dtslex.lexer.rules import COMMENT_RULES, ROOT_RULES, Rule, Transition, rules_for
from dtslex.lexer.scanner import Scanner, scan_line
from dtslex.lexer.state import COMMENT_STATE, ROOT_STATE, LexerState, StateName

__all__ = [
    "COMMENT_RULES",
    "COMMENT_STATE",
    "FALLBACK",
    "LexerState",
    "Match",
    "ROOT_RULES",
    "ROOT_STATE",
    "Rule",
    "Scanner",
    "StateName",
    "Transition",
    "match",
    "rules_for",
    "scan_line",
]
