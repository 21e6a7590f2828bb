"""Per-state rule tables for the DTS grammar.

Each state owns an ordered tuple of rules. Order is priority: the matcher
takes the first rule whose pattern matches a non-empty prefix at the scan
position. Directives and keywords sit above the generic identifier rule,
which would otherwise claim every word.

Patterns are compiled once at import and applied with ``Pattern.match``,
so they are anchored at the scan position and never search ahead.

Thread Safety:
The tables are module-level tuples of frozen Rule objects, never mutated.

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from dtslex.lexer.state import StateName
from dtslex.tokens import ClassificationTag

DTS_DIRECTIVES: tuple[str, ...] = (
    "#include",
    "#address-cells",
    "#size-cells",
    "#compatible",
    "#interrupt-cells",
)

DTS_KEYWORDS: tuple[str, ...] = (
    "/dts-v1/",
    "/include/",
    "true",
    "false",
)


class Transition(Enum):
    """State change applied after a rule's token is emitted."""

    NONE = auto()
    PUSH = auto()
    POP = auto()


@dataclass(frozen=True, slots=True)
class Rule:
    """One entry of a rule table.

    Attributes:
        name: Rule kind, e.g. "block-comment-open"
        pattern: Compiled pattern matched at the scan position
        scope: Classification of the matched text
        transition: State change after the match
        target: State pushed when transition is PUSH

    """

    name: str
    pattern: re.Pattern[str]
    scope: ClassificationTag
    transition: Transition = Transition.NONE
    target: StateName | None = None


def _rule(
    name: str,
    pattern: str | re.Pattern[str],
    scope: ClassificationTag,
    transition: Transition = Transition.NONE,
    target: StateName | None = None,
) -> Rule:
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.ASCII)
    return Rule(name, pattern, scope, transition, target)


def word_set_pattern(words: Iterable[str]) -> re.Pattern[str]:
    """Compile an alternation matching any of ``words`` as a whole word.

    Metacharacters are escaped. A word that starts with a word character
    must not follow one, and a word that ends with a word character must
    not be followed by a word character or ``-`` (so ``#size-cells`` does
    not match inside ``#size-cells-x``). Longer words are tried first.

    Args:
        words: Literal words, may contain punctuation such as ``/`` or ``#``

    Returns:
        Compiled ASCII pattern.
    """
    alternatives = []
    for word in sorted(words, key=len, reverse=True):
        piece = re.escape(word)
        if _is_word_char(word[0]):
            piece = r"(?<![\w-])" + piece
        if _is_word_char(word[-1]):
            piece += r"(?![\w-])"
        alternatives.append(piece)
    return re.compile("|".join(alternatives), re.ASCII)


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


ROOT_RULES: tuple[Rule, ...] = (
    _rule("line-comment", r"//.*", ClassificationTag.COMMENT),
    _rule(
        "block-comment-open",
        r"/\*",
        ClassificationTag.COMMENT,
        Transition.PUSH,
        StateName.COMMENT,
    ),
    _rule("directive", word_set_pattern(DTS_DIRECTIVES), ClassificationTag.DIRECTIVE),
    _rule("keyword", word_set_pattern(DTS_KEYWORDS), ClassificationTag.KEYWORD),
    _rule("string", r'"(?:[^"\\]|\\.)*"', ClassificationTag.STRING),
    _rule("number-hex", r"\b0x[0-9a-fA-F]+\b", ClassificationTag.NUMBER_HEX),
    _rule("number-decimal", r"\b[0-9]+\b", ClassificationTag.NUMBER_DECIMAL),
    _rule("label-reference", r"&[a-zA-Z_]\w*", ClassificationTag.LABEL_REFERENCE),
    # Trailing digits and dashes stay part of the name (cpu-0, uart1)
    _rule("identifier", r"[a-zA-Z_][\w-]*", ClassificationTag.IDENTIFIER),
    _rule("angle-value", r"<[^>]*>", ClassificationTag.ANGLE_VALUE),
    _rule("delimiter", r"[=;,]", ClassificationTag.DELIMITER),
    _rule("bracket-open", r"[{(\[]", ClassificationTag.BRACKET_OPEN),
    _rule("bracket-close", r"[})\]]", ClassificationTag.BRACKET_CLOSE),
)

COMMENT_RULES: tuple[Rule, ...] = (
    _rule("comment-body", r"[^*]+", ClassificationTag.COMMENT),
    _rule("block-comment-close", r"\*/", ClassificationTag.COMMENT, Transition.POP),
    _rule("comment-star", r"[/*]", ClassificationTag.COMMENT),
)

_TABLES: dict[StateName, tuple[Rule, ...]] = {
    StateName.ROOT: ROOT_RULES,
    StateName.COMMENT: COMMENT_RULES,
}


def rules_for(state: StateName) -> tuple[Rule, ...]:
    """Ordered rules for ``state``, highest priority first."""
    return _TABLES[state]
