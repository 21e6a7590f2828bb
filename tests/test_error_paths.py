"""Error-path and malformed input tests.

The scanner has no failure path: malformed DTS must still produce a full
set of tokens. Exceptions exist only for API misuse at the document and
registry seams.
"""

import pytest

from dtslex import TokenizedDocument, scan_line, tokenize
from dtslex.errors import (
    DtsLexError,
    EditRangeError,
    InconsistentStateError,
    UnknownLanguageError,
)
from dtslex.lexer import COMMENT_STATE, ROOT_STATE
from dtslex.tokens import ClassificationTag as Tag

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestErrorFormatting:
    def test_edit_range_message_only(self) -> None:
        err = EditRangeError("bad range")
        assert str(err) == "bad range"
        assert err.start is None

    def test_edit_range_with_bounds(self) -> None:
        err = EditRangeError("bad range", 3, 7, 5)
        assert str(err) == "bad range [3:7] of 5 lines"
        assert (err.start, err.end, err.line_count) == (3, 7, 5)

    def test_inconsistent_state(self) -> None:
        err = InconsistentStateError(12)
        assert err.lineno == 12
        assert "line 12" in str(err)

    def test_unknown_language(self) -> None:
        err = UnknownLanguageError("vhdl")
        assert err.language_id == "vhdl"
        assert "vhdl" in str(err)

    @pytest.mark.parametrize(
        "err",
        [EditRangeError("x"), InconsistentStateError(0), UnknownLanguageError("x")],
    )
    def test_all_are_dtslex_errors(self, err: Exception) -> None:
        assert isinstance(err, DtsLexError)


# =========================================================================
# Malformed input never fails
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "text",
        [
            '"never closed',
            "<1 2 3",
            "&",
            "&&&",
            "0x",
            "#",
            "/",
            "*/ */ */",
            "}}}}",
            "\x00\x01\x7f",
            "\u200b\ufeff",
            "a" * 5000,
        ],
    )
    def test_scans_fully(self, text: str) -> None:
        result = scan_line(text)
        assert sum(t.length for t in result.tokens) == len(text)

    def test_unterminated_comment_is_a_state_not_an_error(self) -> None:
        results = tokenize("/dts-v1/;\n/* forgot to close\n/ {\n};")
        assert [r.exit_state for r in results] == [
            ROOT_STATE,
            COMMENT_STATE,
            COMMENT_STATE,
            COMMENT_STATE,
        ]
        assert {t.scope for r in results[2:] for t in r.tokens} == {Tag.COMMENT}

    def test_unterminated_comment_in_document_resolves_when_closed(self) -> None:
        doc = TokenizedDocument("/* open\na;\nb;")
        assert doc.exit_state(2) == COMMENT_STATE
        doc.set_line(0, "/* open */")
        assert doc.exit_state(2) == ROOT_STATE

    def test_failed_edit_keeps_document(self) -> None:
        doc = TokenizedDocument("a;\nb;")
        with pytest.raises(EditRangeError):
            doc.delete_lines(1, 5)
        assert doc.lines == ["a;", "b;"]
        doc.verify()
