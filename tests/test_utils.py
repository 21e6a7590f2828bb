"""Tests for dtslex utility modules."""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from dtslex.utils.logger import get_logger

        assert get_logger("mymodule").name == "dtslex.mymodule"

    def test_keeps_package_names(self) -> None:
        from dtslex.utils import get_logger

        assert get_logger("dtslex").name == "dtslex"
        assert get_logger("dtslex.document").name == "dtslex.document"

    def test_document_logs_passes(self, caplog) -> None:
        import logging

        from dtslex import TokenizedDocument

        doc = TokenizedDocument("a;\nb;\nc;")
        with caplog.at_level(logging.DEBUG, logger="dtslex.document"):
            doc.set_line(1, "bb;")
        messages = [r.getMessage() for r in caplog.records]
        assert "re-tokenizing from line 1 (1 changed)" in messages
        assert "fixed point after line 1 (1 lines scanned)" in messages
