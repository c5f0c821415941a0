"""Tests for logging configuration."""

import io
import logging
import sys

import pytest

from sbom.logging_config import GlobalIndent, logger, setup_logging, verbosity_to_level


class TestVerbosityToLevel:
    """Tests for verbosity_to_level."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_levels(self, verbosity: int, level: int) -> None:
        assert verbosity_to_level(verbosity) == level


class TestIndentLogger:
    """Tests for IndentLogger indentation."""

    def test_no_indent_at_top_level(self) -> None:
        assert logger.indent == ""

    def test_indent_inside_block(self) -> None:
        with logger.indent_block():
            assert logger.indent == "├──"
            with logger.indent_block():
                assert logger.indent == "│   ├──"
        assert logger.indent == ""

    def test_indent_restored_after_error(self) -> None:
        with pytest.raises(RuntimeError):
            with logger.indent_block():
                raise RuntimeError("boom")
        assert logger.indent == ""
        assert GlobalIndent._level == 0

    def test_loud_block_message_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sbom"):
            with logger.indent_block("Building SPDX sections", loud=True):
                logger.debug("hidden detail")
        assert "Building SPDX sections" in caplog.text
        assert "hidden detail" not in caplog.text

    def test_block_message_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sbom"):
            with logger.indent_block("Building SPDX Document Creation section"):
                pass
        assert "Document Creation" not in caplog.text

    def test_warning_carries_indent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sbom"):
            with logger.indent_block():
                logger.warning("unknown tag")
        assert caplog.records[-1].getMessage() == "├──unknown tag"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_single_handler(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", io.TextIOWrapper(io.BytesIO()))
        setup_logging(logging.DEBUG)
        setup_logging(logging.INFO)
        base_logger = logging.getLogger("sbom")
        assert len(base_logger.handlers) == 1
        assert base_logger.level == logging.INFO

    def test_repeated_setup_keeps_stderr_open(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stderr = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        monkeypatch.setattr(sys, "stderr", stderr)
        setup_logging(logging.DEBUG)
        setup_logging(logging.WARNING)

        with logger.indent_block():
            logger.warning("unknown tag")

        assert not stderr.closed
        assert logging.getLogger("sbom").handlers[0].stream is stderr
        output = stderr.buffer.getvalue().decode("utf-8")
        assert "WARNING ├──unknown tag" in output
