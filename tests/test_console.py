"""Unit tests for the console logger."""

from __future__ import annotations

import io
from datetime import datetime

import pytest

from edgemint.console import DEFAULT_STYLE, LEVEL_STYLES, ConsoleLogger, format_error, level_style
from edgemint.request import RequestError


FIXED = datetime(2026, 10, 18, 12, 34, 56)


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def logger(out: io.StringIO) -> ConsoleLogger:
    return ConsoleLogger(verbose=True, file=out, clock=lambda: FIXED)


class TestLevels:
    def test_line_layout(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        logger.info("Hello")
        assert out.getvalue() == "◆ LayerEdge Auto Bot [12:34:56] [INFO] Hello\n"

    @pytest.mark.parametrize("level", ["info", "warn", "error", "success", "debug"])
    def test_level_tag(self, logger: ConsoleLogger, out: io.StringIO, level: str) -> None:
        getattr(logger, level)("msg")
        assert f"[{level.upper()}] msg" in out.getvalue()

    def test_value_appended(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        logger.success("Transaction confirmed!", "0xabc")
        assert out.getvalue().rstrip("\n").endswith("Transaction confirmed! 0xabc")

    def test_dict_value_is_json(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        logger.info("Result:", {"ok": True})
        assert 'Result: {"ok": true}' in out.getvalue()

    def test_unknown_level_uses_default_style(self) -> None:
        assert level_style("trace") == DEFAULT_STYLE
        assert level_style("info") == LEVEL_STYLES["info"]

    def test_style_table_order(self) -> None:
        assert list(LEVEL_STYLES) == ["info", "warn", "error", "success", "debug", "verbose"]


class TestVerbose:
    def test_verbose_emitted_when_enabled(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        logger.verbose("Attempting request (1/30)")
        assert "[VERBOSE] Attempting request (1/30)" in out.getvalue()

    def test_verbose_suppressed_when_disabled(self, out: io.StringIO) -> None:
        quiet = ConsoleLogger(verbose=False, file=out, clock=lambda: FIXED)
        quiet.verbose("hidden")
        assert out.getvalue() == ""

    def test_error_details_only_when_verbose(self, out: io.StringIO) -> None:
        err = RequestError("Request failed with status code 500", status=500, url="https://x.test")
        quiet = ConsoleLogger(verbose=False, file=out, clock=lambda: FIXED)
        quiet.error("Server Error (500)", "Attempt 1/30", err)
        assert "Status:" not in out.getvalue()
        assert "Server Error (500)" in out.getvalue()


class TestFormatError:
    def test_none(self) -> None:
        assert format_error(None) == ""

    def test_plain_exception(self) -> None:
        assert format_error(ValueError("bad key")) == "bad key"

    def test_request_error_details(self) -> None:
        err = RequestError(
            "Request failed with status code 500",
            status=500,
            reason="Internal Server Error",
            url="https://api.test/claim",
            method="post",
            response_data={"error": "boom"},
            headers={"Origin": "https://layeredge.io"},
        )
        text = format_error(err)
        assert text.startswith("Request failed with status code 500")
        assert "Status: 500" in text
        assert "Status Text: Internal Server Error" in text
        assert "URL: https://api.test/claim" in text
        assert "Method: POST" in text
        assert '"error": "boom"' in text
        assert '"Origin": "https://layeredge.io"' in text

    def test_missing_fields_render_na(self) -> None:
        text = format_error(RequestError("ConnectError: refused"))
        assert "Status: N/A" in text
        assert "Method: N/A" in text

    def test_logged_error_includes_details(self, logger: ConsoleLogger, out: io.StringIO) -> None:
        logger.error("Max retries reached", "", RequestError("boom", status=502))
        lines = out.getvalue().splitlines()
        assert "[ERROR] Max retries reached" in lines[0]
        assert lines[1] == "boom"
        assert "Status: 502" in out.getvalue()


class TestProgress:
    @pytest.mark.parametrize(
        "status,marker",
        [("success", "✔"), ("failed", "✘"), ("pending", "➤"), ("anything", "➤")],
    )
    def test_markers(self, logger: ConsoleLogger, out: io.StringIO, status: str, marker: str) -> None:
        logger.progress("0xabc", "Minting SBT", status)
        assert out.getvalue() == f"◆ LayerEdge Auto Bot [12:34:56] [PROGRESS] {marker} 0xabc - Minting SBT\n"
