"""Unit tests for the codec tool implementations."""

import logging
from unittest.mock import patch

import pytest

from urlpath_mcp.metrics import get_metrics_collector
from urlpath_mcp.tools import decode_path, encode_path, normalize_url_path
from urlpath_mcp.tools.runner import run_codec_tool


class TestDecodeTool:
    """Tests for decode_path tool."""

    @pytest.mark.asyncio
    async def test_decode_success(self):
        """Test decode_path returns the decoded string."""
        result = await decode_path("/a%20b?x=1+2")
        assert result == {"status": "success", "result": "/a b?x=1 2"}

    @pytest.mark.asyncio
    async def test_decode_malformed_escape(self):
        """Test decode_path passes malformed escapes through."""
        result = await decode_path("100%")
        assert result["result"] == "100%"

    @pytest.mark.asyncio
    async def test_decode_missing_value(self):
        """Test decode_path rejects a missing value."""
        result = await decode_path(None)  # type: ignore[arg-type]
        assert result["status"] == "error"
        assert result["error_code"] == "validation_error"


class TestEncodeTool:
    """Tests for encode_path tool."""

    @pytest.mark.asyncio
    async def test_encode_success(self):
        """Test encode_path reports the result and OS family used."""
        result = await encode_path("jar:file:/a b.jar!/c.class", "posix")
        assert result == {
            "status": "success",
            "result": "jar:file:/a%20b.jar!/c.class",
            "os_family": "posix",
        }

    @pytest.mark.asyncio
    async def test_encode_windows_override(self):
        """Test os_family="windows" keeps the drive colon."""
        result = await encode_path("C:/x y", "windows")
        assert result["result"] == "C:/x%20y"
        assert result["os_family"] == "windows"

    @pytest.mark.asyncio
    async def test_encode_default_family_from_config(self, set_env_vars):
        """Test encode_path uses the configured OS family when not given."""
        set_env_vars(URLPATH_MCP_OS_FAMILY="windows")
        result = await encode_path("C:/x")
        assert result["result"] == "C:/x"
        assert result["os_family"] == "windows"

    @pytest.mark.asyncio
    async def test_encode_invalid_os_family(self):
        """Test encode_path rejects unknown OS families."""
        result = await encode_path("/x", "plan9")
        assert result["status"] == "error"
        assert result["error_code"] == "validation_error"
        assert "os_family" in result["message"]

    @pytest.mark.asyncio
    async def test_encode_too_long(self, set_env_vars):
        """Test encode_path enforces URLPATH_MCP_MAX_INPUT_LENGTH."""
        set_env_vars(URLPATH_MCP_MAX_INPUT_LENGTH="4")
        result = await encode_path("/abcd")
        assert result["status"] == "error"
        assert "too long" in result["message"]


class TestNormalizeTool:
    """Tests for normalize_url_path tool."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("value", "os_family", "expected"),
        [
            ("/usr/lib/foo.jar", "posix", "file:/usr/lib/foo.jar"),
            ("/a/b.jar/!c/d.class", "posix", "jar:file:/a/b.jar!/c/d.class"),
            ("C:/Users/x/y.jar", "windows", "file:/C:/Users/x/y.jar"),
            ("https://example.com/a b", "posix", "https://example.com/a%20b"),
        ],
    )
    async def test_normalize_success(self, value: str, os_family: str, expected: str):
        """Test normalize_url_path returns the canonical URL."""
        result = await normalize_url_path(value, os_family)
        assert result["status"] == "success"
        assert result["result"] == expected
        assert result["os_family"] == os_family

    @pytest.mark.asyncio
    async def test_normalize_non_string(self):
        """Test normalize_url_path rejects non-string input."""
        result = await normalize_url_path(123)  # type: ignore[arg-type]
        assert result["status"] == "error"
        assert "must be a string" in result["message"]


class TestRunCodecTool:
    """Tests for the shared tool runner."""

    @pytest.mark.asyncio
    async def test_records_success_metrics(self):
        """Test successful calls are counted without errors."""
        await encode_path("/a", "posix")
        await encode_path("/b", "posix")

        metrics = get_metrics_collector().get_operation_metrics("encode")
        assert metrics.count == 2
        assert metrics.errors == 0

    @pytest.mark.asyncio
    async def test_records_validation_failures(self):
        """Test validation failures are counted as errors."""
        await decode_path(None)  # type: ignore[arg-type]

        metrics = get_metrics_collector().get_operation_metrics("decode")
        assert metrics.count == 1
        assert metrics.errors == 1

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_execution_error(self):
        """Test exceptions from the transform are returned as execution_error."""

        def broken(text, context):
            raise RuntimeError("boom")

        result = await run_codec_tool("normalize", "/x", broken, os_family="posix")

        assert result["status"] == "error"
        assert result["error_code"] == "execution_error"
        assert "boom" in result["message"]
        assert get_metrics_collector().get_operation_metrics("normalize").errors == 1

    @pytest.mark.asyncio
    async def test_context_unaware_ignores_os_family(self):
        """Test context_aware=False skips os_family validation and reporting."""
        result = await run_codec_tool(
            "decode", "x", lambda text, context: text, os_family="bogus", context_aware=False
        )
        assert result == {"status": "success", "result": "x"}

    @pytest.mark.asyncio
    async def test_log_records_carry_operation(self, caplog):
        """Test log records of a call carry the operation name."""
        with caplog.at_level(logging.INFO, logger="urlpath_mcp"):
            await encode_path("/a", "posix")

        records = [r for r in caplog.records if r.name == "urlpath_mcp.tools.runner"]
        assert records
        assert all(getattr(r, "operation", None) == "encode" for r in records)

    @pytest.mark.asyncio
    async def test_request_id_reset_after_call(self):
        """Test the request id does not leak out of the call."""
        from urlpath_mcp.logging_config import request_id_var

        seen: list[str | None] = []

        def capture(text, context):
            seen.append(request_id_var.get())
            return text

        await run_codec_tool("encode", "/a", capture, os_family="posix")

        assert seen[0]
        assert request_id_var.get() is None

    @pytest.mark.asyncio
    async def test_transform_receives_context(self):
        """Test the transform receives the resolved PathContext."""
        with patch("urlpath_mcp.tools.encode.encode_path_impl", return_value="ok") as mock:
            result = await encode_path("/a", "windows")

        assert result["result"] == "ok"
        args = mock.call_args.args
        assert args[0] == "/a"
        assert args[1].is_windows is True
