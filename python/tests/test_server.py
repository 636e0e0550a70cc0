"""
Tests for server wiring, logging setup and stdio hardening.
"""

import io
import logging
import sys
from unittest.mock import patch


class TestServerModule:
    def test_server_exposes_tools(self, namecraft_home):
        from namecraft import server

        assert server.mcp.name == "NameCraft Naming Server"
        for name in ("suggest_names", "navigate", "list_naming_options", "convert_name", "shortcuts"):
            assert name in server.__all__
            assert callable(getattr(server, name))

    def test_http_cli_passes_arguments(self, namecraft_home):
        from namecraft import server

        with patch.object(sys, "argv", ["namecraft-server-http", "--host", "0.0.0.0", "--port", "9000"]):
            with patch.object(server, "main_http") as main_http:
                server.main_http_cli()

        main_http.assert_called_once_with(host="0.0.0.0", port=9000)

    def test_http_reads_env_defaults(self, namecraft_home, monkeypatch):
        from namecraft import server

        monkeypatch.setenv("NAMECRAFT_HOST", "10.0.0.1")
        monkeypatch.setenv("NAMECRAFT_PORT", "9100")
        with patch.object(server, "setup_logging"), patch.object(server.mcp, "run") as run:
            server.main_http()

        run.assert_called_once_with(transport="http", host="10.0.0.1", port=9100)


class TestLoggingConfig:
    def test_log_file_under_namecraft_home(self, namecraft_home, monkeypatch):
        from namecraft.logging_config import setup_logging

        # Start from a bare logger; the server import may have configured it already
        monkeypatch.setattr(logging.getLogger("namecraft"), "handlers", [])

        logger = setup_logging()
        logging.getLogger("namecraft.test").info("hello")

        log_files = list((namecraft_home / "logs").glob("namecraft-*.log"))
        assert logger.name == "namecraft"
        assert len(log_files) == 1
        assert "hello" in log_files[0].read_text(encoding="utf-8")

        setup_logging()
        assert len(logger.handlers) == 1

        for handler in logger.handlers:
            handler.close()

    def test_level_from_env(self, monkeypatch):
        from namecraft.logging_config import _level_from_env

        monkeypatch.setenv("NAMECRAFT_LOG_LEVEL", "debug")
        assert _level_from_env() == logging.DEBUG

        monkeypatch.setenv("NAMECRAFT_LOG_LEVEL", "chatty")
        assert _level_from_env() == logging.INFO


class TestStdio:
    def test_wraps_non_utf8_streams(self, monkeypatch):
        from namecraft.stdio import harden_stdio

        latin = io.TextIOWrapper(io.BytesIO(), encoding="latin-1")
        monkeypatch.setattr(sys, "stdout", latin)
        monkeypatch.setattr(sys, "stderr", latin)

        harden_stdio()

        assert sys.stdout.encoding == "utf-8"
        assert sys.stderr.encoding == "utf-8"

    def test_keeps_utf8_streams(self, monkeypatch):
        from namecraft.stdio import harden_stdio

        stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        monkeypatch.setattr(sys, "stdout", stream)
        monkeypatch.setattr(sys, "stderr", stream)

        harden_stdio()

        assert sys.stdout is stream
