"""
Logging configuration for the NameCraft MCP server.

CRITICAL: MCP servers MUST NOT log to stdout/stderr in stdio mode!
stdout is reserved for JSON-RPC messages.

All logs go to file: <NAMECRAFT_HOME>/logs/namecraft-YYYY-MM-DD.log
Console logging can be enabled for HTTP mode via console=True.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from namecraft.paths import get_log_dir


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get("NAMECRAFT_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Handler that flushes after every emit so errors show up immediately."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Optional[int] = None,
    backup_count: int = 30,
    console: bool = False,
) -> logging.Logger:
    """
    Set up file-based logging with daily rotation.

    Safe to call repeatedly; handlers are only added once.

    Args:
        log_dir: Directory for log files (default: <NAMECRAFT_HOME>/logs)
        level: Logging level (default: NAMECRAFT_LOG_LEVEL or INFO)
        backup_count: Number of daily files to keep
        console: If True, also log to stderr (HTTP mode only)

    Returns:
        The "namecraft" logger
    """
    if log_dir is None:
        log_dir = get_log_dir()
    if level is None:
        level = _level_from_env()

    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("namecraft")
    logger.setLevel(level)

    has_file_handler = any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler) for h in logger.handlers
    )
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in logger.handlers
    )

    if has_file_handler and (not console or has_console_handler):
        return logger

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not has_file_handler:
        log_file = log_dir / f"namecraft-{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info("=" * 60)
        logger.info("NameCraft MCP Server - Logging Initialized")
        logger.info(f"Log file: {log_file}")
        logger.info(f"Log level: {logging.getLevelName(level)}")
        logger.info("=" * 60)

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        logger.info("Console logging enabled (HTTP mode)")

    return logger
