"""
Stdio setup for the JSON-RPC transport.

Phrases arrive in any script (CJK, Cyrillic, ...), so both streams must be
UTF-8 regardless of the platform default. Nothing but protocol messages may
be written to stdout.
"""

import io
import os
import sys


def _as_utf8(stream):
    if not hasattr(stream, "buffer") or (stream.encoding or "").lower() == "utf-8":
        return stream
    return io.TextIOWrapper(
        stream.buffer,
        encoding="utf-8",
        errors="backslashreplace",
        line_buffering=stream.line_buffering,
    )


def harden_stdio() -> None:
    """Force UTF-8 on stdout/stderr and for child processes. Call before mcp.run()."""
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")
    os.environ.setdefault("PYTHONUTF8", "1")
    sys.stdout = _as_utf8(sys.stdout)
    sys.stderr = _as_utf8(sys.stderr)
