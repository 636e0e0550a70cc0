"""
NameCraft MCP Server - FastMCP implementation

Turns phrases (any language, with client-supplied English translations)
into ranked identifier candidates, drives the category drill-down, and
manages the five shortcut rules.

CRITICAL: This is an MCP server - NEVER use print() statements!
stdout/stderr are reserved for JSON-RPC protocol. Use logger instead.
"""

import os

from fastmcp import FastMCP

from namecraft.logging_config import setup_logging
from namecraft.tools import (
    convert_name,
    list_naming_options,
    navigate,
    shortcuts,
    suggest_names,
)

# Initialize logging FIRST (before any other operations)
logger = setup_logging()
logger.info("Starting NameCraft MCP Server initialization...")

INSTRUCTIONS = """\
Use suggest_names to get identifier candidates for a phrase. NameCraft does
not translate: pass English renderings of non-English phrases in
`translations`, best first. Continue with navigate (select / more / category
/ back / dismiss) until a name is selected. convert_name and shortcuts give
one-shot conversions without a session.
"""

mcp = FastMCP("NameCraft Naming Server", instructions=INSTRUCTIONS)

# output_schema=None keeps text results as raw strings instead of {"result": ...}
mcp.tool(output_schema=None)(suggest_names)        # Returns text/JSON (default: text)
mcp.tool(output_schema=None)(navigate)             # Returns text/JSON (default: text)
mcp.tool(output_schema=None)(list_naming_options)  # Returns text/JSON/TOON (default: text)
mcp.tool(output_schema=None)(convert_name)         # Returns the name as a plain string
mcp.tool(output_schema=None)(shortcuts)            # Returns text/JSON (default: text)

__all__ = [
    "mcp",
    "suggest_names",
    "navigate",
    "list_naming_options",
    "convert_name",
    "shortcuts",
]


def main():
    """
    Main entry point for the NameCraft MCP server (stdio transport).

    - UTF-8 enforced on stdout/stderr
    - BrokenPipeError handled gracefully (client disconnect)
    """
    from namecraft.stdio import harden_stdio

    harden_stdio()

    logger.info("🚀 Starting NameCraft MCP server (stdio)...")

    try:
        mcp.run(show_banner=False)
    except BrokenPipeError:
        import sys

        sys.stderr.write("Client disconnected. Shutting down.\n")
        sys.exit(0)


def main_http(host: str = None, port: int = None):
    """
    HTTP entry point; several clients can share one server and its sessions.

    Args:
        host: Host to bind to (default: 127.0.0.1, or NAMECRAFT_HOST env var)
        port: Port to listen on (default: 8766, or NAMECRAFT_PORT env var)
    """
    host = host or os.environ.get("NAMECRAFT_HOST", "127.0.0.1")
    port = port or int(os.environ.get("NAMECRAFT_PORT", "8766"))

    setup_logging(console=True)
    logger.info(f"🚀 Starting NameCraft MCP server (HTTP mode)")
    logger.info(f"📡 Listening on http://{host}:{port}/mcp")

    try:
        mcp.run(transport="http", host=host, port=port)
    except KeyboardInterrupt:
        logger.info("🛑 Shutting down NameCraft HTTP server...")


def main_http_cli():
    """
    CLI entry point with argument parsing for HTTP server.

    Usage:
        namecraft-server-http --host 0.0.0.0 --port 8766

    Or via environment variables:
        NAMECRAFT_HOST=0.0.0.0 NAMECRAFT_PORT=8766 namecraft-server-http
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="NameCraft MCP Server (HTTP mode) - allows multiple clients to connect"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: 127.0.0.1, or NAMECRAFT_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: 8766, or NAMECRAFT_PORT env var)",
    )
    args = parser.parse_args()
    main_http(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
