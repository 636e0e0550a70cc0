"""
NameCraft MCP tools.

Each tool is a plain async function taking the FastMCP context first so it
can be registered in server.py and called directly from tests.
"""

from namecraft.tools.convert import convert_name
from namecraft.tools.options import list_naming_options
from namecraft.tools.shortcuts import shortcuts
from namecraft.tools.suggest import navigate, suggest_names

__all__ = [
    "suggest_names",
    "navigate",
    "list_naming_options",
    "convert_name",
    "shortcuts",
]
