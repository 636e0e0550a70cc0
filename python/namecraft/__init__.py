"""
NameCraft - MCP server for naming identifiers

Turns a phrase, written in any language and translated upstream, into
ranked identifier candidates across casing styles and variable-type
conventions (m_userName, pUserName, user_nameCount, ...).
"""

__version__ = "0.1.0"

# The engine lives in namecraft.naming and has no server dependencies.
# Importing namecraft.server starts logging, so it is not imported here.

__all__ = ["__version__"]
