"""
Helpers shared by the NameCraft MCP tools: warning results for recoverable
engine errors and text rendering of option lists.
"""

import logging
from typing import Any, Iterable, Union

from namecraft.naming.errors import (
    AllInvalidError,
    EmptyInputError,
    NamingError,
    NoCandidatesError,
)
from namecraft.naming.models import NamingOption

logger = logging.getLogger("namecraft.tools")

# Errors the caller recovers from by re-prompting or typing a name manually.
# Anything else (unknown style/type ids, illegal navigation) propagates.
RECOVERABLE_ERRORS = (EmptyInputError, NoCandidatesError, AllInvalidError)

RETRY_HINTS = {
    EmptyInputError: "Provide a non-empty phrase.",
    NoCandidatesError: "No usable translations - retry the translation or pass translations explicitly.",
    AllInvalidError: "No candidate passed validation - try other translations or another style/type.",
}


def warning_result(error: NamingError, output_format: str) -> Union[str, dict[str, Any]]:
    hint = RETRY_HINTS.get(type(error), "")
    logger.warning(f"{type(error).__name__}: {error}")
    if output_format == "json":
        return {
            "status": "warning",
            "error": type(error).__name__,
            "message": str(error),
            "retryable": error.retryable,
            "hint": hint,
        }
    return f"⚠️ {error}\n{hint}".rstrip()


def format_option_lines(options: Iterable[NamingOption], numbered: bool = True) -> list[str]:
    """
    One line per option:

        1. userName  [smart_0] camelCase / normal
    """
    lines = []
    for index, option in enumerate(options, 1):
        marker = f"{index}. " if numbered else "- "
        lines.append(
            f"  {marker}{option.result}  [{option.id}] {option.style.style_id} / {option.type.type_id}"
        )
    return lines


def option_rows(options: Iterable[NamingOption], **extra: Any) -> list[dict[str, Any]]:
    """Flat primitive rows for TOON encoding."""
    return [
        {
            **extra,
            "id": option.id,
            "result": option.result,
            "style": option.style.style_id,
            "type": option.type.type_id,
        }
        for option in options
    ]
