"""
Output format selection for MCP tools.

Tools build one structured result and pick the rendering here:
- "text": lean human-readable lines (default)
- "json": the structured result as-is
- "toon": TOON encoding of a flat, primitive-only view (fewer tokens)
- "auto": TOON once the result is large, JSON otherwise
"""

import logging
from typing import Any, Callable, Optional, Union

logger = logging.getLogger("namecraft.tools")

# Grid results switch to TOON in auto mode at this many rows
AUTO_TOON_THRESHOLD = 20


def render_result(
    json_data: Any,
    output_format: Optional[str],
    text_formatter: Callable[[Any], str],
    tool_name: str,
    toon_data: Any = None,
    result_count: int = 0,
    auto_threshold: int = AUTO_TOON_THRESHOLD,
) -> Union[str, Any]:
    """
    Render a tool result in the requested format.

    Args:
        json_data: Full structured result
        output_format: "text", "json", "toon" or "auto" (None means "text")
        text_formatter: Function(json_data) -> str for text mode
        tool_name: Tool name for log messages
        toon_data: Flat rows for TOON mode (default: json_data)
        result_count: Number of rows, for auto mode
        auto_threshold: Minimum rows for auto -> TOON

    Returns:
        str for text/TOON, the structured data for JSON. A failed TOON
        encoding falls back to JSON.
    """
    output_format = output_format or "text"

    if output_format == "text":
        return text_formatter(json_data)

    if output_format == "toon" or (output_format == "auto" and result_count >= auto_threshold):
        return _encode_toon(toon_data if toon_data is not None else json_data, json_data, tool_name)

    if output_format not in ("json", "auto"):
        raise ValueError(f"Unknown output_format: {output_format}")

    return json_data


def _encode_toon(toon_data: Any, fallback: Any, tool_name: str) -> Union[str, Any]:
    from toon_format import encode as toon_encode

    try:
        return toon_encode(toon_data)
    except Exception as e:
        logger.warning(f"{tool_name} TOON encoding failed, falling back to JSON: {e}")
        return fallback
