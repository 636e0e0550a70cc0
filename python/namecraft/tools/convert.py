"""
MCP tool for one-shot conversion of a phrase to a (style, type) name.
"""

from typing import Any, Optional

from fastmcp import Context

from namecraft.naming.context import find_placeholder, replace_placeholder
from namecraft.naming.errors import EmptyInputError
from namecraft.naming.generator import build_option
from namecraft.naming.parsers import clean_text
from namecraft.naming.scoring import is_valid_option
from namecraft.naming.styles import get_style
from namecraft.naming.taxonomy import get_variable_type
from namecraft.tools.common import warning_result


async def convert_name(
    _ctx: Context,
    text: str,
    style: str = "camelCase",
    type: str = "normal",
    placeholder_text: Optional[str] = None,
    output_format: str = "text",
) -> Any:
    """
    Convert a phrase or identifier to a single style and variable type.

    Args:
        ctx: FastMCP context
        text: Phrase or identifier ("user name", "user_name", "UserName")
        style: camelCase | PascalCase | snake_case | _snake_case | CONSTANT_CASE | kebab-case
        type: Variable type id (normal, member, count, pointer, ...)
        placeholder_text: Optional code snippet; every whole-word `temp`
                          placeholder in it is replaced by the generated name
        output_format: "text" (default) or "json"

    Returns:
        The generated name (and the rewritten snippet in placeholder mode)

    Examples:
        >>> await convert_name(ctx, "user name", "camelCase", "member")
        'm_userName'
        >>> await convert_name(ctx, "total", placeholder_text="int temp = 0;")
        'int total = 0;'
    """
    resolved_style = get_style(style)
    resolved_type = get_variable_type(type)

    if not clean_text(text):
        return warning_result(EmptyInputError("Cannot convert an empty phrase"), output_format)

    option = build_option(text, resolved_style, resolved_type)
    valid = is_valid_option(option)

    placeholder = find_placeholder(placeholder_text) if placeholder_text else None
    rewritten = (
        replace_placeholder(placeholder_text, placeholder, option.result)
        if placeholder
        else None
    )

    if output_format == "json":
        return {
            "name": option.result,
            "style": resolved_style.style_id,
            "type": resolved_type.type_id,
            "valid": valid,
            "placeholder": placeholder,
            "replaced_text": rewritten,
        }

    if rewritten is not None:
        return rewritten
    if placeholder_text is not None:
        return f"{option.result}\n(no `temp` placeholder found)"
    if not valid:
        return f"{option.result}\n⚠️ fails {resolved_style.style_id} validation"
    return option.result
