"""
MCP tool listing the full (style x type) option grid for a phrase.
"""

from typing import Any, Optional

from fastmcp import Context

from namecraft.naming.generator import generate_all_options
from namecraft.naming.scoring import is_valid_option
from namecraft.toon_utils import render_result
from namecraft.tools.common import RECOVERABLE_ERRORS, option_rows, warning_result


async def list_naming_options(
    _ctx: Context,
    phrase: str,
    styles: Optional[list[str]] = None,
    output_format: str = "text",
) -> Any:
    """
    List every naming option for a phrase, grouped by category.

    One option per (type, style) pair: 24 variable types times the selected
    styles. Options failing validation are still listed and flagged.

    Args:
        ctx: FastMCP context
        phrase: English phrase or identifier ("user name", "userName")
        styles: Style ids to include (default: all). Unknown ids raise.
        output_format: "text" (default), "json", "toon", or "auto"
                       (TOON for large grids)

    Returns:
        Options grouped by category (basic, scope, purpose, data-type, semantic)
    """
    try:
        grid = generate_all_options(phrase, styles)
    except RECOVERABLE_ERRORS as e:
        return warning_result(e, "json" if output_format == "json" else "text")

    invalid = {option.id for option in grid if not is_valid_option(option)}

    json_data = grid.to_dict()
    json_data["phrase"] = phrase
    json_data["total"] = len(grid)
    json_data["invalid"] = sorted(invalid)

    toon_rows = []
    for category, group in grid.categories.items():
        for row in option_rows(group, category=category):
            row["valid"] = row["id"] not in invalid
            toon_rows.append(row)

    def format_text(data: dict[str, Any]) -> str:
        output = [f"{data['total']} naming options for \"{phrase}\":"]
        for category, group in grid.categories.items():
            output.append("")
            output.append(f"{category}:")
            for option in group:
                flag = "  (invalid)" if option.id in invalid else ""
                output.append(f"  {option.result}  [{option.id}]{flag}")
        return "\n".join(output)

    return render_result(
        json_data,
        output_format,
        format_text,
        "list_naming_options",
        toon_data=toon_rows,
        result_count=len(toon_rows),
    )
