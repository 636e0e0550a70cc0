"""
MCP tool for the five shortcut slots: list, apply, save, reset.
"""

from typing import Any, Optional

from fastmcp import Context

from namecraft import server_state
from namecraft.naming.errors import EmptyInputError
from namecraft.naming.models import ShortcutRule
from namecraft.naming.parsers import clean_text
from namecraft.naming.shortcuts import apply_rule, resolve_bindings, validate_slot
from namecraft.naming.styles import get_style
from namecraft.naming.taxonomy import get_variable_type
from namecraft.tools.common import warning_result

SHORTCUT_ACTIONS = ("list", "apply", "save", "reset")


async def shortcuts(
    _ctx: Context,
    action: str = "list",
    slot: Optional[int] = None,
    text: Optional[str] = None,
    style: Optional[str] = None,
    type: str = "normal",
    name: Optional[str] = None,
    output_format: str = "text",
) -> Any:
    """
    Manage and use the five shortcut rules.

    Unbound slots fall back to the factory rules: 1 camelCase, 2 PascalCase,
    3 snake_case, 4 _snake_case, 5 CONSTANT_CASE.

    Actions:
        - list: show the effective rule of every slot
        - apply: convert `text` with the rule in `slot`
        - save: bind (`style`, `type`) to `slot`, replacing what was there
        - reset: unbind `slot` (or every slot when omitted)

    Args:
        ctx: FastMCP context
        action: list|apply|save|reset
        slot: Slot number 1-5
        text: Phrase to convert (apply)
        style: Style id (save)
        type: Variable type id (save, default "normal")
        name: Display name for the rule (save)
        output_format: "text" (default) or "json"

    Examples:
        >>> await shortcuts(ctx, "save", slot=3, style="snake_case", type="count")
        >>> await shortcuts(ctx, "apply", slot=3, text="user name")
        'user_nameCount'
    """
    if action not in SHORTCUT_ACTIONS:
        raise ValueError(f"Unknown action: {action}. Expected one of {', '.join(SHORTCUT_ACTIONS)}")

    store = server_state.get_rule_store()

    if action == "list":
        stored = store.read()
        effective = resolve_bindings(stored)
        if output_format == "json":
            return {
                "slots": [
                    {"slot": s, "default": stored.get(s) is None, **rule.to_dict()}
                    for s, rule in effective.items()
                ]
            }
        lines = ["Shortcuts:"]
        for s, rule in effective.items():
            marker = " (default)" if stored.get(s) is None else ""
            lines.append(f"  {s}. {rule.name}: {rule.style.style_id} / {rule.type.type_id}{marker}")
        return "\n".join(lines)

    if action == "reset":
        store.reset(slot)
        message = f"Slot {slot} reset to default" if slot is not None else "All slots reset to defaults"
        return {"status": "ok", "message": message} if output_format == "json" else f"✓ {message}"

    if slot is None:
        raise ValueError(f"slot is required for {action} action")
    validate_slot(slot)

    if action == "apply":
        if text is None or not clean_text(text):
            return warning_result(EmptyInputError("Nothing to convert"), output_format)
        rule = resolve_bindings(store.read())[slot]
        result = apply_rule(text, rule)
        if output_format == "json":
            return {"slot": slot, "name": result, "rule": rule.to_dict()}
        return result

    # save
    if not style:
        raise ValueError("style is required for save action")
    resolved_style = get_style(style)
    resolved_type = get_variable_type(type)
    rule = ShortcutRule(
        slot_id=slot,
        name=name or f"{resolved_type.display_name} - {resolved_style.display_name}",
        style=resolved_style,
        type=resolved_type,
        description=f"{resolved_type.description} ({resolved_style.example})",
    )
    store.write(slot, rule)
    if output_format == "json":
        return {"status": "ok", "slot": slot, **rule.to_dict()}
    return f"✓ Slot {slot} bound to {rule.name} ({resolved_style.style_id} / {resolved_type.type_id})"
