"""
MCP tools for the interactive naming funnel (suggest -> navigate -> select).
"""

import logging
from typing import Any, Optional

from fastmcp import Context

from namecraft import server_state
from namecraft.naming.context import analyze_code_context
from namecraft.naming.navigator import (
    Back,
    Dismiss,
    NavigationSession,
    Screen,
    Select,
    SelectCategory,
    SelectMore,
    start_session,
    transition,
)
from namecraft.naming.generator import select_translations
from namecraft.naming.parsers import clean_text
from namecraft.naming.predictor import predict_variable_types
from namecraft.naming.shortcuts import persist_selection, resolve_bindings, validate_slot
from namecraft.naming.translation import candidates_from_options, candidates_from_strings
from namecraft.tools.common import RECOVERABLE_ERRORS, format_option_lines, warning_result

logger = logging.getLogger("namecraft.tools")

NAVIGATE_ACTIONS = ("select", "more", "category", "back", "dismiss")


async def suggest_names(
    _ctx: Context,
    phrase: str,
    translations: Optional[list[str]] = None,
    translation_options: Optional[list[dict[str, str]]] = None,
    context: Optional[str] = None,
    line: Optional[str] = None,
    output_format: str = "text",
) -> Any:
    """
    Suggest identifiers for a phrase and open a selection session.

    The phrase may be in any language, but the engine does not translate:
    pass English renderings in `translations` (best first) when the phrase
    is not already English. Translations are remembered per phrase; without
    them the remembered ones are reused, or the phrase itself.

    Args:
        ctx: FastMCP context
        phrase: What the identifier should mean ("user count", "用户数量", "userCount")
        translations: Ranked English renderings of the phrase. An empty list
                      means the translator had no answer.
        translation_options: Ranked structured renderings, each a mapping of
                             camelCase / PascalCase / snake_case to a name
        context: File name or extension the identifier is for ("src/user.h")
        line: Current source line, used for the language/declaration hint
        output_format: "text" (default) or "json"

    Returns:
        Session id plus up to 5 recommendations. Continue with `navigate`.

    Examples:
        >>> await suggest_names(ctx, "用户数量", translations=["userCount", "user number"], context="file.h")
        >>> await suggest_names(ctx, "total items")
    """
    try:
        if translations is not None or translation_options is not None:
            candidates = candidates_from_strings(translations or [])
            candidates += candidates_from_options(translation_options or [])
            server_state.translator.remember(phrase.strip(), candidates)
        else:
            candidates = server_state.translator.translate(phrase.strip())
        session = start_session(phrase, candidates, context)
    except RECOVERABLE_ERRORS as e:
        return warning_result(e, output_format)

    session_id = server_state.open_session(session)

    top_text = clean_text(select_translations(candidates)[0].text)
    predicted = [t.type_id for t in predict_variable_types(top_text, context)]
    code_context = analyze_code_context(context, line or "")

    result = {
        "session_id": session_id,
        "input": phrase,
        "screen": Screen.INITIAL.value,
        "predicted_types": predicted,
        "language": code_context.language,
        "declaration_kind": code_context.declaration_kind,
        "recommendations": [option.to_dict() for option in session.recommendations],
    }
    if output_format == "json":
        return result
    return _format_suggestions_as_text(result, session)


def _event_for(action: str, option_id: Optional[str], category: Optional[str]):
    if action == "select":
        if not option_id:
            raise ValueError("option_id is required for select action")
        return Select(option_id)
    if action == "more":
        return SelectMore()
    if action == "category":
        if not category:
            raise ValueError("category is required for category action")
        return SelectCategory(category)
    if action == "back":
        return Back()
    if action == "dismiss":
        return Dismiss()
    raise ValueError(f"Unknown action: {action}. Expected one of {', '.join(NAVIGATE_ACTIONS)}")


async def navigate(
    _ctx: Context,
    session_id: str,
    action: str,
    option_id: Optional[str] = None,
    category: Optional[str] = None,
    slot: Optional[int] = None,
    rule_name: Optional[str] = None,
    output_format: str = "text",
) -> Any:
    """
    Move through an open naming session.

    Actions:
        - select: choose `option_id` from the current screen (finishes the session)
        - more: open the full category grid
        - category: open `category` from the grid menu
        - back: return to the previous screen
        - dismiss: abandon the session (nothing is saved)

    Args:
        ctx: FastMCP context
        session_id: Id returned by suggest_names
        action: select|more|category|back|dismiss
        option_id: Option to select (required for select)
        category: Category to open (required for category)
        slot: With select, also save the chosen (style, type) as shortcut 1-5.
              An occupied slot is overwritten.
        rule_name: Optional display name for the saved shortcut
        output_format: "text" (default) or "json"

    Returns:
        The next screen, or the chosen identifier once selected
    """
    if slot is not None:
        if action != "select":
            raise ValueError(f"slot is only accepted with select action, not {action}")
        validate_slot(slot)

    session = server_state.get_session(session_id)
    updated = transition(session, _event_for(action, option_id, category))

    if not updated.is_finished:
        server_state.update_session(session_id, updated)
        result = _screen_result(session_id, updated)
        if output_format == "json":
            return result
        return _format_screen_as_text(result, updated)

    server_state.close_session(session_id)

    if updated.current.screen is Screen.CANCELLED:
        if output_format == "json":
            return {"session_id": session_id, "status": "cancelled"}
        return "Selection cancelled. Nothing was changed."

    option = updated.selection
    store = server_state.get_rule_store()
    bindings = store.read()
    saved = None
    if slot is not None:
        rule, bindings = persist_selection(updated, slot, bindings, rule_name)
        store.write(slot, rule)
        saved = {"slot": slot, **rule.to_dict()}

    result = {
        "session_id": session_id,
        "status": "selected",
        "name": option.result,
        "option": option.to_dict(),
        "saved_rule": saved,
        "shortcuts": {
            str(s): r.name for s, r in resolve_bindings(bindings).items()
        },
    }
    if output_format == "json":
        return result

    lines = [f"✓ Selected {option.result} ({option.style.style_id} / {option.type.type_id})"]
    if saved:
        lines.append(f"Saved as shortcut {slot}: {saved['name']}")
    else:
        lines.append("Save this rule with navigate(..., slot=1-5) next time, or shortcuts(action=\"save\").")
    return "\n".join(lines)


def _screen_result(session_id: str, session: NavigationSession) -> dict[str, Any]:
    state = session.current
    result: dict[str, Any] = {"session_id": session_id, "screen": state.screen.value}
    if state.screen is Screen.CATEGORY_MENU:
        result["categories"] = {
            name: len(options) for name, options in session.grid.categories.items()
        }
    else:
        result["category"] = state.category
        result["options"] = [option.to_dict() for option in session.visible_options()]
    return result


def _format_suggestions_as_text(result: dict[str, Any], session: NavigationSession) -> str:
    count = len(session.recommendations)
    output = [
        f"{count} {'suggestion' if count == 1 else 'suggestions'} for \"{result['input']}\" "
        f"(session {result['session_id']}, likely type: {result['predicted_types'][0]}):",
        *format_option_lines(session.recommendations),
        "",
        "Next: navigate(session_id, \"select\", option_id=...) or navigate(session_id, \"more\")",
    ]
    return "\n".join(output)


def _format_screen_as_text(result: dict[str, Any], session: NavigationSession) -> str:
    screen = session.current.screen
    if screen is Screen.CATEGORY_MENU:
        output = ["Categories:"]
        output.extend(f"  - {name} ({count} options)" for name, count in result["categories"].items())
        output.append("")
        output.append("Next: navigate(session_id, \"category\", category=...) or \"back\"")
        return "\n".join(output)

    title = "Suggestions" if screen is Screen.INITIAL else f"Category {session.current.category}"
    output = [f"{title}:", *format_option_lines(session.visible_options())]
    return "\n".join(output)
