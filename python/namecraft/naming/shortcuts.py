"""
Shortcut rules: (style, type) pairs bound to five fixed slots.

Bindings are plain values. Functions here take a slot mapping and return a
new one; reading and writing storage belongs to the caller's rule store.
"""

import logging
from typing import Mapping, Optional, Protocol

from .constants import SHORTCUT_SLOTS
from .errors import InvalidSlotError, InvalidTransitionError
from .generator import generate_naming
from .models import NamingOption, ShortcutRule
from .navigator import NavigationSession
from .styles import NamingStyle
from .taxonomy import VariableType

logger = logging.getLogger("namecraft.shortcuts")

SlotBindings = dict[int, Optional[ShortcutRule]]

# Factory bindings: one plain style per slot
_DEFAULT_STYLES = (
    NamingStyle.CAMEL,
    NamingStyle.PASCAL,
    NamingStyle.SNAKE,
    NamingStyle.UNDERSCORE_SNAKE,
    NamingStyle.CONSTANT,
)


class RuleStore(Protocol):
    """Where slot bindings live between sessions."""

    def read(self) -> SlotBindings:
        ...

    def write(self, slot_id: int, rule: ShortcutRule) -> None:
        ...


def validate_slot(slot_id: int) -> int:
    """
    Raises:
        InvalidSlotError: If slot_id is not one of 1..5
    """
    if isinstance(slot_id, bool) or slot_id not in SHORTCUT_SLOTS:
        raise InvalidSlotError(
            f"Slot must be one of {list(SHORTCUT_SLOTS)}, got {slot_id!r}"
        )
    return slot_id


def empty_bindings() -> SlotBindings:
    return {slot: None for slot in SHORTCUT_SLOTS}


def default_bindings() -> dict[int, ShortcutRule]:
    """Slots 1-5: camelCase, PascalCase, snake_case, _snake_case, CONSTANT_CASE."""
    return {
        slot: ShortcutRule(
            slot_id=slot,
            name=style.style_id,
            style=style,
            type=VariableType.NORMAL,
            description=f"Convert to {style.style_id}",
        )
        for slot, style in zip(SHORTCUT_SLOTS, _DEFAULT_STYLES)
    }


def resolve_bindings(stored: Mapping[int, Optional[ShortcutRule]]) -> dict[int, ShortcutRule]:
    """Effective bindings: stored rules where present, factory defaults elsewhere."""
    resolved = default_bindings()
    for slot, rule in stored.items():
        if rule is not None and slot in resolved:
            resolved[slot] = rule
    return resolved


def rule_from_option(
    slot_id: int, option: NamingOption, name: Optional[str] = None
) -> ShortcutRule:
    """Turn a chosen option into a rule for `slot_id`."""
    validate_slot(slot_id)
    return ShortcutRule(
        slot_id=slot_id,
        name=name or option.name,
        style=option.style,
        type=option.type,
        description=option.description,
    )


def bind_rule(bindings: Mapping[int, Optional[ShortcutRule]], rule: ShortcutRule) -> SlotBindings:
    """
    Return new bindings with `rule` in its slot.

    An occupied slot is overwritten unconditionally.
    """
    validate_slot(rule.slot_id)
    updated = empty_bindings()
    updated.update({slot: r for slot, r in bindings.items() if slot in updated})
    previous = updated.get(rule.slot_id)
    if previous is not None:
        logger.info(f"Overwriting slot {rule.slot_id} ({previous.name!r} -> {rule.name!r})")
    updated[rule.slot_id] = rule
    return updated


def persist_selection(
    session: NavigationSession,
    slot_id: int,
    bindings: Mapping[int, Optional[ShortcutRule]],
    name: Optional[str] = None,
) -> tuple[ShortcutRule, SlotBindings]:
    """
    Bind the option a finished session selected into `slot_id`.

    Args:
        session: NavigationSession on its Terminal screen
        slot_id: Target slot (1-5)
        bindings: Current slot mapping
        name: Optional display name for the rule

    Returns:
        (new rule, new bindings)

    Raises:
        InvalidTransitionError: If the session did not complete with a selection
        InvalidSlotError: If the slot is out of range
    """
    option = session.selection
    if option is None:
        raise InvalidTransitionError("Only a completed selection can be saved as a rule")
    rule = rule_from_option(slot_id, option, name)
    return rule, bind_rule(bindings, rule)


def apply_rule(text: str, rule: ShortcutRule) -> str:
    """Render `text` with a rule's style and type."""
    return generate_naming(text, rule.style, rule.type)
