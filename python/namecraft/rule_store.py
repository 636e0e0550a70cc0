"""
File-backed shortcut rule store.

Bindings are kept as a small YAML document so they stay human-editable and
produce clean git diffs:

    slots:
      1:
        name: camelCase
        style: camelCase
        type: normal
        description: Convert to camelCase
      3:
        name: Counter - underscore
        style: snake_case
        type: count
        description: Counter variable (user_nameCount)
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from namecraft.naming.errors import InvalidSlotError, NamingError
from namecraft.naming.models import ShortcutRule
from namecraft.naming.shortcuts import SlotBindings, empty_bindings, validate_slot
from namecraft.paths import get_shortcuts_path

logger = logging.getLogger("namecraft.shortcuts")


class YamlRuleStore:
    """Reads and writes slot bindings in a YAML file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path if path is not None else get_shortcuts_path()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid shortcuts file format: {self.path}")
        return data

    def _dump(self, slots: dict[int, dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = yaml.dump(
            {"slots": slots}, default_flow_style=False, sort_keys=True, allow_unicode=True
        )
        self.path.write_text(document, encoding="utf-8")

    def _raw_slots(self) -> dict[int, dict[str, Any]]:
        raw = self._load().get("slots") or {}
        slots: dict[int, dict[str, Any]] = {}
        for key, value in raw.items():
            try:
                slot = validate_slot(int(key))
            except (TypeError, ValueError):
                logger.warning(f"Ignoring shortcut entry with bad slot {key!r} in {self.path}")
                continue
            if isinstance(value, dict):
                slots[slot] = value
        return slots

    def read(self) -> SlotBindings:
        """
        Current bindings, one entry per slot (None where unbound).

        Entries naming an unknown style or type are skipped with a warning.
        """
        bindings = empty_bindings()
        for slot, value in self._raw_slots().items():
            try:
                bindings[slot] = ShortcutRule.from_dict(slot, value)
            except (NamingError, KeyError) as e:
                logger.warning(f"Ignoring shortcut slot {slot}: {e}")
        return bindings

    def write(self, slot_id: int, rule: ShortcutRule) -> None:
        """Store `rule` in `slot_id`, replacing whatever was there."""
        validate_slot(slot_id)
        if rule.slot_id != slot_id:
            raise InvalidSlotError(
                f"Rule is bound to slot {rule.slot_id}, cannot store it in slot {slot_id}"
            )
        slots = self._raw_slots()
        slots[slot_id] = rule.to_dict()
        self._dump(slots)
        logger.info(f"Saved shortcut slot {slot_id}: {rule.style.style_id}/{rule.type.type_id}")

    def reset(self, slot_id: Optional[int] = None) -> None:
        """Unbind one slot, or every slot when slot_id is None."""
        if slot_id is None:
            self._dump({})
            return
        validate_slot(slot_id)
        slots = self._raw_slots()
        slots.pop(slot_id, None)
        self._dump(slots)
