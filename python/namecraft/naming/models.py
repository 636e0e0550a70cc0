"""
Data model shared by the generator, scorer, navigator and shortcut rules.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from .styles import NamingStyle, get_style
from .taxonomy import VariableType, get_variable_type


@dataclass(frozen=True)
class TranslationCandidate:
    """
    One translated phrase as produced upstream.

    Insertion order in a candidate list is the translator's ranking.
    """

    text: str
    confidence: float = 1.0
    origin: str = "input"

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")


@dataclass(frozen=True)
class NamingOption:
    """A materialized candidate: one (style, type) pair applied to a phrase."""

    id: str
    name: str
    style: NamingStyle
    type: VariableType
    result: str
    description: str
    base: str = ""  # Undecorated style transform

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "style": self.style.style_id,
            "type": self.type.type_id,
            "result": self.result,
            "description": self.description,
        }


@dataclass(frozen=True)
class ScoredOption:
    """A structurally valid option and its quality score in [0, 100]."""

    option: NamingOption
    score: int


@dataclass(frozen=True)
class ScoredName:
    """A plain style conversion with its score and a short reason."""

    name: str
    style: NamingStyle
    score: int
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "style": self.style.style_id,
            "score": self.score,
            "reason": self.reason,
        }


@dataclass
class CategoryGrid:
    """Full (style x type) option grid grouped by taxonomy category."""

    categories: dict[str, list[NamingOption]] = field(default_factory=dict)

    def options(self) -> list[NamingOption]:
        """All options flattened in category order."""
        return [option for group in self.categories.values() for option in group]

    def category_names(self) -> list[str]:
        return list(self.categories)

    def get(self, option_id: str) -> Optional[NamingOption]:
        for option in self:
            if option.id == option_id:
                return option
        return None

    def __iter__(self) -> Iterator[NamingOption]:
        return iter(self.options())

    def __len__(self) -> int:
        return sum(len(group) for group in self.categories.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "categories": {
                name: [option.to_dict() for option in group]
                for name, group in self.categories.items()
            }
        }


@dataclass(frozen=True)
class ShortcutRule:
    """A (style, type) rule bound to a fixed shortcut slot."""

    slot_id: int
    name: str
    style: NamingStyle
    type: VariableType
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "style": self.style.style_id,
            "type": self.type.type_id,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, slot_id: int, data: dict[str, Any]) -> "ShortcutRule":
        """
        Build a rule from its stored form.

        Raises:
            UnknownStyleOrTypeError: If the stored style or type is unknown.
        """
        style = get_style(data["style"])
        vtype = get_variable_type(data.get("type", "normal"))
        return cls(
            slot_id=slot_id,
            name=data.get("name") or f"{style.style_id} {vtype.type_id}",
            style=style,
            type=vtype,
            description=data.get("description", ""),
        )
