"""
Casing style registry.

Each style is a closed enum member carrying its transform and its validator.
Validators check the undecorated transform output; prefix/suffix decoration
is checked structurally by the scorer.
"""

import re
from enum import Enum
from typing import Callable

from .errors import UnknownStyleOrTypeError
from .parsers import capitalize_word


class NamingStyle(Enum):
    """Supported casing styles, keyed by their public id."""

    CAMEL = ("camelCase", "lower camel", "userName")
    PASCAL = ("PascalCase", "upper camel", "UserName")
    SNAKE = ("snake_case", "underscore", "user_name")
    UNDERSCORE_SNAKE = ("_snake_case", "leading underscore", "_user_name")
    CONSTANT = ("CONSTANT_CASE", "constant", "USER_NAME")
    KEBAB = ("kebab-case", "hyphenated", "user-name")

    def __init__(self, style_id: str, display_name: str, example: str):
        self.style_id = style_id
        self.display_name = display_name
        self.example = example

    def transform(self, words: list[str]) -> str:
        """Render a word sequence in this style."""
        return _TRANSFORMS[self](words)

    def validate(self, name: str) -> bool:
        """Check that `name` has the shape this style produces."""
        return bool(_VALIDATORS[self].match(name))

    def __str__(self) -> str:
        return self.style_id


def _camel(words: list[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize_word(w) for w in words[1:])


def _pascal(words: list[str]) -> str:
    return "".join(capitalize_word(w) for w in words)


def _snake(words: list[str]) -> str:
    return "_".join(w.lower() for w in words)


_TRANSFORMS: dict[NamingStyle, Callable[[list[str]], str]] = {
    NamingStyle.CAMEL: _camel,
    NamingStyle.PASCAL: _pascal,
    NamingStyle.SNAKE: _snake,
    NamingStyle.UNDERSCORE_SNAKE: lambda words: "_" + _snake(words),
    NamingStyle.CONSTANT: lambda words: "_".join(w.upper() for w in words),
    NamingStyle.KEBAB: lambda words: "-".join(w.lower() for w in words),
}

# Trailing groups are optional so single-letter words ("x") stay valid
_VALIDATORS: dict[NamingStyle, re.Pattern] = {
    NamingStyle.CAMEL: re.compile(r"^[a-z][a-zA-Z0-9]*$"),
    NamingStyle.PASCAL: re.compile(r"^[A-Z][a-zA-Z0-9]*$"),
    NamingStyle.SNAKE: re.compile(r"^[a-z](?:[a-z0-9_]*[a-z0-9])?$"),
    NamingStyle.UNDERSCORE_SNAKE: re.compile(r"^_[a-z](?:[a-z0-9_]*[a-z0-9])?$"),
    NamingStyle.CONSTANT: re.compile(r"^[A-Z](?:[A-Z0-9_]*[A-Z0-9])?$"),
    NamingStyle.KEBAB: re.compile(r"^[a-z](?:[a-z0-9-]*[a-z0-9])?$"),
}

_BY_ID = {style.style_id: style for style in NamingStyle}

# Styles whose prefix decoration is plain concatenation
VERBATIM_PREFIX_STYLES = frozenset(
    {NamingStyle.CAMEL, NamingStyle.SNAKE, NamingStyle.UNDERSCORE_SNAKE}
)


def style_ids() -> list[str]:
    """Public ids of all registered styles, in registry order."""
    return list(_BY_ID)


def get_style(style: "str | NamingStyle") -> NamingStyle:
    """
    Resolve a style id to its registry entry.

    Raises:
        UnknownStyleOrTypeError: If the id is not registered. There is no
            fallback to a default style.
    """
    if isinstance(style, NamingStyle):
        return style
    try:
        return _BY_ID[style]
    except KeyError:
        raise UnknownStyleOrTypeError("style", style, style_ids()) from None
