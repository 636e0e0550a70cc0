"""
Surface-text code context: language from file extension, declaration kind
from nearby lines, and placeholder substitution.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .constants import DECLARATION_HINTS, LANGUAGE_BY_EXTENSION, PLACEHOLDER_PATTERN

_PLACEHOLDER = re.compile(PLACEHOLDER_PATTERN, re.IGNORECASE)


@dataclass(frozen=True)
class CodeContext:
    language: str
    declaration_kind: str
    line: str


def detect_language(file_name: Optional[str]) -> str:
    """
    Examples:
        >>> detect_language("src/app.tsx")
        'React'
        >>> detect_language("notes.txt")
        'Generic'
    """
    if not file_name or "." not in file_name:
        return "Generic"
    extension = file_name.rsplit(".", 1)[-1].lower()
    return LANGUAGE_BY_EXTENSION.get(extension, "Generic")


def infer_declaration_kind(line: str, lines_before: str = "") -> str:
    """Guess what is being declared from keywords around the cursor."""
    text = f"{line} {lines_before}".lower()
    for kind, needles in DECLARATION_HINTS:
        if any(needle in text for needle in needles):
            return kind
    return "variable"


def analyze_code_context(
    file_name: Optional[str], line: str = "", lines_before: str = ""
) -> CodeContext:
    return CodeContext(
        language=detect_language(file_name),
        declaration_kind=infer_declaration_kind(line, lines_before),
        line=line.strip(),
    )


def find_placeholder(text: str) -> Optional[str]:
    """First whole-word `temp` placeholder as written in `text`, if any."""
    match = _PLACEHOLDER.search(text)
    return match.group(0) if match else None


def replace_placeholder(text: str, placeholder: str, replacement: str) -> str:
    """
    Replace every whole-word occurrence of `placeholder` (exact case).

    Examples:
        >>> replace_placeholder("int temp = temp2 + temp;", "temp", "total")
        'int total = temp2 + total;'
    """
    pattern = re.compile(rf"\b{re.escape(placeholder)}\b")
    return pattern.sub(lambda _match: replacement, text)
