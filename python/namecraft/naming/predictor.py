"""
Context-driven variable type prediction.
"""

import logging
from pathlib import PurePath
from typing import Optional

from .constants import (
    BOOL_SUFFIXES,
    COUNT_SUFFIXES,
    EXTENSION_TYPE_HINTS,
    FUNCTION_PREFIXES,
    MAX_PREDICTED_TYPES,
    SEMANTIC_RULES,
)
from .parsers import tokenize
from .taxonomy import VariableType, get_variable_type

logger = logging.getLogger("namecraft.naming")


def context_extension(context: Optional[str]) -> str:
    """
    Extract a lowercase file extension from a context hint.

    Accepts a file name ("src/user.h"), a bare extension (".h") or an
    extension without the dot ("h").

    Examples:
        >>> context_extension("src/user.H")
        '.h'
        >>> context_extension("cpp")
        '.cpp'
        >>> context_extension(None)
        ''
    """
    if not context:
        return ""
    hint = context.strip().lower()
    if "." not in hint and "/" not in hint and "\\" not in hint:
        return f".{hint}" if hint else ""
    if hint.startswith(".") and hint.count(".") == 1:
        return hint
    return PurePath(hint).suffix


def predict_variable_types(text: str, context: Optional[str] = None) -> list[VariableType]:
    """
    Rank the variable types most likely meant by a phrase.

    Rules are additive and applied in order; later rules prepend, so they
    take priority when both fire:

    1. Substring rules on the lowercased phrase ("count" -> count, int; ...)
    2. File extension hints from `context` (C/C++, scripts, Python, Java, headers)
    3. Phrases of more than two words -> normal
    4. Literal heuristics on the original phrase: leading get/set -> function,
       trailing Count/Size -> count, int, trailing Flag/State -> bool
    5. Nothing fired -> normal

    Args:
        text: Phrase or identifier fragment (translated)
        context: Optional file name or extension

    Returns:
        Up to 5 distinct types, most likely first

    Examples:
        >>> [t.type_id for t in predict_variable_types("userCount", "file.h")]
        ['count', 'int', 'const', 'global', 'member']
    """
    predictions: list[str] = []

    lowered = text.lower()
    for patterns, type_ids in SEMANTIC_RULES:
        if any(pattern in lowered for pattern in patterns):
            predictions.extend(type_ids)

    extension = context_extension(context)
    if extension:
        for extensions, type_ids in EXTENSION_TYPE_HINTS:
            if extension in extensions:
                predictions[:0] = type_ids

    if len(tokenize(text)) > 2:
        predictions.insert(0, "normal")

    if text.startswith(FUNCTION_PREFIXES):
        predictions.insert(0, "function")

    if text.endswith(COUNT_SUFFIXES):
        predictions[:0] = ["count", "int"]

    if text.endswith(BOOL_SUFFIXES):
        predictions.insert(0, "bool")

    if not predictions:
        predictions.append("normal")

    ranked = list(dict.fromkeys(predictions))[:MAX_PREDICTED_TYPES]
    logger.debug(f"Predicted types for {text!r} (context={context!r}): {ranked}")
    return [get_variable_type(type_id) for type_id in ranked]
