"""
Structural validation and quality scoring of identifier candidates.
"""

import logging
import re
from typing import Iterable, Optional, Sequence

from .constants import (
    BASE_SCORE,
    COMMON_WORDS,
    IDEAL_LENGTH_RANGE,
    LONG_NAME_PENALTY_THRESHOLD,
    MAX_NAME_LENGTH,
    MAX_SCORE,
    MIN_SCORE,
    VOWEL_RATIO_RANGE,
)
from .errors import AllInvalidError, EmptyInputError
from .models import NamingOption, ScoredName, ScoredOption
from .parsers import clean_text, tokenize
from .styles import NamingStyle, get_style

logger = logging.getLogger("namecraft.naming")

_CONSONANT_RUN = re.compile(r"[bcdfghjklmnpqrstvwxyz]{4,}", re.IGNORECASE)
_REPEATED_CHAR = re.compile(r"(.)\1{3,}")
_DIGIT_START = re.compile(r"^[0-9]")
_FORBIDDEN_CHAR = re.compile(r"[^a-zA-Z0-9_-]")
_VOWEL = re.compile(r"[aeiou]", re.IGNORECASE)

# Shape required of the constant type's re-derived result
CONSTANT_SHAPE = re.compile(r"^_?[A-Z][A-Z0-9_]*$")


def is_readable(name: str) -> bool:
    """
    Heuristic readability guard.

    Rejects 4+ consecutive consonants, 4+ identical consecutive characters,
    a leading digit, and any character outside [A-Za-z0-9_-].
    """
    if _CONSONANT_RUN.search(name):
        return False
    return not any(
        pattern.search(name) for pattern in (_REPEATED_CHAR, _DIGIT_START, _FORBIDDEN_CHAR)
    )


def _has_valid_length(name: str) -> bool:
    return 0 < len(name) <= MAX_NAME_LENGTH


def is_valid_name(name: str, style: NamingStyle) -> bool:
    """Validate an undecorated name against its style and the structural rules."""
    return _has_valid_length(name) and style.validate(name) and is_readable(name)


def is_valid_option(option: NamingOption) -> bool:
    """
    Validate a generated option.

    The style validator applies to the undecorated base; the decorated
    result must pass the structural rules. Constant-type results are
    re-derived and only need the constant shape.
    """
    if not (_has_valid_length(option.result) and is_readable(option.result)):
        return False
    if option.type.is_constant:
        return bool(CONSTANT_SHAPE.match(option.result))
    return option.style.validate(option.base)


def has_good_readability(name: str) -> bool:
    """Vowel-to-length ratio within [0.2, 0.6]."""
    if not name:
        return False
    ratio = len(_VOWEL.findall(name)) / len(name)
    low, high = VOWEL_RATIO_RANGE
    return low <= ratio <= high


def contains_common_words(name: str) -> bool:
    lowered = name.lower()
    return any(word in lowered for word in COMMON_WORDS)


def calculate_score(name: str, words: Sequence[str]) -> int:
    """
    Score a valid candidate, clamped to [0, 100].

    Base 100; +10 for length 5-15, -20 above 20; +15 for a balanced vowel
    ratio; +5 per word for multi-word phrases; +5 for a common word.
    """
    score = BASE_SCORE

    length = len(name)
    low, high = IDEAL_LENGTH_RANGE
    if low <= length <= high:
        score += 10
    elif length > LONG_NAME_PENALTY_THRESHOLD:
        score -= 20

    if has_good_readability(name):
        score += 15

    if len(words) > 1:
        score += len(words) * 5

    if contains_common_words(name):
        score += 5

    return max(MIN_SCORE, min(MAX_SCORE, score))


def rank_options(
    options: Iterable[NamingOption], source_text: Optional[str] = None
) -> list[ScoredOption]:
    """
    Drop invalid options, score the rest and sort by score descending.

    Ties keep generation order (stable sort).

    Args:
        options: Generated options
        source_text: Phrase the options came from. When omitted each option's
            own base name supplies the word count.

    Raises:
        AllInvalidError: If options were given but none is valid
    """
    options = list(options)
    source_words = tokenize(source_text) if source_text is not None else None

    scored: list[ScoredOption] = []
    for option in options:
        if not is_valid_option(option):
            logger.debug(f"Rejected candidate {option.result!r} ({option.id})")
            continue
        words = source_words if source_words is not None else tokenize(option.base)
        scored.append(ScoredOption(option=option, score=calculate_score(option.result, words)))

    if options and not scored:
        raise AllInvalidError(
            f"All {len(options)} candidates failed validation: "
            + ", ".join(option.result for option in options[:5])
        )

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


def score_names(
    text: str, styles: Sequence["str | NamingStyle"] = ("camelCase",)
) -> list[ScoredName]:
    """
    Convert a phrase into each requested style and rank the valid results.

    Raises:
        EmptyInputError: If the phrase is blank
        UnknownStyleOrTypeError: If a style id is not registered (fails
            before anything is generated)
        AllInvalidError: If no conversion passes validation
    """
    resolved = [get_style(style) for style in styles]

    cleaned = clean_text(text)
    if not cleaned:
        raise EmptyInputError("Cannot score names for an empty phrase")

    words = tokenize(cleaned)
    results: list[ScoredName] = []
    for style in resolved:
        name = style.transform(words)
        if is_valid_name(name, style):
            results.append(
                ScoredName(
                    name=name,
                    style=style,
                    score=calculate_score(name, words),
                    reason=f"{style.style_id} naming",
                )
            )

    if not results:
        raise AllInvalidError(f"No valid name for {text!r} in styles {[str(s) for s in resolved]}")

    results.sort(key=lambda item: item.score, reverse=True)
    return results
