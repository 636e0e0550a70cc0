"""
Candidate generation: (style x type) decoration of a phrase, the full option
grid, and the initial recommendation list.
"""

import logging
import re
from typing import Iterable, Optional, Sequence

from .constants import (
    MAX_RECOMMENDATIONS,
    MAX_RECOMMENDED_TRANSLATIONS,
    MAX_SELECTED_TRANSLATIONS,
)
from .errors import EmptyInputError, NoCandidatesError
from .models import CategoryGrid, NamingOption, TranslationCandidate
from .parsers import clean_text, tokenize
from .predictor import predict_variable_types
from .scoring import rank_options
from .styles import VERBATIM_PREFIX_STYLES, NamingStyle, get_style
from .taxonomy import VariableType, get_variable_type

logger = logging.getLogger("namecraft.naming")

_LOWERCASE_RUN = re.compile(r"[a-z]+")


def decorate(base: str, style: NamingStyle, vtype: VariableType) -> str:
    """
    Apply a type's prefix/suffix to an already-styled base name.

    - camelCase, snake_case, _snake_case: prefix concatenated verbatim
    - other styles: prefix with its first character uppercased ("m_" -> "M_")
    - suffix appended verbatim
    - constant type: the whole result is uppercased and any remaining
      lowercase run replaced by "_", whatever the style

    Examples:
        >>> decorate("userName", NamingStyle.CAMEL, VariableType.MEMBER)
        'm_userName'
        >>> decorate("UserName", NamingStyle.PASCAL, VariableType.MEMBER)
        'M_UserName'
        >>> decorate("user_name", NamingStyle.SNAKE, VariableType.COUNT)
        'user_nameCount'
        >>> decorate("totalItems", NamingStyle.CAMEL, VariableType.CONST)
        'TOTALITEMS'
    """
    result = base

    if vtype.prefix:
        if style in VERBATIM_PREFIX_STYLES:
            result = vtype.prefix + result
        else:
            result = vtype.prefix[:1].upper() + vtype.prefix[1:] + result

    if vtype.suffix:
        result = result + vtype.suffix

    if vtype.is_constant:
        # TODO: confirm the intended shape for digit-leading and mixed-case words;
        # after upper() only non-ASCII lowercase can remain here.
        result = _LOWERCASE_RUN.sub("_", result.upper())

    return result


def generate_naming(
    text: str, style: "str | NamingStyle", vtype: "str | VariableType" = VariableType.NORMAL
) -> str:
    """
    Generate one identifier for a phrase in the given style and type.

    Raises:
        UnknownStyleOrTypeError: If the style or type id is not registered.
    """
    style = get_style(style)
    vtype = get_variable_type(vtype)
    return decorate(style.transform(tokenize(clean_text(text))), style, vtype)


def build_option(
    text: str,
    style: NamingStyle,
    vtype: VariableType,
    option_id: Optional[str] = None,
) -> NamingOption:
    """Materialize a NamingOption for one (style, type) pair."""
    base = style.transform(tokenize(clean_text(text)))
    result = decorate(base, style, vtype)
    return NamingOption(
        id=option_id or f"{vtype.type_id}_{style.style_id}",
        name=f"{vtype.display_name} - {style.display_name}",
        style=style,
        type=vtype,
        result=result,
        description=f"{vtype.description} ({result})",
        base=base,
    )


def generate_all_options(
    text: str, styles: Optional[Iterable["str | NamingStyle"]] = None
) -> CategoryGrid:
    """
    Generate every (style x type) option for a phrase, grouped by category.

    Args:
        text: Translated phrase or identifier fragment
        styles: Style ids to include (default: every registered style)

    Returns:
        CategoryGrid with exactly len(styles) x len(VariableType) options,
        one per (type, style) pair, in catalog then style order

    Raises:
        EmptyInputError: If the phrase is blank after cleaning
        UnknownStyleOrTypeError: If a requested style id is not registered
    """
    if not clean_text(text):
        raise EmptyInputError("Cannot generate names for an empty phrase")

    selected = [get_style(s) for s in styles] if styles is not None else list(NamingStyle)
    # Duplicate style ids would break the one-option-per-pair guarantee
    selected = list(dict.fromkeys(selected))

    grid = CategoryGrid()
    for vtype in VariableType:
        group = grid.categories.setdefault(vtype.category, [])
        for style in selected:
            group.append(build_option(text, style, vtype))

    logger.debug(f"Generated {len(grid)} options for {text!r}")
    return grid


def select_translations(
    translations: Sequence[TranslationCandidate],
) -> list[TranslationCandidate]:
    """
    Keep up to 5 translations with distinct cleaned text (case-insensitive),
    in the translator's order. Blank candidates are dropped.
    """
    seen: set[str] = set()
    selected: list[TranslationCandidate] = []
    for candidate in translations:
        key = clean_text(candidate.text).lower()
        if not key or key in seen:
            continue
        seen.add(key)
        selected.append(candidate)
        if len(selected) >= MAX_SELECTED_TRANSLATIONS:
            break
    return selected


def _recommendation_styles(index: int, distinct_count: int) -> list[NamingStyle]:
    if distinct_count < MAX_RECOMMENDED_TRANSLATIONS:
        return [NamingStyle.CAMEL]
    if index < 2:
        return [NamingStyle.CAMEL, NamingStyle.PASCAL]
    return [NamingStyle.SNAKE]


def generate_smart_recommendations(
    translations: Sequence[TranslationCandidate],
    context: Optional[str] = None,
) -> list[NamingOption]:
    """
    Build the initial top-K recommendation list.

    The first distinct translation decides the predicted type; every
    recommendation uses that single most likely type. With three or more
    distinct translations, the first two yield camelCase and PascalCase and
    the third snake_case; with fewer, each yields camelCase only.

    Options are validated and ranked by score (stable), then deduplicated
    by case-insensitive result and capped at 5.

    Raises:
        NoCandidatesError: If no translation has usable text
        AllInvalidError: If every generated option fails validation
    """
    selected = select_translations(translations)
    if not selected:
        raise NoCandidatesError("No usable translation candidates")

    primary_type = predict_variable_types(clean_text(selected[0].text), context)[0]
    used = selected[:MAX_RECOMMENDED_TRANSLATIONS]

    options: list[NamingOption] = []
    for index, translation in enumerate(used):
        for style in _recommendation_styles(index, len(used)):
            options.append(
                build_option(
                    translation.text,
                    style,
                    primary_type,
                    option_id=f"smart_{len(options)}",
                )
            )

    seen: set[str] = set()
    recommendations: list[NamingOption] = []
    for scored in rank_options(options):
        key = scored.option.result.lower()
        if key in seen:
            logger.debug(f"Dropping duplicate recommendation {scored.option.result!r}")
            continue
        seen.add(key)
        recommendations.append(scored.option)

    return recommendations[:MAX_RECOMMENDATIONS]
