"""
Naming candidate engine.

Turns a translated phrase into ranked identifier candidates: tokenization,
casing styles, variable-type decorations, type prediction, scoring, and the
interactive selection funnel.
"""

from .errors import (
    AllInvalidError,
    EmptyInputError,
    InvalidSlotError,
    InvalidTransitionError,
    NamingError,
    NoCandidatesError,
    UnknownStyleOrTypeError,
)
from .models import (
    CategoryGrid,
    NamingOption,
    ScoredName,
    ScoredOption,
    ShortcutRule,
    TranslationCandidate,
)
from .parsers import clean_text, tokenize
from .styles import NamingStyle, get_style, style_ids
from .taxonomy import VariableType, categories, get_variable_type, type_ids
from .predictor import predict_variable_types
from .scoring import calculate_score, is_valid_option, rank_options, score_names
from .generator import (
    decorate,
    generate_all_options,
    generate_naming,
    generate_smart_recommendations,
)
from .navigator import (
    Back,
    Dismiss,
    NavigationSession,
    Screen,
    Select,
    SelectCategory,
    SelectMore,
    generate_candidates,
    start_session,
    transition,
)
from .shortcuts import (
    apply_rule,
    bind_rule,
    default_bindings,
    persist_selection,
    resolve_bindings,
)

__all__ = [
    # Errors
    "NamingError",
    "EmptyInputError",
    "NoCandidatesError",
    "AllInvalidError",
    "UnknownStyleOrTypeError",
    "InvalidTransitionError",
    "InvalidSlotError",
    # Models
    "TranslationCandidate",
    "NamingOption",
    "ScoredOption",
    "ScoredName",
    "CategoryGrid",
    "ShortcutRule",
    # Tokenizer, styles, taxonomy
    "clean_text",
    "tokenize",
    "NamingStyle",
    "get_style",
    "style_ids",
    "VariableType",
    "get_variable_type",
    "type_ids",
    "categories",
    # Prediction, generation, scoring
    "predict_variable_types",
    "decorate",
    "generate_naming",
    "generate_all_options",
    "generate_smart_recommendations",
    "calculate_score",
    "is_valid_option",
    "rank_options",
    "score_names",
    # Navigation
    "NavigationSession",
    "Screen",
    "Select",
    "SelectMore",
    "SelectCategory",
    "Back",
    "Dismiss",
    "generate_candidates",
    "start_session",
    "transition",
    # Shortcuts
    "apply_rule",
    "bind_rule",
    "default_bindings",
    "persist_selection",
    "resolve_bindings",
]
