"""
Recommendation navigator: the interactive selection funnel as an immutable
session plus a pure transition function.

    Initial --select--> Terminal
    Initial --more--> CategoryMenu --category(c)--> CategoryOptions(c) --select--> Terminal
    CategoryOptions --back--> CategoryMenu --back--> Initial
    any open screen --dismiss--> Cancelled

Sessions are never persisted. Callers drive one pending prompt at a time and
drop the session once it reaches Terminal or Cancelled.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence, Union

from .errors import EmptyInputError, InvalidTransitionError
from .generator import generate_all_options, generate_smart_recommendations, select_translations
from .models import CategoryGrid, NamingOption, TranslationCandidate

logger = logging.getLogger("namecraft.navigator")


class Screen(Enum):
    INITIAL = "initial"
    CATEGORY_MENU = "category_menu"
    CATEGORY_OPTIONS = "category_options"
    TERMINAL = "terminal"
    CANCELLED = "cancelled"


FINAL_SCREENS = frozenset({Screen.TERMINAL, Screen.CANCELLED})


@dataclass(frozen=True)
class ScreenState:
    """One resumable screen on the navigation stack."""

    screen: Screen
    category: Optional[str] = None
    selected: Optional[NamingOption] = None


# Events


@dataclass(frozen=True)
class Select:
    option_id: str


@dataclass(frozen=True)
class SelectMore:
    pass


@dataclass(frozen=True)
class SelectCategory:
    category: str


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Dismiss:
    pass


NavigationEvent = Union[Select, SelectMore, SelectCategory, Back, Dismiss]


@dataclass(frozen=True)
class NavigationSession:
    """State of one selection funnel."""

    original_input: str
    translations: tuple[TranslationCandidate, ...]
    recommendations: tuple[NamingOption, ...]
    context: Optional[str] = None
    grid: Optional[CategoryGrid] = field(default=None, compare=False)
    stack: tuple[ScreenState, ...] = (ScreenState(Screen.INITIAL),)

    @property
    def current(self) -> ScreenState:
        return self.stack[-1]

    @property
    def is_finished(self) -> bool:
        return self.current.screen in FINAL_SCREENS

    @property
    def selection(self) -> Optional[NamingOption]:
        """The chosen option once the session reached Terminal."""
        return self.current.selected if self.current.screen is Screen.TERMINAL else None

    def visible_options(self) -> list[NamingOption]:
        """Options selectable on the current screen."""
        state = self.current
        if state.screen is Screen.INITIAL:
            return list(self.recommendations)
        if state.screen is Screen.CATEGORY_OPTIONS and self.grid is not None:
            return list(self.grid.categories.get(state.category, []))
        return []

    def visible_categories(self) -> list[str]:
        if self.current.screen is Screen.CATEGORY_MENU and self.grid is not None:
            return self.grid.category_names()
        return []


def start_session(
    original_input: str,
    translations: Sequence[TranslationCandidate],
    context: Optional[str] = None,
) -> NavigationSession:
    """
    Open a session on the Initial screen.

    Args:
        original_input: What the user typed or selected (any script)
        translations: Translated phrase candidates, translator order
        context: Optional file name or extension for type prediction

    Raises:
        EmptyInputError: If the input is blank
        NoCandidatesError: If no translation is usable
        AllInvalidError: If no recommendation passes validation
    """
    if not original_input.strip():
        raise EmptyInputError("Input phrase is empty")

    recommendations = generate_smart_recommendations(translations, context)
    logger.info(
        f"Session opened for {original_input!r}: "
        f"{len(recommendations)} recommendations from {len(translations)} translations"
    )
    return NavigationSession(
        original_input=original_input,
        translations=tuple(translations),
        recommendations=tuple(recommendations),
        context=context,
    )


def generate_candidates(phrase: str, context: Optional[str] = None) -> NavigationSession:
    """
    Open a session for a phrase that is already in Latin script.

    The phrase itself is the only translation candidate.
    """
    if not phrase.strip():
        raise EmptyInputError("Input phrase is empty")
    candidate = TranslationCandidate(text=phrase, confidence=1.0, origin="input")
    return start_session(phrase, [candidate], context)


def _push(session: NavigationSession, state: ScreenState, **changes) -> NavigationSession:
    return replace(session, stack=session.stack + (state,), **changes)


def _pop(session: NavigationSession) -> NavigationSession:
    return replace(session, stack=session.stack[:-1])


def _find_option(session: NavigationSession, option_id: str) -> NamingOption:
    for option in session.visible_options():
        if option.id == option_id:
            return option
    raise InvalidTransitionError(
        f"Option '{option_id}' is not on the {session.current.screen.value} screen"
    )


def _top_translation_text(session: NavigationSession) -> str:
    selected = select_translations(session.translations)
    return selected[0].text if selected else session.original_input


def transition(session: NavigationSession, event: NavigationEvent) -> NavigationSession:
    """
    Apply one event and return the resulting session.

    The input session is left untouched.

    Raises:
        InvalidTransitionError: If the event is not allowed on the current
            screen (including any event once the session is finished)
    """
    state = session.current
    screen = state.screen

    if screen in FINAL_SCREENS:
        raise InvalidTransitionError(f"Session already {screen.value}")

    if isinstance(event, Dismiss):
        logger.info(f"Session for {session.original_input!r} dismissed on {screen.value}")
        return _push(session, ScreenState(Screen.CANCELLED))

    if isinstance(event, Select) and screen in (Screen.INITIAL, Screen.CATEGORY_OPTIONS):
        option = _find_option(session, event.option_id)
        logger.info(f"Selected {option.result!r} ({option.id})")
        return _push(session, ScreenState(Screen.TERMINAL, category=state.category, selected=option))

    if isinstance(event, SelectMore) and screen is Screen.INITIAL:
        grid = session.grid
        if grid is None:
            grid = generate_all_options(_top_translation_text(session))
        return _push(session, ScreenState(Screen.CATEGORY_MENU), grid=grid)

    if isinstance(event, SelectCategory) and screen is Screen.CATEGORY_MENU:
        if event.category not in session.visible_categories():
            raise InvalidTransitionError(f"Unknown category '{event.category}'")
        return _push(session, ScreenState(Screen.CATEGORY_OPTIONS, category=event.category))

    if isinstance(event, Back) and screen in (Screen.CATEGORY_MENU, Screen.CATEGORY_OPTIONS):
        return _pop(session)

    raise InvalidTransitionError(
        f"{type(event).__name__} is not allowed on the {screen.value} screen"
    )
