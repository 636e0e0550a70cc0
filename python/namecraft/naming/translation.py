"""
Translation collaborator boundary.

The engine never translates. Translators implement `Translator`; their
answers are memoized by an explicit, bounded `TranslationCache`.
"""

import logging
from collections import OrderedDict
from typing import Any, Iterable, Optional, Protocol

from .constants import (
    TRANSLATION_CACHE_CAPACITY,
    TRANSLATION_CONFIDENCE_STEP,
    TRANSLATION_TOP_CONFIDENCE,
)
from .models import TranslationCandidate

logger = logging.getLogger("namecraft.translation")

# Style keys a structured translator answer may carry, in ranking order
OPTION_STYLE_KEYS = ("camelCase", "PascalCase", "snake_case")


class Translator(Protocol):
    def translate(self, text: str) -> list[TranslationCandidate]:
        ...


class PassthroughTranslator:
    """Answers with the phrase itself, for input that is already English."""

    def translate(self, text: str) -> list[TranslationCandidate]:
        if not text.strip():
            return []
        return [TranslationCandidate(text=text, confidence=1.0, origin="input")]


def _ladder_confidence(index: int) -> float:
    return max(0.0, round(TRANSLATION_TOP_CONFIDENCE - index * TRANSLATION_CONFIDENCE_STEP, 4))


def candidates_from_strings(texts: Iterable[str], origin: str = "client") -> list[TranslationCandidate]:
    """
    Wrap ranked plain strings as candidates (0.95, 0.90, ...).

    Blank strings are skipped but still consume a rank.
    """
    return [
        TranslationCandidate(text=text, confidence=_ladder_confidence(index), origin=origin)
        for index, text in enumerate(texts)
        if text and text.strip()
    ]


def candidates_from_options(
    options: Iterable[dict[str, Any]], origin: str = "translator"
) -> list[TranslationCandidate]:
    """
    Flatten structured answers into candidates.

    Each option is a mapping such as
    {"camelCase": "userCount", "PascalCase": "UserCount", "snake_case": "user_count"};
    every style entry of option i gets confidence 0.95 - 0.05 * i.

    Examples:
        >>> [c.text for c in candidates_from_options([{"camelCase": "a", "snake_case": "b"}])]
        ['a', 'b']
    """
    candidates: list[TranslationCandidate] = []
    for index, option in enumerate(options):
        confidence = _ladder_confidence(index)
        for key in OPTION_STYLE_KEYS:
            text = option.get(key)
            if isinstance(text, str) and text.strip():
                candidates.append(
                    TranslationCandidate(text=text, confidence=confidence, origin=f"{origin}-{key}")
                )
    return candidates


class TranslationCache:
    """Least-recently-used cache of translator answers."""

    def __init__(self, capacity: int = TRANSLATION_CACHE_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[str, list[TranslationCandidate]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[list[TranslationCandidate]]:
        if key not in self._entries:
            self.misses += 1
            return None
        self.hits += 1
        self._entries.move_to_end(key)
        return list(self._entries[key])

    def put(self, key: str, candidates: list[TranslationCandidate]) -> None:
        self._entries[key] = list(candidates)
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached translation for {evicted!r}")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class CachingTranslator:
    """Memoizes another translator's answers by raw input text."""

    def __init__(self, translator: Translator, cache: Optional[TranslationCache] = None):
        self.translator = translator
        self.cache = cache if cache is not None else TranslationCache()

    @staticmethod
    def _key(text: str, mode: str) -> str:
        return f"{mode}:{text}" if mode else text

    def translate(self, text: str, mode: str = "") -> list[TranslationCandidate]:
        """
        Translate `text`, answering from cache when possible.

        `mode` separates answers for different prompt styles of the same text
        (e.g. a single camelCase answer versus a ranked list).
        """
        key = self._key(text, mode)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        candidates = self.translator.translate(text)
        # Empty answers are not cached so a later retry can succeed
        if candidates:
            self.cache.put(key, candidates)
        return list(candidates)

    def remember(self, text: str, candidates: list[TranslationCandidate], mode: str = "") -> None:
        """Record an answer obtained elsewhere (e.g. from the MCP client) for `text`."""
        if candidates:
            self.cache.put(self._key(text, mode), candidates)
