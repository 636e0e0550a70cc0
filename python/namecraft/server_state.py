"""
NameCraft server global state - shared by the MCP tool modules.

Navigation sessions live here for the duration of one selection funnel and
are dropped once they complete or are cancelled. Nothing here is persisted;
shortcut bindings go through the rule store.
"""

import logging
import secrets
from typing import Optional

from namecraft.naming.navigator import NavigationSession
from namecraft.naming.translation import CachingTranslator, PassthroughTranslator
from namecraft.rule_store import YamlRuleStore

logger = logging.getLogger("namecraft.sessions")

# Abandoned funnels are evicted oldest-first once this many are open
MAX_OPEN_SESSIONS = 64

# session_id -> open NavigationSession, least recently used first
sessions: dict[str, NavigationSession] = {}

# Phrase -> translations, remembered across suggest_names calls
translator = CachingTranslator(PassthroughTranslator())

# Created on first use so NAMECRAFT_HOME is read at call time, not import time
rule_store: Optional[YamlRuleStore] = None


def get_rule_store() -> YamlRuleStore:
    global rule_store
    if rule_store is None:
        rule_store = YamlRuleStore()
    return rule_store


def generate_session_id() -> str:
    """Session ID format: session_{8hex}."""
    return f"session_{secrets.token_hex(4)}"


def open_session(session: NavigationSession) -> str:
    session_id = generate_session_id()
    while session_id in sessions:
        session_id = generate_session_id()
    while len(sessions) >= MAX_OPEN_SESSIONS:
        evicted = next(iter(sessions))
        sessions.pop(evicted)
        logger.info(f"Evicted idle session {evicted} ({MAX_OPEN_SESSIONS} sessions open)")
    sessions[session_id] = session
    return session_id


def update_session(session_id: str, session: NavigationSession) -> None:
    """Store the next state of an open session and mark it most recently used."""
    sessions.pop(session_id, None)
    sessions[session_id] = session


def get_session(session_id: str) -> NavigationSession:
    """
    Raises:
        KeyError: If no open session has this id
    """
    try:
        return sessions[session_id]
    except KeyError:
        raise KeyError(f"Session {session_id} not found (finished or never opened)") from None


def close_session(session_id: str) -> None:
    sessions.pop(session_id, None)


__all__ = [
    "sessions",
    "rule_store",
    "get_rule_store",
    "translator",
    "open_session",
    "update_session",
    "get_session",
    "close_session",
]
