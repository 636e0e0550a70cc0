"""
Error kinds raised by the naming engine.

Retryable errors (no candidates, nothing valid) are warnings for the caller:
re-prompt or fall back to manual input. The rest are programmer errors and
should surface immediately.
"""


class NamingError(Exception):
    """Base class for all naming engine errors."""

    retryable = False


class EmptyInputError(NamingError, ValueError):
    """Raised when a phrase is empty or whitespace after trimming."""


class NoCandidatesError(NamingError):
    """Raised when the translation step produced no usable candidates."""

    retryable = True


class AllInvalidError(NamingError):
    """Raised when every generated candidate failed structural validation."""

    retryable = True


class UnknownStyleOrTypeError(NamingError, LookupError):
    """Raised when a style or variable type id is not registered."""

    def __init__(self, kind: str, requested: str, known: list[str]):
        self.kind = kind
        self.requested = requested
        self.known = known
        super().__init__(
            f"Unknown {kind} '{requested}'. Known {kind}s: {', '.join(known)}"
        )


class InvalidTransitionError(NamingError):
    """Raised when a navigation event is not allowed on the current screen."""


class InvalidSlotError(NamingError, ValueError):
    """Raised when a shortcut slot id is outside the fixed slot range."""
