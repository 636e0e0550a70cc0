"""
Phrase cleaning and word tokenization.
"""

import re

# lowercase/digit followed by uppercase: userName -> user Name, ab1Cd -> ab1 Cd
# uppercase followed by a capitalized word: getAValue -> get A Value, HTTPServer -> HTTP Server
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[_-]")
_NON_WORD = re.compile(r"[^\w\s-]")


def clean_text(text: str) -> str:
    """
    Trim a phrase and drop punctuation.

    Word characters, whitespace and hyphens are kept, so kebab-case input
    keeps its word boundaries.

    Examples:
        >>> clean_text("  user's name! ")
        'users name'
        >>> clean_text("user-name")
        'user-name'
    """
    return _NON_WORD.sub("", text.strip())


def tokenize(text: str) -> list[str]:
    """
    Split a phrase into words regardless of its casing style.

    Boundaries are found in this order:
    1. camel boundaries (lowercase or digit followed by uppercase, and the
       last capital of an uppercase run that starts a capitalized word)
    2. underscores and hyphens
    3. whitespace

    Words keep their original case; styles normalize case themselves.
    Runs without ASCII case or separators (e.g. CJK text) stay one token.

    Args:
        text: Phrase or identifier fragment in any convention

    Returns:
        Ordered list of words. Empty only when the input is blank.

    Examples:
        >>> tokenize("user name")
        ['user', 'name']
        >>> tokenize("userName")
        ['user', 'Name']
        >>> tokenize("USER_NAME")
        ['USER', 'NAME']
        >>> tokenize("user-name")
        ['user', 'name']
        >>> tokenize("用户数量")
        ['用户数量']

    Edge Cases:
        - Blank input: []
        - Separators only ("__"): the trimmed string itself, as a single token
        - Acronyms end before a capitalized word: "HTTPServer" -> ["HTTP", "Server"]
        - Trailing capitals stay one word: "xYZ" -> ["x", "YZ"], "AB" -> ["AB"]
    """
    stripped = text.strip()
    if not stripped:
        return []

    spaced = _CAMEL_BOUNDARY.sub(" ", stripped)
    spaced = _SEPARATORS.sub(" ", spaced)
    words = [w for w in spaced.split() if w]

    return words or [stripped]


def capitalize_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest ("uSER" -> "User")."""
    return word[:1].upper() + word[1:].lower()
