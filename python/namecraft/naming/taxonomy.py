"""
Variable-type taxonomy: semantic prefix/suffix decorations grouped by category.
"""

from enum import Enum

from .errors import UnknownStyleOrTypeError


class VariableType(Enum):
    """
    Reference catalog of variable types, in display order.

    Each member carries (id, display name, prefix, suffix, description, category).
    """

    # Basic
    NORMAL = ("normal", "Plain variable", "", "", "General-purpose variable", "basic")

    # Scope
    GLOBAL = ("global", "Global variable", "g_", "", "Global-scope variable", "scope")
    STATIC = ("static", "Static variable", "s_", "", "Static variable", "scope")
    MEMBER = ("member", "Class member", "m_", "", "C++ class member variable", "scope")

    # Purpose
    CONST = ("const", "Constant", "", "", "Constant value", "purpose")
    ARRAY = ("array", "Array", "", "Array", "Array variable", "purpose")
    POINTER = ("pointer", "Pointer", "p", "", "Pointer variable", "purpose")
    FUNCTION = ("function", "Function", "", "", "Function name", "purpose")
    INVALID = ("invalid", "Invalid marker", "invalid", "", "Invalid value", "purpose")
    HANDLE = ("handle", "Handle", "h", "", "Handle variable", "purpose")

    # Integers
    INT = ("int", "Integer", "n", "", "Integer variable", "data-type")
    LONG = ("long", "Long integer", "l", "", "Long integer variable", "data-type")
    SHORT = ("short", "Short integer", "s", "", "Short integer variable", "data-type")
    BYTE = ("byte", "Byte", "by", "", "Byte variable", "data-type")
    WORD = ("word", "Word", "w", "", "Word variable", "data-type")
    UNSIGNED = ("unsigned", "Unsigned", "u", "", "Unsigned variable", "data-type")

    # Floating point
    FLOAT = ("float", "Float", "f", "", "Floating-point variable", "data-type")
    DOUBLE = ("double", "Double", "d", "", "Double-precision variable", "data-type")
    REAL = ("real", "Real", "r", "", "Real number variable", "data-type")

    # Other data types
    BOOL = ("bool", "Boolean", "b", "", "Boolean variable", "data-type")
    STRING = ("string", "String", "str", "", "String variable", "data-type")
    CHAR = ("char", "Character", "c", "", "Character variable", "data-type")
    DWORD = ("dword", "Double word", "dw", "", "Double-word variable", "data-type")

    # Semantic
    COUNT = ("count", "Counter", "", "Count", "Counter variable", "semantic")

    def __init__(
        self,
        type_id: str,
        display_name: str,
        prefix: str,
        suffix: str,
        description: str,
        category: str,
    ):
        self.type_id = type_id
        self.display_name = display_name
        self.prefix = prefix
        self.suffix = suffix
        self.description = description
        self.category = category

    @property
    def is_constant(self) -> bool:
        """Constant types re-derive the whole result in constant shape."""
        return self is VariableType.CONST

    def __str__(self) -> str:
        return self.type_id


_BY_ID = {vtype.type_id: vtype for vtype in VariableType}


def type_ids() -> list[str]:
    """Public ids of all catalog entries, in catalog order."""
    return list(_BY_ID)


def get_variable_type(vtype: "str | VariableType") -> VariableType:
    """
    Resolve a type id to its catalog entry.

    Raises:
        UnknownStyleOrTypeError: If the id is not in the catalog.
    """
    if isinstance(vtype, VariableType):
        return vtype
    try:
        return _BY_ID[vtype]
    except KeyError:
        raise UnknownStyleOrTypeError("type", vtype, type_ids()) from None


def categories() -> list[str]:
    """Category names in first-seen catalog order."""
    seen: list[str] = []
    for vtype in VariableType:
        if vtype.category not in seen:
            seen.append(vtype.category)
    return seen
