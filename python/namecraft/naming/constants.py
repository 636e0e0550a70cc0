"""
Constants for identifier candidate generation.
"""

MAX_NAME_LENGTH = 50  # Longer candidates are rejected outright
IDEAL_LENGTH_RANGE = (5, 15)  # Bonus window
LONG_NAME_PENALTY_THRESHOLD = 20
VOWEL_RATIO_RANGE = (0.2, 0.6)

BASE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

MAX_PREDICTED_TYPES = 5
MAX_RECOMMENDATIONS = 5
MAX_SELECTED_TRANSLATIONS = 5  # Distinct translations kept from the translator
MAX_RECOMMENDED_TRANSLATIONS = 3  # Of those, how many feed recommendations

SHORTCUT_SLOTS = (1, 2, 3, 4, 5)

# Recommendation bonus when a candidate contains one of these
COMMON_WORDS = [
    "get", "set", "is", "has", "can", "should", "will",
    "user", "data", "info", "config", "handle", "process",
]

# Substring rules for type prediction: any pattern hit adds the types.
# CJK patterns cover phrases that reach the predictor untranslated.
SEMANTIC_RULES = [
    # Quantities
    (["count", "num", "total", "size", "length", "数量", "总数", "大小"], ["count", "int"]),
    # Strings
    (["name", "title", "text", "content", "message", "名称", "标题", "内容"], ["string"]),
    # Booleans
    (["is", "has", "can", "should", "will", "enable", "visible", "是否"], ["bool"]),
    # Collections
    (["list", "array", "items", "collection", "列表", "数组"], ["array"]),
    # Pointers
    (["ptr", "pointer", "ref", "reference"], ["pointer"]),
    # Handles
    (["handle", "handler", "fd", "descriptor"], ["handle"]),
    # Indices
    (["index", "idx", "position", "pos", "索引", "位置"], ["int"]),
    # Constants
    (["const", "constant", "max", "min", "default", "常量", "最大", "最小"], ["const"]),
]

# File extension hints, applied in this order (each prepends its types)
C_FAMILY_EXTENSIONS = {".c", ".cc", ".cpp", ".cxx", ".h", ".hh", ".hpp", ".hxx"}
SCRIPT_EXTENSIONS = {".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"}
PYTHON_EXTENSIONS = {".py", ".pyi"}
JAVA_EXTENSIONS = {".java"}
HEADER_EXTENSIONS = {".h", ".hh", ".hpp", ".hxx"}

EXTENSION_TYPE_HINTS = [
    (C_FAMILY_EXTENSIONS, ["member", "pointer", "static"]),
    (SCRIPT_EXTENSIONS, ["normal", "const"]),
    (PYTHON_EXTENSIONS, ["normal"]),
    (JAVA_EXTENSIONS, ["member", "static"]),
    (HEADER_EXTENSIONS, ["const", "global"]),
]

# Literal heuristics on the untouched phrase (case-sensitive, like identifiers)
FUNCTION_PREFIXES = ("get", "set")
COUNT_SUFFIXES = ("Count", "Size")
BOOL_SUFFIXES = ("Flag", "State")

LANGUAGE_BY_EXTENSION = {
    "js": "JavaScript",
    "ts": "TypeScript",
    "jsx": "React",
    "tsx": "React",
    "py": "Python",
    "java": "Java",
    "c": "C",
    "cpp": "C++",
    "h": "C/C++",
    "cs": "C#",
    "php": "PHP",
    "go": "Go",
    "rs": "Rust",
    "swift": "Swift",
    "kt": "Kotlin",
    "rb": "Ruby",
    "dart": "Dart",
    "vue": "Vue",
}

# Declaration keyword hints, first hit wins
DECLARATION_HINTS = [
    ("constant", ["const ", "final ", "readonly "]),
    ("function", ["function ", "def ", "func "]),
    ("class", ["class ", "interface ", "type "]),
    ("array", ["[]", "array", "list"]),
    ("boolean", ["bool", "is", "has"]),
]

PLACEHOLDER_PATTERN = r"\btemp\b"

# Confidence ladder for translator answers: first option 0.95, then -0.05 each
TRANSLATION_TOP_CONFIDENCE = 0.95
TRANSLATION_CONFIDENCE_STEP = 0.05
TRANSLATION_CACHE_CAPACITY = 256
