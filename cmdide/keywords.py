"""C++ keyword tables used for highlighting and completion."""

TYPE_KEYWORDS = frozenset(
    (
        "int", "long", "double", "char", "short",
        "float", "string", "list", "queue", "bool",
        "unordered_map", "map", "pair", "unsigned", "signed",
        "stack", "vector", "set", "multiset", "tuple",
        "array", "deque", "unordered_set", "bitset", "struct",
        "void", "const", "constexpr", "inline", "register",
        "namespace", "static", "priority_queue", "auto",
        "class", "public", "volatile", "protected", "template",
        "wchar_t", "wstring", "__int128",
    )
)

FUNCTION_KEYWORDS = frozenset(
    (
        "sort", "unique", "next_permutation", "__builtin_popcount", "__builtin_ctz",
        "__builtin_clz", "min_element", "max_element", "nth_element", "for",
        "while", "do", "try", "goto", "default",
        "switch", "case", "break", "continue", "if",
        "else", "return", "exit", "catch", "throw",
        "virtual", "operator", "typedef", "friend",
        "new", "extern", "enum", "sizeof", "private",
        "asm", "delete", "union", "static_cast", "reinterpret_cast",
        "NULL", "nullptr",
    )
)

OPERATORS = frozenset("+-*/%^|{}[]()&!~<>,.=;:?")

# Completion candidates in a fixed order: type keywords first, then the rest.
_COMPLETION_ORDER = tuple(sorted(TYPE_KEYWORDS)) + tuple(sorted(FUNCTION_KEYWORDS))


def find_completion(prefix):
    """Return a keyword starting with ``prefix``, or '' if none (or prefix is empty)."""
    if not prefix:
        return ""
    return next((word for word in _COMPLETION_ORDER if word.startswith(prefix)), "")


def is_operator(char):
    """Return True if ``char`` is one of the highlighted operator characters."""
    return char in OPERATORS