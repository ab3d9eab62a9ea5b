"""A crude whitespace squeezer for C++ source files."""

import sys

from .strutil import replace_all

_RULES = (
    (" (", "("),
    (" )", ")"),
    (" {", "{"),
    (", ", ","),
    ("; ", ";"),
    ("} ", "}"),
    (" == ", "=="),
    (" < ", "<"),
    (" > ", ">"),
    (" <= ", "<="),
    (" >= ", ">="),
    (" << ", "<<"),
    (" >> ", ">>"),
    (" + ", "+"),
    (" - ", "-"),
    ("\t", "    "),
)


def tidy_source(text):
    """Apply the fixed sequence of spacing rules to ``text``."""
    for old, new in _RULES:
        text = replace_all(text, old, new)
    return text


def tidy_file(source, destination):
    """Tidy the file at ``source`` and write the result to ``destination``."""
    with open(source, encoding="latin-1") as handle:
        text = handle.read()
    with open(destination, "w", encoding="latin-1") as handle:
        handle.write(tidy_source(text))


def main(argv=None):
    """Command entry: ``<input> <output>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("CPP FILE STYLE 源代码格式化\nusage: cmdide-style _input _output")
        return 0
    try:
        tidy_file(args[0], args[1])
    except OSError as error:
        print(f"Failed to open file: {error}", file=sys.stderr)
        return 1
    return 0