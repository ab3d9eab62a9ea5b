"""String replacement helpers."""

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(text):
    return text.translate(_ASCII_LOWER)


def replace_all(text, old, new):
    """Replace every occurrence of ``old`` in ``text`` with ``new``, left to right.

    An empty ``old`` leaves the text unchanged.
    """
    if not old:
        return text
    return text.replace(old, new)


def replace_all_ignore_case(text, old, new):
    """Replace every ASCII-case-insensitive occurrence of ``old`` with ``new``."""
    if not old:
        return text
    folded = _fold(text)
    needle = _fold(old)
    pieces = []
    start = 0
    while (pos := folded.find(needle, start)) != -1:
        pieces.append(text[start:pos])
        pieces.append(new)
        start = pos + len(old)
    pieces.append(text[start:])
    return "".join(pieces)