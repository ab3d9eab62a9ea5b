"""Colour schemes for the editor ("views")."""

import logging
from dataclasses import dataclass

_log = logging.getLogger(__name__)

DEFAULT_VIEW_FILE = "view_mr.ini"
VIEW_EXTENSION = ".view"

_COLOUR_FIELDS = 9


@dataclass
class View:
    """Attributes for each kind of source text, plus descriptive metadata."""

    function: int = 7
    datatype: int = 9
    line_number: int = 7
    code: int = 15
    string: int = 1
    comment: int = 3
    directive: int = 2
    sign: int = 12
    number: int = 5
    name: str = "Classic Plus"
    author: str = "__builtin__"
    about: str = "Dev-C++ 5.11"

    @classmethod
    def parse(cls, text):
        """Read nine colour numbers, then name, author and about lines.

        Whatever follows the ninth number on its line is ignored.
        """
        lines = text.splitlines()
        colours = []
        index = 0
        while len(colours) < _COLOUR_FIELDS:
            if index >= len(lines):
                raise ValueError("view needs nine colour values")
            for token in lines[index].split():
                if len(colours) == _COLOUR_FIELDS:
                    break
                colours.append(_colour(token))
            index += 1
        meta = lines[index : index + 3]
        meta += [""] * (3 - len(meta))
        return cls(*colours, *meta)

    @classmethod
    def load(cls, path):
        """Read a ``.view`` file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8", errors="replace") as handle:
            return cls.parse(handle.read())


def _colour(token):
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"invalid colour value: {token!r}") from None
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"colour value out of range: {token!r}")
    return value


def load_default_view(settings):
    """Load the view named in the settings; the built-in view if it is absent."""
    name = settings.read_first_line(DEFAULT_VIEW_FILE)
    path = settings.path(name + VIEW_EXTENSION)
    try:
        return View.load(path)
    except OSError:
        _log.warning("cannot open %s", path)
        return View()


def set_default_view(settings, name):
    """Record ``name`` as the view to load at start-up."""
    settings.write_text(DEFAULT_VIEW_FILE, name)