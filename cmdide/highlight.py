"""Syntax colouring of one line of C++ source."""

from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from operator import itemgetter

from .keywords import FUNCTION_KEYWORDS, TYPE_KEYWORDS, is_operator

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | frozenset(".LFUxXbBABCDEabcdef")


class TokenKind(Enum):
    """Kinds of highlighted text; each value names the View field holding its colour."""

    CODE = "code"
    COMMENT = "comment"
    DIRECTIVE = "directive"
    STRING = "string"
    NUMBER = "number"
    SIGN = "sign"
    TYPE = "datatype"
    FUNCTION = "function"

    def color(self, view):
        """Return the attribute ``view`` assigns to this kind."""
        return getattr(view, self.value)


@dataclass(frozen=True)
class Span:
    """A run of characters drawn in one colour."""

    start: int
    text: str
    kind: TokenKind

    @property
    def end(self):
        return self.start + len(self.text)


@dataclass(frozen=True)
class LineHighlight:
    """The coloured spans of a line and the state it leaves behind.

    ``in_block_comment`` carries over to the next line; ``pairing`` says whether
    bracket and quote pairing is allowed at the cursor; ``keyword`` is the last
    keyword seen on the cursor line, used to look up documentation.
    """

    spans: tuple
    in_block_comment: bool
    pairing: bool
    keyword: str


def _recolor(cells, count, kind):
    for cell in cells[len(cells) - count :]:
        cell[1] = kind


def highlight_line(line, in_block_comment=False, cursor_col=None):
    """Colour ``line``; ``cursor_col`` is given only for the line holding the cursor."""
    on_cursor = cursor_col is not None
    cells = []
    color = TokenKind.COMMENT if in_block_comment else TokenKind.CODE
    block = in_block_comment
    define = string = line_comment = number = False
    prev = ""
    word = ""
    last_keyword = ""
    pairing = True
    last_index = len(line) - 1

    for index, ch in enumerate(line):
        emitted = False
        if block:
            if prev == "*" and ch == "/":
                block = False
                color = TokenKind.CODE
            else:
                if on_cursor and index == cursor_col:
                    pairing = False
                cells.append([ch, color])
                emitted = True
        elif not string and not line_comment and prev == "/" and ch == "*":
            block = True
            if on_cursor and index == cursor_col:
                pairing = False
            color = TokenKind.COMMENT
            cells.append([ch, color])
            emitted = True
        elif not (define or string or line_comment) and ch == "#" and prev != "'":
            define = True
            if on_cursor:
                pairing = False
            color = TokenKind.DIRECTIVE
        elif not (define or line_comment) and prev != "\\" and ch == '"':
            string = not string
            if not string:
                cells.append([ch, color])
                emitted = True
                if on_cursor and index > cursor_col:
                    pairing = True
            elif on_cursor and index <= cursor_col:
                pairing = False
            color = TokenKind.STRING if string else TokenKind.CODE
        elif not (define or string or line_comment) and prev == "/" and ch == "/":
            emitted = True
            color = TokenKind.COMMENT
            if cells:
                cells[-1][1] = TokenKind.COMMENT
            cells.append([ch, TokenKind.COMMENT])
            line_comment = True
            if on_cursor and index <= cursor_col:
                pairing = False
        elif (
            not number
            and ch in _DIGITS
            and (is_operator(prev) or prev in ("", " "))
            and not (define or string or line_comment)
        ):
            number = True
            color = TokenKind.NUMBER
        elif number and ch not in _NUMBER_CHARS:
            number = False
            color = TokenKind.CODE

        if not (define or string or line_comment or block or number):
            if is_operator(ch) or ch == " " or index == last_index:
                if word in TYPE_KEYWORDS:
                    _recolor(cells, len(word), TokenKind.TYPE)
                    color = TokenKind.CODE
                    last_keyword = word
                elif word in FUNCTION_KEYWORDS:
                    _recolor(cells, len(word), TokenKind.FUNCTION)
                    color = TokenKind.CODE
                    last_keyword = word
                if is_operator(ch):
                    color = TokenKind.SIGN
                word = ""
            else:
                color = TokenKind.CODE
                word += ch

        prev = ch
        if not emitted:
            cells.append([ch, color])

    spans = []
    start = 0
    for kind, group in groupby(cells, key=itemgetter(1)):
        text = "".join(ch for ch, _ in group)
        spans.append(Span(start, text, kind))
        start += len(text)

    return LineHighlight(
        spans=tuple(spans),
        in_block_comment=block,
        pairing=pairing,
        keyword=last_keyword if on_cursor else "",
    )