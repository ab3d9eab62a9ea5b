"""Layout and input state for in-console dialog boxes."""

from dataclasses import dataclass
from enum import Enum

CANCELLED = -1


class DialogType(Enum):
    OK = "ok"
    YESNO = "yesno"
    SURCAN = "surcan"
    INPUT = "input"
    CUSTOM = "custom"


def _half(n):
    return n // 2 if n >= 0 else -((-n) // 2)


def word_wrap(text, max_width):
    """Greedily wrap words into lines of at most ``max_width``; newlines force breaks."""
    lines = []
    line = ""
    word = ""

    def place(current, pending):
        if not current:
            return current, pending
        if len(current) + 1 + len(pending) <= max_width:
            return current + " " + pending, None
        lines.append(current)
        return pending, None

    for ch in text:
        if ch in (" ", "\n"):
            if word:
                if not line:
                    line = word
                else:
                    line, _ = place(line, word)
                word = ""
            if ch == "\n":
                lines.append(line)
                line = ""
        else:
            word += ch
    if word:
        line = word if not line else place(line, word)[0]
    if line:
        lines.append(line)
    return lines


def default_buttons(dialog_type):
    """Return the (label, value) buttons used when none are supplied."""
    if dialog_type is DialogType.YESNO:
        return [("是", 1), ("否", 0)]
    if dialog_type is DialogType.SURCAN:
        return [("确定", 1), ("消除", 0)]
    return [("确定", 1)]


@dataclass(frozen=True)
class DialogGeometry:
    left: int
    top: int
    width: int
    height: int
    lines: tuple

    @property
    def button_row(self):
        return self.top + self.height - 3

    @property
    def input_origin(self):
        return self.left + 3, self.top + len(self.lines) + 1

    @property
    def input_width(self):
        return self.width - 6


def dialog_geometry(message, dialog_type, console_width, console_height):
    """Compute the centred box for ``message`` on a console of the given size."""
    max_width = min(console_width - 4, 80)
    lines = word_wrap(message, max_width - 8)
    first = len(lines[0]) if lines else 0
    width = max(30, min(max_width, first + 8))
    if dialog_type is DialogType.INPUT:
        height = 8
    else:
        height = 6 + len(lines) - 1
    left = _half(console_width - width)
    top = _half(console_height - height)
    if top + height >= console_height:
        height = console_height - top - 2
    return DialogGeometry(left, top, width, height, tuple(lines))


class ButtonSelector:
    """Tracks the highlighted button; keys: 'left', 'right', 'enter', 'escape'."""

    def __init__(self, buttons):
        self.buttons = list(buttons)
        if not self.buttons:
            raise ValueError("a dialog needs at least one button")
        self.selected = 0

    def press(self, key):
        """Apply a key; return the chosen value, -1 on escape, or None to continue."""
        count = len(self.buttons)
        if key == "left":
            self.selected = (self.selected - 1) % count
        elif key == "right":
            self.selected = (self.selected + 1) % count
        elif key == "enter":
            return self.buttons[self.selected][1]
        elif key == "escape":
            return CANCELLED
        return None

    def layout(self, left, box_width):
        """Return (x, text, selected) for each button centred in the box."""
        total = sum(len(label) + 4 for label, _ in self.buttons)
        x = left + _half(box_width - total)
        placed = []
        for index, (label, _) in enumerate(self.buttons):
            text = f" {label} "
            placed.append((x, text, index == self.selected))
            x += len(text) + 2
        return placed


class LineInput:
    """A three-row edit area whose rows are joined into one value."""

    ROWS = 3

    def __init__(self, width):
        self.width = width
        self.lines = ["", "", "", ""]
        self.row = 0
        self.column = 0
        self.done = False
        self.cancelled = False

    def press(self, key):
        """Apply a key name or printable character; return True once finished."""
        line = self.lines[self.row]
        if key == "up":
            if self.row > 0:
                self.row -= 1
                self.column = min(self.column, len(self.lines[self.row]))
        elif key == "down":
            if self.row < self.ROWS - 1:
                self.row += 1
                self.column = min(self.column, len(self.lines[self.row]))
        elif key == "left":
            if self.column > 0:
                self.column -= 1
        elif key == "right":
            if self.column < len(line):
                self.column += 1
        elif key == "enter":
            self.done = True
        elif key == "escape":
            self.done = True
            self.cancelled = True
        elif key == "backspace":
            if self.column > 0:
                self.lines[self.row] = line[: self.column - 1] + line[self.column :]
                self.column -= 1
            elif self.row > 0:
                self.column = len(self.lines[self.row - 1])
                self.lines[self.row - 1] += line
                self.lines[self.row] = ""
                self.row -= 1
        elif len(key) == 1 and 32 <= ord(key) <= 126:
            if len(line) < self.width:
                self.lines[self.row] = line[: self.column] + key + line[self.column :]
                self.column += 1
        return self.done

    @property
    def display_rows(self):
        return [row.ljust(self.width, "_") for row in self.lines[: self.ROWS]]

    def value(self):
        """Return the joined text, or None if the input was cancelled."""
        if self.cancelled:
            return None
        return "".join(self.lines)