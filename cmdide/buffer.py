"""The text being edited, with its cursor and scroll position."""

from .keywords import find_completion

INDENT = "    "
PAIRS = {"(": ")", "[": "]", '"': '"', "'": "'"}


def _is_word_char(char):
    return char == "_" or (char.isascii() and char.isalnum())


class Buffer:
    """Lines of text, a cursor at (row, col) and the first visible row ``top``."""

    def __init__(self, lines=None, page_height=20):
        self.lines = list(lines) if lines else [""]
        self.page_height = page_height
        self.row = 0
        self.col = 0
        self.top = 0
        self.auto_indent = True
        self._last_find = ""
        self._last_row = -1
        self._last_col = -1

    @property
    def line(self):
        return self.lines[self.row]

    def text(self):
        """Return the whole buffer joined with newlines."""
        return "\n".join(self.lines)

    def _clamp_col(self):
        self.col = min(self.col, len(self.lines[self.row]))

    def _scroll_to(self, row):
        if row < self.top:
            self.top = row
        elif row >= self.top + self.page_height:
            self.top = max(0, row - self.page_height // 2)

    # Cursor movement

    def up(self):
        if self.row > 0:
            self.row -= 1
            self._clamp_col()
            if self.row < self.top:
                self.top = self.row

    def down(self):
        if self.row < len(self.lines) - 1:
            self.row += 1
            self._clamp_col()
        if self.row >= self.top + self.page_height:
            self.top = self.row - self.page_height

    def left(self):
        if self.col > 0:
            self.col -= 1

    def right(self):
        if self.col < len(self.line):
            self.col += 1

    def home(self):
        self.col = 0

    def end(self):
        self.col = len(self.line)

    def page_up(self):
        if self.top > 0:
            self.top -= 1
            self.row = max(0, self.row - 1)
            self._clamp_col()

    def page_down(self):
        if self.top + self.page_height < len(self.lines):
            self.top += 1
            self.row = min(self.row + 1, len(self.lines) - 1)
            self._clamp_col()

    # Editing

    def indent_level(self, line):
        """Indent level (in steps of four columns) of the line before ``line``."""
        if line == 0:
            return 0
        width = 0
        for char in self.lines[line - 1]:
            if char == " ":
                width += 1
            elif char == "\t":
                width += 4
            else:
                break
        return width >> 2

    def enter(self):
        """Split the line at the cursor, auto-indenting the new line."""
        current = self.line
        self.lines[self.row] = current[: self.col]
        self.lines.insert(self.row + 1, current[self.col :])
        self.row += 1
        self.col = 0
        if self.auto_indent:
            level = self.indent_level(self.row)
            if self.lines[self.row - 1].rstrip(" \t").endswith("{"):
                level += 1
            indent = INDENT * level
            self.lines[self.row] = indent + self.lines[self.row]
            self.col = len(indent)
        if self.row > self.top + self.page_height:
            self.top = self.row - self.page_height

    def _insert(self, text):
        line = self.line
        self.lines[self.row] = line[: self.col] + text + line[self.col :]

    def insert_char(self, char, typed=False, pairing=True):
        """Insert ``char`` at the cursor.

        ``typed`` marks a key typed by the user, which enables closing-brace
        dedent and, when ``pairing`` is allowed, bracket and quote pairing.
        """
        if char == "\t":
            self._insert(INDENT)
            self.col += len(INDENT)
        elif char == "}" and typed and self.auto_indent:
            spaces = 0
            for ch in self.line:
                if ch == " ":
                    spaces += 1
                elif ch == "\t":
                    spaces += 4
                else:
                    break
            if self.col <= spaces and spaces >= 4:
                self.lines[self.row] = self.line[4:]
                self.col = max(0, self.col - 4)
            self._insert("}")
            self.col += 1
        elif char in PAIRS and typed and pairing:
            self._insert(char + PAIRS[char])
            self.col += 1
        else:
            self._insert(char)
            self.col += 1

    def backspace(self):
        """Delete the character before the cursor, joining lines at column 0."""
        if self.row >= len(self.lines):
            return
        if self.col > 0:
            line = self.line
            self.lines[self.row] = line[: self.col - 1] + line[self.col :]
            self.col -= 1
        elif self.row > 0:
            previous = self.lines[self.row - 1]
            self.lines[self.row - 1] = previous + self.line
            del self.lines[self.row]
            self.row -= 1
            self.col = len(previous)
            if self.row < self.top:
                self.top = max(0, self.row - self.page_height // 2)

    # Completion

    def current_token(self):
        """Return the identifier characters immediately left of the cursor."""
        if not 0 <= self.row < len(self.lines):
            return ""
        line = self.line
        if self.col > len(line):
            return ""
        start = self.col
        while start > 0 and _is_word_char(line[start - 1]):
            start -= 1
        return line[start : self.col]

    def complete(self):
        """Replace the token at the cursor with a keyword; return True if changed."""
        token = self.current_token()
        completion = find_completion(token)
        if not completion or completion == token:
            return False
        start = max(0, self.col - len(token))
        line = self.line
        self.lines[self.row] = line[:start] + completion + line[start + len(token) :]
        self.col = start + len(completion)
        return True

    # Navigation and search

    def goto_line(self, line):
        """Move to the start of ``line``; an out-of-range line means line 0."""
        if line < 0 or line >= len(self.lines):
            line = 0
        self.top = line
        self.row = line
        self.col = 0

    def _move_to_match(self, row, col):
        self.row, self.col = row, col
        self._scroll_to(row)
        self._last_row, self._last_col = row, col
        return row, col

    def find(self, keyword):
        """Move to the first occurrence of ``keyword``; return (row, col) or None."""
        if not keyword:
            raise ValueError("empty search text")
        for row, line in enumerate(self.lines):
            col = line.find(keyword)
            if col != -1:
                self._last_find = keyword
                return self._move_to_match(row, col)
        return None

    def find_next(self):
        """Move to the next occurrence of the last search; return (row, col) or None."""
        if not self._last_find:
            raise ValueError("no previous search")
        for row in range(self._last_row, len(self.lines)):
            start = self._last_col + 1 if row == self._last_row else 0
            col = self.lines[row].find(self._last_find, start)
            if col != -1:
                return self._move_to_match(row, col)
        return None

    def replace_first(self, old, new):
        """Replace the first occurrence of ``old``; return how many were replaced."""
        if not old:
            raise ValueError("empty search text")
        for row, line in enumerate(self.lines):
            col = line.find(old)
            if col != -1:
                self.lines[row] = line[:col] + new + line[col + len(old) :]
                self.row = row
                self.col = col + len(new)
                self._scroll_to(row)
                return 1
        return 0

    def replace_every(self, old, new):
        """Replace every occurrence of ``old``; return how many were replaced."""
        if not old:
            raise ValueError("empty search text")
        count = 0
        for row, line in enumerate(self.lines):
            found = line.count(old)
            if found:
                self.lines[row] = line.replace(old, new)
                count += found
        return count

    def expand_tabs(self):
        """Replace every tab in the buffer with four spaces."""
        self.lines = [line.replace("\t", INDENT) for line in self.lines]