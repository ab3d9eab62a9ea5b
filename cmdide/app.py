"""The interactive editor: key handling, menus, rendering and start-up."""

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .buffer import Buffer
from .compiler import CONFIG_FILE, CompilerConfig, build, run_process
from .docmap import load_docmap
from .highlight import highlight_line
from .lang import (
    HOOKS_FILE,
    LANGUAGE_EXTENSION,
    Language,
    load_default_language,
    load_hooks,
    run_hooks,
    set_default_language,
)
from .obfuscator import obfuscate
from .settings import SettingsDir
from .style import tidy_file
from .view import VIEW_EXTENSION, View, load_default_view, set_default_view

DOCMAP_FILE = "docmap.ini"
MENU_ATTRIBUTE = 135
STATUS_ATTRIBUTE = 8
DOC_ATTRIBUTE = 120
GUTTER_WIDTH = 3

_MOVES = {
    "up": Buffer.up,
    "down": Buffer.down,
    "left": Buffer.left,
    "right": Buffer.right,
    "home": Buffer.home,
    "end": Buffer.end,
    "pageup": Buffer.page_up,
    "pagedown": Buffer.page_down,
    "backspace": Buffer.backspace,
    "enter": Buffer.enter,
    "f3": Buffer.expand_tabs,
}


@dataclass
class Frame:
    """One screenful: coloured rows, the cursor, status text and documentation."""

    rows: list = field(default_factory=list)
    cursor: tuple = (0, GUTTER_WIDTH)
    status: str = ""
    tip: str = ""
    doc: list = field(default_factory=list)


class Editor:
    """Editor state and the commands reachable from the keyboard."""

    def __init__(
        self,
        settings,
        buffer=None,
        language=None,
        view=None,
        config=None,
        hooks=None,
        docs=None,
    ):
        self.settings = settings
        self.buffer = buffer if buffer is not None else Buffer()
        self.language = language if language is not None else Language()
        self.view = view if view is not None else View()
        self.config = config if config is not None else CompilerConfig()
        self.hooks = list(hooks or [])
        self.docs = dict(docs or {})
        self.filename = ""
        self.runner = None
        self.process_runner = None

    # Keys

    def _cursor_highlight(self):
        buf = self.buffer
        block = False
        for line in buf.lines[buf.top : buf.row]:
            block = highlight_line(line, block).in_block_comment
        return highlight_line(buf.line, block, cursor_col=buf.col)

    def handle_key(self, key):
        """Apply an editing key; return False for keys that open a dialog or are unknown."""
        buf = self.buffer
        if key in _MOVES:
            _MOVES[key](buf)
            return True
        if key == "f4":
            buf.complete()
            return True
        if len(key) != 1:
            return False
        if key == "\x1b":
            return False
        if key == "\t" or key.isprintable():
            pairing = self._cursor_highlight().pairing
            buf.insert_char(key, typed=True, pairing=pairing)
            return True
        return False

    # Files

    def save(self, path=None):
        """Write the buffer; without ``path`` the current name with a .cpp suffix is used."""
        if path is None:
            if not self.filename:
                raise ValueError("no file name")
            stem, dot, _ = self.filename.rpartition(".")
            path = (stem if dot else self.filename) + ".cpp"
        path = str(path)
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(self.buffer.text())
        self.filename = path
        run_hooks(self.hooks, "onSave", path, self.runner)
        return path

    def load(self, path):
        """Replace the buffer with the lines of ``path``; raises OSError if unreadable."""
        path = str(path)
        with open(path, encoding="utf-8", errors="surrogateescape") as handle:
            text = handle.read()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self.filename = path
        self.buffer = Buffer(lines, self.buffer.page_height)
        return len(lines)

    # Rendering

    def status_line(self):
        """Return the cursor and scroll summary shown under the text."""
        buf = self.buffer
        return (
            f"zz:{buf.row},{buf.col} top:{buf.top} "
            f"line:{buf.page_height} vs:{len(buf.lines)}"
        )

    def render(self):
        """Build the frame for the current state."""
        buf = self.buffer
        view = self.view
        rows = []
        block = False
        keyword = ""
        for index in range(buf.page_height + 1):
            number = buf.top + index
            if number >= len(buf.lines):
                rows.append([])
                continue
            on_cursor = number == buf.row
            result = highlight_line(
                buf.lines[number], block, cursor_col=buf.col if on_cursor else None
            )
            block = result.in_block_comment
            if on_cursor:
                keyword = result.keyword
            row = [(f"{number:<3d}", view.line_number)]
            row.extend((span.text, span.kind.color(view)) for span in result.spans)
            rows.append(row)
        return Frame(
            rows=rows,
            cursor=(buf.row - buf.top, buf.col + GUTTER_WIDTH),
            status=self.status_line(),
            tip=f"{self.language.text(200)} doc:{keyword}",
            doc=list(self.docs.get(keyword, [])),
        )

    # Interactive loop

    def run(self, screen):
        """Read keys from ``screen`` and redraw until the user quits."""
        while True:
            screen.draw(self.render())
            key = screen.read_key()
            if self.handle_key(key):
                continue
            if key == "escape":
                if not self._menu(screen):
                    return
            elif key == "f1":
                self._insert_mode(screen)

    def _say(self, screen, text):
        screen.write(text)
        screen.pause()

    def _insert_mode(self, screen):
        buf = self.buffer
        screen.clear()
        screen.write(self.language.text(222))
        pending = ""
        while True:
            key = screen.read_key()
            if key == "enter":
                buf.lines.insert(buf.row, pending)
                buf.row += 1
                pending = ""
            elif len(key) > 1:
                if pending:
                    buf.lines.insert(buf.row, pending)
                break
            elif key == "\t":
                pending += "    "
            else:
                pending += key
        buf.row = buf.col = buf.top = 0

    def _menu(self, screen):
        text = self.language.text
        screen.clear()
        screen.write("\n".join(text(n) for n in (206, 231, 232, 233)))
        choice = screen.read_key()
        actions = {
            "1": self._insert_mode,
            "3": self._menu_save,
            "4": self._menu_load,
            "5": lambda s: self._menu_build(s, False),
            "6": lambda s: self._menu_build(s, True),
            "7": lambda s: self._say(s, "CMD++\nConsole C++ IDE"),
            "8": self._menu_obfuscate,
            "9": self._menu_goto,
            "b": self._view_menu,
            "c": self._menu_style,
            "d": self._menu_find,
            "e": self._menu_find_next,
            "f": self._menu_replace,
            "g": self._language_menu,
            "h": self._menu_flags,
        }
        if choice == "2":
            return False
        action = actions.get(choice)
        if action is not None:
            action(screen)
        screen.clear()
        return True

    def _menu_save(self, screen):
        text = self.language.text
        path = None
        if not self.filename:
            path = screen.ask(text(223))
        try:
            saved = self.save(path)
        except (OSError, ValueError) as error:
            self._say(screen, f"{text(226)}{error}")
            return
        self._say(screen, f"{text(224)}:{saved}\n{text(225)}")

    def _menu_load(self, screen):
        path = screen.ask(self.language.text(223))
        try:
            self.load(path)
        except OSError:
            self.filename = path
            self.buffer = Buffer(None, self.buffer.page_height)
            self._say(screen, f"{self.language.text(226)}{path}")
            return
        screen.pause()

    def _menu_build(self, screen, then_run):
        text = self.language.text
        screen.clear()
        screen.write(text(301))
        run_hooks(self.hooks, "beforeRun", self.filename, self.runner)
        try:
            result = build(self.config, self.filename, self.process_runner)
        except OSError as error:
            self._say(screen, str(error))
            return
        screen.write(f"{text(302)}:{self.config.compiler}")
        screen.write(f"{text(227)}{result.command}")
        screen.write(f"{text(303)}{text(307)}:{result.elapsed_ms}ms")
        if then_run:
            command = f'"{result.output}"'
            screen.write(f"{text(227)}{command}")
            try:
                (self.process_runner or run_process)(command, wait=False)
            except OSError as error:
                screen.write(str(error))
            run_hooks(self.hooks, "onRun", self.filename, self.runner)
        screen.pause()

    def _menu_obfuscate(self, screen):
        text = self.language.text
        destination = screen.ask(text(223))
        try:
            with open(self.filename, encoding="latin-1") as handle:
                content = handle.read()
            with open(destination, "w", encoding="latin-1") as handle:
                handle.write(obfuscate(content))
        except OSError as error:
            self._say(screen, f"{text(228)}{error}")
            return
        self._say(screen, f"{text(228)}0")

    def _menu_style(self, screen):
        text = self.language.text
        destination = screen.ask(text(223))
        try:
            tidy_file(self.filename, destination)
        except OSError as error:
            self._say(screen, f"{text(228)}{error}")
            return
        self._say(screen, f"{text(228)}0")

    def _menu_goto(self, screen):
        answer = screen.ask("cursor line number:")
        try:
            line = int(answer)
        except ValueError:
            line = 0
        self.buffer.goto_line(line)

    def _menu_find(self, screen):
        text = self.language.text
        keyword = screen.ask(text(208))
        if not keyword:
            self._say(screen, text(219))
            return
        found = self.buffer.find(keyword)
        if found is None:
            self._say(screen, f"Not found: {keyword}")
        else:
            screen.write(f"Found at line {found[0]} col {found[1]}")

    def _menu_find_next(self, screen):
        text = self.language.text
        try:
            found = self.buffer.find_next()
        except ValueError:
            self._say(screen, text(215))
            return
        if found is None:
            self._say(screen, text(209))
        else:
            row, col = found
            screen.write(f"{text(218)}{row}{text(216)}{col}{text(217)}{row}")

    def _menu_replace(self, screen):
        text = self.language.text
        old = screen.ask(text(208))
        if not old:
            self._say(screen, text(209))
            return
        new = screen.ask(text(207))
        screen.write(f"{text(210)}\n{text(211)}\n{text(212)}")
        choice = screen.read_key()
        count = 0
        if choice == "1":
            count = self.buffer.replace_first(old, new)
        elif choice == "2":
            count = self.buffer.replace_every(old, new)
        self._say(screen, f"{text(213)}{count}{text(214)}")

    def _menu_flags(self, screen):
        text = self.language.text
        self.config.flags = screen.ask(f"{text(229)}\n{text(230)}", self.config.flags)
        self.config.save(self.settings.path(CONFIG_FILE))

    def _settings_menu(self, screen, base, extension, choose, describe):
        text = self.language.text
        while True:
            screen.write(f"{text(base)}\n0.exit\n1.set\n2.help\n3.now")
            choice = screen.read_key()
            if choice == "1":
                screen.write(text(base + 1))
                for name in self.settings.files_with_extension(extension):
                    screen.write(f" - {name}")
                choose(screen.ask(text(base + 5)))
            elif choice == "2":
                screen.write(f"{text(base + 2)}\n{text(base + 3)}")
            elif choice == "3":
                screen.write(f"{text(base + 4)}\n{describe()}")
            else:
                return

    def _view_menu(self, screen):
        def choose(name):
            set_default_view(self.settings, name)
            self.view = load_default_view(self.settings)

        def describe():
            view = self.view
            return f"name:{view.name}\nauth:{view.author}\nabout:{view.about}"

        self._settings_menu(screen, 400, VIEW_EXTENSION, choose, describe)

    def _language_menu(self, screen):
        def choose(code):
            set_default_language(self.settings, code)
            self.language = load_default_language(self.settings)

        def describe():
            text = self.language.text
            return f"name:{text(101)}\nlocal name:{text(100)}\nabout:{text(102)}"

        self._settings_menu(screen, 500, LANGUAGE_EXTENSION, choose, describe)


_ANSI_ORDER = (0, 4, 2, 6, 1, 5, 3, 7)


def _ansi(attribute):
    fg, bg = attribute & 0x0F, (attribute >> 4) & 0x0F
    fg_code = 30 + _ANSI_ORDER[fg & 7] + (60 if fg & 8 else 0)
    bg_code = 40 + _ANSI_ORDER[bg & 7] + (60 if bg & 8 else 0)
    return f"\x1b[{fg_code};{bg_code}m"


_SEQUENCES = {
    "[A": "up", "[B": "down", "[C": "right", "[D": "left",
    "[H": "home", "[F": "end", "OH": "home", "OF": "end",
    "[1~": "home", "[4~": "end", "[5~": "pageup", "[6~": "pagedown",
    "OP": "f1", "OQ": "f2", "OR": "f3", "OS": "f4",
    "[11~": "f1", "[12~": "f2", "[13~": "f3", "[14~": "f4",
}
_WINDOWS_KEYS = {
    72: "up", 80: "down", 75: "left", 77: "right", 71: "home", 79: "end",
    73: "pageup", 81: "pagedown", 59: "f1", 60: "f2", 61: "f3", 62: "f4",
}
_CONTROL = {"\r": "enter", "\n": "enter", "\x08": "backspace", "\x7f": "backspace",
            "\x1b": "escape"}


class TerminalScreen:
    """Draws frames with ANSI colours and reads single keys from the terminal."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def clear(self):
        self.stream.write("\x1b[0m\x1b[H\x1b[2J")
        self.stream.flush()

    def write(self, text):
        self.stream.write(f"{_ansi(MENU_ATTRIBUTE)}{text}\x1b[0m\n")
        self.stream.flush()

    def draw(self, frame):
        out = ["\x1b[0m\x1b[H\x1b[2J"]
        for row in frame.rows:
            out.extend(f"{_ansi(attr)}{text}" for text, attr in row)
            out.append("\x1b[0m\x1b[K\n")
        out.append(f"{_ansi(STATUS_ATTRIBUTE)}{frame.status}\x1b[0m\n")
        out.append(f"{_ansi(STATUS_ATTRIBUTE)}{frame.tip}\x1b[0m\n")
        out.extend(f"{_ansi(DOC_ATTRIBUTE)}{line}\x1b[0m\n" for line in frame.doc)
        y, x = frame.cursor
        out.append(f"\x1b[{y + 1};{x + 1}H")
        self.stream.write("".join(out))
        self.stream.flush()

    def ask(self, prompt, default=""):
        self.write(prompt if not default else f"{prompt} [{default}]")
        try:
            answer = input()
        except EOFError:
            answer = ""
        return answer or default

    def pause(self):
        self.write("Press any key to continue . . .")
        self.read_key()

    def read_key(self):
        if os.name == "nt":
            return self._read_windows()
        return self._read_posix()

    @staticmethod
    def _read_windows():
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WINDOWS_KEYS.get(ord(msvcrt.getwch()), "")
        if ch == "\x03":
            raise KeyboardInterrupt
        return _CONTROL.get(ch, ch)

    @staticmethod
    def _read_posix():
        import select
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            data = os.read(fd, 1)
            if data == b"\x1b":
                rest = b""
                while select.select([fd], [], [], 0.03)[0]:
                    rest += os.read(fd, 1)
                if not rest:
                    return "escape"
                return _SEQUENCES.get(rest.decode("ascii", "replace"), "")
            first = data[0] if data else 0
            extra = 3 if first >= 0xF0 else 2 if first >= 0xE0 else 1 if first >= 0xC0 else 0
            if extra:
                data += os.read(fd, extra)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        ch = data.decode("utf-8", "replace")
        if ch == "\x03":
            raise KeyboardInterrupt
        return _CONTROL.get(ch, ch)


def main(argv=None):
    """Command entry: ``[settings_dir [file]]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    settings = SettingsDir(args[0] if args else Path.cwd() / "setting")
    height = shutil.get_terminal_size().lines
    editor = Editor(
        settings,
        buffer=Buffer(None, max(1, height - 10)),
        language=load_default_language(settings),
        view=load_default_view(settings),
        config=CompilerConfig.load(settings.path(CONFIG_FILE)),
        hooks=load_hooks(settings.path(HOOKS_FILE)),
        docs=load_docmap(settings.path(DOCMAP_FILE)),
    )
    if len(args) > 1:
        try:
            editor.load(args[1])
        except OSError as error:
            print(error, file=sys.stderr)
            return 1
    screen = TerminalScreen()
    try:
        editor.run(screen)
    except KeyboardInterrupt:
        pass
    screen.clear()
    return 0