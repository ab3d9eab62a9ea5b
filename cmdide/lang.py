"""Message tables for the user interface, and plugin hooks."""

import logging
import re
import subprocess
from dataclasses import dataclass

_log = logging.getLogger(__name__)

DEFAULT_LANGUAGE_FILE = "lang_mr.ini"
LANGUAGE_EXTENSION = ".lang"
HOOKS_FILE = "plugins.ini"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _as_lines(lines):
    if isinstance(lines, str):
        return lines.splitlines()
    return lines


def _key_values(lines):
    """Yield (key, value) from ``key=value`` lines, skipping blanks and comments."""
    for raw in _as_lines(lines):
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            yield key, value


def _message_number(key):
    match = _LEADING_INT.match(key)
    if match is None:
        raise ValueError(f"invalid message number: {key!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"message number out of range: {key!r}")
    return number


class Language:
    """A numbered table of interface messages."""

    def __init__(self, entries=None):
        self.entries = dict(entries or {})

    def __len__(self):
        return len(self.entries)

    @classmethod
    def parse(cls, lines):
        """Build a table from ``number=text`` lines; '#' lines are comments."""
        return cls(
            {_message_number(key): value for key, value in _key_values(lines)}
        )

    @classmethod
    def load(cls, path):
        """Read a ``.lang`` file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8", errors="replace") as handle:
            language = cls.parse(handle)
        _log.info("loaded %d entries from %s", len(language), path)
        return language

    def text(self, number):
        """Return message ``number``, or a ``[missing:N]`` marker."""
        return self.entries.get(number, f"[missing:{number}]")


def load_default_language(settings):
    """Load the language named in the settings; an empty table if it is absent."""
    code = settings.read_first_line(DEFAULT_LANGUAGE_FILE)
    path = settings.path(code + LANGUAGE_EXTENSION)
    try:
        return Language.load(path)
    except OSError:
        _log.warning("cannot open %s", path)
        return Language()


def set_default_language(settings, code):
    """Record ``code`` as the language to load at start-up."""
    settings.write_text(DEFAULT_LANGUAGE_FILE, code)


@dataclass(frozen=True)
class Hook:
    """A command run when an editor event such as onSave or onRun fires."""

    event: str
    command: str


def parse_hooks(lines):
    """Read ``event=command`` lines into hooks, in file order."""
    return [Hook(event, command) for event, command in _key_values(lines)]


def load_hooks(path):
    """Read hooks from ``path``; no file means no hooks."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            hooks = parse_hooks(handle)
    except FileNotFoundError:
        _log.info("no %s, skip", path)
        return []
    _log.info("loaded %d hooks", len(hooks))
    return hooks


def _system(command):
    return subprocess.run(command, shell=True, check=False).returncode


def run_hooks(hooks, event, filename, runner=None):
    """Run every hook for ``event`` with the quoted filename appended.

    Returns the command lines that were run.
    """
    runner = runner or _system
    commands = []
    for hook in hooks:
        if hook.event != event:
            continue
        if not hook.command:
            print(f"[Hook] No hook at {event}")
            continue
        command = f'{hook.command} "{filename}"'
        print(f"[Hook] {event} -> {command}")
        runner(command)
        commands.append(command)
    return commands