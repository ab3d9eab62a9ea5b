"""Access to the program's directory of small settings files."""

from pathlib import Path


class SettingsDir:
    """A directory holding the editor's ``.ini``, ``.lang`` and ``.view`` files."""

    def __init__(self, root):
        self.root = Path(root)

    def __repr__(self):
        return f"SettingsDir({str(self.root)!r})"

    def path(self, name):
        """Return the path of the named settings file."""
        return self.root / name

    def read_first_line(self, name):
        """Return the first line of the named file, or '' if it does not exist."""
        try:
            with open(self.path(name), encoding="utf-8", errors="replace") as handle:
                return handle.readline().rstrip("\r\n")
        except FileNotFoundError:
            return ""

    def write_text(self, name, value):
        """Replace the named file's contents with ``value`` exactly."""
        with open(self.path(name), "w", encoding="utf-8", newline="") as handle:
            handle.write(value)

    def files_with_extension(self, extension):
        """Return the sorted names of plain files ending in ``extension``."""
        try:
            entries = list(self.root.iterdir())
        except (FileNotFoundError, NotADirectoryError):
            return []
        return sorted(
            entry.name
            for entry in entries
            if entry.is_file() and entry.name.endswith(extension)
        )