"""Short keyword documentation shown under the editor."""


def _next_line(lines):
    raw = next(lines, "")
    return raw.rstrip("\r\n")


def parse_docmap(lines):
    """Read blocks of ``key`` followed by text lines, each block ended by a blank line.

    A blank line where a key is expected ends the table.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    lines = iter(lines)
    docs = {}
    while key := _next_line(lines):
        body = []
        while text := _next_line(lines):
            body.append(text)
        docs[key] = body
    return docs


def load_docmap(path):
    """Read the documentation table from ``path``; a missing file gives an empty table."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_docmap(handle)
    except FileNotFoundError:
        return {}