"""Convert a ``word,py1/py2`` CSV table into ``word py`` lines."""

import sys


def convert_lines(lines):
    """Yield ``"<word> <pinyin>"`` for every reading; stop at the first empty line."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            return
        word, comma, rest = line.partition(",")
        if not comma or not rest:
            continue
        readings = rest.split("/")
        if rest.endswith("/"):
            readings.pop()
        for reading in readings:
            yield f"{word} {reading}"


def convert_file(source, destination):
    """Convert ``source`` into ``destination``; return the number of records read."""
    count = 0

    def counted(handle):
        nonlocal count
        for line in handle:
            if line.rstrip("\r\n"):
                count += 1
            yield line

    with open(source, encoding="latin-1") as src, open(
        destination, "w", encoding="latin-1"
    ) as dst:
        for entry in convert_lines(counted(src)):
            dst.write(entry + "\n")
    return count


def main(argv=None):
    """Command entry: ``[input.csv [output.ini]]``, defaulting to pinyin files."""
    args = sys.argv[1:] if argv is None else list(argv)
    source = args[0] if len(args) > 0 else "pinyin.csv"
    destination = args[1] if len(args) > 1 else "pinyin.ini"
    try:
        count = convert_file(source, destination)
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"converted {count} records")
    return 0