"""Rename every identifier in a C++ source to a random name and add #defines."""

import random
import string
import sys

_NAME_ALPHABET = string.digits + string.ascii_lowercase
_WHITESPACE = " \t\n\v\f\r"
_FOLD_LIMIT = 150


def random_name(rng):
    """Return a ten-character name: a lowercase letter then nine base-36 digits."""
    return rng.choice(string.ascii_lowercase) + "".join(
        rng.choice(_NAME_ALPHABET) for _ in range(9)
    )


def _is_word_char(char):
    return char == "_" or (char.isascii() and char.isalnum())


def is_identifier(token):
    """Return True if ``token`` is a C identifier."""
    if not token:
        return False
    first = token[0]
    if not (first == "_" or (first.isascii() and first.isalpha())):
        return False
    return all(_is_word_char(char) for char in token)


class _Obfuscator:
    def __init__(self, content, rng):
        self.content = content
        self.rng = rng
        self.names = {}
        self.parts = []
        self.line_length = 0
        self.token = ""

    def write(self, text):
        self.parts.append(text)
        self.line_length += len(text)

    def flush(self, rename=True):
        if not self.token:
            return
        token = self.token
        if rename and is_identifier(token):
            if token not in self.names:
                self.names[token] = random_name(self.rng)
            token = self.names[token]
        self.write(token)
        self.token = ""

    def unescaped(self, pos):
        count = 0
        pos -= 1
        while pos >= 0 and self.content[pos] == "\\":
            count += 1
            pos -= 1
        return count % 2 == 0

    def run(self):
        content = self.content
        size = len(content)
        in_string = in_comment = in_macro = False
        quote = ""
        last = ""
        line_macro = False
        seen_nonspace = False
        i = 0
        while i < size:
            c = content[i]
            here = i
            i += 1
            following = content[i] if i < size else ""

            if c in "\"'" and self.unescaped(here):
                if not in_string and not in_comment and not in_macro:
                    self.flush()
                    in_string = True
                    quote = c
                elif in_string and c == quote:
                    in_string = False
                self.write(c)
                continue
            if in_string:
                self.write(c)
                continue

            if not in_macro and c == "/" and following in ("/", "*"):
                in_comment = True
            if in_comment:
                self.write(c)
                if c == "\n":
                    in_comment = False
                    self.line_length = 0
                    line_macro = False
                    seen_nonspace = False
                elif c == "*" and following == "/":
                    self.write(following)
                    i += 1
                    in_comment = False
                continue

            if c == "#":
                if not seen_nonspace:
                    line_macro = True
                in_macro = True
                self.flush(rename=False)
            if in_macro:
                self.write(c)
                if c == "\n":
                    in_macro = False
                    self.line_length = 0
                    line_macro = False
                    seen_nonspace = False
                continue

            if _is_word_char(c):
                self.token += c
            else:
                self.flush()
                if c in _WHITESPACE:
                    if c == "\n":
                        if self.line_length <= _FOLD_LIMIT and not line_macro:
                            if last not in (" ", "\n"):
                                self.write(" ")
                        else:
                            self.write("\n")
                            self.line_length = 0
                            line_macro = False
                            seen_nonspace = False
                    elif last not in (" ", "\n"):
                        self.write(" ")
                else:
                    self.write(c)
                    if not seen_nonspace:
                        seen_nonspace = True
                        if c == "#":
                            line_macro = True
            last = c

        self.flush()
        header = "".join(
            f"#define {new} {old}\n" for old, new in sorted(self.names.items())
        )
        return header + "".join(self.parts)


def _obfuscate(content, rng):
    worker = _Obfuscator(content, rng)
    return worker.run(), worker.names


def obfuscate(content, rng=None):
    """Return ``content`` with identifiers renamed and a #define per name prepended."""
    text, _ = _obfuscate(content, rng or random.Random())
    return text


def main(argv=None):
    """Command entry: ``<input_file> <output_file>``; asks for them if not given."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("CodeObfuscator")
    if len(args) != 2:
        print("Usage: cmdide-obfuscate <input_file> <output_file>", file=sys.stderr)
        print("input file and output file names on two lines:")
        source = input()
        destination = input()
    else:
        source, destination = args
    try:
        with open(source, encoding="latin-1") as handle:
            content = handle.read()
    except OSError:
        print("Error opening input file", file=sys.stderr)
        return 1
    text, names = _obfuscate(content, random.Random())
    print(f"map size:{len(names)}")
    try:
        with open(destination, "w", encoding="latin-1") as handle:
            handle.write(text)
    except OSError:
        print("Error opening output file", file=sys.stderr)
        return 1
    print("Obfuscation completed successfully")
    return 0