"""The sixteen console colours and text-attribute helpers."""

from enum import IntEnum


class ConsoleColor(IntEnum):
    """Standard console palette, indexed as in a text attribute nibble."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    WHITE = 7
    GRAY = 8
    BRIGHT_BLUE = 9
    BRIGHT_GREEN = 10
    BRIGHT_CYAN = 11
    BRIGHT_RED = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_YELLOW = 14
    BRIGHT_WHITE = 15

    @property
    def rgb(self):
        return _PALETTE[self]


_PALETTE = {
    ConsoleColor.BLACK: (0, 0, 0),
    ConsoleColor.BLUE: (0, 0, 128),
    ConsoleColor.GREEN: (0, 128, 0),
    ConsoleColor.CYAN: (0, 128, 128),
    ConsoleColor.RED: (128, 0, 0),
    ConsoleColor.MAGENTA: (128, 0, 128),
    ConsoleColor.YELLOW: (128, 128, 0),
    ConsoleColor.WHITE: (192, 192, 192),
    ConsoleColor.GRAY: (128, 128, 128),
    ConsoleColor.BRIGHT_BLUE: (0, 0, 255),
    ConsoleColor.BRIGHT_GREEN: (0, 255, 0),
    ConsoleColor.BRIGHT_CYAN: (0, 255, 255),
    ConsoleColor.BRIGHT_RED: (255, 0, 0),
    ConsoleColor.BRIGHT_MAGENTA: (255, 0, 255),
    ConsoleColor.BRIGHT_YELLOW: (255, 255, 0),
    ConsoleColor.BRIGHT_WHITE: (255, 255, 255),
}


def nearest_color(r, g, b):
    """Return the palette colour closest to (r, g, b); ties go to the lower index."""
    best = ConsoleColor.BLACK
    best_distance = None
    for color in ConsoleColor:
        cr, cg, cb = color.rgb
        distance = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2
        if best_distance is None or distance < best_distance:
            best, best_distance = color, distance
    return best


def attribute(foreground, background=0):
    """Combine foreground and background indices into one attribute byte."""
    for value in (foreground, background):
        if not 0 <= int(value) <= 15:
            raise ValueError(f"colour index out of range: {value}")
    return (int(background) << 4) | int(foreground)


def split_attribute(value):
    """Split an attribute byte into (foreground, background) colours."""
    if not 0 <= value <= 255:
        raise ValueError(f"attribute out of range: {value}")
    return ConsoleColor(value & 0x0F), ConsoleColor(value >> 4)


def color_test_rows():
    """Return the 256 attribute samples as 16 rows of (attribute, label) pairs."""
    return [
        [(value, f" >{value:03d}< ") for value in range(row * 16, row * 16 + 16)]
        for row in range(16)
    ]