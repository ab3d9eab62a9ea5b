"""Conversions between code-page text, Unicode text and UTF-8 bytes."""

import codecs
import locale

CP_ACP = 0
CP_UTF8 = 65001


def _codec(codepage):
    if codepage is None or codepage == CP_ACP:
        name = locale.getpreferredencoding(False)
    elif codepage == CP_UTF8:
        name = "utf-8"
    elif isinstance(codepage, int):
        name = f"cp{codepage}"
    else:
        name = str(codepage)
    return codecs.lookup(name).name


def ansi_to_text(data, codepage=CP_ACP):
    """Decode bytes in the given code page; undecodable bytes become U+FFFD."""
    return bytes(data).decode(_codec(codepage), errors="replace")


def text_to_ansi(text, codepage=CP_ACP):
    """Encode text into the given code page; unmappable characters become '?'."""
    return text.encode(_codec(codepage), errors="replace")


def ansi_to_utf8(data, codepage=CP_ACP):
    """Re-encode code-page bytes as UTF-8 bytes."""
    return ansi_to_text(data, codepage).encode("utf-8")


def utf8_to_ansi(data, codepage=CP_ACP):
    """Re-encode UTF-8 bytes into the given code page."""
    return text_to_ansi(bytes(data).decode("utf-8", errors="replace"), codepage)