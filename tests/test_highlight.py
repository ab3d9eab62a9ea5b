import pytest

from cmdide.highlight import LineHighlight, Span, TokenKind, highlight_line
from cmdide.view import View


def kinds(result):
    return [(span.text, span.kind) for span in result.spans]


@pytest.mark.parametrize(
    "line",
    [
        "int main() { return 0; }",
        '#include "a.h"',
        'printf("%d\\n", x); // done',
        "/* start",
        "x = 0x1F + 3.5F;",
        "",
    ],
)
def test_spans_cover_the_line(line):
    result = highlight_line(line)
    assert "".join(span.text for span in result.spans) == line
    position = 0
    for span in result.spans:
        assert span.start == position
        assert span.text
        position = span.end


def test_adjacent_spans_differ_in_kind():
    result = highlight_line("int a = 1; // c")
    pairs = zip(result.spans, result.spans[1:])
    assert all(first.kind is not second.kind for first, second in pairs)


def test_type_keyword():
    result = highlight_line("int x;")
    assert kinds(result) == [
        ("int", TokenKind.TYPE),
        (" x", TokenKind.CODE),
        (";", TokenKind.SIGN),
    ]


def test_line_comment_is_one_span():
    result = highlight_line("// hi")
    assert kinds(result) == [("// hi", TokenKind.COMMENT)]


def test_directive_line():
    result = highlight_line("#include <x>")
    assert kinds(result) == [("#include <x>", TokenKind.DIRECTIVE)]


def test_string_literal():
    result = highlight_line('"ab"')
    assert kinds(result) == [('"ab"', TokenKind.STRING)]


def test_number_span():
    result = highlight_line("x = 42;")
    numbers = [span.text for span in result.spans if span.kind is TokenKind.NUMBER]
    assert numbers == ["42"]


def test_block_comment_carries_over():
    first = highlight_line("/* a")
    assert first.in_block_comment is True
    assert first.spans[-1].kind is TokenKind.COMMENT
    second = highlight_line("b */", in_block_comment=True)
    assert second.in_block_comment is False
    assert second.spans[0] == Span(0, "b *", TokenKind.COMMENT)


def test_keyword_reported_only_on_cursor_line():
    assert highlight_line("return x;", cursor_col=0).keyword == "return"
    assert highlight_line("return x;").keyword == ""
    assert highlight_line("x = y", cursor_col=0).keyword == ""


def test_pairing_disabled_inside_string():
    assert highlight_line('"ab', cursor_col=2).pairing is False
    assert highlight_line("ab", cursor_col=1).pairing is True


def test_pairing_disabled_on_directive_line():
    assert highlight_line("#x", cursor_col=0).pairing is False


def test_pairing_untouched_off_cursor_line():
    result = highlight_line('"ab')
    assert isinstance(result, LineHighlight)
    assert result.pairing is True


def test_kind_colour_comes_from_view():
    view = View()
    assert TokenKind.TYPE.color(view) == view.datatype == 9
    assert TokenKind.CODE.color(view) == 15