import pytest

from cmdide.settings import SettingsDir
from cmdide.view import View, load_default_view, set_default_view


def test_builtin_view():
    view = View()
    assert (
        view.function,
        view.datatype,
        view.line_number,
        view.code,
        view.string,
        view.comment,
        view.directive,
        view.sign,
        view.number,
    ) == (7, 9, 7, 15, 1, 3, 2, 12, 5)
    assert (view.name, view.author, view.about) == (
        "Classic Plus",
        "__builtin__",
        "Dev-C++ 5.11",
    )


def test_parse_full_view():
    view = View.parse("1 2 3 4 5 6 7 8 9\nDark\nme\nnotes\n")
    assert view == View(1, 2, 3, 4, 5, 6, 7, 8, 9, "Dark", "me", "notes")


def test_parse_numbers_across_lines_and_ignores_rest_of_line():
    view = View.parse("1 2 3\n4 5 6\n7 8 9 extra\nName\nAuth\nAbout")
    assert view == View(1, 2, 3, 4, 5, 6, 7, 8, 9, "Name", "Auth", "About")


def test_parse_missing_metadata_is_empty():
    view = View.parse("1 2 3 4 5 6 7 8 9")
    assert (view.name, view.author, view.about) == ("", "", "")


def test_parse_too_few_numbers_raises():
    with pytest.raises(ValueError):
        View.parse("1 2 3\n")


def test_parse_non_numeric_raises():
    with pytest.raises(ValueError):
        View.parse("1 2 x 4 5 6 7 8 9\nn\na\nb")


def test_default_view_round_trip(tmp_path):
    settings = SettingsDir(tmp_path)
    original = View(10, 11, 12, 13, 14, 15, 1, 2, 3, "Mine", "someone", "test")
    (tmp_path / "mine.view").write_text(
        "10 11 12 13 14 15 1 2 3\nMine\nsomeone\ntest\n", encoding="utf-8"
    )
    set_default_view(settings, "mine")
    assert load_default_view(settings) == original


def test_default_view_missing_file_is_builtin(tmp_path):
    settings = SettingsDir(tmp_path)
    set_default_view(settings, "absent")
    assert load_default_view(settings) == View()