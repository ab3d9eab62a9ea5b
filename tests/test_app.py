import pytest

from cmdide.app import Editor
from cmdide.buffer import Buffer
from cmdide.lang import Hook
from cmdide.settings import SettingsDir


class FakeScreen:
    def __init__(self, keys, answers=()):
        self.keys = list(keys)
        self.answers = list(answers)
        self.written = []
        self.frames = []

    def read_key(self):
        return self.keys.pop(0)

    def draw(self, frame):
        self.frames.append(frame)

    def clear(self):
        pass

    def write(self, text):
        self.written.append(text)

    def ask(self, prompt, default=""):
        return self.answers.pop(0) if self.answers else default

    def pause(self):
        pass


def make_editor(tmp_path, lines=None, **kwargs):
    return Editor(SettingsDir(tmp_path), buffer=Buffer(lines), **kwargs)


def type_text(editor, text):
    for ch in text:
        assert editor.handle_key(ch)


def test_typing_inserts_characters(tmp_path):
    editor = make_editor(tmp_path)
    type_text(editor, "int")
    assert editor.buffer.lines == ["int"]
    assert editor.buffer.col == 3


def test_typed_bracket_is_paired(tmp_path):
    editor = make_editor(tmp_path)
    editor.handle_key("(")
    assert editor.buffer.lines == ["()"]
    assert editor.buffer.col == 1


def test_no_pairing_inside_string(tmp_path):
    editor = make_editor(tmp_path, ['"ab'])
    editor.handle_key("end")
    editor.handle_key("(")
    assert editor.buffer.lines == ['"ab(']


def test_enter_and_backspace_round_trip(tmp_path):
    editor = make_editor(tmp_path, ["abcd"])
    editor.handle_key("right")
    editor.handle_key("right")
    editor.handle_key("enter")
    assert editor.buffer.lines == ["ab", "cd"]
    editor.handle_key("backspace")
    assert editor.buffer.lines == ["abcd"]
    assert (editor.buffer.row, editor.buffer.col) == (0, 2)


def test_f4_completes_keyword(tmp_path):
    editor = make_editor(tmp_path, ["nullp"])
    editor.handle_key("end")
    assert editor.handle_key("f4")
    assert editor.buffer.lines == ["nullptr"]


def test_f3_expands_tabs(tmp_path):
    editor = make_editor(tmp_path, ["\tx"])
    editor.handle_key("f3")
    assert editor.buffer.lines == ["    x"]


def test_dialog_keys_are_not_handled(tmp_path):
    editor = make_editor(tmp_path, ["x"])
    assert editor.handle_key("escape") is False
    assert editor.handle_key("f1") is False
    assert editor.buffer.lines == ["x"]


def test_save_and_load_round_trip(tmp_path):
    editor = make_editor(tmp_path, ["int main()", "{", "}"])
    path = tmp_path / "prog.cpp"
    saved = editor.save(path)
    assert saved == str(path)
    other = make_editor(tmp_path)
    assert other.load(path) == 3
    assert other.buffer.lines == ["int main()", "{", "}"]
    assert other.filename == str(path)


def test_save_without_name_raises(tmp_path):
    editor = make_editor(tmp_path)
    with pytest.raises(ValueError):
        editor.save()


def test_save_uses_cpp_suffix_and_runs_hooks(tmp_path):
    calls = []
    editor = make_editor(tmp_path, ["x"], hooks=[Hook("onSave", "check")])
    editor.runner = calls.append
    editor.filename = str(tmp_path / "prog.txt")
    saved = editor.save()
    assert saved == str(tmp_path / "prog.cpp")
    assert calls == [f'check "{saved}"']


def test_load_missing_file_raises(tmp_path):
    editor = make_editor(tmp_path)
    with pytest.raises(OSError):
        editor.load(tmp_path / "absent.cpp")


def test_render_shows_documentation_for_keyword(tmp_path):
    editor = make_editor(tmp_path, ["sort("], docs={"sort": ["sorts a range"]})
    frame = editor.render()
    assert frame.doc == ["sorts a range"]
    assert frame.cursor == (0, 3)


def test_run_insert_mode(tmp_path):
    editor = make_editor(tmp_path)
    screen = FakeScreen(["f1", "x", "y", "enter", "z", "escape", "escape", "2"])
    editor.run(screen)
    assert editor.buffer.lines == ["xy", "z", ""]
    assert (editor.buffer.row, editor.buffer.col) == (0, 0)


def test_run_find_moves_cursor(tmp_path):
    editor = make_editor(tmp_path, ["aaa", "xbx"])
    screen = FakeScreen(["escape", "d", "escape", "2"], answers=["b"])
    editor.run(screen)
    assert (editor.buffer.row, editor.buffer.col) == (1, 1)


def test_run_replace_all(tmp_path):
    editor = make_editor(tmp_path, ["a a", "a"])
    screen = FakeScreen(["escape", "f", "2", "escape", "2"], answers=["a", "b"])
    editor.run(screen)
    assert editor.buffer.lines == ["b b", "b"]


def test_run_goto_line(tmp_path):
    editor = make_editor(tmp_path, ["0", "1", "2"])
    screen = FakeScreen(["escape", "9", "escape", "2"], answers=["2"])
    editor.run(screen)
    assert editor.buffer.row == 2
    assert editor.buffer.top == 2


def test_run_save_menu_writes_file(tmp_path):
    editor = make_editor(tmp_path, ["hello"])
    path = tmp_path / "out.cpp"
    screen = FakeScreen(["escape", "3", "escape", "2"], answers=[str(path)])
    editor.run(screen)
    assert path.read_text(encoding="utf-8") == "hello"
    assert editor.filename == str(path)