from cmdide.settings import SettingsDir


def test_path_is_inside_root(tmp_path):
    settings = SettingsDir(tmp_path)
    assert settings.path("lang_mr.ini") == tmp_path / "lang_mr.ini"


def test_write_then_read_first_line(tmp_path):
    settings = SettingsDir(tmp_path)
    settings.write_text("view_mr.ini", "classic\nsecond")
    assert settings.read_first_line("view_mr.ini") == "classic"


def test_write_text_has_no_trailing_newline(tmp_path):
    settings = SettingsDir(tmp_path)
    settings.write_text("lang_mr.ini", "zh-cn")
    assert (tmp_path / "lang_mr.ini").read_bytes() == b"zh-cn"


def test_read_missing_file_is_empty(tmp_path):
    assert SettingsDir(tmp_path).read_first_line("absent.ini") == ""


def test_read_strips_windows_line_ending(tmp_path):
    (tmp_path / "a.ini").write_bytes(b"value\r\nrest\r\n")
    assert SettingsDir(tmp_path).read_first_line("a.ini") == "value"


def test_files_with_extension_lists_only_matching_files(tmp_path):
    (tmp_path / "b.lang").write_text("")
    (tmp_path / "a.lang").write_text("")
    (tmp_path / "c.view").write_text("")
    (tmp_path / "d.lang").mkdir()
    assert SettingsDir(tmp_path).files_with_extension(".lang") == ["a.lang", "b.lang"]


def test_files_with_extension_on_missing_directory(tmp_path):
    assert SettingsDir(tmp_path / "nothing").files_with_extension(".view") == []