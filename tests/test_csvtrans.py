from cmdide.csvtrans import convert_file, convert_lines, main


def test_single_reading():
    assert list(convert_lines(["好,hao\n"])) == ["好 hao"]


def test_multiple_readings_split_on_slash():
    assert list(convert_lines(["x,a/b"])) == ["x a", "x b"]


def test_trailing_slash_adds_nothing():
    assert list(convert_lines(["x,a/b/"])) == ["x a", "x b"]


def test_double_slash_yields_empty_reading():
    assert list(convert_lines(["x,a//b"])) == ["x a", "x ", "x b"]


def test_line_without_comma_is_skipped():
    assert list(convert_lines(["nocomma", "y,z"])) == ["y z"]


def test_stops_at_empty_line():
    assert list(convert_lines(["a,b", "", "c,d"])) == ["a b"]


def test_convert_file(tmp_path):
    source = tmp_path / "pinyin.csv"
    destination = tmp_path / "pinyin.ini"
    source.write_text("w,p1/p2\nv,q\n", encoding="latin-1")
    assert convert_file(source, destination) == 2
    assert destination.read_text(encoding="latin-1").splitlines() == [
        "w p1",
        "w p2",
        "v q",
    ]


def test_main_with_paths(tmp_path):
    source = tmp_path / "in.csv"
    destination = tmp_path / "out.ini"
    source.write_text("k,m\n", encoding="latin-1")
    assert main([str(source), str(destination)]) == 0
    assert destination.read_text(encoding="latin-1").splitlines() == ["k m"]


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "none.csv"), str(tmp_path / "o.ini")]) == 1