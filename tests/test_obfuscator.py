import random
import re
import string

import pytest

from cmdide.obfuscator import is_identifier, main, obfuscate, random_name


def split_output(text):
    lines = text.split("\n")
    header = [line for line in lines if line.startswith("#define ")]
    body = "\n".join(lines[len(header):])
    mapping = {}
    for line in header:
        _, new, old = line.split(" ")
        mapping[new] = old
    return header, mapping, body


def restore(body, mapping):
    return re.sub(r"[A-Za-z_]\w*", lambda m: mapping.get(m.group(), m.group()), body)


def test_random_name_shape():
    rng = random.Random(7)
    for _ in range(50):
        name = random_name(rng)
        assert len(name) == 10
        assert name[0] in string.ascii_lowercase
        assert set(name) <= set(string.ascii_lowercase + string.digits)
        assert is_identifier(name)


@pytest.mark.parametrize(
    "token, expected",
    [("_a1", True), ("main", True), ("1a", False), ("", False), ("a-b", False)],
)
def test_is_identifier(token, expected):
    assert is_identifier(token) is expected


def test_round_trip_restores_source():
    content = "int main(){return 0;}"
    header, mapping, body = split_output(obfuscate(content, random.Random(1)))
    assert len(header) == 3
    assert [line.split(" ")[2] for line in header] == ["int", "main", "return"]
    assert restore(body, mapping) == content


def test_numbers_are_not_renamed():
    _, mapping, body = split_output(obfuscate("x=10;", random.Random(2)))
    assert list(mapping.values()) == ["x"]
    assert body.endswith("=10;")


def test_same_seed_same_output():
    content = "int a; int b;"
    first = obfuscate(content, random.Random(3))
    second = obfuscate(content, random.Random(3))
    assert first == second
    header, mapping, body = split_output(first)
    assert [line.split(" ")[2] for line in header] == ["a", "b", "int"]
    assert restore(body, mapping) == content


def test_strings_are_kept():
    _, mapping, body = split_output(obfuscate('puts("hi there");', random.Random(4)))
    assert '"hi there"' in body
    assert list(mapping.values()) == ["puts"]


def test_short_lines_are_folded():
    _, mapping, body = split_output(obfuscate("a\nb", random.Random(5)))
    assert "\n" not in body
    assert restore(body, mapping) == "a b"


def test_long_lines_keep_newline():
    content = "a " * 100 + "\nb"
    _, mapping, body = split_output(obfuscate(content, random.Random(6)))
    assert "\n" in body
    assert restore(body, mapping).split("\n")[-1] == "b"


def test_preprocessor_line_is_untouched():
    _, mapping, body = split_output(obfuscate("#include <x>\nint a;", random.Random(8)))
    assert body.startswith("#include <x>\n")
    assert sorted(mapping.values()) == ["a", "int"]
    assert restore(body, mapping) == "#include <x>\nint a;"


def test_main_writes_output(tmp_path):
    source = tmp_path / "in.cpp"
    destination = tmp_path / "out.cpp"
    source.write_text("int main(){return 0;}", encoding="latin-1")
    assert main([str(source), str(destination)]) == 0
    _, mapping, body = split_output(destination.read_text(encoding="latin-1"))
    assert restore(body, mapping) == "int main(){return 0;}"


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "none.cpp"), str(tmp_path / "out.cpp")]) == 1
    assert not (tmp_path / "out.cpp").exists()