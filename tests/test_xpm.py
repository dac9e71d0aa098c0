import pytest

from cubcaster.colors import lookup_color
from cubcaster.xpm import (
    TRANSPARENT,
    XpmError,
    color_value,
    find_unquoted,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_from_data,
)

SMALL = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  one\ttwo   three ") == ["one", "two", "three"]
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"/*"/*'
    assert find_unquoted(text, "/*") == text.rindex("/*")
    assert find_unquoted('"only /* inside"', "/*") == -1


def test_find_unquoted_missing_needle():
    assert find_unquoted("abc", "zz") == -1


def test_strip_comments_keeps_length_and_quotes():
    text = 'x /* comment */ "a//b" // tail\n"c"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "comment" not in stripped
    assert "tail" not in stripped
    assert list(quoted_lines(stripped)) == ["a//b", "c"]


def test_quoted_lines_yields_contents():
    assert list(quoted_lines('x "ab" y "cd" "unterminated')) == ["ab", "cd"]


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")
    assert text_to_rgb("NONE", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_color_value_passes_through_deep_visuals():
    assert color_value(0x123456, 24, (16, 8, 8, 8, 0, 8)) == 0x123456


def test_color_value_packs_565():
    assert color_value(0xFFFFFF, 16, (11, 5, 5, 6, 0, 5)) == 0xFFFF
    assert color_value(0, 16, (11, 5, 5, 6, 0, 5)) == 0


def test_parse_small_image():
    image = parse_xpm(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_multi_char_keys():
    image = xpm_from_data(["1 1 1 3", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == lookup_color("blue")


def test_unknown_pixel_key_is_black():
    image = xpm_from_data(["2 1 1 1", "a c white", "az"])
    assert image.get_pixel(0, 0) == lookup_color("white")
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 2 1 1", "a c red", "a", "a"],
        ["2 2"],
        ["1 1 1 1", "a x red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_bad_data_raises(data):
    with pytest.raises(XpmError):
        xpm_from_data(data)


def test_load_file_matches_in_memory(tmp_path):
    path = tmp_path / "small.xpm"
    body = ",\n".join(f'"{line}"' for line in SMALL)
    path.write_text(f"/* XPM */\nstatic char *small[] = {{\n// rows\n{body}\n}};\n")
    loaded = load_xpm(path)
    assert loaded.to_bytes() == xpm_from_data(SMALL).to_bytes()


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")