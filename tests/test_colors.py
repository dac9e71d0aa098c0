import pytest

from cubcaster.colors import lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray", 0xBEBEBE),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_means_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NONE") == -1


def test_unknown_name_gives_none():
    assert lookup_color("no-such-colour") is None
    assert lookup_color("") is None


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    grey = lookup_color(f"grey{level}")
    assert gray == grey
    assert 0 <= gray <= 0xFFFFFF


@pytest.mark.parametrize("level", range(101))
def test_gray_levels_have_equal_channels(level):
    value = lookup_color(f"gray{level}")
    red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert red == green == blue


def test_gray_levels_are_non_decreasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("ghost white", "ghostwhite"),
        ("navy blue", "navyblue"),
        ("dark red", "darkred"),
        ("light green", "lightgreen"),
        ("dark gray", "darkgray"),
        ("hot pink", "hotpink"),
    ],
)
def test_spaced_and_joined_forms_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["red", "snow", "bisque", "orange", "tomato"])
def test_numbered_variant_one_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)