import pytest

from wolfcast.colornames import lookup_color


@pytest.mark.parametrize(
    "name, value",
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray100", 0xFFFFFF),
    ],
)
def test_known_colors(name, value):
    assert lookup_color(name) == value


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_none_means_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_first_entry_wins_for_duplicate_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert all((v & 0xFF) == ((v >> 8) & 0xFF) == (v >> 16) for v in values)


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("navy blue", "navyblue"),
        ("light green", "lightgreen"),
        ("dark red", "darkred"),
        ("dodger blue", "dodgerblue"),
    ],
)
def test_spaced_and_joined_names_match(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("name", ["red", "tomato", "khaki", "plum", "wheat"])
def test_values_fit_in_24_bits(name):
    for suffix in ("", "1", "2", "3", "4"):
        assert 0 <= lookup_color(name + suffix) <= 0xFFFFFF