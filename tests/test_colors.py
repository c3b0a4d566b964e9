from blockfall import colors
from blockfall.colors import Color, get_cell_colors


def test_palette_has_one_colour_per_cell_value():
    # an empty cell plus seven piece ids
    assert len(get_cell_colors()) == 8


def test_empty_cell_colour_is_dark_grey():
    assert get_cell_colors()[0] == colors.DARK_GREY
    assert colors.DARK_GREY == Color(26, 31, 40, 255)


def test_palette_order_matches_piece_ids():
    palette = get_cell_colors()
    assert palette[1] == colors.GREEN
    assert palette[7] == colors.BLUE


def test_returns_fresh_list_each_call():
    first = get_cell_colors()
    first.clear()
    assert get_cell_colors()[0] == colors.DARK_GREY


def test_alpha_defaults_to_opaque():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)


def test_all_channels_in_byte_range():
    everything = get_cell_colors() + [colors.LIGHT_BLUE, colors.DARK_BLUE]
    for colour in everything:
        assert all(0 <= channel <= 255 for channel in colour)


def test_colour_unpacks_as_tuple():
    r, g, b, a = get_cell_colors()[2]
    assert (r, g, b, a) == (232, 18, 18, 255)
    assert Color(r, g, b, a) == colors.RED