import pytest

from wolfcast.gamemap import (
    GameMap,
    MapError,
    check_row_width,
    count_rows,
    load_map,
    parse_map,
)

ROOM = "1 1 1\n1 0 1\n1 1 1\n"


def test_parse_simple_room():
    game_map = parse_map(ROOM, "room")
    assert game_map.width == 3
    assert game_map.height == 3
    assert game_map.name == "room"
    assert game_map.grid == [[1, 1, 1], [1, 0, 1], [1, 1, 1]]
    assert game_map.cell(1, 1) == 0


def test_parse_without_trailing_newline():
    assert parse_map(ROOM.rstrip("\n")).grid == parse_map(ROOM).grid


def test_multi_digit_cells():
    game_map = parse_map("12 1\n1 18\n")
    assert game_map.cell(0, 0) == 12
    assert game_map.cell(1, 1) == 18


def test_count_rows():
    assert count_rows("1 1\n1 1\n") == 2
    assert count_rows("1 1\n1 1") == 2
    assert count_rows("1 8") == 1


def test_count_rows_rejects_letters():
    with pytest.raises(MapError, match="Wrong format file"):
        count_rows("1 a\n")


def test_check_row_width_counts_cells():
    assert check_row_width("1 0 0 1", 1, 3) == 4


@pytest.mark.parametrize(
    "line,row",
    [
        ("1 0 1", 0),  # open cell in the first row
        ("1 0 1", 2),  # open cell in the last row
        ("0 1 1", 1),  # open first cell
        ("1 1 0", 1),  # open last cell
        ("1 1 1 ", 1),  # trailing space
        ("1 8 1", 1),  # 8 cannot start a cell
        ("1 x 1", 1),
        ("", 1),
    ],
)
def test_check_row_width_rejects(line, row):
    with pytest.raises(MapError):
        check_row_width(line, row, 3)


def test_ragged_rows_rejected():
    with pytest.raises(MapError):
        parse_map("1 1 1\n1 0 0 1\n1 1 1\n")


def test_empty_map_rejected():
    with pytest.raises(MapError):
        parse_map("")


def test_spawn_point_is_first_open_cell():
    game_map = parse_map("1 1 1 1\n1 2 0 1\n1 0 0 1\n1 1 1 1\n")
    assert game_map.spawn_point() == (2.5, 1.5)


def test_spawn_point_without_open_cell():
    with pytest.raises(MapError):
        parse_map("1 1\n1 1\n").spawn_point()


def test_cell_out_of_range():
    game_map = GameMap([[1, 1], [1, 1]])
    with pytest.raises(IndexError):
        game_map.cell(-1, 0)
    with pytest.raises(IndexError):
        game_map.cell(0, 2)


def test_load_map(tmp_path):
    path = tmp_path / "level.map"
    path.write_text(ROOM)
    game_map = load_map(path)
    assert game_map.name == str(path)
    assert game_map.grid == parse_map(ROOM).grid


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "missing.map")