import pytest

from wolfcast.gamemap import GameMap, parse_map
from wolfcast.raycast import WIDTH, Camera, cast_all, cast_ray

ROOM = "1 1 1 1 1\n1 0 0 0 1\n1 0 0 0 1\n1 0 0 0 1\n1 1 1 1 1\n"


@pytest.fixture
def room():
    return parse_map(ROOM)


def test_centre_ray_hits_west_wall(room):
    camera = Camera(2.5, 2.5, -1.0, 0.0, 0.0, 0.66)
    hit = cast_ray(room, camera, 5, 10)
    assert (hit.map_x, hit.map_y) == (0, 2)
    assert hit.side == 0
    assert hit.step_x == -1
    assert hit.perp_wall_dist == pytest.approx(1.5)


def test_opposite_directions_are_symmetric(room):
    west = cast_ray(room, Camera(2.5, 2.5, -1.0, 0.0, 0.0, 0.66), 5, 10)
    east = cast_ray(room, Camera(2.5, 2.5, 1.0, 0.0, 0.0, 0.66), 5, 10)
    assert east.map_x == 4
    assert east.perp_wall_dist == pytest.approx(west.perp_wall_dist)


def test_mirrored_columns_see_same_distance(room):
    camera = Camera(2.5, 2.5, -1.0, 0.0, 0.0, 0.66)
    for column in range(1, 10):
        left = cast_ray(room, camera, column, 10)
        right = cast_ray(room, camera, 10 - column, 10)
        assert left.perp_wall_dist == pytest.approx(right.perp_wall_dist)


def test_vertical_ray_uses_side_one(room):
    camera = Camera(2.5, 2.5, 0.0, 1.0, 0.66, 0.0)
    hit = cast_ray(room, camera, 5, 10)
    assert hit.side == 1
    assert hit.map_y == 4


def test_cast_all_hits_walls(room):
    camera = Camera(2.5, 2.5, -1.0, 0.0, 0.0, 0.66)
    hits = cast_all(room, camera)
    assert len(hits) == WIDTH
    assert [hit.column for hit in hits] == list(range(WIDTH))
    for hit in hits:
        assert room.cell(hit.map_x, hit.map_y) > 0
        assert hit.perp_wall_dist > 0


def test_open_map_raises():
    open_map = GameMap([[0, 0, 0], [0, 0, 0], [0, 0, 0]])
    with pytest.raises(IndexError):
        cast_ray(open_map, Camera(1.5, 1.5, -1.0, 0.0, 0.0, 0.66), 5, 10)