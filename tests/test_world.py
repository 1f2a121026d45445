import pytest

from wolfcast.gamemap import GameMap
from wolfcast.world import (
    FUSE_TICKS,
    TNT,
    TntFuse,
    explode,
    lerp_tnt,
    shade_by_distance,
)


def _room(width, height, inside=1):
    grid = [[1] * width for _ in range(height)]
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            grid[y][x] = inside
    return GameMap(grid)


def _border(game_map):
    w, h = game_map.width, game_map.height
    return [
        game_map.cell(x, y)
        for y in range(h)
        for x in range(w)
        if x in (0, w - 1) or y in (0, h - 1)
    ]


def test_single_explosion_clears_neighbours_keeps_walls():
    game_map = _room(5, 5)
    game_map.grid[2][2] = TNT
    explode(game_map, 2, 2)
    interior = [game_map.cell(x, y) for y in range(1, 4) for x in range(1, 4)]
    assert interior == [0] * 9
    assert set(_border(game_map)) == {1}


def test_chain_reaction_reaches_touching_tnt():
    game_map = _room(8, 5)
    game_map.grid[2][1] = TNT
    game_map.grid[2][2] = TNT
    explode(game_map, 1, 2)
    assert game_map.cell(3, 2) == 0
    assert game_map.cell(3, 3) == 0
    assert game_map.cell(4, 2) == 1
    assert game_map.cell(6, 2) == 1


def test_tnt_in_wall_is_not_set_off():
    game_map = _room(6, 5)
    game_map.grid[2][0] = TNT
    game_map.grid[2][1] = TNT
    explode(game_map, 1, 2)
    assert game_map.cell(0, 2) == TNT
    assert game_map.cell(1, 2) == 0


def test_explode_on_wall_does_nothing():
    game_map = _room(5, 5)
    before = [row[:] for row in game_map.grid]
    explode(game_map, 0, 2)
    explode(game_map, 2, 4)
    assert game_map.grid == before


def test_fuse_goes_off_after_full_count():
    game_map = _room(5, 5)
    game_map.grid[2][2] = TNT
    fuse = TntFuse(2, 2)
    before = [row[:] for row in game_map.grid]
    results = [fuse.tick(game_map) for _ in range(FUSE_TICKS - 1)]
    assert not any(results)
    assert game_map.grid == before
    assert fuse.tick(game_map) is True
    assert game_map.cell(2, 2) == 0
    assert fuse.iteration == 0
    assert fuse.active is False


def test_lerp_tnt_endpoints():
    assert lerp_tnt(0x102030, 0xA0B0C0, 0, 100, 1.0) == 0x102030
    assert lerp_tnt(0x102030, 0xA0B0C0, 100, 100, 1.0) == 0xA0B0C0


def test_lerp_tnt_stays_between_endpoints():
    for step in range(0, 101, 10):
        result = lerp_tnt(0x000000, 0xFFFFFF, step, 100, 2.0)
        for shift in (0, 8, 16):
            assert 0 <= (result >> shift) & 0xFF <= 0xFF
        assert result & 0xFF == (result >> 8) & 0xFF == (result >> 16) & 0xFF


def test_lerp_tnt_far_away_is_black():
    assert lerp_tnt(0xFFFFFF, 0xFF0000, 50, 100, 10.5) == 0x000000


def test_lerp_tnt_zero_steps():
    with pytest.raises(ZeroDivisionError):
        lerp_tnt(0x000000, 0xFFFFFF, 1, 0, 1.0)


def test_shade_unit_divisor_keeps_colour():
    assert shade_by_distance(0x336699, 2.0, 1.0, 0) == 0x336699


def test_shade_block_eight_ignores_factor():
    assert shade_by_distance(0x336699, 2.0, 5.0, 8) == 0x336699


def test_shade_zero_distance_keeps_colour():
    assert shade_by_distance(0xABCDEF, 0.0, 1.0, 0) == 0xABCDEF


def test_shade_halves_at_distance_four():
    assert shade_by_distance(0x808080, 4.0, 1.0, 0) == 0x404040


def test_shade_never_brightens():
    color = 0x9A5F21
    for dist in (0.5, 1.0, 3.0, 7.5, 20.0):
        shaded = shade_by_distance(color, dist, 1.0, 0)
        for shift in (0, 8, 16):
            assert (shaded >> shift) & 0xFF <= (color >> shift) & 0xFF