"""Game-world state: input flags, TNT blocks and colour shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wolfcast.gamemap import GameMap

TNT = 6
"""Cell value of a TNT block."""

FUSE_TICKS = 100
"""Number of ticks between lighting a TNT block and its explosion."""


@dataclass
class Keys:
    """Which keys and mouse buttons are currently held."""

    d: bool = False
    a: bool = False
    w: bool = False
    s: bool = False
    q: bool = False
    e: bool = False
    left_click: bool = False
    right_click: bool = False
    mouse_wheel_up: bool = False
    mouse_wheel_down: bool = False


_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, -1), (-1, 1), (1, -1))


def _is_interior(game_map: GameMap, x: int, y: int) -> bool:
    return 0 < x < game_map.width - 1 and 0 < y < game_map.height - 1


def explode(game_map: GameMap, x: int, y: int) -> None:
    """Blow up the cell at (x, y), setting off touching TNT in a chain.

    Every exploded cell and its eight neighbours are cleared; the outer
    wall of the map is never touched.
    """
    if not _is_interior(game_map, x, y):
        return
    grid = game_map.grid
    grid[y][x] = 0
    pending = [(x, y)]
    exploded = []
    while pending:
        cx, cy = pending.pop()
        exploded.append((cx, cy))
        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if grid[ny][nx] == TNT and _is_interior(game_map, nx, ny):
                grid[ny][nx] = 0
                pending.append((nx, ny))
    for cx, cy in exploded:
        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if _is_interior(game_map, nx, ny):
                grid[ny][nx] = 0


@dataclass
class TntFuse:
    """A lit TNT block counting down to its explosion."""

    x: int
    y: int
    iteration: int = 0
    active: bool = True

    def tick(self, game_map: GameMap) -> bool:
        """Advance the fuse by one tick; return True when the TNT went off."""
        self.iteration += 1
        if self.iteration != FUSE_TICKS:
            return False
        explode(game_map, self.x, self.y)
        self.active = False
        self.iteration = 0
        return True


def _channels(color: int) -> tuple[int, int, int]:
    return (color & 0xFF0000) >> 16, (color & 0x00FF00) >> 8, color & 0x0000FF


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def lerp_tnt(color1: int, color2: int, step: int, nbp: int, block_dist: float) -> int:
    """Blend from ``color1`` to ``color2`` by ``step / nbp``; black beyond distance 10."""
    if block_dist > 10:
        return 0x000000
    start = _channels(color1)
    end = _channels(color2)
    red, green, blue = (a + _trunc_div((b - a) * step, nbp) for a, b in zip(start, end))
    return _int32(blue | (green << 8) | (red << 16))


def _darken(channel: int, divisor: float) -> int:
    if divisor == 0:
        return channel
    quotient = channel / divisor
    if not math.isfinite(quotient):
        return channel
    value = int(quotient)
    return value if 0 <= value <= channel else channel


def shade_by_distance(color: int, dist: float, nbp: float, select_block: int) -> int:
    """Darken ``color`` with distance; block 8 ignores the ``nbp`` factor."""
    dist /= 2
    if select_block == 8:
        nbp = 1
    divisor = dist * nbp
    red, green, blue = (_darken(channel, divisor) for channel in _channels(color))
    return max(blue | (green << 8) | (red << 16), 0x000000)