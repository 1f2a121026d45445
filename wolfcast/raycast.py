"""Grid ray casting: one ray per screen column until it meets a wall."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wolfcast.gamemap import GameMap

WIDTH = 916
"""Width of the game window in pixels."""

HEIGHT = 688
"""Height of the game window in pixels."""


@dataclass
class Camera:
    """Player position, view direction and camera plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float


@dataclass(frozen=True)
class RayHit:
    """Where one column's ray met a wall."""

    column: int
    map_x: int
    map_y: int
    side: int
    step_x: int
    step_y: int
    ray_dir_x: float
    ray_dir_y: float
    perp_wall_dist: float


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator:
        return math.copysign(math.inf, numerator)
    return math.nan


def cast_ray(game_map: GameMap, camera: Camera, column: int, width: int = WIDTH) -> RayHit:
    """Cast the ray of screen ``column`` and return the wall it hits.

    Raises IndexError if the ray leaves the map without meeting a wall.
    """
    cam_x = 2 * column / width - 1
    ray_x = camera.dir_x + camera.plane_x * cam_x
    ray_y = camera.dir_y + camera.plane_y * cam_x
    map_x = int(camera.x)
    map_y = int(camera.y)
    delta_x = abs(1 / ray_x) if ray_x else math.inf
    delta_y = abs(1 / ray_y) if ray_y else math.inf

    if ray_x < 0:
        step_x = -1
        side_x = (camera.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - camera.x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (camera.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - camera.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if game_map.cell(map_x, map_y) > 0:
            break

    if side == 0:
        perp = _divide(map_x - camera.x + (1 - step_x) / 2, ray_x)
    else:
        perp = _divide(map_y - camera.y + (1 - step_y) / 2, ray_y)
    return RayHit(column, map_x, map_y, side, step_x, step_y, ray_x, ray_y, perp)


def cast_all(game_map: GameMap, camera: Camera, width: int = WIDTH) -> list[RayHit]:
    """Cast one ray for every column of a screen ``width`` pixels wide."""
    return [cast_ray(game_map, camera, column, width) for column in range(width)]