"""Simple drawing onto a pixel canvas."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Canvas:
    """A width x height grid of 0xRRGGBB pixels stored row after row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas size must not be negative")
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match canvas size")

    def get(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self.pixels[y * self.width + x]

    def _put(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color


def _plot_octants(canvas: Canvas, cx: float, cy: float, x: int, y: int, color: int) -> None:
    for px, py in (
        (cx + x, cy + y),
        (cx + y, cy + x),
        (cx - x, cy + y),
        (cx - y, cy + x),
        (cx + x, cy - y),
        (cx + y, cy - x),
        (cx - x, cy - y),
        (cx - y, cy - x),
    ):
        canvas._put(int(px), int(py), color)


def fill_circle(canvas: Canvas, cx: float, cy: float, radius: int, color: int) -> None:
    """Paint a filled disc by drawing concentric circles down to the centre.

    Points falling outside the canvas are skipped.
    """
    for r in range(radius, -1, -1):
        x, y, d = 0, r, r - 1
        while y >= x:
            _plot_octants(canvas, cx, cy, x, y, color)
            if d >= 2 * x:
                d -= 2 * x + 1
                x += 1
            elif d < 2 * (r - y):
                d += 2 * y - 1
                y -= 1
            else:
                d += 2 * (y - x - 1)
                y -= 1
                x += 1