"""Reading of XPM pixmaps into plain 0xRRGGBB pixel grids."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from wolfcast.colornames import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value used for the ``None`` colour unless told otherwise."""

_NAME_BUFFER = 63
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; ``pixels`` holds the rows one after another."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of the lowest run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class ColorFormat:
    """How 0xRRGGBB colours are packed into a display's pixel values."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int
    depth: int

    @classmethod
    def from_masks(cls, red_mask: int, green_mask: int, blue_mask: int, depth: int) -> "ColorFormat":
        """Build a format from a visual's channel masks and colour depth."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits, depth)

    def convert(self, color: int) -> int:
        """Pack a 0xRRGGBB colour for this format; deep formats take it as is."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find(text: str, needle: str) -> int:
    """Return the position of ``needle`` in ``text``, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def _hex_value(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB; unknown names give 0, ``None`` gives -1."""
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"XPM header values must be positive: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than its key: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], end)


def parse_xpm_lines(lines: Iterable[str], transparent: int = TRANSPARENT) -> XpmImage:
    """Decode XPM from its quoted strings: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _parse_color(_next_line(source, "colour table"), cpp)
        # Short keys are looked up directly, so the last definition wins;
        # longer keys are searched in order, so the first one does.
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel rows")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row holds fewer than {width} pixels: {row!r}")
        for x in range(width):
            value = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(transparent if value == -1 else value)
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def read_xpm(text: str, transparent: int = TRANSPARENT) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)), transparent)


def read_xpm_file(path: str | Path, transparent: int = TRANSPARENT) -> XpmImage:
    """Read and decode an XPM file."""
    return read_xpm(Path(path).read_text(encoding="latin-1"), transparent)