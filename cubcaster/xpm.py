"""Reading XPM images into pixel buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from cubcaster.colors import lookup_color
from cubcaster.framebuffer import Image

TRANSPARENT = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of needle outside double-quoted runs, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos, char in enumerate(text):
        if pos + len(needle) > len(text):
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside quotes, keeping the text length."""
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:start] + " " * (stop - start) + text[stop:]
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB; unknown names give 0."""
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def color_value(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    shifts holds (red offset, red bits, green offset, green bits,
    blue offset, blue bits) of the visual's channel masks.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError("XPM data ended early") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colours, then pixel rows."""
    source = iter(lines)
    header = split_words(_next_line(source))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("XPM header holds a zero value")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("XPM header holds a negative value")

    # Short keys overwrite earlier ones; longer keys keep the first definition.
    overwrite = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source)
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if overwrite:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source)
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(data: Sequence[str]) -> Image:
    """Build an image from the strings of an in-memory XPM array."""
    return parse_xpm(list(data))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file from disk."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))