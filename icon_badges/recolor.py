"""
Pixel recoloring for icons and shape masks.

Two flavours are offered:

* ``solid_fill`` turns every visible pixel into one flat color and keeps the
  alpha channel exactly (a "source-in" fill).
* ``recolor_shaded`` scales the target color by each pixel's brightness, so a
  white or grayscale icon keeps its internal shading in the new hue.
"""
from __future__ import annotations

from PIL import Image

from .colors import Color, parse_color


def _ensure_rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def solid_fill(image: Image.Image, color: Color | str) -> Image.Image:
    fill = parse_color(color)
    alpha = _ensure_rgba(image).getchannel("A")

    bands = [alpha.point(lambda a, c=channel: c if a else 0) for channel in fill.rgb]
    return Image.merge("RGBA", (*bands, alpha))


def round_half_up(value: float) -> int:
    return int(value + 0.5)


def recolor_shaded(image: Image.Image, color: Color | str) -> Image.Image:
    target = parse_color(color)

    result = _ensure_rgba(image).copy()
    pixels = result.load()
    for y in range(result.height):
        for x in range(result.width):
            r, g, b, a = pixels[x, y]
            # Leave empty regions untouched.
            if a == 0:
                continue
            brightness = (r + g + b) / (3 * 255)
            pixels[x, y] = (
                round_half_up(target.r * brightness),
                round_half_up(target.g * brightness),
                round_half_up(target.b * brightness),
                a,
            )
    return result
