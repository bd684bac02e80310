"""
Sizing and compositing of badge canvases.
"""
from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from .colors import BLACK, DARK_FOREGROUND_THRESHOLD, DEFAULT_COLOR, Color, parse_color, should_use_dark_foreground
from .recolor import round_half_up, solid_fill

CANVAS_SIZE = 512
ICON_BOX = 256
# Fixed placement of the icon box, kept as-is rather than centred (64 + 256 != 512 - 64).
ICON_OFFSET = 64


@dataclass(frozen=True)
class BadgeLayout:
    """Geometry and color rules for one badge.

    canvas_size: output canvas, also the size the shape template is resampled to.
    icon_box: bounding box the icon is fitted into.
    icon_offset: top-left position of the icon on the canvas.
    default_color: badge color for icons missing from the color map.
    dark_foreground: icon fill used when a white icon would not be legible.
    contrast_threshold: white-on-background contrast below which the dark fill is used.
    """

    canvas_size: tuple[int, int] = (CANVAS_SIZE, CANVAS_SIZE)
    icon_box: tuple[int, int] = (ICON_BOX, ICON_BOX)
    icon_offset: tuple[int, int] = (ICON_OFFSET, ICON_OFFSET)
    default_color: str = DEFAULT_COLOR
    dark_foreground: str = BLACK.hex
    contrast_threshold: float = DARK_FOREGROUND_THRESHOLD


DEFAULT_LAYOUT = BadgeLayout()


def fit_within(image: Image.Image, max_width: int, max_height: int) -> Image.Image:
    if image.width == max_width and image.height == max_height:
        return image

    scale = min(max_width / image.width, max_height / image.height)
    new_width = max(1, round_half_up(image.width * scale))
    new_height = max(1, round_half_up(image.height * scale))
    return image.resize((new_width, new_height), Image.Resampling.LANCZOS)


def center_in_box(image: Image.Image, width: int, height: int) -> Image.Image:
    box = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    x = (width - image.width) // 2
    y = (height - image.height) // 2
    box.paste(image.convert("RGBA"), (x, y))
    return box


def shape_layer(shape_template: Image.Image, color: Color | str, layout: BadgeLayout = DEFAULT_LAYOUT) -> Image.Image:
    shape = shape_template
    if shape.size != layout.canvas_size:
        shape = shape.convert("RGBA").resize(layout.canvas_size, Image.Resampling.LANCZOS)
    return solid_fill(shape, color)


def _dark_icon(icon: Image.Image, layout: BadgeLayout) -> Image.Image:
    box_w, box_h = layout.icon_box
    fitted = fit_within(icon.convert("RGBA"), box_w, box_h)
    return solid_fill(center_in_box(fitted, box_w, box_h), layout.dark_foreground)


def compose_badge(
    icon: Image.Image,
    color: Color | str,
    shape_template: Image.Image,
    layout: BadgeLayout = DEFAULT_LAYOUT,
) -> Image.Image:
    color = parse_color(color)
    background = shape_layer(shape_template, color, layout)

    if should_use_dark_foreground(color, layout.contrast_threshold):
        foreground = _dark_icon(icon, layout)
    else:
        foreground = fit_within(icon, *layout.icon_box).convert("RGBA")

    canvas = Image.new("RGBA", layout.canvas_size, (0, 0, 0, 0))
    canvas.paste(background, (0, 0))
    canvas.alpha_composite(foreground, dest=layout.icon_offset)
    return canvas
