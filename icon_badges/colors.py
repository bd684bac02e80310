"""
Color parsing, icon-name color lookup and WCAG contrast decisions.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

HEX_COLOR_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")
DEFAULT_COLOR = "#FFFFFF"
DARK_FOREGROUND_THRESHOLD = 2.0


class InvalidColorFormat(ValueError):
    pass


class MissingResource(FileNotFoundError):
    pass


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidColorFormat(f"channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        match = HEX_COLOR_RE.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidColorFormat(f"invalid color format: {value!r} (expected #RRGGBB or RRGGBB)")
        return cls(*(int(part, 16) for part in match.groups()))

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def parse_color(value: Color | str) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)


def resolve_color(icon_file_name: str, color_map: Mapping[str, str], default: str = DEFAULT_COLOR) -> Color:
    """Pick the badge color for an icon file.

    The extension is dropped, then the name is looked up exactly, then
    case-insensitively against every key in map order. Unknown icons get
    ``default``; only a malformed color string raises.
    """
    name = Path(icon_file_name).stem
    if name in color_map:
        return parse_color(color_map[name])

    lowered = name.lower()
    for key, value in color_map.items():
        if key.lower() == lowered:
            return parse_color(value)

    return parse_color(default)


def load_color_map(path: Path) -> dict[str, str]:
    path = Path(path)
    if not path.is_file():
        raise MissingResource(f"Color map not found: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path}: expected a JSON object of name -> color")

    color_map: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise ValueError(f"{path}: color for {key!r} must be a string")
        color_map[str(key)] = value
    return color_map


def _linear_channel(value: int) -> float:
    c = value / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color | str) -> float:
    color = parse_color(color)
    r, g, b = (_linear_channel(c) for c in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: Color | str, second: Color | str) -> float:
    lum1 = relative_luminance(first)
    lum2 = relative_luminance(second)
    brightest = max(lum1, lum2)
    darkest = min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def should_use_dark_foreground(background: Color | str, threshold: float = DARK_FOREGROUND_THRESHOLD) -> bool:
    # Relaxed from the WCAG 3:1 minimum; tuned for small glyphs.
    return contrast_ratio(WHITE, background) < threshold
