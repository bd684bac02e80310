"""
Controller icon badges: color lookup, contrast-driven icon polarity,
recoloring and fixed-layout compositing.
"""
from .colors import (
    BLACK,
    WHITE,
    Color,
    InvalidColorFormat,
    MissingResource,
    contrast_ratio,
    load_color_map,
    parse_color,
    relative_luminance,
    resolve_color,
    should_use_dark_foreground,
)
from .layout import DEFAULT_LAYOUT, BadgeLayout, center_in_box, compose_badge, fit_within, shape_layer
from .pipeline import (
    BatchReport,
    IconResult,
    ImageDecodeFailure,
    generate_badges,
    generate_badges_in_directory,
    recolor_directory,
    recolor_file,
)
from .recolor import recolor_shaded, solid_fill

__version__ = "1.0.0"
