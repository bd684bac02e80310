"""
Sequential batch drivers: decode each icon, build its badge or recolored copy,
encode it and hand the bytes to a sink. One failing icon never stops the batch.
"""
from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .colors import Color, MissingResource, parse_color, resolve_color
from .layout import DEFAULT_LAYOUT, BadgeLayout, compose_badge
from .recolor import recolor_shaded

logger = logging.getLogger(__name__)

PNG_SUFFIX = ".png"
RECOLOR_SUFFIX = "-recolored"

Sink = Callable[[str, bytes], None]


class ImageDecodeFailure(OSError):
    pass


@dataclass
class IconResult:
    name: str
    data: bytes | None = None
    error: Exception | None = None
    color: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    succeeded: list[IconResult] = field(default_factory=list)
    failed: list[IconResult] = field(default_factory=list)

    def add(self, result: IconResult) -> None:
        (self.succeeded if result.ok else self.failed).append(result)

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)


def decode_image(data: bytes, name: str = "<bytes>") -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as opened:
            opened.load()
            return opened.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as err:
        raise ImageDecodeFailure(f"could not decode {name}: {err}") from err


def load_image(path: Path) -> Image.Image:
    path = Path(path)
    if not path.is_file():
        raise MissingResource(f"Image not found: {path}")
    return decode_image(path.read_bytes(), path.name)


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def iter_png_files(directory: Path) -> list[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        raise MissingResource(f"Icons directory does not exist: {directory}")
    return sorted(
        (path for path in directory.iterdir() if path.suffix.lower() == PNG_SUFFIX and path.is_file()),
        key=lambda path: path.name,
    )


def directory_sink(output_dir: Path) -> Sink:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    def write(name: str, data: bytes) -> None:
        (output_dir / name).write_bytes(data)

    return write


def build_badge(
    name: str,
    data: bytes,
    shape: Image.Image,
    color_map: Mapping[str, str],
    layout: BadgeLayout = DEFAULT_LAYOUT,
) -> IconResult:
    result = IconResult(name=name)
    try:
        color = resolve_color(name, color_map, layout.default_color)
        result.color = color.hex
        logger.info("Processing %s with color %s...", name, color.hex)
        icon = decode_image(data, name)
        result.data = encode_png(compose_badge(icon, color, shape, layout))
    except (OSError, ValueError) as err:
        result.error = err
    return result


def _deliver(result: IconResult, sink: Sink, report: BatchReport) -> None:
    if result.ok:
        try:
            sink(result.name, result.data)
        except OSError as err:
            result.error = err
            result.data = None

    if result.ok:
        logger.info("✓ Created %s", result.name)
    else:
        logger.error("✗ Error processing %s: %s", result.name, result.error)
    report.add(result)


def _process_files(files: Iterable[Path], handle: Callable[[str, bytes], IconResult], sink: Sink) -> BatchReport:
    report = BatchReport()
    for path in files:
        try:
            data = path.read_bytes()
        except OSError as err:
            result = IconResult(name=path.name, error=ImageDecodeFailure(f"could not read {path}: {err}"))
        else:
            result = handle(path.name, data)
        _deliver(result, sink, report)
    return report


def generate_badges(
    entries: Iterable[tuple[str, bytes]],
    shape: Image.Image,
    color_map: Mapping[str, str],
    sink: Sink,
    layout: BadgeLayout = DEFAULT_LAYOUT,
) -> BatchReport:
    report = BatchReport()
    for name, data in entries:
        _deliver(build_badge(name, data, shape, color_map, layout), sink, report)
    return report


def generate_badges_in_directory(
    icons_dir: Path,
    shape_path: Path,
    output_dir: Path,
    color_map: Mapping[str, str],
    layout: BadgeLayout = DEFAULT_LAYOUT,
) -> BatchReport:
    icons_dir = Path(icons_dir)
    shape_path = Path(shape_path)
    if not icons_dir.is_dir():
        raise MissingResource(f"Icons directory does not exist: {icons_dir}")
    if not shape_path.is_file():
        raise MissingResource(f"Shape file does not exist: {shape_path}")

    shape = load_image(shape_path)
    logger.info("Loaded shape from %s (%dx%d)", shape_path, shape.width, shape.height)

    files = iter_png_files(icons_dir)
    logger.info("Found %d icon files to process...", len(files))

    def handle(name: str, data: bytes) -> IconResult:
        return build_badge(name, data, shape, color_map, layout)

    return _process_files(files, handle, directory_sink(output_dir))


def recolor_bytes(name: str, data: bytes, color: Color | str) -> IconResult:
    result = IconResult(name=name)
    try:
        target = parse_color(color)
        result.color = target.hex
        result.data = encode_png(recolor_shaded(decode_image(data, name), target))
    except (OSError, ValueError) as err:
        result.error = err
    return result


def default_recolor_output(input_path: Path) -> Path:
    input_path = Path(input_path)
    if input_path.is_dir():
        return Path(f"{input_path}{RECOLOR_SUFFIX}")
    return input_path.with_name(f"{input_path.stem}{RECOLOR_SUFFIX}{PNG_SUFFIX}")


def recolor_file(input_path: Path, output_path: Path | None, color: Color | str) -> BatchReport:
    input_path = Path(input_path)
    if not input_path.is_file():
        raise MissingResource(f"Input path does not exist: {input_path}")
    output_path = Path(output_path) if output_path else default_recolor_output(input_path)
    target = parse_color(color)

    def handle(name: str, data: bytes) -> IconResult:
        return recolor_bytes(name, data, target)

    def write(_name: str, data: bytes) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)

    return _process_files([input_path], handle, write)


def recolor_directory(input_dir: Path, output_dir: Path | None, color: Color | str) -> BatchReport:
    input_dir = Path(input_dir)
    files = iter_png_files(input_dir)
    target = parse_color(color)
    if not files:
        logger.info("No PNG files found in %s", input_dir)
        return BatchReport()

    sink = directory_sink(Path(output_dir) if output_dir else default_recolor_output(input_dir))
    logger.info("Found %d PNG files to process...", len(files))

    def handle(name: str, data: bytes) -> IconResult:
        return recolor_bytes(name, data, target)

    return _process_files(files, handle, sink)
