"""
Command line front-end.

Usage:
    icon-badges badges <icons-dir> <shape-png> [output-dir] [--colors colors.json]
    icon-badges recolor <input-file-or-dir> <color-hex> [output]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .colors import load_color_map, parse_color
from .pipeline import BatchReport, generate_badges_in_directory, recolor_directory, recolor_file

logger = logging.getLogger(__name__)


def _summary(report: BatchReport, verb: str) -> str:
    return f"done: {verb} {len(report.succeeded)}/{report.total} icons ({len(report.failed)} failed)"


def run_badges(args: argparse.Namespace) -> int:
    icons_dir = Path(args.icons_dir)
    output_dir = Path(args.output_dir) if args.output_dir else icons_dir / "output"
    color_map = load_color_map(Path(args.colors)) if args.colors else {}

    report = generate_badges_in_directory(icons_dir, Path(args.shape), output_dir, color_map)
    print(_summary(report, "created"))
    return 0


def run_recolor(args: argparse.Namespace) -> int:
    color = parse_color(args.color)
    input_path = Path(args.input)
    output = Path(args.output) if args.output else None

    if input_path.is_dir():
        report = recolor_directory(input_path, output, color)
    else:
        report = recolor_file(input_path, output, color)
    print(_summary(report, "recolored"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-q", "--quiet", action="store_true", help="Only report errors and the final summary.")

    parser = argparse.ArgumentParser(description="Generate controller icon badges and recolored icons.")
    sub = parser.add_subparsers(dest="command", required=True)

    badges = sub.add_parser("badges", parents=[common], help="Composite each icon onto a colored shape (512x512 PNG).")
    badges.add_argument("icons_dir", help="Directory of PNG icons.")
    badges.add_argument("shape", help="Shape template PNG (black fill on transparent).")
    badges.add_argument("output_dir", nargs="?", help="Output directory (default: <icons_dir>/output).")
    badges.add_argument("--colors", help="JSON object mapping icon names to #RRGGBB colors.")
    badges.set_defaults(handler=run_badges)

    recolor = sub.add_parser("recolor", parents=[common], help="Recolor white icons to a hue, keeping their shading.")
    recolor.add_argument("input", help="PNG file or directory of PNG files.")
    recolor.add_argument("color", help="Target color, e.g. #ff0000 or ff0000.")
    recolor.add_argument(
        "output",
        nargs="?",
        help="Output file or directory (default: <name>-recolored.png or <dir>-recolored).",
    )
    recolor.set_defaults(handler=run_recolor)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.ERROR if args.quiet else logging.INFO, format="%(message)s")

    try:
        return args.handler(args)
    except (OSError, ValueError) as err:
        # Missing resources, unwritable outputs, bad colors and malformed color maps.
        logger.error("Error: %s", err)
    return 1


def badges_main() -> None:
    sys.exit(main(["badges", *sys.argv[1:]]))


def recolor_main() -> None:
    sys.exit(main(["recolor", *sys.argv[1:]]))


if __name__ == "__main__":
    sys.exit(main())
