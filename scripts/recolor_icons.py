#!/usr/bin/env python3
"""
Recolor white PNG icons to a color while keeping opacity and shading.

Usage:
    Single file: python3 scripts/recolor_icons.py <input-file> <color-hex> [output-file]
    Directory:   python3 scripts/recolor_icons.py <input-dir> <color-hex> [output-dir]
"""
from icon_badges.cli import recolor_main

if __name__ == "__main__":
    recolor_main()
