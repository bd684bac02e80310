#!/usr/bin/env python3
"""
Composite every PNG icon in a directory onto a colored shape.

Usage:
    python3 scripts/generate_badges.py <icons-dir> <shape-png> [output-dir] [--colors colors.json]
"""
from icon_badges.cli import badges_main

if __name__ == "__main__":
    badges_main()
