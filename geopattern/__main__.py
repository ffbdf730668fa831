"""
geopattern CLI — write a pattern for a string.

Usage:
  python -m geopattern GitHub                          # SVG to stdout
  python -m geopattern GitHub -g sineWaves -o bg.svg   # force a generator, save
  python -m geopattern GitHub -f data-url              # CSS background-image value
  python -m geopattern --list                          # generator names
"""

from __future__ import annotations

import argparse
import logging
import sys

from geopattern.engine.pattern import Pattern, generate
from geopattern.engine.registry import GENERATORS

FORMATS = {
    "svg": Pattern.to_svg,
    "base64": Pattern.to_base64,
    "data-uri": Pattern.to_data_uri,
    "data-url": Pattern.to_data_url,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geopattern", description="Tiling SVG patterns from strings")
    parser.add_argument("input", nargs="?", help="String to hash (default: current time)")
    parser.add_argument("-g", "--generator", help="Force a generator (see --list)")
    parser.add_argument("-c", "--color", help="Exact background hex color")
    parser.add_argument("-b", "--base-color", help="Hex color the background is derived from")
    parser.add_argument("--hash", help="Explicit 40-char hex digest instead of hashing input")
    parser.add_argument("-f", "--format", choices=sorted(FORMATS), default="svg")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--list", action="store_true", help="Print generator names and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list:
        print("\n".join(GENERATORS))
        return 0

    try:
        pattern = generate(
            args.input,
            generator=args.generator,
            color=args.color,
            base_color=args.base_color,
            hash=args.hash,
        )
    except ValueError as e:
        print(f"geopattern: {e}", file=sys.stderr)
        return 2

    text = FORMATS[args.format](pattern)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Saved {pattern.generator} pattern ({pattern.width}x{pattern.height}) -> {args.output}", file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
