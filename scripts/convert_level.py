#!/usr/bin/env python
"""
Convert a Godot level scene (.tscn) into the game's Rust level module.

Usage:
    python scripts/convert_level.py levels/scenario_1.tscn > src/levels/scenario_1.rs
    python scripts/convert_level.py levels/scenario_1.tscn --output src/levels/scenario_1.rs
    python scripts/convert_level.py levels/scenario_1.tscn --json   # dump the resolved level
"""

import argparse
import json
import sys

from tscn_level.errors import LevelConversionError
from tscn_level.render import render_level
from tscn_level.resolver import convert_scene_file


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert a .tscn level scene into Rust level code"
    )
    parser.add_argument("input", help="Path to the .tscn scene file")
    parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the resolved level as JSON instead of Rust code",
    )
    args = parser.parse_args(argv)

    print(f"Converting {args.input}", file=sys.stderr)
    try:
        level = convert_scene_file(args.input)
    except LevelConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.json:
        text = json.dumps(level.to_dict(), indent=2) + "\n"
    else:
        text = render_level(level)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
