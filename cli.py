#!/usr/bin/env python3
"""
Command-line interface for the scene grid generator.

Usage:
    # Write the default preset to its default file
    python cli.py generate

    # 5x5 roughness/metallic grid to stdout
    python cli.py generate --preset materials --output -

    # Custom channels, with a preview image
    python cli.py generate --size 8 --channel albedo=red --channel emission=@y \
        --output grid.json --preview grid.png

    # List available presets
    python cli.py presets

    # Preview an existing document
    python cli.py preview test2.json test2.png
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from loguru import logger

from config import configure_logger, settings
from generator.grid import parse_rule
from generator.presets import get_preset, list_presets, PRESETS
from generator.renderer import render_preview_to_file
from generator.scene import Camera
from output import load_scene
from pipeline import ScenePipeline


def _parse_channel(text: str) -> tuple[str, str]:
    """Split NAME=RULE and check the rule parses."""
    name, sep, rule = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Bad --channel value {text!r}, expected NAME=RULE")
    parse_rule(rule)
    return name.strip(), rule.strip()


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a scene document."""
    preset = get_preset(args.preset)

    if args.size is not None:
        preset.size = args.size
    if args.spacing is not None:
        preset.spacing = args.spacing
    if args.shape is not None:
        preset.shape = args.shape
    if args.name is not None:
        preset.scene_name = args.name
    if args.channel:
        preset.material = dict(_parse_channel(c) for c in args.channel)

    camera = None
    if args.camera_position or args.camera_direction:
        if not (args.camera_position and args.camera_direction):
            raise ValueError("--camera-position and --camera-direction go together")
        camera = Camera(
            position=list(args.camera_position),
            direction=list(args.camera_direction),
        )

    logger.info(
        f"Generating '{preset.name}': {preset.size}x{preset.size} grid, "
        f"channels {', '.join(preset.material) or 'none'}"
    )
    pipeline = ScenePipeline(preset, camera=camera, indent=args.indent)
    pipeline.run(destination=args.output, preview=args.preview)
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    """List available presets."""
    print("Available presets:")
    for name in list_presets():
        p = PRESETS[name]
        channels = ", ".join(f"{k}={v}" for k, v in p.material.items())
        marker = " (default)" if name == settings.DEFAULT_PRESET else ""
        print(f"  {name}{marker}")
        print(f"    size:    {p.size}x{p.size}")
        print(f"    channels: {channels}")
        print(f"    output:  {p.output}")
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Render a preview of an existing scene document."""
    scene = load_scene(args.scene)
    path = render_preview_to_file(scene, args.image)
    logger.info(f"Preview of '{scene.name}' ({len(scene.nodes)} nodes) saved to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Procedural scene document generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", type=str.upper, default=None,
                        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
                        help="loguru level (default from settings)")
    subparsers = parser.add_subparsers(dest="command")

    gen = subparsers.add_parser("generate", help="Generate a scene document")
    gen.add_argument("--preset", default=settings.DEFAULT_PRESET,
                     help="Preset to start from (see 'presets')")
    gen.add_argument("--size", type=int, help="Grid side and ramp sampler count")
    gen.add_argument("--spacing", type=float, help="Distance between grid nodes")
    gen.add_argument("--shape", help="Shape tag for every node")
    gen.add_argument("--name", help="Scene display name")
    gen.add_argument("--channel", action="append", metavar="NAME=RULE",
                     help="Material channel rule: sampler id, @x or @y. Repeatable; "
                          "replaces the preset's channels")
    gen.add_argument("--camera-position", type=float, nargs=3, metavar=("X", "Y", "Z"))
    gen.add_argument("--camera-direction", type=float, nargs=3, metavar=("X", "Y", "Z"))
    gen.add_argument("--output", "-o", help="Output path, '-' for stdout (default: preset's)")
    gen.add_argument("--indent", type=int, help="Pretty-print with this indent")
    gen.add_argument("--preview", help="Also save a top-down PNG preview here")
    gen.set_defaults(func=cmd_generate)

    presets = subparsers.add_parser("presets", help="List available presets")
    presets.set_defaults(func=cmd_presets)

    preview = subparsers.add_parser("preview", help="Render a preview of a scene document")
    preview.add_argument("scene", help="Scene JSON file")
    preview.add_argument("image", help="Output PNG path")
    preview.set_defaults(func=cmd_preview)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logger(args.log_level)

    if args.command is None:
        argv = list(argv) if argv is not None else sys.argv[1:]
        args = parser.parse_args([*argv, "generate"])

    try:
        return args.func(args)
    except (ValueError, KeyError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
