"""
Node grid generator.

Lays out a width × height lattice of shape instances centered on the
origin, and fills each node's material from a per-channel rule table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from generator.samplers import ramp_id
from generator.scene import Node
from config import settings


# ── Material rules ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Fixed:
    """Always the same sampler."""
    sampler_id: str

    def resolve(self, x: int, y: int) -> str:
        return self.sampler_id


@dataclass(frozen=True)
class IndexedByX:
    """Ramp sampler picked by the outer (column) index."""
    prefix: Optional[str] = None

    def resolve(self, x: int, y: int) -> str:
        return ramp_id(x, self.prefix)


@dataclass(frozen=True)
class IndexedByY:
    """Ramp sampler picked by the inner (row) index."""
    prefix: Optional[str] = None

    def resolve(self, x: int, y: int) -> str:
        return ramp_id(y, self.prefix)


MaterialRule = Union[Fixed, IndexedByX, IndexedByY]
MaterialTemplate = dict[str, MaterialRule]


def parse_rule(text: str) -> MaterialRule:
    """
    Parse the command-line rule shorthand.

    "@x" and "@y" select the ramp by grid index; anything else is a
    fixed sampler id.
    """
    text = text.strip()
    if not text:
        raise ValueError("empty material rule")
    if text == "@x":
        return IndexedByX()
    if text == "@y":
        return IndexedByY()
    if text.startswith("@"):
        raise ValueError(f"Unknown index rule: {text!r} (expected @x or @y)")
    return Fixed(text)


def parse_template(rules: dict[str, str]) -> MaterialTemplate:
    return {channel: parse_rule(rule) for channel, rule in rules.items()}


# ── Grid ─────────────────────────────────────────────────────────────

def grid_position(
    x: int,
    y: int,
    spacing: float,
    center: tuple[float, float],
) -> list[float]:
    cx, cy = center
    return [(x - cx) * spacing, (y - cy) * spacing, 0]


def generate_grid(
    width: int,
    height: int,
    shape: Optional[str] = None,
    material_template: Optional[MaterialTemplate] = None,
    spacing: Optional[float] = None,
    center: Optional[tuple[float, float]] = None,
) -> list[Node]:
    """
    Generate width × height nodes in x-major order.

    All y for a given x come before x advances, so identical arguments
    always give identical output.

    Args:
        width: Number of columns (x indices 0..width-1).
        height: Number of rows (y indices 0..height-1).
        shape: Shape tag for every node, defaults to settings.DEFAULT_SHAPE.
        material_template: Channel → rule; channel order is kept.
        spacing: Distance between neighbours, defaults to settings.GRID_SPACING.
        center: Grid index placed at the origin, defaults to
            (width // 2, height // 2).

    Returns:
        List of exactly width * height nodes.
    """
    if width < 0 or height < 0:
        raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")

    if shape is None:
        shape = settings.DEFAULT_SHAPE
    if spacing is None:
        spacing = settings.GRID_SPACING
    if center is None:
        center = (width // 2, height // 2)
    template = material_template or {}

    nodes = []
    for x in range(width):
        for y in range(height):
            nodes.append(Node(
                translate=grid_position(x, y, spacing, center),
                shape=shape,
                material={
                    channel: rule.resolve(x, y)
                    for channel, rule in template.items()
                },
            ))
    return nodes
