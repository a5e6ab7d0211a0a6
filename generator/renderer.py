"""
Preview renderer — Scene → top-down PNG.

Draws an orthographic view of the XY plane: one disc per node, filled
with the node's albedo color when that sampler is a constant. Image
samplers are never opened; they show up as neutral grays.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw

from generator.scene import ConstantSampler, Node, Scene
from config import settings

IMAGE_BACKGROUND = (32, 32, 32)
IMAGE_ALBEDO = (128, 128, 128)


def _to_rgb(color: list[float]) -> tuple[int, int, int]:
    """Map a [0, 1] float triple to 8-bit RGB, clamping out-of-range values."""
    return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in color[:3])


def _sampler_colors(scene: Scene) -> dict[str, tuple[int, int, int]]:
    return {
        s.id: _to_rgb(s.color)
        for s in scene.samplers
        if isinstance(s, ConstantSampler)
    }


def _node_radius(node: Node) -> float:
    if node.scale:
        return abs(node.scale[0])
    return 1.0


def _world_bounds(scene: Scene, margin: float) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) covering every node disc plus margin."""
    if not scene.nodes:
        return (-1.0, -1.0, 1.0, 1.0)

    min_x = min(n.translate[0] - _node_radius(n) for n in scene.nodes)
    max_x = max(n.translate[0] + _node_radius(n) for n in scene.nodes)
    min_y = min(n.translate[1] - _node_radius(n) for n in scene.nodes)
    max_y = max(n.translate[1] + _node_radius(n) for n in scene.nodes)
    return (min_x - margin, min_y - margin, max_x + margin, max_y + margin)


def render_preview(
    scene: Scene,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Image.Image:
    """
    Render a Scene to a PIL Image.

    The view is fitted to the node extents with a uniform scale so
    spheres stay round, and +Y points up.
    """
    width = width or settings.PREVIEW_WIDTH
    height = height or settings.PREVIEW_HEIGHT

    colors = _sampler_colors(scene)
    fill = colors.get(scene.background.color, IMAGE_BACKGROUND)
    img = Image.new("RGB", (width, height), fill)
    draw = ImageDraw.Draw(img)

    min_x, min_y, max_x, max_y = _world_bounds(scene, settings.PREVIEW_MARGIN)
    span_x = max(max_x - min_x, 1e-9)
    span_y = max(max_y - min_y, 1e-9)
    scale = min(width / span_x, height / span_y)

    # Center the fitted extents on the canvas
    off_x = (width - span_x * scale) / 2
    off_y = (height - span_y * scale) / 2

    for node in scene.nodes:
        r = _node_radius(node) * scale
        px = off_x + (node.translate[0] - min_x) * scale
        py = height - (off_y + (node.translate[1] - min_y) * scale)
        albedo = node.material.get("albedo")
        color = colors.get(albedo, IMAGE_ALBEDO) if albedo else IMAGE_ALBEDO
        draw.ellipse([px - r, py - r, px + r, py + r], fill=color)

    return img


def render_preview_to_file(scene: Scene, path: str | Path) -> Path:
    """Render and save to disk. Returns the output path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img = render_preview(scene)
    img.save(str(path))
    return path
