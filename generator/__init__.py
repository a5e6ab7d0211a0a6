"""Scene Generator — samplers, node grids and presets → scene document."""

from generator.scene import (
    Scene,
    Camera,
    Background,
    ConstantSampler,
    ImageSampler,
    MeshSource,
    Node,
    create_scene,
    append_sampler,
    append_node,
)
from generator.samplers import generate_samplers
from generator.grid import Fixed, IndexedByX, IndexedByY, generate_grid, parse_rule
from generator.presets import ScenePreset, build_scene, get_preset, list_presets
from generator.renderer import render_preview

__all__ = [
    "Scene",
    "Camera",
    "Background",
    "ConstantSampler",
    "ImageSampler",
    "MeshSource",
    "Node",
    "create_scene",
    "append_sampler",
    "append_node",
    "generate_samplers",
    "Fixed",
    "IndexedByX",
    "IndexedByY",
    "generate_grid",
    "parse_rule",
    "ScenePreset",
    "build_scene",
    "get_preset",
    "list_presets",
    "render_preview",
]
