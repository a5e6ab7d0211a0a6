"""
Scene presets — the known grid variants as parameter records.

Every preset is the same generator run with a different grid size,
material channel set and output destination. The ramp count always
equals the grid side, so each ramp sampler is referenced and every
referenced ramp id exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from generator.grid import generate_grid, parse_template
from generator.samplers import generate_samplers
from generator.scene import (
    Camera,
    ConstantSampler,
    ImageSampler,
    Scene,
    create_scene,
    extend_nodes,
    extend_samplers,
)
from config import settings


@dataclass
class ScenePreset:
    """Parameters for one generated scene."""
    name: str
    scene_name: str = "TestScene 2"
    size: int = 10
    material: dict[str, str] = field(default_factory=dict)  # channel → rule text
    shape: Optional[str] = None
    spacing: Optional[float] = None
    output: str = "-"  # "-" = stdout

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "scene_name": self.scene_name,
            "size": self.size,
            "material": dict(self.material),
            "shape": self.shape,
            "spacing": self.spacing,
            "output": self.output,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ScenePreset:
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


PRESETS: dict[str, ScenePreset] = {
    p.name: p
    for p in (
        ScenePreset(
            name="specular",
            size=10,
            material={"albedo": "red", "specular": "@x"},
            output="-",
        ),
        ScenePreset(
            name="roughness_metallic",
            size=10,
            material={"albedo": "red", "roughness": "@x", "metallic": "@y"},
            output="test2.json",
        ),
        ScenePreset(
            name="materials",
            size=5,
            material={"albedo": "red", "roughness": "@x", "metallic": "@y"},
            output="materials.json",
        ),
    )
}


def list_presets() -> list[str]:
    return list(PRESETS)


def get_preset(name: str) -> ScenePreset:
    """Return a copy of a built-in preset so callers can modify it freely."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset: {name!r} (known: {', '.join(PRESETS)})")
    return ScenePreset.from_dict(PRESETS[name].to_dict())


def base_samplers() -> list[ConstantSampler | ImageSampler]:
    """The samplers every preset declares before its ramp."""
    return [
        ConstantSampler(id=settings.BASE_SAMPLER_ID, color=list(settings.BASE_COLOR)),
        ImageSampler(
            id=settings.BACKGROUND_SAMPLER_ID,
            type="equirectangular",
            file=settings.BACKGROUND_FILE,
        ),
    ]


def build_scene(preset: ScenePreset, camera: Optional[Camera] = None) -> Scene:
    """
    Assemble the full scene for a preset.

    Declaration order: base samplers, the size-step ramp, then the
    size × size node grid.
    """
    if preset.size < 0:
        raise ValueError(f"preset size must be non-negative, got {preset.size}")

    template = parse_template(preset.material)

    scene: Scene = create_scene(
        preset.scene_name,
        background=settings.BACKGROUND_SAMPLER_ID,
        camera=camera,
        samplers=base_samplers(),
    )
    extend_samplers(scene, generate_samplers(preset.size))
    extend_nodes(scene, generate_grid(
        preset.size,
        preset.size,
        shape=preset.shape,
        material_template=template,
        spacing=preset.spacing,
    ))
    return scene
