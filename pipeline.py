"""
Pipeline — one generation run from preset to written document.

    build scene → serialize → emit → (optional) preview

Nothing is caught here; configuration, encoding and sink errors all
surface to whoever called run().
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from generator.presets import ScenePreset, build_scene
from generator.renderer import render_preview_to_file
from generator.scene import Camera, Scene
from output import Destination, emit, is_stdout, serialize


@dataclass
class PipelineState:
    """What the last run produced."""
    scene: Optional[Scene] = None
    text: Optional[str] = None
    destination: Destination = None
    preview_path: Optional[Path] = None


class ScenePipeline:
    """Runs a single preset through build, encode and write."""

    def __init__(
        self,
        preset: ScenePreset,
        camera: Optional[Camera] = None,
        indent: Optional[int] = None,
    ):
        self.preset = preset
        self.camera = camera
        self.indent = indent
        self.state = PipelineState()

    def build(self) -> Scene:
        scene = build_scene(self.preset, camera=self.camera)
        logger.debug(
            f"Built '{scene.name}' from preset '{self.preset.name}': "
            f"{len(scene.samplers)} samplers, {len(scene.nodes)} nodes"
        )
        self.state.scene = scene
        return scene

    def run(
        self,
        destination: Destination = None,
        preview: Optional[str | Path] = None,
    ) -> PipelineState:
        """
        Build, serialize and write the preset's scene.

        Args:
            destination: Where to write; defaults to the preset's output.
                "-" means stdout.
            preview: Optional PNG path for a top-down preview.

        Returns:
            The pipeline state after the run.
        """
        if destination is None:
            destination = self.preset.output

        scene = self.build()
        text = serialize(scene, indent=self.indent)
        self.state.text = text

        emit(text, destination)
        self.state.destination = destination
        if is_stdout(destination):
            logger.debug("Scene written to stdout")

        if preview is not None:
            self.state.preview_path = render_preview_to_file(scene, preview)
            logger.info(f"Preview saved to {self.state.preview_path}")

        return self.state
