"""
Scene output — JSON encoding and the stdout / file sink.

The document is written in one go. Nothing here retries or cleans up:
encoder and file-system errors go straight back to the caller.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from generator.scene import Scene
from config import settings

STDOUT = "-"

Destination = Union[str, Path, None]


def serialize(scene: Scene, indent: Optional[int] = None) -> str:
    """
    Encode a scene as JSON text.

    Sequence order and material key order are kept. NaN / infinity are
    rejected with ValueError since the renderer's parser cannot read them.
    """
    if indent is None:
        indent = settings.JSON_INDENT
    separators = (",", ":") if indent is None else None
    return json.dumps(
        scene.to_dict(),
        indent=indent,
        separators=separators,
        allow_nan=False,
    )


def deserialize(text: str) -> Scene:
    """Decode JSON text produced by serialize() back into a Scene."""
    return Scene.from_dict(json.loads(text))


def is_stdout(destination: Destination) -> bool:
    return destination is None or str(destination) == STDOUT


def emit(text: str, destination: Destination = STDOUT) -> None:
    """
    Write the encoded document to stdout or a file.

    Files are overwritten, never merged. A missing parent directory
    fails at open() before anything is written.
    """
    if is_stdout(destination):
        sys.stdout.write(text)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return

    path = Path(destination)
    with open(path, "w", encoding=settings.OUTPUT_ENCODING) as f:
        f.write(text)
    logger.info(f"Wrote {len(text)} characters to {path}")


def load_scene(path: Union[str, Path]) -> Scene:
    """Read a scene document from disk."""
    with open(path, "r", encoding=settings.OUTPUT_ENCODING) as f:
        return deserialize(f.read())
