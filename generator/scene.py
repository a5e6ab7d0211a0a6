"""
Scene document model — the records a generation run assembles.

Everything here is plain data: a Scene owns its samplers and nodes, and
generators only ever append to it. Nothing is looked up or removed, and
nothing is validated; referential closure between material channels and
sampler ids is the generator's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

Vec3 = list[float]


def _vec3(values: Iterable[float]) -> Vec3:
    return list(values)


@dataclass
class Camera:
    """Viewpoint; absent from a scene means the renderer picks one."""
    position: Vec3
    direction: Vec3

    def to_dict(self) -> dict[str, Any]:
        return {"position": list(self.position), "direction": list(self.direction)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Camera:
        return cls(position=_vec3(d["position"]), direction=_vec3(d["direction"]))


@dataclass
class Background:
    color: str  # sampler id

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Background:
        return cls(color=d["color"])


@dataclass
class ConstantSampler:
    """A flat RGB color. Components are conventionally in [0, 1]."""
    id: str
    color: Vec3

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "color": list(self.color)}


@dataclass
class ImageSampler:
    """
    A texture read from disk by the renderer.

    type is "image" for 2D maps or "equirectangular" for environment maps.
    ldr and mode are only written when set.
    """
    id: str
    file: str
    type: str = "image"
    ldr: Optional[bool] = None
    mode: Optional[str] = None  # "linear" | "nearest"

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"id": self.id, "type": self.type, "file": self.file}
        if self.ldr is not None:
            d["ldr"] = self.ldr
        if self.mode is not None:
            d["mode"] = self.mode
        return d


Sampler = Union[ConstantSampler, ImageSampler]


def sampler_from_dict(d: dict[str, Any]) -> Sampler:
    """Pick the sampler variant the same way the renderer's loader does."""
    if "file" in d:
        return ImageSampler(
            id=d["id"],
            file=d["file"],
            type=d.get("type", "image"),
            ldr=d.get("ldr"),
            mode=d.get("mode"),
        )
    return ConstantSampler(id=d["id"], color=_vec3(d["color"]))


@dataclass
class MeshSource:
    """A Wavefront file and the object names to pull from it."""
    file: str
    ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "ids": list(self.ids)}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MeshSource:
        return cls(file=d["file"], ids=list(d.get("ids", [])))


@dataclass
class Node:
    """A positioned shape instance. material maps channel name → sampler id."""
    translate: Vec3
    shape: Optional[str] = "sphere"
    material: dict[str, str] = field(default_factory=dict)
    rotate: Optional[Vec3] = None  # Euler angles, degrees
    scale: Optional[Vec3] = None
    mesh: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"translate": list(self.translate)}
        if self.rotate is not None:
            d["rotate"] = list(self.rotate)
        if self.scale is not None:
            d["scale"] = list(self.scale)
        if self.mesh is not None:
            d["mesh"] = self.mesh
        if self.shape is not None:
            d["shape"] = self.shape
        d["material"] = dict(self.material)
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Node:
        return cls(
            translate=_vec3(d.get("translate", [0, 0, 0])),
            shape=d.get("shape"),
            material=dict(d.get("material", {})),
            rotate=_vec3(d["rotate"]) if "rotate" in d else None,
            scale=_vec3(d["scale"]) if "scale" in d else None,
            mesh=d.get("mesh"),
        )


@dataclass
class Scene:
    """The root document handed to the renderer."""
    name: str
    background: Background
    camera: Optional[Camera] = None
    samplers: list[Sampler] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)
    meshes: list[MeshSource] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"name": self.name}
        if self.camera is not None:
            d["camera"] = self.camera.to_dict()
        d["background"] = self.background.to_dict()
        if self.meshes:
            d["meshes"] = [m.to_dict() for m in self.meshes]
        d["samplers"] = [s.to_dict() for s in self.samplers]
        d["nodes"] = [n.to_dict() for n in self.nodes]
        return d

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Scene:
        return cls(
            name=d.get("name", ""),
            background=Background.from_dict(d["background"]),
            camera=Camera.from_dict(d["camera"]) if "camera" in d else None,
            samplers=[sampler_from_dict(s) for s in d.get("samplers", [])],
            nodes=[Node.from_dict(n) for n in d.get("nodes", [])],
            meshes=[MeshSource.from_dict(m) for m in d.get("meshes", [])],
        )

    def sampler_ids(self) -> list[str]:
        return [s.id for s in self.samplers]

    def referenced_ids(self) -> set[str]:
        """Every sampler id the background and node materials point at."""
        refs = {self.background.color}
        for node in self.nodes:
            refs.update(node.material.values())
        return refs


# ── Builder contract ─────────────────────────────────────────────────

def create_scene(
    name: str,
    background: str,
    camera: Optional[Camera] = None,
    samplers: Iterable[Sampler] = (),
) -> Scene:
    """
    Start an empty scene whose background points at sampler id `background`.

    The background sampler may be passed in `samplers` so it is declared
    as part of this call, or appended afterwards.
    """
    scene = Scene(name=name, background=Background(color=background), camera=camera)
    extend_samplers(scene, samplers)
    return scene


def append_sampler(scene: Scene, sampler: Sampler) -> None:
    scene.samplers.append(sampler)


def append_node(scene: Scene, node: Node) -> None:
    scene.nodes.append(node)


def extend_samplers(scene: Scene, samplers: Iterable[Sampler]) -> None:
    for sampler in samplers:
        append_sampler(scene, sampler)


def extend_nodes(scene: Scene, nodes: Iterable[Node]) -> None:
    for node in nodes:
        append_node(scene, node)
