"""Tests for the scene document model and builder contract."""

from generator.scene import (
    Background,
    Camera,
    ConstantSampler,
    ImageSampler,
    MeshSource,
    Node,
    Scene,
    append_node,
    append_sampler,
    create_scene,
    extend_nodes,
    sampler_from_dict,
)


class TestCreateScene:
    """Tests for create_scene() and the append functions."""

    def test_empty_sequences(self):
        """A new scene has no samplers or nodes and points at its background."""
        scene = create_scene("Empty", background="bg")
        assert scene.name == "Empty"
        assert scene.background.color == "bg"
        assert scene.camera is None
        assert scene.samplers == []
        assert scene.nodes == []

    def test_initial_samplers_declared(self):
        """Samplers passed to create_scene are appended in order."""
        bg = ImageSampler(id="bg", type="equirectangular", file="sky.hdr")
        red = ConstantSampler(id="red", color=[1, 0, 0])
        scene = create_scene("Two", background="bg", samplers=[red, bg])
        assert scene.sampler_ids() == ["red", "bg"]

    def test_append_keeps_order(self):
        """Appends go to the end of the sequence."""
        scene = create_scene("S", background="bg")
        append_sampler(scene, ConstantSampler(id="a", color=[0, 0, 0]))
        append_sampler(scene, ConstantSampler(id="b", color=[0, 0, 0]))
        append_node(scene, Node(translate=[1, 0, 0]))
        extend_nodes(scene, [Node(translate=[2, 0, 0]), Node(translate=[3, 0, 0])])
        assert scene.sampler_ids() == ["a", "b"]
        assert [n.translate[0] for n in scene.nodes] == [1, 2, 3]

    def test_camera_is_kept(self):
        cam = Camera(position=[0, 0, -10], direction=[0, 0, 1])
        scene = create_scene("Cam", background="bg", camera=cam)
        assert scene.camera is cam


class TestToDict:
    """Tests for the document shape produced by to_dict()."""

    def test_minimal_scene_keys(self):
        """Optional sections are left out when unset."""
        scene = create_scene("Min", background="bg")
        d = scene.to_dict()
        assert d == {"name": "Min", "background": {"color": "bg"}, "samplers": [], "nodes": []}

    def test_camera_written_when_set(self):
        scene = create_scene(
            "Cam", background="bg", camera=Camera(position=[1, 2, 3], direction=[0, 0, 1])
        )
        assert scene.to_dict()["camera"] == {"position": [1, 2, 3], "direction": [0, 0, 1]}

    def test_image_sampler_optional_fields(self):
        """ldr and mode appear only when set."""
        plain = ImageSampler(id="tex", file="a.png")
        assert plain.to_dict() == {"id": "tex", "type": "image", "file": "a.png"}

        tuned = ImageSampler(id="tex", file="a.png", ldr=True, mode="nearest")
        assert tuned.to_dict()["ldr"] is True
        assert tuned.to_dict()["mode"] == "nearest"

    def test_node_material_key_order(self):
        """Material channels keep insertion order."""
        node = Node(translate=[0, 0, 0], material={"albedo": "red", "roughness": "s1", "metallic": "s2"})
        assert list(node.to_dict()["material"]) == ["albedo", "roughness", "metallic"]

    def test_node_optional_transform(self):
        node = Node(translate=[0, 0, 0], shape=None, mesh="bunny", rotate=[0, 90, 0], scale=[2, 2, 2])
        d = node.to_dict()
        assert "shape" not in d
        assert d["mesh"] == "bunny"
        assert d["rotate"] == [0, 90, 0]
        assert d["scale"] == [2, 2, 2]

    def test_meshes_written_when_present(self):
        scene = create_scene("M", background="bg")
        scene.meshes.append(MeshSource(file="bunny.obj", ids=["bunny"]))
        assert scene.to_dict()["meshes"] == [{"file": "bunny.obj", "ids": ["bunny"]}]


class TestFromDict:
    """Tests for decoding documents back into records."""

    def test_sampler_variant_by_file_key(self):
        """A 'file' key means an image sampler, 'color' a constant."""
        image = sampler_from_dict({"id": "bg", "type": "equirectangular", "file": "sky.hdr"})
        const = sampler_from_dict({"id": "red", "color": [0.9, 0.1, 0.1]})
        assert isinstance(image, ImageSampler)
        assert image.type == "equirectangular"
        assert isinstance(const, ConstantSampler)
        assert const.color == [0.9, 0.1, 0.1]

    def test_image_type_defaults_to_image(self):
        sampler = sampler_from_dict({"id": "tex", "file": "a.png"})
        assert sampler.type == "image"

    def test_full_scene_roundtrip(self):
        """from_dict(to_dict()) reproduces every optional section."""
        scene = Scene(
            name="Full",
            background=Background(color="bg"),
            camera=Camera(position=[0, 1, -5], direction=[0, 0, 1]),
            samplers=[
                ConstantSampler(id="red", color=[0.9, 0.1, 0.1]),
                ImageSampler(id="bg", file="sky.hdr", type="equirectangular", ldr=False, mode="linear"),
            ],
            nodes=[
                Node(translate=[0, 0, 0], material={"albedo": "red"}),
                Node(translate=[1, 0, 0], shape=None, mesh="bunny", scale=[0.5, 0.5, 0.5]),
            ],
            meshes=[MeshSource(file="bunny.obj", ids=["bunny"])],
        )
        assert Scene.from_dict(scene.to_dict()) == scene


class TestReferencedIds:
    """Tests for Scene.referenced_ids()."""

    def test_collects_background_and_materials(self):
        scene = create_scene("R", background="bg")
        append_node(scene, Node(translate=[0, 0, 0], material={"albedo": "red", "roughness": "s0"}))
        append_node(scene, Node(translate=[3, 0, 0], material={"albedo": "red", "roughness": "s1"}))
        assert scene.referenced_ids() == {"bg", "red", "s0", "s1"}
