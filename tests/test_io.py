import pytest
import os
import voxloader

MODELS_DIR = os.path.join(os.path.dirname(__file__), "models")

# find all models
MODEL_PATHS = []
for root, dirs, files in os.walk(MODELS_DIR):
    for file in files:
        if file.endswith(".vox"):
            MODEL_PATHS.append(os.path.join(root, file))


@pytest.mark.parametrize("model_path", MODEL_PATHS)
def test_read(model_path):
    model = voxloader.VoxFile.read(model_path)

    assert len(model.palette) == 256
    assert model.path == model_path
    assert model.layers

    for layer in model.layers:
        for voxel in layer:
            assert all(0 <= value <= 255 for value in voxel)


@pytest.mark.parametrize("model_path", MODEL_PATHS)
def test_read_matches_loads(model_path):
    with open(model_path, "rb") as f:
        from_bytes = voxloader.loads(f.read())

    from_path = voxloader.load(model_path)

    assert from_bytes.size == from_path.size
    assert from_bytes.layers == from_path.layers
    assert from_bytes.palette == from_path.palette
    assert from_bytes.path is None


def test_one_layer():
    model = voxloader.load(os.path.join(MODELS_DIR, "one_layer.vox"))

    assert model.version == 150
    assert model.size == (2, 3, 4)
    assert model.layers == [[(1, 2, 3, 10), (4, 5, 6, 20)]]
    assert model.palette == voxloader.DEFAULT_PALETTE


def test_two_layers_palette():
    unknown = []
    model = voxloader.load(
        os.path.join(MODELS_DIR, "two_layers_palette.vox"),
        on_unknown_chunk=unknown.append,
    )

    assert model.version == 200
    # the second SIZE chunk replaces the first
    assert model.size == (5, 6, 7)
    assert model.layers == [[(0, 0, 0, 1)], [(4, 5, 6, 200)]]
    assert [header.tag for header in unknown] == ["nTRN"]

    for i, color in enumerate(model.palette):
        assert color == (i << 24) | (i << 16) | (i << 8) | 0xFF

    assert model.color_of(model.layers[1][0]) == voxloader.Color(200, 200, 200)
    assert model.voxel_count == 2


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.vox")

    with pytest.raises(voxloader.SourceUnreadable, match="missing.vox") as exc_info:
        voxloader.load(path)

    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
