"""Decoded model types.

These are the long-lived results of a decode. Chunk headers and the cursor
are discarded once decoding finishes; only a `DecodedModel` is returned.
"""

from typing import NamedTuple, Optional

from voxloader.errors import MalformedChunkTree
from voxloader.palette import Color


class Size(NamedTuple):
    """Dimensions of the voxel volume."""

    x: int = 0
    y: int = 0
    z: int = 0


class Voxel(NamedTuple):
    """A voxel within a layer; color_index 0 conventionally means empty."""

    x: int
    y: int
    z: int
    color_index: int


VoxelLayer = list[Voxel]


class DecodedModel:
    """Size, voxel layers and palette read from a .vox file."""

    def __init__(
        self,
        size: Size,
        layers: list[VoxelLayer],
        palette: tuple[int, ...],
        version: int = 0,
        path: Optional[str] = None,
    ):
        """DecodedModel constructor."""
        if len(palette) != 256:
            raise MalformedChunkTree(
                f"Palette must have 256 entries, got {len(palette)}"
            )
        self.size = size
        self.layers = layers
        self.palette = palette
        self.version = version
        self.path = path

    @property
    def voxel_count(self) -> int:
        return sum(len(layer) for layer in self.layers)

    def color_of(self, voxel: Voxel) -> Color:
        """Look up a voxel's palette color."""
        return Color.from_packed(self.palette[voxel.color_index])

    def __repr__(self):
        return (
            f"DecodedModel(size={tuple(self.size)}, "
            f"layers={[len(layer) for layer in self.layers]}, "
            f"version={self.version}, path={self.path!r})"
        )
