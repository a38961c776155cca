"""Reader for MagicaVoxel .vox files."""

from voxloader import voxfile
from voxloader.cursor import ByteCursor
from voxloader.errors import (
    BadSignature,
    MalformedChunkTree,
    SourceUnreadable,
    TruncatedInput,
    VoxError,
)
from voxloader.model import DecodedModel, Size, Voxel, VoxelLayer
from voxloader.palette import DEFAULT_PALETTE, Color
from voxloader.vox import load, loads
from voxloader.voxfile import ChunkHeader, ChunkReader, VoxFile

__all__ = [
    "voxfile",
    "ByteCursor",
    "BadSignature",
    "MalformedChunkTree",
    "SourceUnreadable",
    "TruncatedInput",
    "VoxError",
    "DecodedModel",
    "Size",
    "Voxel",
    "VoxelLayer",
    "DEFAULT_PALETTE",
    "Color",
    "load",
    "loads",
    "ChunkHeader",
    "ChunkReader",
    "VoxFile",
]
