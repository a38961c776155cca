"""Shorthand loaders for VoxLoader.

`load` and `loads` wrap `VoxFile` for callers that only want the decoded
model, in the manner of `json.load` and `json.loads`.
"""

from typing import Optional, Union

from voxloader.model import DecodedModel
from voxloader.voxfile import UnknownChunkCallback, VoxFile


def load(
    path: str, on_unknown_chunk: Optional[UnknownChunkCallback] = None
) -> DecodedModel:
    """Decode the .vox file at path."""
    return VoxFile.read(path, on_unknown_chunk=on_unknown_chunk)


def loads(
    data: Union[bytes, bytearray, memoryview],
    on_unknown_chunk: Optional[UnknownChunkCallback] = None,
) -> DecodedModel:
    """Decode .vox file bytes."""
    return VoxFile.from_bytes(data, on_unknown_chunk=on_unknown_chunk)
