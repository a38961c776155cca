"""VoxFile reading and the recursive chunk reader.

The goal of this module is to turn the raw bytes of a MagicaVoxel .vox file
into a `DecodedModel`. A .vox file is a signature, a version and one root
'MAIN' chunk; every chunk is laid out as

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    1x4      | char       | chunk id
    4        | int        | num bytes of chunk content (N)
    4        | int        | num bytes of children chunks (M)
    N        |            | chunk content
    M        |            | children chunks
    -------------------------------------------------------------------------------
"""

import logging
from typing import Callable, NamedTuple, Optional, Union

from voxloader.cursor import ByteCursor
from voxloader.errors import BadSignature, MalformedChunkTree, SourceUnreadable
from voxloader.model import DecodedModel, Size, Voxel, VoxelLayer
from voxloader.palette import DEFAULT_PALETTE

logger = logging.getLogger(__name__)

SIGNATURE = b"VOX "
KNOWN_VERSIONS = (150, 200)

# tag + content length + children length
CHUNK_HEADER_SIZE = 12


class ChunkHeader(NamedTuple):
    """Header preceding every chunk."""

    tag: str
    content_length: int
    children_length: int

    @staticmethod
    def read(cursor: ByteCursor) -> "ChunkHeader":
        tag = cursor.read_tag()
        content_length = cursor.read_u32("little")
        children_length = cursor.read_u32("little")
        return ChunkHeader(tag, content_length, children_length)


UnknownChunkCallback = Callable[[ChunkHeader], None]


class Chunk:
    """Chunk class."""

    id = ""
    has_children = False

    def __init__(self, header: ChunkHeader):
        self.header = header

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "Chunk":
        raise NotImplementedError


class MainChunk(Chunk):
    """Main chunk class.

    Chunk 'MAIN'
    {
        // models
        Chunk 'SIZE'
        Chunk 'XYZI'

        ...

        // palette
        Chunk 'RGBA'    : optional

        // anything else is skipped
    }
    """

    id = "MAIN"
    has_children = True

    def __init__(self, header: ChunkHeader, children: list[Chunk]):
        """MainChunk constructor."""
        super().__init__(header)
        self.children = children

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "MainChunk":
        reader.cursor.skip(header.content_length)

        # Each child is charged its content plus its own header.
        children = []
        remaining = header.children_length
        while remaining > 0:
            child = reader.read_chunk()
            remaining -= child.header.content_length + CHUNK_HEADER_SIZE
            if remaining < 0:
                raise MalformedChunkTree(
                    f"Children of {cls.id!r} overrun the declared "
                    f"{header.children_length} bytes by {-remaining} "
                    f"(last child {child.header.tag!r})"
                )
            children += [child]

        return MainChunk(header, children)


class SizeChunk(Chunk):
    """Size chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | size x
    4        | int        | size y
    4        | int        | size z : gravity direction
    -------------------------------------------------------------------------------
    """

    id = "SIZE"

    def __init__(self, header: ChunkHeader, size: Size):
        """SizeChunk constructor."""
        super().__init__(header)
        self.size = size

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "SizeChunk":
        cursor = reader.cursor

        x = cursor.read_u32("little")
        y = cursor.read_u32("little")
        z = cursor.read_u32("little")

        return SizeChunk(header, Size(x, y, z))


class XYZIChunk(Chunk):
    """XYZI chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type       | Value
    -------------------------------------------------------------------------------
    4        | int        | numVoxels (N)
    4 x N    | int        | (x, y, z, colorIndex) : 1 byte for each component
    -------------------------------------------------------------------------------
    """

    id = "XYZI"

    def __init__(self, header: ChunkHeader, voxels: VoxelLayer):
        """XYZIChunk constructor."""
        super().__init__(header)
        self.voxels = voxels

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "XYZIChunk":
        cursor = reader.cursor

        num_voxels = cursor.read_u32("little")

        voxels = []
        for _ in range(num_voxels):
            x = cursor.read_u8()
            y = cursor.read_u8()
            z = cursor.read_u8()
            color_index = cursor.read_u8()
            voxels += [Voxel(x, y, z, color_index)]

        return XYZIChunk(header, voxels)


class PaletteChunk(Chunk):
    """Palette chunk class.

    -------------------------------------------------------------------------------
    # Bytes  | Type     | Value
    -------------------------------------------------------------------------------
    4 x 256  | int      | (R, G, B, A) : 1 byte for each component
    -------------------------------------------------------------------------------

    Each entry is read big-endian so the packed value reads 0xRRGGBBAA.
    """

    id = "RGBA"
    num_colors = 256

    def __init__(self, header: ChunkHeader, palette: list[int]):
        """PaletteChunk constructor."""
        super().__init__(header)
        self.palette = palette

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "PaletteChunk":
        expected = cls.num_colors * 4
        if header.content_length != expected:
            raise MalformedChunkTree(
                f"Chunk {cls.id!r} holds {header.content_length} bytes; "
                f"expected {expected}"
            )

        palette = [reader.cursor.read_u32("big") for _ in range(cls.num_colors)]

        return PaletteChunk(header, palette)


class UnknownChunk(Chunk):
    """Any chunk this reader does not interpret; its content is skipped."""

    @classmethod
    def read(cls, reader: "ChunkReader", header: ChunkHeader) -> "UnknownChunk":
        reader.cursor.skip(header.content_length)
        return UnknownChunk(header)


CHUNK_TYPES: dict[str, type[Chunk]] = {
    chunk_type.id: chunk_type
    for chunk_type in (MainChunk, SizeChunk, XYZIChunk, PaletteChunk)
}


class ChunkReader:
    """Recursive chunk reader.

    Decodes chunks from the cursor and collects the size, voxel layers and
    palette entries they carry. The accumulators are only meaningful once the
    root chunk has been read completely.
    """

    def __init__(
        self,
        cursor: ByteCursor,
        on_unknown_chunk: Optional[UnknownChunkCallback] = None,
    ):
        """ChunkReader constructor."""
        self.cursor = cursor
        self.on_unknown_chunk = on_unknown_chunk

        self.size = Size()
        self.layers: list[VoxelLayer] = []
        self.palette: list[int] = []

        # number of chunks currently being read
        self.depth = 0

    def read_chunk(self) -> Chunk:
        """Read one chunk, including its children, at the cursor."""
        header = ChunkHeader.read(self.cursor)
        chunk_type = CHUNK_TYPES.get(header.tag, UnknownChunk)

        if chunk_type.has_children and self.depth > 0:
            raise MalformedChunkTree(
                f"Nested {header.tag!r} chunk at "
                f"{hex(self.cursor.offset - CHUNK_HEADER_SIZE)}; only the root "
                "chunk may have children"
            )

        start = self.cursor.offset
        self.depth += 1
        chunk = chunk_type.read(self, header)
        self.depth -= 1
        if not chunk_type.has_children:
            self._finish_content(header, self.cursor.offset - start)

        if isinstance(chunk, SizeChunk):
            self.size = chunk.size
        elif isinstance(chunk, XYZIChunk):
            self.layers += [chunk.voxels]
        elif isinstance(chunk, PaletteChunk):
            self.palette += chunk.palette
        elif isinstance(chunk, UnknownChunk):
            logger.debug(
                f"Skipping unsupported chunk {header.tag!r} "
                f"({header.content_length} bytes) at {hex(start)}"
            )
            if self.on_unknown_chunk is not None:
                self.on_unknown_chunk(header)

        return chunk

    def _finish_content(self, header: ChunkHeader, consumed: int):
        """Move the cursor to the declared end of a chunk's content."""
        if consumed > header.content_length:
            raise MalformedChunkTree(
                f"Chunk {header.tag!r} declares {header.content_length} content "
                f"bytes but its payload takes {consumed}"
            )
        self.cursor.skip(header.content_length - consumed)


class VoxFile:
    """Entry points for decoding .vox files."""

    @staticmethod
    def read(
        path: str, on_unknown_chunk: Optional[UnknownChunkCallback] = None
    ) -> DecodedModel:
        """Read a .vox file from the given path."""
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SourceUnreadable(f"Cannot read {path}: {e}") from e

        return VoxFile.from_bytes(data, path=path, on_unknown_chunk=on_unknown_chunk)

    @staticmethod
    def from_bytes(
        data: Union[bytes, bytearray, memoryview],
        path: Optional[str] = None,
        on_unknown_chunk: Optional[UnknownChunkCallback] = None,
    ) -> DecodedModel:
        """Decode .vox file bytes already held in memory."""
        cursor = ByteCursor(data)

        header = cursor.read_bytes(4)
        if header != SIGNATURE:
            raise BadSignature(f"Invalid .vox file header: {header!r}")

        version = cursor.read_u32("little")
        if version not in KNOWN_VERSIONS:
            logger.warning(f"Unexpected .vox version {version}; reading anyway")

        reader = ChunkReader(cursor, on_unknown_chunk)
        root = reader.read_chunk()
        if not isinstance(root, MainChunk):
            raise MalformedChunkTree(
                f"Invalid root chunk ID: {root.header.tag!r}; "
                f"expected {MainChunk.id!r}"
            )

        if cursor.remaining:
            logger.debug(f"Ignoring {cursor.remaining} bytes after the root chunk")

        if len(reader.palette) == PaletteChunk.num_colors:
            palette = tuple(reader.palette)
        else:
            if reader.palette:
                logger.debug(
                    f"Got {len(reader.palette)} palette entries; "
                    "using the default palette"
                )
            palette = DEFAULT_PALETTE

        return DecodedModel(reader.size, reader.layers, palette, version, path)
