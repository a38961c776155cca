"""Errors raised while decoding .vox files.

Every error aborts the decode; a partially populated model is never returned.
"""


class VoxError(ValueError):
    """Base class for .vox decoding errors."""


class TruncatedInput(VoxError):
    """A read needed more bytes than remain in the buffer."""

    def __init__(self, offset: int, wanted: int, available: int):
        super().__init__(
            f"Truncated input at offset {hex(offset)}: "
            f"wanted {wanted} bytes, {available} available"
        )
        self.offset = offset
        self.wanted = wanted
        self.available = available


class MalformedChunkTree(VoxError):
    """Chunk lengths are inconsistent with the chunk contents."""


class BadSignature(VoxError):
    """The file does not start with the 'VOX ' signature."""


class SourceUnreadable(VoxError, OSError):
    """The source path could not be opened or read."""
