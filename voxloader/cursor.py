"""Sequential reads over an in-memory .vox buffer."""

from typing import Union

from voxloader.errors import TruncatedInput


class ByteCursor:
    """Read offset over a byte buffer.

    The offset only moves forward. A read that would run past the end of the
    buffer raises `TruncatedInput` and leaves the offset where it was.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        self.data = memoryview(data)
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def _take(self, n: int) -> memoryview:
        if n < 0 or n > self.remaining:
            raise TruncatedInput(self.offset, n, self.remaining)
        view = self.data[self.offset : self.offset + n]
        self.offset += n
        return view

    def read_bytes(self, n: int) -> bytes:
        """Read n bytes."""
        return self._take(n).tobytes()

    def skip(self, n: int):
        """Advance past n bytes without decoding them."""
        self._take(n)

    def read_tag(self) -> str:
        """Read a 4-character chunk tag.

        Each byte becomes the character with the same code point, so
        non-ASCII bytes pass through instead of failing to decode.
        """
        return self.read_bytes(4).decode("latin-1")

    def read_u8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return self._take(1)[0]

    def read_u32(self, byteorder: str) -> int:
        """Read an unsigned 32-bit integer.

        `byteorder` is "little" or "big". Structural fields are little-endian;
        palette colors are big-endian so R lands in the most significant byte.
        """
        if byteorder not in ("little", "big"):
            raise ValueError(f"Invalid byteorder: {byteorder!r}")
        return int.from_bytes(self._take(4), byteorder, signed=False)
