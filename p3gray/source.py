from typing import BinaryIO, Optional

from .config import BUFFER_SIZE
from .errors import PPMIOError


class ByteSource:
    """
    Sequential byte reader over a binary stream with one byte of lookahead.

    Bytes are returned as ints (0..255); None marks end of file.
    The underlying stream is read in BUFFER_SIZE chunks and never seeked,
    so a rejected byte is held here rather than returned to the stream.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = BUFFER_SIZE):
        self._stream = stream
        self._buffer_size = max(1, int(buffer_size))
        self._chunk = b""
        self._pos = 0
        self._pending: Optional[int] = None
        self._eof = False

    def _fill(self) -> bool:
        if self._eof:
            return False
        try:
            chunk = self._stream.read(self._buffer_size)
        except OSError as exc:
            raise PPMIOError(f"Read failure: {exc}") from exc
        if not chunk:
            self._eof = True
            return False
        self._chunk = chunk
        self._pos = 0
        return True

    def next_byte(self) -> Optional[int]:
        if self._pending is not None:
            b, self._pending = self._pending, None
            return b
        if self._pos >= len(self._chunk) and not self._fill():
            return None
        b = self._chunk[self._pos]
        self._pos += 1
        return b

    def push_back(self, byte: int) -> None:
        if self._pending is not None:
            raise RuntimeError("only one byte of pushback is supported")
        self._pending = byte

    def peek(self) -> Optional[int]:
        b = self.next_byte()
        if b is not None:
            self._pending = b
        return b

    def advance(self) -> None:
        self.next_byte()

    def read(self, n: int) -> bytes:
        """Read up to n bytes; fewer only at end of file."""
        out = bytearray()
        while len(out) < n:
            b = self.next_byte()
            if b is None:
                break
            out.append(b)
        return bytes(out)
