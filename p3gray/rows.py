"""
Grayscale row assembly.

Each pixel becomes gray = (r + g + b) // 3 (truncating, no rounding),
written three times. Decimal text comes from a table built once, so
the hot loop only copies bytes into a preallocated row buffer.
"""
from typing import Iterable, Tuple

import numpy as np

from .config import MAX_CHANNEL_VALUE


def average_gray(r: int, g: int, b: int) -> int:
    return (r + g + b) // 3


class DecimalLUT:
    """Decimal text and byte length of every value 0..max_value."""

    def __init__(self, max_value: int = MAX_CHANNEL_VALUE):
        self._text: Tuple[bytes, ...] = tuple(str(v).encode("ascii") for v in range(max_value + 1))
        self._len: Tuple[int, ...] = tuple(len(t) for t in self._text)

    def __len__(self) -> int:
        return len(self._text)

    def text(self, value: int) -> bytes:
        return self._text[value]

    def length(self, value: int) -> int:
        return self._len[value]


class RowAssembler:
    """Formats one grayscale output row at a time into a reused buffer."""

    def __init__(self, width: int, lut: DecimalLUT):
        self.width = width
        self.lut = lut
        # three 3-digit values + three separators per pixel, plus newline
        self.capacity = width * (3 * 3 + 3) + 2
        self._buf = bytearray(self.capacity)
        self._view = memoryview(self._buf)
        self._pos = 0

    def _put(self, data: bytes, n: int) -> None:
        pos = self._pos
        self._buf[pos:pos + n] = data
        self._pos = pos + n

    def _append_gray(self, gray: int, last: bool) -> None:
        text, n = self.lut.text(gray), self.lut.length(gray)
        self._put(text, n)
        self._put(b" ", 1)
        self._put(text, n)
        self._put(b" ", 1)
        self._put(text, n)
        if not last:
            self._put(b" ", 1)

    def _finish(self) -> memoryview:
        self._put(b"\n", 1)
        return self._view[:self._pos]

    def assemble(self, rgb_row: np.ndarray) -> memoryview:
        """
        Format a (width, 3) array of channel values.
        The returned view is only valid until the next call.
        """
        grays = (rgb_row.astype(np.uint16).sum(axis=1) // 3).tolist()
        self._pos = 0
        last = len(grays) - 1
        for x, gray in enumerate(grays):
            self._append_gray(gray, x == last)
        return self._finish()

    def assemble_pixels(self, pixels: Iterable[Tuple[int, int, int]]) -> memoryview:
        pixels = list(pixels)
        self._pos = 0
        last = len(pixels) - 1
        for x, (r, g, b) in enumerate(pixels):
            self._append_gray(average_gray(r, g, b), x == last)
        return self._finish()
