from typing import NamedTuple

import numpy as np

from .config import MAX_CHANNEL_VALUE
from .errors import PixelRangeError, PixelReadError
from .source import ByteSource
from .tokenizer import read_uint


class PixelTriplet(NamedTuple):
    r: int
    g: int
    b: int


def read_pixel(source: ByteSource, row: int, col: int) -> PixelTriplet:
    """Read one R G B triplet; row/col are 0-based and only used for errors."""
    r = read_uint(source, MAX_CHANNEL_VALUE)
    g = read_uint(source, MAX_CHANNEL_VALUE) if r is not None else None
    b = read_uint(source, MAX_CHANNEL_VALUE) if g is not None else None
    if b is None:
        raise PixelReadError(row, col)
    return PixelTriplet(r, g, b)


def check_pixel(px: PixelTriplet, row: int, col: int, max_value: int = MAX_CHANNEL_VALUE) -> None:
    if not (0 <= px.r <= max_value and 0 <= px.g <= max_value and 0 <= px.b <= max_value):
        raise PixelRangeError(row, col)


def read_row(source: ByteSource, row: int, width: int) -> np.ndarray:
    """Decode `width` triplets into a (width, 3) uint16 array."""
    out = np.empty((width, 3), dtype=np.uint16)
    for col in range(width):
        px = read_pixel(source, row, col)
        check_pixel(px, row, col)
        out[col] = px
    return out
