from dataclasses import dataclass

from .config import (HEADER_MAX_VALUE_LIMIT, MAGIC, MAX_CHANNEL_VALUE,
                     MAX_DIMENSION, max_pixel_count)
from .errors import (ImageTooLarge, InvalidDimensions, MalformedHeader,
                     UnsupportedFormat, UnsupportedMaxValue)
from .source import ByteSource
from .tokenizer import read_uint, scan_uint, skip_blanks

SIGNS = (ord("-"), ord("+"))


@dataclass(frozen=True)
class ImageHeader:
    width: int
    height: int
    max_value: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def row_capacity(self) -> int:
        """Worst-case size of one formatted output row, in bytes."""
        return self.width * (3 * 3 + 3) + 2


def _read_dimension(source: ByteSource, name: str, max_dimension: int) -> int:
    val = scan_uint(source, max_dimension)
    if val is None:
        if source.peek() in SIGNS:
            raise InvalidDimensions(f"Invalid image {name}: signed values are not allowed")
        raise MalformedHeader("Failed to read image dimensions")
    return val


def parse_header(source: ByteSource, max_dimension: int = MAX_DIMENSION) -> ImageHeader:
    """
    Parse and validate a P3 header: magic, width, height, max value.

    Raises:
        UnsupportedFormat: magic is not "P3".
        MalformedHeader: a field is missing or not a number.
        InvalidDimensions: width/height outside 1..max_dimension.
        ImageTooLarge: width*height above the pixel count guard.
        UnsupportedMaxValue: max value other than 255.
    """
    if skip_blanks(source) is None:
        raise MalformedHeader("Unexpected EOF in header")
    magic = source.read(len(MAGIC))
    if magic != MAGIC:
        raise UnsupportedFormat(f"Unsupported PPM magic number {magic!r} (expected P3)")

    width = _read_dimension(source, "width", max_dimension)
    height = _read_dimension(source, "height", max_dimension)
    if not (1 <= width <= max_dimension and 1 <= height <= max_dimension):
        # scan_uint clamps oversized values, so report the bound instead
        shown_w = width if width <= max_dimension else f">{max_dimension}"
        shown_h = height if height <= max_dimension else f">{max_dimension}"
        raise InvalidDimensions(
            f"Invalid image dimensions ({shown_w}x{shown_h}), must be 1-{max_dimension}")
    if width * height > max_pixel_count(max_dimension):
        raise ImageTooLarge(f"Image too large ({width}x{height} pixels)")

    max_value = read_uint(source, HEADER_MAX_VALUE_LIMIT)
    if max_value is None:
        raise MalformedHeader("Failed to read maximum color value")
    if max_value != MAX_CHANNEL_VALUE:
        raise UnsupportedMaxValue(
            f"Maximum color value must be {MAX_CHANNEL_VALUE} (got {max_value})")

    return ImageHeader(width=width, height=height, max_value=max_value)
