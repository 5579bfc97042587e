"""ASCII PPM (P3) color to grayscale converter."""
from .convert import convert_bytes, convert_file, convert_stream
from .errors import (ImageTooLarge, InvalidDimensions, MalformedHeader, PixelRangeError,
                     PixelReadError, PPMError, PPMFormatError, PPMIOError, UnsupportedFormat,
                     UnsupportedMaxValue)
from .header import ImageHeader, parse_header
from .pixels import PixelTriplet, read_pixel
from .rows import DecimalLUT, RowAssembler, average_gray
from .source import ByteSource
from .tokenizer import read_uint
from .writer import PPMWriter, format_header

__version__ = "0.1.0"
