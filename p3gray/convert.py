"""
End-to-end P3 color -> P3 grayscale conversion.

Header parse completes before anything is written; each row is decoded,
formatted and written before the next one is read. The first failure
aborts the whole conversion.
"""
import io
import os
from contextlib import suppress
from typing import BinaryIO, Optional, Union

from .config import BUFFER_SIZE, MAX_DIMENSION
from .errors import PPMIOError
from .header import ImageHeader, parse_header
from .pixels import read_row
from .rows import DecimalLUT, RowAssembler
from .source import ByteSource
from .writer import PPMWriter

PathLike = Union[str, os.PathLike]


def write_rows(source: ByteSource, header: ImageHeader, writer: PPMWriter,
               lut: Optional[DecimalLUT] = None) -> None:
    assembler = RowAssembler(header.width, lut if lut is not None else DecimalLUT(header.max_value))
    for y in range(header.height):
        rgb = read_row(source, y, header.width)
        writer.write_row(assembler.assemble(rgb))


def convert_stream(src: BinaryIO, sink: BinaryIO, max_dimension: int = MAX_DIMENSION,
                   lut: Optional[DecimalLUT] = None) -> ImageHeader:
    """Convert from one binary file-like object to another; returns the parsed header."""
    source = ByteSource(src)
    header = parse_header(source, max_dimension)
    writer = PPMWriter(sink)
    writer.write_header(header)
    write_rows(source, header, writer, lut)
    writer.flush()
    return header


def convert_bytes(data: bytes, max_dimension: int = MAX_DIMENSION) -> bytes:
    out = io.BytesIO()
    convert_stream(io.BytesIO(data), out, max_dimension)
    return out.getvalue()


def _discard(path: PathLike) -> None:
    with suppress(OSError):
        os.remove(path)


def _convert_into(source: ByteSource, output_path: PathLike, max_dimension: int,
                  lut: Optional[DecimalLUT]) -> ImageHeader:
    # output is only created once the header is known to be good
    header = parse_header(source, max_dimension)
    try:
        out = open(output_path, "wb", buffering=BUFFER_SIZE)
    except OSError as exc:
        raise PPMIOError(f"Cannot open output file '{output_path}': {exc}") from exc

    try:
        writer = PPMWriter(out)
        writer.write_header(header)
        write_rows(source, header, writer, lut)
        try:
            out.close()
        except OSError as exc:
            raise PPMIOError(f"Failed to close output file properly: {exc}") from exc
    except BaseException:
        if not out.closed:
            with suppress(OSError):
                out.close()
        _discard(output_path)
        raise
    return header


def convert_file(input_path: PathLike, output_path: PathLike, max_dimension: int = MAX_DIMENSION,
                 lut: Optional[DecimalLUT] = None) -> ImageHeader:
    """
    Convert input_path to a grayscale P3 at output_path.

    On failure no output file is left behind.
    """
    try:
        inp = open(input_path, "rb")
    except OSError as exc:
        raise PPMIOError(f"Cannot open input file '{input_path}': {exc}") from exc

    try:
        header = _convert_into(ByteSource(inp), output_path, max_dimension, lut)
    except BaseException:
        with suppress(OSError):
            inp.close()
        raise

    try:
        inp.close()
    except OSError as exc:
        _discard(output_path)
        raise PPMIOError(f"Error closing input file '{input_path}': {exc}") from exc
    return header
