"""
PNG <-> P3 helpers built on Pillow and NumPy.

png_to_p3 produces color inputs for the grayscale converter;
p3_to_png renders any 8-bit P3 (e.g. a converted result) for viewing.
"""
from pathlib import Path

import numpy as np
from PIL import Image

from .config import BUFFER_SIZE, MAX_DIMENSION
from .header import parse_header
from .pixels import read_row
from .rows import DecimalLUT
from .source import ByteSource


def read_p3_array(path, max_dimension: int = MAX_DIMENSION) -> np.ndarray:
    """Load a P3 file into an (H, W, 3) uint8 array using the strict parser."""
    with open(path, "rb") as f:
        source = ByteSource(f)
        header = parse_header(source, max_dimension)
        arr = np.empty((header.height, header.width, 3), dtype=np.uint8)
        for y in range(header.height):
            arr[y] = read_row(source, y, header.width)
    return arr


def write_p3_rgb(path, rgb: np.ndarray) -> None:
    """
    Write an (H, W, 3) uint8 array as P3 with maxval 255,
    one image row per line.
    """
    h, w, _ = rgb.shape
    lut = DecimalLUT()
    with open(path, "wb", buffering=BUFFER_SIZE) as f:
        f.write(f"P3\n{w} {h}\n255\n".encode("ascii"))
        for row in rgb.reshape(h, w * 3).tolist():
            f.write(b" ".join(lut.text(v) for v in row))
            f.write(b"\n")


def png_to_p3(png_path, ppm_path) -> None:
    with Image.open(png_path) as im:
        # palette, grayscale, alpha and 16-bit modes all collapse to 8-bit RGB
        if im.mode != "RGB":
            im = im.convert("RGB")
        rgb = np.asarray(im, dtype=np.uint8)
    write_p3_rgb(Path(ppm_path), rgb)


def p3_to_png(ppm_path, png_path) -> None:
    arr = read_p3_array(ppm_path)
    Image.fromarray(arr).save(png_path)
