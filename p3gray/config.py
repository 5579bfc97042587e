"""Tunables shared by the parser, the writer and the command line."""

# ---------------- CONFIG ----------------
DEFAULT_INPUT = "im.ppm"
DEFAULT_OUTPUT = "im-gray.ppm"

BUFFER_SIZE = 256 * 1024

MAX_DIMENSION = 100000
MAX_CHANNEL_VALUE = 255
HEADER_MAX_VALUE_LIMIT = 65535

MAGIC = b"P3"
# ----------------------------------------


def max_pixel_count(max_dimension: int) -> int:
    """Largest width*height accepted for a given dimension bound."""
    return max_dimension * max_dimension // 10
