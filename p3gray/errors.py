"""Error types raised while converting a P3 image."""


class PPMError(Exception):
    """Base class for every conversion failure."""


class PPMIOError(PPMError):
    """Open, read, write or close failure on the input or output."""


class PPMFormatError(PPMError, ValueError):
    """The input is not a supported P3 image."""


class UnsupportedFormat(PPMFormatError):
    pass


class MalformedHeader(PPMFormatError):
    pass


class InvalidDimensions(PPMFormatError):
    pass


class ImageTooLarge(PPMFormatError):
    pass


class UnsupportedMaxValue(PPMFormatError):
    pass


class _PixelError(PPMFormatError):
    reason = "bad pixel"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"{self.reason} at row {row}, col {col}")


class PixelReadError(_PixelError):
    reason = "Failed to read pixel data"


class PixelRangeError(_PixelError):
    reason = "Pixel value out of range"
