from typing import BinaryIO

from .errors import PPMIOError
from .header import ImageHeader


def format_header(header: ImageHeader) -> bytes:
    return f"P3\n{header.width} {header.height}\n{header.max_value}\n".encode("ascii")


class PPMWriter:
    """Writes a P3 header and preformatted rows to a binary sink."""

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self.bytes_written = 0
        self.rows_written = 0

    def _write(self, data, what: str) -> None:
        try:
            self.sink.write(data)
        except OSError as exc:
            raise PPMIOError(f"Write failure {what}: {exc}") from exc
        self.bytes_written += len(data)

    def write_header(self, header: ImageHeader) -> None:
        self._write(format_header(header), "in output header")

    def write_row(self, row) -> None:
        self._write(row, f"at row {self.rows_written}")
        self.rows_written += 1

    def flush(self) -> None:
        try:
            self.sink.flush()
        except OSError as exc:
            raise PPMIOError(f"Failed to flush output: {exc}") from exc
