import io

import pytest

from p3gray.source import ByteSource


def source_of(data, buffer_size=7):
    """ByteSource over bytes/str; a small buffer exercises chunk boundaries."""
    if isinstance(data, str):
        data = data.encode("ascii")
    return ByteSource(io.BytesIO(data), buffer_size=buffer_size)


@pytest.fixture
def make_source():
    return source_of


SAMPLE_IN = b"P3\n# comment\n2 1\n255\n10 20 30 40 50 60\n"
SAMPLE_OUT = b"P3\n2 1\n255\n20 20 20 50 50 50\n"
