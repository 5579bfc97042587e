import numpy as np
import pytest

from p3gray.rows import DecimalLUT, RowAssembler, average_gray


def test_lut_covers_every_channel_value():
    lut = DecimalLUT()
    assert len(lut) == 256
    for v in range(256):
        assert lut.text(v) == str(v).encode()
        assert lut.length(v) == len(str(v))


@pytest.mark.parametrize("rgb,gray", [
    ((10, 20, 30), 20),
    ((40, 50, 60), 50),
    ((0, 0, 1), 0),
    ((0, 1, 1), 0),
    ((1, 1, 2), 1),
    ((255, 255, 254), 254),
    ((255, 255, 255), 255),
])
def test_average_truncates(rgb, gray):
    assert average_gray(*rgb) == gray


def test_assemble_row():
    asm = RowAssembler(2, DecimalLUT())
    row = asm.assemble(np.array([[10, 20, 30], [40, 50, 60]], dtype=np.uint16))
    assert bytes(row) == b"20 20 20 50 50 50\n"


def test_single_pixel_row_has_no_trailing_space():
    asm = RowAssembler(1, DecimalLUT())
    assert bytes(asm.assemble(np.array([[1, 2, 3]]))) == b"2 2 2\n"


def test_uint8_input_does_not_wrap():
    asm = RowAssembler(1, DecimalLUT())
    row = np.array([[255, 255, 255]], dtype=np.uint8)
    assert bytes(asm.assemble(row)) == b"255 255 255\n"


def test_buffer_is_reused_between_rows():
    asm = RowAssembler(2, DecimalLUT())
    first = bytes(asm.assemble(np.array([[255, 255, 255], [200, 200, 200]])))
    second = bytes(asm.assemble(np.array([[0, 0, 0], [3, 3, 3]])))
    assert first == b"255 255 255 200 200 200\n"
    assert second == b"0 0 0 3 3 3\n"
    assert len(asm._buf) == asm.capacity


def test_worst_case_row_fits_capacity():
    width = 50
    asm = RowAssembler(width, DecimalLUT())
    row = asm.assemble(np.full((width, 3), 255))
    assert len(row) <= asm.capacity
    assert len(asm._buf) == asm.capacity


def test_matches_numpy_reference():
    rng = np.random.default_rng(123)
    rgb = rng.integers(0, 256, size=(64, 3))
    asm = RowAssembler(64, DecimalLUT())
    values = [int(v) for v in bytes(asm.assemble(rgb)).split()]
    expected = np.repeat(rgb.sum(axis=1) // 3, 3)
    assert values == expected.tolist()


def test_assemble_pixels_matches_assemble():
    pixels = [(1, 2, 3), (250, 251, 255), (9, 0, 0)]
    a = RowAssembler(3, DecimalLUT())
    b = RowAssembler(3, DecimalLUT())
    assert bytes(a.assemble_pixels(pixels)) == bytes(b.assemble(np.array(pixels)))
