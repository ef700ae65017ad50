import pytest

from minobjects.jit_clamp import JitClamp


def test_defaults():
    clamp = JitClamp()
    assert clamp.min == 0.0
    assert clamp.max == 1.0


def test_limits_are_quantised_to_char_steps():
    clamp = JitClamp(minimum=0.5)
    assert 0.5 - 1 / 255 < clamp.min <= 0.5
    assert clamp.min * 255 == pytest.approx(round(clamp.min * 255))


def test_limits_saturate():
    clamp = JitClamp(minimum=-2.0, maximum=3.0)
    assert clamp.min == 0.0
    assert clamp.max == 1.0


def test_calc_cell_float_planes():
    assert JitClamp().calc_cell((-1.0, 0.5, 2.0)) == (0.0, 0.5, 1.0)


def test_calc_cell_int_planes():
    assert JitClamp().calc_cell((-5, 0, 7)) == (0, 0, 1)


def test_calc_pixel_uses_char_limits():
    clamp = JitClamp(0.25, 0.75)
    low = round(clamp.min * 255)
    high = round(clamp.max * 255)
    assert clamp.calc_pixel(bytes([0, 100, 150, 255])) == bytes([low, 100, 150, high])


def test_calc_pixel_needs_four_planes():
    with pytest.raises(ValueError):
        JitClamp().calc_pixel(bytes([1, 2, 3]))


def test_process_matrix():
    matrix = [[(-1.0,), bytes([0, 0, 0, 0])], [(2.0,), bytes([255] * 4)]]
    assert JitClamp().process(matrix) == [
        [(0.0,), bytes([0, 0, 0, 0])],
        [(1.0,), bytes([255] * 4)],
    ]