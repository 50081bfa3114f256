import pytest

from fractview.color import create_color, pixel_color


def test_black_is_opaque():
    assert create_color(0, 0, 0) == 255


def test_white_fills_all_bits():
    assert create_color(255, 255, 255) == 0xFFFFFFFF


def test_channels_are_packed_in_order():
    value = create_color(1, 2, 3)
    assert value.to_bytes(4, "big") == bytes([1, 2, 3, 255])


def test_points_in_the_set_are_black():
    assert pixel_color(50, 50) == create_color(0, 0, 0)


def test_escaped_point_is_green():
    assert pixel_color(1, 50) == create_color(0, 30, 0)


@pytest.mark.parametrize("iterations", range(0, 49))
def test_colour_is_opaque_and_green_only(iterations):
    red, _green, blue, alpha = pixel_color(iterations, 1000).to_bytes(4, "big")
    assert (red, blue, alpha) == (0, 0, 255)


def test_green_repeats_every_128_iterations():
    assert pixel_color(5, 1000) == pixel_color(133, 1000)