import dataclasses

import pytest

from pixeltraders.assets import BLACK, GREEN, ORANGE, RED, Color


def test_rgba_returns_channels_in_order():
    assert Color(1, 2, 3, 4).rgba() == (1, 2, 3, 4)


def test_alpha_defaults_to_opaque():
    assert Color(10, 20, 30).rgba()[3] == 255


def test_orange_mixes_red_and_green():
    assert ORANGE.rgba() == (RED.r, GREEN.g, GREEN.b, 255)


def test_black_is_opaque_black():
    assert BLACK.rgba() == (0, 0, 0, 255)


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.r = 9  # type: ignore[misc]
    assert color.rgba() == (1, 2, 3, 255)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_out_of_range_channel_rejected(channels):
    with pytest.raises(ValueError):
        Color(*channels)