import numpy as np
import pytest

from core.image_filters import apply_video_filter, invert, pixelate_region, to_black_and_white
from domain.enums import VideoFilter
from domain.models import PixelateRegion


@pytest.fixture
def gradient():
    h, w = 40, 60
    frame = np.zeros((h, w, 3), dtype=np.uint8)
    frame[..., 0] = np.arange(w, dtype=np.uint8)[None, :]
    frame[..., 1] = np.arange(h, dtype=np.uint8)[:, None] * 3
    frame[..., 2] = 200
    return frame


def test_black_and_white_has_equal_channels(gradient):
    out = to_black_and_white(gradient)
    assert out.shape == gradient.shape
    assert np.array_equal(out[..., 0], out[..., 1])
    assert np.array_equal(out[..., 1], out[..., 2])


def test_invert(gradient):
    out = invert(gradient)
    assert np.array_equal(out.astype(int) + gradient, np.full(gradient.shape, 255))


def test_apply_video_filter_never_mutates_input(gradient):
    original = gradient.copy()
    for video_filter in VideoFilter:
        out = apply_video_filter(gradient, video_filter)
        assert out is not gradient
    assert np.array_equal(gradient, original)
    assert np.array_equal(apply_video_filter(gradient, "none"), original)


def test_pixelate_fills_blocks_with_centre_sample(gradient):
    region = PixelateRegion(10, 10, 30, 30, pixel_size=5)
    out = pixelate_region(gradient, region)
    block = out[10:15, 10:15]
    assert (block == gradient[12, 12]).all()
    # outside the region is untouched
    assert np.array_equal(out[:10], gradient[:10])
    assert np.array_equal(out[:, 30:], gradient[:, 30:])


def test_pixelate_partial_edge_block_uses_region_pixels(gradient):
    region = PixelateRegion(0, 0, 12, 12, pixel_size=10)
    out = pixelate_region(gradient, region)
    # last block covers columns 10..11, centre sample clamped to column 11
    assert (out[0:10, 10:12] == gradient[5, 11]).all()


def test_pixel_size_one_is_identity(gradient):
    out = pixelate_region(gradient, PixelateRegion(0, 0, 60, 40, pixel_size=1))
    assert np.array_equal(out, gradient)


def test_region_is_clipped_to_frame(gradient):
    out = pixelate_region(gradient, PixelateRegion(50, 30, 200, 200, pixel_size=4))
    assert out.shape == gradient.shape
