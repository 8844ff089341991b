# tests/unit/test_colorizer.py

import io
from typing import Optional, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

from ark_infographic.colorizer import (
    ColorRegionMask,
    colorize,
    colorize_array,
    colorize_png,
    region_opacity,
    resize_mask_nearest,
)
from ark_infographic.utils.image import encode_png

Rgb = Tuple[int, int, int]


def solid(size: Tuple[int, int], rgb: Sequence[int]) -> np.ndarray:
    w, h = size
    return np.tile(np.array(rgb, dtype=np.uint8), (h, w, 1))


def only(region: int, color: Rgb) -> list[Optional[Rgb]]:
    colors: list[Optional[Rgb]] = [None] * 6
    colors[region] = color
    return colors


def test_no_region_colors_returns_identical_copy() -> None:
    rng = np.random.default_rng(7)
    base = Image.fromarray(rng.integers(0, 256, (5, 4, 4), dtype=np.uint8))
    mask = Image.fromarray(rng.integers(0, 256, (5, 4, 3), dtype=np.uint8))
    out = colorize(base, mask, [None] * 6)
    assert out is not base
    assert out.mode == base.mode
    assert np.array_equal(np.array(out), np.array(base))


def test_colorize_png_without_colors_returns_input_bytes() -> None:
    data = encode_png(Image.new("RGBA", (3, 3), (1, 2, 3, 4)))
    assert colorize_png(data, data, [None] * 6) is data


def test_transparent_pixels_untouched() -> None:
    base = solid((2, 2), (100, 100, 100, 255))
    base[0, 0] = (10, 20, 30, 0)
    mask = solid((2, 2), (255, 0, 0))
    out = colorize_array(base, mask, only(0, (200, 50, 128)))
    assert tuple(out[0, 0]) == (10, 20, 30, 0)
    assert tuple(out[1, 1]) == (172, 22, 100, 255)


def test_full_opacity_grain_merge() -> None:
    base = solid((1, 1), (100, 100, 100))
    mask = solid((1, 1), (255, 0, 0))
    out = colorize_array(base, mask, only(0, (200, 50, 128)))
    assert tuple(out[0, 0]) == (172, 22, 100)


def test_partial_opacity_truncates() -> None:
    base = solid((1, 1), (100, 100, 100))
    mask = solid((1, 1), (128, 0, 0))
    out = colorize_array(base, mask, only(0, (228, 178, 28)))
    # 150.196 / 125.098 / 49.804 truncate rather than round
    assert tuple(out[0, 0]) == (150, 125, 49)


def test_regions_compose_sequentially() -> None:
    base = solid((1, 1), (100, 100, 100))
    mask = solid((1, 1), (255, 255, 255))
    colors: list[Optional[Rgb]] = [
        None,
        None,
        None,
        (138, 128, 128),
        (138, 128, 128),
        (128, 128, 148),
    ]
    out = colorize_array(base, mask, colors)
    assert tuple(out[0, 0]) == (120, 100, 120)


def test_alpha_channel_passes_through() -> None:
    base = solid((2, 1), (100, 100, 100, 77))
    mask = solid((2, 1), (0, 255, 0))
    out = colorize_array(base, mask, only(1, (255, 255, 255)))
    assert list(out[..., 3].ravel()) == [77, 77]
    assert tuple(out[0, 0][:3]) == (227, 227, 227)


def test_mask_resampled_with_floor_mapping() -> None:
    base = Image.fromarray(solid((4, 4), (100, 100, 100)))
    mask_arr = solid((2, 2), (0, 0, 0))
    mask_arr[1, 1] = (255, 0, 0)
    out = np.array(colorize(base, Image.fromarray(mask_arr), only(0, (228, 128, 128))))
    assert tuple(out[2, 2]) == (200, 100, 100)
    assert tuple(out[3, 3]) == (200, 100, 100)
    assert tuple(out[1, 1]) == (100, 100, 100)
    assert tuple(out[2, 1]) == (100, 100, 100)


def test_resize_mask_drops_alpha() -> None:
    mask = np.arange(2 * 2 * 4, dtype=np.uint8).reshape(2, 2, 4)
    resized = resize_mask_nearest(mask, 4, 4)
    assert resized.shape == (4, 4, 3)
    assert tuple(resized[2, 2]) == tuple(mask[1, 1, :3])
    assert tuple(resized[0, 3]) == tuple(mask[0, 1, :3])


def test_rgb_base_keeps_mode_and_size() -> None:
    base = Image.new("RGB", (3, 2), (90, 90, 90))
    mask = Image.new("RGB", (6, 4), (0, 0, 255))
    out = colorize(base, mask, only(2, (128, 128, 228)))
    assert out.mode == "RGB"
    assert out.size == (3, 2)
    assert out.getpixel((0, 0)) == (90, 90, 190)


def test_colorize_png_round_trip() -> None:
    base = encode_png(Image.new("RGBA", (2, 2), (100, 100, 100, 255)))
    mask = encode_png(Image.new("RGB", (2, 2), (255, 0, 0)))
    out = Image.open(io.BytesIO(colorize_png(base, mask, only(0, (200, 50, 128)))))
    assert out.mode == "RGBA"
    assert out.getpixel((1, 0)) == (172, 22, 100, 255)


@pytest.mark.parametrize(
    "region, rgb, expected",
    [
        (ColorRegionMask.RED, (255, 100, 50), 105 / 255),
        (ColorRegionMask.RED, (100, 255, 50), 0.0),
        (ColorRegionMask.GREEN, (10, 200, 40), 150 / 255),
        (ColorRegionMask.BLUE, (0, 0, 255), 1.0),
        (ColorRegionMask.GREEN_BLUE, (0, 200, 100), 100 / 255),
        (ColorRegionMask.RED_GREEN, (30, 200, 0), 30 / 255),
        (ColorRegionMask.RED_BLUE, (255, 0, 60), 60 / 255),
    ],
)
def test_region_opacity(
    region: ColorRegionMask, rgb: Rgb, expected: float
) -> None:
    m = [np.array([[c]], dtype=np.int32) for c in rgb]
    assert region_opacity(region, m[0], m[1], m[2])[0, 0] == pytest.approx(expected)
