"""Region-based creature sprite colorization.

A creature sprite ships with a mask image whose RGB channels encode six color
regions. Each region gets a per-pixel opacity from the mask, and the region's
color is blended into the sprite with a grain-merge followed by a linear
interpolation. Regions are applied in index order, each one compositing on top
of the result of the previous ones.

The blend truncates to integers after every region so output is identical to
other implementations of the same algorithm; do not switch to rounding.
"""

import logging
from enum import IntEnum
from typing import Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from ark_infographic.stats.constants import COLOR_REGION_COUNT
from ark_infographic.utils.image import decode_png, encode_png, image_to_array

logger = logging.getLogger(__name__)

# Type aliases for clarity
FloatArray = npt.NDArray[np.float64]
IntArray = npt.NDArray[np.int32]
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]

SrgbColor = Tuple[int, int, int]
RegionColors = Sequence[Optional[SrgbColor]]

GRAIN_MERGE_OFFSET = 128


class ColorRegionMask(IntEnum):
    """How each region reads its opacity from the mask channels.

    Regions 0-2 are active where one channel dominates the other two; regions
    3-5 are active where two channels are both high.
    """

    RED = 0
    GREEN = 1
    BLUE = 2
    GREEN_BLUE = 3
    RED_GREEN = 4
    RED_BLUE = 5


def region_opacity(
    region: ColorRegionMask, m_r: IntArray, m_g: IntArray, m_b: IntArray
) -> FloatArray:
    """Per-pixel opacity in [0, 1] of ``region`` for mask channels (signed ints)."""
    if region == ColorRegionMask.RED:
        raw = np.maximum(0, m_r - m_g - m_b)
    elif region == ColorRegionMask.GREEN:
        raw = np.maximum(0, m_g - m_r - m_b)
    elif region == ColorRegionMask.BLUE:
        raw = np.maximum(0, m_b - m_r - m_g)
    elif region == ColorRegionMask.GREEN_BLUE:
        raw = np.minimum(m_g, m_b)
    elif region == ColorRegionMask.RED_GREEN:
        raw = np.minimum(m_r, m_g)
    else:
        raw = np.minimum(m_r, m_b)
    return raw.astype(np.float64) / 255.0


def resize_mask_nearest(mask: UInt8Array, width: int, height: int) -> UInt8Array:
    """Nearest-neighbour resize of an (H, W, C) mask to ``width`` x ``height``.

    Source pixels are picked with ``floor(dst * src_dim / dst_dim)`` on each
    axis (no half-pixel centering, unlike ``Image.resize``). Only the RGB
    channels are kept.
    """
    src_h, src_w = mask.shape[0], mask.shape[1]
    src_y = (np.arange(height, dtype=np.int64) * src_h) // height
    src_x = (np.arange(width, dtype=np.int64) * src_w) // width
    return mask[src_y[:, None], src_x[None, :], :3]


def _mask_array(mask: Image.Image) -> UInt8Array:
    if mask.mode not in ("RGB", "RGBA"):
        mask = mask.convert("RGB")
    return image_to_array(mask)


def active_regions(
    region_colors: RegionColors,
) -> list[Tuple[ColorRegionMask, SrgbColor]]:
    """Regions with a color assigned, in index order."""
    regions: list[Tuple[ColorRegionMask, SrgbColor]] = []
    for index in range(min(COLOR_REGION_COUNT, len(region_colors))):
        color = region_colors[index]
        if color is not None:
            regions.append((ColorRegionMask(index), color))
    return regions


def colorize_array(
    base: UInt8Array, mask: UInt8Array, region_colors: RegionColors
) -> UInt8Array:
    """Colorize an (H, W, 3|4) uint8 array with an (h, w, 3|4) mask.

    Returns a new array; ``base`` is not modified.
    """
    height, width = base.shape[0], base.shape[1]
    has_alpha = base.shape[2] == 4

    if mask.shape[0] != height or mask.shape[1] != width:
        logger.debug(
            "Resampling mask from %dx%d to %dx%d",
            mask.shape[1],
            mask.shape[0],
            width,
            height,
        )
        mask = resize_mask_nearest(mask, width, height)

    regions = active_regions(region_colors)
    out: UInt8Array = base.copy()
    if not regions:
        return out

    m_r: IntArray = mask[..., 0].astype(np.int32)
    m_g: IntArray = mask[..., 1].astype(np.int32)
    m_b: IntArray = mask[..., 2].astype(np.int32)

    visible: BoolArray = (
        base[..., 3] != 0 if has_alpha else np.ones((height, width), dtype=np.bool_)
    )

    # Work on float copies of the channels; every region result is truncated
    # back to whole numbers before the next region reads it.
    channels = [base[..., c].astype(np.float64) for c in range(3)]

    for region, color in regions:
        opacity = region_opacity(region, m_r, m_g, m_b)
        apply: BoolArray = visible & (opacity > 0)
        if not apply.any():
            continue
        for c in range(3):
            current = channels[c]
            mix = np.clip(current + color[c] - GRAIN_MERGE_OFFSET, 0, 255)
            blended = np.trunc(opacity * mix + (1 - opacity) * current)
            channels[c] = np.where(apply, blended, current)

    for c in range(3):
        out[..., c] = np.clip(channels[c], 0, 255).astype(np.uint8)
    return out


def colorize(
    base: Image.Image, mask: Image.Image, region_colors: RegionColors
) -> Image.Image:
    """Colorize a creature sprite.

    Args:
        base: Sprite in RGB or RGBA mode (other modes are converted to RGBA).
        mask: Region mask; resampled to the sprite size when it differs.
        region_colors: Up to 6 sRGB colors; ``None`` entries skip the region.

    Returns:
        Image.Image: New image with the same size and mode as ``base``. When
        no region has a color the result is an unchanged copy.
    """
    if base.mode not in ("RGB", "RGBA"):
        base = base.convert("RGBA")

    if not active_regions(region_colors):
        logger.debug("No region colors given, returning sprite unchanged")
        return base.copy()

    out = colorize_array(image_to_array(base), _mask_array(mask), region_colors)
    return Image.fromarray(out)


def colorize_png(
    base_png: bytes, mask_png: bytes, region_colors: RegionColors
) -> bytes:
    """Colorize PNG-encoded sprite and mask, returning PNG bytes.

    The input bytes are returned as is when no region has a color.
    """
    if not active_regions(region_colors):
        return base_png

    result = colorize(decode_png(base_png), decode_png(mask_png), region_colors)
    return encode_png(result)
