"""Scaling and clamping of OSD regions to the video frame."""

from __future__ import annotations

from ipcosd.osd_common import up_align16

_STEP = 16


def scale_rates(
    video_width: int, video_height: int, normalized_width: int, normalized_height: int
) -> tuple[float, float]:
    """Return the horizontal and vertical factors from normalized to video coordinates."""
    if normalized_width == 0 or normalized_height == 0:
        raise ValueError("normalized screen size must not be zero")
    return video_width / normalized_width, video_height / normalized_height


def scale_position(value: int, rate: float) -> int:
    """Scale a normalized coordinate or length and round it up to a multiple of 16."""
    return up_align16(int(value * rate))


def _steps_over(origin: int, size: int, limit: int) -> int:
    excess = origin + size - limit
    return -(-excess // _STEP) if excess > 0 else 0


def shrink_to_fit(origin: int, size: int, limit: int) -> int:
    """Reduce ``size`` in steps of 16 until ``origin + size`` is within ``limit``."""
    return size - _STEP * _steps_over(origin, size, limit)


def shift_to_fit(origin: int, size: int, limit: int) -> int:
    """Move ``origin`` back in steps of 16 until ``origin + size`` is within ``limit``."""
    return origin - _STEP * _steps_over(origin, size, limit)