"""Drawing of solid and dotted rectangle borders into ARGB pixel buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, MutableSequence


class BorderEffect(IntEnum):
    LINE = 0
    DOTTED = 1
    WATERFULL_LIGHT = 2


@dataclass
class DrawRect:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class BorderInfo:
    rect: DrawRect = field(default_factory=DrawRect)
    color: int = 0
    color_key: int = 0
    thick: int = 1
    display_style: int = BorderEffect.LINE
    dotted_offset: int = 0
    interval: int = 1


def _like(buffer: MutableSequence[int], values: Iterable[int]) -> MutableSequence[int]:
    """Return ``values`` as a sequence of the same kind as ``buffer``."""
    seq = buffer[:0]
    seq.extend(values)
    return seq


def _check(buffer: MutableSequence[int], info: BorderInfo) -> None:
    if len(buffer) < info.rect.w * info.rect.h:
        raise ValueError("buffer is smaller than the border rectangle")


def draw_solid_border(buffer: MutableSequence[int], info: BorderInfo) -> None:
    """Paint a solid border of ``info.thick`` pixels around the buffer rectangle."""
    _check(buffer, info)
    width, height, thick = info.rect.w, info.rect.h, info.thick
    line = _like(buffer, [info.color] * width)
    for j in range(thick):
        buffer[j * width:(j + 1) * width] = line
        bottom = (height - j - 1) * width
        buffer[bottom:bottom + width] = line
    edge = _like(buffer, [info.color] * thick)
    for j in range(height):
        buffer[j * width:j * width + thick] = edge
        right = (j + 1) * width - thick
        buffer[right:right + thick] = edge


def draw_dotted_border(
    buffer: MutableSequence[int], info: BorderInfo, interval_offset: int = 0
) -> None:
    """Paint a dashed border whose dash pattern is shifted by ``interval_offset``."""
    if info.interval <= 0:
        raise ValueError("dotted border interval must be positive")
    _check(buffer, info)
    width, height, thick, interval = info.rect.w, info.rect.h, info.thick, info.interval

    def lit(position: int) -> bool:
        return bool(((position + interval_offset) // interval) % 2)

    line = _like(
        buffer, (info.color if lit(k) else info.color_key for k in range(width))
    )
    for j in range(thick):
        buffer[j * width:(j + 1) * width] = line
        bottom = (height - j - 1) * width
        buffer[bottom:bottom + width] = line
    edge = _like(buffer, [info.color] * thick)
    for j in (row for row in range(height) if lit(row)):
        buffer[j * width:j * width + thick] = edge
        right = (j + 1) * width - thick
        buffer[right:right + thick] = edge


class BorderPainter:
    """Draws borders by style, advancing the moving-light offset between calls."""

    def __init__(self) -> None:
        self.interval_offset = 0

    def draw(self, buffer: MutableSequence[int], info: BorderInfo) -> None:
        """Draw the border described by ``info`` into ``buffer``."""
        if info.display_style == BorderEffect.DOTTED:
            self.interval_offset = 0
            draw_dotted_border(buffer, info, self.interval_offset)
        elif info.display_style == BorderEffect.LINE:
            draw_solid_border(buffer, info)
        elif info.display_style == BorderEffect.WATERFULL_LIGHT:
            self.interval_offset += 40
            draw_dotted_border(buffer, info, self.interval_offset)