"""Shared OSD constants and the data carried between OSD stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

OSD_FMT_SPACE = " "
OSD_FMT_TIME0 = "24hour"
OSD_FMT_TIME1 = "12hour"
OSD_FMT_WEEK0 = "WEEKCN"
OSD_FMT_WEEK1 = "WEEK"
OSD_FMT_CHR = "CHR"
OSD_FMT_YMD0 = "YYYY-MM-DD"
OSD_FMT_YMD1 = "MM-DD-YYYY"
OSD_FMT_YMD2 = "DD-MM-YYYY"
OSD_FMT_YMD3 = "YYYY/MM/DD"
OSD_FMT_YMD4 = "MM/DD/YYYY"
OSD_FMT_YMD5 = "DD/MM/YYYY"

WEB_VIEW_RECT_W = 704
WEB_VIEW_RECT_H = 480
MAX_WCH_BYTE = 128

BYTES_PER_PIXEL = 4


class OsdType(IntEnum):
    DATE = 0
    IMAGE = 1
    TEXT = 2
    BORDER = 3


def up_align16(value: int) -> int:
    """Round ``value`` up to the next multiple of 16."""
    return (value + 15) & ~15


@dataclass
class TextData:
    """Text to render and how to render it."""

    text: str = ""
    font_size: int = 0
    font_color: int = 0
    color_inverse: int = 0
    font_path: Optional[str] = None
    format: str = ""


@dataclass
class OsdData:
    """One OSD region: its placement, size and ARGB8888 pixel buffer."""

    type: int = OsdType.DATE
    image: Optional[str] = None
    text: TextData = field(default_factory=TextData)
    width: int = 0
    height: int = 0
    buffer: Optional[bytearray] = None
    size: int = 0
    origin_x: int = 0
    origin_y: int = 0
    enable: int = 0

    def allocate_buffer(self) -> bytearray:
        """Give the region a zeroed buffer of four bytes per pixel and return it."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"cannot allocate a {self.width}x{self.height} OSD buffer"
            )
        self.size = self.width * self.height * BYTES_PER_PIXEL
        self.buffer = bytearray(self.size)
        return self.buffer