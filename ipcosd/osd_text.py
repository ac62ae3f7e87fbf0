"""Preparing the pixel content of text and image OSD regions."""

from __future__ import annotations

from typing import Optional, Union

from ipcosd.bmp_reader import BmpError, load_bmp
from ipcosd.font_factory import FontFactory
from ipcosd.osd_common import MAX_WCH_BYTE, OsdData, up_align16

# The wide-character buffer holds MAX_WCH_BYTE bytes of four-byte characters.
MAX_TEXT_CHARS = MAX_WCH_BYTE // 4


def decode_display_text(text: Optional[Union[str, bytes, bytearray]]) -> str:
    """Return configured display text as characters, cut to what an OSD can hold.

    Bytes are read as UTF-8; decoding stops at the first invalid sequence.
    ``None`` gives an empty string.
    """
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        raw = bytes(text)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            text = raw[: exc.start].decode("utf-8")
    text = text.split("\0", 1)[0]
    return text[:MAX_TEXT_CHARS]


def text_box(font: FontFactory, text: str, font_size: int) -> tuple[int, int]:
    """Return the ``(width, height)`` of the region that holds ``text``."""
    if font_size <= 0:
        raise ValueError(f"font size must be positive, got {font_size}")
    advance = font.text_advance(text)
    return up_align16(advance // font_size), up_align16(font_size)


def fill_text(data: OsdData, font: FontFactory) -> bytearray:
    """Draw ``data.text`` into the region's buffer in the region's font colour."""
    if data.text.font_path is None:
        raise ValueError("font_path is None")
    if data.buffer is None:
        data.allocate_buffer()
    font.font_color = data.text.font_color
    font.draw_text(data.buffer, data.width, data.height, data.text.text)
    return data.buffer


def fill_image(data: OsdData) -> OsdData:
    """Load the region's BMP image into its buffer and take over its size."""
    if data.image is None:
        raise BmpError("image path is None")
    image = load_bmp(data.image)
    data.buffer = image.buffer
    data.width = image.width
    data.height = image.height
    data.size = image.size
    return data