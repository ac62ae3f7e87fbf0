"""Rendering text into ARGB8888 buffers with a TrueType font."""

from __future__ import annotations

import logging
import threading
from os import PathLike
from typing import BinaryIO, MutableSequence, Optional, Union

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)


class FontError(RuntimeError):
    """Raised when a font cannot be loaded or used."""


def convert_font_color(argb: int) -> int:
    """Turn a 0xAARRGGBB colour into the opaque pixel value written to buffers.

    The result, stored little-endian, gives the bytes alpha, red, green, blue.
    """
    value = 0x000000FF
    value |= (argb >> 8) & 0x0000FF00
    value |= (argb << 8) & 0x00FF0000
    value |= (argb << 24) & 0xFF000000
    return value


class FontFactory:
    """A loaded font with a pixel size and a text colour."""

    def __init__(
        self, font_path: Union[str, PathLike, BinaryIO], font_size: int
    ) -> None:
        if font_path is None:
            raise FontError("font path is None")
        self._lock = threading.RLock()
        try:
            self._font: Optional[ImageFont.FreeTypeFont] = ImageFont.truetype(
                font_path, font_size
            )
        except (OSError, ValueError) as exc:
            raise FontError(f"please check font path {font_path}") from exc
        self.font_path = font_path
        self._size = font_size
        self._color = 0

    @property
    def font_size(self) -> int:
        """Pixel size of the font."""
        return self._size

    @font_size.setter
    def font_size(self, size: int) -> None:
        with self._lock:
            font = self._require()
            try:
                self._font = font.font_variant(size=size)
            except (OSError, ValueError) as exc:
                raise FontError(f"cannot set font size {size}") from exc
            self._size = size

    @property
    def font_color(self) -> int:
        """Pixel value written for covered glyph pixels."""
        return self._color

    @font_color.setter
    def font_color(self, argb: int) -> None:
        with self._lock:
            self._color = convert_font_color(argb)

    def _require(self) -> ImageFont.FreeTypeFont:
        if self._font is None:
            raise FontError("font is closed")
        return self._font

    def _draw_glyph(
        self,
        buffer: MutableSequence[int],
        width: int,
        height: int,
        char: str,
        pen_x: int,
    ) -> None:
        font = self._require()
        left, top, right, bottom = font.getbbox(char, anchor="ls")
        glyph_w, glyph_h = right - left, bottom - top
        if glyph_w <= 0 or glyph_h <= 0:
            return
        mask = Image.new("L", (glyph_w, glyph_h), 0)
        ImageDraw.Draw(mask).text((-left, -top), char, font=font, fill=255, anchor="ls")
        ascent, _ = font.getmetrics()
        x0 = (pen_x >> 6) + left
        y0 = ascent + top
        on = self._color.to_bytes(4, "little")
        off = bytes(4)
        coverage = list(mask.getdata())
        for q in range(glyph_h):
            y = y0 + q
            if not 0 <= y < height:
                continue
            row = coverage[q * glyph_w:(q + 1) * glyph_w]
            for p, value in enumerate(row):
                x = x0 + p
                if not 0 <= x < width:
                    continue
                offset = (y * width + x) * 4
                buffer[offset:offset + 4] = on if value else off

    def _advance(self, char: str) -> int:
        return round(self._require().getlength(char) * 64)

    def draw_text(
        self, buffer: MutableSequence[int], width: int, height: int, text: str
    ) -> None:
        """Draw ``text`` from the top-left corner of a ``width`` x ``height`` buffer."""
        if text is None:
            raise ValueError("text is None")
        if len(buffer) < width * height * 4:
            raise ValueError("buffer is smaller than width * height pixels")
        with self._lock:
            self._require()
            pen_x = 0
            for char in text:
                self._draw_glyph(buffer, width, height, char, pen_x)
                pen_x += self._advance(char)

    def text_advance(self, text: str) -> int:
        """Return the total horizontal advance of ``text`` in 1/64 pixel units."""
        if text is None:
            raise ValueError("text is None")
        with self._lock:
            self._require()
            return sum(self._advance(char) for char in text)

    def close(self) -> None:
        """Release the font; later drawing raises :class:`FontError`."""
        with self._lock:
            self._font = None

    def __enter__(self) -> "FontFactory":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()