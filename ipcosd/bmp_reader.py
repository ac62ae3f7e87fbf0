"""Reading 24/32-bit BMP files into ARGB8888 buffers and writing them back."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

logger = logging.getLogger(__name__)

BMP_MAGIC = 0x4D42
DEFAULT_DUMP_PATH = "/tmp/tmp.bmp"

_FILE_HEADER = struct.Struct("<IHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADER_SIZE = 2 + _FILE_HEADER.size + _INFO_HEADER.size
_COLOR_KEY_BGR = (0x08, 0x00, 0x00)


class BmpError(ValueError):
    """Raised when a BMP file cannot be read or is not supported."""


@dataclass
class BmpImage:
    """A decoded image: four bytes per pixel in alpha, red, green, blue order."""

    width: int
    height: int
    buffer: bytearray

    @property
    def size(self) -> int:
        """Size of the pixel buffer in bytes."""
        return self.width * self.height * 4


def _row_pitch(width: int, bit_count: int) -> int:
    return ((width * bit_count + 31) >> 5) * 4


def bmp_to_argb8888(data: bytes, width: int, height: int, bit_count: int) -> bytearray:
    """Convert bottom-up BMP pixel rows into a top-down ARGB8888 buffer.

    24-bit pixels are opaque except the colour key (blue 0x08, green and red 0),
    which becomes fully transparent; deeper pixels carry their own alpha.
    """
    if bit_count < 24:
        raise BmpError("bmp must be 24/32 depth")
    step = 3 if bit_count == 24 else 4
    pitch = _row_pitch(width, bit_count)
    if len(data) < pitch * height:
        raise BmpError("bmp pixel data is shorter than the image")
    out = bytearray()
    for row in range(height - 1, -1, -1):
        line = data[row * pitch: row * pitch + width * step]
        for start in range(0, width * step, step):
            blue, green, red = line[start:start + 3]
            if step == 4:
                alpha = line[start + 3]
            else:
                alpha = 0x00 if (blue, green, red) == _COLOR_KEY_BGR else 0xFF
            out += bytes((alpha, red, green, blue))
    return out


def load_bmp(path: Union[str, PathLike]) -> BmpImage:
    """Load a 24- or 32-bit BMP file as an ARGB8888 image."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise BmpError(f"cannot open bmp file {path}") from exc
    if len(raw) < 2 or int.from_bytes(raw[:2], "little") != BMP_MAGIC:
        raise BmpError(f"{path} is not a .bmp file")
    if len(raw) < _HEADER_SIZE:
        raise BmpError(f"{path} has a truncated header")
    info = _INFO_HEADER.unpack_from(raw, 2 + _FILE_HEADER.size)
    width, height, bit_count = info[1], info[2], info[4]
    if bit_count < 24:
        raise BmpError("bmp must be 24/32 depth")
    logger.info("bit count is %d", bit_count)
    if width <= 0 or height <= 0:
        raise BmpError(f"unsupported bmp size {width}x{height}")
    data_size = _row_pitch(width, bit_count) * height
    data = raw[_HEADER_SIZE:_HEADER_SIZE + data_size]
    if not data:
        raise BmpError(f"{path} has no pixel data")
    data = data.ljust(data_size, b"\x00")
    return BmpImage(width, height, bmp_to_argb8888(data, width, height, bit_count))


def save_argb8888_to_bmp(
    buffer: bytes,
    width: int,
    height: int,
    path: Union[str, PathLike] = DEFAULT_DUMP_PATH,
) -> None:
    """Write a top-down four-byte-per-pixel buffer as a 32-bit BMP file."""
    row_size = width * 4
    if width < 0 or height < 0 or len(buffer) < row_size * height:
        raise ValueError("buffer is smaller than the image size")
    file_size = _HEADER_SIZE + row_size * height
    header = b"BM" + _FILE_HEADER.pack(file_size & 0xFFFFFFFF, 0, 0, _HEADER_SIZE)
    info = _INFO_HEADER.pack(_INFO_HEADER.size, width, height, 1, 32, 0, 0, 0, 0, 0, 0)
    with open(path, "wb") as handle:
        handle.write(header)
        handle.write(info)
        for row in range(height - 1, -1, -1):
            handle.write(bytes(buffer[row * row_size:(row + 1) * row_size]))