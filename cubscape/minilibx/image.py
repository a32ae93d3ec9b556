"""Off-screen 32-bit images with directly addressable pixel data."""

from __future__ import annotations

from typing import Tuple

import pygame

_BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = _BITS_PER_PIXEL // 8
_ROW_PAD = 32
# Pixels are stored least significant byte first (B, G, R, A).
_LITTLE_ENDIAN = 0


class ImageError(RuntimeError):
    """Raised when an image cannot be created or is used after destruction."""


class Image:
    """A ``width`` x ``height`` image of 32-bit 0xAARRGGBB pixels in a byte buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ImageError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = _BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = _LITTLE_ENDIAN
        self._data: bytearray | None = bytearray(
            (width + _ROW_PAD) * height * _BYTES_PER_PIXEL
        )

    @property
    def destroyed(self) -> bool:
        """True once :meth:`destroy` has been called."""
        return self._data is None

    def _buffer(self) -> bytearray:
        if self._data is None:
            raise ImageError("image has been destroyed")
        return self._data

    def data_address(self) -> Tuple[bytearray, int, int, int]:
        """Return the pixel buffer, bits per pixel, bytes per line and byte order."""
        return self._buffer(), self.bpp, self.size_line, self.endian

    def pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at ``(x, y)``."""
        data = self._buffer()
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        offset = y * self.size_line + x * _BYTES_PER_PIXEL
        order = "big" if self.endian else "little"
        return int.from_bytes(data[offset:offset + _BYTES_PER_PIXEL], order)

    def to_surface(self) -> pygame.Surface:
        """Return an RGB surface holding a copy of the image."""
        data = self._buffer()
        rows = bytearray()
        for y in range(self.height):
            start = y * self.size_line
            rows += data[start:start + self.width * _BYTES_PER_PIXEL]
        rgb = bytearray(self.width * self.height * 3)
        if self.endian:
            rgb[0::3] = rows[1::4]
            rgb[1::3] = rows[2::4]
            rgb[2::3] = rows[3::4]
        else:
            rgb[0::3] = rows[2::4]
            rgb[1::3] = rows[1::4]
            rgb[2::3] = rows[0::4]
        surface = pygame.image.frombuffer(bytes(rgb), (self.width, self.height), "RGB")
        return surface.copy()

    def destroy(self) -> None:
        """Release the pixel buffer; the image cannot be used afterwards."""
        self._data = None