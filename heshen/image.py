"""Rectangles, pixel images and image comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

PSNR_MAX = 100.0


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Image(Generic[T]):
    """A row-major grid of pixels."""

    def __init__(self, width: int = 0, height: int = 0, fill: T = 0) -> None:  # type: ignore[assignment]
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self._data: list[T] = [fill] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> T:
        """Return the pixel at (x, y); raises IndexError outside the image."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self._data[y * self.width + x]

    def set(self, x: int, y: int, value: T) -> None:
        """Store a pixel; writes outside the image are ignored."""
        if self._contains(x, y):
            self._data[y * self.width + x] = value

    def copy(self) -> Image[T]:
        result: Image[T] = Image(self.width, self.height)
        result._data = list(self._data)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (self.width, self.height, self._data) == (
            other.width,
            other.height,
            other._data,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"


def psnr(img1: Image, img2: Image) -> float:
    """Peak signal-to-noise ratio of two equally sized 8-bit images."""
    if (img1.width, img1.height) != (img2.width, img2.height):
        raise ValueError("images differ in size")
    count = img1.width * img1.height
    if count == 0:
        raise ValueError("cannot compare empty images")
    mse = sum(
        (img1.get(x, y) - img2.get(x, y)) ** 2
        for y in range(img1.height)
        for x in range(img1.width)
    ) / count
    return 10 * math.log10(255 * 255 / mse) if mse else PSNR_MAX