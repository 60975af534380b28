"""Mandelbrot iteration, screen-to-plane mapping and sequential rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

WIDTH = 800
HEIGHT = 800
MAX_ITER = 256
ESCAPE_RADIUS_SQUARED = 4.0


def mandelbrot(real: float, imag: float, max_iter: int = MAX_ITER) -> int:
    """Count iterations of z = z*z + c until |z| exceeds 2 or max_iter is reached."""
    z_real = 0.0
    z_imag = 0.0
    n = 0
    while z_real * z_real + z_imag * z_imag <= ESCAPE_RADIUS_SQUARED and n < max_iter:
        z_real, z_imag = (
            z_real * z_real - z_imag * z_imag + real,
            2.0 * z_real * z_imag + imag,
        )
        n += 1
    return n


def shade(iterations: int) -> int:
    """Map an iteration count to a grey level in 0..255."""
    return iterations % 256


@dataclass(frozen=True)
class Viewport:
    """A rectangle of the complex plane shown on a screen of given size."""

    width: int = WIDTH
    height: int = HEIGHT
    xmin: float = -2.0
    xmax: float = 1.0
    ymin: float = -1.5
    ymax: float = 1.5
    max_iter: int = MAX_ITER

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport dimensions must be positive")
        if self.max_iter < 0:
            raise ValueError("max_iter must not be negative")

    def to_complex(self, x: int, y: int) -> tuple[float, float]:
        """Return the (real, imag) point that screen pixel (x, y) stands for."""
        real = self.xmin + (self.xmax - self.xmin) * x / self.width
        imag = self.ymin + (self.ymax - self.ymin) * y / self.height
        return real, imag

    def color_at(self, x: int, y: int) -> int:
        """Grey level of screen pixel (x, y)."""
        real, imag = self.to_complex(x, y)
        return shade(mandelbrot(real, imag, self.max_iter))


class Pixel(NamedTuple):
    """A screen position with its grey level."""

    x: int
    y: int
    color: int


def render_sequential(viewport: Viewport) -> Iterator[Pixel]:
    """Yield every pixel of the viewport, row by row."""
    for y in range(viewport.height):
        for x in range(viewport.width):
            yield Pixel(x, y, viewport.color_at(x, y))