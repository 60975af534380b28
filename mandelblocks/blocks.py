"""Splitting the screen into rectangular blocks and rendering them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from mandelblocks.fractal import Pixel, Viewport


@dataclass(frozen=True)
class Block:
    """A half-open rectangle of screen pixels: [x_start, x_end) x [y_start, y_end)."""

    x_start: int
    x_end: int
    y_start: int
    y_end: int

    @property
    def width(self) -> int:
        return self.x_end - self.x_start

    @property
    def height(self) -> int:
        return self.y_end - self.y_start

    def __len__(self) -> int:
        return max(self.width, 0) * max(self.height, 0)

    def pixels(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) positions of the block, row by row."""
        for y in range(self.y_start, self.y_end):
            for x in range(self.x_start, self.x_end):
                yield x, y


def split_into_blocks(width: int, height: int, block_size: int) -> list[Block]:
    """Cover the screen with square blocks; blocks on the right and bottom edges are clipped."""
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    blocks_x = -(-width // block_size)
    blocks_y = -(-height // block_size)
    return [
        Block(
            bx * block_size,
            min((bx + 1) * block_size, width),
            by * block_size,
            min((by + 1) * block_size, height),
        )
        for by in range(blocks_y)
        for bx in range(blocks_x)
    ]


def split_into_grid(width: int, height: int, columns: int, rows: int) -> list[Block]:
    """Cut the screen into columns x rows blocks; the last column and row take the remainder."""
    if columns <= 0 or rows <= 0:
        raise ValueError("columns and rows must be positive")
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    block_width = width // columns
    block_height = height // rows
    return [
        Block(
            bx * block_width,
            width if bx == columns - 1 else (bx + 1) * block_width,
            by * block_height,
            height if by == rows - 1 else (by + 1) * block_height,
        )
        for by in range(rows)
        for bx in range(columns)
    ]


def distribute(total: int, workers: int) -> list[range]:
    """Share `total` items among workers as contiguous ranges; the first ones get one extra."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    if total < 0:
        raise ValueError("total must not be negative")
    per_worker, remainder = divmod(total, workers)
    ranges = []
    start = 0
    for i in range(workers):
        count = per_worker + (1 if i < remainder else 0)
        ranges.append(range(start, start + count))
        start += count
    return ranges


def render_block(block: Block, viewport: Viewport) -> list[Pixel]:
    """Compute the grey level of every pixel of the block."""
    return [Pixel(x, y, viewport.color_at(x, y)) for x, y in block.pixels()]