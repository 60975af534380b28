"""Rendering blocks of the screen on a pool of worker threads."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Iterable, Iterator

from mandelblocks.blocks import Block, render_block, split_into_blocks, split_into_grid
from mandelblocks.fractal import Pixel, Viewport


class ParallelRenderer:
    """Hands blocks to worker threads and yields their pixels as each block completes.

    Pixels of one block are yielded together, in row order; blocks arrive in the
    order the workers finish them.
    """

    def __init__(self, viewport: Viewport, blocks: Iterable[Block], workers: int) -> None:
        if workers <= 0:
            raise ValueError("workers must be positive")
        self.viewport = viewport
        self.blocks = list(blocks)
        self.workers = workers

    def __iter__(self) -> Iterator[Pixel]:
        if not self.blocks:
            return
        pool = ThreadPoolExecutor(max_workers=self.workers)
        try:
            futures: list[Future[list[Pixel]]] = [
                pool.submit(render_block, block, self.viewport) for block in self.blocks
            ]
            for future in as_completed(futures):
                yield from future.result()
        finally:
            pool.shutdown(wait=True, cancel_futures=True)

    def render(self) -> list[Pixel]:
        """Render every block and return all pixels."""
        return list(self)


def render_parallel(viewport: Viewport, workers: int, block_size: int) -> list[Pixel]:
    """Render the viewport as square blocks of `block_size` shared among `workers` threads."""
    blocks = split_into_blocks(viewport.width, viewport.height, block_size)
    return ParallelRenderer(viewport, blocks, workers).render()


def render_quadrants(viewport: Viewport, workers: int) -> list[Pixel]:
    """Render the viewport cut into two columns and workers // 2 rows, one thread per block."""
    rows = workers // 2
    if rows <= 0:
        raise ValueError("at least two workers are needed to split the screen into columns")
    blocks = split_into_grid(viewport.width, viewport.height, 2, rows)
    return ParallelRenderer(viewport, blocks, len(blocks)).render()