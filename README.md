# mandelblocks

mandelblocks draws the Mandelbrot set in grey scale. By default the image is 800×800 pixels and covers the complex plane from -2 to 1 on the real axis and from -1.5 to 1.5 on the imaginary axis. A pixel's shade is the number of iterations, capped at 256, that its point takes to escape, taken modulo 256.

The image can be rendered in three ways:

- **sequentially**, one pixel after another, row by row;
- **in quadrants**, where the image is cut into two columns and `threads // 2` rows, and each cell gets its own thread;
- **in blocks**, where the image is cut into square blocks of a size you choose (blocks on the right and bottom edges are clipped) and a pool of worker threads computes them.

In the threaded modes the pixels of one block come out together, in row order, and blocks come out in the order the workers finish them.

## Installation

```
pip install .
```

The window is drawn with pygame. To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
mandelblocks THREADS BLOCK_SIZE [--mode {blocks,quadrants,sequential}]
             [--width W] [--height H] [--delay MS]
```

- `THREADS` – number of worker threads (a positive integer).
- `BLOCK_SIZE` – side of each square block in pixels (a positive integer). Both positional arguments are required in every mode, though only `blocks` uses the block size and `sequential` uses neither.
- `--mode` – `blocks` (the default), `quadrants` or `sequential`. `quadrants` needs at least two threads.
- `--width`, `--height` – image size in pixels, 800 each by default.
- `--delay` – how long, in milliseconds, the window stays open once the image is drawn; 5000 by default. Closing the window ends the wait early.

For example:

```
mandelblocks 4 50
```

renders the 800×800 image in 50-pixel blocks on four threads, then shows it for five seconds.

The image is computed in full before the window opens; it is not drawn progressively, and the window cannot be zoomed or panned.

## Library use

```python
from mandelblocks.fractal import Viewport, mandelbrot, render_sequential
from mandelblocks.blocks import split_into_blocks, render_block
from mandelblocks.pipeline import ParallelRenderer, render_parallel, render_quadrants

viewport = Viewport()          # 800x800, -2..1 by -1.5..1.5, 256 iterations

# Iteration count of a single point
mandelbrot(0.0, 0.0, 256)      # 256, the point never escapes

# Whole image, one pixel at a time (a generator)
pixels = list(render_sequential(viewport))

# Whole image, cut into 50-pixel blocks and computed by 4 threads
pixels = render_parallel(viewport, workers=4, block_size=50)

# Two columns by two rows, one thread per cell
pixels = render_quadrants(viewport, workers=4)

# Choose the blocks yourself and stream the results as blocks finish
blocks = split_into_blocks(viewport.width, viewport.height, 100)
for pixel in ParallelRenderer(viewport, blocks, workers=2):
    print(pixel.x, pixel.y, pixel.color)
```

Every renderer produces `Pixel` named tuples with `x`, `y` and a grey `color` from 0 to 255. Other helpers:

- `Viewport.to_complex(x, y)` maps a screen pixel to its point of the plane; `Viewport.color_at(x, y)` gives its grey level.
- `mandelblocks.blocks.split_into_grid(width, height, columns, rows)` cuts the screen into a fixed grid, the last column and row taking the remainder.
- `mandelblocks.blocks.distribute(total, workers)` shares `total` items among workers as contiguous ranges.
- `Block.pixels()` yields a block's positions; `render_block(block, viewport)` computes them.
- `mandelblocks.cli.paint(surface, pixels)` draws pixels onto a pygame surface, and `mandelblocks.cli.show(pixels, width, height, title, delay_ms)` opens a window, draws them and keeps it open.

Invalid sizes, block sizes or worker counts raise `ValueError`.