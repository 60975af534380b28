"""Command line entry point: render the Mandelbrot set and show it in a window."""

from __future__ import annotations

import argparse
from typing import Iterable, Sequence

import pygame

from mandelblocks.fractal import HEIGHT, WIDTH, Pixel, Viewport, render_sequential
from mandelblocks.pipeline import render_parallel, render_quadrants

PARALLEL_TITLE = "Mandelbrot Paralelo (Blocos)"
SEQUENTIAL_TITLE = "Conjunto de Mandelbrot"
DEFAULT_DELAY_MS = 5000


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandelblocks",
        description="Render the Mandelbrot set in blocks on worker threads.",
    )
    parser.add_argument("threads", type=_positive_int, help="number of worker threads")
    parser.add_argument("block_size", type=_positive_int, help="side of a square block in pixels")
    parser.add_argument(
        "--mode",
        choices=("blocks", "quadrants", "sequential"),
        default="blocks",
        help="how the screen is split among workers",
    )
    parser.add_argument("--width", type=_positive_int, default=WIDTH)
    parser.add_argument("--height", type=_positive_int, default=HEIGHT)
    parser.add_argument(
        "--delay",
        type=_non_negative_int,
        default=DEFAULT_DELAY_MS,
        help="milliseconds to keep the window open",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    return _build_parser().parse_args(argv)


def paint(surface: pygame.Surface, pixels: Iterable[Pixel]) -> int:
    """Draw grey pixels onto the surface; return how many were drawn."""
    count = 0
    for x, y, color in pixels:
        surface.set_at((x, y), (color, color, color, 255))
        count += 1
    return count


def show(
    pixels: Iterable[Pixel],
    width: int,
    height: int,
    title: str,
    delay_ms: int = DEFAULT_DELAY_MS,
) -> int:
    """Open a window, draw the pixels, keep it open for delay_ms; return pixels drawn."""
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        count = paint(screen, pixels)
        pygame.display.flip()
        deadline = pygame.time.get_ticks() + delay_ms
        while pygame.time.get_ticks() < deadline:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            pygame.time.wait(10)
        return count
    finally:
        pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Render according to the command line and display the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    viewport = Viewport(width=args.width, height=args.height)
    try:
        if args.mode == "sequential":
            pixels = list(render_sequential(viewport))
            title = SEQUENTIAL_TITLE
        elif args.mode == "quadrants":
            pixels = render_quadrants(viewport, args.threads)
            title = PARALLEL_TITLE
        else:
            pixels = render_parallel(viewport, args.threads, args.block_size)
            title = PARALLEL_TITLE
    except ValueError as error:
        parser.error(str(error))
    show(pixels, viewport.width, viewport.height, title, args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())