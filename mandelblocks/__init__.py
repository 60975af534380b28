"""Grey-scale Mandelbrot renderer: sequential, grid and thread-pool block rendering, shown with pygame."""

__version__ = "0.1.0"
__all__ = ["blocks", "cli", "fractal", "pipeline"]