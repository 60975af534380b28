[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mandelblocks"
version = "0.1.0"
description = "Grey-scale Mandelbrot set renderer that splits the image into blocks and computes them on a pool of worker threads"
requires-python = ">=3.10"
keywords = ["mandelbrot", "fractal", "parallel", "threads", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mandelblocks = "mandelblocks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mandelblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
