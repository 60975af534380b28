from collections import Counter

import pytest

from mandelblocks.blocks import Block, split_into_blocks
from mandelblocks.fractal import Pixel, Viewport, render_sequential
from mandelblocks.pipeline import ParallelRenderer, render_parallel, render_quadrants


@pytest.fixture
def viewport():
    return Viewport(width=20, height=15)


def test_render_parallel_matches_sequential(viewport):
    expected = set(render_sequential(viewport))
    result = render_parallel(viewport, 3, 4)
    assert set(result) == expected
    assert len(result) == len(expected)


@pytest.mark.parametrize("block_size", [1, 7, 20, 100])
def test_every_pixel_rendered_once(viewport, block_size):
    result = render_parallel(viewport, 2, block_size)
    counts = Counter((p.x, p.y) for p in result)
    assert len(counts) == viewport.width * viewport.height
    assert set(counts.values()) == {1}


def test_render_quadrants_matches_sequential(viewport):
    expected = set(render_sequential(viewport))
    assert set(render_quadrants(viewport, 4)) == expected
    assert len(render_quadrants(viewport, 2)) == viewport.width * viewport.height


def test_render_quadrants_needs_two_workers(viewport):
    with pytest.raises(ValueError):
        render_quadrants(viewport, 1)


def test_renderer_rejects_no_workers(viewport):
    with pytest.raises(ValueError):
        ParallelRenderer(viewport, [Block(0, 1, 0, 1)], 0)


def test_render_parallel_rejects_bad_block_size(viewport):
    with pytest.raises(ValueError):
        render_parallel(viewport, 2, 0)


def test_empty_block_list_renders_nothing(viewport):
    assert ParallelRenderer(viewport, [], 2).render() == []


def test_block_pixels_arrive_together_in_row_order(viewport):
    blocks = split_into_blocks(viewport.width, viewport.height, 5)
    result = ParallelRenderer(viewport, blocks, 4).render()
    position = 0
    while position < len(result):
        first = result[position]
        block = next(
            b for b in blocks
            if b.x_start <= first.x < b.x_end and b.y_start <= first.y < b.y_end
        )
        chunk = result[position:position + len(block)]
        assert [(p.x, p.y) for p in chunk] == list(block.pixels())
        position += len(block)
    assert position == len(result)


def test_renderer_can_be_iterated_twice(viewport):
    blocks = split_into_blocks(viewport.width, viewport.height, 8)
    renderer = ParallelRenderer(viewport, blocks, 2)
    assert set(renderer) == set(renderer.render())


def test_single_block_pixel_colour(viewport):
    result = ParallelRenderer(viewport, [Block(3, 4, 2, 3)], 1).render()
    assert result == [Pixel(3, 2, viewport.color_at(3, 2))]