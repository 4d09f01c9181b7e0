import numpy as np
import pytest

from mandelview.params import ViewParameters
from mandelview.renderer import MandelbrotRenderer


WIDTH, HEIGHT = 64, 36


@pytest.fixture
def renderer():
    return MandelbrotRenderer(WIDTH, HEIGHT)


def test_default_size():
    renderer = MandelbrotRenderer()
    assert renderer.rgb.shape == (1080, 1920, 3)


def test_rejects_empty_image():
    with pytest.raises(ValueError):
        MandelbrotRenderer(0, 10)


def test_center_pixel_is_black(renderer):
    image = renderer.render(ViewParameters())
    assert image.shape == (HEIGHT, WIDTH, 3)
    assert tuple(image[HEIGHT // 2, WIDTH // 2]) == (0, 0, 0)


def test_far_corner_escapes(renderer):
    params = ViewParameters(zoom_depth=0.1)
    image = renderer.render(params)
    assert tuple(image[0, 0]) != (0, 0, 0)


def test_render_is_bit_identical(renderer):
    params = ViewParameters(zoom_depth=0.01, offset_x=-0.6, offset_y=0.2, max_iterations=200)
    first = renderer.render(params).copy()
    second = renderer.render(params)
    assert np.array_equal(first, second)
    assert renderer.render_count == 2


def test_image_is_read_only(renderer):
    image = renderer.render(ViewParameters())
    assert not image.flags.writeable
    with pytest.raises(ValueError):
        image[0, 0, 0] = 1


def test_stride_leaves_no_stale_pixels(renderer):
    params = ViewParameters(zoom_depth=0.05, offset_x=-0.5)
    full = renderer.render(params).copy()

    params.resolution_stride = 4
    coarse = renderer.render(params).copy()

    # sampled pixels agree with the full render
    assert np.array_equal(coarse[::4, ::4], full[::4, ::4])
    # every pixel carries the color of its block anchor
    anchors = coarse[::4, ::4]
    expected = np.repeat(np.repeat(anchors, 4, axis=0), 4, axis=1)[:HEIGHT, :WIDTH]
    assert np.array_equal(coarse, expected)


def test_palette_scheme(renderer):
    params = ViewParameters(zoom_depth=0.05, offset_x=-0.5)
    banded = renderer.render(params, "Banded").copy()
    palette = renderer.render(params, "Palette").copy()
    assert tuple(palette[HEIGHT // 2, WIDTH // 2]) == (0, 0, 0)
    assert not np.array_equal(banded, palette)


def test_unknown_scheme(renderer):
    with pytest.raises(KeyError):
        renderer.render(ViewParameters(), "Nope")


def test_warmup_does_not_touch_buffer(renderer):
    renderer.warmup()
    assert not renderer.rgb.any()


def test_published_image_survives_next_render(renderer):
    first = renderer.render(ViewParameters())
    kept = first.copy()
    renderer.render(ViewParameters(zoom_depth=0.1, offset_x=1.0))
    assert np.array_equal(first, kept)
    assert not np.shares_memory(first, renderer.rgb)
