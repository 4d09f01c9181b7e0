import pytest

from mandelview.params import (
    MAX_OFFSET,
    MAX_RESOLUTION_STRIDE,
    MAX_ZOOM_DEPTH,
    MIN_ZOOM_DEPTH,
    ViewParameters,
)


def test_defaults():
    params = ViewParameters()
    assert params.zoom_depth == 0.004
    assert params.offset_x == 0.0
    assert params.offset_y == 0.0
    assert params.max_iterations == 120
    assert params.resolution_stride == 1


def test_reset_restores_defaults():
    params = ViewParameters(zoom_depth=1e-9, offset_x=-0.74, offset_y=0.1,
                            max_iterations=900, resolution_stride=6)
    params.reset()
    assert params == ViewParameters()


@pytest.mark.parametrize("kwargs", [
    {"zoom_depth": 0.0},
    {"zoom_depth": -0.1},
    {"zoom_depth": float("nan")},
    {"zoom_depth": float("inf")},
    {"offset_x": float("nan")},
    {"max_iterations": 0},
    {"resolution_stride": 0},
])
def test_rejects_degenerate_values(kwargs):
    with pytest.raises(ValueError):
        ViewParameters(**kwargs)


def test_clamp():
    params = ViewParameters()
    params.zoom_depth = 0.0
    params.max_iterations = -15
    params.resolution_stride = 100
    params.clamp()
    assert params.zoom_depth == MIN_ZOOM_DEPTH
    assert params.max_iterations == 1
    assert params.resolution_stride == MAX_RESOLUTION_STRIDE


def test_snapshot_is_independent():
    params = ViewParameters(offset_x=0.5)
    snap = params.snapshot()
    params.offset_x = 1.0
    assert snap.offset_x == 0.5
    assert snap is not params


def test_describe_mentions_iterations():
    assert "iter 120" in ViewParameters().describe()


def test_clamp_keeps_offsets_finite():
    params = ViewParameters(zoom_depth=MAX_ZOOM_DEPTH)
    for _ in range(10):
        params.offset_x += 40 * params.zoom_depth
        params.offset_y -= 40 * params.zoom_depth
        params.clamp()
    assert params.offset_x == MAX_OFFSET
    assert params.offset_y == -MAX_OFFSET
