"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains all the performance-critical functions. They are
JIT-compiled for speed and handle:
- Escape-time iteration of z² + c with smooth (fractional) iteration counts
- Banded piecewise-linear coloring
- Lookup-table coloring with smooth interpolation
- Filling resolution-stride blocks so subsampled renders leave no stale pixels

Image coordinates: sample (hx, hy) maps to
    re = (hx - width/2) * zoom_depth + offset_x
    im = (hy - height/2) * zoom_depth + offset_y
Row 0 is the top of the image. Every output array is indexed [row, col].
"""

import logging
import math

import numpy as np
from numba import jit, prange


logger = logging.getLogger(__name__)

ESCAPE_RADIUS_SQ = 4.0  # |z|² threshold, i.e. |z| > 2

# n - log(0.5)/log(2) - log(log(|z|))/log(2)  ==  n + 1 - log2(ln|z|)
LOG_BASE = 1.0 / math.log(2.0)
LOG_HALF_BASE = math.log(0.5) * LOG_BASE


@jit(nopython=True, cache=True)
def escape_time(re, im, max_iter):
    """
    Iterate z <- z² + c from z = 0 for c = re + im·i.

    Returns:
        The smooth iteration count as a float. Points that never escape
        return exactly max_iter; escaped points never do, so max_iter alone
        marks the set. If the smoothing step is not finite, the raw integer
        count is returned.
    """
    x = 0.0
    y = 0.0
    iteration = 0
    while x * x + y * y <= ESCAPE_RADIUS_SQ and iteration < max_iter:
        next_x = x * x - y * y + re
        y = 2.0 * x * y + im
        x = next_x
        iteration += 1

    if iteration >= max_iter:
        return float(max_iter)

    log_zn = math.log(math.sqrt(x * x + y * y))
    if log_zn <= 0.0:
        return float(iteration)
    smooth = iteration - LOG_HALF_BASE - math.log(log_zn) * LOG_BASE
    if not math.isfinite(smooth):
        return float(iteration)
    if smooth == max_iter:
        # keep escaped points off the in-set value
        return np.nextafter(smooth, np.inf)
    return smooth


@jit(nopython=True, cache=True)
def _clamp_channel(value):
    # int() truncates toward zero before clamping
    c = int(value)
    if c < 0:
        return 0
    if c > 255:
        return 255
    return c


@jit(nopython=True, cache=True)
def band_color(value, max_iter):
    """
    Map a (possibly fractional) iteration count to an RGB triple.

    Four bands: red->blue below 16, blue->green below 32, green->red below
    64, then fading red. Points at max_iter are black. Channels are
    truncated then clamped to [0, 255].
    """
    if value == max_iter:
        return 0, 0, 0
    if value < 16.0:
        r = 16.0 * (16.0 - value)
        g = 0.0
        b = 16.0 * value - 1.0
    elif value < 32.0:
        r = 0.0
        g = 16.0 * (value - 16.0)
        b = 16.0 * (32.0 - value) - 1.0
    elif value < 64.0:
        r = 8.0 * (value - 32.0)
        g = 8.0 * (64.0 - value) - 1.0
        b = 0.0
    else:
        r = 255.0 - (value - 64.0) * 4.0
        g = 0.0
        b = 0.0
    return _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)


@jit(nopython=True, parallel=True, cache=True)
def compute_mandelbrot(zoom_depth, offset_x, offset_y, width, height, max_iter, stride=1):
    """
    Compute smooth iteration counts for every sampled pixel.

    Only pixels whose coordinates are multiples of stride are sampled.
    Rows are spread across cores; each sample is independent, so the
    result does not depend on scheduling.

    Args:
        zoom_depth: Complex-plane distance per pixel
        offset_x, offset_y: View center in the complex plane
        width, height: Full image dimensions in pixels
        max_iter: Escape-time cutoff
        stride: Sampling step in pixels (>= 1)

    Returns:
        2D float64 array of shape (ceil(height/stride), ceil(width/stride)).
        Points in the set have value == max_iter.
    """
    rows = (height + stride - 1) // stride
    cols = (width + stride - 1) // stride
    result = np.empty((rows, cols), dtype=np.float64)

    half_w = width / 2.0
    half_h = height / 2.0

    for row in prange(rows):
        im = (row * stride - half_h) * zoom_depth + offset_y
        for col in range(cols):
            re = (col * stride - half_w) * zoom_depth + offset_x
            result[row, col] = escape_time(re, im, max_iter)

    return result


@jit(nopython=True, parallel=True, cache=True)
def apply_banded_colormap(data, max_iter, stride, out):
    """
    Color sampled iteration data with band_color and fill stride blocks.

    Args:
        data: 2D array from compute_mandelbrot
        max_iter: Iteration cutoff used for data
        stride: Sampling step used for data
        out: (height, width, 3) uint8 image, modified in place
    """
    height, width = out.shape[0], out.shape[1]
    rows, cols = data.shape

    for row in prange(rows):
        y0 = row * stride
        y1 = min(y0 + stride, height)
        for col in range(cols):
            x0 = col * stride
            x1 = min(x0 + stride, width)
            r, g, b = band_color(data[row, col], max_iter)
            for py in range(y0, y1):
                for px in range(x0, x1):
                    out[py, px, 0] = r
                    out[py, px, 1] = g
                    out[py, px, 2] = b


@jit(nopython=True, parallel=True, cache=True)
def apply_colormap_smooth(data, max_iter, colormap, stride, out):
    """
    Color sampled iteration data through a lookup table and fill stride blocks.

    The iteration value is scaled by max_iter into the table, and the
    result is linearly interpolated between adjacent entries to avoid banding.

    Args:
        data: 2D array from compute_mandelbrot
        max_iter: Iteration cutoff (points with this value are black)
        colormap: Nx3 array of RGB colors (uint8)
        stride: Sampling step used for data
        out: (height, width, 3) uint8 image, modified in place
    """
    height, width = out.shape[0], out.shape[1]
    rows, cols = data.shape
    num_colors = colormap.shape[0]

    for row in prange(rows):
        y0 = row * stride
        y1 = min(y0 + stride, height)
        for col in range(cols):
            x0 = col * stride
            x1 = min(x0 + stride, width)
            val = data[row, col]
            if val == max_iter:
                r = 0
                g = 0
                b = 0
            else:
                fidx = (val / max_iter) * (num_colors - 1)
                if fidx < 0.0:
                    fidx = 0.0
                elif fidx > num_colors - 1:
                    fidx = float(num_colors - 1)
                idx0 = int(fidx)
                idx1 = min(idx0 + 1, num_colors - 1)
                t = fidx - idx0
                r = int(colormap[idx0, 0] * (1 - t) + colormap[idx1, 0] * t)
                g = int(colormap[idx0, 1] * (1 - t) + colormap[idx1, 1] * t)
                b = int(colormap[idx0, 2] * (1 - t) + colormap[idx1, 2] * t)
            for py in range(y0, y1):
                for px in range(x0, x1):
                    out[py, px, 0] = r
                    out[py, px, 1] = g
                    out[py, px, 2] = b


def warmup_jit(colormap):
    """
    Warm up JIT compilation with small dummy arrays.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first real render.

    Args:
        colormap: A colormap array to use for warming up apply_colormap_smooth
    """
    logger.debug("Compiling kernels")
    data = compute_mandelbrot(0.1, 0.0, 0.0, 10, 10, 10, 1)
    dummy = np.zeros((10, 10, 3), dtype=np.uint8)
    apply_banded_colormap(data, 10, 1, dummy)
    apply_colormap_smooth(data, 10, colormap, 1, dummy)
