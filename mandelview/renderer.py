"""
Synchronous Mandelbrot renderer.

The MandelbrotRenderer class handles:
- Owning the raster buffer (the only writer)
- Running the escape-time kernel for a ViewParameters snapshot
- Coloring with the banded function or a lookup-table colormap
- Publishing each finished image as a read-only copy

Every render recomputes the full image. Nothing is cached between renders,
so the output is a pure function of the parameters, image size and
color scheme.
"""

import logging
import time

import numpy as np

from .colormaps import BANDED, get_colormap, get_default_colormap
from .compute import (
    compute_mandelbrot,
    apply_banded_colormap,
    apply_colormap_smooth,
    warmup_jit,
)


logger = logging.getLogger(__name__)

IMAGE_WIDTH = 1920
IMAGE_HEIGHT = 1080


class MandelbrotRenderer:
    """
    Renders complete Mandelbrot images into an owned RGB buffer.

    Usage:
        renderer = MandelbrotRenderer(1920, 1080)
        image = renderer.render(ViewParameters())
        # image is a read-only (height, width, 3) uint8 array

    Attributes:
        width, height: Image dimensions in pixels
        rgb: The owned raster buffer, indexed [row, col, channel]
        render_count: Number of completed renders
        last_render_seconds: Wall time of the most recent render
    """

    def __init__(self, width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
        """
        Initialize the renderer.

        Args:
            width, height: Image dimensions in pixels (default 1920x1080)
        """
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.rgb = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self._colormaps = {}
        self.render_count = 0
        self.last_render_seconds = 0.0

    def warmup(self):
        """Compile the JIT kernels before the first interactive render."""
        start = time.perf_counter()
        warmup_jit(get_default_colormap())
        logger.debug("JIT warmup took %.2fs", time.perf_counter() - start)

    def compute(self, params):
        """
        Compute the sampled smooth iteration counts for params.

        Returns:
            2D float64 array, one value per sampled pixel
        """
        return compute_mandelbrot(
            float(params.zoom_depth), float(params.offset_x), float(params.offset_y),
            self.width, self.height,
            int(params.max_iterations), int(params.resolution_stride),
        )

    def render(self, params, color_scheme=BANDED):
        """
        Render a full image for params.

        Args:
            params: ViewParameters snapshot to render
            color_scheme: BANDED or a lookup-table colormap name

        Returns:
            Read-only copy of the raster buffer
        """
        start = time.perf_counter()
        data = self.compute(params)

        colormap = self._get_colormap(color_scheme)
        if colormap is None:
            apply_banded_colormap(
                data, int(params.max_iterations), int(params.resolution_stride), self.rgb
            )
        else:
            apply_colormap_smooth(
                data, int(params.max_iterations), colormap,
                int(params.resolution_stride), self.rgb
            )

        self.render_count += 1
        self.last_render_seconds = time.perf_counter() - start
        logger.debug(
            "Rendered %dx%d (%s, %s) in %.3fs",
            self.width, self.height, params.describe(), color_scheme,
            self.last_render_seconds,
        )
        return self.get_image()

    def get_image(self):
        """Return a read-only copy of the current raster buffer.

        The copy stays valid after later renders rewrite the buffer.
        """
        image = self.rgb.copy()
        image.flags.writeable = False
        return image

    def _get_colormap(self, name):
        if name not in self._colormaps:
            self._colormaps[name] = get_colormap(name)
        return self._colormaps[name]
