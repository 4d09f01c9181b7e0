"""
View parameters for the Mandelbrot visualizer.

A ViewParameters instance describes which part of the complex plane is shown
and how much effort goes into rendering it. The renderer only reads it; the
input actions in controls.py are the only writers.
"""

import math
from dataclasses import dataclass, fields


# Defaults restored by the reset action
DEFAULT_ZOOM_DEPTH = 0.004
DEFAULT_OFFSET_X = 0.0
DEFAULT_OFFSET_Y = 0.0
DEFAULT_MAX_ITERATIONS = 120
DEFAULT_RESOLUTION_STRIDE = 1

# Clamp limits applied after every mutation
MIN_ZOOM_DEPTH = 1e-300
MAX_ZOOM_DEPTH = 1e300
MAX_OFFSET = 1e300
MIN_ITERATIONS = 1
MIN_RESOLUTION_STRIDE = 1
MAX_RESOLUTION_STRIDE = 32


@dataclass
class ViewParameters:
    """
    Mutable view state.

    Attributes:
        zoom_depth: Complex-plane distance covered by one pixel (smaller = deeper)
        offset_x, offset_y: Center of the view in the complex plane
        max_iterations: Escape-time cutoff
        resolution_stride: Pixel sampling step (1 = every pixel)
    """

    zoom_depth: float = DEFAULT_ZOOM_DEPTH
    offset_x: float = DEFAULT_OFFSET_X
    offset_y: float = DEFAULT_OFFSET_Y
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    resolution_stride: int = DEFAULT_RESOLUTION_STRIDE

    def __post_init__(self):
        if not math.isfinite(self.zoom_depth) or self.zoom_depth <= 0:
            raise ValueError(f"zoom_depth must be positive and finite, got {self.zoom_depth!r}")
        if not (math.isfinite(self.offset_x) and math.isfinite(self.offset_y)):
            raise ValueError("offsets must be finite")
        if int(self.max_iterations) < MIN_ITERATIONS:
            raise ValueError(f"max_iterations must be >= {MIN_ITERATIONS}, got {self.max_iterations!r}")
        if int(self.resolution_stride) < MIN_RESOLUTION_STRIDE:
            raise ValueError(
                f"resolution_stride must be >= {MIN_RESOLUTION_STRIDE}, got {self.resolution_stride!r}"
            )
        self.max_iterations = int(self.max_iterations)
        self.resolution_stride = int(self.resolution_stride)

    def reset(self):
        """Restore every field to its default."""
        self.zoom_depth = DEFAULT_ZOOM_DEPTH
        self.offset_x = DEFAULT_OFFSET_X
        self.offset_y = DEFAULT_OFFSET_Y
        self.max_iterations = DEFAULT_MAX_ITERATIONS
        self.resolution_stride = DEFAULT_RESOLUTION_STRIDE

    def clamp(self):
        """Pull every field back into its valid range after a mutation."""
        self.zoom_depth = min(max(self.zoom_depth, MIN_ZOOM_DEPTH), MAX_ZOOM_DEPTH)
        self.offset_x = min(max(self.offset_x, -MAX_OFFSET), MAX_OFFSET)
        self.offset_y = min(max(self.offset_y, -MAX_OFFSET), MAX_OFFSET)
        self.max_iterations = max(int(self.max_iterations), MIN_ITERATIONS)
        self.resolution_stride = min(
            max(int(self.resolution_stride), MIN_RESOLUTION_STRIDE),
            MAX_RESOLUTION_STRIDE,
        )

    def snapshot(self):
        """Return an independent copy, e.g. to hand to the renderer."""
        return ViewParameters(**{f.name: getattr(self, f.name) for f in fields(self)})

    def describe(self):
        """Short human-readable summary for the window caption."""
        return (
            f"zoom {self.zoom_depth:.3g}  "
            f"center ({self.offset_x:.6g}, {self.offset_y:.6g})  "
            f"iter {self.max_iterations}  stride {self.resolution_stride}"
        )
