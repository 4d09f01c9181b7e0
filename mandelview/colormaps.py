"""
Color scheme definitions for Mandelbrot visualization.

Two kinds of scheme are available:
- "Banded": the piecewise-linear band function in compute.band_color.
  It works on absolute iteration counts, so it needs no lookup table.
- Lookup-table schemes: each factory returns a numpy array of shape
  (4096, 3) with uint8 RGB values. compute.apply_colormap_smooth
  interpolates between adjacent entries.

To add a new lookup-table scheme:
1. Define a create_colormap_xxx() function that returns the color array
2. Add it to the COLORMAPS dictionary at the bottom of this file
"""

import numpy as np


NUM_COLORS = 4096  # Resolution of colormap for smooth gradients

BANDED = "Banded"

# Gradient anchors, from deep blue through white and orange to near black
PALETTE = [
    (0, 7, 100),
    (32, 107, 203),
    (237, 255, 255),
    (255, 170, 0),
    (0, 2, 0),
]


def create_colormap_palette(anchors=None):
    """
    Palette colormap: linear interpolation between evenly spaced anchors.

    Args:
        anchors: Sequence of (r, g, b) tuples (default PALETTE)
    """
    anchors = np.asarray(PALETTE if anchors is None else anchors, dtype=np.float64)
    if anchors.ndim != 2 or anchors.shape[1] != 3 or len(anchors) < 2:
        raise ValueError("Palette needs at least two (r, g, b) anchors")

    stops = np.linspace(0.0, 1.0, len(anchors))
    t = np.linspace(0.0, 1.0, NUM_COLORS)
    colors = np.empty((NUM_COLORS, 3), dtype=np.uint8)
    for channel in range(3):
        colors[:, channel] = np.clip(
            np.rint(np.interp(t, stops, anchors[:, channel])), 0, 255
        )
    return colors


# Registry of lookup-table colormaps.
# Keys are display names, values are factory functions.
COLORMAPS = {
    "Palette": create_colormap_palette,
}


def get_colormap(name):
    """
    Get a colormap by name.

    Args:
        name: BANDED or a key from COLORMAPS

    Returns:
        Colormap array (4096, 3) of uint8 RGB values, or None for BANDED

    Raises:
        KeyError if name not found
    """
    if name == BANDED:
        return None
    return COLORMAPS[name]()


def get_default_colormap():
    """Get the default lookup-table colormap (Palette)."""
    return create_colormap_palette()


def list_color_schemes():
    """Get list of available scheme names, the banded default first."""
    return [BANDED] + list(COLORMAPS.keys())
