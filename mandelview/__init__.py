"""
Mandelbrot Set Visualizer Package

An interactive Mandelbrot set explorer using Pygame for display and Numba
for JIT-compiled computation. The image is redrawn only when the view
changes.

Quick Start:
    from mandelview import run
    run()

Or from command line:
    python -m mandelview

Package Structure:
    - params.py: ViewParameters (zoom, pan offsets, iterations, stride)
    - controls.py: Input actions and the redraw-on-demand ViewState
    - compute.py: JIT-compiled escape-time and coloring functions
    - colormaps.py: Color schemes (banded, palette gradient)
    - renderer.py: Full-image renderer owning the raster buffer
    - settings.py: settings.json loading and validation
    - app.py: Main application and event loop

Controls:
    - = / -: Zoom in / out
    - W A S D: Pan
    - Right / Left: More / less iterations
    - ] / [: Coarser / finer sampling
    - C: Cycle color scheme
    - R: Reset to default view
    - ESC: Quit
"""

from .app import run, MandelbrotApp
from .controls import Action, ViewState
from .params import ViewParameters
from .renderer import MandelbrotRenderer
from .colormaps import COLORMAPS, get_colormap, list_color_schemes

__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotApp",
    "Action",
    "ViewState",
    "ViewParameters",
    "MandelbrotRenderer",
    "COLORMAPS",
    "get_colormap",
    "list_color_schemes",
]
