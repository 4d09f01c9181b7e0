"""
Input actions and the redraw-on-demand state machine.

Key presses are decoded (by app.py) into Action values. Each parameter
action has a handler in ACTION_HANDLERS that mutates a ViewParameters in
place. ViewState ties the parameters to the "needs redraw" flag consumed
once per frame by the render loop.

This module does not import pygame so it can be driven from tests.
"""

import logging
from enum import Enum

from .colormaps import list_color_schemes
from .params import ViewParameters


logger = logging.getLogger(__name__)

# Step sizes
ZOOM_STEP = 0.9          # zoom in multiplies zoom_depth by this
PAN_PIXELS = 40          # pan distance in screen pixels (scaled by zoom_depth)
ITERATION_STEP = 10      # detail +/- step
STRIDE_STEP = 1          # coarser/finer step


class Action(Enum):
    """Every input the visualizer understands."""

    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"
    MORE_DETAIL = "more_detail"
    LESS_DETAIL = "less_detail"
    COARSER = "coarser"
    FINER = "finer"
    CYCLE_COLORS = "cycle_colors"
    RESET = "reset"
    QUIT = "quit"


def zoom_in(params):
    params.zoom_depth *= ZOOM_STEP


def zoom_out(params):
    params.zoom_depth /= ZOOM_STEP


# Pan speed scales with zoom so it feels constant on screen
def pan_up(params):
    params.offset_y -= PAN_PIXELS * params.zoom_depth


def pan_down(params):
    params.offset_y += PAN_PIXELS * params.zoom_depth


def pan_left(params):
    params.offset_x -= PAN_PIXELS * params.zoom_depth


def pan_right(params):
    params.offset_x += PAN_PIXELS * params.zoom_depth


def more_detail(params):
    params.max_iterations += ITERATION_STEP


def less_detail(params):
    params.max_iterations -= ITERATION_STEP


def coarser(params):
    params.resolution_stride += STRIDE_STEP


def finer(params):
    params.resolution_stride -= STRIDE_STEP


def reset(params):
    params.reset()


# Parameter mutations, keyed by action. CYCLE_COLORS and QUIT are handled
# by ViewState itself since they don't touch ViewParameters.
ACTION_HANDLERS = {
    Action.ZOOM_IN: zoom_in,
    Action.ZOOM_OUT: zoom_out,
    Action.PAN_UP: pan_up,
    Action.PAN_DOWN: pan_down,
    Action.PAN_LEFT: pan_left,
    Action.PAN_RIGHT: pan_right,
    Action.MORE_DETAIL: more_detail,
    Action.LESS_DETAIL: less_detail,
    Action.COARSER: coarser,
    Action.FINER: finer,
    Action.RESET: reset,
}


class ViewState:
    """
    Parameters plus the flags that drive the main loop.

    Usage:
        state = ViewState()
        while state.running:
            for action in decoded_input():
                state.apply(action)
            if state.running and state.needs_redraw:
                image = renderer.render(state.params, state.color_scheme)
            state.end_frame()
            present(image)

    Attributes:
        params: The ViewParameters being explored
        color_scheme: Name of the active color scheme
        needs_redraw: True when the image is stale (starts True)
        running: False once QUIT was applied
    """

    def __init__(self, params=None, color_scheme=None):
        self.params = params if params is not None else ViewParameters()
        self.color_schemes = list_color_schemes()
        if color_scheme is None:
            color_scheme = self.color_schemes[0]
        if color_scheme not in self.color_schemes:
            raise KeyError(f"Unknown color scheme: {color_scheme!r}")
        self.color_scheme = color_scheme
        self.needs_redraw = True
        self.running = True

    def apply(self, action):
        """
        Apply one decoded input.

        Args:
            action: An Action, or None for keys with no binding

        Returns:
            True if the action requested a redraw, False otherwise
        """
        if not self.running:
            return False
        if action is None:
            return False
        if action is Action.QUIT:
            logger.debug("Quit requested")
            self.running = False
            return False
        if action is Action.CYCLE_COLORS:
            idx = self.color_schemes.index(self.color_scheme)
            self.color_scheme = self.color_schemes[(idx + 1) % len(self.color_schemes)]
        else:
            ACTION_HANDLERS[action](self.params)
            self.params.clamp()
        logger.debug("Applied %s -> %s", action.value, self.params)
        self.needs_redraw = True
        return True

    def end_frame(self):
        """Consume the redraw request; called once per frame, rendered or not."""
        self.needs_redraw = False
