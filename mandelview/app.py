"""
Main application module for the Mandelbrot visualizer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- Decoding key presses into actions
- Redraw-on-demand rendering and display
"""

import logging

import pygame

from .controls import Action, ViewState
from .renderer import IMAGE_HEIGHT, IMAGE_WIDTH, MandelbrotRenderer
from .settings import SettingsError, load_settings


logger = logging.getLogger(__name__)


def build_key_map(key_bindings):
    """
    Resolve key names from settings into a pygame key code -> Action map.

    Args:
        key_bindings: dict of action name -> list of pygame key names

    Raises:
        SettingsError if a key name is unknown to pygame
    """
    key_map = {}
    for action_name, key_names in key_bindings.items():
        action = Action(action_name)
        for key_name in key_names:
            try:
                code = pygame.key.key_code(key_name)
            except ValueError as e:
                raise SettingsError(f"Unknown key {key_name!r} for {action_name}") from e
            key_map[code] = action
    return key_map


class MandelbrotApp:
    """
    Main application class for the Mandelbrot visualizer.

    Handles the pygame window and event loop, and coordinates between the
    view state, the renderer and the display.
    """

    def __init__(self, settings=None, width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
        """
        Initialize the application.

        Args:
            settings: Settings dict (default: load the bundled settings.json)
            width, height: Window and raster size (default 1920x1080)
        """
        self.settings = settings or load_settings()
        self.width = width
        self.height = height
        self.fps = self.settings["fps"]
        self.title = self.settings["title"]

        self.state = ViewState(color_scheme=self.settings["color_scheme"])
        self.renderer = MandelbrotRenderer(self.width, self.height)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.key_map = {}
        self.current_surface = None

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        try:
            self._warmup()
            while self.state.running:
                self._handle_events()
                if not self.state.running:
                    break
                if self.state.needs_redraw:
                    self._render()
                self.state.end_frame()
                self._draw()
                self.clock.tick(self.fps)
        finally:
            pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()
        self.key_map = build_key_map(self.settings["key_bindings"])

    def _warmup(self):
        """Warm up JIT before the first frame."""
        pygame.display.set_caption("Compiling (first run only)...")
        self.renderer.warmup()
        pygame.display.set_caption(self.title)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            self.dispatch(event)
            if not self.state.running:
                break

    def dispatch(self, event):
        """
        Apply a single pygame event to the view state.

        Returns:
            True if the event requested a redraw
        """
        if event.type == pygame.QUIT:
            return self.state.apply(Action.QUIT)
        if event.type == pygame.KEYDOWN:
            return self.state.apply(self.key_map.get(event.key))
        return False

    def _render(self):
        """Recompute the image and convert it to a surface."""
        image = self.renderer.render(self.state.params, self.state.color_scheme)
        # surfarray wants (width, height, 3); the published image is read-only
        self.current_surface = pygame.surfarray.make_surface(image.swapaxes(0, 1).copy())
        pygame.display.set_caption(
            f"{self.title} - {self.state.params.describe()} - "
            f"{self.state.color_scheme} ({self.renderer.last_render_seconds:.2f}s)"
        )

    def _draw(self):
        """Draw the current frame."""
        self.screen.fill((0, 0, 0))
        if self.current_surface is not None:
            self.screen.blit(self.current_surface, (0, 0))
        pygame.display.flip()


def run(settings=None):
    """
    Run the Mandelbrot visualizer.

    Args:
        settings: Optional settings dict (default: bundled settings.json)
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = MandelbrotApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
