"""
Main application module for the Mandelbrot viewer.

Contains the MandelbrotApp class which handles:
- Window setup and main loop
- Mouse clicks (zoom in 2x around the clicked point) and keyboard
- Periodic redraw of the renderer's live image buffer

The redraw loop never waits for a render: every tick it blits whatever
the buffer holds, so a render in progress shows up band by band.
"""

import logging

import pygame

from .compute import warmup_jit
from .config import load_config
from .renderer import MandelbrotRenderer


logger = logging.getLogger(__name__)


class MandelbrotApp:
    """
    Main application class for the Mandelbrot viewer.

    Handles the pygame window and event loop, and forwards clicks to
    the renderer.
    """

    TITLE = "Mandelbrot Set - Click to zoom, R to reset"

    def __init__(self, config):
        """
        Initialize the application.

        Args:
            config: Validated RenderConfig
        """
        self.config = config
        self.width = config.width
        self.height = config.height
        self.renderer = MandelbrotRenderer(config)

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._warmup_and_initial_render()

        fps = 1000.0 / self.config.redraw_interval_ms
        self.running = True
        while self.running:
            self._handle_events()
            self._draw()
            self.clock.tick(fps)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.TITLE)
        self.clock = pygame.time.Clock()

    def _warmup_and_initial_render(self):
        """Warm up JIT and start the first render."""
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit(self.renderer.palette)
        self.renderer.render()
        self._update_caption()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = event.pos
                self.renderer.click(x, y)
                self._update_caption()
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_r:
            self.renderer.reset()
            self._update_caption()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def _update_caption(self):
        view = self.renderer.view
        pygame.display.set_caption(
            f"{self.TITLE} - center {view.center.real:.6g}{view.center.imag:+.6g}i, "
            f"scale {view.scale:g}"
        )

    def _draw(self):
        """Draw the current buffer contents, finished or not."""
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(self.renderer.image.swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()


def run(config=None, **overrides):
    """
    Run the Mandelbrot viewer.

    Args:
        config: RenderConfig to use (default: settings.json)
        **overrides: Setting overrides passed to load_config()
    """
    if config is None:
        config = load_config(**overrides)
    app = MandelbrotApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        pygame.quit()
