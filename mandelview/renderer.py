"""
Parallel Mandelbrot renderer with a shared image buffer.

The MandelbrotRenderer class handles:
- The current view and its click-to-zoom transform
- A single (height, width, 3) RGB buffer reused by every render
- Fan-out of each render over disjoint column bands, one thread per band

Renders are fire-and-forget: render() starts the workers and returns at
once. A new render does not cancel one still in flight; both write into
the same buffer, so a reader can briefly see a frame mixing two views.
Each band is owned by exactly one worker of a pass, so workers never
need a lock.
"""

import logging
import threading
import time

import numpy as np

from .compute import render_band, column_bands
from .palette import get_palette


logger = logging.getLogger(__name__)


class RenderPass:
    """
    Workers launched by one render() call.

    Attributes:
        generation: Sequence number of the pass, starting at 1
        view: The View being rendered
        threads: One worker thread per column band
        started: time.perf_counter() when the workers were launched
    """

    def __init__(self, generation, view, threads):
        self.generation = generation
        self.view = view
        self.threads = threads
        self.started = time.perf_counter()

    def done(self):
        return not any(t.is_alive() for t in self.threads)

    def join(self, timeout=None):
        """
        Wait for every worker of this pass.

        Args:
            timeout: Overall limit in seconds (None waits forever)

        Returns:
            True if all workers finished
        """
        deadline = None if timeout is None else time.perf_counter() + timeout
        for t in self.threads:
            remaining = None if deadline is None else max(0.0, deadline - time.perf_counter())
            t.join(remaining)
        finished = self.done()
        if finished:
            logger.debug("Render pass %d finished in %.3fs",
                         self.generation, time.perf_counter() - self.started)
        return finished


class MandelbrotRenderer:
    """
    Owns the view and the image buffer, and renders on demand.

    Usage:
        renderer = MandelbrotRenderer(load_config())
        renderer.render()

        # In your display loop:
        display(renderer.image)

        # On a click:
        renderer.click(x, y)

    Attributes:
        config: The validated RenderConfig
        width, height: Viewport dimensions
        palette: (16, 3) uint8 color table
        image: The live (height, width, 3) uint8 buffer
    """

    def __init__(self, config):
        self.config = config.validate()
        self.width = config.width
        self.height = config.height
        self.palette = get_palette(config.palette)
        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)

        self._view = config.initial_view()
        self._bands = column_bands(self.width, config.workers)
        self._generation = 0
        self._passes = []
        self.lock = threading.Lock()

    @property
    def view(self):
        return self._view

    @property
    def busy(self):
        """True while any launched pass still has running workers."""
        with self.lock:
            return any(not p.done() for p in self._passes)

    def render(self, view=None):
        """
        Start rendering `view` (default: the current view) into the buffer.

        Returns immediately; the returned RenderPass can be joined by
        callers that need the finished image.
        """
        if view is not None:
            self._view = view
        view = self._view

        with self.lock:
            self._generation += 1
            generation = self._generation
            # Forget finished passes
            self._passes = [p for p in self._passes if not p.done()]

        logger.debug("Render pass %d: center=%s scale=%s workers=%d",
                     generation, view.center, view.scale, len(self._bands))

        threads = []
        for x_start, x_end in self._bands:
            if x_start == x_end:
                continue
            thread = threading.Thread(
                target=render_band,
                args=(self.image, x_start, x_end,
                      view.center.real, view.center.imag, view.scale,
                      self.config.max_iterations, self.config.bailout, self.palette),
                name=f"mandelview-{generation}-{x_start}",
            )
            thread.daemon = True
            threads.append(thread)

        render_pass = RenderPass(generation, view, threads)
        with self.lock:
            self._passes.append(render_pass)
        for thread in threads:
            thread.start()
        return render_pass

    def click(self, x, y):
        """
        Zoom in 2x around pixel (x, y) and start rendering the new view.

        Raises:
            ValueError if (x, y) lies outside the viewport
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(
                f"click ({x}, {y}) outside viewport {self.width}x{self.height}"
            )
        self._view = self._view.zoom_at(x, y, self.width, self.height)
        logger.info("Zoom to center=%s scale=%s", self._view.center, self._view.scale)
        return self.render()

    def reset(self):
        """Return to the configured starting view and re-render."""
        return self.render(self.config.initial_view())

    def wait(self, timeout=None):
        """
        Wait for the most recent pass to finish.

        Returns:
            True if it finished (or nothing was ever rendered)
        """
        with self.lock:
            latest = self._passes[-1] if self._passes else None
        if latest is None:
            return True
        return latest.join(timeout)

    def snapshot(self):
        """Copy of the current buffer contents."""
        return self.image.copy()
