"""
Mandelbrot Set Viewer Package

Renders the Mandelbrot set into a fixed-size RGB buffer using Numba
JIT-compiled kernels spread over parallel column bands, with a Pygame
window that zooms in 2x wherever you click.

Quick Start:
    from mandelview import MandelbrotRenderer, load_config
    renderer = MandelbrotRenderer(load_config())
    renderer.render()
    renderer.wait()
    image = renderer.snapshot()

Or from command line:
    python -m mandelview

Package Structure:
    - coords.py: View and pixel <-> complex plane mapping
    - compute.py: JIT-compiled escape-time, coloring and band kernels
    - palette.py: Cyclic color palettes
    - config.py: settings.json loading and validation
    - renderer.py: Parallel fire-and-forget rendering into a shared buffer
    - app.py: Window and event loop

Controls:
    - Left click: Re-center on the clicked point and zoom in 2x
    - R: Reset to default view
    - ESC: Quit
"""

from .compute import (
    BAILOUT,
    MAX_ITERATIONS,
    column_bands,
    escape_time,
    iterations_to_color,
    render_band,
)
from .config import RenderConfig, load_config
from .coords import View, complex_to_pixel, pixel_to_complex
from .errors import ConfigError
from .palette import PALETTES, get_palette, list_palette_names
from .renderer import MandelbrotRenderer, RenderPass

__version__ = "1.0.0"
__all__ = [
    "BAILOUT",
    "MAX_ITERATIONS",
    "PALETTES",
    "ConfigError",
    "MandelbrotRenderer",
    "RenderConfig",
    "RenderPass",
    "View",
    "column_bands",
    "complex_to_pixel",
    "escape_time",
    "get_palette",
    "iterations_to_color",
    "list_palette_names",
    "load_config",
    "pixel_to_complex",
    "render_band",
]
