"""
Palette definitions for Mandelbrot coloring.

A palette is a small cyclic table of RGB colors (numpy array of shape
(N, 3), uint8). The smoothed iteration count walks around the table and
interpolates linearly between neighbouring entries, so even a 16-entry
palette gives continuous bands.

To add a new palette:
1. Define a create_palette_xxx() function that returns the color array
2. Add it to the PALETTES dictionary at the bottom of this file
"""

import numpy as np


PALETTE_SIZE = 16

# Color of points that never escape
INSIDE_COLOR = (0, 0, 0)


def _freeze(colors):
    colors = np.asarray(colors, dtype=np.uint8)
    colors.setflags(write=False)
    return colors


def create_palette_classic():
    """
    Classic palette: dark brown -> navy -> sky blue -> pale yellow -> orange.

    The widely used 16-step "Ultra Fractal" style gradient.
    """
    return _freeze([
        (66, 30, 15),
        (25, 7, 26),
        (9, 1, 47),
        (4, 4, 73),
        (0, 7, 100),
        (12, 44, 138),
        (24, 82, 177),
        (57, 125, 209),
        (134, 181, 229),
        (211, 236, 248),
        (241, 233, 191),
        (248, 201, 95),
        (255, 170, 0),
        (204, 128, 0),
        (153, 87, 0),
        (106, 52, 3),
    ])


def create_palette_grayscale():
    """
    Grayscale palette: dark gray up to white and back down.

    Symmetric so the wrap-around between the last and first entry
    does not produce a hard edge.
    """
    half = PALETTE_SIZE // 2
    levels = [int(32 + 223 * i / (half - 1)) for i in range(half)]
    levels = levels + levels[::-1]
    return _freeze([(v, v, v) for v in levels])


# Registry of all available palettes.
# Keys are names accepted by the "palette" setting.
PALETTES = {
    'Classic': create_palette_classic,
    'Grayscale': create_palette_grayscale,
}


def get_palette(name):
    """
    Get a palette by name.

    Raises:
        KeyError if name not found
    """
    return PALETTES[name]()


def get_default_palette():
    """Get the default palette (Classic)."""
    return create_palette_classic()


def list_palette_names():
    """Get list of available palette names."""
    return list(PALETTES.keys())
