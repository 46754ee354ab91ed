"""
Mapping between screen pixels and the complex plane.

A View is a center point in the complex plane plus a scale in pixels per
unit. Pixel (0, 0) is the top-left corner of the viewport and the view
center sits at pixel (width/2, height/2).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from numba import jit

from .errors import ConfigError


@dataclass(frozen=True)
class View:
    """Center and zoom level of the rendered region."""

    center: complex = complex(-0.3, 0.0)
    scale: float = 275.0

    def __post_init__(self):
        object.__setattr__(self, 'center', complex(self.center))
        object.__setattr__(self, 'scale', float(self.scale))
        if not (math.isfinite(self.center.real) and math.isfinite(self.center.imag)):
            raise ConfigError(f"view center must be finite, got {self.center!r}")
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ConfigError(f"view scale must be a positive number, got {self.scale!r}")

    def zoom_at(self, x: float, y: float, width: int, height: int, factor: float = 2.0) -> View:
        """
        Return the view re-centered on pixel (x, y) and zoomed by factor.

        The new center is mapped under the current scale; only then does
        the scale change.
        """
        center = pixel_to_complex(x, y, self, width, height)
        return View(center=center, scale=self.scale * factor)


@jit(nopython=True, nogil=True, cache=True)
def map_pixel(x, y, width, height, center_re, center_im, scale):
    """Pixel to complex plane as a (re, im) pair, usable from jitted code."""
    re = (x - width / 2.0 + scale * center_re) / scale
    im = (y - height / 2.0 + scale * center_im) / scale
    return re, im


def pixel_to_complex(x: float, y: float, view: View, width: int, height: int) -> complex:
    re, im = map_pixel(float(x), float(y), width, height,
                       view.center.real, view.center.imag, float(view.scale))
    return complex(re, im)


def complex_to_pixel(c: complex, view: View, width: int, height: int) -> tuple[float, float]:
    """Inverse of pixel_to_complex; the result may be fractional or off-screen."""
    x = c.real * view.scale - view.scale * view.center.real + width / 2.0
    y = c.imag * view.scale - view.scale * view.center.imag + height / 2.0
    return x, y
