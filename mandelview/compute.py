"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains the performance-critical pieces of a render:
- Smoothed escape-time iteration count for a single point
- Palette lookup with linear interpolation between neighbouring entries
- The per-band kernel that fills a range of columns of the image buffer
- Partitioning of the column range into disjoint bands

The kernels are compiled with nogil=True, so a band kernel running on a
plain Python thread does not hold the GIL and bands render in parallel.
"""

import numpy as np
from numba import jit

from .coords import map_pixel


MAX_ITERATIONS = 500
BAILOUT = 10.0

LOG2 = np.log(2.0)


@jit(nopython=True, nogil=True, cache=True)
def escape_time(c_re, c_im, max_iter=MAX_ITERATIONS, bailout=BAILOUT):
    """
    Smoothed escape-time iteration count for c = c_re + i*c_im.

    Iterates z -> z² + c from z = 0 while |z| <= bailout. Points that
    escape get the renormalized count n + 1 - log2(log|z| / log 2),
    which removes the visible rings between integer counts. Points that
    exhaust the budget return exactly max_iter.

    Returns:
        float in [0, max_iter]. A numerically broken smoothing (NaN or
        infinite input) reports the point as not escaping.
    """
    zr = 0.0
    zi = 0.0
    n = 0
    while np.sqrt(zr * zr + zi * zi) <= bailout and n < max_iter:
        zr, zi = zr * zr - zi * zi + c_re, 2.0 * zr * zi + c_im
        n += 1

    if n >= max_iter:
        return float(max_iter)

    log_zn = np.log(np.sqrt(zr * zr + zi * zi))
    nu = np.log(log_zn / LOG2) / LOG2
    smooth = n + 1 - nu
    if not np.isfinite(smooth):
        return float(max_iter)
    # Only reachable far outside the set (|c| > 16)
    if smooth < 0.0:
        return 0.0
    return smooth


@jit(nopython=True, nogil=True, cache=True)
def iterations_to_color(n, palette, max_iter=MAX_ITERATIONS):
    """
    Map a smoothed iteration count to an (r, g, b) tuple.

    Interpolates between palette[floor(n)] and palette[floor(n) + 1]
    (both wrapping around the palette) by the fractional part of n.
    Channels are truncated, not rounded.
    """
    if n >= max_iter:
        return 0, 0, 0

    size = palette.shape[0]
    base = np.floor(n)
    i = int(base) % size
    j = (int(base) + 1) % size
    t = n - base

    r = int(palette[i, 0] + t * (float(palette[j, 0]) - palette[i, 0]))
    g = int(palette[i, 1] + t * (float(palette[j, 1]) - palette[i, 1]))
    b = int(palette[i, 2] + t * (float(palette[j, 2]) - palette[i, 2]))
    return r, g, b


@jit(nopython=True, nogil=True, cache=True)
def render_band(buffer, x_start, x_end, center_re, center_im, scale,
                max_iter, bailout, palette):
    """
    Fill columns [x_start, x_end) of the image buffer in place.

    Args:
        buffer: (height, width, 3) uint8 array, pixel (x, y) at buffer[y, x]
        x_start, x_end: Column band owned by the caller
        center_re, center_im, scale: The view being rendered
        max_iter: Iteration budget
        bailout: Escape radius
        palette: (N, 3) uint8 array of colors
    """
    height = buffer.shape[0]
    width = buffer.shape[1]
    for x in range(x_start, x_end):
        for y in range(height):
            re, im = map_pixel(x, y, width, height, center_re, center_im, scale)
            n = escape_time(re, im, max_iter, bailout)
            r, g, b = iterations_to_color(n, palette, max_iter)
            buffer[y, x, 0] = r
            buffer[y, x, 1] = g
            buffer[y, x, 2] = b


def column_bands(width, worker_count):
    """
    Split columns [0, width) into worker_count contiguous bands.

    Band k is [k*width // worker_count, (k+1)*width // worker_count).
    Consecutive bands share a boundary, so every column belongs to
    exactly one band. Bands are empty when worker_count > width.
    """
    return [
        (k * width // worker_count, (k + 1) * width // worker_count)
        for k in range(worker_count)
    ]


def warmup_jit(palette):
    """
    Warm up JIT compilation with a tiny dummy buffer.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first real render.
    """
    dummy = np.zeros((4, 4, 3), dtype=np.uint8)
    render_band(dummy, 0, 4, -0.3, 0.0, 2.0, 10, BAILOUT, palette)
