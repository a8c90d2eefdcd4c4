"""
Julia set computation functions using Numba JIT compilation.

This module contains the performance-critical per-pixel code:
- Escape-time iteration of the quadratic map z <- z² + c
- The adaptive iteration bound derived from the viewport width
- The parallel pixel pass that fills a flat packed-RGB buffer
- Unpacking of that buffer into an RGB image for display

Pixels are independent of each other, so the pixel pass is a plain
data-parallel map: numba splits the rows of the flat buffer across its
worker threads and every pixel writes only its own slot.

fastmath is deliberately not enabled anywhere here; results have to match
plain float64 arithmetic.
"""

import logging
import math

import numpy as np
from numba import jit, prange

from .colormaps import color, split_rgb


logger = logging.getLogger(__name__)

ESCAPE_RADIUS_SQ = 4.0    # |z|² threshold for the quadratic map
BASE_ITERATIONS = 100.0   # Iteration bound when the viewport is 1 unit wide


@jit(nopython=True, cache=True)
def escape_count(point, c, max_iter):
    """
    Count iterations of z <- z² + c until the orbit of `point` escapes.

    Args:
        point: Starting value of z (complex)
        c: Julia parameter (complex)
        max_iter: Maximum number of iterations (non-negative)

    Returns:
        0-based index of the iteration after which |z|² > 4, or max_iter
        if the orbit never escapes.
    """
    zr = point.real
    zi = point.imag
    cr = c.real
    ci = c.imag
    for i in range(max_iter):
        zr, zi = zr * zr - zi * zi + cr, zr * zi + zi * zr + ci
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQ:
            return i
    return max_iter


def iteration_bound(view_width):
    """
    Adaptive maximum iteration count for a viewport of the given width.

    Narrower viewports (deeper zoom) get more iterations. The result is
    never below 1, so it is always safe to divide by. An infinite width
    gets the floor of 1.
    """
    if not view_width > 0:
        raise ValueError(f"viewport width must be positive, got {view_width!r}")
    if math.isinf(view_width):
        return 1
    return max(1, int(BASE_ITERATIONS - math.log2(view_width)))


@jit(nopython=True, parallel=True, cache=True)
def render_julia(out, width, height, x, y, view_width, view_height, cr, ci, max_iter):
    """
    Fill a flat row-major buffer with the colored Julia set.

    Pixel (0, 0) maps to the viewport corner (x, y); pixel (px, py) maps
    to (px/width * view_width + x) + i(py/height * view_height + y).

    Args:
        out: uint32 array of length width * height (modified in place)
        width, height: Buffer dimensions in pixels
        x, y: Viewport origin in the complex plane
        view_width, view_height: Viewport extent
        cr, ci: Real and imaginary parts of the Julia parameter c
        max_iter: Iteration bound for this frame (> 0)
    """
    c = complex(cr, ci)
    image = out.reshape((height, width))
    for py in prange(height):
        im = py / height * view_height + y
        for px in range(width):
            re = px / width * view_width + x
            image[py, px] = color(escape_count(complex(re, im), c, max_iter), max_iter)


@jit(nopython=True, parallel=True, cache=True)
def unpack_rgb(buffer, width, height, out):
    """
    Expand packed 0xRRGGBB values into an RGB image.

    Args:
        buffer: Flat row-major uint32 array of length width * height
        width, height: Image dimensions
        out: Output array (height, width, 3) of uint8 (modified in place)
    """
    image = buffer.reshape((height, width))
    for py in prange(height):
        for px in range(width):
            r, g, b = split_rgb(image[py, px])
            out[py, px, 0] = r
            out[py, px, 1] = g
            out[py, px, 2] = b


def warmup_jit():
    """
    Warm up JIT compilation with a tiny frame.

    Call once at startup so the first real frame isn't delayed by
    compilation.
    """
    logger.debug("Compiling kernels")
    buffer = np.zeros(16, dtype=np.uint32)
    render_julia(buffer, 4, 4, -2.0, -2.0, 4.0, 4.0, 0.0, 0.0, 10)
    rgb = np.empty((4, 4, 3), dtype=np.uint8)
    unpack_rgb(buffer, 4, 4, rgb)
    escape_count(0j, 0j, 1)
    color(0, 1)
