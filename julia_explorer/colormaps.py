"""
Color mapping for Julia set visualization.

Iteration counts are turned into packed 24-bit RGB integers (0xRRGGBB)
using a fixed periodic palette. Each channel is the same linear intensity
shifted by a phase offset and wrapped modulo 255, which gives a smooth
cyclic gradient.

The offsets and the modulus (255, not 256) are part of the look of the
images and must not be changed.
"""

from numba import jit


PALETTE_MODULUS = 255
RED_OFFSET = 0
GREEN_OFFSET = 80
BLUE_OFFSET = 160


@jit(nopython=True, cache=True)
def color(count, max_iter):
    """
    Map an escape count to a packed RGB color.

    Args:
        count: Escape count in [0, max_iter]
        max_iter: Iteration bound used for the count (must be > 0)

    Returns:
        Packed color red << 16 | green << 8 | blue
    """
    x = int(255.0 * (count / max_iter))
    r = (x + RED_OFFSET) % PALETTE_MODULUS
    g = (x + GREEN_OFFSET) % PALETTE_MODULUS
    b = (x + BLUE_OFFSET) % PALETTE_MODULUS
    return (r << 16) | (g << 8) | b


@jit(nopython=True, cache=True)
def split_rgb(packed):
    """Split a packed 0xRRGGBB color into (r, g, b)."""
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF
