"""
Visible rectangle of the complex plane.

The viewport is always stretched over the whole pixel buffer; there is
no aspect-ratio correction, so a non-square window shows a non-square
pixel grid of the plane.
"""

import logging


logger = logging.getLogger(__name__)

# Default view (x, y, width, height): the square [-2, 2] x [-2, 2]
DEFAULT_VIEW = (-2.0, -2.0, 4.0, 4.0)

# Extents below this are refused by zoom(). At this scale float64 spacing
# near |z| ~ 2 is already only a few ulps per pixel.
MIN_EXTENT = 1e-12

# Extents above this are refused by zoom() so they never overflow to inf.
MAX_EXTENT = 1e300


class Viewport:
    """
    Axis-aligned rectangle of the complex plane mapped onto the window.

    (x, y) is the corner drawn at pixel (0, 0); width and height are the
    extents along the real and imaginary axes. Both extents stay positive.
    """

    def __init__(self, x, y, width, height, min_extent=MIN_EXTENT,
                 max_extent=MAX_EXTENT):
        if not (width > 0 and height > 0):
            raise ValueError(
                f"viewport extents must be positive, got {width!r} x {height!r}"
            )
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.min_extent = min_extent
        self.max_extent = max_extent

    @classmethod
    def default(cls, min_extent=MIN_EXTENT, max_extent=MAX_EXTENT):
        """Viewport showing the whole interesting region around the origin."""
        return cls(*DEFAULT_VIEW, min_extent=min_extent, max_extent=max_extent)

    @property
    def center(self):
        """Center of the rectangle as a complex number."""
        return complex(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def zoom(self, factor, fixed_point):
        """
        Rescale the rectangle by `factor`, keeping `fixed_point` in place.

        factor < 1 zooms in, factor > 1 zooms out. A zoom that would take
        either extent below min_extent or above max_extent leaves the
        viewport unchanged.

        Args:
            factor: Positive scale factor
            fixed_point: Complex point that stays at the same pixel
        """
        if not factor > 0:
            raise ValueError(f"zoom factor must be positive, got {factor!r}")
        new_width = self.width * factor
        new_height = self.height * factor
        if factor < 1 and min(new_width, new_height) < self.min_extent:
            logger.debug("Zoom refused at extent %g x %g", self.width, self.height)
            return
        if factor > 1 and not max(new_width, new_height) <= self.max_extent:
            logger.debug("Zoom refused at extent %g x %g", self.width, self.height)
            return

        fx = fixed_point.real
        fy = fixed_point.imag
        self.x = (self.x - fx) * factor + fx
        self.y = (self.y - fy) * factor + fy
        self.width = new_width
        self.height = new_height

    def pan(self, dx_fraction, dy_fraction, divisor=1.0):
        """
        Move the origin by fractions of the current width and height.

        The offsets are dx_fraction * width / divisor and
        dy_fraction * height / divisor, so pan(-1, 0, 50) moves x by
        exactly -(width / 50).
        """
        self.x += dx_fraction * self.width / divisor
        self.y += dy_fraction * self.height / divisor

    def reset(self):
        """Go back to the default view."""
        self.x, self.y, self.width, self.height = DEFAULT_VIEW

    def __repr__(self):
        return (f"Viewport(x={self.x!r}, y={self.y!r}, "
                f"width={self.width!r}, height={self.height!r})")
