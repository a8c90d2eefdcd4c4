"""
Per-frame Julia set renderer.

The FrameRenderer class handles:
- Ownership of the flat packed-RGB pixel buffer
- Reallocating that buffer whenever the window size changes
- Picking the adaptive iteration bound from the viewport width
- Dispatching the parallel pixel pass (see compute.render_julia)

Rendering is synchronous: render() returns only when every pixel of the
frame has been written. Viewport and parameters are read once at the
start of the frame.
"""

import logging

import numpy as np

from .compute import iteration_bound, render_julia


logger = logging.getLogger(__name__)


class FrameRenderer:
    """
    Renders Julia set frames into a reusable buffer.

    Usage:
        renderer = FrameRenderer()
        buffer = renderer.render(session, width, height)
        presenter.present(buffer, width, height)

    The returned buffer is only valid until the next call to render().

    Attributes:
        width, height: Size of the current buffer in pixels
        buffer: Flat row-major uint32 array of packed 0xRRGGBB colors
        max_iter: Iteration bound used for the last frame
    """

    def __init__(self):
        self.width = 0
        self.height = 0
        self.buffer = np.zeros(0, dtype=np.uint32)
        self.max_iter = None

    def resize(self, width, height):
        """
        Make the buffer match the given size.

        Old contents are discarded on a size change; there is no carry-over
        between sizes.

        Returns:
            True if the buffer was reallocated
        """
        if width < 0 or height < 0:
            raise ValueError(f"invalid surface size {width}x{height}")
        if (width, height) == (self.width, self.height):
            return False
        logger.debug("Resizing buffer %dx%d -> %dx%d",
                     self.width, self.height, width, height)
        self.width = width
        self.height = height
        self.buffer = np.zeros(width * height, dtype=np.uint32)
        return True

    def render(self, session, width, height):
        """
        Render one frame of the session's Julia set.

        Args:
            session: JuliaSession providing viewport and parameters
            width, height: Current surface size in pixels

        Returns:
            The filled pixel buffer (length width * height)
        """
        self.resize(width, height)

        view = session.viewport
        params = session.parameters
        self.max_iter = iteration_bound(view.width)

        if self.buffer.size:
            render_julia(
                self.buffer, self.width, self.height,
                view.x, view.y, view.width, view.height,
                params.a, params.b, self.max_iter
            )
        return self.buffer
