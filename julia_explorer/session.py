"""
Per-run state of the explorer.

Everything the frame loop mutates lives in a JuliaSession that is passed
explicitly to the renderer and the controls.
"""

from .viewport import Viewport


class JuliaParameters:
    """The Julia constant c = a + bi."""

    def __init__(self, a, b):
        self.a = float(a)
        self.b = float(b)

    @property
    def c(self):
        return complex(self.a, self.b)

    def nudge(self, da=0.0, db=0.0):
        """Shift a and/or b by the given amounts."""
        self.a += da
        self.b += db

    def __repr__(self):
        return f"JuliaParameters(a={self.a!r}, b={self.b!r})"


class JuliaSession:
    """
    State shared by one frame loop.

    Attributes:
        parameters: Current JuliaParameters
        viewport: Current Viewport
        running: False once an exit has been requested
    """

    def __init__(self, parameters, viewport=None):
        self.parameters = parameters
        self.viewport = viewport if viewport is not None else Viewport.default()
        self.running = True
