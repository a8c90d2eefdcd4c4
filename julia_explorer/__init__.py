"""
Julia Set Explorer Package

An interactive Julia set explorer using Pygame for display and Numba
for JIT-compiled, multi-threaded computation.

Quick Start:
    from julia_explorer import run
    run(-0.8, 0.156)

Or from command line:
    python -m julia_explorer

Package Structure:
    - compute.py: JIT-compiled escape-time iteration and pixel pass
    - colormaps.py: Periodic palette for escape counts
    - viewport.py: Visible rectangle of the complex plane
    - session.py: Julia parameters and per-run state
    - renderer.py: Per-frame rendering into a packed-RGB buffer
    - controls.py: Keyboard reactions
    - presenter.py: Pygame window
    - settings.py: Settings file loading
    - app.py: Main application, frame loop and CLI

Controls:
    - Arrow keys: Pan
    - Z / X: Zoom in / out
    - H / J: Decrease / increase a
    - K / L: Decrease / increase b
    - R: Reset to default view
    - ESC: Quit
"""

from .app import run, main, JuliaApp
from .renderer import FrameRenderer
from .viewport import Viewport
from .session import JuliaParameters, JuliaSession
from .colormaps import color
from .compute import escape_count, iteration_bound

__version__ = "1.0.0"
__all__ = [
    "run",
    "main",
    "JuliaApp",
    "FrameRenderer",
    "Viewport",
    "JuliaParameters",
    "JuliaSession",
    "color",
    "escape_count",
    "iteration_bound",
]
