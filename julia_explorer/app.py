"""
Main application module for the Julia set explorer.

Contains the JuliaApp class which handles:
- The frame loop (render, react to keys, present)
- Window caption updates
- Startup prompts and the command line interface
"""

import argparse
import logging
import sys

from .compute import warmup_jit
from .controls import apply_keys
from .presenter import PresentationError, PresenterError, PygamePresenter
from .renderer import FrameRenderer
from .session import JuliaParameters, JuliaSession
from .settings import load_settings


logger = logging.getLogger(__name__)

BANNER = (
    "This program draws Julia sets, which are parameterized by two variables.\n"
    "Enter them below to start, and use hjkl to modify them while the program is running.\n"
    "Use the arrow keys to pan, and z and x to zoom in and out."
)


class JuliaApp:
    """
    Main application class for the Julia explorer.

    Drives one frame at a time: the renderer fills its buffer from the
    session as it was at the start of the frame, key reactions are then
    applied for the next frame, and the buffer is handed to the presenter.
    """

    def __init__(self, parameters, presenter, renderer=None, title="Julia Sets"):
        """
        Initialize the application.

        Args:
            parameters: Initial JuliaParameters
            presenter: Window implementation (see presenter.PygamePresenter)
            renderer: FrameRenderer to use (default: a new one)
            title: Base window caption
        """
        self.session = JuliaSession(parameters)
        self.presenter = presenter
        self.renderer = renderer or FrameRenderer()
        self.title = title
        self._caption = None

    def run(self):
        """Run the application main loop until exit or window close."""
        warmup_jit()
        self.presenter.open()
        try:
            while self.session.running and self.presenter.is_open():
                self.step()
        finally:
            self.presenter.close()

    def step(self):
        """Render, react to input and present exactly one frame."""
        width, height = self.presenter.size()
        buffer = self.renderer.render(self.session, width, height)
        self._update_caption()

        apply_keys(self.session, self.presenter.pressed_keys())

        self.presenter.present(buffer, width, height)

    def _update_caption(self):
        params = self.session.parameters
        caption = (f"{self.title} - c = {params.a:.2f} {params.b:+.2f}i, "
                   f"{self.renderer.max_iter} iterations")
        if caption != self._caption:
            self._caption = caption
            self.presenter.set_title(caption)


def prompt_parameter(name, input_fn=input):
    """
    Ask for a real-valued parameter on the console.

    Raises:
        SystemExit: the input is not a number or stdin is closed
    """
    try:
        text = input_fn(f"Enter parameter {name}: ")
    except EOFError:
        raise SystemExit(f"Invalid input for parameter {name}: no input")
    try:
        return float(text.strip())
    except ValueError:
        raise SystemExit(f"Invalid input for parameter {name}: {text.strip()!r}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="julia-explorer",
        description="Interactive Julia set explorer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-a", "--a",
        type=float,
        default=None,
        help="real part of c (prompted for if omitted)",
    )
    parser.add_argument(
        "-b", "--b",
        type=float,
        default=None,
        help="imaginary part of c (prompted for if omitted)",
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="initial window size in pixels (default from settings)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="frame rate limit (default from settings)",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="settings JSON file to use instead of the packaged one",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug messages",
    )
    return parser.parse_args(argv)


def main(argv=None, input_fn=input):
    """Command line entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.settings)
    window = settings['window']

    print(BANNER)
    a = args.a if args.a is not None else prompt_parameter("a", input_fn)
    b = args.b if args.b is not None else prompt_parameter("b", input_fn)

    width, height = args.size or (window['width'], window['height'])
    presenter = PygamePresenter(
        width, height,
        title=window['title'],
        fps=args.fps or window['fps'],
        key_bindings=settings['keys'],
    )
    app = JuliaApp(JuliaParameters(a, b), presenter, title=window['title'])
    try:
        app.run()
    except KeyboardInterrupt:
        pass
    except (PresenterError, PresentationError) as e:
        logger.error("%s", e)
        sys.exit(1)


def run(a, b, width=800, height=800):
    """
    Run the explorer without prompting.

    Args:
        a, b: Julia parameter c = a + bi
        width, height: Initial window size
    """
    app = JuliaApp(JuliaParameters(a, b), PygamePresenter(width, height))
    try:
        app.run()
    except KeyboardInterrupt:
        pass
