"""
Pygame window for the Julia explorer.

PygamePresenter owns the window. Every frame it reports the current
surface size and the held keys (as logical names from controls), and it
displays a finished packed-RGB buffer. It never keeps a reference to a
buffer after present() returns.
"""

import logging

import numpy as np
import pygame

from .compute import unpack_rgb
from .settings import DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


class PresenterError(RuntimeError):
    """The window could not be created."""


class PresentationError(RuntimeError):
    """A buffer could not be displayed (size mismatch with the surface)."""


class PygamePresenter:
    """
    Resizable pygame window that displays packed 0xRRGGBB buffers.

    Attributes:
        title: Initial window caption
        fps: Frame-rate limit applied in present()
        key_bindings: Dict mapping logical key names to lists of pygame
            key names (e.g. {'zoom_in': ['z']})
    """

    def __init__(self, width=800, height=800, title="Julia Sets", fps=60,
                 key_bindings=None):
        self.initial_size = (width, height)
        self.title = title
        self.fps = fps
        self.key_bindings = key_bindings or DEFAULT_SETTINGS['keys']

        self.screen = None
        self.clock = None
        self.closed = False
        self._keycodes = {}
        self._rgb = None

    def open(self):
        """Initialize pygame and create the window."""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(self.initial_size, pygame.RESIZABLE)
        except pygame.error as e:
            raise PresenterError(f"Unable to create window: {e}") from e
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()
        self._keycodes = self._resolve_bindings(self.key_bindings)
        self.closed = False
        logger.debug("Opened %dx%d window", *self.initial_size)

    @staticmethod
    def _resolve_bindings(bindings):
        keycodes = {}
        for name, key_names in bindings.items():
            codes = []
            for key_name in key_names:
                try:
                    codes.append(pygame.key.key_code(key_name))
                except ValueError as e:
                    raise PresenterError(
                        f"Unknown key {key_name!r} bound to {name!r}"
                    ) from e
            keycodes[name] = codes
        return keycodes

    def size(self):
        """Current surface size (width, height) in pixels."""
        return pygame.display.get_surface().get_size()

    def is_open(self):
        """Process window events; False once the window has been closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
        return not self.closed

    def pressed_keys(self):
        """Set of logical key names currently held down."""
        state = pygame.key.get_pressed()
        return {
            name for name, codes in self._keycodes.items()
            if any(state[code] for code in codes)
        }

    def is_key_down(self, name):
        """True if any key bound to the logical name `name` is held."""
        return name in self.pressed_keys()

    def set_title(self, text):
        pygame.display.set_caption(text)

    def present(self, buffer, width, height):
        """
        Display a frame and wait for the frame-rate limit.

        The buffer is drawn unscaled at the top-left corner.

        Args:
            buffer: Flat row-major uint32 array of packed colors
            width, height: Dimensions the buffer was rendered at

        Raises:
            PresentationError: buffer length or size doesn't match the surface
        """
        if len(buffer) != width * height:
            raise PresentationError(
                f"buffer has {len(buffer)} pixels, expected {width}x{height}"
            )
        self.screen = pygame.display.get_surface()
        surface_size = self.screen.get_size()
        if surface_size != (width, height):
            raise PresentationError(
                f"buffer is {width}x{height} but surface is "
                f"{surface_size[0]}x{surface_size[1]}"
            )

        if width and height:
            if self._rgb is None or self._rgb.shape[:2] != (height, width):
                self._rgb = np.empty((height, width, 3), dtype=np.uint8)
            unpack_rgb(buffer, width, height, self._rgb)
            frame = pygame.surfarray.make_surface(self._rgb.swapaxes(0, 1))
            self.screen.blit(frame, (0, 0))

        pygame.display.flip()
        self.clock.tick(self.fps)

    def close(self):
        pygame.quit()
