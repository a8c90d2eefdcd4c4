import unittest

import numpy as np

from julia_explorer.colormaps import color
from julia_explorer.compute import iteration_bound
from julia_explorer.renderer import FrameRenderer
from julia_explorer.session import JuliaParameters, JuliaSession
from julia_explorer.viewport import Viewport


def reference_frame(session, width, height):
    """Pixel-by-pixel rendering in plain Python."""
    view = session.viewport
    c = session.parameters.c
    max_iter = iteration_bound(view.width)
    frame = []
    for idx in range(width * height):
        px, py = idx % width, idx // width
        z = complex(px / width * view.width + view.x,
                    py / height * view.height + view.y)
        count = max_iter
        for i in range(max_iter):
            z = z * z + c
            if z.real * z.real + z.imag * z.imag > 4.0:
                count = i
                break
        frame.append(color(count, max_iter))
    return frame


class Test_frame_renderer(unittest.TestCase):

    def setUp(self):
        self.session = JuliaSession(JuliaParameters(-0.8, 0.156))
        self.renderer = FrameRenderer()

    def test_matches_reference(self):
        buffer = self.renderer.render(self.session, 9, 6)
        self.assertEqual(buffer.dtype, np.uint32)
        self.assertEqual(len(buffer), 54)
        self.assertEqual(buffer.tolist(), reference_frame(self.session, 9, 6))
        self.assertEqual(self.renderer.max_iter, 98)

    def test_non_square_view(self):
        self.session.viewport = Viewport(-1.0, -0.5, 1.5, 0.75)
        buffer = self.renderer.render(self.session, 5, 8)
        self.assertEqual(buffer.tolist(), reference_frame(self.session, 5, 8))
        self.assertEqual(self.renderer.max_iter, iteration_bound(1.5))

    def test_resize_reallocates(self):
        self.renderer.render(self.session, 8, 6)
        buffer = self.renderer.render(self.session, 5, 4)
        self.assertEqual(len(buffer), 20)
        self.assertEqual((self.renderer.width, self.renderer.height), (5, 4))
        self.assertEqual(buffer.tolist(), FrameRenderer().render(self.session, 5, 4).tolist())

    def test_resize_reports_change(self):
        self.assertTrue(self.renderer.resize(3, 3))
        self.assertFalse(self.renderer.resize(3, 3))
        self.assertTrue(self.renderer.resize(3, 4))
        with self.assertRaises(ValueError):
            self.renderer.resize(-1, 3)

    def test_every_pixel_rewritten(self):
        self.renderer.render(self.session, 6, 6)
        self.renderer.buffer[:] = 0xFFFFFFFF
        buffer = self.renderer.render(self.session, 6, 6)
        self.assertTrue(np.all(buffer < (1 << 24)))

    def test_buffer_reused_when_size_unchanged(self):
        first = self.renderer.render(self.session, 4, 4)
        second = self.renderer.render(self.session, 4, 4)
        self.assertIs(first, second)

    def test_reads_current_parameters(self):
        before = self.renderer.render(self.session, 6, 6).copy()
        self.session.parameters.nudge(da=0.3)
        after = self.renderer.render(self.session, 6, 6)
        self.assertEqual(after.tolist(), reference_frame(self.session, 6, 6))
        self.assertNotEqual(before.tolist(), after.tolist())

    def test_empty_surface(self):
        buffer = self.renderer.render(self.session, 0, 0)
        self.assertEqual(len(buffer), 0)
        buffer = self.renderer.render(self.session, 7, 0)
        self.assertEqual(len(buffer), 0)


if __name__ == "__main__":
    unittest.main()
