"""Tests for the presentation window; skipped without a display."""

import tkinter as tk

import numpy as np
import pytest

from glowbrot.ui.tkinter_ui import FractalUI


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    yield root
    root.destroy()


class TestFractalUI:
    def test_draws_buffer_once(self, root):
        pixels = np.zeros((6, 10, 3), dtype=np.uint8)
        pixels[2, 3] = 200
        pixels.setflags(write=False)

        ui = FractalUI(root, pixels, title="test")

        assert root.title() == "test"
        assert ui.image.size == (10, 6)
        assert ui.image.getpixel((3, 2)) == (200, 200, 200)
        assert ui.image_canvas.find_all() == (ui.canvas_image,)
