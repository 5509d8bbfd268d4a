from typing import Sequence

import numpy as np

from glowbrot.mandelbrot.partition import owner_of
from glowbrot.ui.colouring import grayscale_to_rgb
from glowbrot.utils.mandelbrot_utils import RenderError


def assemble(results: Sequence[np.ndarray], height: int, width: int, threads: int) -> np.ndarray:
    """
    Interleave the per-worker row batches back into a (height, width, 3) buffer.

    `results[k]` must hold worker k's lines in the order it computed them. Rows with no
    corresponding line are left black. The returned buffer is read-only.
    """
    if len(results) != threads:
        raise RenderError(f"expected {threads} worker results, got {len(results)}")

    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        worker, line = owner_of(y, threads)
        lines = results[worker]
        # nobody rendered this scanline (uneven partition)
        if line >= lines.shape[0]:
            continue
        if lines.shape[1] != width:
            raise RenderError(f"worker {worker} produced lines of width {lines.shape[1]}, expected {width}")
        pixels[y] = grayscale_to_rgb(lines[line])

    pixels.setflags(write=False)
    return pixels
