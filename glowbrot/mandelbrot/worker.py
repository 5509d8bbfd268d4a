import numpy as np
from numba import njit

from glowbrot.mandelbrot.escape import escape_time
from glowbrot.mandelbrot.partition import WorkAssignment
from glowbrot.ui.colouring import glow_intensity
from glowbrot.utils.mandelbrot_utils import MandelbrotConfig


@njit(nogil=True)
def compute_rows(rows, width, r_min, i_min, r_step, i_step, max_iterations, colour_factor):
    lines = np.zeros((rows.shape[0], width), dtype=np.uint8)
    for n in range(rows.shape[0]):
        c_imag = rows[n] * i_step + i_min
        for x in range(width):
            c_real = x * r_step + r_min
            escaped, iterations = escape_time(c_real, c_imag, max_iterations)
            if escaped:
                lines[n, x] = glow_intensity(iterations, colour_factor)
    return lines


def compute_assignment(assignment: WorkAssignment, config: MandelbrotConfig, r_step: float, i_step: float):
    viewport = config.viewport
    return compute_rows(
        np.array(assignment.rows, dtype=np.int64),
        viewport.image_width,
        float(viewport.r_min),
        float(viewport.i_min),
        r_step,
        i_step,
        config.budget.max_iterations,
        float(config.budget.colour_factor),
    )
