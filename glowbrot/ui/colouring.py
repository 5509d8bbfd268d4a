import math

import numpy as np
from numba import njit


@njit(nogil=True)
def glow_intensity(iterations, colour_factor):
    # the more iterations a point survived before escaping, the brighter it is
    value = math.sqrt(iterations / colour_factor) * 255.0
    return np.uint8(min(value, 255.0))


def grayscale_to_rgb(lines):
    return np.repeat(lines[..., np.newaxis], 3, axis=-1)
