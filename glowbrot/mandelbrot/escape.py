from typing import NamedTuple

from numba import njit

from glowbrot.utils.constants import BREAKOUT_R2


class EscapeResult(NamedTuple):
    escaped: bool
    iterations: int


@njit(nogil=True)
def escape_time(c_real, c_imag, max_iterations):
    """
    Iterate z -> z^2 + c from z = 0. Returns (True, k) if the k-th iterate is the first one
    outside the escape radius, (False, 0) if the orbit stays bounded for all `max_iterations`.
    """
    z_real = z_imag = 0.0
    for i in range(max_iterations):
        temp = z_real
        z_real = z_real * z_real - z_imag * z_imag + c_real
        z_imag = 2 * temp * z_imag + c_imag

        # |z| > 2 without the square root
        if z_real * z_real + z_imag * z_imag > BREAKOUT_R2:
            return True, i + 1
    return False, 0


def evaluate(c_real: float, c_imag: float, max_iterations: int) -> EscapeResult:
    escaped, iterations = escape_time(float(c_real), float(c_imag), int(max_iterations))
    return EscapeResult(bool(escaped), int(iterations))
