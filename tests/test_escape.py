"""Tests for the escape-time kernel and the glow brightness curve."""

import math

import pytest

from glowbrot.mandelbrot.escape import EscapeResult, escape_time, evaluate
from glowbrot.ui.colouring import glow_intensity


class TestEvaluate:
    def test_origin_is_in_set(self):
        for budget in (1, 2, 50, 1000):
            assert evaluate(0.0, 0.0, budget) == EscapeResult(False, 0)

    def test_two_escapes_on_second_iterate(self):
        # z1 = 2 sits on the radius, z2 = 6 is outside
        assert evaluate(2.0, 0.0, 100) == EscapeResult(True, 2)

    def test_minus_two_never_escapes(self):
        # orbit 0, -2, 2, 2, ... stays on the circle
        assert evaluate(-2.0, 0.0, 500) == EscapeResult(False, 0)

    @pytest.mark.parametrize(
        "c",
        [(2.1, 0.0), (-2.5, 0.0), (0.0, 3.0), (-2.0, -2.0), (1.5, 1.5), (100.0, -100.0)],
    )
    def test_outside_radius_escapes_immediately(self, c):
        result = evaluate(*c, 1000)
        assert result.escaped
        assert result.iterations <= 2

    def test_iterations_bounded_by_budget(self):
        # -0.75 + 0.1i escapes slowly, somewhere after a few dozen iterations
        long_budget = evaluate(-0.75, 0.1, 10000)
        assert long_budget.escaped
        assert 1 < long_budget.iterations <= 10000

        short_budget = evaluate(-0.75, 0.1, long_budget.iterations - 1)
        assert short_budget == EscapeResult(False, 0)

        exact_budget = evaluate(-0.75, 0.1, long_budget.iterations)
        assert exact_budget == long_budget

    def test_integer_arguments_accepted(self):
        assert evaluate(0, 0, 10) == EscapeResult(False, 0)
        assert evaluate(3, 0, 10) == EscapeResult(True, 1)

    def test_kernel_returns_plain_pair(self):
        escaped, iterations = escape_time(0.5, 0.5, 100)
        assert escaped
        assert iterations == evaluate(0.5, 0.5, 100).iterations


class TestGlowIntensity:
    def test_known_values(self):
        assert int(glow_intensity(1, 50.0)) == int(math.sqrt(1 / 50) * 255)
        assert int(glow_intensity(50, 50.0)) == 255

    def test_clamped_to_white(self):
        assert int(glow_intensity(10000, 300.0)) == 255

    def test_monotonic_in_iterations(self):
        values = [int(glow_intensity(k, 300.0)) for k in range(1, 1001)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_escaping_points_are_not_black(self):
        assert int(glow_intensity(1, 300.0)) > 0
