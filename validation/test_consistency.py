"""
Cross-mode consistency.

Ground truth: the three integration modes applied to the same function.

- Uniform samples at 2n + 1 points reproduce the callable form with n
  sub-intervals (same evaluation points, same weights)
- Uniform samples at n + 1 points approach the callable form with n
- Evenly spaced x through the non-uniform path equals the uniform path,
  including the even-count tail
"""
import numpy as np
import pytest

from libintegrate import simpson, simpson_samples, simpson_uniform


class TestCallableVsUniform:

    def test_same_points_same_result(self, smooth_cases):
        n = 16
        for f, _, a, b in smooth_cases:
            x = np.linspace(a, b, 2 * n + 1)
            ours = simpson_uniform(f(x), (b - a) / (2 * n))
            assert ours == pytest.approx(simpson(f, a, b, n), rel=1e-12)

    def test_coarser_samples_close(self, smooth_cases):
        n = 64
        for f, F, a, b in smooth_cases:
            x = np.linspace(a, b, n + 1)
            sampled = simpson_uniform(f(x), (b - a) / n)
            continuous = simpson(f, a, b, n)
            assert sampled == pytest.approx(continuous, abs=1e-5)
            assert continuous == pytest.approx(F(b) - F(a), abs=1e-7)


class TestUniformVsNonUniform:

    @pytest.mark.parametrize("n_points", [3, 4, 7, 8, 50, 51])
    def test_even_spacing(self, n_points):
        x = np.linspace(-1.0, 2.0, n_points)
        y = np.cosh(x) - x ** 3
        dx = x[1] - x[0]
        assert simpson_samples(x, y) == pytest.approx(simpson_uniform(y, dx), rel=1e-12)

    def test_tail_terms_agree(self):
        """Both tail constructions give (-y0 + 6 y1 + 3 y2) / 8 at the midpoint."""
        dx = 0.2
        x = np.array([0.0, dx, 2 * dx, 3 * dx])
        y = np.array([1.0, -2.0, 0.5, 3.0])
        head = simpson_uniform(y[:3], dx)
        uniform_tail = simpson_uniform(y, dx) - head
        samples_tail = simpson_samples(x, y) - simpson_samples(x[:3], y[:3])
        ym = (-y[1] + 6 * y[2] + 3 * y[3]) / 8
        expected = dx / 6 * (y[2] + 4 * ym + y[3])
        assert uniform_tail == pytest.approx(expected, rel=1e-12)
        assert samples_tail == pytest.approx(expected, rel=1e-12)


class TestParity:

    @pytest.mark.parametrize("n_points", [40, 41])
    def test_smooth_function_either_parity(self, smooth_cases, n_points):
        for f, F, a, b in smooth_cases:
            x = np.linspace(a, b, n_points)
            exact = F(b) - F(a)
            assert simpson_uniform(f(x), x[1] - x[0]) == pytest.approx(exact, rel=1e-4, abs=1e-6)
            assert simpson_samples(x, f(x)) == pytest.approx(exact, rel=1e-4, abs=1e-6)
