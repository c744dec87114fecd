"""
Tests for the public forward_dft / inverse_dft entry points.

Verifies:
1. Concrete transforms ([1, 2, 3, 4], [1, 1, 1], empty input)
2. Agreement with the naive DFT for every length 1..64
3. Round trip and linearity on power-of-two and chirp-z lengths
4. Cyclic convolution and error reporting
"""

import pytest
import numpy as np

import bluestein
from complex_sequence import ComplexSequence, InputTooLarge, InvalidArgument
from dft_harness import log10_rms_error, random_data
from fourier import cyclic_convolve, forward_dft, inverse_dft
from naive_dft import naive_forward_dft


class TestConcreteTransforms:

    def test_power_of_two(self):
        result = forward_dft([1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(result.to_complex(), [10, -2 + 2j, -2, -2 - 2j])

    def test_length_three_goes_through_chirp_z(self):
        result = forward_dft([1.0, 1.0, 1.0])
        np.testing.assert_allclose(result.to_complex(), [3.0, 0.0, 0.0], atol=1e-12)

    def test_empty(self):
        assert len(forward_dft([])) == 0
        assert len(inverse_dft(ComplexSequence.zeros(0))) == 0

    def test_too_large_for_chirp_z(self):
        huge = np.broadcast_to(0.0, (bluestein.MAX_LENGTH + 1,))
        with pytest.raises(InputTooLarge):
            forward_dft(huge)

    def test_mismatched_imaginary_part(self):
        with pytest.raises(InvalidArgument):
            forward_dft([1.0, 2.0, 3.0], [1.0, 2.0])


class TestAgainstNaive:

    @pytest.mark.parametrize("n", range(1, 65))
    def test_forward_log_error(self, n):
        rng = np.random.default_rng(n)
        re = random_data(n, rng)
        im = random_data(n, rng)
        err = log10_rms_error(naive_forward_dft(re, im), forward_dft(re, im))
        assert err < -10.0, f"N={n}: log10 rms error {err:.1f}"

    @pytest.mark.parametrize("n", [3, 127, 255, 1000])
    def test_real_input_log_error(self, n):
        re = random_data(n, np.random.default_rng(n))
        err = log10_rms_error(naive_forward_dft(re), forward_dft(re))
        assert err < -10.0


class TestRoundTrip:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8, 9, 16, 33, 100, 128, 1023, 1024, 1025])
    def test_inverse_of_forward(self, n):
        rng = np.random.default_rng(n)
        re = random_data(n, rng)
        im = random_data(n, rng)
        back = inverse_dft(forward_dft(re, im))
        np.testing.assert_allclose(back.re, re, rtol=1e-9, atol=1e-12)
        np.testing.assert_allclose(back.im, im, rtol=1e-9, atol=1e-12)

    @pytest.mark.parametrize("n", [6, 64])
    def test_forward_of_inverse(self, n):
        rng = np.random.default_rng(n)
        freqs = ComplexSequence(random_data(n, rng), random_data(n, rng))
        signal = inverse_dft(freqs)
        back = forward_dft(signal.re, signal.im)
        np.testing.assert_allclose(back.to_complex(), freqs.to_complex(), atol=1e-12)


class TestLinearity:

    @pytest.mark.parametrize("n", [16, 21])
    def test_linear_combination(self, n):
        rng = np.random.default_rng(n)
        x = random_data(n, rng) + 1j * random_data(n, rng)
        y = random_data(n, rng) + 1j * random_data(n, rng)
        a, b = 2.5, -0.75 + 1.5j

        def dft(z):
            return forward_dft(z.real, z.imag).to_complex()

        np.testing.assert_allclose(dft(a * x + b * y), a * dft(x) + b * dft(y), atol=1e-10)


class TestCyclicConvolve:

    @pytest.mark.parametrize("n", [1, 5, 8, 12])
    def test_matches_direct_sum(self, n):
        rng = np.random.default_rng(n)
        x = ComplexSequence(random_data(n, rng), random_data(n, rng))
        y = ComplexSequence(random_data(n, rng), random_data(n, rng))
        xc, yc = x.to_complex(), y.to_complex()
        expected = np.array([sum(xc[j] * yc[(k - j) % n] for j in range(n)) for k in range(n)])
        np.testing.assert_allclose(cyclic_convolve(x, y).to_complex(), expected, atol=1e-10)

    def test_unit_impulse_is_identity(self):
        x = ComplexSequence([1.0, 2.0, 3.0, 4.0, 5.0])
        delta = ComplexSequence([1.0, 0.0, 0.0, 0.0, 0.0])
        np.testing.assert_allclose(cyclic_convolve(x, delta).re, x.re, atol=1e-12)

    def test_dimension_mismatch(self):
        with pytest.raises(InvalidArgument):
            cyclic_convolve(ComplexSequence.zeros(3), ComplexSequence.zeros(4))
