import math

import pytest
import numpy as np
from sympy import isprime

import dft_harness
from complex_sequence import ComplexSequence
from fft_radix2 import is_power_of_two


class TestRandomData:

    def test_range(self):
        data = dft_harness.random_data(1000, np.random.default_rng(0))
        assert data.shape == (1000,)
        assert data.min() >= -1.0 and data.max() < 1.0

    def test_odd_lengths(self):
        rng = np.random.default_rng(1)
        for _ in range(200):
            n = dft_harness.rand_length_odd(rng)
            assert n % 2 == 1 and 3 <= n <= 8193

    def test_even_lengths_not_power_of_two(self):
        rng = np.random.default_rng(2)
        for _ in range(200):
            n = dft_harness.rand_length_even_not_power_of_two(rng)
            assert n % 2 == 0 and 6 <= n <= 8194
            assert not is_power_of_two(n)

    def test_prime_lengths(self):
        rng = np.random.default_rng(3)
        for _ in range(50):
            n = dft_harness.rand_length_prime(rng, upper=500)
            assert isprime(n) and 3 <= n < 500


class TestLogRmsError:

    def test_identical_sequences(self):
        seq = ComplexSequence([1.0], [3.0])
        assert dft_harness.log10_rms_error(seq, seq) == pytest.approx(-99.0)

    def test_known_error(self):
        expected = ComplexSequence([0.0, 0.0, 0.0, 0.0])
        actual = ComplexSequence([1e-3, 1e-3, 1e-3, 1e-3])
        assert dft_harness.log10_rms_error(expected, actual) == pytest.approx(-3.0)

    def test_empty(self):
        empty = ComplexSequence.zeros(0)
        assert math.isfinite(dft_harness.log10_rms_error(empty, empty))


class TestChecks:

    @pytest.mark.parametrize("n", [0, 1, 4, 12, 17, 64])
    def test_forward_dft(self, n):
        assert dft_harness.test_forward_dft(n, num_tests=2)

    @pytest.mark.parametrize("n", [1, 7, 32, 100])
    def test_roundtrip(self, n):
        assert dft_harness.test_roundtrip(n, num_tests=2)

    @pytest.mark.parametrize("n", [0, 1, 6, 7])
    def test_shift_roundtrip(self, n):
        assert dft_harness.test_shift_roundtrip(n)

    def test_verbose_output(self, capsys):
        assert dft_harness.test_forward_dft(5, num_tests=1, verbose=True)
        out = capsys.readouterr().out
        assert "log10 rms error" in out
        assert "passed" in out

    def test_failure_is_reported_not_raised(self, capsys):
        assert dft_harness.test_forward_dft(-1, verbose=True) is False
        assert "exception" in capsys.readouterr().out

    def test_benchmark(self):
        avg = dft_harness.benchmark_dft(16, num_runs=2)
        assert 0.0 <= avg < float('inf')

    def test_benchmark_failure(self):
        assert dft_harness.benchmark_dft(-1, num_runs=1) == float('inf')
