import numpy as np
from sympy import nextprime, prevprime

from complex_sequence import ComplexSequence
from fft_radix2 import is_power_of_two
from fourier import forward_dft, inverse_dft
from naive_dft import naive_forward_dft


def random_data(length: int, rng=None) -> np.ndarray:
    """Samples drawn uniformly from [-1, 1)."""
    rng = np.random.default_rng() if rng is None else rng
    return rng.random(length) * 2.0 - 1.0


def rand_length_odd(rng=None, upper: int = 8193) -> int:
    """Random odd length in [3, upper]."""
    rng = np.random.default_rng() if rng is None else rng
    return 2 * int(rng.integers(1, (upper - 1) // 2 + 1)) + 1


def rand_length_even_not_power_of_two(rng=None, upper: int = 8194) -> int:
    """Random even length in [6, upper] that is not a power of two."""
    rng = np.random.default_rng() if rng is None else rng
    while True:
        length = 2 * int(rng.integers(3, upper // 2 + 1))
        if not is_power_of_two(length):
            return length


def rand_length_prime(rng=None, upper: int = 8192) -> int:
    """Random prime length in [3, upper)."""
    rng = np.random.default_rng() if rng is None else rng
    start = int(rng.integers(2, upper - 1))
    p = int(nextprime(start))
    return p if p < upper else int(prevprime(upper))


def log10_rms_error(expected: ComplexSequence, actual: ComplexSequence) -> float:
    """log10 of the root mean square error between two sequences."""
    n = len(expected)
    err = 10.0 ** (-99.0 * 2.0)
    d_re = expected.re - actual.re
    d_im = expected.im - actual.im
    err += float(np.sum(d_re * d_re + d_im * d_im))
    return float(np.log10(np.sqrt(err / max(n, 1))))


def test_forward_dft(N: int, num_tests: int = 1, verbose: bool = False) -> bool:
    """Compare forward_dft against the naive O(n^2) DFT on random complex data."""
    try:
        rng = np.random.default_rng()
        max_log_err = float('-inf')
        for i in range(num_tests):
            re = random_data(N, rng)
            im = random_data(N, rng)
            result = forward_dft(re, im)
            expected = naive_forward_dft(re, im)
            log_err = log10_rms_error(expected, result)
            max_log_err = max(max_log_err, log_err)
            if verbose:
                print(f"  Test {i+1}: N={N}, log10 rms error = {log_err:5.1f}")

        passed = max_log_err < -10.0
        if verbose:
            print(f"Max log err = {max_log_err:.1f}, {'passed' if passed else 'failed'}")
        return passed

    except Exception as e:
        if verbose:
            print(f"Test failed with exception: {e}")
        return False


def test_roundtrip(N: int, num_tests: int = 1, verbose: bool = False) -> bool:
    """Check that inverse_dft(forward_dft(x)) recovers x."""
    try:
        rng = np.random.default_rng()
        for i in range(num_tests):
            re = random_data(N, rng)
            im = random_data(N, rng)
            recovered = inverse_dft(forward_dft(re, im))

            error = float(np.max(np.abs((re + 1j * im) - recovered.to_complex()), initial=0.0))
            if error > 1e-9:
                if verbose:
                    print(f"Test {i+1} failed with error {error}")
                return False
            if verbose:
                print(f"  Test {i+1}: roundtrip error {error:.2e}")

        if verbose:
            print(f"All {num_tests} tests passed")
        return True

    except Exception as e:
        if verbose:
            print(f"Test failed with exception: {e}")
        return False


def test_shift_roundtrip(N: int, verbose: bool = False) -> bool:
    """ifftshift(fftshift(x)) must give back x bit for bit."""
    x = ComplexSequence.zeros(N)
    for i in range(N):
        x.set(i + 1, i + 1.0, -(i + 1.0))
    shifted = x.fftshift()
    restored = shifted.ifftshift()
    if verbose:
        print(f"  input:    {x.re.tolist()}")
        print(f"  shifted:  {shifted.re.tolist()}")
        print(f"  restored: {restored.re.tolist()}")
    return bool(np.array_equal(x.re, restored.re) and np.array_equal(x.im, restored.im))


def benchmark_dft(N: int, num_runs: int = 100, verbose: bool = False) -> float:
    """Average seconds for one forward + inverse transform of length N."""
    import time

    try:
        re = random_data(N)
        im = random_data(N)

        # Warmup
        for _ in range(5):
            inverse_dft(forward_dft(re, im))

        start_time = time.time()
        for _ in range(num_runs):
            inverse_dft(forward_dft(re, im))
        end_time = time.time()

        avg_time = (end_time - start_time) / num_runs

        if verbose:
            print(f"Average time for N={N}: {avg_time*1000:.3f} ms")

        return avg_time

    except Exception as e:
        if verbose:
            print(f"Benchmark failed with exception: {e}")
        return float('inf')
