import numpy as np

from complex_sequence import ComplexSequence, snap


def _naive_dft(sign: float, re: np.ndarray, im: np.ndarray, scale: float) -> ComplexSequence:
    """
    Direct O(n^2) evaluation of sum_j x_j exp(sign * 2*pi*i*j*k/n).

    The angles are taken from a table indexed by (k*j) mod n so that large
    k*j products do not lose precision.
    """
    N = len(re)
    angle = sign * 2.0 * np.pi * np.arange(N) / N
    cos = np.cos(angle)
    sin = np.sin(angle)
    j = np.arange(N, dtype=np.int64)

    real = np.zeros(N)
    imag = np.zeros(N)
    for k in range(N):
        idx = (k * j) % N
        c = cos[idx]
        s = sin[idx]
        real[k] = scale * np.sum(c * re - s * im)
        imag[k] = scale * np.sum(s * re + c * im)
    return ComplexSequence(snap(real), snap(imag), copy=False)


def naive_forward_dft(real, imag=None) -> ComplexSequence:
    """Reference forward DFT."""
    re = np.asarray(real, dtype=np.float64)
    im = np.zeros(len(re)) if imag is None else np.asarray(imag, dtype=np.float64)
    return _naive_dft(-1.0, re, im, 1.0)


def naive_inverse_dft(freqs: ComplexSequence) -> ComplexSequence:
    """Reference inverse DFT, scaled by 1/n."""
    n = len(freqs)
    if n == 0:
        return ComplexSequence.zeros(0)
    return _naive_dft(1.0, freqs.re, freqs.im, 1.0 / n)
