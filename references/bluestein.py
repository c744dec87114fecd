"""
Bluestein (chirp-z) DFT for sequences of any length.

Using jk = (j^2 + k^2 - (k - j)^2) / 2 the DFT becomes

    X_k = conj(c_k) * sum_j (x_j conj(c_j)) * c_{k-j},    c_j = exp(i*pi*j^2/n)

i.e. a chirp pre-multiplication, a convolution with the chirp itself and a
chirp post-multiplication. The convolution is evaluated as a cyclic one of
power-of-two length m >= 2n + 1 with the radix-2 engine.
"""
import numpy as np

import fft_radix2
from complex_sequence import (
    ComplexSequence,
    InputTooLarge,
    InvalidArgument,
    snap,
)

# keeps m = 4 * highest_one_bit(n) and i*i within int64
MAX_LENGTH = 1 << 29


def chirp(n: int):
    """cos and sin of pi * (i^2 mod 2n) / n for i in [0, n)."""
    i = np.arange(n, dtype=np.int64)
    j = (i * i) % (2 * n)
    angle = np.pi * j / n
    return np.cos(angle), np.sin(angle)


def convolution_length(n: int) -> int:
    """Smallest power of two m of the form 4 * 2^k with m >= 2n + 1."""
    return (1 << (n.bit_length() - 1)) * 4


def convolve(x: ComplexSequence, y: ComplexSequence) -> ComplexSequence:
    """Cyclic convolution of two sequences of the same power-of-two length."""
    if len(x) != len(y):
        raise InvalidArgument(f"Unequal dimensions: {len(x)} != {len(y)}")
    fx = fft_radix2.fft(x.re, x.im)
    fy = fft_radix2.fft(y.re, y.im)
    # pointwise product, written into fx's buffers
    x_re = fx.re.copy()
    fx.re[:] = x_re * fy.re - fx.im * fy.im
    fx.im[:] = fx.im * fy.re + x_re * fy.im
    return fft_radix2.ifft(fx)


def forward_dft(real, imag=None) -> ComplexSequence:
    """
    Forward DFT of any length via the chirp-z transform.

    Args:
        real: Real parts of the samples.
        imag: Imaginary parts, or None for real input.

    Raises:
        InputTooLarge: if len(real) >= 2^29.
    """
    n = len(real)
    if n >= MAX_LENGTH:
        raise InputTooLarge(f"array too large: {n}")
    x = np.asarray(real, dtype=np.float64)
    y = np.zeros(n) if imag is None else np.asarray(imag, dtype=np.float64)
    if len(y) != n:
        raise InvalidArgument(f"{n} != {len(y)}")
    if n == 0:
        return ComplexSequence.zeros(0)

    cos, sin = chirp(n)
    m = convolution_length(n)

    a_re = np.zeros(m)
    a_im = np.zeros(m)
    a_re[:n] = x * cos + y * sin
    a_im[:n] = -x * sin + y * cos

    # chirp kernel, wrapped so the cyclic convolution sees c_{k-j} for k < j
    b_re = np.zeros(m)
    b_im = np.zeros(m)
    b_re[:n] = cos
    b_im[:n] = sin
    b_re[m - n + 1:] = cos[:0:-1]
    b_im[m - n + 1:] = sin[:0:-1]

    conv = convolve(ComplexSequence(a_re, a_im, copy=False),
                    ComplexSequence(b_re, b_im, copy=False))
    c_re = conv.re[:n]
    c_im = conv.im[:n]

    re = c_re * cos + c_im * sin
    im = -c_re * sin + c_im * cos
    return ComplexSequence(snap(re), snap(im), copy=False)


def inverse_dft(freqs: ComplexSequence) -> ComplexSequence:
    """
    Inverse DFT of any length.

    Runs the forward transform, scales by 1/n and mirrors the result
    (index i <-> n - i), since IDFT(X)_j = DFT(X)_{-j} / n.
    """
    inv = forward_dft(freqs.re, freqs.im)
    n = len(inv)
    if n == 0:
        return inv
    re = snap(inv.re / n)
    im = snap(inv.im / n)
    mirror = (-np.arange(n)) % n
    return ComplexSequence(re[mirror], im[mirror], copy=False)
