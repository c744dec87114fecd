"""
Public DFT entry points.

Lengths 0, 1, 2 and powers of two are transformed directly by the radix-2
engine; every other length goes through the chirp-z transform.
"""
import bluestein
import fft_radix2
from complex_sequence import ComplexSequence, InvalidArgument, elementwise_product


def _radix2_length(n: int) -> bool:
    return n <= 2 or fft_radix2.is_power_of_two(n)


def forward_dft(real, imag=None) -> ComplexSequence:
    """
    Forward DFT of a real or complex sequence of any length.

    Args:
        real: Real parts of the samples.
        imag: Imaginary parts, or None for real input.

    Returns:
        A new ComplexSequence holding X_k = sum_j x_j exp(-2*pi*i*j*k/n).
    """
    if imag is not None and len(imag) != len(real):
        raise InvalidArgument(f"{len(real)} != {len(imag)}")
    if _radix2_length(len(real)):
        return fft_radix2.fft(real, imag)
    return bluestein.forward_dft(real, imag)


def inverse_dft(freqs: ComplexSequence) -> ComplexSequence:
    """Inverse DFT, x_j = (1/n) sum_k X_k exp(+2*pi*i*j*k/n)."""
    if _radix2_length(len(freqs)):
        return fft_radix2.ifft(freqs)
    return bluestein.inverse_dft(freqs)


def cyclic_convolve(x: ComplexSequence, y: ComplexSequence) -> ComplexSequence:
    """
    Cyclic convolution z_k = sum_j x_j y_{(k - j) mod n} of two sequences
    of the same, arbitrary length.
    """
    if len(x) != len(y):
        raise InvalidArgument(f"Unequal dimensions: {len(x)} != {len(y)}")
    fx = forward_dft(x.re, x.im)
    fy = forward_dft(y.re, y.im)
    return inverse_dft(elementwise_product(fx, fy))
