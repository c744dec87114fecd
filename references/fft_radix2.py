"""
Iterative in-place FFT for lengths 0, 1, 2 and powers of two.

The transform is the usual radix-2 decimation-in-time Cooley-Tukey
recursion

    X_k         = E_k + W^k O_k
    X_{k + n/2} = E_k - W^k O_k,      W = exp(-2*pi*i/n)

where E and O are the DFTs of the even- and odd-indexed samples, unrolled
into loops:

1. A bit-reversal permutation puts every sample where the recursion would
   finally read it, so each length-4 block holds the four samples of one
   innermost sub-problem.
2. The two innermost recursion levels are replaced by a closed-form 4-point
   DFT on each block (four_term_dft).
3. combine_even_odd walks the recursion back up: blocks of size lastN0 are
   merged pairwise into blocks of size 2*lastN0 using the twiddle
   W_SUB_N[log2(2*lastN0)], until one block covers the whole input.

The inverse transform uses the conjugate twiddles and scales by 1/n.
"""
import numpy as np

from complex_sequence import ComplexSequence, InvalidArgument, snap

# W_SUB_N_R[i] is the real part of exp(-2*pi*i/n) for n = 2^i, i.e. cos(2*pi/n).
W_SUB_N_R = tuple(float.fromhex(h) for h in (
    "0x1.0p0", "-0x1.0p0", "0x1.1a62633145c07p-54", "0x1.6a09e667f3bcdp-1",
    "0x1.d906bcf328d46p-1", "0x1.f6297cff75cbp-1", "0x1.fd88da3d12526p-1", "0x1.ff621e3796d7ep-1",
    "0x1.ffd886084cd0dp-1", "0x1.fff62169b92dbp-1", "0x1.fffd8858e8a92p-1", "0x1.ffff621621d02p-1",
    "0x1.ffffd88586ee6p-1", "0x1.fffff62161a34p-1", "0x1.fffffd8858675p-1", "0x1.ffffff621619cp-1",
    "0x1.ffffffd885867p-1", "0x1.fffffff62161ap-1", "0x1.fffffffd88586p-1", "0x1.ffffffff62162p-1",
    "0x1.ffffffffd8858p-1", "0x1.fffffffff6216p-1", "0x1.fffffffffd886p-1", "0x1.ffffffffff621p-1",
    "0x1.ffffffffffd88p-1", "0x1.fffffffffff62p-1", "0x1.fffffffffffd9p-1", "0x1.ffffffffffff6p-1",
    "0x1.ffffffffffffep-1", "0x1.fffffffffffffp-1", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0", "0x1.0p0", "0x1.0p0", "0x1.0p0",
    "0x1.0p0",
))

# W_SUB_N_I[i] is the imaginary part of exp(-2*pi*i/n) for n = 2^i, i.e. -sin(2*pi/n).
W_SUB_N_I = tuple(float.fromhex(h) for h in (
    "0x1.1a62633145c07p-52", "-0x1.1a62633145c07p-53", "-0x1.0p0", "-0x1.6a09e667f3bccp-1",
    "-0x1.87de2a6aea963p-2", "-0x1.8f8b83c69a60ap-3", "-0x1.917a6bc29b42cp-4", "-0x1.91f65f10dd814p-5",
    "-0x1.92155f7a3667ep-6", "-0x1.921d1fcdec784p-7", "-0x1.921f0fe670071p-8", "-0x1.921f8becca4bap-9",
    "-0x1.921faaee6472dp-10", "-0x1.921fb2aecb36p-11", "-0x1.921fb49ee4ea6p-12", "-0x1.921fb51aeb57bp-13",
    "-0x1.921fb539ecf31p-14", "-0x1.921fb541ad59ep-15", "-0x1.921fb5439d73ap-16", "-0x1.921fb544197ap-17",
    "-0x1.921fb544387bap-18", "-0x1.921fb544403c1p-19", "-0x1.921fb544422c2p-20", "-0x1.921fb54442a83p-21",
    "-0x1.921fb54442c73p-22", "-0x1.921fb54442cefp-23", "-0x1.921fb54442d0ep-24", "-0x1.921fb54442d15p-25",
    "-0x1.921fb54442d17p-26", "-0x1.921fb54442d18p-27", "-0x1.921fb54442d18p-28", "-0x1.921fb54442d18p-29",
    "-0x1.921fb54442d18p-30", "-0x1.921fb54442d18p-31", "-0x1.921fb54442d18p-32", "-0x1.921fb54442d18p-33",
    "-0x1.921fb54442d18p-34", "-0x1.921fb54442d18p-35", "-0x1.921fb54442d18p-36", "-0x1.921fb54442d18p-37",
    "-0x1.921fb54442d18p-38", "-0x1.921fb54442d18p-39", "-0x1.921fb54442d18p-40", "-0x1.921fb54442d18p-41",
    "-0x1.921fb54442d18p-42", "-0x1.921fb54442d18p-43", "-0x1.921fb54442d18p-44", "-0x1.921fb54442d18p-45",
    "-0x1.921fb54442d18p-46", "-0x1.921fb54442d18p-47", "-0x1.921fb54442d18p-48", "-0x1.921fb54442d18p-49",
    "-0x1.921fb54442d18p-50", "-0x1.921fb54442d18p-51", "-0x1.921fb54442d18p-52", "-0x1.921fb54442d18p-53",
    "-0x1.921fb54442d18p-54", "-0x1.921fb54442d18p-55", "-0x1.921fb54442d18p-56", "-0x1.921fb54442d18p-57",
    "-0x1.921fb54442d18p-58",
))


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def _check_length(n: int):
    if n > 2 and not is_power_of_two(n):
        raise InvalidArgument(f"FFT size must be 0, 1, 2 or a power of 2. Given: {n}")


def bit_reversal_shuffle(a: np.ndarray, b: np.ndarray = None):
    """
    Swap every element with the element at its bit-reversed index, in place.

    For length 16, index 0011 (3) is swapped with 1100 (12). j tracks the
    bit reversal of i and is advanced by a reversed-binary increment, so no
    index is reversed from scratch. The same swaps are applied to b if given.
    """
    n = len(a)
    half = n >> 1
    j = 0
    for i in range(n):
        if i < j:
            a[i], a[j] = a[j], a[i]
            if b is not None:
                b[i], b[j] = b[j], b[i]
        k = half
        while 0 < k <= j:
            j -= k
            k >>= 1
        j += k


def four_term_dft(re: np.ndarray, im: np.ndarray, inverse: bool = False):
    """4-point DFT on each consecutive block of 4 bit-reversed samples, in place."""
    block_re = re.reshape(-1, 4)
    block_im = im.reshape(-1, 4)
    # after the bit-reversal shuffle a block holds x_0, x_2, x_1, x_3
    r0, r2, r1, r3 = (block_re[:, c].copy() for c in range(4))
    i0, i2, i1, i3 = (block_im[:, c].copy() for c in range(4))

    # X_0 = x_0 + x_1 + x_2 + x_3
    block_re[:, 0] = r0 + r1 + r2 + r3
    block_im[:, 0] = i0 + i1 + i2 + i3
    # X_2 = x_0 - x_1 + x_2 - x_3
    block_re[:, 2] = r0 - r1 + r2 - r3
    block_im[:, 2] = i0 - i1 + i2 - i3
    if inverse:
        # X_1 = x_0 - x_2 + j * (x_1 - x_3)
        block_re[:, 1] = r0 - r2 + (i3 - i1)
        block_im[:, 1] = i0 - i2 + (r1 - r3)
        # X_3 = x_0 - x_2 + j * (x_3 - x_1)
        block_re[:, 3] = r0 - r2 + (i1 - i3)
        block_im[:, 3] = i0 - i2 + (r3 - r1)
    else:
        # X_1 = x_0 - x_2 - j * (x_1 - x_3)
        block_re[:, 1] = r0 - r2 + (i1 - i3)
        block_im[:, 1] = i0 - i2 + (r3 - r1)
        # X_3 = x_0 - x_2 - j * (x_3 - x_1)
        block_re[:, 3] = r0 - r2 + (i3 - i1)
        block_im[:, 3] = i0 - i2 + (r1 - r3)


def _twiddle_powers(w_re: float, w_im: float, count: int):
    """W^0 .. W^(count-1) by repeated multiplication, starting from W^0 = 1."""
    pow_re = np.empty(count)
    pow_im = np.empty(count)
    cur_re, cur_im = 1.0, 0.0
    for r in range(count):
        pow_re[r] = cur_re
        pow_im[r] = cur_im
        cur_re, cur_im = cur_re * w_re - cur_im * w_im, cur_re * w_im + cur_im * w_re
    return pow_re, pow_im


def combine_even_odd(re: np.ndarray, im: np.ndarray, inverse: bool = False):
    """
    Merge transformed blocks pairwise until a single block spans the input.

    Each pass turns even/odd transforms G, H of size lastN0 into one
    transform of size n0 = 2*lastN0:

        dest[even + r] = G_r + W^r H_r
        dest[odd + r]  = G_r - W^r H_r,    r = 0 .. lastN0-1
    """
    n = len(re)
    last_n0 = 4
    last_log_n0 = 2
    while last_n0 < n:
        n0 = last_n0 << 1
        log_n0 = last_log_n0 + 1
        w_re = W_SUB_N_R[log_n0]
        w_im = -W_SUB_N_I[log_n0] if inverse else W_SUB_N_I[log_n0]
        tw_re, tw_im = _twiddle_powers(w_re, w_im, last_n0)

        # axis 1 selects the even (0) or odd (1) half of each destination block
        blocks_re = re.reshape(-1, 2, last_n0)
        blocks_im = im.reshape(-1, 2, last_n0)
        g_re = blocks_re[:, 0, :].copy()
        g_im = blocks_im[:, 0, :].copy()
        h_re = blocks_re[:, 1, :]
        h_im = blocks_im[:, 1, :]
        t_re = tw_re * h_re - tw_im * h_im
        t_im = tw_re * h_im + tw_im * h_re

        blocks_re[:, 0, :] = g_re + t_re
        blocks_im[:, 0, :] = g_im + t_im
        blocks_re[:, 1, :] = g_re - t_re
        blocks_im[:, 1, :] = g_im - t_im

        last_n0 = n0
        last_log_n0 = log_n0


def post_process(re: np.ndarray, im: np.ndarray, normalize: bool = False):
    if normalize:
        scale = 1.0 / len(re)
        re *= scale
        im *= scale
    snap(re)
    snap(im)


def _transform(re: np.ndarray, im: np.ndarray, inverse: bool) -> ComplexSequence:
    bit_reversal_shuffle(re, im)
    four_term_dft(re, im, inverse)
    combine_even_odd(re, im, inverse)
    post_process(re, im, normalize=inverse)
    return ComplexSequence(re, im, copy=False)


def fft(real, imag=None) -> ComplexSequence:
    """
    Forward DFT, X_k = sum_j x_j exp(-2*pi*i*j*k/n).

    Args:
        real: Real parts of the samples.
        imag: Imaginary parts, or None for real input.

    Returns:
        A new ComplexSequence; the inputs are not modified.

    Raises:
        InvalidArgument: if the length is not 0, 1, 2 or a power of two.
    """
    data_re = np.array(real, dtype=np.float64)
    if imag is None:
        data_im = np.zeros(len(data_re))
    else:
        data_im = np.array(imag, dtype=np.float64)
    if len(data_re) != len(data_im):
        raise InvalidArgument(f"{len(data_re)} != {len(data_im)}")
    n = len(data_re)
    _check_length(n)

    if n <= 1:
        return ComplexSequence(data_re, data_im, copy=False)
    if n == 2:
        r0, i0 = data_re[0], data_im[0]
        # X_0 = x_0 + x_1, X_1 = x_0 - x_1
        data_re[0] = r0 + data_re[1]
        data_re[1] = r0 - data_re[1]
        data_im[0] = i0 + data_im[1]
        data_im[1] = i0 - data_im[1]
        return ComplexSequence(data_re, data_im, copy=False)
    return _transform(data_re, data_im, inverse=False)


def ifft(freqs: ComplexSequence) -> ComplexSequence:
    """Inverse DFT, x_j = (1/n) sum_k X_k exp(+2*pi*i*j*k/n)."""
    n = len(freqs)
    _check_length(n)
    data_re = freqs.re.copy()
    data_im = freqs.im.copy()

    if n <= 1:
        return ComplexSequence(data_re, data_im, copy=False)
    if n == 2:
        r0, i0 = data_re[0], data_im[0]
        r1, i1 = data_re[1], data_im[1]
        data_re[0] = (r0 + r1) * 0.5
        data_im[0] = (i0 + i1) * 0.5
        data_re[1] = (r0 - r1) * 0.5
        data_im[1] = (i0 - i1) * 0.5
        return ComplexSequence(data_re, data_im, copy=False)
    return _transform(data_re, data_im, inverse=True)
