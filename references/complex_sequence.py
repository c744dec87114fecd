import numpy as np

# IEEE 754 machine epsilon (2^-53)
MACH_EPS = 1.11022302462515654042e-16
TOL = 5.0 * MACH_EPS


class InvalidArgument(ValueError):
    """Raised for mismatched lengths, bad indices or bad sizes."""


class InputTooLarge(ValueError):
    """Raised when a sequence is too long for the chirp-z transform."""


def snap(values: np.ndarray) -> np.ndarray:
    """Zero out entries whose magnitude is at or below TOL (in place)."""
    values[np.abs(values) <= TOL] = 0.0
    return values


def snap_scalar(x: float) -> float:
    return 0.0 if abs(x) <= TOL else x


def _as_buffer(values, copy: bool) -> np.ndarray:
    if copy:
        buf = np.array(values, dtype=np.float64)
    else:
        buf = np.asarray(values, dtype=np.float64)
    if buf.ndim != 1:
        raise InvalidArgument(f"expected a one-dimensional sequence, got shape {buf.shape}")
    return buf


class ComplexSequence:
    """
    A sequence of complex numbers held as two equal-length float64 buffers.

    The transforms treat a ComplexSequence as immutable and always return a
    new one. The only mutator is set(), whose index is 1-based:

        seq = ComplexSequence.zeros(3)
        seq.set(1, 2.0, -1.0)   # first element becomes 2 - 1j
    """

    def __init__(self, re, im=None, copy: bool = True):
        """
        Args:
            re: Real parts.
            im: Imaginary parts. If omitted the imaginary part is all zero.
            copy: If False, the float64 buffers passed in are used directly.
                  Only the transform engine passes False, on scratch buffers
                  it owns.
        """
        self._re = _as_buffer(re, copy)
        if im is None:
            self._im = np.zeros(len(self._re))
        else:
            self._im = _as_buffer(im, copy)
        if len(self._re) != len(self._im):
            raise InvalidArgument(f"{len(self._re)} != {len(self._im)}")

    @classmethod
    def zeros(cls, size: int) -> "ComplexSequence":
        if size < 0:
            raise InvalidArgument(f"size < 0 : {size}")
        return cls(np.zeros(size), np.zeros(size), copy=False)

    @classmethod
    def from_complex(cls, values) -> "ComplexSequence":
        z = np.asarray(values, dtype=np.complex128)
        return cls(z.real.copy(), z.imag.copy(), copy=False)

    @property
    def re(self) -> np.ndarray:
        return self._re

    @property
    def im(self) -> np.ndarray:
        return self._im

    def __len__(self) -> int:
        return len(self._re)

    def to_complex(self) -> np.ndarray:
        return self._re + 1j * self._im

    def set(self, index: int, re: float, im: float):
        """Set element `index` (1-based) to re + i*im."""
        if index < 1 or index > len(self):
            raise InvalidArgument(f"Invalid index {index} for [1..{len(self)}] array")
        self._re[index - 1] = re
        self._im[index - 1] = im

    def abs_squared(self, scaled: bool = False) -> np.ndarray:
        """
        Squared magnitude of every element.

        With scaled=True each value is divided by the sequence length, which
        gives the power spectral density of a transformed signal.
        """
        scale = len(self) if scaled else 1.0
        square = (self._re * self._re + self._im * self._im) / scale
        square[square <= TOL] = 0.0
        return square

    def abs_squared_scaled(self) -> np.ndarray:
        return self.abs_squared(scaled=True)

    def fftshift(self) -> "ComplexSequence":
        """
        Move the zero-frequency term to the center of the sequence.

        Odd lengths put the extra element in the back half, as
        numpy.fft.fftshift does:

            [1, 2, 3, 4, 5, 6, 7] -> [5, 6, 7, 1, 2, 3, 4]
            [1, 2, 3, 4, 5, 6]    -> [4, 5, 6, 1, 2, 3]
        """
        return self._shift(inverse=False)

    def ifftshift(self) -> "ComplexSequence":
        """Undo fftshift(), for even and odd lengths alike."""
        return self._shift(inverse=True)

    def _shift(self, inverse: bool) -> "ComplexSequence":
        length = len(self)
        if length % 2 == 0:
            split = length // 2
        else:
            mid = (length - 1) // 2
            # odd lengths: fftshift rotates the last mid elements to the
            # front, ifftshift the last mid + 1
            split = mid if inverse else mid + 1
        re = np.concatenate((self._re[split:], self._re[:split]))
        im = np.concatenate((self._im[split:], self._im[:split]))
        return ComplexSequence(re, im, copy=False)

    def __str__(self):
        if len(self) == 0:
            return "[]"
        rows = [f"{r!r}  {i!r}i" for r, i in zip(self._re.tolist(), self._im.tolist())]
        return "[" + ",\n ".join(rows) + "]"

    def __repr__(self):
        return f"ComplexSequence(re={self._re.tolist()!r}, im={self._im.tolist()!r})"


def _check_same_length(a: ComplexSequence, b: ComplexSequence):
    if len(a) != len(b):
        raise InvalidArgument(f"Unequal dimensions: {len(a)} != {len(b)}")


def elementwise_product(a: ComplexSequence, b: ComplexSequence) -> ComplexSequence:
    """Complex product a_i * b_i for every i."""
    _check_same_length(a, b)
    re = a.re * b.re - a.im * b.im
    im = a.re * b.im + a.im * b.re
    return ComplexSequence(snap(re), snap(im), copy=False)


def dot(a: ComplexSequence, b: ComplexSequence) -> complex:
    """Unconjugated inner product sum(a_i * b_i)."""
    _check_same_length(a, b)
    if len(a) == 0:
        raise InvalidArgument("Arrays are empty: length = 0")
    re = snap(a.re * b.re - a.im * b.im)
    im = snap(a.re * b.im + a.im * b.re)
    return complex(snap_scalar(float(re.sum())), snap_scalar(float(im.sum())))
