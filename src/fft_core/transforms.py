"""
Arbitrary-Length FFT

Dispatches between two algorithms:
1. Iterative radix-2 Cooley-Tukey (power-of-two lengths, see radix2.py)
2. Recursive mixed-radix Cooley-Tukey (every other length, including primes)

The mixed-radix path splits a length-N sequence into p strided sub-sequences
of length N/p, where p is the lowest odd factor of N, transforms each one
through the dispatcher again and recombines them with twiddle factors.

All transforms are unitary (scaled by 1/sqrt(N)) and return a new buffer;
inputs are never modified.

Sign convention: the forward transform uses exp(+2*pi*i*k*t/N), the inverse
exp(-2*pi*i*k*t/N).
"""

import logging
import math
import numpy as np
from numba import jit
from typing import Iterable

from .buffer import ComplexBuffer, Mapper
from .factors import is_power_of_two, lowest_odd_factor
from .radix2 import fft_radix2_iterative

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _accumulate_phase(
    out_r: np.ndarray,
    out_i: np.ndarray,
    sub_r: np.ndarray,
    sub_i: np.ndarray,
    j: int,
    sign: float
) -> None:
    """Add the twiddle-rotated sub-transform of phase j to every output bin."""
    n = out_r.shape[0]
    m = sub_r.shape[0]

    theta = 2.0 * math.pi * j / n
    del_f_r = math.cos(theta)
    del_f_i = sign * math.sin(theta)
    f_r = 1.0
    f_i = 0.0

    for i in range(n):
        _real = sub_r[i % m]
        _imag = sub_i[i % m]

        out_r[i] += f_r * _real - f_i * _imag
        out_i[i] += f_r * _imag + f_i * _real

        f_r, f_i = (f_r * del_f_r - f_i * del_f_i,
                    f_r * del_f_i + f_i * del_f_r)


def fft_recursive(buffer: ComplexBuffer, inverse: bool = False) -> ComplexBuffer:
    """
    Mixed-radix FFT for any length.

    Cost is O(N * sum(p_i)) over the factors chosen at each level, O(N^2) for
    a prime N.

    Parameters
    ----------
    buffer : ComplexBuffer
        Input sequence
    inverse : bool
        Rotate with -sin instead of +sin

    Returns
    -------
    ComplexBuffer
        New buffer holding the transform
    """
    n = len(buffer)
    if n <= 1:
        return buffer.copy()

    # Lowest odd factor keeps the sub-lengths power-of-two friendly
    p = lowest_odd_factor(n)
    m = n // p
    sign = -1.0 if inverse else 1.0
    logger.debug(f"mixed-radix split: n={n}, p={p}, m={m}")

    out_r = np.zeros(n, dtype=np.float64)
    out_i = np.zeros(n, dtype=np.float64)

    for j in range(p):
        sub = ComplexBuffer.from_real_imag(buffer.real[j::p], buffer.imag[j::p], dtype=np.float64)
        # Don't go deeper unless necessary
        if m > 1:
            sub = transform(sub, inverse)
        _accumulate_phase(out_r, out_i, sub.real, sub.imag, j, sign)

    normalisation = 1.0 / math.sqrt(p)
    return ComplexBuffer.from_real_imag(
        normalisation * out_r, normalisation * out_i, dtype=buffer.dtype
    )


def transform(buffer: ComplexBuffer, inverse: bool = False) -> ComplexBuffer:
    """Route to the radix-2 path for power-of-two lengths, mixed-radix otherwise."""
    n = len(buffer)
    if n == 0:
        return buffer.copy()

    if is_power_of_two(n):
        logger.debug(f"n={n}: iterative radix-2 ({'inverse' if inverse else 'forward'})")
        return fft_radix2_iterative(buffer, inverse)

    logger.debug(f"n={n}: recursive mixed-radix ({'inverse' if inverse else 'forward'})")
    return fft_recursive(buffer, inverse)


def forward(buffer: ComplexBuffer) -> ComplexBuffer:
    return transform(buffer, inverse=False)


def inverse(buffer: ComplexBuffer) -> ComplexBuffer:
    return transform(buffer, inverse=True)


def frequency_map(buffer: ComplexBuffer, filterer: Mapper) -> ComplexBuffer:
    """
    Filter a sequence in frequency space.

    Forward transform, ``filterer(real, imag, index, n)`` applied to every
    bin (see ComplexBuffer.map), then inverse transform.

    Examples
    --------
    >>> lowpass = lambda re, im, k, n: (0.0, 0.0) if 2 < k < n - 2 else None
    >>> smoothed = frequency_map(ComplexBuffer(signal), lowpass)
    """
    return inverse(forward(buffer).map(filterer))


def fft(x: Iterable) -> np.ndarray:
    """
    Forward unitary FFT of an array-like (real or complex).

    Equivalent to ``numpy.fft.ifft(x, norm="ortho")``.
    """
    return forward(ComplexBuffer.from_complex(x)).to_complex()


def ifft(x: Iterable) -> np.ndarray:
    """
    Inverse unitary FFT of an array-like.

    Equivalent to ``numpy.fft.fft(x, norm="ortho")``.
    """
    return inverse(ComplexBuffer.from_complex(x)).to_complex()
