"""
Iterative Radix-2 FFT using Numba JIT

Cooley-Tukey decimation-in-time transform for power-of-two lengths:
1. Bit-reversal permutation on a fresh copy of the input
2. log2(N) butterfly passes, each scaled by 1/sqrt(2)

The per-pass scaling makes the transform unitary (overall 1/sqrt(N)), so the
forward and inverse transforms differ only in the rotation sign.
"""

import math
import numpy as np
from numba import jit

from .bit_reversal import bit_reverse_copy
from .buffer import ComplexBuffer
from .errors import InvalidLengthError
from .factors import is_power_of_two

SQRT1_2 = math.sqrt(0.5)


@jit(nopython=True, cache=True)
def _butterfly_passes(real: np.ndarray, imag: np.ndarray, sign: float) -> None:
    """
    In-place butterfly passes over bit-reversed data.

    The twiddle factor is advanced by one complex multiplication per butterfly
    instead of calling cos/sin each time.
    """
    n = real.shape[0]

    width = 1
    while width < n:
        del_f_r = math.cos(math.pi / width)
        del_f_i = sign * math.sin(math.pi / width)

        for i in range(n // (2 * width)):
            f_r = 1.0
            f_i = 0.0
            for j in range(width):
                l_index = 2 * i * width + j
                r_index = l_index + width

                left_r = real[l_index]
                left_i = imag[l_index]
                right_r = f_r * real[r_index] - f_i * imag[r_index]
                right_i = f_i * real[r_index] + f_r * imag[r_index]

                real[l_index] = SQRT1_2 * (left_r + right_r)
                imag[l_index] = SQRT1_2 * (left_i + right_i)
                real[r_index] = SQRT1_2 * (left_r - right_r)
                imag[r_index] = SQRT1_2 * (left_i - right_i)

                f_r, f_i = (f_r * del_f_r - f_i * del_f_i,
                            f_r * del_f_i + f_i * del_f_r)

        width <<= 1


def fft_radix2_iterative(buffer: ComplexBuffer, inverse: bool = False) -> ComplexBuffer:
    """
    Unitary FFT of a power-of-two length buffer.

    Parameters
    ----------
    buffer : ComplexBuffer
        Input sequence, length 1, 2, 4, ...
    inverse : bool
        Rotate with -sin instead of +sin

    Returns
    -------
    ComplexBuffer
        New buffer holding the transform; the input is not modified
    """
    n = len(buffer)
    if n and not is_power_of_two(n):
        raise InvalidLengthError(f"Radix-2 FFT size must be power of 2. Given: {n}")

    output = bit_reverse_copy(buffer)
    if n > 1:
        _butterfly_passes(output.real, output.imag, -1.0 if inverse else 1.0)
    return output
