"""
Bit-Reversal Permutation

Reorders a power-of-two length sequence so the iterative radix-2 butterflies
can run in place. Kernels are compiled with Numba.
"""

import numpy as np
from numba import jit

from .buffer import ComplexBuffer
from .errors import InvalidLengthError
from .factors import is_power_of_two


@jit(nopython=True, cache=True)
def bit_reverse_index(index: int, n: int) -> int:
    """Reverse the low log2(n) bits of index (n must be a power of two)."""
    result = 0
    while n > 1:
        result = (result << 1) | (index & 1)
        index >>= 1
        n >>= 1
    return result


@jit(nopython=True, cache=True)
def _bit_reverse_inplace(real: np.ndarray, imag: np.ndarray) -> None:
    n = real.shape[0]
    # Targets already swapped by an earlier index
    flipped = np.zeros(n, dtype=np.bool_)

    for i in range(n):
        r = bit_reverse_index(i, n)
        if flipped[i]:
            continue

        real[i], real[r] = real[r], real[i]
        imag[i], imag[r] = imag[r], imag[i]
        flipped[r] = True


def _check_power_of_two(n: int) -> None:
    if n and not is_power_of_two(n):
        raise InvalidLengthError(f"Bit reversal needs a power-of-2 length, got {n}")


def bit_reversal_permutation(n: int) -> np.ndarray:
    """
    Index map of the bit-reversal permutation.

    >>> bit_reversal_permutation(8)
    array([0, 4, 2, 6, 1, 5, 3, 7])
    """
    _check_power_of_two(n)
    return np.array([bit_reverse_index(i, n) for i in range(n)], dtype=np.int64)


def bit_reverse_copy(buffer: ComplexBuffer) -> ComplexBuffer:
    """Return a bit-reversed copy of buffer; the input is left untouched."""
    _check_power_of_two(len(buffer))
    output = buffer.copy()
    if len(output):
        _bit_reverse_inplace(output.real, output.imag)
    return output
