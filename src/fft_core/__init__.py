"""
FFT Core Module - Hand-written Arbitrary-Length FFT

This module provides a from-scratch unitary Fast Fourier Transform for complex
sequences of any length, built from two cooperating algorithms.

Modules:
    - buffer: ComplexBuffer (parallel real/imaginary arrays)
    - factors: power-of-two test and lowest odd factor search
    - bit_reversal: bit-reversal permutation
    - radix2: iterative radix-2 Cooley-Tukey FFT (power-of-two lengths)
    - transforms: recursive mixed-radix FFT, dispatcher and frequency-space filtering
    - payload: selector-driven payload processing ('fft', 'inv', 'mgn')
"""

from .errors import FFTError, InvalidLengthError, InvalidSampleError
from .buffer import ComplexBuffer
from .factors import is_power_of_two, lowest_odd_factor
from .bit_reversal import bit_reverse_index, bit_reversal_permutation, bit_reverse_copy
from .radix2 import fft_radix2_iterative
from .transforms import fft_recursive, transform, forward, inverse, frequency_map, fft, ifft
from .payload import process_payload, ALGORITHMS

__all__ = [
    # Errors
    'FFTError',
    'InvalidLengthError',
    'InvalidSampleError',
    # Data
    'ComplexBuffer',
    # Building blocks
    'is_power_of_two',
    'lowest_odd_factor',
    'bit_reverse_index',
    'bit_reversal_permutation',
    'bit_reverse_copy',
    # Transforms
    'fft_radix2_iterative',
    'fft_recursive',
    'transform',
    'forward',
    'inverse',
    'frequency_map',
    'fft',
    'ifft',
    # Payloads
    'process_payload',
    'ALGORITHMS',
]

__version__ = '1.0.0'
