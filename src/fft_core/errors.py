"""
Error types raised by the FFT core.
"""


class FFTError(Exception):
    """Base class for all FFT core errors."""


class InvalidLengthError(FFTError, ValueError):
    """
    Raised when a length precondition is violated.

    Covers negative lengths, real/imaginary arrays of different sizes and
    non power-of-two lengths handed to radix-2 only routines.
    """


class InvalidSampleError(FFTError, ValueError):
    """
    Raised when input samples cannot be read as the expected kind of value.

    Examples are complex values handed to the real-sample constructor, or
    inverse payload elements that are not ``{"real", "imag"}`` mappings.
    """
