"""
Complex Buffer

A pair of equal-length float arrays holding the real and imaginary parts of a
complex sequence. All FFT routines in this package consume and produce
ComplexBuffer objects.
"""

import math
import numpy as np
from numbers import Integral
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .errors import InvalidLengthError, InvalidSampleError

Visitor = Callable[[float, float, int, int], None]
Mapper = Callable[[float, float, int, int], Optional[Tuple[float, float]]]


def _as_float_array(values: Iterable[float], dtype: np.dtype) -> np.ndarray:
    """Copy real samples into a new 1D array; complex input is rejected."""
    if not isinstance(values, (np.ndarray, list, tuple)) and hasattr(values, '__iter__'):
        # Generators and other one-shot iterables
        values = list(values)
    if np.iscomplexobj(values):
        raise InvalidSampleError(
            "Complex values given where real samples are expected; "
            "use ComplexBuffer.from_complex instead"
        )

    array = np.array(values, dtype=dtype)
    if array.ndim != 1:
        raise InvalidLengthError(f"Input must be 1D, got shape {array.shape}")
    return array


class ComplexBuffer:
    """
    Complex sequence stored as two parallel numpy arrays.

    Construction:
        ComplexBuffer(8)                 -> 8 zeros
        ComplexBuffer([1.0, 2.0, 3.0])   -> real samples, zero imaginary part
        ComplexBuffer(other)             -> independent copy of another buffer

    The real and imaginary arrays always have the same length. Storage can be
    written element-wise (``buf.real[i] = ...``) but never replaced.
    """

    def __init__(
        self,
        other: Union[int, Iterable[float], "ComplexBuffer"] = 0,
        dtype: Optional[np.dtype] = None
    ):
        if isinstance(other, ComplexBuffer):
            # Copy constructor
            self._dtype = np.dtype(dtype) if dtype is not None else other.dtype
            self._real = np.array(other.real, dtype=self._dtype)
            self._imag = np.array(other.imag, dtype=self._dtype)
            return

        self._dtype = np.dtype(dtype) if dtype is not None else np.dtype(np.float64)

        if isinstance(other, Integral) and not isinstance(other, bool):
            if other < 0:
                raise InvalidLengthError(f"Buffer length must be >= 0, got {other}")
            self._real = np.zeros(int(other), dtype=self._dtype)
        else:
            self._real = _as_float_array(other, self._dtype)

        self._imag = np.zeros(len(self._real), dtype=self._dtype)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_real_imag(
        cls,
        real: Iterable[float],
        imag: Iterable[float],
        dtype: Optional[np.dtype] = None
    ) -> "ComplexBuffer":
        """Build a buffer from separate real and imaginary sequences."""
        buf = cls(real, dtype=dtype)
        imag = _as_float_array(imag, buf.dtype)
        if imag.shape != buf.real.shape:
            raise InvalidLengthError(
                f"Real and imaginary parts differ in length: {len(buf.real)} != {imag.size}"
            )
        buf._imag = imag
        return buf

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Dict[str, float]],
        dtype: Optional[np.dtype] = None
    ) -> "ComplexBuffer":
        """Build a buffer from ``{"real": .., "imag": ..}`` mappings (missing imag is 0)."""
        real = []
        imag = []
        for i, pair in enumerate(pairs):
            try:
                real.append(pair["real"])
                imag.append(pair.get("imag", 0.0))
            except (TypeError, KeyError, AttributeError) as e:
                raise InvalidSampleError(
                    f"Element {i} is not a {{'real', 'imag'}} mapping: {pair!r}"
                ) from e
        return cls.from_real_imag(real, imag, dtype=dtype)

    @classmethod
    def from_complex(cls, values: Iterable[complex], dtype: Optional[np.dtype] = None) -> "ComplexBuffer":
        values = np.asarray(values, dtype=np.complex128)
        return cls.from_real_imag(values.real, values.imag, dtype=dtype)

    def copy(self) -> "ComplexBuffer":
        return ComplexBuffer(self)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @property
    def real(self) -> np.ndarray:
        return self._real

    @property
    def imag(self) -> np.ndarray:
        return self._imag

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def length(self) -> int:
        return len(self._real)

    def __len__(self) -> int:
        return len(self._real)

    def __repr__(self) -> str:
        components = [f"({r:.2f}, {i:.2f})" for r, i in zip(self._real, self._imag)]
        return f"[{', '.join(components)}]"

    __str__ = __repr__

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def for_each(self, visitor: Visitor) -> None:
        """Call ``visitor(real, imag, index, n)`` for every element, in order."""
        n = self.length
        for i in range(n):
            visitor(float(self._real[i]), float(self._imag[i]), i, n)

    def map(self, mapper: Mapper) -> "ComplexBuffer":
        """
        In-place mapper.

        ``mapper(real, imag, index, n)`` returns the new ``(real, imag)`` pair
        for that index, or None to keep the element as it is.

        Returns
        -------
        ComplexBuffer
            self, so calls can be chained
        """
        n = self.length
        for i in range(n):
            value = mapper(float(self._real[i]), float(self._imag[i]), i, n)
            if value is not None:
                self._real[i], self._imag[i] = value
        return self

    def conjugate(self) -> "ComplexBuffer":
        return ComplexBuffer(self).map(lambda real, imag, i, n: (real, -imag))

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def to_magnitude_phase(self, degrees: bool = True) -> List[Dict[str, float]]:
        """
        Magnitude and phase of every element.

        Phase is atan2(imag, real), so the quadrant is preserved. Degrees by
        default, radians with ``degrees=False``.
        """
        scale = 180.0 / math.pi if degrees else 1.0
        mags = []

        def collect(real, imag, i, n):
            mags.append({
                'magnitude': math.sqrt(real * real + imag * imag),
                'phase': math.atan2(imag, real) * scale,
            })

        self.for_each(collect)
        return mags

    def to_real_imag(self) -> List[Dict[str, float]]:
        components = []
        self.for_each(lambda real, imag, i, n: components.append({'real': real, 'imag': imag}))
        return components

    def to_complex(self) -> np.ndarray:
        return self._real.astype(np.complex128) + 1j * self._imag

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def fft(self) -> "ComplexBuffer":
        """Forward transform; returns a new buffer."""
        from .transforms import forward
        return forward(self)

    def ifft(self) -> "ComplexBuffer":
        """Inverse transform; returns a new buffer."""
        from .transforms import inverse
        return inverse(self)

    def frequency_map(self, filterer: Mapper) -> "ComplexBuffer":
        """Apply a frequency-space filter and return the filtered sequence."""
        from .transforms import frequency_map
        return frequency_map(self, filterer)
