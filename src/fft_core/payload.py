"""
Payload processing by algorithm selector.

Selectors:
    - 'fft': real samples -> forward transform -> real/imag pairs
    - 'inv': real/imag pairs -> inverse transform -> real/imag pairs
    - 'mgn': real samples -> forward transform -> magnitude/phase pairs
"""

import logging
import numpy as np
from typing import Dict, List, Sequence, Union

from .buffer import ComplexBuffer
from .transforms import forward, inverse

logger = logging.getLogger(__name__)

ALGORITHMS = ('fft', 'inv', 'mgn')
DEFAULT_ALGORITHM = 'fft'
UNKNOWN_ALGORITHM_PAYLOAD = 'Type not specified'


def process_payload(
    payload: Sequence,
    algorithm: str = DEFAULT_ALGORITHM,
    degrees: bool = True,
    dtype: np.dtype = np.float64
) -> Union[List[Dict[str, float]], str]:
    """
    Transform a payload according to the algorithm selector.

    Parameters
    ----------
    payload : sequence
        Real samples for 'fft'/'mgn', {"real", "imag"} mappings for 'inv'
    algorithm : str
        One of ALGORITHMS
    degrees : bool
        Phase unit for 'mgn'
    dtype : np.dtype
        Float type of the working buffer

    Returns
    -------
    list of dict or str
        Transformed pairs, or a text payload for an unknown selector

    Raises
    ------
    InvalidSampleError
        Complex samples for 'fft'/'mgn', or non-mapping elements for 'inv'
    """
    if algorithm == 'fft':
        return forward(ComplexBuffer(payload, dtype=dtype)).to_real_imag()

    elif algorithm == 'inv':
        return inverse(ComplexBuffer.from_pairs(payload, dtype=dtype)).to_real_imag()

    elif algorithm == 'mgn':
        return forward(ComplexBuffer(payload, dtype=dtype)).to_magnitude_phase(degrees=degrees)

    logger.warning(f"Unknown algorithm selector {algorithm!r}, expected one of {ALGORITHMS}")
    return UNKNOWN_ALGORITHM_PAYLOAD
