"""Array helpers shared by the detection pipeline."""

from typing import Sequence

import numpy as np


def stretch(array: Sequence[float], target_length: int) -> np.ndarray:
    """
    Resample an array to ``target_length`` values by linear interpolation.

    Output index i reads the source at x = i * (n-1) / (m-1), clamped to
    the first and last source values.

    Args:
        array: Source values
        target_length: Size of the output array

    Returns:
        Interpolated array of size target_length
    """
    source = np.asarray(array, dtype=np.float64)
    n = len(source)
    if n == 0:
        raise ValueError("Cannot stretch an empty array")
    if target_length < 1:
        raise ValueError(f"Target length must be positive, got {target_length}")

    if target_length == 1 or n == 1:
        return np.full(target_length, source[0])

    positions = np.arange(target_length) * (n - 1) / (target_length - 1)
    return np.interp(positions, np.arange(n), source)


def magnitude_of(spectrum: Sequence[complex]) -> np.ndarray:
    """Modulus of every bin in a complex spectrum."""
    return np.abs(np.asarray(spectrum, dtype=np.complex128))


def to_complex(samples: Sequence[float]) -> np.ndarray:
    """Real samples as a complex buffer with zero imaginary parts."""
    return np.asarray(samples, dtype=np.float64).astype(np.complex128)
