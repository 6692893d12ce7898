"""Recursive radix-2 decimation-in-time FFT (Cooley-Tukey)."""

from typing import Dict, Sequence

import numpy as np

from .base import FrequencyTransform, pad_to_power_of_two
from ..core.complex_number import rotation_factors


def _group_elements(buffer: np.ndarray, start: int, length: int) -> None:
    """Move even-indexed elements to the first half, odd to the second."""
    segment = buffer[start:start + length]
    segment[:] = np.concatenate((segment[0::2], segment[1::2]))


def _fft(buffer: np.ndarray, start: int, length: int, factors: Dict[int, np.ndarray]) -> None:
    if length < 2:
        return

    half = length // 2
    _group_elements(buffer, start, length)
    _fft(buffer, start, half, factors)
    _fft(buffer, start + half, half, factors)

    even = buffer[start:start + half].copy()
    wo = factors[length] * buffer[start + half:start + length]
    buffer[start:start + half] = even + wo
    buffer[start + half:start + length] = even - wo


class RecursiveFFT(FrequencyTransform):
    """O(n log n) FFT splitting the buffer top-down.

    The working buffer belongs to a single ``transform`` call, so one
    instance can be shared freely.
    """

    name = "recursive"

    def transform(self, samples: Sequence[float]) -> np.ndarray:
        buffer = pad_to_power_of_two(samples)
        n = len(buffer)

        factors = {}
        size = 2
        while size <= n:
            factors[size] = rotation_factors(size // 2, size)
            size *= 2

        _fft(buffer, 0, n, factors)
        return buffer
