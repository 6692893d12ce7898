"""Iterative radix-2 decimation-in-time FFT (Cooley-Tukey)."""

from typing import Sequence

import numpy as np

from .base import FrequencyTransform, pad_to_power_of_two
from ..core.complex_number import rotation_factors


def bit_reverse(index: int, bits: int) -> int:
    """Reverse the lowest ``bits`` bits of ``index``."""
    result = 0
    for _ in range(bits):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


def bit_reverse_permute(buffer: np.ndarray) -> np.ndarray:
    """
    Reorder a power-of-two length buffer in place by bit-reversed index.

    Each pair (k, reverse(k)) is swapped once, so applying the
    permutation twice restores the original order.

    Returns:
        The same buffer, permuted
    """
    n = len(buffer)
    bits = n.bit_length() - 1
    for k in range(n):
        j = bit_reverse(k, bits)
        if j > k:
            buffer[k], buffer[j] = buffer[j], buffer[k]
    return buffer


class IterativeFFT(FrequencyTransform):
    """O(n log n) FFT working bottom-up over a bit-reversed buffer."""

    name = "iterative"

    def transform(self, samples: Sequence[float]) -> np.ndarray:
        buffer = bit_reverse_permute(pad_to_power_of_two(samples))
        n = len(buffer)

        size = 2
        while size <= n:
            half = size // 2
            factors = rotation_factors(half, size)
            for k in range(half):
                # Butterflies at offset k of every block of this size
                even = buffer[k::size]
                wo = factors[k] * buffer[k + half::size]
                buffer[k + half::size] = even - wo
                buffer[k::size] = even + wo
            size *= 2

        return buffer
