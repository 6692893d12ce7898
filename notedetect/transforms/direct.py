"""Direct DFT - the defining O(n^2) summation.

Slow on purpose: it only exists as a reference to check the FFTs against.
"""

from typing import Sequence

import numpy as np

from .base import FrequencyTransform, pad_to_power_of_two
from ..core.complex_number import rotation_factors


class DirectDFT(FrequencyTransform):
    """Computes every bin independently from the DFT definition."""

    name = "direct"

    def transform(self, samples: Sequence[float]) -> np.ndarray:
        buffer = pad_to_power_of_two(samples)
        n = len(buffer)

        # e^(-i*2*pi*k*j/n) only depends on (k*j) mod n
        factors = rotation_factors(n, n)
        indices = np.arange(n)

        output = np.zeros(n, dtype=np.complex128)
        for k in range(n):
            # Sum of x[j] * e^(-i*2*pi*k*j/n) over all j
            output[k] = np.sum(buffer * factors[(k * indices) % n])
        return output
