"""Transform layer - Time domain to frequency domain conversion.

Every transform takes real samples, zero-pads them to a power of two
and returns one complex value per frequency bin:
- Direct DFT (O(n^2) reference)
- Iterative radix-2 FFT
- Recursive radix-2 FFT
"""

from .base import FrequencyTransform, next_power_of_two, pad_to_power_of_two, timed_transform
from .direct import DirectDFT
from .iterative import IterativeFFT, bit_reverse, bit_reverse_permute
from .recursive import RecursiveFFT
from .registry import ALGORITHMS, DEFAULT_ALGORITHM, get_algorithm

__all__ = [
    "FrequencyTransform",
    "next_power_of_two",
    "pad_to_power_of_two",
    "timed_transform",
    "DirectDFT",
    "IterativeFFT",
    "RecursiveFFT",
    "bit_reverse",
    "bit_reverse_permute",
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "get_algorithm",
]
