"""Base class for time domain to frequency domain transforms."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    size = 1
    while size < n:
        size *= 2
    return size


def pad_to_power_of_two(samples: Sequence[float]) -> np.ndarray:
    """
    Copy real samples into a zero-padded complex buffer.

    Args:
        samples: Real-valued samples in time domain

    Returns:
        complex128 buffer whose length is the next power of two
    """
    samples = np.asarray(samples, dtype=np.float64)
    buffer = np.zeros(next_power_of_two(len(samples)), dtype=np.complex128)
    buffer[: len(samples)] = samples
    return buffer


class FrequencyTransform(ABC):
    """Abstract base class for frequency transforms."""

    name: str = ""

    @abstractmethod
    def transform(self, samples: Sequence[float]) -> np.ndarray:
        """
        Convert samples from time domain to frequency domain.

        Args:
            samples: Real-valued samples; zero-padded to a power of two

        Returns:
            Complex spectrum, one value per frequency bin
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def timed_transform(algorithm: FrequencyTransform, samples: Sequence[float]) -> np.ndarray:
    """Run a transform and log how long it took."""
    start = time.perf_counter()
    spectrum = algorithm.transform(samples)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.debug("%s: %.2fms for %d bins", type(algorithm).__name__, elapsed_ms, len(spectrum))
    return spectrum
