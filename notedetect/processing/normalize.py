"""Amplitude normalization."""

from typing import Sequence

import numpy as np


def normalize_amplitude(samples: Sequence[float]) -> np.ndarray:
    """
    Scale samples so the largest absolute value becomes 1.0.

    A silent (all-zero) buffer is returned unchanged.

    Args:
        samples: Samples in time domain

    Returns:
        New normalized array
    """
    samples = np.array(samples, dtype=np.float64)
    peak = np.abs(samples).max() if len(samples) else 0.0
    if peak > 0:
        samples = samples * (1.0 / peak)
    return samples


def average_amplitude(samples: Sequence[float]) -> float:
    """Mean absolute amplitude (0.0 for an empty buffer)."""
    samples = np.asarray(samples, dtype=np.float64)
    if len(samples) == 0:
        return 0.0
    return float(np.mean(np.abs(samples)))
