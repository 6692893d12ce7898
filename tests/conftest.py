"""Shared fixtures for notedetect tests."""

import numpy as np
import pytest


def generate_sine_wave(freq: float, n_samples: int, sr: int = 44100, amplitude: float = 1.0) -> np.ndarray:
    """Generate a sine wave at given frequency."""
    t = np.arange(n_samples) / sr
    return amplitude * np.sin(2 * np.pi * freq * t)


@pytest.fixture
def sample_rate():
    return 44100


@pytest.fixture
def sine():
    """Factory for sine waves: sine(freq, n_samples, sr=44100, amplitude=1.0)."""
    return generate_sine_wave


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
