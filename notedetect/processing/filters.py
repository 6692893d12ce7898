"""Biquad (second order IIR) low-pass and high-pass filters.

Coefficients follow the resonant filter from musicdsp.org (archive #38).
Resonance ``r`` runs from sqrt(2) (no resonance) down to ~0.1 (strong peak
at the cutoff).
"""

import math
from typing import Sequence, Tuple

import numpy as np
from scipy import signal

Coefficients = Tuple[float, float, float, float, float]


def lowpass_coefficients(cutoff: float, resonance: float, sample_rate: int) -> Coefficients:
    """Return (a1, a2, a3, b1, b2) for a low-pass biquad."""
    _check_cutoff(cutoff, sample_rate)
    c = 1.0 / math.tan(math.pi * cutoff / sample_rate)
    a1 = 1.0 / (1.0 + resonance * c + c * c)
    a2 = 2.0 * a1
    a3 = a1
    b1 = 2.0 * (1.0 - c * c) * a1
    b2 = (1.0 - resonance * c + c * c) * a1
    return a1, a2, a3, b1, b2


def highpass_coefficients(cutoff: float, resonance: float, sample_rate: int) -> Coefficients:
    """Return (a1, a2, a3, b1, b2) for a high-pass biquad."""
    _check_cutoff(cutoff, sample_rate)
    c = math.tan(math.pi * cutoff / sample_rate)
    a1 = 1.0 / (1.0 + resonance * c + c * c)
    a2 = -2.0 * a1
    a3 = a1
    b1 = 2.0 * (c * c - 1.0) * a1
    b2 = (1.0 - resonance * c + c * c) * a1
    return a1, a2, a3, b1, b2


def low_pass(
    samples: Sequence[float],
    cutoff: float,
    resonance: float,
    sample_rate: int,
) -> np.ndarray:
    """
    Attenuate frequencies above the cutoff.

    Args:
        samples: Input samples
        cutoff: Cutoff frequency in Hz
        resonance: Resonance amount
        sample_rate: Sampling rate in Hz

    Returns:
        Filtered samples
    """
    return apply_biquad(samples, lowpass_coefficients(cutoff, resonance, sample_rate))


def high_pass(
    samples: Sequence[float],
    cutoff: float,
    resonance: float,
    sample_rate: int,
) -> np.ndarray:
    """
    Attenuate frequencies below the cutoff.

    Args:
        samples: Input samples
        cutoff: Cutoff frequency in Hz
        resonance: Resonance amount
        sample_rate: Sampling rate in Hz

    Returns:
        Filtered samples
    """
    return apply_biquad(samples, highpass_coefficients(cutoff, resonance, sample_rate))


def apply_biquad(samples: Sequence[float], coefficients: Coefficients) -> np.ndarray:
    """Run the biquad recursion; the first two outputs copy the input."""
    a1, a2, a3, b1, b2 = coefficients
    x = np.asarray(samples, dtype=np.float64)
    y = x.copy()
    if len(x) < 3:
        return y

    b = [a1, a2, a3]
    a = [1.0, b1, b2]
    # The two copied samples are the filter's past input and output
    history = [x[1], x[0]]
    zi = signal.lfiltic(b, a, y=history, x=history)
    y[2:], _ = signal.lfilter(b, a, x[2:], zi=zi)
    return y


def _check_cutoff(cutoff: float, sample_rate: int) -> None:
    if sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {sample_rate}")
    if not 0 < cutoff < sample_rate / 2:
        raise ValueError(
            f"Cutoff {cutoff} Hz must lie between 0 and Nyquist ({sample_rate / 2} Hz)"
        )
