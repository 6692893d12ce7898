"""Processing layer - Sample and spectrum conditioning.

This layer prepares signals for note estimation:
- Amplitude normalization
- Low-pass / high-pass biquad filtering
- Spectrum magnitude and resampling helpers
"""

from .normalize import normalize_amplitude, average_amplitude
from .filters import low_pass, high_pass, lowpass_coefficients, highpass_coefficients
from .arrays import stretch, magnitude_of, to_complex

__all__ = [
    "normalize_amplitude",
    "average_amplitude",
    "low_pass",
    "high_pass",
    "lowpass_coefficients",
    "highpass_coefficients",
    "stretch",
    "magnitude_of",
    "to_complex",
]
