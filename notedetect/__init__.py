"""notedetect - Note estimation for short monophonic audio clips.

Architecture Layers:
    1. core/        - Complex numbers, note table, errors, constants
    2. transforms/  - Time to frequency domain (direct DFT, iterative/recursive FFT)
    3. processing/  - Normalization, biquad filters, array helpers
    4. detection/   - Note estimation and the detection pipeline
    5. input/       - Audio file loading

Pipeline: samples -> normalize -> high-pass -> low-pass -> normalize
          -> transform -> magnitude -> stretch -> pitch classes
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Complex,
    NoteTable,
    NoteDetectError,
    InvalidAlgorithmError,
    MissingSamplesError,
    InvalidNoteError,
)

# Transform layer
from .transforms import (
    FrequencyTransform,
    DirectDFT,
    IterativeFFT,
    RecursiveFFT,
    get_algorithm,
)

# Processing layer
from .processing import (
    normalize_amplitude,
    low_pass,
    high_pass,
    stretch,
    magnitude_of,
)

# Detection layer
from .detection import NoteEstimator, NoteDetector, DetectorConfig

# Input layer
from .input import AudioLoader

__all__ = [
    # Core
    "Complex",
    "NoteTable",
    "NoteDetectError",
    "InvalidAlgorithmError",
    "MissingSamplesError",
    "InvalidNoteError",
    # Transforms
    "FrequencyTransform",
    "DirectDFT",
    "IterativeFFT",
    "RecursiveFFT",
    "get_algorithm",
    # Processing
    "normalize_amplitude",
    "low_pass",
    "high_pass",
    "stretch",
    "magnitude_of",
    # Detection
    "NoteEstimator",
    "NoteDetector",
    "DetectorConfig",
    # Input
    "AudioLoader",
]
