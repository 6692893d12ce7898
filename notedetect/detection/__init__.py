"""Detection layer - From samples to note names.

- Note estimation (pitch class scoring on a magnitude spectrum)
- Detector (filtering, transform, estimation pipeline)
"""

from .estimate import NoteEstimator, clamp_tolerance
from .detector import NoteDetector, DetectorConfig

__all__ = [
    "NoteEstimator",
    "clamp_tolerance",
    "NoteDetector",
    "DetectorConfig",
]
