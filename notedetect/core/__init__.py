"""Core types and constants for notedetect."""

from .complex_number import Complex, rotation_factors
from .notes import NoteTable
from .errors import (
    NoteDetectError,
    InvalidAlgorithmError,
    MissingSamplesError,
    InvalidNoteError,
)
from .constants import (
    PITCH_NAMES,
    DEFAULT_SR,
    DEFAULT_TOLERANCE,
    SILENCE_THRESHOLD,
)

__all__ = [
    "Complex",
    "rotation_factors",
    "NoteTable",
    "NoteDetectError",
    "InvalidAlgorithmError",
    "MissingSamplesError",
    "InvalidNoteError",
    "PITCH_NAMES",
    "DEFAULT_SR",
    "DEFAULT_TOLERANCE",
    "SILENCE_THRESHOLD",
]
