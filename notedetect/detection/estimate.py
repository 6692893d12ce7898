"""Note estimation - score pitch classes on a magnitude spectrum."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..core.constants import (
    DEFAULT_TOLERANCE,
    ESTIMATE_OCTAVES,
    MAX_NOTES,
    WINDOW_FACTOR,
)
from ..core.notes import NoteTable

logger = logging.getLogger(__name__)


def clamp_tolerance(tolerance: float) -> float:
    """Map any tolerance into [0, 1] as min(1, |tolerance|)."""
    return min(1.0, abs(tolerance))


class NoteEstimator:
    """Estimates the most probable pitch classes in a spectrum.

    The spectrum is expected to be indexed (approximately) by Hz. Each of the
    twelve pitch classes is scored by summing, over a few octaves, the
    strongest magnitude found in a narrow window around the note frequency.
    """

    def __init__(
        self,
        notes: Optional[NoteTable] = None,
        octaves: Tuple[int, ...] = ESTIMATE_OCTAVES,
        window_factor: float = WINDOW_FACTOR,
        max_notes: int = MAX_NOTES,
    ):
        """
        Initialize NoteEstimator.

        Args:
            notes: Note table used for frequency lookups
            octaves: Octaves summed into every pitch class score
            window_factor: Scales the semitone ratio into the search window
            max_notes: More qualifying pitch classes than this means noise
        """
        self.notes = notes if notes is not None else NoteTable()
        self.octaves = tuple(octaves)
        self.window_factor = window_factor
        self.max_notes = max_notes

    @property
    def window_ratio(self) -> float:
        """Half-width of the search window as a frequency ratio."""
        return self.notes.semitone_ratio * self.window_factor

    def intensity(self, magnitudes: Sequence[float], letter: str) -> float:
        """
        Sum the peak magnitude around ``letter`` in every scored octave.

        Args:
            magnitudes: Magnitude spectrum indexed by Hz
            letter: Pitch class without octave, e.g. 'C#'

        Returns:
            Pitch class score
        """
        magnitudes = np.asarray(magnitudes, dtype=np.float64)
        diff = self.window_ratio
        total = 0.0

        for octave in self.octaves:
            freq = self.notes.frequency_of(f"{letter}{octave}")
            start = max(0, int(freq / diff))
            end = min(len(magnitudes), int(freq * diff))
            if start < end:
                total += float(magnitudes[start:end].max())

        return total

    def scores(self, magnitudes: Sequence[float]) -> Dict[str, float]:
        """Score of every pitch class, in chromatic order from C."""
        magnitudes = np.asarray(magnitudes, dtype=np.float64)
        return {letter: self.intensity(magnitudes, letter) for letter in self.notes.letters}

    def estimate(
        self,
        magnitudes: Sequence[float],
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> Optional[List[str]]:
        """
        Estimate the pitch classes played.

        Args:
            magnitudes: Magnitude spectrum indexed by Hz
            tolerance: 1.0 keeps only the loudest class, 0.0 keeps every
                class with any energy. Clamped to min(1, |tolerance|).

        Returns:
            Pitch class letters in chromatic order, or None when nothing
            stands out (no energy, or more than ``max_notes`` classes)
        """
        scores = self.scores(magnitudes)
        peak = max(scores.values())
        if peak <= 0:
            return None

        threshold = peak * clamp_tolerance(tolerance)
        detected = [
            letter for letter, score in scores.items()
            if score > threshold or score == peak
        ]

        if len(detected) > self.max_notes:
            logger.debug("%d pitch classes qualify, treating as noise", len(detected))
            return None

        return detected
