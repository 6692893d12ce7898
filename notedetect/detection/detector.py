"""Note detection pipeline - samples in, pitch classes out."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.constants import (
    DEFAULT_SR,
    DEFAULT_TOLERANCE,
    HIGHPASS_NOTE,
    HIGHPASS_RESONANCE,
    LOWPASS_NOTE,
    LOWPASS_RESONANCE,
    SILENCE_THRESHOLD,
)
from ..core.errors import MissingSamplesError, InvalidAlgorithmError
from ..core.notes import NoteTable
from ..processing import (
    average_amplitude,
    high_pass,
    low_pass,
    magnitude_of,
    normalize_amplitude,
    stretch,
)
from ..transforms import DEFAULT_ALGORITHM, FrequencyTransform, get_algorithm, timed_transform
from .estimate import NoteEstimator

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """Configuration for the detection pipeline.

    Attributes:
        silence_threshold: Average absolute amplitude below which the
            input counts as silence (default: 0.005)
        highpass_note: Note whose frequency is the high-pass cutoff (default: C3)
        highpass_resonance: High-pass resonance (default: 1.4)
        lowpass_note: Note whose frequency is the low-pass cutoff (default: C4)
        lowpass_resonance: Low-pass resonance (default: 0.5)
    """

    silence_threshold: float = SILENCE_THRESHOLD
    highpass_note: str = HIGHPASS_NOTE
    highpass_resonance: float = HIGHPASS_RESONANCE
    lowpass_note: str = LOWPASS_NOTE
    lowpass_resonance: float = LOWPASS_RESONANCE


class NoteDetector:
    """Detects the most probable notes played in a sound sample.

    The samples should contain as few distinct sounds as possible. The
    magnitude spectrum is computed once and reused by later ``run`` calls
    until the samples, sample rate or algorithm change.
    """

    def __init__(
        self,
        samples: Optional[Sequence[float]] = None,
        sample_rate: int = DEFAULT_SR,
        algorithm: Union[str, FrequencyTransform, None] = DEFAULT_ALGORITHM,
        config: Optional[DetectorConfig] = None,
        notes: Optional[NoteTable] = None,
    ):
        """
        Initialize NoteDetector.

        Args:
            samples: Sound samples in time domain
            sample_rate: Sampling rate in Hz
            algorithm: Transform name or instance; None leaves it unset
            config: Pipeline configuration
            notes: Note table shared with the estimator
        """
        self.config = config or DetectorConfig()
        self.notes = notes if notes is not None else NoteTable()
        self.estimator = NoteEstimator(self.notes)

        self._samples: Optional[np.ndarray] = None
        self._sample_rate = DEFAULT_SR
        self._algorithm: Optional[FrequencyTransform] = None
        self._spectrum: Optional[np.ndarray] = None

        self.set_sample_rate(sample_rate)
        if samples is not None:
            self.set_samples(samples)
        self.set_algorithm(algorithm)

    @property
    def samples(self) -> Optional[np.ndarray]:
        return self._samples

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def algorithm(self) -> Optional[FrequencyTransform]:
        return self._algorithm

    @property
    def spectrum(self) -> Optional[np.ndarray]:
        """Cached magnitude spectrum indexed by Hz, None until computed."""
        return self._spectrum

    def set_samples(self, samples: Sequence[float]) -> None:
        """Replace the samples and drop the cached spectrum."""
        if samples is None:
            raise MissingSamplesError("No samples given as an input")
        self._samples = np.atleast_1d(np.array(samples, dtype=np.float64)).ravel()
        self._spectrum = None

    def set_sample_rate(self, sample_rate: int) -> None:
        """
        Change the sampling rate and drop the cached spectrum.

        Raises:
            ValueError: If the rate is not positive, or its Nyquist frequency
                does not lie above both filter cutoffs
        """
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate}")
        highest = max(self._cutoffs())
        if highest >= sample_rate / 2:
            raise ValueError(
                f"Sample rate {sample_rate} Hz is too low for the {highest} Hz filter cutoff"
            )
        self._sample_rate = sample_rate
        self._spectrum = None

    def set_algorithm(self, algorithm: Union[str, FrequencyTransform, None]) -> None:
        """
        Change the time to frequency domain transform.

        Args:
            algorithm: Registered name or FrequencyTransform instance;
                None unsets it

        Raises:
            InvalidAlgorithmError: If the value is not a known transform
        """
        self._algorithm = None if algorithm is None else get_algorithm(algorithm)
        self._spectrum = None

    def run(self, tolerance: float = DEFAULT_TOLERANCE) -> Optional[List[str]]:
        """
        Detect the notes played.

        Args:
            tolerance: 1.0 is the most strict, 0.0 the least

        Returns:
            Pitch class letters (e.g. ['A']), or None when the input is
            silent or too noisy to name a note

        Raises:
            InvalidAlgorithmError: If no transform is set
            MissingSamplesError: If no samples were given
        """
        if self._algorithm is None:
            raise InvalidAlgorithmError("Invalid frequency domain algorithm chosen")
        if self._samples is None or len(self._samples) == 0:
            raise MissingSamplesError("No samples given as an input")

        if self._spectrum is None:
            level = average_amplitude(self._samples)
            if level < self.config.silence_threshold:
                logger.debug("Average amplitude %.5f below silence threshold", level)
                return None
            self._spectrum = self._compute_spectrum(self._samples)
        else:
            logger.debug("Reusing cached spectrum")

        return self.estimator.estimate(self._spectrum, tolerance)

    def _cutoffs(self) -> Tuple[int, int]:
        """(high-pass, low-pass) cutoffs in whole Hz."""
        return (
            int(self.notes.frequency_of(self.config.highpass_note)),
            int(self.notes.frequency_of(self.config.lowpass_note)),
        )

    def _compute_spectrum(self, samples: np.ndarray) -> np.ndarray:
        """Filter the samples and return their magnitude spectrum indexed by Hz."""
        high_cut, low_cut = self._cutoffs()

        samples = normalize_amplitude(samples)
        samples = high_pass(samples, high_cut, self.config.highpass_resonance, self._sample_rate)
        samples = low_pass(samples, low_cut, self.config.lowpass_resonance, self._sample_rate)
        samples = normalize_amplitude(samples)
        logger.debug(
            "Filtered %d samples (high-pass %d Hz, low-pass %d Hz)",
            len(samples), high_cut, low_cut,
        )

        spectrum = timed_transform(self._algorithm, samples)
        return stretch(magnitude_of(spectrum), self._sample_rate)
