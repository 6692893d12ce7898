"""Tests for pitch class scoring and note estimation."""

import numpy as np
import pytest

from notedetect.core import NoteTable, PITCH_NAMES
from notedetect.detection import NoteEstimator, clamp_tolerance

SPECTRUM_LENGTH = 44100


@pytest.fixture
def estimator():
    return NoteEstimator(NoteTable())


def make_spectrum(estimator, levels, octaves=(2, 3, 4, 5)):
    """Spectrum with a peak of the given level at every octave of each letter."""
    spectrum = np.zeros(SPECTRUM_LENGTH)
    diff = estimator.window_ratio
    for letter, level in levels.items():
        for octave in octaves:
            freq = estimator.notes.frequency_of(f"{letter}{octave}")
            start, end = int(freq / diff), int(freq * diff)
            spectrum[(start + end - 1) // 2] = level
    return spectrum


class TestTolerance:
    """Tolerance clamping."""

    @pytest.mark.parametrize(
        "tolerance, expected",
        [(0.5, 0.5), (0.0, 0.0), (1.0, 1.0), (-0.3, 0.3), (2.0, 1.0), (-7.0, 1.0)],
    )
    def test_clamp(self, tolerance, expected):
        assert clamp_tolerance(tolerance) == expected


class TestScores:
    """Pitch class intensity sums."""

    def test_order_and_keys(self, estimator):
        scores = estimator.scores(np.zeros(SPECTRUM_LENGTH))
        assert list(scores) == PITCH_NAMES
        assert all(score == 0.0 for score in scores.values())

    def test_sums_octaves(self, estimator):
        spectrum = make_spectrum(estimator, {"A": 1.0})
        assert estimator.intensity(spectrum, "A") == pytest.approx(4.0)
        assert estimator.intensity(spectrum, "G#") == 0.0
        assert estimator.intensity(spectrum, "A#") == 0.0

    def test_takes_window_maximum(self, estimator):
        spectrum = np.zeros(SPECTRUM_LENGTH)
        spectrum[439] = 2.0
        spectrum[441] = 5.0
        assert estimator.intensity(spectrum, "A") == 5.0

    def test_ignores_energy_outside_window(self, estimator):
        spectrum = np.zeros(SPECTRUM_LENGTH)
        spectrum[450] = 9.0
        assert estimator.intensity(spectrum, "A") == 0.0

    def test_short_spectrum(self, estimator):
        spectrum = np.ones(300)
        # Only octaves 2 and 3 fall inside 300 bins for A (110, 220 Hz)
        assert estimator.intensity(spectrum, "A") == 2.0


class TestEstimate:
    """Choosing the pitch classes."""

    def test_single_note(self, estimator):
        spectrum = make_spectrum(estimator, {"A": 1.0})
        assert estimator.estimate(spectrum) == ["A"]

    def test_tolerance_selects_weaker_notes(self, estimator):
        spectrum = make_spectrum(estimator, {"A": 1.0, "E": 0.4})
        assert estimator.estimate(spectrum, 0.5) == ["A"]
        assert estimator.estimate(spectrum, 0.3) == ["E", "A"]
        assert estimator.estimate(spectrum, -0.3) == ["E", "A"]
        assert estimator.estimate(spectrum, 0.0) == ["E", "A"]

    def test_strictest_tolerance_keeps_loudest(self, estimator):
        spectrum = make_spectrum(estimator, {"A": 1.0, "E": 0.9})
        assert estimator.estimate(spectrum, 1.0) == ["A"]
        assert estimator.estimate(spectrum, 3.0) == ["A"]

    def test_default_tolerance(self, estimator):
        spectrum = make_spectrum(estimator, {"C": 1.0, "G": 0.6, "E": 0.45})
        assert estimator.estimate(spectrum) == estimator.estimate(spectrum, 0.5)
        assert estimator.estimate(spectrum) == ["C", "G"]

    def test_noise_is_rejected(self, estimator):
        spectrum = make_spectrum(estimator, {letter: 1.0 for letter in PITCH_NAMES})
        assert estimator.estimate(spectrum) is None
        assert estimator.estimate(spectrum, 1.0) is None

    def test_five_notes_allowed(self, estimator):
        letters = ["C", "D", "E", "G", "A"]
        spectrum = make_spectrum(estimator, {letter: 1.0 for letter in letters})
        assert estimator.estimate(spectrum) == letters

    def test_six_notes_rejected(self, estimator):
        letters = ["C", "D", "E", "F", "G", "A"]
        spectrum = make_spectrum(estimator, {letter: 1.0 for letter in letters})
        assert estimator.estimate(spectrum) is None

    def test_empty_spectrum(self, estimator):
        assert estimator.estimate(np.zeros(SPECTRUM_LENGTH)) is None

    def test_custom_octaves(self):
        estimator = NoteEstimator(octaves=(4,))
        spectrum = make_spectrum(estimator, {"D": 1.0}, octaves=(4,))
        assert estimator.intensity(spectrum, "D") == 1.0
        assert estimator.estimate(spectrum) == ["D"]
