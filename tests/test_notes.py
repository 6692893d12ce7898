"""Tests for the equal-tempered note table."""

import pytest

from notedetect.core import InvalidNoteError, NoteTable, PITCH_NAMES
from notedetect.core.constants import SEMITONE_RATIO


@pytest.fixture
def notes():
    return NoteTable()


class TestFrequencies:
    """Pitch to frequency lookups."""

    def test_c0(self, notes):
        assert notes.frequency(0) == 16.35

    def test_semitone_ratio(self, notes):
        for pitch in range(108):
            assert notes.frequency(pitch + 1) == notes.frequency(pitch) * SEMITONE_RATIO

    def test_reference_notes(self, notes):
        assert notes.frequency_of("A4") == pytest.approx(440.0, abs=0.1)
        assert notes.frequency_of("C4") == pytest.approx(261.63, abs=0.1)
        assert notes.frequency_of("C3") == pytest.approx(130.81, abs=0.1)

    def test_octave_doubles(self, notes):
        assert notes.frequency_of("E5") == pytest.approx(2 * notes.frequency_of("E4"))

    def test_lazy_growth(self, notes):
        assert notes.size == 0
        notes.frequency(20)
        assert notes.size == 21
        notes.frequency(5)
        assert len(notes) == 21

    def test_cached_values_never_change(self, notes):
        before = [notes.frequency(p) for p in range(30)]
        notes.extend(200)
        assert [notes.frequency(p) for p in range(30)] == before

    def test_precomputed_table(self):
        assert NoteTable(size=120).size == 120

    def test_tables_are_independent(self):
        first = NoteTable()
        second = NoteTable()
        first.frequency(50)
        assert second.size == 0

    def test_negative_pitch(self, notes):
        with pytest.raises(InvalidNoteError):
            notes.frequency(-1)


class TestNoteNames:
    """Note notation parsing and formatting."""

    @pytest.mark.parametrize(
        "name, pitch",
        [("C0", 0), ("C#0", 1), ("B0", 11), ("C#3", 37), ("A4", 57), ("B9", 119)],
    )
    def test_pitch(self, notes, name, pitch):
        assert notes.pitch(name) == pitch
        assert notes.note_string(pitch) == name

    def test_round_trip_all_names(self, notes):
        for octave in range(10):
            for letter in PITCH_NAMES:
                name = f"{letter}{octave}"
                assert notes.note_string(notes.pitch(name)) == name

    def test_note_string_beyond_cache(self, notes):
        assert notes.size == 0
        assert notes.note_string(130) == "A#10"

    @pytest.mark.parametrize(
        "name", ["H4", "C", "c4", "E#4", "B#2", "C10", "A-1", "", "C#", "4C", " A4"]
    )
    def test_invalid_names(self, notes, name):
        assert not notes.is_note(name)
        with pytest.raises(InvalidNoteError):
            notes.pitch(name)
        with pytest.raises(InvalidNoteError):
            notes.frequency_of(name)

    def test_non_string(self, notes):
        assert not notes.is_note(57)

    def test_negative_pitch_name(self, notes):
        with pytest.raises(InvalidNoteError, match="Negative"):
            notes.note_string(-3)

    def test_invalid_note_is_value_error(self, notes):
        with pytest.raises(ValueError):
            notes.pitch("X9")

    def test_letters(self, notes):
        assert notes.letters == PITCH_NAMES
        assert notes.semitone_ratio == pytest.approx(2 ** (1 / 12))
