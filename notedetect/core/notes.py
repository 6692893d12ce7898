"""Equal-tempered note table - note names, pitches and frequencies."""

import re
from typing import List

from .constants import C0_FREQUENCY, NOTE_PATTERN, PITCH_NAMES, SEMITONE_RATIO
from .errors import InvalidNoteError


class NoteTable:
    """Lookup between note names, pitches and frequencies.

    A pitch is the number of semitones counted from C0 (pitch 0, 16.35 Hz).
    Names and frequencies are computed on demand and cached by the table;
    a cached frequency never changes.
    """

    _note_re = re.compile(NOTE_PATTERN)

    def __init__(self, size: int = 0):
        """
        Initialize NoteTable.

        Args:
            size: Number of pitches to precompute
        """
        self._names: List[str] = []
        self._frequencies: List[float] = []
        if size > 0:
            self.extend(size)

    @property
    def letters(self) -> List[str]:
        """The twelve pitch classes, starting at C."""
        return list(PITCH_NAMES)

    @property
    def semitone_ratio(self) -> float:
        """Frequency ratio between adjacent semitones (2^(1/12))."""
        return SEMITONE_RATIO

    @property
    def size(self) -> int:
        """Number of pitches computed so far."""
        return len(self._frequencies)

    def __len__(self) -> int:
        return self.size

    def extend(self, size: int) -> None:
        """Compute names and frequencies for pitches [0, size)."""
        for pitch in range(len(self._names), size):
            self._names.append(f"{PITCH_NAMES[pitch % 12]}{pitch // 12}")

        if size > 0 and not self._frequencies:
            self._frequencies.append(C0_FREQUENCY)
        for _ in range(len(self._frequencies), size):
            self._frequencies.append(self._frequencies[-1] * SEMITONE_RATIO)

    def is_note(self, note: str) -> bool:
        """Check whether a string is in note notation (e.g. 'A4', 'C#3')."""
        return isinstance(note, str) and self._note_re.fullmatch(note) is not None

    def pitch(self, note: str) -> int:
        """
        Convert a note name to its pitch.

        Args:
            note: Note in letter notation, e.g. 'C#4'

        Returns:
            Semitones above C0

        Raises:
            InvalidNoteError: If the string is not in note notation
        """
        if not self.is_note(note):
            raise InvalidNoteError(
                f"Not a note: {note!r}. It has to match {NOTE_PATTERN}"
            )
        letter, octave = note[:-1], int(note[-1])
        return octave * 12 + PITCH_NAMES.index(letter)

    def note_string(self, pitch: int) -> str:
        """
        Convert a pitch to its note name.

        Raises:
            InvalidNoteError: If pitch is negative
        """
        self._check_pitch(pitch)
        if pitch < self.size:
            return self._names[pitch]
        return f"{PITCH_NAMES[pitch % 12]}{pitch // 12}"

    def frequency(self, pitch: int) -> float:
        """Frequency in Hz of the note at ``pitch``."""
        self._check_pitch(pitch)
        if pitch >= self.size:
            self.extend(pitch + 1)
        return self._frequencies[pitch]

    def frequency_of(self, note: str) -> float:
        """Frequency in Hz of a note given in letter notation."""
        return self.frequency(self.pitch(note))

    def _check_pitch(self, pitch: int) -> None:
        if pitch < 0:
            raise InvalidNoteError(f"Negative note pitch: {pitch}")
