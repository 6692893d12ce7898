"""Error kinds raised by notedetect.

All of them signal precondition violations at the call site; nothing in
the library catches them.
"""


class NoteDetectError(Exception):
    """Base class for notedetect errors."""


class InvalidAlgorithmError(NoteDetectError):
    """No frequency transform configured, or the value is not a transform."""


class MissingSamplesError(NoteDetectError):
    """Detection was requested before any samples were provided."""


class InvalidNoteError(NoteDetectError, ValueError):
    """A note string is not in note notation, or a pitch is negative."""
