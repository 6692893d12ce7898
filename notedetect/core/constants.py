"""Global constants for notedetect."""

# Pitch class names, index = semitones above C
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Note notation: letter, optional sharp, single octave digit
NOTE_PATTERN = r"([ACDFG]#?|[BE])\d"

# Equal temperament
C0_FREQUENCY = 16.35  # Hz, pitch 0
SEMITONE_RATIO = 2 ** (1 / 12)

# Audio processing defaults
DEFAULT_SR = 44100
SILENCE_THRESHOLD = 0.005  # average absolute amplitude

# Pre-filtering around the analysed range
HIGHPASS_NOTE = "C3"
HIGHPASS_RESONANCE = 1.4
LOWPASS_NOTE = "C4"
LOWPASS_RESONANCE = 0.5

# Note estimation defaults
DEFAULT_TOLERANCE = 0.5
ESTIMATE_OCTAVES = (2, 3, 4, 5)
WINDOW_FACTOR = 0.956  # scales the semitone ratio into a search window
MAX_NOTES = 5  # more qualifying pitch classes than this is treated as noise
