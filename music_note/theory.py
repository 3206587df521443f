"""Static pitch tables shared by the whole package.

Every table here is built once at import time and is immutable. Nothing in
the package redefines or mutates them per call.
"""

import re

# Field names of a note record, in rendering order
KEYS: tuple[str, ...] = (
    "name",
    "letter",
    "step",
    "octave",
    "accidental",
    "alteration",
    "pc",
    "chroma",
    "midi",
    "frequency",
    "color",
    "valid",
)

# Tuning reference: A4 sounds at 440 Hz and is MIDI key 69
A4_FREQUENCY = 440.0
A4_MIDI = 69

DEFAULT_OCTAVE = 4
OCTAVE_RANGE = 12

# Inclusive range of MIDI keys a note may be built from
MIDI_MIN = 0
MIDI_MAX = 135

LETTERS = "CDEFGAB"

# All pitch classes in standard use, naturals followed by their accidentals
NOTES: tuple[str, ...] = tuple(
    "C C# Db D D# Eb E F F# Gb G G# Ab A A# Bb B".split(" ")
)


def _select(accidentals: str) -> tuple[str, ...]:
    """Filter NOTES by the accidental character each one carries (" " = natural)."""
    return tuple(note for note in NOTES if (note[1:] or " ") in accidentals)


SHARPS = _select("# ")  # C, C#, D, D#, E, F, F#, G, G#, A, A#, B
FLATS = _select("b ")  # C, Db, D, Eb, E, F, Gb, G, Ab, A, Bb, B
NATURALS = _select(" ")
SHARP_KEYS = _select("#")
FLAT_KEYS = _select("b")

WHITE_KEYS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
BLACK_KEYS: tuple[int, ...] = (1, 3, 6, 8, 10)

# letter, then one run of exclusively '#', 'b' or 'x' (= '##'), then an
# optional signed octave. Anything left over lands in `rest`.
NOTE_REGEX = re.compile(
    r"^(?P<letter>[a-gA-G])"
    r"(?P<accidental>#+|b+|x+|)"
    r"(?P<octave>-?[0-9]+)?"
    r"(?P<rest>.*)$",
    re.DOTALL,
)
