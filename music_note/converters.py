"""Conversions between the atomic units a note is made of.

Each function translates one unit into another: letters to diatonic steps
and semitone offsets, accidental strings to alterations, octaves to
semitones, and MIDI keys to frequencies and back. None of them validate
their input; the validators module gates what reaches them.
"""

import math

from music_note.theory import (
    A4_FREQUENCY,
    A4_MIDI,
    BLACK_KEYS,
    DEFAULT_OCTAVE,
    FLATS,
    NOTE_REGEX,
    OCTAVE_RANGE,
    SHARPS,
    WHITE_KEYS,
)

# Semitone noise below this is dropped before rounding frequency to a key
_SEMITONE_EPSILON_DIGITS = 9

_TOKEN_GROUPS = ("letter", "accidental", "octave", "rest")


def tokenize(name: str) -> dict[str, str]:
    """Split a note name into its letter, accidental, octave and leftover parts.

    Args:
        name: Note name such as "A#4" or "bb".

    Returns:
        Dict with the keys "letter", "accidental", "octave" and "rest".
        Absent groups map to an empty string, so a name that does not
        match at all yields a dict of empty strings.
    """
    match = NOTE_REGEX.match(name)
    if match is None:
        return {group: "" for group in _TOKEN_GROUPS}
    return {group: match.group(group) or "" for group in _TOKEN_GROUPS}


def capitalize(letter: str) -> str:
    return letter.upper()


def expand_accidental(token: str) -> str:
    """Replace the legacy 'x' double-sharp shorthand with two '#' characters."""
    return token.replace("x", "##")


def letter_to_step(letter: str) -> int:
    """Diatonic step of an uppercase letter, counting from C = 0."""
    return (ord(letter) + 3) % 7


def letter_to_index(letter: str) -> int:
    """Semitone offset of a natural letter from C."""
    return SHARPS.index(letter)


def accidental_to_alteration(accidental: str) -> int:
    """Signed semitone shift of an accidental string.

    Every '#' adds one semitone and every 'b' removes one; the empty
    accidental is natural.

    Args:
        accidental: A run of '#' or of 'b' characters, or "".

    Returns:
        The alteration, e.g. 2 for "##", -2 for "bb" and 0 for "".
    """
    if not accidental:
        return 0
    return len(accidental) * (-1 if accidental[0] == "b" else 1)


def octave_carry(letter: str, alteration: int) -> int:
    """Octaves an alteration pushes a letter across.

    "Cb" falls into the octave below its written one (-1) and "B#" into the
    octave above (+1). Naturals and most altered notes carry 0.
    """
    return (letter_to_index(letter) + alteration) // OCTAVE_RANGE


def parse_octave(token: str) -> int:
    if not token:
        return DEFAULT_OCTAVE
    return int(token)


def octave_to_semitones(octave: int) -> int:
    """MIDI key of the C that starts `octave`."""
    return OCTAVE_RANGE * (octave + 1)


def midi_to_frequency(midi: int, tuning: float = A4_FREQUENCY) -> float:
    """Equal-tempered frequency of a MIDI key.

    Args:
        midi: MIDI key number.
        tuning: Frequency of A4 (MIDI 69) in Hz.

    Returns:
        The frequency in Hz. Key 69 maps to exactly `tuning`.
    """
    return tuning * 2 ** ((midi - A4_MIDI) / OCTAVE_RANGE)


def midi_to_octave(midi: int) -> int:
    return midi // OCTAVE_RANGE - 1


def frequency_to_midi(frequency: float, tuning: float = A4_FREQUENCY) -> int:
    """MIDI key of a frequency, rounding up to the next key.

    The fractional key is rounded with a ceiling, so anything above a key's
    center belongs to the key above it. Floating point noise smaller than
    a billionth of a semitone is discarded first so that exact key
    frequencies map back onto their own key.

    Args:
        frequency: Positive frequency in Hz.
        tuning: Frequency of A4 (MIDI 69) in Hz.

    Returns:
        The MIDI key number (unbounded; callers validate the range).
    """
    semitones = OCTAVE_RANGE * math.log2(frequency / tuning) + A4_MIDI
    return math.ceil(round(semitones, _SEMITONE_EPSILON_DIGITS))


def chroma_to_pc(chroma: int, sharps: bool = True) -> str:
    """Pitch class name of a chroma in sharp or flat spelling."""
    return SHARPS[chroma] if sharps else FLATS[chroma]


def is_white(chroma: int) -> bool:
    return chroma in WHITE_KEYS


def is_black(chroma: int) -> bool:
    return chroma in BLACK_KEYS


def chroma_to_color(chroma: int) -> str:
    return "white" if is_white(chroma) else "black"
