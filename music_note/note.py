"""
Note construction from a name, a MIDI key or a frequency.

Every path funnels into `from_name`: MIDI keys are spelled into a name and
frequencies are rounded to a MIDI key first. Bad input never raises; it
produces the NO_NOTE sentinel.
"""

import logging
import math
from typing import Any

from music_note.converters import (
    accidental_to_alteration,
    capitalize,
    chroma_to_color,
    chroma_to_pc,
    expand_accidental,
    frequency_to_midi,
    letter_to_index,
    letter_to_step,
    midi_to_frequency,
    midi_to_octave,
    octave_to_semitones,
    parse_octave,
    tokenize,
)
from music_note.models import NO_NOTE, Note, NoteResult
from music_note.theory import A4_FREQUENCY, OCTAVE_RANGE
from music_note.validators import is_frequency, is_midi, is_name

logger = logging.getLogger(__name__)


def from_name(name: str, tuning: float = A4_FREQUENCY) -> NoteResult:
    """Build a note from its textual name.

    Accidentals that push the letter out of its written octave move the
    note into the neighbouring octave: "Cb4" is the key below C4 and is
    rendered "Cb3".

    Args:
        name: Note name, e.g. "A#4", "eb" or "Cx-1".
        tuning: Frequency of A4 in Hz.

    Returns:
        The note, or NO_NOTE if the name does not follow the grammar.
    """
    if not is_name(name):
        logger.debug(f"Invalid note name: {name!r}")
        return NO_NOTE

    tokens = tokenize(name)

    letter = capitalize(tokens["letter"])  # A
    step = letter_to_step(letter)  # 5

    accidental = expand_accidental(tokens["accidental"])  # #
    alteration = accidental_to_alteration(accidental)  # +1

    # Semitones from C, before and after the accidental is applied
    offset = letter_to_index(letter)  # 9
    altered = offset + alteration  # 10

    # An accidental can slip the note into the previous or next octave
    carry = altered // OCTAVE_RANGE  # 0
    try:
        octave = parse_octave(tokens["octave"]) + carry  # 4
    except ValueError:
        logger.debug(f"Note octave too long to parse: {name[:32]!r}")
        return NO_NOTE

    pc = f"{letter}{accidental}"  # A#
    chroma = altered % OCTAVE_RANGE  # 10
    midi = octave_to_semitones(octave) + chroma  # 70

    try:
        frequency = midi_to_frequency(midi, tuning)  # 466.16
    except OverflowError:
        frequency = math.inf
    if not is_frequency(frequency):
        logger.debug(f"Note frequency out of float range: {name!r}")
        return NO_NOTE

    return Note(
        name=f"{pc}{octave}",
        letter=letter,
        step=step,
        octave=octave,
        accidental=accidental,
        alteration=alteration,
        pc=pc,
        chroma=chroma,
        midi=midi,
        frequency=frequency,
        color=chroma_to_color(chroma),
    )


def from_midi(
    midi: int, sharps: bool = True, tuning: float = A4_FREQUENCY
) -> NoteResult:
    """Build a note from a MIDI key number.

    Args:
        midi: MIDI key number (0-135).
        sharps: Spell black keys with sharps (True) or flats (False).
        tuning: Frequency of A4 in Hz.

    Returns:
        The note, or NO_NOTE if `midi` is not an integer in range.
    """
    if not is_midi(midi):
        logger.debug(f"Invalid MIDI key: {midi!r}")
        return NO_NOTE

    octave = midi_to_octave(midi)
    pc = chroma_to_pc(midi % OCTAVE_RANGE, sharps)

    # Going through the name fills letter, accidental and alteration
    return from_name(f"{pc}{octave}", tuning)


def from_frequency(
    frequency: float, sharps: bool = True, tuning: float = A4_FREQUENCY
) -> NoteResult:
    """Build the note whose key a frequency rounds up to.

    Args:
        frequency: Positive frequency in Hz.
        sharps: Spell black keys with sharps (True) or flats (False).
        tuning: Frequency of A4 in Hz.

    Returns:
        The note, or NO_NOTE if the frequency is not positive or falls
        outside the MIDI range.
    """
    if not is_frequency(frequency):
        logger.debug(f"Invalid frequency: {frequency!r}")
        return NO_NOTE

    return from_midi(frequency_to_midi(frequency, tuning), sharps, tuning)


def make_note(
    name: Any = None,
    midi: Any = None,
    frequency: Any = None,
    tuning: Any = A4_FREQUENCY,
    sharps: bool = True,
) -> NoteResult:
    """Build a note from whichever representation is given.

    A valid name wins over a MIDI key, which wins over a frequency.

    Args:
        name: Note name such as "C#4".
        midi: MIDI key number.
        frequency: Frequency in Hz.
        tuning: Frequency of A4 in Hz (default 440.0).
        sharps: Spelling of black keys built from a number.

    Returns:
        The note, or NO_NOTE if no argument describes one.
    """
    if not is_frequency(tuning):
        logger.debug(f"Invalid tuning reference: {tuning!r}")
        return NO_NOTE

    if is_name(name):
        return from_name(name, tuning)
    if is_midi(midi):
        return from_midi(midi, sharps, tuning)
    if is_frequency(frequency):
        return from_frequency(frequency, sharps, tuning)

    logger.debug(
        f"No note in constructor input: name={name!r}, midi={midi!r}, "
        f"frequency={frequency!r}"
    )
    return NO_NOTE
