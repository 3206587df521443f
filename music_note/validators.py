"""Guard predicates consumed by the note constructor.

Every predicate is total: it accepts any Python object and answers with a
bool, never raising.
"""

import math
from numbers import Integral, Real
from typing import Any

from music_note.converters import tokenize
from music_note.theory import KEYS, MIDI_MAX, MIDI_MIN


def _is_integer(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_name(value: Any) -> bool:
    """Check that a value is a note name such as "C#4", "eb" or "Bbb-1".

    Args:
        value: Object to check.

    Returns:
        True if `value` is a string made of a letter, an optional run of
        one accidental kind and an optional signed octave, with nothing
        left over.
    """
    if not isinstance(value, str):
        return False
    tokens = tokenize(value)
    return bool(tokens["letter"]) and not tokens["rest"]


def is_midi(value: Any) -> bool:
    return _is_integer(value) and MIDI_MIN <= value <= MIDI_MAX


def is_frequency(value: Any) -> bool:
    """Check that a value is a finite, positive number of Hz."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value > 0


def is_chroma(value: Any) -> bool:
    return _is_integer(value) and 0 <= value <= 11


def is_key(value: Any) -> bool:
    """Check that a value names a note record field."""
    return isinstance(value, str) and value in KEYS


def is_note(value: Any) -> bool:
    """Check that a value builds a valid note.

    Accepts anything the derived operations accept: a note record, a note
    name or a dict of constructor arguments.
    """
    # Imported here; operations depends on this module
    from music_note.operations import to_note

    return to_note(value).valid
