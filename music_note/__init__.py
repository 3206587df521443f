"""Single-note pitch library.

This package models one musical pitch as an immutable record and provides
pure functions to build, validate, compare, transpose and measure
distances between notes. A note can be built from any of three
representations, and the other two are derived from it:

1. A name in scientific pitch notation ("A#4", "eb", "Cb-1")
2. A MIDI key number (0-135)
3. A frequency in Hz, rounded up to the nearest key

Invalid input never raises; it produces the NO_NOTE sentinel, whose
`valid` field is False.

Example:
    Basic usage:

    >>> from music_note import make_note, transpose, distance
    >>>
    >>> note = make_note(name="A4")
    >>> note.midi, note.frequency
    (69, 440.0)
    >>> transpose(note, 1).name
    'A#4'
    >>> distance("C4", "C5")
    12
"""

from music_note.builder import NoteBuilder
from music_note.cache import cached_note, clear_all_caches
from music_note.errors import NoteError, OperatorError, PropertyError
from music_note.models import (
    NO_NOTE,
    NoNote,
    Note,
    NoteInit,
    NoteLike,
    NoteParams,
    NoteResult,
)
from music_note.note import from_frequency, from_midi, from_name, make_note
from music_note.operations import (
    cmp,
    compare,
    distance,
    enharmonic,
    note_property,
    simplify,
    to_note,
    transpose,
)
from music_note.validators import (
    is_chroma,
    is_frequency,
    is_key,
    is_midi,
    is_name,
    is_note,
)
