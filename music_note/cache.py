"""Caching for note construction.

Notes are frozen, so a record built once can be handed to every caller
that asks for the same input. Derived operations build their operands from
names through this cache, which saves re-parsing names that recur.
"""

from functools import lru_cache

from music_note.models import NoteResult
from music_note.note import make_note
from music_note.theory import A4_FREQUENCY

NOTE_CACHE_SIZE = 512


@lru_cache(maxsize=NOTE_CACHE_SIZE, typed=True)
def cached_note(
    name: str | None = None,
    midi: int | None = None,
    frequency: float | None = None,
    tuning: float = A4_FREQUENCY,
    sharps: bool = True,
) -> NoteResult:
    """Cached version of note construction.

    Results are cached on every argument, so the same name built with a
    different tuning or spelling is a separate entry.

    Args:
        name: Note name such as "C#4".
        midi: MIDI key number.
        frequency: Frequency in Hz.
        tuning: Frequency of A4 in Hz.
        sharps: Spelling of black keys built from a number.

    Returns:
        The same record make_note would return, shared between callers.
    """
    return make_note(name, midi, frequency, tuning, sharps)


def clear_all_caches() -> None:
    """Clear the note construction cache."""
    cached_note.cache_clear()
