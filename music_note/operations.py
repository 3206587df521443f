"""
Derived operations on notes.

Transposition, distance, comparison and enharmonic respelling. Each
operation first turns its note-shaped arguments into canonical records,
so the arithmetic only ever sees validated fields.

An invalid operand short-circuits the operation: transpose gives NO_NOTE,
distance gives NaN, compare gives False and cmp gives None.
"""

import logging
import math
import operator
from collections.abc import Callable, Mapping
from typing import Any

from music_note.cache import cached_note
from music_note.converters import chroma_to_pc, octave_carry
from music_note.errors import OperatorError, PropertyError
from music_note.models import NO_NOTE, NoNote, Note, NoteLike, NoteParams, NoteResult
from music_note.note import make_note
from music_note.validators import is_key

logger = logging.getLogger(__name__)

TRANSPOSABLE_PROPERTIES = ("midi", "frequency", "octave")
METRIC_PROPERTIES = ("midi", "frequency", "chroma", "step", "octave")

COMPARE_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "lt": operator.lt,
    "leq": operator.le,
    "eq": operator.eq,
    "neq": operator.ne,
    "gt": operator.gt,
    "geq": operator.ge,
}

_DEFAULT_PARAMS = NoteParams()


def to_note(source: NoteLike, params: NoteParams | None = None) -> NoteResult:
    """Turn anything note-shaped into a note record.

    Args:
        source: A Note or NoNote (returned as is), a note name, or a dict
            of constructor arguments ("name", "midi", "frequency",
            "tuning", "sharps").
        params: Tuning and spelling used where `source` does not set them.

    Returns:
        The note record, or NO_NOTE for anything that does not describe
        a note.
    """
    params = params or _DEFAULT_PARAMS

    if isinstance(source, (Note, NoNote)):
        return source
    if isinstance(source, str):
        return cached_note(source, None, None, params.tuning, params.sharps)
    if isinstance(source, Mapping):
        return make_note(
            name=source.get("name"),
            midi=source.get("midi"),
            frequency=source.get("frequency"),
            tuning=source.get("tuning", params.tuning),
            sharps=source.get("sharps", params.sharps),
        )

    logger.debug(f"Cannot build a note from {type(source).__name__}: {source!r}")
    return NO_NOTE


def _check_property(prop: str, allowed: tuple[str, ...]) -> None:
    if prop not in allowed:
        raise PropertyError(
            f"Unknown note property {prop!r}; expected one of {', '.join(allowed)}"
        )


def _whole_amount(amount: int | float) -> int | None:
    """Integral value of an amount such as 2 or 2.0, None for 2.5 or NaN."""
    if isinstance(amount, int):
        return amount
    if not float(amount).is_integer():
        return None
    return int(amount)


def transpose(
    note: NoteLike,
    amount: int | float,
    prop: str = "midi",
    params: NoteParams | None = None,
) -> NoteResult:
    """Move a note by an amount of one of its numeric fields.

    Args:
        note: Note to transpose.
        amount: Semitones for "midi", Hz for "frequency", octaves for "octave".
        prop: Field to move: "midi", "frequency" or "octave".
        params: Tuning and spelling for building the source and the result.

    Returns:
        A new note. Octave transposition keeps the spelling of the source
        and moves it by exactly twelve semitones per octave. NO_NOTE if the
        source is invalid or the result falls out of range.

    Raises:
        PropertyError: If `prop` is not a transposable field.
    """
    _check_property(prop, TRANSPOSABLE_PROPERTIES)
    params = params or _DEFAULT_PARAMS

    source = to_note(note, params)
    if not source.valid:
        logger.debug(f"Cannot transpose an invalid note: {note!r}")
        return NO_NOTE

    if prop == "octave":
        # The record octave already includes the accidental carry, which
        # re-parsing the name would apply a second time
        written = source.octave - octave_carry(source.letter, source.alteration)
        steps = _whole_amount(amount)
        if steps is None:
            logger.debug(f"Cannot transpose by a fractional octave: {amount!r}")
            return NO_NOTE
        return make_note(name=f"{source.pc}{written + steps}", tuning=params.tuning)

    if prop == "midi":
        steps = _whole_amount(amount)
        if steps is None:
            logger.debug(f"Cannot transpose by a fractional semitone: {amount!r}")
            return NO_NOTE
        amount = steps

    return make_note(
        **{prop: getattr(source, prop) + amount},
        tuning=params.tuning,
        sharps=params.sharps,
    )


def distance(note: NoteLike, other: NoteLike, prop: str = "midi") -> float:
    """Signed difference of one field between two notes.

    Computes `other.prop - note.prop`. Chroma distance is a plain
    subtraction of two values in 0-11, not the shortest way round the
    pitch circle: distance("B4", "C5", "chroma") is -11.

    Args:
        note: Note to measure from.
        other: Note to measure to.
        prop: One of "midi", "frequency", "chroma", "step" or "octave".

    Returns:
        The difference, or NaN if either note is invalid.

    Raises:
        PropertyError: If `prop` is not a metric field.
    """
    _check_property(prop, METRIC_PROPERTIES)

    first, second = to_note(note), to_note(other)
    if not (first.valid and second.valid):
        logger.debug(f"Distance with an invalid note: {note!r}, {other!r}")
        return math.nan

    return getattr(second, prop) - getattr(first, prop)


def compare(op: str, note: NoteLike, other: NoteLike, prop: str = "midi") -> bool:
    """Compare one field of two notes with a relational operator.

    Args:
        op: One of "lt", "leq", "eq", "neq", "gt" or "geq".
        note: Left-hand note.
        other: Right-hand note.
        prop: One of "midi", "frequency", "chroma", "step" or "octave".

    Returns:
        The comparison result; False if either note is invalid.

    Raises:
        OperatorError: If `op` is not a known operator.
        PropertyError: If `prop` is not a metric field.
    """
    if op not in COMPARE_OPERATORS:
        raise OperatorError(
            f"Unknown comparison {op!r}; expected one of {', '.join(COMPARE_OPERATORS)}"
        )
    _check_property(prop, METRIC_PROPERTIES)

    first, second = to_note(note), to_note(other)
    if not (first.valid and second.valid):
        logger.debug(f"Comparison with an invalid note: {note!r}, {other!r}")
        return False

    return COMPARE_OPERATORS[op](getattr(first, prop), getattr(second, prop))


def cmp(note: NoteLike, other: NoteLike, prop: str = "midi") -> int | None:
    """Three-way comparison of one field: -1, 0 or 1, None if either is invalid."""
    _check_property(prop, METRIC_PROPERTIES)

    first, second = to_note(note), to_note(other)
    if not (first.valid and second.valid):
        logger.debug(f"Ordering with an invalid note: {note!r}, {other!r}")
        return None

    a, b = getattr(first, prop), getattr(second, prop)
    return (a > b) - (a < b)


def simplify(name: str, keep_accidental: bool = True) -> str:
    """Respell a note with a single accidental at most.

    The note keeps its chroma and octave. With `keep_accidental` sharps
    stay sharps and everything else is spelled with flats; without it the
    choice is reversed.

    Args:
        name: Note name, e.g. "C##4" or "Fb4".
        keep_accidental: Keep the accidental direction of `name`.

    Returns:
        The respelled name (e.g. "D4", "E4"), or "" if `name` is not a note.
    """
    note = to_note(name)
    if not note.valid:
        return ""

    is_sharp = note.alteration > 0
    use_sharps = is_sharp == keep_accidental

    return f"{chroma_to_pc(note.chroma, use_sharps)}{note.octave}"


def enharmonic(name: str) -> str:
    """The other spelling of a note at the same pitch, e.g. "C#4" -> "Db4"."""
    return simplify(name, False)


def note_property(field: str) -> Callable[[NoteLike], Any]:
    """Make an accessor for one note field.

    Args:
        field: Name of a note record field, e.g. "midi" or "pc".

    Returns:
        A function taking anything note-shaped and returning that field.
        Invalid notes yield None for every field except "name" ("") and
        "valid" (False).

    Raises:
        PropertyError: If `field` is not a note record field.
    """
    if not is_key(field):
        raise PropertyError(f"Unknown note field {field!r}")

    def getter(note: NoteLike) -> Any:
        return getattr(to_note(note), field)

    return getter
