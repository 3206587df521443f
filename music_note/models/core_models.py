"""Core domain models for single notes."""

from typing import Literal, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field

NoteLetter = Literal["A", "B", "C", "D", "E", "F", "G"]
NoteColor = Literal["white", "black"]


class Note(BaseModel):
    """A single pitch with every representation derived and consistent.

    A note is built from exactly one of a name, a MIDI key or a frequency,
    and every other field is derived from it. Records are frozen: anything
    that "changes" a note builds a new one.

    Attributes:
        name: Canonical name, pitch class followed by octave (e.g. "A#4").
        letter: Base letter, uppercase.
        step: Diatonic position of the letter, C = 0 up to B = 6.
        octave: Octave in scientific pitch notation, after accidental carry.
        accidental: Run of '#' or 'b' characters, empty for naturals.
        alteration: Signed semitone shift of the accidental.
        pc: Pitch class, letter plus accidental without octave (e.g. "A#").
        chroma: Pitch class as an integer from 0 (C) to 11 (B).
        midi: MIDI key number, 12 * (octave + 1) + chroma.
        frequency: Equal-tempered frequency in Hz.
        color: Piano key colour of the chroma.
        valid: Always True; invalid input produces a NoNote instead.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=2, description="Canonical note name")
    letter: NoteLetter = Field(..., description="Base pitch letter")
    step: int = Field(..., ge=0, le=6, description="Diatonic step, C = 0")
    octave: int = Field(..., description="Octave number")
    accidental: str = Field(
        "", pattern=r"^(#*|b*)$", description="Run of '#' or 'b' characters"
    )
    alteration: int = Field(0, description="Signed semitone shift of the accidental")
    pc: str = Field(..., min_length=1, description="Pitch class without octave")
    chroma: int = Field(..., ge=0, le=11, description="Pitch class index, C = 0")
    midi: int = Field(..., description="MIDI key number")
    frequency: float = Field(..., gt=0, description="Frequency in Hz")
    color: NoteColor = Field(..., description="Piano key colour")
    valid: Literal[True] = True

    def __str__(self) -> str:
        return self.name


class NoNote(BaseModel):
    """The result of a failed note construction.

    Carries an empty name and no other information, so it can never be
    mistaken for a real note. Callers check `valid` before reading fields.
    """

    model_config = ConfigDict(frozen=True)

    name: Literal[""] = ""
    letter: None = None
    step: None = None
    octave: None = None
    accidental: None = None
    alteration: None = None
    pc: None = None
    chroma: None = None
    midi: None = None
    frequency: None = None
    color: None = None
    valid: Literal[False] = False

    def __str__(self) -> str:
        return self.name


NO_NOTE = NoNote()

NoteResult = Union[Note, NoNote]


class NoteInit(TypedDict, total=False):
    """Constructor arguments: one of name, midi or frequency, plus options."""

    name: str
    midi: int
    frequency: float
    tuning: float
    sharps: bool


# Anything the derived operations can turn into a note
NoteLike = Union[Note, NoNote, NoteInit, str]
