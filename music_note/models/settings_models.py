"""Parameter models for note construction.

This module defines the Pydantic model holding the options that are not
part of a note's identity: the tuning reference and the spelling used when
a note is built from a number. Derived operations take it to build their
operands the same way.
"""

from pydantic import BaseModel, ConfigDict, Field

from music_note.theory import A4_FREQUENCY


class NoteParams(BaseModel):
    """Configuration parameters for building notes.

    Controls how MIDI keys and frequencies are turned into notes. The
    tuning fixes the frequency of A4; the spelling preference decides
    whether black keys are written with sharps or flats.

    Attributes:
        tuning: Frequency of A4 in Hz (finite and positive, default 440.0).
        sharps: Spell black keys with sharps when True, flats when False.
    """

    model_config = ConfigDict(frozen=True)

    tuning: float = Field(
        A4_FREQUENCY, gt=0.0, allow_inf_nan=False, description="Frequency of A4 in Hz"
    )
    sharps: bool = Field(True, description="Spell black keys with sharps")
