"""Domain models for the music_note package.

- Core note records (Note, NoNote and the NO_NOTE sentinel)
- Constructor input shapes (NoteInit, NoteLike)
- Construction options (NoteParams)

All models are frozen Pydantic models, so a note never changes after it
has been built.
"""

# Re-export core models
from music_note.models.core_models import (
    NO_NOTE,
    NoNote,
    Note,
    NoteInit,
    NoteLike,
    NoteResult,
)

# Re-export setting models
from music_note.models.settings_models import NoteParams
