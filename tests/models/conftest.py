import pytest
from music_note.models import Note


@pytest.fixture
def valid_note_fields():
    # Field values of A#4 as the constructor derives them
    return {
        "name": "A#4",
        "letter": "A",
        "step": 5,
        "octave": 4,
        "accidental": "#",
        "alteration": 1,
        "pc": "A#",
        "chroma": 10,
        "midi": 70,
        "frequency": 466.1637615180899,
        "color": "black",
    }


@pytest.fixture
def valid_note(valid_note_fields):
    return Note(**valid_note_fields)
