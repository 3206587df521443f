import pytest

from music_note.cache import clear_all_caches
from music_note.note import make_note


@pytest.fixture(autouse=True)
def fresh_cache():
    # Cache statistics must not leak between tests
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def a4():
    return make_note(name="A4")


@pytest.fixture
def middle_c():
    return make_note(midi=60)


@pytest.fixture
def spelled_names():
    # Plain, sharp, flat, double and carrying spellings across octaves
    return ["C4", "A4", "F#3", "Bb2", "Eb5", "G#6", "C##4", "Dbb4", "B#3", "Cb5"]
