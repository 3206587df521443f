"""Exceptions raised for programming errors.

Bad note input never raises; it produces the NO_NOTE sentinel. These
exceptions are reserved for calls that name a field, property or operator
the package does not know.
"""


class NoteError(Exception):
    """Base exception for music_note errors."""

    pass


class PropertyError(NoteError):
    """Exception raised when a note field or operation property is unknown."""

    pass


class OperatorError(NoteError):
    """Exception raised when a comparison operator is unknown."""

    pass
