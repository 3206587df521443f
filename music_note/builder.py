"""A note bound to the operations that take it as their first argument."""

from music_note.models import NoteLike, NoteParams, NoteResult
from music_note.operations import cmp, compare, distance, to_note, transpose


class NoteBuilder:
    """One fixed note with its derived operations as methods.

    The note is built once when the builder is created; every method
    measures or moves from it without rebuilding it.

    Example:
        >>> a4 = NoteBuilder("A4")
        >>> a4.distance_to("C5")
        3
        >>> a4.transpose(1).note.name
        'A#4'
    """

    def __init__(self, source: NoteLike, params: NoteParams | None = None):
        self.params = params or NoteParams()
        self.note: NoteResult = to_note(source, self.params)

    def __repr__(self) -> str:
        return f"NoteBuilder({self.note.name!r})"

    @property
    def valid(self) -> bool:
        return self.note.valid

    def transpose(self, amount: int | float, prop: str = "midi") -> "NoteBuilder":
        """Transpose the bound note.

        Args:
            amount: Amount to add to `prop`.
            prop: "midi", "frequency" or "octave".

        Returns:
            A new builder around the transposed note.
        """
        return NoteBuilder(transpose(self.note, amount, prop, self.params), self.params)

    def distance_to(self, other: NoteLike, prop: str = "midi") -> float:
        return distance(self.note, to_note(other, self.params), prop)

    def compare_to(self, other: NoteLike, prop: str = "midi") -> int | None:
        """Order the bound note against `other`: -1, 0, 1, or None if invalid."""
        return cmp(self.note, to_note(other, self.params), prop)

    def _compare(self, op: str, other: NoteLike, prop: str) -> bool:
        return compare(op, self.note, to_note(other, self.params), prop)

    def lt(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("lt", other, prop)

    def leq(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("leq", other, prop)

    def eq(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("eq", other, prop)

    def neq(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("neq", other, prop)

    def gt(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("gt", other, prop)

    def geq(self, other: NoteLike, prop: str = "midi") -> bool:
        return self._compare("geq", other, prop)
