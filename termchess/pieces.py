"""Chess pieces, their movement shapes and the designator factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

Position = Sequence[str]
"""A square as (column, row), e.g. ("E", "2"); a two-character string works too."""


class ChessError(Exception):
    """Raised when a chess rule or board operation is violated."""


def _delta(start: Position, end: Position) -> tuple[int, int]:
    """Return the signed (column, row) difference from start to end."""
    return ord(end[0]) - ord(start[0]), ord(end[1]) - ord(start[1])


class Piece(ABC):
    """A chess piece of one colour."""

    symbol: ClassVar[str]
    glyphs: ClassVar[tuple[str, str]]
    value: ClassVar[int]

    def __init__(self, is_white: bool) -> None:
        self.is_white = bool(is_white)

    def __repr__(self) -> str:
        colour = "white" if self.is_white else "black"
        return f"{type(self).__name__}({colour})"

    @abstractmethod
    def legal_move_shape(self, start: Position, end: Position) -> bool:
        """Whether start -> end is a valid non-capturing move shape."""

    def legal_capture_shape(self, start: Position, end: Position) -> bool:
        """Whether start -> end is a valid capturing move shape."""
        return self.legal_move_shape(start, end)

    def to_ascii(self) -> str:
        """Upper-case letter for white, lower-case for black."""
        return self.symbol if self.is_white else self.symbol.lower()

    def to_unicode(self) -> str:
        """The Unicode chess glyph for this piece."""
        white_glyph, black_glyph = self.glyphs
        return white_glyph if self.is_white else black_glyph

    def point_value(self) -> int:
        """Material value of the piece."""
        return self.value


class King(Piece):
    """Moves one square in any direction."""

    symbol = "K"
    glyphs = ("\u2654", "\u265A")
    value = 0

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        cols, rows = (abs(d) for d in _delta(start, end))
        return (cols, rows) in {(1, 1), (0, 1), (1, 0)}


class Queen(Piece):
    """Moves any distance along a row, column or diagonal."""

    symbol = "Q"
    glyphs = ("\u2655", "\u265B")
    value = 9

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        if start[0] == end[0] or start[1] == end[1]:
            return True
        cols, rows = _delta(start, end)
        return abs(cols) == abs(rows)


class Bishop(Piece):
    """Moves any distance along a diagonal."""

    symbol = "B"
    glyphs = ("\u2657", "\u265D")
    value = 3

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        cols, rows = _delta(start, end)
        return abs(cols) == abs(rows)


class Knight(Piece):
    """Moves in an L shape, jumping over other pieces."""

    symbol = "N"
    glyphs = ("\u2658", "\u265E")
    value = 3

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        cols, rows = (abs(d) for d in _delta(start, end))
        return (cols, rows) in {(2, 1), (1, 2)}


class Rook(Piece):
    """Moves any distance along a row or column."""

    symbol = "R"
    glyphs = ("\u2656", "\u265C")
    value = 5

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        return start[0] == end[0] or start[1] == end[1]


class Pawn(Piece):
    """Moves forward one square (two from its home row) and captures diagonally."""

    symbol = "P"
    glyphs = ("\u2659", "\u265F")
    value = 1

    @property
    def _forward(self) -> int:
        return 1 if self.is_white else -1

    @property
    def _home_row(self) -> str:
        return "2" if self.is_white else "7"

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        cols, rows = _delta(start, end)
        if cols != 0:
            return False
        if rows == self._forward:
            return True
        return rows == 2 * self._forward and start[1] == self._home_row

    def legal_capture_shape(self, start: Position, end: Position) -> bool:
        cols, rows = _delta(start, end)
        return abs(cols) == 1 and rows == self._forward


class Mystery(Piece):
    """A placeholder piece that has no legal moves."""

    symbol = "M"
    glyphs = ("\u2687", "\u2689")
    value = 3

    def legal_move_shape(self, start: Position, end: Position) -> bool:
        return False


_PIECE_TYPES: dict[str, type[Piece]] = {
    cls.symbol: cls for cls in (King, Queen, Bishop, Knight, Rook, Pawn, Mystery)
}


def create_piece(designator: str) -> Piece:
    """Build the piece named by a designator letter; upper case means white.

    Raises ChessError("invalid designator") for anything else.
    """
    if not isinstance(designator, str) or len(designator) != 1:
        raise ChessError("invalid designator")
    piece_type = _PIECE_TYPES.get(designator.upper())
    if piece_type is None:
        raise ChessError("invalid designator")
    return piece_type(designator.isupper())