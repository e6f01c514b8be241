"""The chess board: a sparse mapping from squares to pieces."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .pieces import ChessError, Piece, Position, create_piece
from .terminal import Color, color_bg, color_fg, set_default

COLUMNS = "ABCDEFGH"
ROWS = "12345678"

_HEADER = " " + " ".join(COLUMNS)


def _key(position: Position) -> tuple[str, str]:
    return position[0], position[1]


class Board:
    """An 8x8 board holding pieces keyed by (column, row), e.g. ("E", "2")."""

    def __init__(self) -> None:
        self._squares: dict[tuple[str, str], Piece] = {}

    def __getitem__(self, position: Position) -> Piece | None:
        """The piece on a square, or None if it is empty."""
        return self._squares.get(_key(position))

    def __str__(self) -> str:
        """One line per row from 8 down to 1, '-' marking an empty square."""
        return "".join(
            "".join(
                piece.to_ascii() if (piece := self[(col, row)]) else "-"
                for col in COLUMNS
            )
            + "\n"
            for row in reversed(ROWS)
        )

    def _occupied(self) -> Iterator[tuple[tuple[str, str], Piece]]:
        """Occupied squares in (column, row) order."""
        return iter(sorted(self._squares.items()))

    def add_piece(self, position: Position, designator: str) -> None:
        """Place a new piece named by designator on an empty square.

        Raises ChessError for an off-board square, an occupied square or
        an unknown designator, checked in that order.
        """
        if not self.position_exists(position):
            raise ChessError("invalid position")
        key = _key(position)
        if key in self._squares:
            raise ChessError("position is occupied")
        self._squares[key] = create_piece(designator)

    def move_piece(self, start: Position, end: Position) -> None:
        """Move whatever stands on start to end, replacing anything there."""
        self.remove_piece(end)
        piece = self._squares.pop(_key(start), None)
        if piece is not None:
            self._squares[_key(end)] = piece

    def remove_piece(self, position: Position) -> None:
        """Clear a square; clearing an empty square does nothing."""
        self._squares.pop(_key(position), None)

    def render(self) -> str:
        """The board drawn with ANSI colours, as display() prints it."""
        lines = ["b\n", _HEADER + "\n"]
        for row in reversed(ROWS):
            cells = [row]
            for col in COLUMNS:
                if (ord(col) + ord(row)) % 2 == 0:
                    cells.append(color_bg(Color.WHITE) + color_fg(True, Color.BLUE))
                else:
                    cells.append(color_bg(Color.BLUE) + color_fg(True, Color.WHITE))
                piece = self[(col, row)]
                cells.append(piece.to_ascii() + " " if piece else "  ")
            cells.append(set_default())
            cells.append(row + "\n")
            lines.append("".join(cells))
        lines.append(_HEADER + "\n")
        lines.append("w\n")
        return "".join(lines)

    def display(self, file: TextIO | None = None) -> None:
        """Print the coloured board to file (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())

    def has_valid_kings(self) -> bool:
        """True if there is exactly one white and one black king."""
        kings = [piece.to_ascii() for _, piece in self._occupied()]
        return kings.count("K") == 1 and kings.count("k") == 1

    @staticmethod
    def position_exists(position: Position) -> bool:
        """True if position names a square on the board."""
        try:
            col, row = position
        except (TypeError, ValueError):
            return False
        return (
            isinstance(col, str)
            and isinstance(row, str)
            and len(col) == 1
            and len(row) == 1
            and "A" <= col <= "H"
            and "1" <= row <= "8"
        )

    def find_king(self, white: bool) -> tuple[str, str]:
        """Square of the given side's king.

        Raises ChessError if that side has no king on the board.
        """
        wanted = "K" if white else "k"
        for square, piece in self._occupied():
            if piece.to_ascii() == wanted:
                return square
        raise ChessError("no king on board")

    def copy(self) -> Board:
        """An independent board with fresh pieces on the same squares."""
        clone = Board()
        for square, piece in self._occupied():
            clone.add_piece(square, piece.to_ascii())
        return clone