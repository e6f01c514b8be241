"""Game state: the board, whose turn it is, and the rules that tie them."""

from __future__ import annotations

from typing import TextIO

from .board import COLUMNS, ROWS, Board
from .pieces import ChessError, Position

_STANDARD_LAYOUT = (
    ("1", "RNBQKBNR"),
    ("2", "P" * 8),
    ("7", "p" * 8),
    ("8", "rnbqkbnr"),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _squares() -> list[tuple[str, str]]:
    """Every square, column by column, row 1 upwards."""
    return [(col, row) for col in COLUMNS for row in ROWS]


class Game:
    """A chess game: a board plus the side to move."""

    def __init__(self) -> None:
        self._board = Board()
        self._white_turn = True
        for row, pieces in _STANDARD_LAYOUT:
            for col, designator in zip(COLUMNS, pieces):
                self._board.add_piece((col, row), designator)

    @classmethod
    def _from_state(cls, board: Board, white_turn: bool) -> Game:
        game = cls.__new__(cls)
        game._board = board
        game._white_turn = white_turn
        return game

    def __str__(self) -> str:
        """The board rows followed by 'w' or 'b' for the side to move."""
        return str(self._board) + ("w" if self._white_turn else "b")

    def turn_white(self) -> bool:
        """True if it is white's turn."""
        return self._white_turn

    def display(self, file: TextIO | None = None) -> None:
        """Print the coloured board to file (standard output by default)."""
        self._board.display(file)

    def is_valid_game(self) -> bool:
        """True if each side has exactly one king."""
        return self._board.has_valid_kings()

    def make_move(self, start: Position, end: Position) -> None:
        """Make a move for the side to play and pass the turn.

        Raises ChessError describing the first rule the move breaks.
        """
        board = self._board
        if not board.position_exists(start):
            raise ChessError("start position is not on board")
        if not board.position_exists(end):
            raise ChessError("end position is not on board")
        piece = board[start]
        if piece is None:
            raise ChessError("no piece at start position")
        if piece.is_white != self._white_turn:
            raise ChessError("piece color and turn do not match")

        target = board[end]
        if target is None:
            if not piece.legal_move_shape(start, end):
                raise ChessError("illegal move shape")
        else:
            if target.is_white == self._white_turn:
                raise ChessError("cannot capture own piece")
            if not piece.legal_capture_shape(start, end):
                raise ChessError("illegal capture shape")

        if self.path_blocked(start, end):
            raise ChessError("path is not clear")

        trial = self.copy()
        trial._apply(start, end)
        if trial.in_check(self._white_turn):
            raise ChessError("move exposes check")

        self._apply(start, end)
        self._white_turn = not self._white_turn

    def _apply(self, start: Position, end: Position) -> None:
        self._board.move_piece(start, end)
        self.promote_pawn(end)

    def in_check(self, white: bool) -> bool:
        """True if the given side's king is attacked.

        A side with no king on the board is never in check.
        """
        try:
            king = self._board.find_king(white)
        except ChessError:
            return False
        for square in _squares():
            piece = self._board[square]
            if (
                piece is not None
                and piece.is_white != white
                and piece.legal_capture_shape(square, king)
                and not self.path_blocked(square, king)
            ):
                return True
        return False

    def _has_legal_move(self, white: bool) -> bool:
        """True if some piece of the given side can make a legal move now."""
        trial = self.copy()
        for start in _squares():
            piece = trial._board[start]
            if piece is None or piece.is_white != white:
                continue
            for end in _squares():
                try:
                    trial.make_move(start, end)
                except ChessError:
                    continue
                return True
        return False

    def in_mate(self, white: bool) -> bool:
        """True if the given side is in check and has no legal move."""
        return self.in_check(white) and not self._has_legal_move(white)

    def in_stalemate(self, white: bool) -> bool:
        """True if the given side is not in check but has no legal move."""
        return not self.in_check(white) and not self._has_legal_move(white)

    def point_value(self, white: bool) -> int:
        """Total material value of the given side's pieces."""
        return sum(
            piece.point_value()
            for square in _squares()
            if (piece := self._board[square]) is not None and piece.is_white == white
        )

    def path_blocked(self, start: Position, end: Position) -> bool:
        """True if a piece stands strictly between start and end.

        Only straight and diagonal lines can be blocked; any other shape
        (such as a knight's jump) is never blocked.
        """
        col_diff = ord(end[0]) - ord(start[0])
        row_diff = ord(end[1]) - ord(start[1])
        if col_diff != 0 and row_diff != 0 and abs(col_diff) != abs(row_diff):
            return False
        step_col, step_row = _sign(col_diff), _sign(row_diff)
        distance = max(abs(col_diff), abs(row_diff))
        return any(
            self._board[
                (chr(ord(start[0]) + i * step_col), chr(ord(start[1]) + i * step_row))
            ]
            is not None
            for i in range(1, distance)
        )

    def promote_pawn(self, end: Position) -> None:
        """Turn a pawn on its far row into a queen of the same colour."""
        piece = self._board[end]
        if piece is None:
            return
        symbol = piece.to_ascii()
        if (symbol == "p" and end[1] == "1") or (symbol == "P" and end[1] == "8"):
            self._board.remove_piece(end)
            self._board.add_piece(end, "q" if symbol == "p" else "Q")

    def copy(self) -> Game:
        """An independent game in the same state."""
        return self._from_state(self._board.copy(), self._white_turn)

    def load(self, text: str) -> None:
        """Replace the game state with one written by str(game).

        Whitespace is ignored; 64 square characters ('-' for empty) are read
        row 8 to row 1, column A to H, then 'w' or 'b' for the side to move.
        Raises ChessError if the text is incomplete or invalid; the game is
        left unchanged in that case.
        """
        chars = iter(ch for ch in text if not ch.isspace())
        board = Board()
        for row in reversed(ROWS):
            for col in COLUMNS:
                designator = next(chars, None)
                if designator is None:
                    raise ChessError("Invalid or missing board configuration")
                if designator != "-":
                    board.add_piece((col, row), designator)
        turn = next(chars, None)
        if turn is None:
            raise ChessError("No turn information specified")
        if turn not in ("w", "b"):
            raise ChessError("Invalid turn designator")
        self._board = board
        self._white_turn = turn == "w"