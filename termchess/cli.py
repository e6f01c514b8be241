"""Interactive command loop for playing chess in a terminal."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TextIO

from .game import Game
from .pieces import ChessError

_COMMANDS = """\
List of commands:
\t'?':            show this list of options
\t'Q':            quit the game
\t'L' <filename>: load a game from the specified file
\t                <filename> is the name of the file to read from
\t'S' <filename>: save a game to the specified file
\t                <filename> is the name of the file to write to
\t'M' <move>:     try to make the specified move
\t                <move> is a four character string giving the
\t                column (['A'-'H']), row ('1'-'8') of the start position
\t                followed by the column and row of the end position
"""


def show_commands(out: TextIO | None = None) -> None:
    """Write the list of available commands to out (standard output by default)."""
    (out if out is not None else sys.stdout).write(_COMMANDS)


def _tokens(stream: TextIO) -> Iterator[str]:
    """Whitespace-separated words read lazily from stream."""
    for line in stream:
        yield from line.split()


def _save(game: Game, path: str) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(str(game))


def _load(game: Game, path: str) -> None:
    """Load path into game; raises ChessError or OSError on failure."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    candidate = game.copy()
    candidate.load(text)
    if not candidate.is_valid_game():
        raise ChessError("board must hold exactly one king per side")
    game.load(text)


def _report_state(game: Game, out: TextIO) -> bool:
    """Print the board and status; return True if the game has ended."""
    game.display(out)
    white = game.turn_white()
    out.write("white move\n" if white else "black move\n")
    out.write(f"Material point value: {game.point_value(white)}\n")
    if game.in_mate(white):
        out.write("Checkmate! Game over.\n")
        return True
    if game.in_check(white):
        out.write("You are in check!\n")
    elif game.in_stalemate(white):
        out.write("Stalemate! Game over.\n")
        return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive game; an optional first argument names a file
    to which the final game state is saved."""
    args = list(sys.argv[1:] if argv is None else argv)
    out, err = sys.stdout, sys.stderr
    words = _tokens(sys.stdin)
    game = Game()

    show_commands(out)

    while not _report_state(game, out):
        out.write("Next command: ")
        out.flush()
        choice = next(words, None)
        if choice is None:
            break

        if len(choice) != 1:
            err.write(
                f"Action specifier must be a single character, but "
                f"length({choice}) = {len(choice)}\n"
            )
            continue

        action = choice.upper()
        if action == "?":
            show_commands(out)
        elif action == "Q":
            break
        elif action == "L":
            path = next(words, "")
            try:
                _load(game, path)
            except (ChessError, OSError) as exc:
                err.write(f"Cannot load the game!{exc}\n")
                return -1
        elif action == "S":
            path = next(words, "")
            try:
                _save(game, path)
            except OSError as exc:
                err.write(f"Cannot save the game!{exc}\n")
        elif action == "M":
            move = next(words, "")
            if len(move) != 4:
                err.write(
                    f"Move specifier must be four characters, but "
                    f"length({move} ) = {len(move)}\n"
                )
                continue
            try:
                game.make_move(move[:2], move[2:])
            except ChessError as exc:
                err.write(f"Could not make move: {exc}\n")
        else:
            err.write(f"Invalid action '{choice}'\n")

    if args:
        _save(game, args[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())