# termchess

A two-player chess game played at the terminal. The board is drawn with
coloured squares, moves are checked against each piece's rules, and the game
reports check, checkmate and stalemate. A pawn that reaches the far rank becomes
a queen. Games can be saved to a file and loaded again.

## Installing

```
pip install .
```

## Playing

```
termchess [SAVE_FILE]
```

The program reads commands from standard input. Before each prompt it draws
the board, says whose move it is, and shows that side's material point value
(pawn 1, knight and bishop 3, rook 5, queen 9). The game ends on checkmate,
stalemate, the `Q` command or the end of input. If `SAVE_FILE` is given, the
final state of the game is then written to it.

At each prompt, enter one of these commands (letters may be upper or lower
case):

| Command        | Effect                                                      |
|----------------|-------------------------------------------------------------|
| `?`            | show the list of commands                                   |
| `Q`            | quit the game                                               |
| `L <filename>` | load a game from the file                                   |
| `S <filename>` | save the game to the file                                   |
| `M <move>`     | make a move, such as `M E2E4` (start column and row, then end column and row) |

Columns are `A` to `H` and rows are `1` to `8`; white starts on rows 1 and 2.
An illegal move is reported with the reason (for example `illegal move shape`,
`path is not clear` or `move exposes check`) and the same side moves again.

If a file cannot be loaded, or the board in it does not have exactly one king
per side, the program prints `Cannot load the game!` with the reason and exits
with status -1, without writing `SAVE_FILE`.

## Saved games

A saved game is eight lines of eight characters, from row 8 down to row 1,
followed by `w` or `b` for the side to move. An empty square is `-`; pieces
are `K Q R B N P` for white and `k q r b n p` for black (`M`/`m` is a
placeholder piece that cannot move). Whitespace is ignored when loading.

```
rnbqkbnr
pppppppp
--------
--------
----P---
--------
PPPP-PPP
RNBQKBNR
b
```

## Using it as a library

```python
from termchess.game import Game
from termchess.pieces import ChessError

game = Game()
game.make_move(("E", "2"), ("E", "4"))   # "E2", "E4" works as well
print(game)                 # board text followed by the side to move
print(game.point_value(True))

try:
    game.make_move(("E", "4"), ("E", "5"))
except ChessError as error:
    print(error)            # piece color and turn do not match
```

- `termchess.game.Game`: `make_move`, `in_check`, `in_mate`, `in_stalemate`,
  `point_value`, `path_blocked`, `promote_pawn`, `turn_white`,
  `is_valid_game`, `copy`, `display(file)`, and `load(text)`, which reads the
  saved-game format above and leaves the game unchanged if the text is invalid.
- `termchess.board.Board`: the squares, indexed as `board[("E", "2")]`, with
  `add_piece`, `move_piece`, `remove_piece`, `find_king`, `has_valid_kings`,
  `position_exists`, `copy`, `render()` (the coloured drawing as a string) and
  `display(file)`.
- `termchess.pieces`: the piece classes `King`, `Queen`, `Rook`, `Bishop`,
  `Knight`, `Pawn` and `Mystery`, `create_piece(designator)` and the
  `ChessError` exception raised for every rule or board error.
- `termchess.terminal`: the ANSI colour sequences used to draw the board.
- `termchess.cli`: `main(argv)` and `show_commands(out)`.

## What it does not do

Only the piece moves described above are known. There is no castling, no en
passant capture, and a promoted pawn always becomes a queen. Draws by
repetition, the fifty-move rule or insufficient material are not detected, and
there is no computer opponent.

## Running the tests

```
pip install .[test]
pytest
```