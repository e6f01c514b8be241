"""Two-player terminal chess: pieces, board, game rules and a command loop."""

__version__ = "0.1.0"