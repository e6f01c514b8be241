import io

import pytest

from termchess.cli import main, show_commands
from termchess.game import Game

STALEMATE = "\n".join(
    ["k-------", "--------", "-Q------", "--------",
     "--------", "--------", "--------", "-------K", "b"]
)
CHECK = "\n".join(
    ["k---r---", "--------", "--------", "--------",
     "--------", "--------", "--------", "----K---", "w"]
)
NO_WHITE_KING = "\n".join(
    ["k-------", "--------", "--------", "--------",
     "--------", "--------", "--------", "--------", "w"]
)


def _run(monkeypatch, text, argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(list(argv))


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_show_commands_lists_every_command():
    out = io.StringIO()
    show_commands(out)
    text = out.getvalue()
    assert text.startswith("List of commands:\n")
    for command in ("'?':", "'Q':", "'L' <filename>:", "'S' <filename>:", "'M' <move>:"):
        assert command in text


def test_quit_reports_initial_state(monkeypatch, capsys):
    assert _run(monkeypatch, "Q\n") == 0
    out = capsys.readouterr().out
    assert "white move" in out
    assert f"Material point value: {Game().point_value(True)}" in out
    assert "Next command: " in out


def test_question_mark_repeats_commands(monkeypatch, capsys):
    assert _run(monkeypatch, "?\nQ\n") == 0
    assert capsys.readouterr().out.count("List of commands:") == 2


def test_end_of_input_ends_game(monkeypatch, capsys):
    assert _run(monkeypatch, "") == 0
    assert capsys.readouterr().out.count("Next command: ") == 1


def test_move_then_final_state_saved(monkeypatch, tmp_path):
    target = tmp_path / "final.txt"
    assert _run(monkeypatch, "M E2E4\nq\n", [str(target)]) == 0
    expected = Game()
    expected.make_move("E2", "E4")
    assert target.read_text(encoding="utf-8") == str(expected)


def test_turn_switches_after_move(monkeypatch, capsys):
    assert _run(monkeypatch, "M E2E4 Q") == 0
    assert "black move" in capsys.readouterr().out


def test_save_command_writes_game(monkeypatch, tmp_path):
    target = tmp_path / "saved.txt"
    assert _run(monkeypatch, f"S {target}\nQ\n") == 0
    assert target.read_text(encoding="utf-8") == str(Game())


def test_load_round_trip(monkeypatch, tmp_path):
    game = Game()
    game.make_move("D2", "D4")
    game.make_move("E7", "E5")
    source = _write(tmp_path, "in.txt", str(game))
    target = tmp_path / "out.txt"
    assert _run(monkeypatch, f"L {source}\nQ\n", [str(target)]) == 0
    assert target.read_text(encoding="utf-8") == str(game)


def test_load_missing_file_fails(monkeypatch, tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert _run(monkeypatch, f"L {missing}\n") == -1
    assert "Cannot load the game!" in capsys.readouterr().err


def test_load_truncated_board_fails(monkeypatch, tmp_path, capsys):
    source = _write(tmp_path, "short.txt", "rnbqkbnr\n")
    assert _run(monkeypatch, f"L {source}\n") == -1
    assert "Invalid or missing board configuration" in capsys.readouterr().err


def test_load_without_both_kings_fails(monkeypatch, tmp_path, capsys):
    source = _write(tmp_path, "nokings.txt", NO_WHITE_KING)
    assert _run(monkeypatch, f"L {source}\n") == -1
    assert "Cannot load the game!" in capsys.readouterr().err


def test_illegal_move_reported(monkeypatch, capsys):
    assert _run(monkeypatch, "M E2E5\nQ\n") == 0
    captured = capsys.readouterr()
    assert "Could not make move: illegal move shape" in captured.err
    assert "black move" not in captured.out


def test_move_specifier_length_checked(monkeypatch, capsys):
    assert _run(monkeypatch, "M E2E\nQ\n") == 0
    assert "Move specifier must be four characters" in capsys.readouterr().err


@pytest.mark.parametrize("choice", ["X", "7"])
def test_unknown_action(monkeypatch, capsys, choice):
    assert _run(monkeypatch, f"{choice}\nQ\n") == 0
    assert f"Invalid action '{choice}'" in capsys.readouterr().err


def test_multi_character_action_rejected(monkeypatch, capsys):
    assert _run(monkeypatch, "QQ\nQ\n") == 0
    assert "Action specifier must be a single character" in capsys.readouterr().err


def test_checkmate_ends_game(monkeypatch, tmp_path, capsys):
    game = Game()
    for start, end in (("F2", "F3"), ("E7", "E5"), ("G2", "G4"), ("D8", "H4")):
        game.make_move(start, end)
    source = _write(tmp_path, "mate.txt", str(game))
    target = tmp_path / "after.txt"
    assert _run(monkeypatch, f"L {source}\n", [str(target)]) == 0
    assert "Checkmate! Game over." in capsys.readouterr().out
    assert target.read_text(encoding="utf-8") == str(game)


def test_stalemate_ends_game(monkeypatch, tmp_path, capsys):
    source = _write(tmp_path, "stale.txt", STALEMATE)
    assert _run(monkeypatch, f"L {source}\n") == 0
    assert "Stalemate! Game over." in capsys.readouterr().out


def test_check_is_announced(monkeypatch, tmp_path, capsys):
    source = _write(tmp_path, "check.txt", CHECK)
    assert _run(monkeypatch, f"L {source}\nQ\n") == 0
    out = capsys.readouterr().out
    assert "You are in check!" in out
    assert "Checkmate! Game over." not in out