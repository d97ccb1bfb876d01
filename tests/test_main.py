from tetris_audio import start_music
from tetris_config import CONFIG
from tetris_layout import compute_dims, COLS, ROWS
import main


def test_args_update_config():
    cfg = dict(CONFIG)
    main.apply_args(main.parse_args(["--seed", "3", "--mute", "--cell-size", "24"]), cfg)
    assert cfg["SEED"] == 3
    assert cfg["MUTE"] is True
    assert cfg["CELL_SIZE"] == 24


def test_default_args_keep_config():
    cfg = dict(CONFIG)
    main.apply_args(main.parse_args([]), cfg)
    assert cfg == CONFIG


def test_layout_from_cell_size():
    d = compute_dims()
    assert d.cell == CONFIG["CELL_SIZE"]
    assert (d.board_w, d.board_h) == (COLS * d.cell, ROWS * d.cell)
    assert d.to_screen((0, 0, 5, 5)) == (d.board_x, d.board_y, 5, 5)


def test_missing_music_is_silent(tmp_path):
    assert start_music(str(tmp_path / "nope.ogg"), 0.5) is False


def test_layout_follows_configured_cell_size():
    d = compute_dims(dict(CONFIG, CELL_SIZE=24))
    assert (d.board_w, d.board_h) == (240, 480)
    assert d.panel_x == d.board_x + 240 + 16
    assert d.total_w == d.panel_x + d.panel_w + 16
