import pytest

from tetris_config import CONFIG
from tetris_round import RoundMachine, Phase


@pytest.fixture
def machine():
    return RoundMachine(dict(CONFIG, SEED=5))


def test_full_cycle(machine):
    assert machine.phase == Phase.MENU
    state = machine.confirm()
    assert machine.phase == Phase.PLAYING
    assert machine.state is state
    state.score = 30
    assert machine.finish() == 30
    assert machine.phase == Phase.GAME_OVER
    assert machine.state is None
    machine.advance()
    assert machine.phase == Phase.MENU
    assert machine.last_score == 30


def test_best_score_kept_across_rounds(machine):
    machine.confirm().score = 50
    machine.finish(); machine.advance()
    machine.confirm().score = 20
    machine.finish(); machine.advance()
    assert machine.last_score == 20
    assert machine.best_score == 50


def test_each_round_resets_score_and_speed(machine):
    s = machine.confirm()
    s.score, s.fall_interval_ms = 90, 120
    machine.finish(); machine.advance()
    s2 = machine.confirm()
    assert s2.score == 0
    assert s2.fall_interval_ms == CONFIG["FALL_START_MS"]


def test_fixed_seed_advances_per_round(machine):
    first = machine.confirm().generator.seed
    machine.finish(); machine.advance()
    second = machine.confirm().generator.seed
    assert (first, second) == (5, 6)


@pytest.mark.parametrize("call", ["finish", "advance"])
def test_illegal_from_menu(machine, call):
    with pytest.raises(RuntimeError):
        getattr(machine, call)()


def test_cannot_confirm_while_playing(machine):
    machine.confirm()
    with pytest.raises(RuntimeError):
        machine.confirm()
