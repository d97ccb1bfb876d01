import pytest

from tetris_board import Stack
from tetris_piece import (
    Block, Piece, SHAPES, SHAPES_BY_NAME, template_at, translated, rotated,
    try_move, try_rotate, blocked_below, COLS,
)


def test_block_fall_and_rect():
    b = Block(2, 3, (1, 2, 3))
    assert b.fall() == Block(2, 4, (1, 2, 3))
    assert b.rect(30) == (60, 90, 30, 30)


def test_block_identity_is_positional_for_collision():
    assert Block(1, 1, (255, 0, 0)).pos == Block(1, 1, (0, 0, 255)).pos


def test_catalog_has_seven_templates_one_fixed():
    assert len(SHAPES) == 7
    fixed = [s.name for s in SHAPES if not s.rotatable]
    assert fixed == ["O"]
    for s in SHAPES:
        assert len(s.offsets) == 4
        assert len(set(s.offsets)) == 4
        assert all(-1 <= dx <= 1 for dx, _ in s.offsets)


@pytest.mark.parametrize("index", [-1, 7, 100])
def test_template_index_outside_catalog_is_fatal(index):
    with pytest.raises(AssertionError):
        template_at(index)


def test_build_places_offsets_at_column():
    p = Piece.build(SHAPES_BY_NAME["T"], 4)
    assert p.positions() == [(4, 0), (3, 0), (5, 0), (4, 1)]
    assert p.kind == "T" and p.rotatable


def test_move_into_left_wall_rejected():
    stack = Stack()
    p = Piece.build(SHAPES_BY_NAME["O"], 0)
    assert try_move(stack, p, -1, 0) is None
    assert p.positions() == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_move_into_right_wall_rejected():
    p = Piece.build(SHAPES_BY_NAME["O"], 8)
    assert try_move(Stack(), p, 1, 0) is None


def test_move_into_stack_rejected():
    stack = Stack([Block(3, 0)])
    p = Piece.build(SHAPES_BY_NAME["O"], 4)
    assert try_move(stack, p, -1, 0) is None
    moved = try_move(stack, p, 1, 0)
    assert moved.positions() == [(5, 0), (6, 0), (5, 1), (6, 1)]


def test_rotate_keeps_pivot():
    p = translated(Piece.build(SHAPES_BY_NAME["T"], 4), 0, 5)
    r = try_rotate(Stack(), p)
    assert r is not None
    assert r.pivot.pos == p.pivot.pos == (4, 5)
    assert sorted(r.positions()) == sorted([(4, 5), (4, 4), (4, 6), (3, 5)])


def test_four_rotations_return_to_start():
    p = translated(Piece.build(SHAPES_BY_NAME["L"], 4), 0, 6)
    q = p
    for _ in range(4):
        q = try_rotate(Stack(), q)
    assert q == p


def test_non_rotatable_never_changes():
    p = translated(Piece.build(SHAPES_BY_NAME["O"], 4), 0, 5)
    for _ in range(10):
        assert try_rotate(Stack(), p) is None
    assert p.positions() == [(4, 5), (5, 5), (4, 6), (5, 6)]


def test_rotation_into_wall_rejected():
    p = Piece.build(SHAPES_BY_NAME["I"], 0)
    assert try_rotate(Stack(), p) is None


def test_rotation_may_poke_above_top():
    p = Piece("I", (Block(4, 0), Block(5, 0), Block(3, 0), Block(2, 0)), True)
    r = try_rotate(Stack(), p)
    assert sorted(r.positions()) == [(4, -2), (4, -1), (4, 0), (4, 1)]
    assert all(0 <= b.x < COLS for b in r.blocks)


def test_rotated_is_unvalidated_candidate():
    p = Piece.build(SHAPES_BY_NAME["I"], 0)
    assert any(b.x < 0 for b in rotated(p).blocks)


def test_blocked_below_floor_and_stack():
    o = SHAPES_BY_NAME["O"]
    assert blocked_below(Stack(), translated(Piece.build(o, 4), 0, 18))
    assert not blocked_below(Stack(), translated(Piece.build(o, 4), 0, 17))
    assert blocked_below(Stack([Block(5, 2)]), Piece.build(o, 4))
