from tetris_piece import SHAPES, SHAPES_BY_NAME, COLS, ROWS
from tetris_rng import ShapeGenerator


def draw(gen, n):
    return [(p.kind, col, p.positions()) for p, col in (gen.generate() for _ in range(n))]


def test_same_seed_same_sequence():
    assert draw(ShapeGenerator(7), 50) == draw(ShapeGenerator(7), 50)


def test_different_seed_differs():
    assert draw(ShapeGenerator(1), 50) != draw(ShapeGenerator(2), 50)


def test_columns_and_blocks_in_range():
    gen = ShapeGenerator(3)
    for _ in range(500):
        piece, col = gen.generate()
        assert 1 <= col <= COLS - 2
        assert all(0 <= b.x < COLS and 0 <= b.y < ROWS for b in piece.blocks)
        assert len(set(piece.positions())) == 4


def test_every_shape_shows_up():
    gen = ShapeGenerator(11)
    kinds = {gen.generate()[0].kind for _ in range(500)}
    assert kinds == {s.name for s in SHAPES}


def test_forced_template_and_column():
    piece, col = ShapeGenerator(0).generate(SHAPES_BY_NAME["O"], 4)
    assert col == 4
    assert piece.kind == "O" and not piece.rotatable
    assert piece.positions() == [(4, 0), (5, 0), (4, 1), (5, 1)]
