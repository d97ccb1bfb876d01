
"""Shape catalog generator: uniform shape + spawn column"""
import logging
import random
from typing import Optional, Tuple

from tetris_piece import Piece, ShapeTemplate, SHAPES, template_at, COLS

log = logging.getLogger(__name__)


class ShapeGenerator:
    """Seedable source of new pieces. Same seed, same shape/column sequence."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def next_index(self) -> int:
        return self.rng.randrange(len(SHAPES))

    def next_column(self) -> int:
        # x0-1 and x0+1 must stay inside the well
        return self.rng.randint(1, COLS - 2)

    def generate(self, template: Optional[ShapeTemplate] = None,
                 column: Optional[int] = None) -> Tuple[Piece, int]:
        if template is None:
            template = template_at(self.next_index())
        if column is None:
            column = self.next_column()
        piece = Piece.build(template, column)
        log.debug("generated %s at column %d", template.name, column)
        return piece, column
