
"""Stack of settled blocks: validity, merge, sweep, ghost"""
import logging
from typing import Dict, Iterable, Iterator, Tuple

from tetris_piece import Block, Piece, translated, COLS, ROWS

log = logging.getLogger(__name__)


class Stack:
    """Locked blocks keyed by cell. At most one block per (x, y)."""

    def __init__(self, blocks: Iterable[Block] = ()):
        self.cells: Dict[Tuple[int, int], Block] = {}
        self.version = 0
        for b in blocks:
            self.add(b)

    def add(self, block: Block):
        if not (0 <= block.x < COLS and 0 <= block.y < ROWS):
            raise ValueError(f"block {block.pos} outside the well")
        if block.pos in self.cells:
            raise ValueError(f"cell {block.pos} already occupied")
        self.cells[block.pos] = block
        self.version += 1

    def row_count(self, y: int) -> int:
        return sum(1 for (_, by) in self.cells if by == y)

    def __contains__(self, pos) -> bool:
        return pos in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Block]:
        return iter(list(self.cells.values()))


def is_valid(stack: Stack, blocks: Iterable[Block]) -> bool:
    for b in blocks:
        if b.x < 0 or b.x >= COLS or b.y >= ROWS:
            return False
        if b.pos in stack:
            return False
    return True

def collide(stack: Stack, blocks: Iterable[Block]) -> bool:
    return not is_valid(stack, blocks)

def merge(stack: Stack, piece: Piece):
    for b in piece.blocks:
        if b.y >= 0: stack.add(b)
        else: log.debug("dropping %s block above the well at %s", piece.kind, b.pos)

def sweep(stack: Stack) -> int:
    """One clear pass over rows 0..ROWS-1, top to bottom. Returns rows cleared."""
    cleared = 0
    for y in range(ROWS):
        if stack.row_count(y) < COLS:
            continue
        kept = {}
        for (bx, by), b in stack.cells.items():
            if by == y:
                continue
            if by < y:
                b = b.fall()
            kept[b.pos] = b
        stack.cells = kept
        stack.version += 1
        cleared += 1
    return cleared

def reached_top(stack: Stack) -> bool:
    return any(by <= 0 for (_, by) in stack.cells)

def ghost(stack: Stack, piece: Piece) -> Piece:
    """Where the piece would come to rest if it only fell."""
    while True:
        t = translated(piece, 0, 1)
        if collide(stack, t.blocks): return piece
        piece = t
