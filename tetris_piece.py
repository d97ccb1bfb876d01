
"""Block and piece model, shape catalog, speculative move/rotate"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from tetris_layout import COLS, ROWS

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Block:
    x: int
    y: int
    color: Color = (0, 0, 255)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def fall(self) -> "Block":
        return replace(self, y=self.y + 1)

    def moved(self, dx: int, dy: int) -> "Block":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rect(self, cell: int) -> Tuple[int, int, int, int]:
        return (self.x * cell, self.y * cell, cell, cell)


@dataclass(frozen=True)
class ShapeTemplate:
    name: str
    offsets: Tuple[Tuple[int, int], ...]   # offsets[0] is the pivot
    rotatable: bool
    color: Color


# Pivot first; every dx stays within [-1, 1] so spawn columns 1..COLS-2 fit.
SHAPES: Tuple[ShapeTemplate, ...] = (
    ShapeTemplate("I", ((0, 1), (0, 0), (0, 2), (0, 3)), True, (102, 224, 255)),
    ShapeTemplate("J", ((0, 1), (0, 0), (0, 2), (-1, 2)), True, (106, 119, 255)),
    ShapeTemplate("L", ((0, 1), (0, 0), (0, 2), (1, 2)), True, (255, 158, 94)),
    ShapeTemplate("O", ((0, 0), (1, 0), (0, 1), (1, 1)), False, (255, 224, 102)),
    ShapeTemplate("S", ((0, 0), (1, 0), (-1, 1), (0, 1)), True, (94, 224, 142)),
    ShapeTemplate("T", ((0, 0), (-1, 0), (1, 0), (0, 1)), True, (200, 119, 255)),
    ShapeTemplate("Z", ((0, 0), (-1, 0), (0, 1), (1, 1)), True, (255, 102, 119)),
)
SHAPES_BY_NAME = {s.name: s for s in SHAPES}


def template_at(index: int) -> ShapeTemplate:
    if not 0 <= index < len(SHAPES):
        raise AssertionError(f"shape index {index} outside catalog of {len(SHAPES)}")
    return SHAPES[index]


@dataclass(frozen=True)
class Piece:
    kind: str
    blocks: Tuple[Block, ...]
    rotatable: bool = True

    @property
    def pivot(self) -> Block:
        return self.blocks[0]

    def positions(self):
        return [b.pos for b in self.blocks]

    @staticmethod
    def build(template: ShapeTemplate, column: int) -> "Piece":
        blocks = tuple(Block(column + dx, dy, template.color) for dx, dy in template.offsets)
        return Piece(template.name, blocks, template.rotatable)


def translated(piece: Piece, dx: int, dy: int) -> Piece:
    return replace(piece, blocks=tuple(b.moved(dx, dy) for b in piece.blocks))


def rotated(piece: Piece) -> Piece:
    """Quarter turn about blocks[0]; (x, y) -> (cx - (y - cy), cy + (x - cx))."""
    cx, cy = piece.pivot.pos
    turned = [piece.pivot]
    for b in piece.blocks[1:]:
        turned.append(replace(b, x=cx - (b.y - cy), y=cy + (b.x - cx)))
    return replace(piece, blocks=tuple(turned))


# speculative-then-commit: None means the piece stays as it was

def try_move(stack, piece: Piece, dx: int, dy: int) -> Optional[Piece]:
    from tetris_board import is_valid
    cand = translated(piece, dx, dy)
    return cand if is_valid(stack, cand.blocks) else None


def try_rotate(stack, piece: Piece) -> Optional[Piece]:
    if not piece.rotatable or len(piece.blocks) < 2:
        return None
    from tetris_board import is_valid
    cand = rotated(piece)
    return cand if is_valid(stack, cand.blocks) else None


def blocked_below(stack, piece: Piece) -> bool:
    """True when one more gravity step would hit the floor or the stack."""
    return try_move(stack, piece, 0, 1) is None

